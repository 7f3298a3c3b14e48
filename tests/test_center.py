import math

import pytest

from vector_bloom.center import (
    GOLDEN_ANGLE,
    RADIATING_NODE_COUNT,
    create_floret,
    generate_center_arrangement,
)
from vector_bloom.config import CenterGeometry
from vector_bloom.point import InvalidGeometryError


def _example_geometry(**overrides):
    values = dict(density=5.08, range=[0, 0.85], size=[1, 5], age=[0.4, 0.8])
    values.update(overrides)
    return CenterGeometry(**values)


def test_golden_angle_value():
    assert math.isclose(GOLDEN_ANGLE, math.pi * (3 - math.sqrt(5)))


def test_spiral_starts_at_origin_and_grows():
    arrangement = generate_center_arrangement(_example_geometry(), 180)
    florets = arrangement.florets

    assert florets[0].index == 0
    assert florets[0].angle == 0
    assert florets[0].radius == 0
    for floret in florets:
        assert math.isclose(floret.radius, 5.08 * math.sqrt(floret.index))
        assert math.isclose(floret.angle, floret.index * GOLDEN_ANGLE)
    radii = [floret.radius for floret in florets]
    assert radii == sorted(radii)


def test_spiral_stops_after_first_floret_beyond_range():
    arrangement = generate_center_arrangement(_example_geometry(), 180)
    max_radius = 0.85 * 180

    assert arrangement.florets[-1].radius >= max_radius
    assert arrangement.florets[-2].radius < max_radius


def test_inner_edge_sets_start_index():
    geometry = _example_geometry(density=5, range=[0.5, 1], age=[0.2, 0.3])
    arrangement = generate_center_arrangement(geometry, 100)

    first = arrangement.florets[0]
    assert math.isclose(first.index, 100)
    assert math.isclose(first.radius, 50)
    assert math.isclose(first.age, 0.2)
    assert math.isclose(first.size, 1)


def test_example_scenario_ends_with_tips():
    arrangement = generate_center_arrangement(_example_geometry(), 180)

    assert arrangement.bases
    assert len(arrangement.bases) == len(arrangement.florets)
    assert arrangement.florets[0].tip is None
    assert arrangement.florets[-1].tip is not None
    assert arrangement.tips[-1] is arrangement.florets[-1].tip
    assert len(arrangement.tips) == sum(1 for f in arrangement.florets if f.tip is not None)


def test_age_interpolates_across_the_band():
    arrangement = generate_center_arrangement(_example_geometry(), 180)
    ages = [floret.age for floret in arrangement.florets]

    assert math.isclose(ages[0], 0.4)
    assert ages == sorted(ages)
    assert ages[-1] >= 0.8


def test_sleeping_floret_is_quadrilateral():
    floret = create_floret(40, 0.3, 3, 1.0)

    assert len(floret.base.nodes) == 4
    assert floret.tip is None
    first = floret.base.nodes[0]
    assert first.control_point1 == first.position


def test_sleeping_floret_points_toward_center():
    floret = create_floret(40, 0.3, 2, 0.0)
    x, y = floret.base.nodes[0].position.as_tuple()

    assert math.isclose(x, 0, abs_tol=1e-9)
    assert math.isclose(y, 40 - min(2 * 6, 0.5 / 0.3 * 2))


def test_very_young_floret_has_sharp_corners():
    floret = create_floret(40, 0.05, 3, 0.5)
    for node in floret.base.nodes:
        assert node.control_point1 == node.position
        assert node.control_point2 == node.position


def test_floret_length_is_clamped_to_radius():
    floret = create_floret(1.5, 0.2, 3, 0.0)
    x, y = floret.base.nodes[0].position.as_tuple()
    assert math.isclose(x, 0, abs_tol=1e-9)
    assert math.isclose(y, 0, abs_tol=1e-9)


def test_zero_age_floret_uses_full_length():
    floret = create_floret(40, 0.0, 2, 0.0)
    _, y = floret.base.nodes[0].position.as_tuple()
    assert math.isclose(y, 40 - 12)


def test_radiating_threshold_is_inclusive():
    floret = create_floret(30, 0.5, 3, 0.2)

    assert len(floret.base.nodes) == RADIATING_NODE_COUNT
    assert floret.tip is None


def test_radiating_floret_alternates_radii():
    floret = create_floret(30, 0.6, 4, 0.0)
    anchor = (0.0, 30.0)
    distances = [
        math.hypot(x - anchor[0], y - anchor[1]) for x, y in floret.base.positions()
    ]

    for i, distance in enumerate(distances):
        expected = 4 if i % 2 == 0 else 4 - 4 * 0.1
        assert math.isclose(distance, expected)


@pytest.mark.parametrize('age, has_tip', [(0.7, False), (0.70001, True), (0.9, True)])
def test_tip_threshold_is_exclusive(age, has_tip):
    floret = create_floret(30, age, 3, 0.4)

    assert (floret.tip is not None) is has_tip
    if has_tip:
        assert len(floret.tip.nodes) == 7


def test_tip_at_origin_uses_floret_angle():
    floret = create_floret(0, 0.9, 4, 0.0)

    assert floret.tip is not None
    cap_x, cap_y = floret.tip.nodes[4].position.as_tuple()
    assert math.isclose(cap_x, 0, abs_tol=1e-9)
    assert cap_y > 0


@pytest.mark.parametrize(
    'overrides',
    [
        {'range': [0.5, 0.5]},
        {'density': 0},
        {'density': None},
        {'age': None},
        {'size': [1]},
    ],
)
def test_degenerate_geometry_raises(overrides):
    with pytest.raises(InvalidGeometryError):
        generate_center_arrangement(_example_geometry(**overrides), 100)


def test_generation_is_deterministic():
    first = generate_center_arrangement(_example_geometry(), 120)
    second = generate_center_arrangement(_example_geometry(), 120)

    assert [b.segments for b in first.bases] == [b.segments for b in second.bases]
    assert [t.segments for t in first.tips] == [t.segments for t in second.tips]

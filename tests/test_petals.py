import math

import numpy as np
import pytest

from vector_bloom.config import PetalGeometry
from vector_bloom.petals import NOTCH_DEPTH, create_petal, generate_petals


def _geometry(**overrides):
    values = dict(width=18, count=18, length=242)
    values.update(overrides)
    return PetalGeometry(**values)


def _polar(coord):
    x, y = coord
    angle = math.atan2(x, y) % (2 * math.pi)
    return angle, math.hypot(x, y)


def test_generates_count_petals_of_eight_nodes():
    petals = generate_petals(_geometry(), 180)

    assert len(petals) == 18
    for petal in petals:
        assert len(petal.nodes) == 8
        assert len(petal.segments) == 8
        assert petal.start == petal.nodes[0].position.as_tuple()


def test_petals_are_evenly_spaced():
    petals = generate_petals(_geometry(count=6, angle_offset=15), 100)
    step = 2 * math.pi / 6

    for k, petal in enumerate(petals):
        angle, distance = _polar(petal.nodes[1].position.as_tuple())
        expected = (math.radians(15) + k * step) % (2 * math.pi)
        assert math.isclose(angle, expected, abs_tol=1e-9)
        assert math.isclose(distance, 100 - NOTCH_DEPTH)


def test_node_layout_of_single_petal():
    geometry = _geometry(width=20, inner_width=10, outer_width=16, length=50, balance=0.25)
    petal = create_petal(geometry, 100, 0.0)
    polar = [_polar(node.position.as_tuple()) for node in petal.nodes]

    inner, middle, outer = math.radians(5), math.radians(10), math.radians(8)
    expected = [
        (-inner, 100),
        (0.0, 90),
        (inner, 100),
        (middle, 112.5),
        (outer, 150),
        (0.0, 150),
        (-outer, 150),
        (-middle, 112.5),
    ]
    for (angle, distance), (exp_angle, exp_distance) in zip(polar, expected):
        assert math.isclose(angle, exp_angle % (2 * math.pi), abs_tol=1e-9)
        assert math.isclose(distance, exp_distance)


def test_extend_outside_pushes_tip_out():
    geometry = _geometry(width=20, length=50, extend_outside=True)
    petal = create_petal(geometry, 100, 0.0)

    _, tip_distance = _polar(petal.nodes[5].position.as_tuple())
    assert math.isclose(tip_distance, 150 + 150 * math.radians(10))


def test_radial_offset_scales_center_radius():
    petals = generate_petals(_geometry(count=1, radial_offset=0.5), 100)
    _, distance = _polar(petals[0].nodes[0].position.as_tuple())
    assert math.isclose(distance, 150)


def test_offsets_translate_petals():
    base = generate_petals(_geometry(count=3), 50)
    moved = generate_petals(_geometry(count=3, offset_x=5, offset_y=-7), 50)

    for a, b in zip(base, moved):
        for (ax, ay), (bx, by) in zip(a.positions(), b.positions()):
            assert math.isclose(bx - ax, 5, abs_tol=1e-9)
            assert math.isclose(by - ay, -7, abs_tol=1e-9)


def test_smoothing_moves_handles_off_the_anchors():
    sharp = generate_petals(_geometry(count=2), 80)[0]
    smooth = generate_petals(_geometry(count=2, smoothing=0.4), 80)[0]

    assert all(node.control_point2 == node.position for node in sharp.nodes)
    assert all(node.control_point2 != node.position for node in smooth.nodes)
    assert smooth.segments[0].control1 == smooth.nodes[0].control_point2.as_tuple()


@pytest.mark.parametrize('missing', ['width', 'count', 'length'])
def test_missing_required_field_yields_nothing(missing, caplog):
    geometry = _geometry(**{missing: None})

    with caplog.at_level('WARNING'):
        assert generate_petals(geometry, 100) == []

    assert 'Skipping petal group' in caplog.text


def test_generation_without_jitter_is_deterministic():
    first = generate_petals(_geometry(smoothing=0.3), 120)
    second = generate_petals(_geometry(smoothing=0.3), 120)

    assert [p.segments for p in first] == [p.segments for p in second]


def test_seeded_jitter_is_reproducible():
    geometry = _geometry(jitter=6)
    first = generate_petals(geometry, 120, rng=np.random.default_rng(42))
    second = generate_petals(geometry, 120, rng=np.random.default_rng(42))
    plain = generate_petals(_geometry(), 120)

    assert [p.positions() for p in first] == [p.positions() for p in second]
    assert [p.positions() for p in first] != [p.positions() for p in plain]


def test_fractional_count_rounds_up_and_warns(caplog):
    with caplog.at_level('WARNING'):
        petals = generate_petals(_geometry(count=2.5), 100)

    assert len(petals) == 3
    assert 'Fractional petal count 2.5' in caplog.text
    angle, _ = _polar(petals[2].nodes[1].position.as_tuple())
    assert math.isclose(angle, 2 * (2 * math.pi / 2.5))

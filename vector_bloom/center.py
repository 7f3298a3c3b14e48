"""Phyllotactic flower center generation (Vogel's spiral model)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .config import CenterGeometry
from .logging_utils import apply_debug_logging
from .path import Node, Path
from .point import InvalidGeometryError, Point
from .smoothing import radial_node

logger = logging.getLogger(__name__)

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2
GOLDEN_ANGLE = 2 * (math.pi - (GOLDEN_RATIO * math.pi / (1 + GOLDEN_RATIO)))

# Age thresholds selecting the floret shape family.
SLEEPING_SMOOTHING_AGE = 0.1
RADIATING_AGE = 0.5
TIP_AGE = 0.7

RADIATING_NODE_COUNT = 10
TIP_CAP_SMOOTHING = -0.66


@dataclass
class Floret:
    """One spiral element: a base shape and, for old florets, a tip."""

    index: float
    angle: float
    radius: float
    age: float
    size: float
    base: Path
    tip: Optional[Path] = None


@dataclass
class CenterArrangement:
    bases: List[Path] = field(default_factory=list)
    tips: List[Path] = field(default_factory=list)
    florets: List[Floret] = field(default_factory=list)


def _require_pair(values: Optional[Sequence[float]], name: str) -> Tuple[float, float]:
    if values is None or len(values) != 2:
        raise InvalidGeometryError(f"center geometry {name} must be a pair of numbers, got {values!r}")
    return float(values[0]), float(values[1])


def generate_center_arrangement(geometry: CenterGeometry, center_radius: float) -> CenterArrangement:
    """Place florets along the golden-angle spiral within ``geometry.range``.

    The n-th floret sits at angle ``n * GOLDEN_ANGLE`` and radius
    ``density * sqrt(n)``. Generation starts at the index whose radius equals
    the inner edge of the range and stops after the first floret at or
    beyond the outer edge. Age and size are interpolated linearly along the
    occupied band.
    """

    age_start, age_end = _require_pair(geometry.age, "age")
    size_start, size_end = _require_pair(geometry.size, "size")
    range_start, range_end = _require_pair(geometry.range if geometry.range is not None else (0, 1), "range")
    density = geometry.density
    if density is None or density <= 0:
        raise InvalidGeometryError(f"center density must be positive, got {density!r}")

    min_radius = (range_start or 0) * center_radius
    max_radius = (range_end or 1) * center_radius
    radius_range = max_radius - min_radius
    if radius_range == 0:
        raise InvalidGeometryError(
            f"center range {geometry.range!r} has zero width at radius {center_radius!r}"
        )
    age_range = age_end - age_start
    size_range = size_end - size_start

    arrangement = CenterArrangement()
    n = 0.0
    if min_radius != 0:
        n = (min_radius / density) ** 2

    while True:
        angle = n * GOLDEN_ANGLE
        current_radius = density * math.sqrt(n)
        ratio = (current_radius - min_radius) / radius_range
        age = (ratio * age_range) + age_start
        size = (ratio * size_range) + size_start
        floret = create_floret(current_radius, age, size, angle, index=n)
        arrangement.florets.append(floret)
        arrangement.bases.append(floret.base)
        if floret.tip is not None:
            arrangement.tips.append(floret.tip)
        n += 1
        if current_radius >= max_radius:
            break

    logger.debug(
        "Generated %d floret(s), %d tip(s) between radius %.3f and %.3f",
        len(arrangement.florets),
        len(arrangement.tips),
        min_radius,
        max_radius,
    )
    return arrangement


def create_floret(radius: float, age: float, size: float, angle: float, index: float = 0.0) -> Floret:
    """Build the shapes of one floret anchored at ``radius`` along ``angle``.

    Young florets (``age < RADIATING_AGE``) are quadrilaterals pointing at
    the center. Older ones are ten-node rosettes that flatten as age grows,
    and beyond ``TIP_AGE`` grow a stem with a rounded cap.
    """

    anchor = Point(radius * math.sin(angle), radius * math.cos(angle))
    if age < RADIATING_AGE:
        base = Path(_sleeping_nodes(anchor, radius, age, size, angle))
        tip = None
    else:
        base = Path(_radiating_nodes(anchor, age, size, angle))
        tip = Path(_tip_nodes(anchor, age, size, angle)) if age > TIP_AGE else None
    return Floret(index=index, angle=angle, radius=radius, age=age, size=size, base=base, tip=tip)


def _sleeping_nodes(anchor: Point, radius: float, age: float, size: float, angle: float) -> List[Node]:
    offset = angle + math.pi
    smoothing = 0 if age < SLEEPING_SMOOTHING_AGE else size * age
    if age > 0:
        floret_length = min(size * 6, (0.5 / age) * size)
    else:
        floret_length = size * 6
    if floret_length > radius:
        floret_length = radius

    nodes = [radial_node(offset, floret_length, anchor, 0)]
    for _ in range(3):
        offset += math.pi / 2
        nodes.append(radial_node(offset, size, anchor, smoothing))
    return nodes


def _radiating_nodes(anchor: Point, age: float, size: float, angle: float) -> List[Node]:
    step = math.pi * 2 / RADIATING_NODE_COUNT
    max_r = size
    min_r = size - size * (age - 0.5)
    smoothing = math.pi * min_r / 15

    nodes: List[Node] = []
    current_angle = angle
    for i in range(RADIATING_NODE_COUNT):
        nodes.append(radial_node(current_angle, max_r if i % 2 == 0 else min_r, anchor, smoothing))
        current_angle += step
    return nodes


def _tip_nodes(anchor: Point, age: float, size: float, angle: float) -> List[Node]:
    #         5
    #        / \
    #      6 \  | 4
    #      7 / / 3
    #       / /
    #      1  2
    half_stem = size * age / 4
    circle_r = size / 2

    if anchor.magnitude() > 0:
        outward = anchor.unit()
    else:
        outward = Point(math.sin(angle), math.cos(angle))
    stem_top = Point().set(outward).scale(circle_r * (age - TIP_AGE) * 8).add(anchor)
    cap_center = Point().set(outward).scale(circle_r).add(stem_top)

    nodes = [
        radial_node(angle - math.pi / 2, half_stem, anchor),
        radial_node(angle + math.pi / 2, half_stem, anchor),
        radial_node(angle + math.pi / 2, half_stem, stem_top),
    ]
    offset = angle + math.pi / 2
    for _ in range(3):
        nodes.append(radial_node(offset, circle_r, cap_center, TIP_CAP_SMOOTHING * circle_r))
        offset -= math.pi / 2
    nodes.append(radial_node(angle - math.pi / 2, half_stem, stem_top))
    return nodes


apply_debug_logging(globals(), logger=logger, skip={"_sleeping_nodes", "_radiating_nodes", "_tip_nodes"})

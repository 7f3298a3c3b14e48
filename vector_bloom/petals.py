"""Petal ring generation."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from .config import PetalGeometry
from .logging_utils import apply_debug_logging
from .path import Path
from .point import Point
from .smoothing import apply_smoothing, radial_node

logger = logging.getLogger(__name__)

NOTCH_DEPTH = 10.0


def generate_petals(
    geometry: PetalGeometry,
    center_radius: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Path]:
    """Build ``geometry.count`` petals evenly spaced around the center.

    Angles start at 12 o'clock plus ``angle_offset`` degrees and advance
    clockwise by ``2π / count``. A geometry missing width, count or length
    yields no petals. A fractional count is rounded up, keeping the
    fractional spacing, so the last petal overlaps the first.
    """

    if not geometry.has_required():
        logger.warning(
            "Skipping petal group: width=%r count=%r length=%r",
            geometry.width,
            geometry.count,
            geometry.length,
        )
        return []

    offset = math.radians(geometry.angle_offset or 0)
    step = math.pi * 2 / geometry.count
    if geometry.count != math.ceil(geometry.count):
        logger.warning(
            "Fractional petal count %r: drawing %d petal(s) spaced by 2π/%r",
            geometry.count,
            math.ceil(geometry.count),
            geometry.count,
        )
    center_radius += (geometry.radial_offset or 0) * center_radius
    if geometry.jitter and rng is None:
        rng = np.random.default_rng()

    petals: List[Path] = []
    for _ in range(math.ceil(geometry.count)):
        petals.append(create_petal(geometry, center_radius, offset, rng=rng))
        offset += step
    logger.debug("Generated %d petal(s) at radius %.3f", len(petals), center_radius)
    return petals


def create_petal(
    geometry: PetalGeometry,
    center_radius: float,
    offset: float,
    rng: Optional[np.random.Generator] = None,
) -> Path:
    """One 8-node petal anchored at angle ``offset``.

    Node order: inner left, notch, inner right, balance right, outer right,
    tip, outer left, balance left.
    """

    width = geometry.width
    inner_half = math.radians((width if geometry.inner_width is None else geometry.inner_width) / 2)
    outer_half = math.radians((width if geometry.outer_width is None else geometry.outer_width) / 2)
    width_half = math.radians(width / 2)
    balance = 0.5 if geometry.balance is None else geometry.balance
    length = geometry.length
    outer_radius = center_radius + length
    extension = outer_radius * outer_half if geometry.extend_outside else 0.0

    origin = Point(geometry.offset_x or 0, geometry.offset_y or 0)
    jitter = geometry.jitter

    def node(angle: float, distance: float):
        return radial_node(angle, distance, origin, None, jitter, rng)

    petal = Path(
        [
            node(offset - inner_half, center_radius),
            node(offset, center_radius - NOTCH_DEPTH),
            node(offset + inner_half, center_radius),
            node(offset + width_half, center_radius + length * balance),
            node(offset + outer_half, outer_radius),
            node(offset, outer_radius + extension),
            node(offset - outer_half, outer_radius),
            node(offset - width_half, center_radius + length * balance),
        ]
    )

    if geometry.smoothing:
        nodes = petal.nodes
        for index, current in enumerate(nodes):
            apply_smoothing(current, nodes[index - 1], geometry.smoothing)
        petal.compile()
    return petal


apply_debug_logging(globals(), logger=logger)

"""Whole-flower generation pass."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import numpy as np

from .center import CenterArrangement, generate_center_arrangement
from .config import BloomConfig, fill_defaults
from .logging_utils import apply_debug_logging
from .path import Path
from .petals import generate_petals

logger = logging.getLogger(__name__)

DEFAULT_DRAWING_SIZE = 100.0


@dataclass
class Background:
    """Filled disc drawn behind a center arrangement."""

    radius: float
    color: str


@dataclass
class BloomGeometry:
    """Layered output of one generation pass.

    ``petals`` and ``center`` are in drawing order: the last configured
    group comes first, so the first configured group is drawn on top.
    """

    config: BloomConfig
    petals: List[List[Path]] = field(default_factory=list)
    center: List[CenterArrangement] = field(default_factory=list)
    backgrounds: List[Background] = field(default_factory=list)

    @property
    def path_count(self) -> int:
        total = sum(len(group) for group in self.petals)
        for arrangement in self.center:
            total += len(arrangement.bases) + len(arrangement.tips)
        return total


def generate_bloom(config: BloomConfig, rng: Optional[np.random.Generator] = None) -> BloomGeometry:
    """Generate petals, center florets and backgrounds for ``config``.

    ``config`` is not modified; defaults are filled on a copy, which is kept
    on the result for the renderer.
    """

    config = fill_defaults(copy.deepcopy(config))
    radius = config.center.radius
    geometry = BloomGeometry(config=config)

    for petal in config.petals:
        geometry.petals.insert(0, generate_petals(petal.geometry, radius, rng=rng))

    for arrangement in config.center.arrangement:
        geometry.center.insert(0, generate_center_arrangement(arrangement.geometry, radius))
        if arrangement.fill.background:
            geometry.backgrounds.append(
                Background(radius=radius * max(arrangement.geometry.range), color=arrangement.fill.background)
            )
    geometry.backgrounds.sort(key=lambda background: background.radius, reverse=True)

    logger.info(
        "Generated bloom: %d petal group(s), %d arrangement(s), %d path(s)",
        len(geometry.petals),
        len(geometry.center),
        geometry.path_count,
    )
    return geometry


def _max_magnitude(paths: Iterable[Path]) -> float:
    largest = float("-inf")
    for path in paths:
        for node in path.nodes:
            magnitude = node.position.magnitude()
            if magnitude > largest:
                largest = magnitude
    return largest


def drawing_size(geometry: BloomGeometry, fallback: float = DEFAULT_DRAWING_SIZE) -> float:
    """Side length of a square that holds the flower centered at the origin.

    Measured on petal anchors, or on center bases when there are no petals.
    """

    if any(geometry.petals):
        largest = _max_magnitude(path for group in geometry.petals for path in group)
    else:
        largest = _max_magnitude(base for arrangement in geometry.center for base in arrangement.bases)
    if largest <= 0:
        return fallback
    return largest * 2


def layer_index(count: int, index: int) -> Optional[int]:
    """Rendered layer of configuration entry ``index``, ``None`` if out of range."""

    if index < 0 or index >= count:
        return None
    return count - index - 1


apply_debug_logging(globals(), logger=logger, skip={"_max_magnitude", "layer_index"})

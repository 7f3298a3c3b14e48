"""Declarative flower configuration and its JSON mapping."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CENTER_RADIUS = 50.0
DEFAULT_STOP_OFFSET = 0.5
DEFAULT_STOP_COLOR = "#000000"
DEFAULT_STROKE_COLOR = "#000000"
DEFAULT_SHADOW_COLOR = "#000"


@dataclass
class GradientStop:
    color: str
    offset: Optional[float] = None


@dataclass
class ShadowConfig:
    blur: float = 0.0
    offset_x: Optional[float] = None
    offset_y: Optional[float] = None
    color: Optional[str] = None
    opacity: Optional[float] = None


@dataclass
class FillStyle:
    """Gradient, stroke and drop shadow applied to one group of paths."""

    color: List[GradientStop] = field(default_factory=list)
    stroke_width: Optional[float] = None
    stroke_color: Optional[str] = None
    shadow: Optional[ShadowConfig] = None


@dataclass
class PetalGeometry:
    """Shape parameters of one ring of petals.

    ``width``, ``inner_width`` and ``outer_width`` are angular widths in
    degrees, ``angle_offset`` rotates the ring (degrees) and
    ``radial_offset`` moves it in or out as a fraction of the center radius.
    ``balance`` is the fraction of ``length`` where ``width`` applies.
    """

    width: Optional[float] = None
    count: Optional[int] = None
    length: Optional[float] = None
    inner_width: Optional[float] = None
    outer_width: Optional[float] = None
    angle_offset: Optional[float] = None
    radial_offset: Optional[float] = None
    balance: Optional[float] = None
    smoothing: Optional[float] = None
    extend_outside: bool = False
    offset_x: Optional[float] = None
    offset_y: Optional[float] = None
    jitter: Optional[float] = None

    def has_required(self) -> bool:
        return bool(self.width) and bool(self.count) and bool(self.length)


@dataclass
class PetalConfig:
    geometry: PetalGeometry
    fill: FillStyle = field(default_factory=FillStyle)


@dataclass
class CenterGeometry:
    """Phyllotactic arrangement parameters.

    ``age`` and ``size`` are ``[inner, outer]`` pairs interpolated along the
    radius, ``range`` is the ``[start, end]`` share of the center radius the
    arrangement occupies, and ``density`` is the spiral constant (smaller
    packs tighter).
    """

    age: Optional[List[float]] = None
    density: Optional[float] = None
    size: Optional[List[float]] = None
    range: Optional[List[float]] = None


@dataclass
class CenterFill:
    base: FillStyle = field(default_factory=FillStyle)
    tip: FillStyle = field(default_factory=FillStyle)
    background: Optional[str] = None


@dataclass
class CenterArrangementConfig:
    geometry: CenterGeometry
    fill: CenterFill = field(default_factory=CenterFill)


@dataclass
class CenterConfig:
    radius: float = DEFAULT_CENTER_RADIUS
    arrangement: List[CenterArrangementConfig] = field(default_factory=list)


@dataclass
class BloomConfig:
    petals: List[PetalConfig] = field(default_factory=list)
    center: CenterConfig = field(default_factory=CenterConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BloomConfig":
        return bloom_config_from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return bloom_config_to_dict(self)


# JSON key -> dataclass field, per record type.
_GEOMETRY_KEYS = {
    "width": "width",
    "count": "count",
    "length": "length",
    "innerWidth": "inner_width",
    "outerWidth": "outer_width",
    "angleOffset": "angle_offset",
    "radialOffset": "radial_offset",
    "balance": "balance",
    "smoothing": "smoothing",
    "extendOutside": "extend_outside",
    "offsetX": "offset_x",
    "offsetY": "offset_y",
    "jitter": "jitter",
}
_SHADOW_KEYS = {
    "blur": "blur",
    "offsetX": "offset_x",
    "offsetY": "offset_y",
    "color": "color",
    "opacity": "opacity",
}
_CENTER_GEOMETRY_KEYS = {
    "age": "age",
    "density": "density",
    "size": "size",
    "range": "range",
}


def _pick(data: Mapping[str, Any], keys: Mapping[str, str], where: str) -> Dict[str, Any]:
    picked: Dict[str, Any] = {}
    for key, value in data.items():
        attr = keys.get(key)
        if attr is None:
            logger.warning("Ignoring unknown key %r in %s", key, where)
            continue
        picked[attr] = value
    return picked


def _emit(obj: Any, keys: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, attr in keys.items():
        value = getattr(obj, attr)
        if value is None or value is False:
            continue
        out[key] = list(value) if isinstance(value, list) else value
    return out


def _fill_from_dict(data: Optional[Mapping[str, Any]], where: str) -> FillStyle:
    if not data:
        return FillStyle()
    stops = [
        GradientStop(color=stop["color"], offset=stop.get("offset"))
        for stop in data.get("color", [])
    ]
    shadow_data = data.get("shadow")
    shadow = None
    if shadow_data:
        shadow = ShadowConfig(**_pick(shadow_data, _SHADOW_KEYS, f"{where}.shadow"))
    return FillStyle(
        color=stops,
        stroke_width=data.get("strokeWidth"),
        stroke_color=data.get("strokeColor"),
        shadow=shadow,
    )


def _fill_to_dict(fill: FillStyle) -> Dict[str, Any]:
    out: Dict[str, Any] = {"color": []}
    for stop in fill.color:
        entry: Dict[str, Any] = {"color": stop.color}
        if stop.offset is not None:
            entry["offset"] = stop.offset
        out["color"].append(entry)
    if fill.stroke_width is not None:
        out["strokeWidth"] = fill.stroke_width
    if fill.stroke_color is not None:
        out["strokeColor"] = fill.stroke_color
    if fill.shadow is not None:
        out["shadow"] = _emit(fill.shadow, _SHADOW_KEYS)
    return out


def bloom_config_from_dict(data: Mapping[str, Any]) -> BloomConfig:
    """Build a :class:`BloomConfig` from a JSON-compatible mapping."""

    petals: List[PetalConfig] = []
    for idx, petal in enumerate(data.get("petals") or []):
        where = f"petals[{idx}]"
        geometry = PetalGeometry(**_pick(petal.get("geometry") or {}, _GEOMETRY_KEYS, f"{where}.geometry"))
        petals.append(PetalConfig(geometry=geometry, fill=_fill_from_dict(petal.get("fill"), f"{where}.fill")))

    center_data = data.get("center")
    if center_data is None:
        center = CenterConfig()
    else:
        arrangements: List[CenterArrangementConfig] = []
        for idx, arrangement in enumerate(center_data.get("arrangement") or []):
            where = f"center.arrangement[{idx}]"
            geometry = CenterGeometry(
                **_pick(arrangement.get("geometry") or {}, _CENTER_GEOMETRY_KEYS, f"{where}.geometry")
            )
            fill_data = arrangement.get("fill") or {}
            fill = CenterFill(
                base=_fill_from_dict(fill_data.get("base"), f"{where}.fill.base"),
                tip=_fill_from_dict(fill_data.get("tip"), f"{where}.fill.tip"),
                background=fill_data.get("background"),
            )
            arrangements.append(CenterArrangementConfig(geometry=geometry, fill=fill))
        center = CenterConfig(
            radius=center_data.get("radius", DEFAULT_CENTER_RADIUS),
            arrangement=arrangements,
        )
    return BloomConfig(petals=petals, center=center)


def bloom_config_to_dict(config: BloomConfig) -> Dict[str, Any]:
    """Inverse of :func:`bloom_config_from_dict`; unset fields are omitted."""

    petals = [
        {"geometry": _emit(petal.geometry, _GEOMETRY_KEYS), "fill": _fill_to_dict(petal.fill)}
        for petal in config.petals
    ]
    arrangements = []
    for arrangement in config.center.arrangement:
        fill: Dict[str, Any] = {
            "base": _fill_to_dict(arrangement.fill.base),
            "tip": _fill_to_dict(arrangement.fill.tip),
        }
        if arrangement.fill.background:
            fill["background"] = arrangement.fill.background
        arrangements.append(
            {"geometry": _emit(arrangement.geometry, _CENTER_GEOMETRY_KEYS), "fill": fill}
        )
    return {
        "petals": petals,
        "center": {"radius": config.center.radius, "arrangement": arrangements},
    }


def load_config(path: Union[str, Path]) -> BloomConfig:
    with open(path, encoding="utf-8") as fin:
        data = json.load(fin)
    logger.info("Loaded configuration from %s", path)
    return bloom_config_from_dict(data)


def dump_config(config: BloomConfig) -> str:
    return json.dumps(bloom_config_to_dict(config), indent=2)


def fill_petal_defaults(petal: PetalConfig, index: int = 0) -> None:
    geometry = petal.geometry
    if not geometry.has_required():
        logger.warning(
            "petals[%d]: crucial config missing or invalid config (width=%r, count=%r, length=%r)",
            index,
            geometry.width,
            geometry.count,
            geometry.length,
        )
    else:
        if geometry.outer_width is None:
            geometry.outer_width = geometry.width
        if geometry.angle_offset is None:
            geometry.angle_offset = 0
        if geometry.radial_offset is None:
            geometry.radial_offset = 0
        if geometry.balance is None:
            geometry.balance = 0.5
        if geometry.smoothing is None:
            geometry.smoothing = 0
        if geometry.inner_width is None:
            geometry.inner_width = geometry.width
        if geometry.offset_x is None:
            geometry.offset_x = 0
        if geometry.offset_y is None:
            geometry.offset_y = 0
    fill_fill_defaults(petal.fill)


def fill_fill_defaults(fill: FillStyle) -> None:
    if not fill.color:
        fill.color = [GradientStop(color=DEFAULT_STOP_COLOR)]
    for stop in fill.color:
        if stop.offset is None:
            stop.offset = DEFAULT_STOP_OFFSET
    if fill.stroke_color is None:
        fill.stroke_color = DEFAULT_STROKE_COLOR
    if fill.stroke_width is None:
        fill.stroke_width = 0
    if fill.shadow is None:
        fill.shadow = ShadowConfig(
            blur=0,
            offset_x=0,
            offset_y=0,
            color=DEFAULT_SHADOW_COLOR,
            opacity=1,
        )


def fill_center_defaults(arrangement: CenterArrangementConfig) -> None:
    if arrangement.geometry.range is None:
        arrangement.geometry.range = [0.0, 1.0]
    fill_fill_defaults(arrangement.fill.base)
    fill_fill_defaults(arrangement.fill.tip)


def fill_defaults(config: BloomConfig) -> BloomConfig:
    """Back-fill optional fields of ``config`` in place and return it."""

    if config.petals is None:
        config.petals = []
    if config.center is None:
        config.center = CenterConfig()
    for idx, petal in enumerate(config.petals):
        fill_petal_defaults(petal, idx)
    for arrangement in config.center.arrangement:
        fill_center_defaults(arrangement)
    return config


__all__ = [
    "BloomConfig",
    "CenterArrangementConfig",
    "CenterConfig",
    "CenterFill",
    "CenterGeometry",
    "FillStyle",
    "GradientStop",
    "PetalConfig",
    "PetalGeometry",
    "ShadowConfig",
    "bloom_config_from_dict",
    "bloom_config_to_dict",
    "dump_config",
    "fill_defaults",
    "fill_center_defaults",
    "fill_fill_defaults",
    "fill_petal_defaults",
    "load_config",
]

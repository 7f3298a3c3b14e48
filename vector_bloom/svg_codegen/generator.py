"""SVG renderer for generated bloom geometry."""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, List, Optional, Sequence, Set
from urllib.parse import quote

import svgwrite
from svgwrite.container import Group

from ..bloom import BloomGeometry, drawing_size, layer_index
from ..config import FillStyle, GradientStop, ShadowConfig
from ..path import Path
from .utils import format_float, path_data

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\r\n'
DATA_URL_PREFIX = "data:image/svg+xml; charset=utf8, "
HIGHLIGHT_CLASS = "vectorBloomHighlight"
TYPES_CLASS = "vectorBloomTypes"
# Gradient radius relative to the drawn extent; spreads colors between stops.
GRADIENT_SPREAD = 1.5

HIGHLIGHT_STYLE = (
    f".{HIGHLIGHT_CLASS} {{"
    "fill: blue;"
    "opacity: 0.5;"
    "stroke: blue;"
    "stroke-width: 5;"
    "}"
)


def _new_flower_id() -> str:
    return uuid.uuid4().hex[:12]


def _radial_gradient(dwg: svgwrite.Drawing, gradient_id: str, stops: Sequence[GradientStop], radius: float):
    gradient = dwg.radialGradient(
        center=(0, 0),
        r=format_float(radius * GRADIENT_SPREAD),
        focal=(0, 0),
        id=gradient_id,
        gradientUnits="userSpaceOnUse",
        class_=TYPES_CLASS,
    )
    for stop in stops:
        offset = "50%" if stop.offset is None else f"{format_float(stop.offset * 100)}%"
        gradient.add_stop_color(offset=offset, color=stop.color)
    return gradient


def _shadow_filter(dwg: svgwrite.Drawing, filter_id: str, shadow: ShadowConfig):
    flt = dwg.filter(id=filter_id, x="-150%", y="-150%", width="300%", height="300%", class_=TYPES_CLASS)
    flt.feFlood(
        flood_opacity=shadow.opacity if shadow.opacity is not None else 1,
        flood_color=shadow.color or "#000",
        result="flood",
    )
    flt.feComposite(in_="flood", in2="SourceGraphic", operator="in", result="composite1")
    flt.feGaussianBlur(in_="composite1", stdDeviation=shadow.blur, result="blur")
    flt.feOffset(in_="blur", dx=shadow.offset_x or 0, dy=shadow.offset_y or 0, result="offset")
    flt.feComposite(in_="SourceGraphic", in2="offset", operator="over", result="composite2")
    return flt


def _stroke_rule(class_name: str, fill: FillStyle) -> str:
    return (
        f".{class_name} {{"
        f"stroke: {fill.stroke_color};"
        f"stroke-width: {fill.stroke_width};"
        "}"
    )


def _has_shadow(fill: FillStyle) -> bool:
    return fill.shadow is not None and bool(fill.shadow.blur)


def _path_group(
    dwg: svgwrite.Drawing,
    group_id: str,
    gradient_id: str,
    class_name: str,
    paths: Iterable[Path],
    *,
    highlighted: bool,
    element_filter: Optional[str] = None,
) -> Group:
    classes = class_name + (f" {HIGHLIGHT_CLASS}" if highlighted else "")
    group = dwg.g(id=group_id, fill=f"url(#{gradient_id})", class_=classes)
    for path in paths:
        element = dwg.path(d=path_data(path))
        if element_filter:
            element["filter"] = f"url(#{element_filter})"
        group.add(element)
    return group


def _highlighted_layers(count: int, indices: Iterable[int]) -> Set[int]:
    layers = set()
    for index in indices:
        layer = layer_index(count, index)
        if layer is None:
            logger.debug("Ignoring highlight index %d outside %d group(s)", index, count)
            continue
        layers.add(layer)
    return layers


def generate_svg_drawing(
    geometry: BloomGeometry,
    *,
    flower_id: Optional[str] = None,
    highlight_petals: Iterable[int] = (),
    highlight_centers: Iterable[int] = (),
    zoom: float = 1.0,
) -> svgwrite.Drawing:
    """Build the ``svgwrite`` drawing for ``geometry``.

    ``highlight_petals`` and ``highlight_centers`` are configuration indices;
    indices outside the configured groups are ignored. ``zoom`` scales the
    view box around the flower center (below 1 zooms in).
    """

    config = geometry.config
    flower_id = flower_id or _new_flower_id()
    radius = config.center.radius
    petal_count = len(geometry.petals)
    arrangement_count = len(geometry.center)
    highlighted_petals = _highlighted_layers(petal_count, highlight_petals)
    highlighted_centers = _highlighted_layers(arrangement_count, highlight_centers)

    width = drawing_size(geometry, fallback=radius * 2)
    zoomed = width * zoom
    difference = (width - zoomed) / 2

    dwg = svgwrite.Drawing(size=(f"{format_float(width)}px", f"{format_float(width)}px"), debug=False)
    dwg["class"] = "vectorBloomSVG"
    dwg["preserveAspectRatio"] = "xMidYMid meet"
    dwg["pageWidth"] = format_float(width)
    dwg["pageHeight"] = format_float(width)
    dwg["viewBox"] = " ".join(format_float(value) for value in (difference, difference, zoomed, zoomed))

    styles: List[str] = [HIGHLIGHT_STYLE]
    container = dwg.g()
    container.translate(width / 2, width / 2)
    dwg.add(container)

    for background in geometry.backgrounds:
        container.add(dwg.circle(center=(0, 0), r=format_float(background.radius), fill=background.color))

    for layer, petals in enumerate(geometry.petals):
        petal = config.petals[petal_count - layer - 1]
        gradient_id = f"petal{flower_id}-Gradient-{layer}"
        dwg.defs.add(_radial_gradient(dwg, gradient_id, petal.fill.color, radius + (petal.geometry.length or 0)))
        class_name = f"petalStyles{flower_id}-{layer}"
        styles.append(_stroke_rule(class_name, petal.fill))
        group = _path_group(
            dwg,
            f"petalGroup{flower_id}-{layer}",
            gradient_id,
            class_name,
            petals,
            highlighted=layer in highlighted_petals,
        )
        if _has_shadow(petal.fill):
            filter_id = f"petalShadow{flower_id}-{layer}"
            dwg.defs.add(_shadow_filter(dwg, filter_id, petal.fill.shadow))
            group["filter"] = f"url(#{filter_id})"
        container.add(group)

    for layer, arrangement in enumerate(geometry.center):
        source = config.center.arrangement[arrangement_count - layer - 1]
        extent = source.geometry.range[1] * radius
        highlighted = layer in highlighted_centers

        base_fill = source.fill.base
        base_gradient = f"centerBase{flower_id}-Gradient-{layer}"
        dwg.defs.add(_radial_gradient(dwg, base_gradient, base_fill.color, extent))
        base_filter = None
        if _has_shadow(base_fill):
            base_filter = f"centerBaseShadow{flower_id}-{layer}"
            dwg.defs.add(_shadow_filter(dwg, base_filter, base_fill.shadow))
        base_class = f"centerBaseStyles{flower_id}-{layer}"
        styles.append(_stroke_rule(base_class, base_fill))
        container.add(
            _path_group(
                dwg,
                f"centerBaseGroup{flower_id}-{layer}",
                base_gradient,
                base_class,
                arrangement.bases,
                highlighted=highlighted,
                element_filter=base_filter,
            )
        )

        tip_fill = source.fill.tip
        tip_gradient = f"centerTip{flower_id}-Gradient-{layer}"
        dwg.defs.add(_radial_gradient(dwg, tip_gradient, tip_fill.color, extent))
        tip_class = f"centerTipStyles{flower_id}-{layer}"
        styles.append(_stroke_rule(tip_class, tip_fill))
        tip_group = _path_group(
            dwg,
            f"centerTipGroup{flower_id}-{layer}",
            tip_gradient,
            tip_class,
            arrangement.tips,
            highlighted=highlighted,
        )
        if _has_shadow(tip_fill):
            filter_id = f"centerTipShadow{flower_id}-{layer}"
            dwg.defs.add(_shadow_filter(dwg, filter_id, tip_fill.shadow))
            tip_group["filter"] = f"url(#{filter_id})"
        container.add(tip_group)

    dwg.embed_stylesheet("\n".join(styles))
    logger.info("Rendered SVG %s: width=%s, %d path(s)", flower_id, format_float(width), geometry.path_count)
    return dwg


def generate_svg(geometry: BloomGeometry, **kwargs) -> str:
    """SVG markup for ``geometry``; keyword arguments as for :func:`generate_svg_drawing`."""

    return generate_svg_drawing(geometry, **kwargs).tostring()


def generate_svg_document(geometry: BloomGeometry, **kwargs) -> str:
    """Standalone SVG file contents, XML declaration included."""

    return XML_DECLARATION + generate_svg(geometry, **kwargs)


def generate_svg_data_url(geometry: BloomGeometry, **kwargs) -> str:
    return DATA_URL_PREFIX + quote(generate_svg(geometry, **kwargs), safe="-_.!~*'()")

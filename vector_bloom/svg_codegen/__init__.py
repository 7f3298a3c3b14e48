"""Bloom geometry → SVG rendering helpers."""

from .generator import (
    generate_svg,
    generate_svg_data_url,
    generate_svg_document,
    generate_svg_drawing,
)
from .utils import format_float, path_data

__all__ = [
    "format_float",
    "generate_svg",
    "generate_svg_data_url",
    "generate_svg_document",
    "generate_svg_drawing",
    "path_data",
]

import math
from typing import List

from ..path import Path


def format_float(value: float, precision: int = 4) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.{precision}f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def path_data(path: Path, precision: int = 4) -> str:
    """SVG ``d`` attribute for a compiled closed path."""

    def fmt(coord) -> str:
        return f"{format_float(coord[0], precision)} {format_float(coord[1], precision)}"

    parts: List[str] = [f"M {fmt(path.start)} C"]
    for segment in path.segments:
        parts.append(f"{fmt(segment.control1)} {fmt(segment.control2)} {fmt(segment.end)}")
    parts.append("Z")
    return " ".join(parts)

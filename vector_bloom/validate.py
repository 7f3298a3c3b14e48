from numbers import Real
from typing import Optional, Sequence

from .config import BloomConfig, CenterGeometry, PetalGeometry


class ValidationError(Exception):
    pass


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _ensure_pair(values: Optional[Sequence[object]], where: str, name: str, unit: bool = False) -> None:
    if values is None:
        raise ValidationError(f'{where}: {name} is required')
    if not isinstance(values, (list, tuple)) or len(values) != 2:
        raise ValidationError(f'{where}: {name} must be a pair of numbers, got {values!r}')
    for value in values:
        if not _is_number(value):
            raise ValidationError(f'{where}: {name} must be a pair of numbers, got {values!r}')
        if unit and not 0 <= value <= 1:
            raise ValidationError(f'{where}: {name} values must lie in [0, 1], got {values!r}')


def _validate_petal(geometry: PetalGeometry, where: str) -> None:
    for name in ('width', 'count', 'length'):
        value = getattr(geometry, name)
        if not value:
            raise ValidationError(f'{where}: {name} is required and must be non-zero')
        if not _is_number(value):
            raise ValidationError(f'{where}: {name} must be a number, got {value!r}')
    if isinstance(geometry.count, float) and not geometry.count.is_integer():
        raise ValidationError(f'{where}: count must be a whole number, got {geometry.count!r}')
    if geometry.count < 1:
        raise ValidationError(f'{where}: count must be positive, got {geometry.count!r}')
    for name in ('inner_width', 'outer_width', 'angle_offset', 'radial_offset', 'balance',
                 'smoothing', 'offset_x', 'offset_y', 'jitter'):
        value = getattr(geometry, name)
        if value is not None and not _is_number(value):
            raise ValidationError(f'{where}: {name} must be a number, got {value!r}')
    if not isinstance(geometry.extend_outside, bool):
        raise ValidationError(f'{where}: extend_outside must be boolean')
    if geometry.jitter is not None and geometry.jitter < 0:
        raise ValidationError(f'{where}: jitter must not be negative, got {geometry.jitter!r}')
    if geometry.smoothing:
        _validate_smoothed_outline(geometry, where)


def _validate_smoothed_outline(geometry: PetalGeometry, where: str) -> None:
    # smoothing needs every petal node to differ from both neighbours
    inner = geometry.width if geometry.inner_width is None else geometry.inner_width
    outer = geometry.width if geometry.outer_width is None else geometry.outer_width
    balance = 0.5 if geometry.balance is None else geometry.balance
    if inner == 0:
        raise ValidationError(f'{where}: inner_width must be non-zero when smoothing is set')
    if outer == 0:
        raise ValidationError(f'{where}: outer_width must be non-zero when smoothing is set')
    if balance == 0 and inner == geometry.width:
        raise ValidationError(f'{where}: balance 0 with inner_width equal to width collapses a node when smoothing is set')
    if balance == 1 and outer == geometry.width:
        raise ValidationError(f'{where}: balance 1 with outer_width equal to width collapses a node when smoothing is set')


def _validate_center_geometry(geometry: CenterGeometry, where: str) -> None:
    _ensure_pair(geometry.age, where, 'age')
    _ensure_pair(geometry.size, where, 'size')
    if geometry.range is not None:
        _ensure_pair(geometry.range, where, 'range', unit=True)
        start, end = geometry.range
        if start >= end:
            raise ValidationError(f'{where}: range must be increasing with non-zero width, got {geometry.range!r}')
    if not _is_number(geometry.density) or geometry.density <= 0:
        raise ValidationError(f'{where}: density must be a positive number, got {geometry.density!r}')


def validate(config: BloomConfig) -> None:
    """Reject configurations the generators cannot turn into geometry.

    Generation itself tolerates petal groups with missing fields by skipping
    them; this check is the strict alternative used before rendering.
    """

    for idx, petal in enumerate(config.petals):
        _validate_petal(petal.geometry, f'petals[{idx}].geometry')
        for stop_idx, stop in enumerate(petal.fill.color):
            if stop.offset is not None and not 0 <= stop.offset <= 1:
                raise ValidationError(
                    f'petals[{idx}].fill.color[{stop_idx}]: offset must lie in [0, 1], got {stop.offset!r}'
                )

    center = config.center
    if not _is_number(center.radius) or center.radius <= 0:
        raise ValidationError(f'center: radius must be a positive number, got {center.radius!r}')
    for idx, arrangement in enumerate(center.arrangement):
        _validate_center_geometry(arrangement.geometry, f'center.arrangement[{idx}].geometry')

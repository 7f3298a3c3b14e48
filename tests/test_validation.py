import pytest

from vector_bloom.bloom import generate_bloom
from vector_bloom.config import BloomConfig, fill_defaults
from vector_bloom.validate import ValidationError, validate


def _config(petal=None, arrangement=None, radius=180):
    data = {
        "petals": [{"geometry": petal if petal is not None else {"width": 18, "count": 18, "length": 242}}],
        "center": {
            "radius": radius,
            "arrangement": [
                {
                    "geometry": arrangement
                    if arrangement is not None
                    else {"density": 5.08, "range": [0, 0.85], "size": [1, 5], "age": [0.4, 0.8]}
                }
            ],
        },
    }
    return BloomConfig.from_dict(data)


def test_validate_accepts_valid_config():
    validate(_config())
    validate(fill_defaults(_config()))


@pytest.mark.parametrize(
    'petal, message_part',
    [
        ({'count': 3, 'length': 10}, 'petals[0].geometry: width is required'),
        ({'width': 5, 'count': 0, 'length': 10}, 'count is required'),
        ({'width': 5, 'count': 2.5, 'length': 10}, 'count must be a whole number'),
        ({'width': 5, 'count': -2, 'length': 10}, 'count must be positive'),
        ({'width': 5, 'count': 3, 'length': '10'}, 'length must be a number'),
        ({'width': 5, 'count': 3, 'length': 10, 'balance': 'x'}, 'balance must be a number'),
        ({'width': 5, 'count': 3, 'length': 10, 'jitter': -1}, 'jitter must not be negative'),
        ({'width': 5, 'count': 3, 'length': 10, 'extendOutside': 1}, 'extend_outside must be boolean'),
    ],
)
def test_petal_geometry_errors(petal, message_part):
    with pytest.raises(ValidationError) as exc:
        validate(_config(petal=petal))

    assert message_part in str(exc.value)


@pytest.mark.parametrize(
    'arrangement, message_part',
    [
        ({'density': 5, 'size': [1, 5], 'age': [0.4, 0.8], 'range': [0.5, 0.5]}, 'range must be increasing'),
        ({'density': 5, 'size': [1, 5], 'age': [0.4, 0.8], 'range': [0.6, 0.2]}, 'range must be increasing'),
        ({'density': 5, 'size': [1, 5], 'age': [0.4, 0.8], 'range': [0, 1.5]}, 'values must lie in [0, 1]'),
        ({'density': 0, 'size': [1, 5], 'age': [0.4, 0.8]}, 'density must be a positive number'),
        ({'size': [1, 5], 'age': [0.4, 0.8]}, 'density must be a positive number'),
        ({'density': 5, 'age': [0.4, 0.8]}, 'size is required'),
        ({'density': 5, 'size': [1, 5], 'age': [0.4]}, 'age must be a pair of numbers'),
    ],
)
def test_center_geometry_errors(arrangement, message_part):
    with pytest.raises(ValidationError) as exc:
        validate(_config(arrangement=arrangement))

    message = str(exc.value)
    assert message.startswith('center.arrangement[0].geometry:')
    assert message_part in message


@pytest.mark.parametrize('radius', [0, -5, 'big'])
def test_center_radius_must_be_positive(radius):
    with pytest.raises(ValidationError) as exc:
        validate(_config(radius=radius))

    assert 'center: radius must be a positive number' in str(exc.value)


def test_gradient_offsets_must_be_fractions():
    config = BloomConfig.from_dict(
        {"petals": [{"geometry": {"width": 5, "count": 3, "length": 10}, "fill": {"color": [{"color": "#fff", "offset": 2}]}}]}
    )

    with pytest.raises(ValidationError) as exc:
        validate(config)

    assert 'petals[0].fill.color[0]: offset must lie in [0, 1]' in str(exc.value)


@pytest.mark.parametrize(
    'petal, message_part',
    [
        ({'innerWidth': 0}, 'inner_width must be non-zero when smoothing is set'),
        ({'outerWidth': 0}, 'outer_width must be non-zero when smoothing is set'),
        ({'outerWidth': 0, 'extendOutside': True}, 'outer_width must be non-zero when smoothing is set'),
        ({'balance': 0}, 'balance 0 with inner_width equal to width'),
        ({'balance': 1, 'innerWidth': 8}, 'balance 1 with outer_width equal to width'),
    ],
)
def test_smoothing_rejects_collapsed_petal_nodes(petal, message_part):
    geometry = {'width': 18, 'count': 6, 'length': 100, 'smoothing': 0.3}
    geometry.update(petal)
    config = fill_defaults(_config(petal=geometry))

    with pytest.raises(ValidationError) as exc:
        validate(config)

    assert str(exc.value).startswith('petals[0].geometry:')
    assert message_part in str(exc.value)


@pytest.mark.parametrize(
    'petal',
    [
        {'innerWidth': 0},
        {'outerWidth': 0, 'extendOutside': True},
        {'innerWidth': 6, 'balance': 0, 'smoothing': 0.3},
    ],
)
def test_degenerate_widths_allowed_without_smoothing_collapse(petal):
    geometry = {'width': 18, 'count': 6, 'length': 100}
    geometry.update(petal)
    config = fill_defaults(_config(petal=geometry))

    validate(config)
    generate_bloom(config)

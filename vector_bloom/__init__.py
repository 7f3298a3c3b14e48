from .point import Point, InvalidGeometryError
from .path import Node, Path, BezierSegment
from .smoothing import apply_smoothing, make_perpendicular, radial_node
from .config import (
    BloomConfig,
    CenterArrangementConfig,
    CenterConfig,
    CenterFill,
    CenterGeometry,
    FillStyle,
    GradientStop,
    PetalConfig,
    PetalGeometry,
    ShadowConfig,
    dump_config,
    fill_defaults,
    load_config,
)
from .validate import validate, ValidationError
from .petals import generate_petals, create_petal
from .center import (
    GOLDEN_ANGLE,
    CenterArrangement,
    Floret,
    create_floret,
    generate_center_arrangement,
)
from .bloom import Background, BloomGeometry, generate_bloom, drawing_size, layer_index
from .svg_codegen import (
    generate_svg,
    generate_svg_data_url,
    generate_svg_document,
    generate_svg_drawing,
    path_data,
)

__all__ = [
    'Point',
    'InvalidGeometryError',
    'Node',
    'Path',
    'BezierSegment',
    'apply_smoothing',
    'make_perpendicular',
    'radial_node',
    'BloomConfig',
    'CenterArrangementConfig',
    'CenterConfig',
    'CenterFill',
    'CenterGeometry',
    'FillStyle',
    'GradientStop',
    'PetalConfig',
    'PetalGeometry',
    'ShadowConfig',
    'dump_config',
    'fill_defaults',
    'load_config',
    'validate',
    'ValidationError',
    'generate_petals',
    'create_petal',
    'GOLDEN_ANGLE',
    'CenterArrangement',
    'Floret',
    'create_floret',
    'generate_center_arrangement',
    'Background',
    'BloomGeometry',
    'generate_bloom',
    'drawing_size',
    'layer_index',
    'generate_svg',
    'generate_svg_data_url',
    'generate_svg_document',
    'generate_svg_drawing',
    'path_data',
]

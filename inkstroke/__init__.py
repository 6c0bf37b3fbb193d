"""Pressure-sensitive ink stroke outlines from freehand input samples."""

from .types import Point, Vertex, Outline, Ring, Face, InputPoint, PathPoint
from .geometry import StrokeError
from .options import StrokeOptions, TaperOptions, coerce_options
from .points import to_input_point, to_input_points
from .normalize import stroke_points, next_path_point
from .pressure import simulate_pressure
from .radius import stroke_radius, max_size, min_size
from .offset import OffsetState, build_offset_outline
from .spline import Spline, build_spline_outline
from .short_stroke import is_short_stroke, short_stroke_outline
from .clip import self_union
from .svg import path_data, ring_path, svg_document
from .outline import (
    OutlineStrategy, OffsetStrategy, SplineStrategy, STRATEGIES, get_strategy,
    compute_outline, compute_path_data,
    AccumulatedStroke, StrokeAccumulator, create_accumulator,
)

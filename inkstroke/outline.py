"""Entry points: strategy selection, batch outlines, path data, and live accumulation."""
import logging
import random
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Protocol

from .types import InputPoint, PathPoint, Outline
from .options import StrokeOptions, coerce_options
from .geometry import StrokeError
from .points import to_input_point, to_input_points
from .normalize import next_path_point, first_from_second, stroke_points
from .offset import OffsetState, build_offset_outline
from .spline import build_spline_outline
from .short_stroke import is_short_stroke, short_stroke_outline
from .svg import path_data

log = logging.getLogger(__name__)

OptionsLike = StrokeOptions | Mapping[str, Any] | None

# ============================================================
# Strategies
# ============================================================
class OutlineStrategy(Protocol):
    def build(self, points: list[PathPoint], options: StrokeOptions) -> Outline: ...

class OffsetStrategy:
    """Discrete perpendicular offsets at every normalized point."""
    def build(self, points, options):
        return build_offset_outline(points, options)

class SplineStrategy:
    """Offsets along a resampled Catmull-Rom centerline."""
    def build(self, points, options):
        return build_spline_outline(points, options)

STRATEGIES: dict[str, OutlineStrategy] = {
    "offset": OffsetStrategy(),
    "spline": SplineStrategy(),
}

def get_strategy(name: str) -> OutlineStrategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise StrokeError(f"Unknown outline strategy {name!r}; expected one of {sorted(STRATEGIES)}") from None


def outline_from_path_points(
    pts: list[PathPoint], options: StrokeOptions, rng: random.Random | None = None,
) -> Outline:
    """Outline for already-normalized points: degenerate, short, or full builder."""
    strategy = get_strategy(options.strategy)
    if not pts:
        return []
    if len(pts) == 1:
        return [(pts[0].x, pts[0].y)]
    if is_short_stroke(pts, options.size, options.thinning):
        log.debug("short stroke: length %.3f, %d points", pts[-1].length, len(pts))
        return short_stroke_outline(pts, options.size, options.thinning, rng)
    return strategy.build(pts, options)

# ============================================================
# Batch Entry Points
# ============================================================
def compute_outline(points: Iterable[Any], options: OptionsLike = None,
                    rng: random.Random | None = None) -> Outline:
    """Closed outline polygon for a stroke.

    points are (x, y[, pressure]) sequences or {x, y, pressure?} records.
    Vertices are (x, y), or (x, y, pressure) for the spline strategy.
    """
    o = coerce_options(options)
    pts = stroke_points(to_input_points(points), o.streamline,
                        simulate_pressure=o.simulate_pressure, size=o.size, last=o.last)
    return outline_from_path_points(pts, o, rng)


def compute_path_data(points: Iterable[Any], options: OptionsLike = None,
                      rng: random.Random | None = None) -> str:
    """SVG path data for a stroke; empty input gives ''."""
    o = coerce_options(options)
    return path_data(compute_outline(points, o, rng), clip=o.clip)

# ============================================================
# Incremental Entry Point
# ============================================================
class AccumulatedStroke(NamedTuple):
    points: Outline
    path: str
    total_length: float


class StrokeAccumulator:
    """Builds the outline of one in-progress stroke as points arrive.

    Each add_point advances the streamlined cursor and the offset tracking
    state by one step. Not safe for concurrent use; keep one accumulator
    per stroke, fed in arrival order.
    """

    def __init__(self, options: OptionsLike = None, rng: random.Random | None = None):
        self.options = coerce_options(options)
        get_strategy(self.options.strategy)
        self.rng = rng
        self.path_points: list[PathPoint] = []
        self.state = OffsetState.from_options(self.options)

    @property
    def total_length(self) -> float:
        return self.path_points[-1].length if self.path_points else 0.0

    def add_point(self, point: Any) -> AccumulatedStroke:
        o = self.options
        raw: InputPoint = to_input_point(point)
        prev = self.path_points[-1] if self.path_points else None
        pt = next_path_point(prev, raw, o.streamline, simulate=o.simulate_pressure, size=o.size)
        self.path_points.append(pt)
        if len(self.path_points) == 2:
            first_from_second(self.path_points)
            self.state.origin = self.path_points[0]
        self.state.push(pt)

        if o.strategy == "offset" and len(self.path_points) > 1 \
                and not is_short_stroke(self.path_points, o.size, o.thinning):
            outline = self.state.outline()
        else:
            outline = outline_from_path_points(self.path_points, o, self.rng)
        return AccumulatedStroke(outline, path_data(outline, clip=o.clip), self.total_length)


def create_accumulator(options: OptionsLike = None, rng: random.Random | None = None) -> StrokeAccumulator:
    return StrokeAccumulator(options, rng)

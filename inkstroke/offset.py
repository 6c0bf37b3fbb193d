"""Direct offset-curve outline: perpendicular projections with per-side simplification."""
import math
from collections import deque
from dataclasses import dataclass, field

from .types import Point, PathPoint, Outline
from .options import StrokeOptions, Easing, identity
from .geometry import dist, mid, project, fan
from .radius import stroke_radius
from .constants import DEFAULT_SIZE, DEFAULT_THINNING, OFFSET_SMOOTH_DIST


@dataclass
class OffsetState:
    """Tracking state for one stroke, advanced one PathPoint at a time.

    Left commits are appended and right commits prepended, so that
    left + right already runs out along the left and back along the right.
    Repeated samples reuse the last direction of travel.
    The two sides commit independently and may differ in length.
    """
    size: float = DEFAULT_SIZE
    thinning: float = DEFAULT_THINNING
    easing: Easing = identity
    smooth: float = OFFSET_SMOOTH_DIST
    origin: PathPoint | None = None
    head: PathPoint | None = None
    heading: float = 0.0                 # last direction of actual travel
    t0: Point | None = None              # left tracking anchor
    t1: Point | None = None              # right tracking anchor
    start_right: Point | None = None
    head_left: Point | None = None
    head_right: Point | None = None
    left: list[Point] = field(default_factory=list)
    right: deque[Point] = field(default_factory=deque)

    @classmethod
    def from_options(cls, options: StrokeOptions) -> "OffsetState":
        return cls(size=options.size, thinning=options.thinning, easing=options.easing)

    def radius(self, pt: PathPoint) -> float:
        return stroke_radius(pt.pressure, self.size, self.thinning, self.easing)

    def push(self, pt: PathPoint) -> None:
        if self.origin is None:
            self.origin = pt
            return
        if pt.distance > 0 or self.head is None:
            self.heading = pt.angle
        # a repeated sample has no direction of its own; keep the previous one
        a = self.heading
        r = self.radius(pt)
        lp = project((pt.x, pt.y), a - math.pi/2, r)
        rp = project((pt.x, pt.y), a + math.pi/2, r)
        if self.t0 is None:
            # the first point has no direction of its own; use this one's
            o = (self.origin.x, self.origin.y); r0 = self.radius(self.origin)
            self.t0 = project(o, a - math.pi/2, r0)
            self.t1 = self.start_right = project(o, a + math.pi/2, r0)
        if dist(self.t0, lp) > self.smooth:
            self.left.append(mid(self.t0, lp)); self.t0 = lp
        if dist(self.t1, rp) > self.smooth:
            self.right.appendleft(mid(self.t1, rp)); self.t1 = rp
        self.head = pt; self.head_left = lp; self.head_right = rp

    def outline(self) -> Outline:
        """Closed ring: start cap, left side, end cap, right side (reversed)."""
        if self.origin is None:
            return []
        if self.head is None:
            return [(self.origin.x, self.origin.y)]
        start_cap = fan(self.start_right, (self.origin.x, self.origin.y))
        end_cap = fan(self.head_left, (self.head.x, self.head.y))[:-1]
        return [*start_cap, *self.left, *end_cap, self.head_right, *self.right, start_cap[0]]


def build_offset_outline(points: list[PathPoint], options: StrokeOptions) -> Outline:
    state = OffsetState.from_options(options)
    for pt in points:
        state.push(pt)
    return state.outline()

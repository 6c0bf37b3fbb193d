"""Lens-shaped outline for strokes shorter than two stroke diameters."""
import math
import random

from .types import PathPoint, Outline
from .geometry import lerp, angle, mid, project
from .radius import max_size, min_size
from .constants import SHORT_STROKE_FACTOR, TAU


def is_short_stroke(points: list[PathPoint], size: float, thinning: float) -> bool:
    """True when the total streamlined length is under two max diameters."""
    return points[-1].length < SHORT_STROKE_FACTOR * max_size(size, thinning)


def short_stroke_outline(
    points: list[PathPoint], size: float, thinning: float,
    rng: random.Random | None = None,
) -> Outline:
    """Five-vertex lens around the first-to-last chord.

    Coincident endpoints have no direction, so the lens gets a random one.
    """
    if not points:
        return []
    p0, p1 = points[0], points[-1]
    hi = max_size(size, thinning); lo = min_size(size, thinning)
    r = (hi if p0.pressure == p1.pressure else lerp(hi, lo, p1.pressure)) / 2
    a0 = (p0.x, p0.y); a1 = (p1.x, p1.y)
    a = (rng or random).uniform(0, TAU) if a0 == a1 else angle(a0, a1)
    m = mid(a0, a1)
    return [
        project(m, a - math.pi/2, r),
        project(a0, a + math.pi, r),
        project(m, a + math.pi/2, r),
        project(a1, a, r),
        project(m, a - math.pi/2, r),
    ]

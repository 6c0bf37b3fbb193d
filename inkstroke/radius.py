"""Pressure to stroke half-width."""
from .options import Easing, identity
from .geometry import clamp, lerp
from .constants import THINNING_MIN, THINNING_MAX


def stroke_radius(pressure: float, size: float, thinning: float, easing: Easing = identity) -> float:
    """Half-width of the stroke at the given pressure.

    thinning > 0 narrows the stroke at low pressure, thinning < 0 widens it,
    thinning == 0 ignores pressure.
    """
    if not thinning:
        return size / 2
    pressure = clamp(easing(pressure), 0, 1)
    if thinning < 0:
        return lerp(size, size + size*clamp(thinning, -THINNING_MAX, -THINNING_MIN), pressure) / 2
    return lerp(size - size*clamp(thinning, THINNING_MIN, THINNING_MAX), size, pressure) / 2


def max_size(size: float, thinning: float) -> float:
    """Widest stroke diameter over the pressure range."""
    return 2 * max(stroke_radius(0.0, size, thinning), stroke_radius(1.0, size, thinning))


def min_size(size: float, thinning: float) -> float:
    """Narrowest stroke diameter over the pressure range."""
    return 2 * min(stroke_radius(0.0, size, thinning), stroke_radius(1.0, size, thinning))

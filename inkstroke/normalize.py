"""Streamline raw samples into PathPoints with direction and running length."""
from .types import InputPoint, PathPoint
from .geometry import lerp_pt, dist, angle
from .pressure import simulate_pressure
from .constants import DEFAULT_SIZE, DEFAULT_STREAMLINE, PRESSURE_SEED


def next_path_point(
    prev: PathPoint | None, raw: InputPoint, streamline: float = DEFAULT_STREAMLINE, *,
    simulate: bool = False, size: float = DEFAULT_SIZE, snap: bool = False,
) -> PathPoint:
    """Advance the streamlined cursor by one raw sample.

    The cursor moves (1 - streamline) of the way from prev toward raw;
    snap moves it all the way. With simulate, pressure comes from the
    segment length instead of the sample.
    """
    if prev is None:
        pressure = PRESSURE_SEED if simulate else raw.pressure
        return PathPoint(raw.x, raw.y, pressure, 0.0, 0.0, 0.0)
    p = lerp_pt((prev.x, prev.y), (raw.x, raw.y), 1.0 if snap else 1 - streamline)
    d = dist((prev.x, prev.y), p)
    pressure = simulate_pressure(prev.pressure, d, size) if simulate else raw.pressure
    return PathPoint(p[0], p[1], pressure, angle((prev.x, prev.y), p), d, prev.length + d)


def first_from_second(pts: list[PathPoint]) -> None:
    """Give the first point the direction and gap of the second (in place)."""
    if len(pts) > 1:
        pts[0] = pts[0]._replace(angle=pts[1].angle, distance=pts[1].distance)


def stroke_points(
    points: list[InputPoint], streamline: float = DEFAULT_STREAMLINE, *,
    simulate_pressure: bool = False, size: float = DEFAULT_SIZE, last: bool = False,
) -> list[PathPoint]:
    """Normalize a whole series. Same length as points; empty in, empty out.

    last places the final point on the final raw sample (the pen-up position).
    """
    out: list[PathPoint] = []
    prev = None
    n = len(points)
    for i, raw in enumerate(points):
        prev = next_path_point(prev, raw, streamline, simulate=simulate_pressure,
                               size=size, snap=last and i == n-1)
        out.append(prev)
    first_from_second(out)
    return out

"""Coerce heterogeneous point records into InputPoint tuples."""
from collections.abc import Iterable, Mapping
from numbers import Real
from typing import Any

import numpy as np

from .types import InputPoint
from .geometry import StrokeError
from .constants import DEFAULT_PRESSURE


def to_input_point(p: Any) -> InputPoint:
    """One sample as InputPoint.

    Accepts (x, y), (x, y, pressure), {x, y, pressure?}, or any object with
    x/y (and optionally pressure) attributes. Missing pressure is 0.5.
    """
    if isinstance(p, InputPoint):
        return p
    if isinstance(p, Mapping):
        try:
            x, y = p["x"], p["y"]
        except KeyError as e:
            raise StrokeError(f"Point mapping missing key {e.args[0]!r}: {p!r}") from None
        pressure = p.get("pressure")
    elif hasattr(p, "x") and hasattr(p, "y"):
        x, y = p.x, p.y
        pressure = getattr(p, "pressure", None)
    elif isinstance(p, (tuple, list, np.ndarray)):
        if not 2 <= len(p) <= 3:
            raise StrokeError(f"Point must have 2 or 3 components, got {len(p)}: {p!r}")
        x, y = p[0], p[1]
        pressure = p[2] if len(p) == 3 else None
    else:
        raise StrokeError(f"Unsupported point record: {p!r}")
    if pressure is None:
        pressure = DEFAULT_PRESSURE
    for v in (x, y, pressure):
        if not isinstance(v, (Real, np.number)):
            raise StrokeError(f"Point components must be numbers: {p!r}")
    return InputPoint(float(x), float(y), float(pressure))


def to_input_points(points: Iterable[Any]) -> list[InputPoint]:
    """Coerce a sequence of samples (or an (n, 2|3) array) into InputPoints."""
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] not in (2, 3):
            raise StrokeError(f"Point array must have shape (n, 2) or (n, 3), got {points.shape}")
        points = points.tolist()
    return [to_input_point(p) for p in points]

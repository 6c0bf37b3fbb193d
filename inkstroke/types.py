"""Shared type definitions for stroke outlines."""
from typing import NamedTuple

Point = tuple[float, float]
Vertex = tuple[float, ...]        # (x, y) or (x, y, pressure)
Outline = list[Vertex]
Ring = list[Point]
Face = list[Ring]                 # exterior ring followed by any holes

class InputPoint(NamedTuple):
    x: float; y: float
    pressure: float = 0.5

class PathPoint(NamedTuple):
    """Streamlined sample with direction and running length."""
    x: float; y: float; pressure: float
    angle: float       # radians, direction from the previous point
    distance: float    # gap to the previous point
    length: float      # cumulative distance along the stroke

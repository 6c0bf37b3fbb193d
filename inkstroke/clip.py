"""Polygon self-union: resolve self-overlapping outline rings into simple faces."""
import logging

from shapely.geometry import LineString, Polygon
from shapely.ops import polygonize, unary_union

from .types import Point, Face
from .geometry import winding_number

log = logging.getLogger(__name__)


def _faces(geom) -> list[Face]:
    polys = getattr(geom, "geoms", [geom])
    return [[list(p.exterior.coords), *(list(r.coords) for r in p.interiors)]
            for p in polys if isinstance(p, Polygon) and not p.is_empty]


def self_union(polygons: list[list[list[Point]]]) -> list[Face]:
    """Union of the areas enclosed by the given rings under the nonzero rule.

    Each input polygon is a list of rings. The rings are noded at their
    self-intersections and polygonized; faces with nonzero winding are
    merged. Output faces are an exterior ring plus holes, each ring closed.
    """
    rings = [[tuple(v[:2]) for v in ring] for poly in polygons for ring in poly]
    rings = [r for r in rings if len(set(r)) >= 3]
    if not rings:
        return []
    lines = [LineString([*r, r[0]]) for r in rings]
    noded = unary_union(lines)
    kept = []
    for face in polygonize(noded):
        p = face.representative_point()
        if sum(winding_number(r, (p.x, p.y)) for r in rings) != 0:
            kept.append(face)
    faces = _faces(unary_union(kept)) if kept else []
    log.debug("self_union: %d ring(s) -> %d face(s)", len(rings), len(faces))
    return faces

"""Pure vector helpers, fans, and polygon utilities for stroke outlines."""
import math
from .types import Point, Vertex
from .constants import CAP_STEPS

# ============================================================
# Error Type
# ============================================================
class StrokeError(ValueError):
    """Raised for malformed points, options, or strategy names."""

# ============================================================
# Scalar Helpers
# ============================================================
def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

# ============================================================
# Vector Helpers
# ============================================================
def add(a: Point, b: Point) -> Point:
    return (a[0]+b[0], a[1]+b[1])

def sub(a: Point, b: Point) -> Point:
    return (a[0]-b[0], a[1]-b[1])

def mul(a: Point, s: float) -> Point:
    return (a[0]*s, a[1]*s)

def dot(a: Point, b: Point) -> float:
    return a[0]*b[0] + a[1]*b[1]

def dist(a: Point, b: Point) -> float:
    return math.hypot(b[0]-a[0], b[1]-a[1])

def angle(a: Point, b: Point) -> float:
    """Direction (radians) of travel from a to b."""
    return math.atan2(b[1]-a[1], b[0]-a[0])

def unit(a: Point) -> Point:
    """Unit vector along a; the zero vector stays zero."""
    ln = math.hypot(a[0], a[1])
    if ln < 1e-12:
        return (0.0, 0.0)
    return (a[0]/ln, a[1]/ln)

def per(a: Point) -> Point:
    """Perpendicular rotated a quarter turn toward -y, (x, y) -> (y, -x)."""
    return (a[1], -a[0])

def mid(a: Point, b: Point) -> Point:
    return ((a[0]+b[0])/2, (a[1]+b[1])/2)

def lerp_pt(a: Point, b: Point, t: float) -> Point:
    """Interpolate a -> b; exact at t == 0 and t == 1."""
    return (a[0]*(1-t) + b[0]*t, a[1]*(1-t) + b[1]*t)

def mediant(a: Point, b: Point) -> Point:
    """Average direction of two unit vectors; falls back to b when they cancel."""
    m = unit((a[0]+b[0], a[1]+b[1]))
    return m if m != (0.0, 0.0) else b

def project(p: Point, a: float, d: float) -> Point:
    """Point at distance d from p in direction a (radians)."""
    return (p[0]+d*math.cos(a), p[1]+d*math.sin(a))

def rot_around(p: Vertex, c: Vertex, r: float) -> Vertex:
    """Rotate p by r radians around c. Components past (x, y) are carried over."""
    s, co = math.sin(r), math.cos(r)
    px = p[0]-c[0]; py = p[1]-c[1]
    return (c[0] + px*co - py*s, c[1] + px*s + py*co, *p[2:])

def fan(p: Vertex, c: Vertex, sign: float = 1.0) -> list[Vertex]:
    """Half-turn of p around c, one vertex per CAP_STEPS entry."""
    return [rot_around(p, c, sign*math.pi*t) for t in CAP_STEPS]

# ============================================================
# Polygon Utilities
# ============================================================
def winding_number(ring: list[Point], p: Point) -> int:
    """Signed number of times ring winds around p (0 means outside)."""
    wn = 0; n = len(ring)
    for i in range(n):
        a = ring[i]; b = ring[(i+1)%n]
        cross = (b[0]-a[0])*(p[1]-a[1]) - (p[0]-a[0])*(b[1]-a[1])
        if a[1] <= p[1] < b[1] and cross > 0:
            wn += 1
        elif b[1] <= p[1] < a[1] and cross < 0:
            wn -= 1
    return wn

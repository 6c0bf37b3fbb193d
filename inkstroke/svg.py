"""SVG path data for closed outlines, and a minimal SVG document wrapper."""
from .types import Vertex, Face
from .geometry import mid
from .clip import self_union


def fmt_num(v: float) -> str:
    """Compact coordinate, e.g. 4.0 -> '4', 2.50 -> '2.5', -0.001 -> '0'."""
    s = f"{v:.2f}".rstrip('0').rstrip('.')
    return "0" if s == "-0" else s

def _pt(p) -> str:
    return f"{fmt_num(p[0])},{fmt_num(p[1])}"


def ring_path(ring: list[Vertex]) -> str:
    """M v0, then Q v0 mid(v0, v1) for each following vertex, then Z.

    Every vertex becomes the control point of a quadratic through the
    neighbouring edge midpoints, so corners are rounded.
    """
    if not ring:
        return ""
    v0 = ring[0]
    parts = [f"M{_pt(v0)}"]
    for v1 in ring[1:]:
        parts.append(f"Q{_pt(v0)} {_pt(mid(v0, v1))}")
        v0 = v1
    parts.append("Z")
    return " ".join(parts)


def path_data(polygon: list[Vertex], clip: bool = False) -> str:
    """Path data for a closed outline; with clip, self-overlaps are merged first."""
    if not polygon:
        return ""
    faces: list[Face]
    if clip:
        faces = self_union([[polygon]]) or [[[*polygon, polygon[0]]]]
    else:
        faces = [[[*polygon, polygon[0]]]]
    return " ".join(ring_path(ring) for face in faces for ring in face)


def svg_document(d: str, width: float, height: float, *, fill: str = "#000",
                 view_box: tuple[float, float, float, float] | None = None) -> str:
    """Standalone SVG holding one filled path."""
    vb = view_box or (0, 0, width, height)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{fmt_num(width)}" height="{fmt_num(height)}"'
        f' viewBox="{" ".join(fmt_num(v) for v in vb)}">',
        f'<path d="{d}" fill="{fill}" fill-rule="nonzero" stroke="none"/>',
        '</svg>',
    ]
    return "\n".join(lines) + "\n"

"""Render a recorded stroke (JSON point list) to a standalone SVG file.

The input is a JSON array of [x, y] / [x, y, pressure] triples or
{"x", "y", "pressure"} objects, optionally wrapped as
{"points": [...], "options": {...}}. Command-line flags override the
file's options.
"""
import argparse
import json
import logging
import sys

from inkstroke import StrokeError, StrokeOptions, compute_outline, path_data, svg_document

log = logging.getLogger("gen_stroke_svg")

_MARGIN = 10.0


def load_stroke(path: str) -> tuple[list, dict]:
    """Read points and options from a JSON file ('-' for stdin)."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path) as f:
            data = json.load(f)
    if isinstance(data, dict):
        return data.get("points", []), dict(data.get("options", {}))
    return data, {}


def render_svg(points: list, options: StrokeOptions, fill: str = "#000") -> str:
    """SVG document sized to the outline plus a margin."""
    outline = compute_outline(points, options)
    d = path_data(outline, clip=options.clip)
    if outline:
        xs = [v[0] for v in outline]; ys = [v[1] for v in outline]
        x0, y0 = min(xs) - _MARGIN, min(ys) - _MARGIN
        w, h = max(xs) - min(xs) + 2*_MARGIN, max(ys) - min(ys) + 2*_MARGIN
    else:
        x0 = y0 = 0.0; w = h = 2*_MARGIN
    log.info("outline: %d vertices, path %d chars", len(outline), len(d))
    return svg_document(d, w, h, fill=fill, view_box=(x0, y0, w, h))


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("input", help="JSON point file, or - for stdin")
    ap.add_argument("-o", "--output", default="-", help="SVG output file (default stdout)")
    ap.add_argument("--size", type=float)
    ap.add_argument("--thinning", type=float)
    ap.add_argument("--smoothing", type=float)
    ap.add_argument("--streamline", type=float)
    ap.add_argument("--no-simulate-pressure", dest="simulate_pressure",
                    action="store_false", default=None)
    ap.add_argument("--strategy", choices=["offset", "spline"])
    ap.add_argument("--clip", action="store_true", default=None)
    ap.add_argument("--fill", default="#000")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        points, opts = load_stroke(args.input)
        for key in ("size", "thinning", "smoothing", "streamline",
                    "simulate_pressure", "strategy", "clip"):
            val = getattr(args, key)
            if val is not None:
                opts[key] = val
        svg = render_svg(points, StrokeOptions.from_mapping(opts), fill=args.fill)
    except (StrokeError, json.JSONDecodeError, OSError) as e:
        print(f"gen_stroke_svg: {e}", file=sys.stderr)
        return 2
    if args.output == "-":
        sys.stdout.write(svg)
    else:
        with open(args.output, "w") as f:
            f.write(svg)
        print(f"wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

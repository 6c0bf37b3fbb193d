"""Catmull-Rom centerline outline with corner fans and end caps.

The streamlined points are control points of a Catmull-Rom curve. The
curve is resampled at a fixed arc-length cadence; each sample is offset
along the curve normal, sharp reversals get a radial fan instead of an
offset, and each side is simplified independently.
"""
import logging
import math
from typing import NamedTuple

import numpy as np
from scipy.integrate import quad

from .types import Point, Vertex, PathPoint, Outline
from .options import StrokeOptions
from .geometry import add, sub, mul, dot, dist, unit, per, mediant, fan
from .radius import stroke_radius
from .constants import (
    RESAMPLE_DIVISOR, LEAD_IN_DIVISOR, END_GRADIENT_BACKOFF, END_GRADIENT_SAMPLES,
)

log = logging.getLogger(__name__)


class Sample(NamedTuple):
    point: Vertex        # (x, y, pressure) on the centerline
    gradient: Point      # unit tangent


def _basis(t: float) -> np.ndarray:
    tt = t*t; ttt = tt*t
    return np.array([-ttt + 2*tt - t, 3*ttt - 5*tt + 2, -3*ttt + 4*tt + t, ttt - tt])

def _basis_gradient(t: float) -> np.ndarray:
    tt = t*t
    return np.array([-3*tt + 4*t - 1, 9*tt - 10*t, -9*tt + 8*t + 1, 3*tt - 2*t])


class Spline:
    """Centerline through streamlined, pressure-carrying control points.

    Fractional index i + t lies on the segment from control point i to
    i + 1. Out-of-range indices clamp to the ends, or wrap when looped.
    """

    def __init__(self, points: list[PathPoint], options: StrokeOptions | None = None,
                 looped: bool = False):
        self.options = options or StrokeOptions()
        self.looped = looped
        self.points = np.array([(p.x, p.y, p.pressure) for p in points], dtype=float).reshape(-1, 3)
        n = len(self.points)
        if n > 1:
            ends = np.roll(self.points, -1, axis=0) if looped else self.points[1:]
            starts = self.points if looped else self.points[:-1]
            self.lengths = np.hypot(*(ends - starts)[:, :2].T).tolist()
        else:
            self.lengths = []
        self.length = float(sum(self.lengths))

    def __len__(self):
        return len(self.points)

    def _control(self, index: float) -> tuple[np.ndarray, float]:
        n = len(self.points)
        d = math.floor(index); t = index - d
        if self.looped:
            p1 = d % n
            idx = [(p1-1) % n, p1, (p1+1) % n, (p1+2) % n]
        else:
            if d > n - 1:
                d, t = n - 1, 0.0
            elif d < 0:
                d, t = 0, 0.0
            p1 = d
            idx = [max(p1-1, 0), p1, min(p1+1, n-1), min(p1+2, n-1)]
        return self.points[idx], t

    def point_at(self, index: float) -> Vertex:
        """Curve point (x, y, pressure) at fractional segment index."""
        ctrl, t = self._control(index)
        return tuple((0.5 * _basis(t) @ ctrl).tolist())

    def gradient_at(self, index: float) -> Vertex:
        """Derivative of the curve (dx, dy, dpressure) at fractional segment index."""
        ctrl, t = self._control(index)
        return tuple((0.5 * _basis_gradient(t) @ ctrl).tolist())

    def segment_length(self, i: int) -> float:
        """Arc length of segment i, integrating the tangent norm over t."""
        def speed(t):
            g = self.gradient_at(i + t)
            return math.hypot(g[0], g[1])
        return quad(speed, 0.0, 1.0, limit=100)[0]

    def offset_at(self, distance: float) -> float:
        """Fractional segment index reached after distance along the control polygon."""
        if not self.lengths:
            return 0.0
        i = 0
        while i < len(self.lengths) - 1 and distance > self.lengths[i]:
            distance -= self.lengths[i]; i += 1
        if self.lengths[i] == 0:
            return float(i)
        return i + min(max(distance, 0.0), self.lengths[i]) / self.lengths[i]

    # ============================================================
    # Outline
    # ============================================================
    def radius(self, pressure: float) -> float:
        o = self.options
        return stroke_radius(pressure, o.size, o.thinning, o.easing)

    def samples(self) -> list[Sample]:
        """Evenly spaced centerline samples with unit gradients."""
        size = self.options.size
        step = size / RESAMPLE_DIVISOR
        n = len(self.points)
        results: list[Sample] = []
        error = 0.0; traveled = 0.0; short = True
        for i in range(n - 1):
            length = self.lengths[i]
            if length == 0:
                continue
            trav = error
            while trav <= length:
                point = self.point_at(i + trav/length)
                gradient = unit(self.gradient_at(i + trav/length)[:2])
                if short and traveled + trav > size / LEAD_IN_DIVISOR:
                    # the tangent is unreliable over the lead-in
                    results = [s._replace(gradient=gradient) for s in results]
                    short = False
                results.append(Sample(point, gradient))
                trav += step
            error = trav - length
            traveled += length

        g = unit(self.gradient_at(n - END_GRADIENT_BACKOFF)[:2])
        for s in results[-END_GRADIENT_SAMPLES:]:
            g = mediant(g, s.gradient)
        results.append(Sample(self.point_at(n - 1), g))
        return results

    def outline(self) -> Outline:
        """Closed ring: start cap, left side, end cap, right side reversed."""
        if len(self.points) < 2:
            return [tuple(p) for p in self.points.tolist()]
        results = self.samples()
        min_dist = self.options.size * self.options.smoothing
        left: list[Vertex] = []; right: list[Vertex] = []
        l0 = r0 = None                  # last committed vertex per side
        plu = pru = None                # last travel direction per side
        last = len(results) - 1
        corners = 0

        for i, (point, gradient) in enumerate(results):
            if 0 < i < last and dot(gradient, results[i+1].gradient) < 0:
                v = mul(per(results[i-1].gradient), self.radius(point[2]))
                l1 = (*add(point, v), point[2]); r1 = (*sub(point, v), point[2])
                if l0 is not None:
                    plu = unit(sub(l1, l0))
                if r0 is not None:
                    pru = unit(sub(r1, r0))
                left.extend(fan(l1, point)); right.extend(fan(r1, point, -1.0))
                l0 = left[-1]; r0 = right[-1]
                corners += 1
                continue

            v = mul(per(gradient), self.radius(point[2]))
            tl = (*add(point, v), point[2]); tr = (*sub(point, v), point[2])
            add_left = add_right = False
            tlu = tru = None
            if l0 is None or i == last:
                add_left = True
            else:
                tlu = unit(sub(tl, l0))
                if plu is None:
                    plu = tlu
                elif dot(tlu, gradient) > 0 and dist(l0, tl) > min_dist:
                    add_left = True
            if r0 is None or i == last:
                add_right = True
            else:
                tru = unit(sub(tr, r0))
                if pru is None:
                    pru = tru
                elif dot(tru, gradient) > 0 and dist(r0, tr) > min_dist:
                    add_right = True
            if add_left:
                left.append(tl); l0 = tl; plu = tlu
            if add_right:
                right.append(tr); r0 = tr; pru = tru

        start_cap = fan(right[0], results[0].point)
        end_cap = fan(left[-1], results[-1].point)[1:-1] if self.options.cap_end else []
        log.debug("spline outline: %d samples, %d corners, %d left, %d right",
                  len(results), corners, len(left), len(right))
        return [*start_cap, *left, *end_cap, *reversed(right)]


def build_spline_outline(points: list[PathPoint], options: StrokeOptions) -> Outline:
    return Spline(points, options).outline()

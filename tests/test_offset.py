"""Tests for inkstroke/offset.py — direct offset-curve outline."""
import math
import pytest
from shapely.geometry import Polygon
from inkstroke.options import StrokeOptions
from inkstroke.points import to_input_points
from inkstroke.normalize import stroke_points
from inkstroke.offset import OffsetState, build_offset_outline
from inkstroke.constants import OFFSET_SMOOTH_DIST


def _state(raw, opts):
    state = OffsetState.from_options(opts)
    for p in stroke_points(to_input_points(raw), opts.streamline):
        state.push(p)
    return state


def _flat(ring):
    return [c for v in ring for c in v]


@pytest.fixture(scope="module")
def line_state(line3, flat_opts):
    return _state(line3, flat_opts)


@pytest.fixture(scope="module")
def line_outline(line_state):
    return line_state.outline()


class TestStraightLine:
    def test_vertex_count(self, line_outline):
        # 5 start cap + 2 left + 4 end cap + head + 2 right + closing vertex
        assert len(line_outline) == 15

    def test_closed(self, line_outline):
        assert line_outline[0] == line_outline[-1]

    def test_extent(self, line_outline):
        xs = [v[0] for v in line_outline]; ys = [v[1] for v in line_outline]
        assert min(xs) == pytest.approx(-4)
        assert max(xs) == pytest.approx(24)
        assert min(ys) == pytest.approx(-4)
        assert max(ys) == pytest.approx(4)

    def test_symmetric(self, line_outline):
        for x, y in line_outline:
            assert any(abs(x - u) < 1e-9 and abs(y + v) < 1e-9 for u, v in line_outline)

    def test_area_is_band_plus_caps(self, line_outline):
        area = Polygon(line_outline).area
        assert 160 < area < 160 + 16 * math.pi

    def test_committed_midpoints(self, line_state):
        assert [c for v in line_state.left for c in v] == pytest.approx([5, -4, 15, -4])
        # right commits are prepended: newest first
        assert [c for v in line_state.right for c in v] == pytest.approx([15, 4, 5, 4])

    def test_anchors_track_last_projection(self, line_state):
        assert line_state.t0 == pytest.approx((20, -4))
        assert line_state.t1 == pytest.approx((20, 4))

    def test_start_cap_goes_behind_first_point(self, line_outline):
        assert line_outline[2] == pytest.approx((-4, 0), abs=1e-9)

    def test_ring_starts_on_start_cap(self, line_outline, line_state):
        assert line_outline[0] == pytest.approx(line_state.start_right)
        assert line_outline[0] == pytest.approx((0, 4), abs=1e-9)
        # end cap runs from the head's left projection to its right one
        assert line_outline[7] == pytest.approx(line_state.head_left)
        assert line_outline[11] == line_state.head_right


class TestSimplification:
    def test_dense_points_are_thinned(self, flat_opts):
        raw = [(x, 0) for x in range(31)]
        state = _state(raw, flat_opts)
        assert 0 < len(state.left) < len(raw) / 2
        assert len(state.left) == len(state.right)

    def test_commit_needs_more_than_smooth_distance(self, flat_opts):
        step = OFFSET_SMOOTH_DIST * 0.9
        state = _state([(0, 0), (step, 0)], flat_opts)
        assert state.left == [] and len(state.right) == 0

    def test_sides_commit_independently(self, flat_opts):
        # counter-clockwise arc: the left side is the outer, longer edge
        raw = [(6 * math.cos(i * 0.4), 6 * math.sin(i * 0.4)) for i in range(10)]
        state = _state(raw, flat_opts)
        assert len(state.left) > len(state.right)
        ring = state.outline()
        assert ring[0] == ring[-1]


class TestDegenerate:
    def test_empty(self):
        assert OffsetState().outline() == []
        assert build_offset_outline([], StrokeOptions()) == []

    def test_single_point(self, flat_opts):
        assert _state([(3, 4)], flat_opts).outline() == [(3, 4)]

    def test_two_points_closed(self, flat_opts):
        ring = _state([(0, 0), (30, 0)], flat_opts).outline()
        assert ring[0] == ring[-1]
        assert len(ring) > 5


def test_pressure_changes_width():
    opts = StrokeOptions(size=8, thinning=0.5, streamline=0)
    thin = _state([(0, 0, 0.0), (10, 0, 0.0), (20, 0, 0.0)], opts)
    thick = _state([(0, 0, 1.0), (10, 0, 1.0), (20, 0, 1.0)], opts)
    assert thin.head_left[1] == pytest.approx(-2)
    assert thick.head_left[1] == pytest.approx(-4)


class TestRepeatedSamples:
    RAW = [(0, 0), (0, 10), (0, 10), (0, 20), (0, 30)]

    def test_sides_keep_full_width(self, flat_opts):
        state = _state(self.RAW, flat_opts)
        assert [v[0] for v in state.left] == pytest.approx([4, 4, 4])
        assert [v[0] for v in state.right] == pytest.approx([-4, -4, -4])

    def test_same_outline_as_without_repeat(self, flat_opts):
        deduped = self.RAW[:2] + self.RAW[3:]
        assert _flat(_state(self.RAW, flat_opts).outline()) == \
            pytest.approx(_flat(_state(deduped, flat_opts).outline()))

    def test_pressure_only_update(self, flat_opts):
        raw = [(0, 0, 0.5), (0, 10, 0.5), (0, 10, 0.9), (0, 20, 0.5)]
        state = _state(raw, flat_opts)
        assert state.head_left == pytest.approx((4, 20))
        assert all(x == pytest.approx(4) for x, _ in state.left)
        assert all(x == pytest.approx(-4) for x, _ in state.right)

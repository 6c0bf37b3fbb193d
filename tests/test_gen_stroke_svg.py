"""Tests for the gen_stroke_svg command-line renderer."""
import json
import pytest
from gen_stroke_svg import load_stroke, render_svg, main
from inkstroke.options import StrokeOptions


@pytest.fixture
def stroke_file(tmp_path, wave):
    p = tmp_path / "stroke.json"
    p.write_text(json.dumps([list(pt) for pt in wave]))
    return p


class TestLoadStroke:
    def test_plain_list(self, stroke_file, wave):
        points, opts = load_stroke(str(stroke_file))
        assert len(points) == len(wave)
        assert opts == {}

    def test_wrapped(self, tmp_path):
        p = tmp_path / "s.json"
        p.write_text(json.dumps({"points": [{"x": 0, "y": 0}], "options": {"size": 4}}))
        points, opts = load_stroke(str(p))
        assert points == [{"x": 0, "y": 0}]
        assert opts == {"size": 4}


class TestRenderSvg:
    def test_margin(self, line3, flat_opts):
        doc = render_svg(line3, flat_opts)
        # outline spans x -4..24, y -4..4
        assert 'viewBox="-14 -14 48 28"' in doc

    def test_empty(self):
        doc = render_svg([], StrokeOptions())
        assert '<path d=""' in doc


class TestMain:
    def test_writes_file(self, stroke_file, tmp_path, capsys):
        out = tmp_path / "out.svg"
        assert main([str(stroke_file), "-o", str(out)]) == 0
        assert out.read_text().startswith("<svg")
        assert "wrote" in capsys.readouterr().out

    def test_stdout(self, stroke_file, capsys):
        assert main([str(stroke_file), "--strategy", "spline", "--clip"]) == 0
        assert capsys.readouterr().out.startswith("<svg")

    def test_flags_override_file_options(self, tmp_path, line3, capsys):
        p = tmp_path / "s.json"
        p.write_text(json.dumps({"points": line3, "options": {"size": 100}}))
        assert main([str(p), "--size", "8", "--thinning", "0", "--streamline", "0"]) == 0
        assert 'viewBox="-14 -14 48 28"' in capsys.readouterr().out

    def test_bad_json(self, tmp_path, capsys):
        p = tmp_path / "bad.json"
        p.write_text("{not json")
        assert main([str(p)]) == 2
        assert capsys.readouterr().err.startswith("gen_stroke_svg:")

    def test_unknown_option(self, tmp_path, capsys):
        p = tmp_path / "s.json"
        p.write_text(json.dumps({"points": [], "options": {"colour": "red"}}))
        assert main([str(p)]) == 2
        assert "colour" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "nope.json")]) == 2

    def test_zero_size(self, stroke_file, capsys):
        assert main([str(stroke_file), "--size", "0"]) == 2
        assert "size must be a positive number" in capsys.readouterr().err

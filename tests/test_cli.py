"""Tests for the chord-chart command line."""

import io
import json
import logging
from pathlib import Path

import pytest

from chord_chart.cli import build_parser, chord_to_dict, main
from chord_chart.converter import parse_chord
from chord_chart.models import Chord

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"


@pytest.fixture
def chart_file(tmp_path: Path) -> Path:
    path = tmp_path / "chart.txt"
    path.write_text("C       G       Am      F\nLet it be\n", encoding="utf-8")
    return path


class TestParser:
    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_negative_transpose(self):
        args = build_parser().parse_args(["chord", "C", "-t", "-3"])
        assert args.transpose == -3


class TestRender:
    def test_render_untransposed(self, chart_file, capsys):
        assert main(["render", str(chart_file)]) == 0
        assert capsys.readouterr().out == "C       G       Am      F\nLet it be\n"

    def test_render_transposed(self, chart_file, capsys):
        assert main(["render", str(chart_file), "--transpose", "2"]) == 0
        assert capsys.readouterr().out == "D       A       Bm      G\nLet it be\n"

    def test_render_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("G  D\nhello"))
        assert main(["render", "-", "-t", "-2"]) == 0
        assert capsys.readouterr().out == "F  C\nhello"

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert main(["render", str(tmp_path / "nope.txt")]) == 1
        assert "Error" in caplog.text


class TestSegment:
    def test_segment_stdout(self, chart_file, capsys):
        assert main(["segment", str(chart_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        lines = data["lines"]
        assert [line["type"] for line in lines] == ["chordLine", "lyrics", "lyrics"]
        chords = [span["chord"]["text"] for span in lines[0]["spans"] if span["type"] == "chord"]
        assert chords == ["C", "G", "Am", "F"]
        assert lines[1]["spans"] == [{"type": "other", "value": "Let it be", "rendered": "Let it be"}]

    def test_segment_to_file(self, chart_file, tmp_path):
        out = tmp_path / "out.json"
        assert main(["segment", str(chart_file), "-o", str(out), "--pretty", "-t", "1"]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        first_chord = data["lines"][0]["spans"][0]["chord"]
        assert first_chord["text"] == "C#"
        assert first_chord["harte"] == "C#:maj"

    def test_segment_transposed_spans(self, chart_file, capsys):
        """Test that spans keep the source text next to the transposed text."""
        assert main(["segment", str(chart_file), "-t", "1"]) == 0
        first = json.loads(capsys.readouterr().out)["lines"][0]["spans"][0]
        assert first["value"] == "C"
        assert first["rendered"] == "C#"
        assert first["chord"]["text"] == "C#"

    def test_segment_fixture(self, capsys):
        assert main(["segment", str(TESTDATA_DIR / "let_it_be.txt")]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["lines"][0]["type"] == "lyrics"
        assert data["lines"][1]["type"] == "chordLine"


class TestChord:
    def test_chord_transposed(self, capsys):
        assert main(["chord", "C#m7/G", "-t", "-1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["text"] == "Cm7/F#"
        assert data["root"] == "C"
        assert data["suffix"] == "m7"
        assert data["bass"] == "F#"
        assert data["harte"] == "C:min7/F#"

    def test_not_a_chord(self, capsys):
        assert main(["chord", "Hello"]) == 1
        assert capsys.readouterr().out == ""

    def test_chord_to_dict_unknown_suffix(self):
        data = chord_to_dict(Chord(root="C", suffix="7#9b13"))
        assert data["harte"] is None
        assert data["text"] == "C7#9b13"

    def test_chord_to_dict_pitch_classes(self):
        assert chord_to_dict(parse_chord("C"))["pitch_classes"] == [0, 4, 7]

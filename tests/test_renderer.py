"""Tests for rendering segmented charts at a transpose offset."""

import pytest

from chord_chart.chart import ChordSpan, OtherSpan, render, render_line, render_span, segment
from chord_chart.converter import parse_chord


class TestRenderSpan:
    def test_other_span_unchanged(self) -> None:
        assert render_span(OtherSpan(value="   "), 5) == "   "

    def test_chord_span_transposed(self) -> None:
        span = ChordSpan(value="Am", chord=parse_chord("Am"))
        assert render_span(span, 2) == "Bm"

    def test_whitespace_around_full_name_kept(self) -> None:
        span = ChordSpan(value="  G7 ", chord=parse_chord("G7"))
        assert render_span(span, -2) == "  F7 "

    def test_offset_zero_reproduces_source(self) -> None:
        span = ChordSpan(value="C♯m", chord=parse_chord("C♯m"))
        assert render_span(span) == "C♯m"

    def test_unknown_span_type(self) -> None:
        with pytest.raises(TypeError):
            render_span("C", 1)  # type: ignore[arg-type]


class TestRenderLine:
    def test_chord_line_transposed(self) -> None:
        (line,) = segment("C       G       Am      F")
        assert render_line(line, 2) == "D       A       Bm      G"

    def test_whitespace_spans_unchanged(self) -> None:
        (line,) = segment("C       G       Am      F")
        rendered = [render_span(span, 2) for span in line.spans]
        assert [len(v) for v in rendered[1::2]] == [7, 7, 6]

    def test_lyrics_line_never_transposed(self) -> None:
        (line,) = segment("I Am free")
        assert render_line(line, 2) == "I Am free"

    def test_slash_chord_respelled(self) -> None:
        (line, _) = segment("C#m7/G\nLyrics line here")
        assert render_line(line, 0) == "C#m7/G"
        assert render_line(line, -1) == "Cm7/F#"


class TestRender:
    def test_keeps_line_endings(self) -> None:
        text = "G    D\r\nHello world\r\n"
        assert render(segment(text), 0) == text
        assert render(segment(text), 2) == "A    E\r\nHello world\r\n"

    def test_empty_chart(self) -> None:
        assert render(segment(""), 3) == ""

    @pytest.mark.parametrize("semitones", [-12, 0, 12, 24])
    def test_octaves_reproduce_source(self, semitones: int) -> None:
        text = "Intro:  E#  |  Cb/Fb\nwords"
        assert render(segment(text), semitones) == text

    def test_out_of_table_spellings_respelled_when_moved(self) -> None:
        assert render(segment("Cb  E#m"), 1) == "C  F#m"
        assert render(segment("Cb  E#m"), -1) == "Bb  Em"

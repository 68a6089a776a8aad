"""Chord chart parsing and transposition.

This library parses plain-text chord charts (lyrics with chord symbols
aligned above them) into lines and spans, and transposes the chords
while keeping them lined up with the lyrics.

Examples
--------
>>> from chord_chart import segment, render, try_parse

>>> # Parse and transpose a single chord
>>> chord = try_parse("C#m7/G")
>>> chord.transpose(-1).to_text()
'Cm7/F#'

>>> # Segment a chart once, render it at any offset
>>> lines = segment("C       G       Am      F\\nLet it be")
>>> [line.type for line in lines]
['chordLine', 'lyrics']
>>> render(lines, 2)
'D       A       Bm      G\\nLet it be'
"""

from chord_chart.chart import (
    ChartView,
    ChordChartLine,
    ChordChartSpan,
    ChordLine,
    ChordSpan,
    LyricsLine,
    OtherSpan,
    join_lines,
    next_transpose,
    render,
    render_line,
    segment,
)
from chord_chart.converter import is_chord, parse_chord, suffix_to_harte, to_text, transpose, try_parse
from chord_chart.models import Chord

__all__ = [
    "ChartView",
    "Chord",
    "ChordChartLine",
    "ChordChartSpan",
    "ChordLine",
    "ChordSpan",
    "LyricsLine",
    "OtherSpan",
    "is_chord",
    "join_lines",
    "next_transpose",
    "parse_chord",
    "render",
    "render_line",
    "segment",
    "suffix_to_harte",
    "to_text",
    "transpose",
    "try_parse",
]

"""Chord chart segmentation and rendering.

This sub-package turns a plain-text chord chart into classified lines
and spans, and renders them back at any transpose offset without
disturbing the alignment of chords over lyrics.
"""

from chord_chart.chart.models import (
    ChordChartLine,
    ChordChartSpan,
    ChordLine,
    ChordSpan,
    LyricsLine,
    OtherSpan,
    Token,
)
from chord_chart.chart.renderer import render, render_line, render_span
from chord_chart.chart.segmenter import join_lines, segment
from chord_chart.chart.view import ChartView, next_transpose

__all__ = [
    "ChartView",
    "ChordChartLine",
    "ChordChartSpan",
    "ChordLine",
    "ChordSpan",
    "LyricsLine",
    "OtherSpan",
    "Token",
    "join_lines",
    "next_transpose",
    "render",
    "render_line",
    "render_span",
    "segment",
]

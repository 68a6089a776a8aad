"""Render segmented chord charts at a transpose offset.

Segmentation happens once per chart; rendering happens on every change of
the transpose offset and only touches chord spans.
"""

from __future__ import annotations

from collections.abc import Iterable

from chord_chart.chart.models import ChordChartLine, ChordChartSpan, ChordLine, ChordSpan, LyricsLine, OtherSpan
from chord_chart.pitch_class import SEMITONES


def render_span(span: ChordChartSpan, semitones: int = 0) -> str:
    """Render one span, transposing it if it is a chord span.

    The chord's source text (``chord.full_name``) is replaced inside the
    span value by the transposed chord; anything around it is kept. A
    whole number of octaves gives back the source text unchanged.

    Parameters
    ----------
    span : ChordChartSpan
        The span to render.
    semitones : int
        Transpose offset.

    Returns
    -------
    str
        The rendered span text.

    Examples
    --------
    >>> from chord_chart.converter import parse_chord
    >>> render_span(ChordSpan(value="Am", chord=parse_chord("Am")), 2)
    'Bm'
    """
    if isinstance(span, OtherSpan):
        return span.value
    if isinstance(span, ChordSpan):
        if semitones % SEMITONES == 0:
            return span.value
        chord = span.chord
        before, found, after = span.value.partition(chord.full_name)
        if not found:
            return span.value
        return before + chord.transpose(semitones).to_text() + after
    msg = f"Unknown span type: {type(span).__name__}"
    raise TypeError(msg)


def render_line(line: ChordChartLine, semitones: int = 0) -> str:
    """Render one line, without its terminator.

    Lyrics lines are returned as they are. In chord lines each chord span
    is transposed and the whitespace spans are left untouched.
    """
    if isinstance(line, LyricsLine):
        return line.text
    if isinstance(line, ChordLine):
        return "".join(render_span(span, semitones) for span in line.spans)
    msg = f"Unknown line type: {type(line).__name__}"
    raise TypeError(msg)


def render(lines: Iterable[ChordChartLine], semitones: int = 0) -> str:
    """Render a whole chart, keeping the original line terminators.

    Examples
    --------
    >>> from chord_chart.chart.segmenter import segment
    >>> render(segment("C       G       Am      F"), 2)
    'D       A       Bm      G'
    """
    return "".join(render_line(line, semitones) + line.ending for line in lines)

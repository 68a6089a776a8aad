"""Chord chart segmentation.

This module provides the segment() function that turns raw chart text
into classified lines and spans, and join_lines() which turns them back
into the exact source text.
"""

from __future__ import annotations

import logging
import re

from chord_chart.chart.chord_detector import classify_tokens, is_chord_line
from chord_chart.chart.models import (
    ChordChartLine,
    ChordChartSpan,
    ChordLine,
    ChordSpan,
    LyricsLine,
    OtherSpan,
    Token,
)
from chord_chart.chart.tokenizer import tokenize_line

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[tuple[str, str]]:
    """Split text into lines, keeping each line's terminator.

    Parameters
    ----------
    text : str
        The raw chart text.

    Returns
    -------
    list[tuple[str, str]]
        ``(line, ending)`` pairs. The last pair has an empty ending, so
        text ending in a line break yields a final empty line.

    Examples
    --------
    >>> split_lines("C\\r\\nHello\\n")
    [('C', '\\r\\n'), ('Hello', '\\n'), ('', '')]
    """
    lines: list[tuple[str, str]] = []
    pos = 0
    for match in LINE_BREAK_RE.finditer(text):
        lines.append((text[pos : match.start()], match.group()))
        pos = match.end()
    lines.append((text[pos:], ""))
    return lines


def build_chord_spans(line: str, tokens: list[Token]) -> tuple[ChordChartSpan, ...]:
    """Cut a chord line into chord spans and the text between them.

    Whitespace and non-chord tokens between two chords are merged into a
    single "other" span, so the spans alternate where they can.

    Parameters
    ----------
    line : str
        The chord line.
    tokens : list[Token]
        The line's classified tokens.

    Returns
    -------
    tuple[ChordChartSpan, ...]
        Spans covering ``line`` exactly.
    """
    spans: list[ChordChartSpan] = []
    pending_start = 0

    for token in tokens:
        if token.kind != "chord" or token.chord is None:
            continue
        if token.start > pending_start:
            spans.append(OtherSpan(value=line[pending_start : token.start]))
        spans.append(ChordSpan(value=token.text, chord=token.chord))
        pending_start = token.end

    if pending_start < len(line):
        spans.append(OtherSpan(value=line[pending_start:]))

    return tuple(spans)


def segment_line(line: str, ending: str = "") -> ChordChartLine:
    """Classify one line and split it into spans.

    Parameters
    ----------
    line : str
        The line to segment, without its terminator.
    ending : str
        The terminator that followed it in the source.

    Returns
    -------
    ChordChartLine
        A ChordLine with chord spans, or a LyricsLine holding the whole
        line in one span.
    """
    tokens = classify_tokens(tokenize_line(line))
    if is_chord_line(tokens):
        return ChordLine(spans=build_chord_spans(line, tokens), ending=ending)
    return LyricsLine(spans=(OtherSpan(value=line),), ending=ending)


def segment(text: str | None) -> tuple[ChordChartLine, ...]:
    """Segment a raw chord chart into classified lines.

    This is the main entry point. Every line is classified on its own;
    nothing carries over from one line to the next.

    Parameters
    ----------
    text : str | None
        The raw chart text. None or "" is a chart with nothing to show.

    Returns
    -------
    tuple[ChordChartLine, ...]
        Lines in source order. Empty for absent or empty text.

    Examples
    --------
    >>> lines = segment("C#m7/G\\nLyrics line here")
    >>> [line.type for line in lines]
    ['chordLine', 'lyrics']
    >>> lines[0].chords[0].suffix
    'm7'
    >>> segment("")
    ()
    """
    if not text:
        return ()

    lines = tuple(segment_line(line, ending) for line, ending in split_lines(text))

    logger.debug(
        "Segmented chart: %d lines, %d chord lines",
        len(lines),
        sum(1 for line in lines if isinstance(line, ChordLine)),
    )
    return lines


def join_lines(lines: tuple[ChordChartLine, ...] | list[ChordChartLine]) -> str:
    """Rebuild the source text from segmented lines.

    Examples
    --------
    >>> text = "G    D\\nHello world\\r\\n"
    >>> join_lines(segment(text)) == text
    True
    """
    return "".join(line.text + line.ending for line in lines)

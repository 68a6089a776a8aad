"""Loaded chart state: cached segmentation plus a live transpose offset.

A ChartView is what a details screen holds while one chord chart is open.
The chart is segmented once when its text is loaded; pressing transpose
up or down only re-renders the chord spans.
"""

from __future__ import annotations

import logging

from chord_chart.chart.models import ChordChartLine
from chord_chart.chart.renderer import render
from chord_chart.chart.segmenter import segment
from chord_chart.pitch_class import SEMITONES

logger = logging.getLogger(__name__)


def next_transpose(current: int, increment: int) -> int:
    """Step a transpose counter by one half step.

    The counter stays within -11..11; reaching +12 or -12 resets it to 0.

    Parameters
    ----------
    current : int
        The current offset.
    increment : int
        +1 or -1.

    Returns
    -------
    int
        The new offset.

    Raises
    ------
    ValueError
        If ``increment`` is not +1 or -1.

    Examples
    --------
    >>> next_transpose(11, 1)
    0
    >>> next_transpose(0, -1)
    -1
    """
    if increment not in (1, -1):
        msg = f"Transpose increment must be 1 or -1, got {increment}"
        raise ValueError(msg)

    result = current + increment
    if abs(result) >= SEMITONES:
        return 0
    return result


class ChartView:
    """One open chord chart.

    Parameters
    ----------
    chart_id : str
        Identifier of the chart (e.g., "ChordSheets/123").
    text : str | None
        Plain-text chord chart. None for charts that only exist as
        scanned images; those are never segmented.
    title : str
        Display title.
    """

    def __init__(self, chart_id: str, text: str | None = None, title: str = "") -> None:
        self.chart_id = chart_id
        self.title = title
        self.transpose = 0
        self._text: str | None = None
        self._lines: tuple[ChordChartLine, ...] = ()
        self.load(text)

    @property
    def text(self) -> str | None:
        return self._text

    @property
    def has_text(self) -> bool:
        """Whether the chart has plain text to segment and transpose."""
        return bool(self._text)

    @property
    def lines(self) -> tuple[ChordChartLine, ...]:
        """Segmented lines for the loaded text."""
        return self._lines

    def load(self, text: str | None) -> None:
        """Load chart text, re-segmenting only if it changed."""
        if text == self._text and (self._lines or not text):
            return

        self._text = text
        self._lines = segment(text) if text else ()
        logger.debug("Loaded chart %s: %d lines", self.chart_id, len(self._lines))

    def bump_transpose(self, increment: int) -> int:
        """Move the transpose offset one half step up (+1) or down (-1)."""
        self.transpose = next_transpose(self.transpose, increment)
        return self.transpose

    def render(self) -> str:
        """Render the chart at the current transpose offset."""
        return render(self._lines, self.transpose)

    def __repr__(self) -> str:
        return f"ChartView(chart_id={self.chart_id!r}, lines={len(self._lines)}, transpose={self.transpose})"

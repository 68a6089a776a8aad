"""Data models for segmented chord charts.

A chart is a sequence of lines. Each line is either a lyrics line or a
chord line, and each line is a sequence of spans that cover it exactly:
joining the span values gives back the source line, whitespace included.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal

if TYPE_CHECKING:
    from chord_chart.models import Chord


SpanType = Literal["other", "chord"]
LineType = Literal["lyrics", "chordLine"]
TokenKind = Literal["chord", "word", "punct", "marker", "other"]


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.
    kind : TokenKind
        The token classification.
    chord : Chord | None
        Parsed Chord object if kind is "chord", None otherwise.

    Examples
    --------
    >>> token = Token(text="Gm7", start=0, end=3, kind="chord")
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int
    kind: TokenKind
    chord: Chord | None = None


@dataclass(frozen=True)
class OtherSpan:
    """Plain chart text: lyrics, padding, or any non-chord token.

    Parameters
    ----------
    value : str
        The exact source text of the span.
    """

    type: ClassVar[SpanType] = "other"

    value: str


@dataclass(frozen=True)
class ChordSpan:
    """A chord symbol within a chord line.

    Parameters
    ----------
    value : str
        The exact source text of the span. ``chord.full_name`` occurs in it;
        any other characters are alignment whitespace.
    chord : Chord
        The parsed chord.
    """

    type: ClassVar[SpanType] = "chord"

    value: str
    chord: Chord


ChordChartSpan = OtherSpan | ChordSpan


@dataclass(frozen=True)
class LyricsLine:
    """A line of lyrics, headings or anything that is not a chord line.

    Parameters
    ----------
    spans : tuple[OtherSpan, ...]
        Exactly one span holding the whole line.
    ending : str
        The line terminator that followed the line in the source
        ("\\n", "\\r\\n", "\\r"), or "" for the last line.
    """

    type: ClassVar[LineType] = "lyrics"

    spans: tuple[OtherSpan, ...]
    ending: str = ""

    @property
    def text(self) -> str:
        """The source line without its terminator."""
        return "".join(span.value for span in self.spans)


@dataclass(frozen=True)
class ChordLine:
    """A line of chord symbols aligned above lyrics.

    Parameters
    ----------
    spans : tuple[ChordChartSpan, ...]
        Chord spans interleaved with the whitespace between them,
        left to right.
    ending : str
        The line terminator that followed the line in the source.
    """

    type: ClassVar[LineType] = "chordLine"

    spans: tuple[ChordChartSpan, ...]
    ending: str = ""

    @property
    def text(self) -> str:
        """The source line without its terminator."""
        return "".join(span.value for span in self.spans)

    @property
    def chords(self) -> tuple[Chord, ...]:
        """The chords of this line, left to right."""
        return tuple(span.chord for span in self.spans if isinstance(span, ChordSpan))


ChordChartLine = LyricsLine | ChordLine

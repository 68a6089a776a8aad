"""Chord detection and line classification for chord charts.

A line is either a chord line or a lyrics line. The decision is a pure
predicate over the line's tokens, made independently for every line:

* at least one token is a chord,
* no token is a word (an alphabetic token that is not a chord or a
  chart marker), and
* chords make up at least ``CHORD_LINE_THRESHOLD`` of the tokens that
  are not markers.

Markers are repeat counts ("x2", "(4x)"), "N.C.", bar lines ("|", "||:")
and a leading label ("Intro:", "[Chorus]", "Verse 2:"); they neither
count for nor against a chord line.
"""

from __future__ import annotations

import re

from chord_chart.chart.models import LineType, Token
from chord_chart.chart.tokenizer import tokenize_line
from chord_chart.converter import try_parse

CHORD_LINE_THRESHOLD = 0.6

REPEAT_MARK_RE = re.compile(r"^\(?(?:[xX×]\d+|\d+[xX×])\)?$")
NO_CHORD_RE = re.compile(r"^\(?N\.?C\.?\)?$")
BAR_LINE_RE = re.compile(r"^[|:/%]+$")
LABEL_RE = re.compile(r"^(?:[A-Za-z][A-Za-z-]*\d*:|\[[^\]]+\]:?)$")

# Labels split over two tokens: "Verse 2:", "[Pre Chorus]"
LABEL_NUMBER_RE = re.compile(r"^\d+[a-z]?:$")
OPEN_BRACKET_RE = re.compile(r"^\[[^\]]*$")
CLOSE_BRACKET_RE = re.compile(r"^[^\[]*\]:?$")


def classify_token(token: Token, first: bool = False) -> Token:
    """Classify a single token as chord, marker, punct, word, or other.

    Parameters
    ----------
    token : Token
        The token to classify (with kind="other").
    first : bool
        Whether this is the first token of its line; only a first token
        may be a label marker.

    Returns
    -------
    Token
        A new token with updated kind and chord fields.

    Examples
    --------
    >>> from chord_chart.chart.models import Token
    >>> classify_token(Token(text="Gm7", start=0, end=3, kind="other")).kind
    'chord'
    >>> classify_token(Token(text="x2", start=0, end=2, kind="other")).kind
    'marker'
    """
    text = token.text

    chord = try_parse(text)
    if chord is not None:
        return Token(text=text, start=token.start, end=token.end, kind="chord", chord=chord)

    if (
        REPEAT_MARK_RE.match(text)
        or NO_CHORD_RE.match(text)
        or BAR_LINE_RE.match(text)
        or (first and LABEL_RE.match(text))
    ):
        return Token(text=text, start=token.start, end=token.end, kind="marker")

    if all(not c.isalnum() for c in text):
        return Token(text=text, start=token.start, end=token.end, kind="punct")

    if any(c.isalpha() for c in text):
        return Token(text=text, start=token.start, end=token.end, kind="word")

    return token


def leading_label_length(tokens: list[Token]) -> int:
    """Return how many leading tokens form a two-token label, or 0.

    Examples
    --------
    >>> from chord_chart.chart.tokenizer import tokenize_line
    >>> leading_label_length(tokenize_line("Verse 2:  C  G"))
    2
    >>> leading_label_length(tokenize_line("Verse:  C  G"))
    0
    """
    if len(tokens) < 2:
        return 0

    first, second = tokens[0].text, tokens[1].text
    if first.isalpha() and LABEL_NUMBER_RE.match(second):
        return 2
    if OPEN_BRACKET_RE.match(first) and CLOSE_BRACKET_RE.match(second):
        return 2
    return 0


def classify_tokens(tokens: list[Token]) -> list[Token]:
    """Classify all tokens of one line, in order."""
    label = leading_label_length(tokens)
    classified = [Token(text=t.text, start=t.start, end=t.end, kind="marker") for t in tokens[:label]]
    classified.extend(classify_token(t, first=(i == 0)) for i, t in enumerate(tokens) if i >= label)
    return classified


def is_chord_line(tokens: list[Token]) -> bool:
    """Decide whether classified tokens make up a chord line.

    Parameters
    ----------
    tokens : list[Token]
        Classified tokens of one line.

    Returns
    -------
    bool
        True for a chord line, False for a lyrics line.
    """
    chord_count = sum(1 for t in tokens if t.kind == "chord")
    if chord_count == 0:
        return False

    if any(t.kind == "word" for t in tokens):
        return False

    counted = sum(1 for t in tokens if t.kind != "marker")
    return chord_count / counted >= CHORD_LINE_THRESHOLD


def classify_line(line: str, tokens: list[Token] | None = None) -> LineType:
    """Classify a line as "chordLine" or "lyrics".

    Parameters
    ----------
    line : str
        The line to classify.
    tokens : list[Token] | None
        Pre-classified tokens, or None to classify internally.

    Returns
    -------
    LineType
        The line classification.

    Examples
    --------
    >>> classify_line("C       G       Am      F")
    'chordLine'
    >>> classify_line("Amazing grace, how sweet the sound")
    'lyrics'
    >>> classify_line("")
    'lyrics'
    """
    if tokens is None:
        tokens = classify_tokens(tokenize_line(line))

    return "chordLine" if is_chord_line(tokens) else "lyrics"

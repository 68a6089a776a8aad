"""Column-aware tokenizer for chord charts.

Tokens keep their start and end columns so that a chord line can be cut
back into spans without losing any of the padding between chords.
"""

import re

from chord_chart.chart.models import Token

TOKEN_RE = re.compile(r"\S+")


def tokenize_line(line: str) -> list[Token]:
    """Tokenize a line preserving column spans.

    Splits on whitespace runs while tracking the start and end column of
    each token. The whitespace itself is not returned; it is whatever lies
    between consecutive tokens.

    Parameters
    ----------
    line : str
        The line to tokenize, without its line terminator.

    Returns
    -------
    list[Token]
        Tokens with text, start (inclusive), end (exclusive), and kind
        set to "other" (classification happens in chord_detector).

    Examples
    --------
    >>> tokens = tokenize_line("Gm     C")
    >>> [(t.text, t.start, t.end) for t in tokens]
    [('Gm', 0, 2), ('C', 7, 8)]

    >>> tokens = tokenize_line("  Hello  world ")
    >>> [(t.text, t.start, t.end) for t in tokens]
    [('Hello', 2, 7), ('world', 9, 14)]
    """
    return [
        Token(text=match.group(), start=match.start(), end=match.end(), kind="other")
        for match in TOKEN_RE.finditer(line)
    ]

"""Chord symbol parsing and notation conversion.

This module holds the chord-symbol grammar used to tell chords apart from
ordinary chart text, plus the mapping from chord suffixes (pychord-style
quality names such as "m7") to Harte shorthand (e.g., "min7").

Grammar::

    Root [Accidental] Suffix* [ "/" Root [Accidental] ]

where Root is one of A-G, Accidental is one of ``# b ♯ ♭`` and each
suffix part is a known quality word, an extension number or a
parenthesised group of those.

The grammar is only a pre-filter: it also matches nonsense such as "Amm"
or "Gsussus". A suffix must either appear in ``SUFFIX_TO_HARTE_QUALITY``
(which covers chords pychord does not know, like "6/9" and "°7") or be a
quality pychord can build.
"""

from __future__ import annotations

import re

from chord_chart.models import Chord
from chord_chart.pitch_class import normalize_note

# Tokens longer than this are never chords
MAX_CHORD_LENGTH = 15

_ACCIDENTAL = r"[#b♯♭]"
_SUFFIX_PART = (
    r"(?:"
    r"6/9|maj|min|m|M|dim|aug|sus|alt|"  # quality words
    rf"(?:add|no){_ACCIDENTAL}?\d{{1,2}}|"  # added and omitted tones: add9, no3
    r"[°ø+\-Δ]|"  # quality glyphs: C°, Cø, C+, C-, CΔ7
    rf"{_ACCIDENTAL}?\d{{1,2}}"  # extensions and alterations: 7, 9, b5, #11
    r")"
)
_SUFFIX = rf"(?:{_SUFFIX_PART}|\((?:{_SUFFIX_PART}|,)+\))*"

CHORD_RE = re.compile(
    rf"^(?P<root>[A-G]{_ACCIDENTAL}?)"
    rf"(?P<suffix>{_SUFFIX})"
    rf"(?:/(?P<bass>[A-G]{_ACCIDENTAL}?))?$"
)

# Mapping from chord suffixes to Harte shorthand
SUFFIX_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "M": "maj",
    "maj": "maj",
    "m": "min",
    "min": "min",
    "-": "min",
    "m7": "min7",
    "min7": "min7",
    "-7": "min7",
    "7": "7",
    "7#9": "7(#9)",
    "7b9": "7(b9)",
    "maj7": "maj7",
    "M7": "maj7",
    "Δ": "maj7",
    "Δ7": "maj7",
    "dim": "dim",
    "°": "dim",
    "dim7": "dim7",
    "°7": "dim7",
    "dim6": "dim6",
    "aug": "aug",
    "+": "aug",
    "aug7": "aug7",
    "+7": "aug7",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "ø": "hdim7",
    "ø7": "hdim7",
    "sus": "sus4",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "sus47": "sus4(b7)",
    "sus27": "sus2(b7)",
    "add9": "maj(9)",
    "add2": "maj(2)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "11": "11",
    "m11": "min11",
    "maj11": "maj11",
    "13": "13",
    "m13": "min13",
    "maj13": "maj13",
    "6": "maj6",
    "6/9": "maj6(9)",
    "m6": "min6",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "m(maj7)": "minmaj7",
    "5": "5",
}


def is_known_suffix(suffix: str) -> bool:
    """Check if a chord suffix names a real chord quality.

    Suffixes in ``SUFFIX_TO_HARTE_QUALITY`` are accepted as they are;
    anything else is validated with pychord on a C root.

    Examples
    --------
    >>> is_known_suffix("m7")
    True
    >>> is_known_suffix("6/9")
    True
    >>> is_known_suffix("mm")
    False
    """
    if suffix in SUFFIX_TO_HARTE_QUALITY:
        return True

    from pychord import Chord as PyChord

    try:
        PyChord(f"C{suffix}")
    except ValueError:
        return False
    return True


def try_parse(text: str) -> Chord | None:
    """Parse a chord symbol, returning None when the text is not one.

    Surrounding whitespace is ignored. Returning None is the normal
    outcome for lyric words, section names, numbers and punctuation.

    Parameters
    ----------
    text : str
        Candidate token (e.g., "C#m7/G", "  Am  ", "Chorus").

    Returns
    -------
    Chord | None
        The parsed chord, or None.

    Examples
    --------
    >>> try_parse("C#m7/G").to_text()
    'C#m7/G'
    >>> try_parse("Amazing") is None
    True
    >>> try_parse("Verse") is None
    True
    >>> try_parse("Amm") is None
    True
    """
    token = text.strip()
    if not token or len(token) > MAX_CHORD_LENGTH:
        return None

    match = CHORD_RE.match(token)
    if match is None:
        return None

    suffix = match.group("suffix")
    if not is_known_suffix(suffix):
        return None

    bass = match.group("bass")
    return Chord(
        root=normalize_note(match.group("root")),
        suffix=suffix,
        bass=normalize_note(bass) if bass else None,
        full_name=token,
    )


def parse_chord(text: str) -> Chord:
    """Parse a chord symbol into a Chord object.

    Parameters
    ----------
    text : str
        Chord symbol (e.g., "Gm7", "C", "F#dim7/A").

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    ValueError
        If the text is not a chord symbol.

    Examples
    --------
    >>> chord = parse_chord("Gm7")
    >>> chord.root, chord.suffix, chord.bass
    ('G', 'm7', None)
    """
    chord = try_parse(text)
    if chord is None:
        msg = f"Not a chord symbol: {text!r}"
        raise ValueError(msg)
    return chord


def is_chord(text: str) -> bool:
    """Check if text is a chord symbol.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("Hello")
    False
    >>> is_chord("C/E")
    True
    """
    return try_parse(text) is not None


def suffix_to_harte(suffix: str) -> str:
    """Convert a chord suffix to Harte shorthand.

    Parameters
    ----------
    suffix : str
        The chord suffix (e.g., "m7", "maj7", "dim", "").

    Returns
    -------
    str
        The equivalent Harte shorthand (e.g., "min7", "maj7", "dim", "maj").

    Raises
    ------
    ValueError
        If the suffix is not recognized.

    Examples
    --------
    >>> suffix_to_harte("m7")
    'min7'
    >>> suffix_to_harte("")
    'maj'
    """
    if suffix in SUFFIX_TO_HARTE_QUALITY:
        return SUFFIX_TO_HARTE_QUALITY[suffix]
    msg = f"Unknown chord suffix: {suffix}"
    raise ValueError(msg)


def to_text(chord: Chord, semitones: int = 0) -> str:
    """Render a chord, optionally transposed, as symbol text.

    Examples
    --------
    >>> to_text(parse_chord("Am"), 3)
    'Cm'
    """
    return chord.transpose(semitones).to_text()


def transpose(chord: Chord, semitones: int) -> Chord:
    """Return ``chord`` moved by ``semitones``; see :meth:`Chord.transpose`."""
    return chord.transpose(semitones)

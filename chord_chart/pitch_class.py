"""Pitch class operations for chord transposition.

This module maps note names onto the twelve chromatic pitch classes
(0-11, C=0) and back again, using two fixed spelling tables so that
transposed chords are always spelled the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_chart.models import Chord

SEMITONES = 12

# Natural note letter to pitch class (0-11, where C=0)
LETTER_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Accidental glyph to semitone shift
ACCIDENTAL_TO_SHIFT: dict[str, int] = {
    "#": 1,
    "♯": 1,
    "b": -1,
    "♭": -1,
}

# Unicode accidentals are stored in their ASCII form
ACCIDENTAL_TO_ASCII: dict[str, str] = {
    "#": "#",
    "♯": "#",
    "b": "b",
    "♭": "b",
}

SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)


def normalize_note(note: str) -> str:
    """Rewrite unicode accidentals in a note name as ``#``/``b``.

    Examples
    --------
    >>> normalize_note("C♯")
    'C#'
    >>> normalize_note("Bb")
    'Bb'
    """
    if not note:
        return note
    return note[0] + "".join(ACCIDENTAL_TO_ASCII.get(c, c) for c in note[1:])


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Any number of accidentals is accepted after the letter, so spellings
    such as "Cb", "E#" or pychord's occasional double sharps resolve too.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb", "D♭").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    >>> note_to_pc("Cb")
    11
    """
    if not note or note[0] not in LETTER_TO_PC:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)

    pc = LETTER_TO_PC[note[0]]
    for accidental in note[1:]:
        if accidental not in ACCIDENTAL_TO_SHIFT:
            msg = f"Unknown note: {note}"
            raise ValueError(msg)
        pc += ACCIDENTAL_TO_SHIFT[accidental]
    return pc % SEMITONES


def prefers_flats(note: str) -> bool | None:
    """Return the spelling preference a note name expresses.

    True for flat spellings, False for sharp spellings and None for
    naturals, which express no preference of their own.

    Examples
    --------
    >>> prefers_flats("Eb")
    True
    >>> prefers_flats("F#")
    False
    >>> prefers_flats("G") is None
    True
    """
    shifts = [ACCIDENTAL_TO_SHIFT[c] for c in note[1:] if c in ACCIDENTAL_TO_SHIFT]
    if not shifts:
        return None
    return shifts[0] < 0


def spell_pc(pc: int, flats: bool = False) -> str:
    """Spell a pitch class using the fixed sharp or flat table.

    Examples
    --------
    >>> spell_pc(1)
    'C#'
    >>> spell_pc(1, flats=True)
    'Db'
    >>> spell_pc(-1)
    'B'
    """
    names = FLAT_NAMES if flats else SHARP_NAMES
    return names[pc % SEMITONES]


def table_spelling(note: str, flats: bool = False) -> str:
    """Return the spelling-table name for a note.

    Table spellings come back unchanged. Anything else ("Cb", "E#",
    double accidentals) is re-spelled from the sharp or flat table.

    Examples
    --------
    >>> table_spelling("Bb")
    'Bb'
    >>> table_spelling("Cb", flats=True)
    'B'
    >>> table_spelling("E#")
    'F'
    """
    if note in SHARP_NAMES or note in FLAT_NAMES:
        return note
    return spell_pc(note_to_pc(note), flats=flats)


def spelling_preferences(root: str, bass: str | None = None) -> tuple[bool, bool]:
    """Work out whether root and bass should be spelled with flats.

    Each note follows its own accidental. A natural note borrows the
    other note's accidental, and two naturals use sharps.

    Examples
    --------
    >>> spelling_preferences("Eb", "G")
    (True, True)
    >>> spelling_preferences("Gb", "F#")
    (True, False)
    >>> spelling_preferences("C")
    (False, False)
    """
    root_pref = prefers_flats(root)
    bass_pref = prefers_flats(bass) if bass else None
    root_flats = root_pref if root_pref is not None else bool(bass_pref)
    bass_flats = bass_pref if bass_pref is not None else bool(root_pref)
    return root_flats, bass_flats


def transpose_note(note: str, semitones: int, flats: bool = False) -> str:
    """Move a note by a number of semitones and re-spell it.

    The offset wraps circularly in both directions. A whole number of
    octaves leaves the note exactly as written.

    Parameters
    ----------
    note : str
        The note to move.
    semitones : int
        Offset in semitones; any integer.
    flats : bool
        Spell the result from the flat table instead of the sharp table.

    Returns
    -------
    str
        The transposed note name.

    Examples
    --------
    >>> transpose_note("A", 2)
    'B'
    >>> transpose_note("C", -1)
    'B'
    >>> transpose_note("G", 1, flats=True)
    'Ab'
    >>> transpose_note("E#", 24)
    'E#'
    """
    if semitones % SEMITONES == 0:
        return note
    return spell_pc(note_to_pc(note) + semitones, flats=flats)


def chord_to_pitch_classes(chord: Chord) -> frozenset[int]:
    """Convert a Chord to the set of pitch classes it sounds.

    Chord tones come from pychord's quality vocabulary. The bass note of
    a slash chord is always included.

    Parameters
    ----------
    chord : Chord
        The chord to convert.

    Returns
    -------
    frozenset[int]
        Set of pitch classes (0-11) in the chord.

    Raises
    ------
    ValueError
        If pychord does not know the chord's suffix.

    Examples
    --------
    >>> from chord_chart.converter import parse_chord
    >>> sorted(chord_to_pitch_classes(parse_chord("C")))
    [0, 4, 7]
    >>> sorted(chord_to_pitch_classes(parse_chord("Gm")))
    [2, 7, 10]
    """
    from pychord import Chord as PyChord

    pitch_classes = {note_to_pc(note) for note in PyChord(chord.to_pychord()).components()}
    if chord.bass:
        pitch_classes.add(note_to_pc(chord.bass))
    return frozenset(pitch_classes)

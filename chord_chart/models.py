"""Chord data model for chord-chart.

A chord symbol such as "C#m7/G" is held as its root, the verbatim
suffix ("m7") and an optional bass note. Transposition moves the root and
bass and never touches the suffix.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chord_chart.pitch_class import SEMITONES, spelling_preferences, table_spelling, transpose_note


@dataclass(frozen=True)
class Chord:
    """Parsed chord symbol.

    Parameters
    ----------
    root : str
        The root note (e.g., "C", "F#", "Bb"). Spellings outside the sharp
        and flat tables are stored as their table name ("Cb" becomes "B").
    suffix : str
        Everything between the root and the slash bass, verbatim
        (e.g., "", "m7", "sus4", "add9").
    bass : str | None
        The bass note of a slash chord, or None.
    full_name : str
        The exact source text of the chord symbol. Used to find the chord
        inside a chart span; not part of equality.
    root_flats : bool | None
        Spell the transposed root from the flat table. None works it out
        from the accidentals of root and bass.
    bass_flats : bool | None
        Same for the bass.

    Examples
    --------
    >>> chord = Chord(root="C#", suffix="m7", bass="G")
    >>> chord.to_text()
    'C#m7/G'
    >>> chord.transpose(-1).to_text()
    'Cm7/F#'
    """

    root: str
    suffix: str = ""
    bass: str | None = None
    full_name: str = field(default="", compare=False)
    root_flats: bool | None = field(default=None, compare=False)
    bass_flats: bool | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        root_flats, bass_flats = spelling_preferences(self.root, self.bass)
        if self.root_flats is None:
            object.__setattr__(self, "root_flats", root_flats)
        if self.bass_flats is None:
            object.__setattr__(self, "bass_flats", bass_flats)

        # Spellings outside the tables (Cb, E#, ...) are stored as table names
        object.__setattr__(self, "root", table_spelling(self.root, flats=self.root_flats))
        if self.bass:
            object.__setattr__(self, "bass", table_spelling(self.bass, flats=self.bass_flats))

        if not self.full_name:
            object.__setattr__(self, "full_name", self.to_text())

    def to_text(self) -> str:
        """Render the chord as ``root + suffix [+ "/" + bass]``.

        Returns
        -------
        str
            Chord symbol text (e.g., "Gm7", "C/E").
        """
        result = f"{self.root}{self.suffix}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def transpose(self, semitones: int) -> Chord:
        """Return this chord moved by a number of semitones.

        Root and bass are re-spelled independently, each from the table
        its own spelling preference selects. The suffix is copied.

        Parameters
        ----------
        semitones : int
            Offset in semitones; any integer, wrapped modulo 12.

        Returns
        -------
        Chord
            The transposed chord. A multiple of 12 returns ``self``.

        Examples
        --------
        >>> Chord(root="A", suffix="m").transpose(2).to_text()
        'Bm'
        >>> Chord(root="Bb").transpose(14).to_text()
        'C'
        """
        if semitones % SEMITONES == 0:
            return self

        root = transpose_note(self.root, semitones, flats=self.root_flats)
        bass = None
        if self.bass:
            bass = transpose_note(self.bass, semitones, flats=self.bass_flats)
        return replace(self, root=root, bass=bass, full_name="")

    def to_pychord(self) -> str:
        """Return the chord in plain ASCII notation pychord accepts."""
        return self.to_text()

    def to_harte(self) -> str:
        """Convert to Harte notation string.

        Returns
        -------
        str
            Chord in Harte notation (e.g., "G:min7", "C:maj/E").

        Raises
        ------
        ValueError
            If the suffix has no Harte equivalent.
        """
        from chord_chart.converter import suffix_to_harte

        result = f"{self.root}:{suffix_to_harte(self.suffix)}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        """Return the chord symbol text."""
        return self.to_text()

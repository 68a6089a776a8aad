"""Tests for token classification and the chord line predicate."""

import pytest

from chord_chart.chart.chord_detector import (
    CHORD_LINE_THRESHOLD,
    classify_line,
    classify_token,
    classify_tokens,
    is_chord_line,
    leading_label_length,
)
from chord_chart.chart.models import Token
from chord_chart.chart.tokenizer import tokenize_line


def tokens_for(line: str) -> list[Token]:
    return classify_tokens(tokenize_line(line))


class TestClassifyToken:
    """Test single token classification."""

    def test_chord_token(self) -> None:
        classified = classify_token(Token(text="Gm7", start=0, end=3, kind="other"))
        assert classified.kind == "chord"
        assert classified.chord is not None
        assert classified.chord.root == "G"

    def test_word_token(self) -> None:
        classified = classify_token(Token(text="Hello", start=0, end=5, kind="other"))
        assert classified.kind == "word"
        assert classified.chord is None

    def test_punct_token(self) -> None:
        classified = classify_token(Token(text="...", start=0, end=3, kind="other"))
        assert classified.kind == "punct"

    def test_number_token(self) -> None:
        classified = classify_token(Token(text="42", start=0, end=2, kind="other"))
        assert classified.kind == "other"

    @pytest.mark.parametrize("text", ["x2", "(x4)", "3x", "N.C.", "NC", "|", "||:", "/"])
    def test_marker_tokens(self, text: str) -> None:
        classified = classify_token(Token(text=text, start=0, end=len(text), kind="other"))
        assert classified.kind == "marker"

    def test_label_only_when_first(self) -> None:
        label = Token(text="Intro:", start=0, end=6, kind="other")
        assert classify_token(label, first=True).kind == "marker"
        assert classify_token(label).kind == "word"

    def test_bracketed_label(self) -> None:
        label = Token(text="[Chorus]", start=0, end=8, kind="other")
        assert classify_token(label, first=True).kind == "marker"


class TestIsChordLine:
    """Test the chord line predicate in isolation."""

    def test_no_tokens(self) -> None:
        assert is_chord_line([]) is False

    def test_all_chords(self) -> None:
        assert is_chord_line(tokens_for("C G Am F")) is True

    def test_any_word_means_lyrics(self) -> None:
        assert is_chord_line(tokens_for("I Am free")) is False

    def test_markers_do_not_count(self) -> None:
        assert is_chord_line(tokens_for("Intro:  G  |  C/G  |  D7  (x2)")) is True

    def test_markers_alone_are_not_chords(self) -> None:
        assert is_chord_line(tokens_for("|  |  (x2)")) is False

    def test_threshold(self) -> None:
        """Test that chords must dominate the non-marker tokens."""
        # 3 chords out of 5 counted tokens meets the threshold
        assert 3 / 5 >= CHORD_LINE_THRESHOLD
        assert is_chord_line(tokens_for("C G Am ... 1")) is True
        # 1 chord out of 3 does not
        assert is_chord_line(tokens_for("C ... 1")) is False


class TestClassifyLine:
    """Test whole-line classification."""

    @pytest.mark.parametrize(
        "line",
        [
            "C       G       Am      F",
            "   D",
            "C#m7/G",
            "Bb    Eb/G    F",
            "[Intro] Am G F",
            "N.C.     E7",
            "Verse 2: C  G",
            "Chorus 2b:  Am  F",
            "[Pre Chorus]  Dm  G",
            "Verse2:  C  G",
        ],
    )
    def test_chord_lines(self, line: str) -> None:
        assert classify_line(line) == "chordLine"

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "     ",
            "Amazing grace, how sweet the sound",
            "I Am free",
            "A man walks into a bar",
            "Verse 1",
            "[Verse 1]",
            "Chorus:",
            "(repeat)",
            "1.",
            "Verse 2:",
            "Amm  Amm  Amm",
            "Gsussus  Dmmmm",
        ],
    )
    def test_lyrics_lines(self, line: str) -> None:
        assert classify_line(line) == "lyrics"

    def test_pre_classified_tokens(self) -> None:
        line = "G  D"
        assert classify_line(line, tokens_for(line)) == "chordLine"


class TestTwoTokenLabels:
    """Test labels that the tokenizer splits in two."""

    def test_numbered_label(self) -> None:
        tokens = tokens_for("Verse 2: C  G")
        assert leading_label_length(tokens) == 2
        assert [t.kind for t in tokens] == ["marker", "marker", "chord", "chord"]

    def test_bracketed_label(self) -> None:
        assert leading_label_length(tokens_for("[Pre Chorus]  Dm  G")) == 2

    @pytest.mark.parametrize("line", ["Verse 2", "Verse:  C", "Verse two:  C", "G"])
    def test_not_a_split_label(self, line: str) -> None:
        assert leading_label_length(tokens_for(line)) == 0

    def test_number_without_label_is_not_a_marker(self) -> None:
        """Test that a numbered label needs its word in front."""
        tokens = tokens_for("2: C  G")
        assert tokens[0].kind == "other"

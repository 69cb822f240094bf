"""Tests for note name <-> pitch conversion."""

import pytest
from note_names import NoteSystem, NoteName, UnrecognizedNoteError, PITCH_CLASSES


@pytest.fixture
def notes():
    return NoteSystem()


class TestPitchForNote:
    """Names to pitch numbers."""

    def test_c4_is_48(self, notes):
        assert notes.pitch_for_note("c4") == 48

    def test_sharps_and_case(self, notes):
        assert notes.pitch_for_note("c#4") == 49
        assert notes.pitch_for_note("A#3") == 46
        assert notes.pitch_for_note("b0") == 11

    def test_multi_digit_and_negative_octaves(self, notes):
        assert notes.pitch_for_note("c10") == 120
        assert notes.pitch_for_note("b-1") == -1

    def test_accepts_note_name(self, notes):
        assert notes.pitch_for_note(NoteName(pitch_class=9, octave=4)) == 57

    @pytest.mark.parametrize("name", ["bb4", "cs5", "e#4", "c##4", "h4", "c", "4", "", "c4x"])
    def test_unrecognized_spellings(self, notes, name):
        with pytest.raises(UnrecognizedNoteError):
            notes.pitch_for_note(name)

    def test_unrecognized_is_value_error(self, notes):
        with pytest.raises(ValueError):
            notes.pitch_for_note("db4")


class TestNoteForPitch:
    """Pitch numbers back to names."""

    def test_octave_and_pitch_class(self, notes):
        assert notes.note_for_pitch(61) == NoteName(pitch_class=1, octave=5)
        assert str(notes.note_for_pitch(61)) == "C#5"

    def test_negative_pitch(self, notes):
        assert str(notes.note_for_pitch(-1)) == "B-1"

    def test_name_for_pitch(self, notes):
        assert notes.name_for_pitch(48) == "C4"
        assert notes.name_for_pitch(70) == "A#5"

    def test_every_sharp_name_round_trips(self, notes):
        for octave in range(0, 9):
            for name in PITCH_CLASSES:
                spelled = f"{name}{octave}"
                assert notes.note_for_pitch(notes.pitch_for_note(spelled)) == notes.parse(spelled)


class TestNoteSystemTables:
    """Tables are fixed once built."""

    def test_tables_are_read_only(self, notes):
        with pytest.raises(TypeError):
            notes.intervals["db"] = 1

    def test_inverse_uses_sharps(self, notes):
        assert notes.names[1] == "c#"
        assert len(notes.names) == 12

    def test_rejects_bad_table(self):
        with pytest.raises(ValueError):
            NoteSystem(("c", "d"))

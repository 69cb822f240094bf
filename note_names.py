# ==========================================================
# note_names.py — Note Name <-> Pitch Number Conversion
# ==========================================================
import re
from types import MappingProxyType
from typing import NamedTuple, Union

# Sharps only; the inverse table spells every pitch class with a sharp.
PITCH_CLASSES = ("c", "c#", "d", "d#", "e", "f", "f#", "g", "g#", "a", "a#", "b")

_NOTE_RE = re.compile(r"^\s*([a-z]+#*)(-?\d+)\s*$", re.IGNORECASE)


class UnrecognizedNoteError(ValueError):
    """Raised for a note spelling outside the pitch-class table."""


class NoteName(NamedTuple):
    pitch_class: int
    octave: int

    @property
    def pitch(self) -> int:
        return self.octave * 12 + self.pitch_class

    def __str__(self):
        return f"{PITCH_CLASSES[self.pitch_class].upper()}{self.octave}"


class NoteSystem:
    """
    Two-way conversion between note names like 'c#4' and pitch numbers.

    The pitch of a name is octave * 12 + interval, so 'c4' is 48.
    Tables are built once and are read-only afterwards.
    """

    def __init__(self, pitch_classes=PITCH_CLASSES):
        if len(pitch_classes) != 12 or len(set(pitch_classes)) != 12:
            raise ValueError("Need exactly 12 distinct pitch-class names")
        self.intervals = MappingProxyType({name: i for i, name in enumerate(pitch_classes)})
        self.names = MappingProxyType({i: name for name, i in self.intervals.items()})

    def parse(self, name: str) -> NoteName:
        """Parse 'c#4', 'A3', 'b-1' into a NoteName."""
        m = _NOTE_RE.match(str(name))
        if not m:
            raise UnrecognizedNoteError(f"Unrecognized note: {name!r}")
        spelling, octave = m.group(1).lower(), int(m.group(2))
        if spelling not in self.intervals:
            raise UnrecognizedNoteError(f"Unrecognized note: {name!r}")
        return NoteName(self.intervals[spelling], octave)

    def pitch_for_note(self, name: Union[str, NoteName]) -> int:
        if isinstance(name, NoteName):
            return name.pitch
        return self.parse(name).pitch

    def note_for_pitch(self, pitch: int) -> NoteName:
        # Floor division keeps negative pitches in range: -1 -> B-1
        return NoteName(pitch % 12, pitch // 12)

    def name_for_pitch(self, pitch: int) -> str:
        note = self.note_for_pitch(pitch)
        return f"{self.names[note.pitch_class].upper()}{note.octave}"

# ==========================================================
# layouts.py — Key Position -> Pitch Layouts
# ==========================================================
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

import config
from keyboard_map import KeyPosition
from note_names import NoteSystem

# Semitones between vertically adjacent rows (a perfect fourth)
ROW_INTERVAL = 5


class LayoutKind(Enum):
    CHROMATIC = "Chromatic"
    SCALE = "Scale"
    WHOLE_TONE = "Whole Tone"
    PENTATONIC = "Pentatonic"


# --- Note Tables ---
# Listed top to bottom like the key rows. Repeated cells (f#5 f#5 f#5,
# f5 g5 f5 g5) are part of the layout and are kept as-is.
SCALE_TABLE = (
    ("b4", "c#5", "d#5", "f5", "f#5", "f#5", "f#5", "g#5", "a#5", "c6", "c#6", "d#6"),
    ("c5", "d5", "e5", "f5", "g5", "f5", "g5", "a5", "b5", "c6", "d6", "e6"),
    ("b3", "c#4", "d#4", "f4", "f#4", "f#4", "f#4", "g#4", "a#4", "c5", "c#5"),
    ("c4", "d4", "e4", "f4", "g4", "f4", "g4", "a4", "b4", "c5"),
)

PENTATONIC_TABLE = (
    ("e6", "g6", "a6", "c7", "d7", "e7", "g7", "a7", "c8", "d8", "e8", "g8", "a8"),
    ("g5", "a5", "c6", "d6", "e6", "g6", "a6", "c7", "d7", "e7", "g7", "a7"),
    ("a4", "c5", "d5", "e5", "g5", "a5", "c6", "d6", "e6", "g6", "a6"),
    ("c4", "d4", "e4", "g4", "a4", "c5", "d5", "e5", "g5", "a5"),
)


class IntervalLayout:
    """Isomorphic layout: pitch = base + row * row_step + col * col_step."""

    def __init__(self, kind: LayoutKind, col_step: int, base: int = config.BASE_PITCH,
                 row_step: int = ROW_INTERVAL):
        self.kind = kind
        self.base = base
        self.row_step = row_step
        self.col_step = col_step

    @property
    def label(self) -> str:
        return self.kind.value

    def pitch_at(self, position: KeyPosition) -> Optional[int]:
        row, col = position
        return self.base + row * self.row_step + col * self.col_step

    def __str__(self):
        return self.label


class TableLayout:
    """
    Layout driven by an explicit table of note names, one per key.

    Names are resolved when the layout is built, so a misspelt note fails
    here instead of on a key press. A None cell is a key with no note.
    """

    def __init__(self, kind: LayoutKind, table_top_down: Sequence[Sequence[Optional[str]]],
                 note_system: NoteSystem):
        self.kind = kind
        self.pitches: Tuple[Tuple[Optional[int], ...], ...] = tuple(
            tuple(None if name is None else note_system.pitch_for_note(name) for name in row)
            for row in reversed(table_top_down)
        )

    @property
    def label(self) -> str:
        return self.kind.value

    def pitch_at(self, position: KeyPosition) -> Optional[int]:
        row, col = position
        if 0 <= row < len(self.pitches) and 0 <= col < len(self.pitches[row]):
            return self.pitches[row][col]
        return None

    def __str__(self):
        return self.label


Layout = Union[IntervalLayout, TableLayout]


def build_layout(kind: LayoutKind, note_system: NoteSystem, base: int = config.BASE_PITCH) -> Layout:
    if kind is LayoutKind.CHROMATIC:
        return IntervalLayout(kind, col_step=1, base=base)
    if kind is LayoutKind.WHOLE_TONE:
        return IntervalLayout(kind, col_step=2, base=base)
    if kind is LayoutKind.SCALE:
        return TableLayout(kind, SCALE_TABLE, note_system)
    if kind is LayoutKind.PENTATONIC:
        return TableLayout(kind, PENTATONIC_TABLE, note_system)
    raise ValueError(f"Unknown layout kind: {kind!r}")


def build_layouts(note_system: NoteSystem, base: int = config.BASE_PITCH):
    """All layouts in menu order."""
    return [build_layout(kind, note_system, base) for kind in LayoutKind]

# ==========================================================
# key_state.py — Key Press Tracking + Note On/Off Dispatch
# ==========================================================
import time
from typing import Callable, Dict, FrozenSet, List, Optional

import config
from keyboard_map import KeyboardGrid
from layouts import Layout
from midi_channel import ChannelOutput


class KeyStateTracker:
    """
    Turns key down/up events into note on/off calls on a channel.

    Each key is either idle or sounding. A sounding key remembers the pitch
    it started with, so octave or layout changes never alter a held note and
    the matching note off always goes out with that pitch.
    """

    def __init__(self, grid: KeyboardGrid, layout: Layout, channel: ChannelOutput,
                 velocity: int = config.VELOCITY):
        self.grid = grid
        self.channel = channel
        self.velocity = velocity
        self._layout = layout
        self._octave_offset = 0
        self._sounding: Dict[str, int] = {}
        self._listeners: List[Callable[[], None]] = []

    # --- Listeners ---
    def add_listener(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]):
        self._listeners.remove(callback)

    def _changed(self):
        for callback in list(self._listeners):
            callback()

    # --- Events ---
    def on_key_down(self, symbol: str):
        key = symbol.lower()
        if key in self._sounding:
            return  # auto-repeat
        pitch = self.pitch_for_key(key)
        if pitch is None:
            return
        self._sounding[key] = pitch
        self.channel.note_on(pitch, self.velocity)
        self._changed()

    def on_key_up(self, symbol: str):
        pitch = self._sounding.pop(symbol.lower(), None)
        if pitch is None:
            return
        self.channel.note_off(pitch, self.velocity)
        self._changed()

    def on_deactivate(self):
        """Silence everything, e.g. when the window loses focus."""
        self._sounding.clear()
        self.channel.all_notes_off()
        self._changed()

    def set_octave_offset(self, delta: int):
        self._octave_offset += delta
        self._changed()

    def set_layout(self, layout: Layout):
        self._layout = layout
        self._changed()

    # --- Queries ---
    @property
    def layout(self) -> Layout:
        return self._layout

    def current_layout_label(self) -> str:
        return self._layout.label

    def current_octave_offset(self) -> int:
        return self._octave_offset

    def active_notes(self) -> FrozenSet[str]:
        return frozenset(self._sounding)

    def sounding_pitch(self, symbol: str) -> Optional[int]:
        return self._sounding.get(symbol.lower())

    def pitch_for_key(self, symbol: str) -> Optional[int]:
        """Pitch a press of `symbol` would play right now, or None."""
        position = self.grid.lookup(symbol)
        if position is None:
            return None
        pitch = self._layout.pitch_at(position)
        if pitch is None:
            return None
        return pitch + self._octave_offset * 12


class OctaveDebouncer:
    """Lets through at most one octave change per `interval` seconds."""

    def __init__(self, interval: float = config.OCTAVE_DEBOUNCE_SECONDS, clock=time.monotonic):
        self.interval = interval
        self.clock = clock
        self._last_accepted = None

    def accept(self) -> bool:
        now = self.clock()
        if self._last_accepted is not None and now - self._last_accepted < self.interval:
            return False
        self._last_accepted = now
        return True


class PressedKeys:
    """
    Remembers the text each physical key produced when it went down.

    Modifiers can change a key's text before release (';' becomes ':' under
    Shift, Ctrl gives control characters), so releases are matched by key id.
    """

    def __init__(self):
        self._text = {}

    def press(self, key_id, text: str) -> str:
        self._text[key_id] = text
        return text

    def release(self, key_id, text: str) -> str:
        return self._text.pop(key_id, text)

    def clear(self):
        self._text.clear()

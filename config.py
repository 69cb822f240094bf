# ==========================================================
# config.py — Runtime Settings (constants + environment overrides)
# ==========================================================
import os

# --- Playing ---
VELOCITY = 100            # fixed velocity for every note on/off
BASE_PITCH = 48           # pitch of the bottom-left key in interval layouts (C4)
OCTAVE_DEBOUNCE_SECONDS = 0.2

# --- Keyboard ---
# Physical arrangement of the typing keyboard: "qwerty" or "dvorak".
GRID_NAME = os.environ.get("MUSICAL_KEYS_GRID", "qwerty").strip().lower()

# --- MIDI ---
# Output device id as listed by pygame.midi; None picks the system default.
_midi_output = os.environ.get("MUSICAL_KEYS_MIDI_OUTPUT", "").strip()
MIDI_OUTPUT_ID = int(_midi_output) if _midi_output else None
MIDI_CHANNEL_COUNT = 16

# --- Window ---
WINDOW_TITLE = "Musical Keys"
KEYBOARD_WIDTH = 600
KEYBOARD_HEIGHT = 200

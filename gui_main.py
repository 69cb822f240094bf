# ==========================================================
# gui_main.py — Main Window (selectors + key/wheel/focus dispatch)
# ==========================================================
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QComboBox, QMessageBox
from PyQt6.QtCore import Qt, QEvent

import config
from keyboard_map import grid_by_name
from key_state import KeyStateTracker, OctaveDebouncer, PressedKeys
from keyboard_widget import KeyboardWidget
from layouts import build_layouts
from midi_channel import MidiDevice, GENERAL_MIDI_INSTRUMENTS
from note_names import NoteSystem


class MainWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # --- Core ---
        self.note_system = NoteSystem()
        self.grid = grid_by_name(config.GRID_NAME)
        self.layouts = build_layouts(self.note_system)
        self.midi = MidiDevice()
        self.tracker = KeyStateTracker(self.grid, self.layouts[0], self.midi.channels[0])
        self.wheel_debouncer = OctaveDebouncer()
        self.pressed = PressedKeys()
        print(f"[DEBUG] Keyboard grid: {self.grid.name}, layouts: {[str(l) for l in self.layouts]}")

        # --- Selectors ---
        main_layout = QVBoxLayout(self)
        form = QGridLayout()
        main_layout.addLayout(form)

        # Selectors never take focus so every key press reaches the window
        self.combo_channel = self._add_combo(form, 0, "Channel", [str(c) for c in self.midi.channels])
        self.combo_layout = self._add_combo(form, 1, "Layout", [l.label for l in self.layouts])
        self.combo_instrument = self._add_combo(form, 2, "Instrument", [str(i) for i in GENERAL_MIDI_INSTRUMENTS])

        form.addWidget(QLabel("Octave"), 3, 0)
        self.lbl_octave = QLabel()
        form.addWidget(self.lbl_octave, 3, 1)
        form.setColumnStretch(1, 1)

        self.combo_channel.currentIndexChanged.connect(self.on_channel_changed)
        self.combo_layout.currentIndexChanged.connect(self.on_layout_changed)
        self.combo_instrument.currentIndexChanged.connect(self.sync_channel_program)

        # --- Keyboard ---
        self.keyboard = KeyboardWidget(self.tracker, self.note_system)
        main_layout.addWidget(self.keyboard, 1)

        self.tracker.add_listener(self.update_octave_label)
        self.update_octave_label()
        self.sync_channel_program()

        if not self.midi.available:
            QMessageBox.warning(self, "MIDI Error", "Could not find a MIDI output device. \nNotes will not be heard. \n\nPlease ensure a MIDI synthesizer (like CoolSoft VirtualMIDISynth) is installed and enabled.")

    def _add_combo(self, form, row, label, items):
        form.addWidget(QLabel(label), row, 0)
        combo = QComboBox()
        combo.addItems(items)
        combo.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        combo.installEventFilter(self)
        form.addWidget(combo, row, 1)
        return combo

    # --- Selector handlers ---
    def on_channel_changed(self, index):
        # Release on the old channel before notes are routed elsewhere
        self.tracker.on_deactivate()
        self.tracker.channel = self.midi.channels[index]
        self.sync_channel_program()
        print(f"[DEBUG] Output switched to {self.tracker.channel}")

    def on_layout_changed(self, index):
        self.tracker.set_layout(self.layouts[index])

    def sync_channel_program(self, *_):
        instrument = GENERAL_MIDI_INSTRUMENTS[self.combo_instrument.currentIndex()]
        self.tracker.channel.program_change(instrument.bank, instrument.program)

    def update_octave_label(self):
        self.lbl_octave.setText(str(self.tracker.current_octave_offset()))

    # --- Input events ---
    def keyPressEvent(self, event):
        if event.isAutoRepeat():
            return
        key = event.key()
        if key == Qt.Key.Key_Up:
            self.tracker.set_octave_offset(1)
        elif key == Qt.Key.Key_Down:
            self.tracker.set_octave_offset(-1)
        elif event.text():
            self.tracker.on_key_down(self.pressed.press(self._key_id(event), event.text()))
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.isAutoRepeat():
            return
        text = self.pressed.release(self._key_id(event), event.text())
        if text:
            self.tracker.on_key_up(text)
        else:
            super().keyReleaseEvent(event)

    @staticmethod
    def _key_id(event):
        # Scan codes are 0 on platforms that do not report them
        return event.nativeScanCode() or event.key()

    def eventFilter(self, obj, event):
        # Wheel over a selector changes the octave, not the selection
        if event.type() == QEvent.Type.Wheel and isinstance(obj, QComboBox):
            self.wheelEvent(event)
            return True
        return super().eventFilter(obj, event)

    def wheelEvent(self, event):
        dy = event.angleDelta().y()
        if dy == 0 or not self.wheel_debouncer.accept():
            return
        self.tracker.set_octave_offset(1 if dy > 0 else -1)

    def changeEvent(self, event):
        if event.type() == QEvent.Type.ActivationChange and not self.isActiveWindow():
            self.pressed.clear()
            self.tracker.on_deactivate()
        super().changeEvent(event)

    def closeEvent(self, event):
        self.tracker.on_deactivate()
        self.midi.close()
        print("[DEBUG] GUI closed cleanly.")
        event.accept()

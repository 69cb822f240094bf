# ==========================================================
# keyboard_widget.py — On-Screen Keyboard (held keys + note labels)
# ==========================================================

from PyQt6.QtWidgets import QFrame, QSizePolicy
from PyQt6.QtGui import QColor, QPainter, QBrush, QFont, QPen
from PyQt6.QtCore import QRectF, QSize

import config
from note_names import NoteSystem


class KeyboardWidget(QFrame):
    GAP = 5
    ROUND = 5
    KEY_SIZE = 42.7

    def __init__(self, tracker, note_system: NoteSystem):
        super().__init__()
        self.tracker = tracker
        self.note_system = note_system
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        tracker.add_listener(self.update)

    def sizeHint(self):
        return QSize(config.KEYBOARD_WIDTH, config.KEYBOARD_HEIGHT)

    def paintEvent(self, e):
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Drawn at the preferred size, then scaled to fit the widget width
        scale = self.width() / config.KEYBOARD_WIDTH
        if scale > 0:
            p.scale(scale, scale)

        held_color = QColor(188, 188, 188)
        outline = QPen(QColor(60, 60, 60), 1)
        p.setFont(QFont("Arial", 8))

        gap, size = self.GAP, self.KEY_SIZE
        held = self.tracker.active_notes()
        rows = self.tracker.grid.rows

        # Screen rows go top-down; each one is shifted half a key like a real keyboard
        for screen_row, symbols in enumerate(reversed(rows)):
            for col, symbol in enumerate(symbols):
                x = gap + (screen_row * size / 2) + col * (size + gap)
                y = gap + screen_row * (size + gap)
                rect = QRectF(x, y, size, size)

                if symbol in held:
                    p.setBrush(QBrush(held_color))
                else:
                    p.setBrush(QBrush())
                p.setPen(outline)
                p.drawRoundedRect(rect, self.ROUND, self.ROUND)

                pitch = self.tracker.sounding_pitch(symbol)
                if pitch is None:
                    pitch = self.tracker.pitch_for_key(symbol)
                if pitch is not None:
                    p.drawText(int(x + gap), int(y + gap * 3), self.note_system.name_for_pitch(pitch))

        p.end()

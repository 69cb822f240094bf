# ==========================================================
# midi_channel.py — MIDI Output Device + Per-Channel Sender
# ==========================================================
import platform
from typing import NamedTuple, Optional, Protocol

import mido
import pygame.midi

import config

ALL_NOTES_OFF_CC = 123
BANK_SELECT_MSB_CC = 0
BANK_SELECT_LSB_CC = 32

# General MIDI Level 1 program names (program 0-127)
GM_PROGRAM_NAMES = [
    "Acoustic Grand Piano", "Bright Acoustic Piano", "Electric Grand Piano", "Honky-tonk Piano",
    "Electric Piano 1", "Electric Piano 2", "Harpsichord", "Clavinet",
    "Celesta", "Glockenspiel", "Music Box", "Vibraphone",
    "Marimba", "Xylophone", "Tubular Bells", "Dulcimer",
    "Drawbar Organ", "Percussive Organ", "Rock Organ", "Church Organ",
    "Reed Organ", "Accordion", "Harmonica", "Tango Accordion",
    "Acoustic Guitar (nylon)", "Acoustic Guitar (steel)", "Electric Guitar (jazz)", "Electric Guitar (clean)",
    "Electric Guitar (muted)", "Overdriven Guitar", "Distortion Guitar", "Guitar Harmonics",
    "Acoustic Bass", "Electric Bass (finger)", "Electric Bass (pick)", "Fretless Bass",
    "Slap Bass 1", "Slap Bass 2", "Synth Bass 1", "Synth Bass 2",
    "Violin", "Viola", "Cello", "Contrabass",
    "Tremolo Strings", "Pizzicato Strings", "Orchestral Harp", "Timpani",
    "String Ensemble 1", "String Ensemble 2", "Synth Strings 1", "Synth Strings 2",
    "Choir Aahs", "Voice Oohs", "Synth Voice", "Orchestra Hit",
    "Trumpet", "Trombone", "Tuba", "Muted Trumpet",
    "French Horn", "Brass Section", "Synth Brass 1", "Synth Brass 2",
    "Soprano Sax", "Alto Sax", "Tenor Sax", "Baritone Sax",
    "Oboe", "English Horn", "Bassoon", "Clarinet",
    "Piccolo", "Flute", "Recorder", "Pan Flute",
    "Blown Bottle", "Shakuhachi", "Whistle", "Ocarina",
    "Lead 1 (square)", "Lead 2 (sawtooth)", "Lead 3 (calliope)", "Lead 4 (chiff)",
    "Lead 5 (charang)", "Lead 6 (voice)", "Lead 7 (fifths)", "Lead 8 (bass + lead)",
    "Pad 1 (new age)", "Pad 2 (warm)", "Pad 3 (polysynth)", "Pad 4 (choir)",
    "Pad 5 (bowed)", "Pad 6 (metallic)", "Pad 7 (halo)", "Pad 8 (sweep)",
    "FX 1 (rain)", "FX 2 (soundtrack)", "FX 3 (crystal)", "FX 4 (atmosphere)",
    "FX 5 (brightness)", "FX 6 (goblins)", "FX 7 (echoes)", "FX 8 (sci-fi)",
    "Sitar", "Banjo", "Shamisen", "Koto",
    "Kalimba", "Bagpipe", "Fiddle", "Shanai",
    "Tinkle Bell", "Agogo", "Steel Drums", "Woodblock",
    "Taiko Drum", "Melodic Tom", "Synth Drum", "Reverse Cymbal",
    "Guitar Fret Noise", "Breath Noise", "Seashore", "Bird Tweet",
    "Telephone Ring", "Helicopter", "Applause", "Gunshot",
]


class Instrument(NamedTuple):
    bank: int
    program: int
    name: str

    def __str__(self):
        return self.name


GENERAL_MIDI_INSTRUMENTS = tuple(Instrument(0, i, name) for i, name in enumerate(GM_PROGRAM_NAMES))


class ChannelOutput(Protocol):
    """Anything that can sound notes on one channel."""

    def note_on(self, pitch: int, velocity: int) -> None: ...

    def note_off(self, pitch: int, velocity: int) -> None: ...

    def all_notes_off(self) -> None: ...

    def program_change(self, bank: int, program: int) -> None: ...


class MidiChannel:
    """
    One of the 16 channels of a MIDI output.

    `port` only needs write_short(status, data1, data2); messages are built
    with mido so channel and data ranges are checked before they go out.
    """

    def __init__(self, port, index: int):
        self.port = port
        self.index = index

    def _send(self, msg):
        self.port.write_short(*msg.bytes())

    def note_on(self, pitch, velocity):
        if not 0 <= pitch <= 127:
            print(f"[MidiChannel] Dropping note on {pitch}: outside MIDI range.")
            return
        self._send(mido.Message('note_on', channel=self.index, note=pitch, velocity=velocity))

    def note_off(self, pitch, velocity):
        if not 0 <= pitch <= 127:
            return
        self._send(mido.Message('note_off', channel=self.index, note=pitch, velocity=velocity))

    def all_notes_off(self):
        self._send(mido.Message('control_change', channel=self.index,
                                control=ALL_NOTES_OFF_CC, value=0))

    def program_change(self, bank, program):
        self._send(mido.Message('control_change', channel=self.index,
                                control=BANK_SELECT_MSB_CC, value=(bank >> 7) & 0x7F))
        self._send(mido.Message('control_change', channel=self.index,
                                control=BANK_SELECT_LSB_CC, value=bank & 0x7F))
        self._send(mido.Message('program_change', channel=self.index, program=program))

    def __str__(self):
        return f"Channel {self.index}"


class MidiDevice:
    """
    MIDI output opened through pygame.midi.
    If no output exists the device stays usable but silent.
    """

    def __init__(self, output_id: Optional[int] = config.MIDI_OUTPUT_ID):
        self.output = None
        self.channels = [MidiChannel(self, i) for i in range(config.MIDI_CHANNEL_COUNT)]

        try:
            pygame.midi.init()
            print("[MidiDevice] Pygame MIDI initialized.")
            if output_id is None:
                output_id = pygame.midi.get_default_output_id()
        except Exception as e:
            print(f"[MidiDevice] FATAL ERROR initializing pygame.midi: {e}")
            return
        print(f"[MidiDevice] MIDI Output ID: {output_id}")

        if output_id < 0:
            if platform.system() == "Windows":
                print("[MidiDevice] ERROR: No default MIDI output device found.")
                print("[MidiDevice] On Windows, you may need to install a MIDI synthesizer like CoolSoft VirtualMIDISynth.")
            else:
                print("[MidiDevice] ERROR: No MIDI output device found.")
        else:
            try:
                self.output = pygame.midi.Output(output_id)
                print(f"[MidiDevice] Successfully opened MIDI output device ID {output_id}.")
            except pygame.midi.MidiException as e:
                print(f"[MidiDevice] ERROR opening output {output_id}: {e}")

    @property
    def available(self) -> bool:
        return self.output is not None

    def write_short(self, status, data1=0, data2=0):
        if self.output is not None:
            self.output.write_short(status, data1, data2)

    def close(self):
        print("[MidiDevice] Cleaning up...")
        if self.output is not None:
            for channel in self.channels:
                channel.all_notes_off()
            self.output.close()
            self.output = None
        pygame.midi.quit()

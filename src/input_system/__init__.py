"""
Input System Package

Per-frame input snapshots for the game loop, read from pygame or replayed
from a script for headless runs.
"""

from .input_event import InputEvent
from .interfaces import IInputReader
from .pygame_input_reader import PygameInputReader, translate_events
from .scripted_input_reader import ScriptedInputReader

__all__ = [
    "InputEvent",
    "IInputReader",
    "PygameInputReader",
    "translate_events",
    "ScriptedInputReader"
]

"""
Scripted input reader for running the game without a window
"""

from collections import deque
from typing import Deque, Iterable, Optional

from .input_event import InputEvent
from .interfaces import IInputReader


class ScriptedInputReader(IInputReader):
    """
    Replays a queue of InputEvents, one per frame.

    Once the script is exhausted every read returns an empty InputEvent,
    or a quit request when quit_when_exhausted is set.

    Example:
        reader = ScriptedInputReader([
            InputEvent(confirm_pressed=True),
            InputEvent(letters=["C"]),
        ])
    """

    def __init__(self, events: Optional[Iterable[InputEvent]] = None, quit_when_exhausted: bool = False):
        self._events: Deque[InputEvent] = deque(events or [])
        self._quit_when_exhausted = quit_when_exhausted
        self.frames_read = 0

    def push(self, event: InputEvent) -> None:
        """Append an event to the end of the script"""
        self._events.append(event)

    @property
    def pending(self) -> int:
        return len(self._events)

    def read_input(self) -> InputEvent:
        self.frames_read += 1
        if self._events:
            return self._events.popleft()
        return InputEvent(quit_requested=self._quit_when_exhausted)

    def cleanup(self) -> None:
        self._events.clear()

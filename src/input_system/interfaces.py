"""
Abstract interface for input reading systems
"""

from abc import ABC, abstractmethod

from .input_event import InputEvent


class IInputReader(ABC):
    """
    Abstract interface for per-frame input polling.

    Implementations can read pygame events, replay a script, or anything
    else that yields InputEvent snapshots.
    """

    @abstractmethod
    def read_input(self) -> InputEvent:
        """
        Poll everything that happened since the previous call.

        Returns:
            InputEvent: This frame's input (empty when nothing happened)
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release any resources held by the reader"""
        pass

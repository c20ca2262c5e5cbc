"""
Mock Sound Player - No-op implementation for running without audio hardware
"""

from typing import Dict, List

import numpy as np

from .interfaces import ISoundPlayer


class MockSoundPlayer(ISoundPlayer):
    """
    Mock implementation of ISoundPlayer that performs no audio operations.

    Used when the audio device is unavailable and in tests. Handles are
    integers; every play is recorded in `played` so callers can inspect
    what would have been heard.
    """

    def __init__(self, logger):
        """
        Args:
            logger: ClassLogger instance for logging
        """
        self.logger = logger
        self.registered: Dict[int, int] = {}   # handle -> sample count
        self.played: List[int] = []
        self._next_handle = 1

        self.logger.info("🔇 MockSoundPlayer initialized (audio disabled)")

    def register_sound(self, buffer: np.ndarray) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.registered[handle] = len(buffer)
        self.logger.debug(f"Mock: Registered sound {handle} ({len(buffer)} samples)")
        return handle

    def play_sound(self, handle: int) -> None:
        """Mock: record the play"""
        self.played.append(handle)
        self.logger.debug(f"Mock: Playing sound {handle}")

    def release_sound(self, handle: int) -> None:
        self.registered.pop(handle, None)

    def cleanup(self) -> None:
        self.registered.clear()

"""
Abstract interface for audio playback backends
"""

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


class ISoundPlayer(ABC):
    """
    Abstract interface for registering and playing in-memory sounds.

    Separates the game from the audio device. Implementations can use
    pygame.mixer, a no-op mock, or anything else that accepts PCM buffers.
    Handles are opaque to callers.
    """

    @abstractmethod
    def register_sound(self, buffer: np.ndarray) -> Any:
        """
        Turn a PCM16 mono buffer into a playable sound.

        The caller may drop the buffer once this returns.

        Args:
            buffer: numpy int16 array of mono samples

        Returns:
            Opaque handle accepted by play_sound() and release_sound()
        """
        pass

    @abstractmethod
    def play_sound(self, handle: Any) -> None:
        """Start playback of a registered sound (fire-and-forget)"""
        pass

    @abstractmethod
    def release_sound(self, handle: Any) -> None:
        """Release a registered sound; the handle must not be played again"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release the audio device"""
        pass

"""
Sound Controller - pygame.mixer playback of synthesized sounds
"""

from typing import Set

import numpy as np
import pygame

from .interfaces import ISoundPlayer
from .waveform_synth import SAMPLE_RATE


class PygameSoundPlayer(ISoundPlayer):
    """
    Plays in-memory PCM buffers through pygame.mixer.

    Buffers are converted with pygame.sndarray.make_sound(), duplicating the
    mono channel when the device opened in stereo.
    """

    def __init__(self, logger, sample_rate: int = SAMPLE_RATE):
        """
        Open the audio device.

        Args:
            logger: ClassLogger instance for logging
            sample_rate: Requested mixer frequency

        Raises:
            pygame.error: If no audio device could be opened
        """
        self.logger = logger
        self.mixer = pygame.mixer
        self.mixer.init(frequency=sample_rate, size=-16, channels=1, buffer=512)

        init_info = self.mixer.get_init()
        if init_info is None:
            raise pygame.error("pygame.mixer reported no active device after init")

        frequency, _, self._channels = init_info
        if frequency != sample_rate:
            self.logger.warning(f"Mixer opened at {frequency}Hz instead of {sample_rate}Hz - pitch will shift")

        self._sounds: Set[pygame.mixer.Sound] = set()
        self.logger.info(f"🔊 PygameSoundPlayer initialized: {frequency}Hz, {self._channels} channel(s)")

    def register_sound(self, buffer: np.ndarray) -> pygame.mixer.Sound:
        """
        Convert a mono int16 buffer into a pygame Sound.

        Args:
            buffer: numpy int16 array of mono samples

        Returns:
            pygame.mixer.Sound handle
        """
        samples = np.ascontiguousarray(buffer, dtype=np.int16)
        if self._channels > 1:
            samples = np.repeat(samples[:, np.newaxis], self._channels, axis=1)

        sound = pygame.sndarray.make_sound(samples)
        self._sounds.add(sound)
        return sound

    def play_sound(self, handle: pygame.mixer.Sound) -> None:
        """Play a registered sound; failures are logged, never raised"""
        try:
            handle.play()
        except pygame.error as e:
            self.logger.warning(f"Failed to play sound: {e}")

    def release_sound(self, handle: pygame.mixer.Sound) -> None:
        handle.stop()
        self._sounds.discard(handle)

    def cleanup(self) -> None:
        """Stop every sound and close the mixer"""
        for sound in list(self._sounds):
            self.release_sound(sound)
        if self.mixer.get_init():
            self.mixer.quit()
            self.logger.info("Audio device closed")

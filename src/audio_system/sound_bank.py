"""
Sound Bank - The game's sound effects, synthesized once at startup
"""

import enum
from typing import Any, Dict

from .interfaces import ISoundPlayer
from .waveform_synth import FADE_SAMPLES, PEAK_AMPLITUDE, SAMPLE_RATE, WaveformKind, synthesize


class GameSounds(enum.Enum):
    """Game sound effects - each value holds (waveform, duration seconds, frequency Hz)"""
    CORRECT = (WaveformKind.SINE, 0.3, 880)       # ding
    WRONG = (WaveformKind.SAWTOOTH, 0.4, 150)     # buzz
    WIN = (WaveformKind.SINE, 0.8, 660)           # fanfare
    LOSE = (WaveformKind.NOISE, 0.8, 0)           # crash

    def __init__(self, kind: WaveformKind, duration_s: float, frequency_hz: float):
        self.kind = kind
        self.duration_s = duration_s
        self.frequency_hz = frequency_hz


class SoundBank:
    """
    Holds one registered handle per GameSounds member.

    Built once per process with build_all(); read-only afterwards.
    """

    def __init__(self, player: ISoundPlayer, handles: Dict[GameSounds, Any], logger):
        self.player = player
        self.handles = handles
        self.logger = logger

    @classmethod
    def build_all(cls,
                  player: ISoundPlayer,
                  logger,
                  sample_rate: int = SAMPLE_RATE,
                  amplitude: int = PEAK_AMPLITUDE,
                  fade_samples: int = FADE_SAMPLES) -> 'SoundBank':
        """
        Synthesize every game sound and register it with the player.

        Args:
            player: ISoundPlayer that receives the buffers
            logger: ClassLogger instance for logging
            sample_rate: Samples per second of the generated buffers
            amplitude: Peak amplitude in int16 units
            fade_samples: Fade-out window in samples

        Returns:
            SoundBank holding a handle for each GameSounds member

        Raises:
            ValueError: If a sound's synthesis parameters are invalid
        """
        handles: Dict[GameSounds, Any] = {}
        for sound in GameSounds:
            samples = synthesize(
                sound.kind,
                sound.duration_s,
                sound.frequency_hz,
                sample_rate=sample_rate,
                amplitude=amplitude,
                fade_samples=fade_samples,
            )
            handles[sound] = player.register_sound(samples)
            logger.debug(f"Synthesized {sound.name}: {sound.kind.name} {sound.frequency_hz}Hz, {len(samples)} samples")
            # The player owns its copy from here on
            del samples

        logger.info(f"Sound bank ready: {len(handles)} sounds synthesized at {sample_rate}Hz")
        return cls(player, handles, logger)

    def play(self, sound: GameSounds) -> None:
        """Fire-and-forget playback of a game sound"""
        self.player.play_sound(self.handles[sound])

    def release_all(self) -> None:
        """Release every handle; the bank is unusable afterwards"""
        for handle in self.handles.values():
            self.player.release_sound(handle)
        self.handles.clear()

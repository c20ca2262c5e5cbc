"""
Audio System Module

Procedural sound effects for Ultimate Hangman: waveform synthesis,
the game's sound bank, and playback backends (pygame.mixer or a no-op mock).
"""

from .waveform_synth import WaveformKind, synthesize, SAMPLE_RATE, PEAK_AMPLITUDE, FADE_SAMPLES
from .interfaces import ISoundPlayer
from .sound_bank import SoundBank, GameSounds
from .sound_controller import PygameSoundPlayer
from .mock_sound_controller import MockSoundPlayer

__all__ = [
    'WaveformKind',
    'synthesize',
    'SAMPLE_RATE',
    'PEAK_AMPLITUDE',
    'FADE_SAMPLES',
    'ISoundPlayer',
    'SoundBank',
    'GameSounds',
    'PygameSoundPlayer',
    'MockSoundPlayer'
]

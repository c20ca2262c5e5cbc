"""
Waveform Synthesizer - Generates PCM16 mono sample buffers from basic waveforms
"""

import enum
from typing import Optional

import numpy as np


# Constants
SAMPLE_RATE = 44100
PEAK_AMPLITUDE = 10000   # ~30% of int16 full scale (32767)
FADE_SAMPLES = 1000


class WaveformKind(enum.Enum):
    """Basic oscillator shapes"""
    SINE = "sine"
    SQUARE = "square"
    NOISE = "noise"
    SAWTOOTH = "sawtooth"

    @property
    def is_periodic(self) -> bool:
        return self is not WaveformKind.NOISE


def synthesize(kind: WaveformKind,
               duration_s: float,
               frequency_hz: float,
               sample_rate: int = SAMPLE_RATE,
               amplitude: int = PEAK_AMPLITUDE,
               fade_samples: int = FADE_SAMPLES,
               rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Synthesize a mono PCM16 buffer.

    The last `fade_samples` samples are linearly faded towards zero to avoid
    an audible click when playback stops.

    Args:
        kind: WaveformKind to generate
        duration_s: Length in seconds
        frequency_hz: Oscillator frequency (ignored for NOISE)
        sample_rate: Samples per second
        amplitude: Peak amplitude in int16 units
        fade_samples: Length of the fade-out window in samples
        rng: Generator for NOISE; the global numpy random state when None

    Returns:
        numpy int16 array of round(sample_rate * duration_s) samples

    Raises:
        ValueError: If kind is not a WaveformKind or parameters cannot produce a sound
    """
    if not isinstance(kind, WaveformKind):
        raise ValueError(f"Unknown waveform kind: {kind!r}")
    if duration_s < 0:
        raise ValueError(f"Duration must not be negative, got {duration_s}")
    if kind.is_periodic and frequency_hz <= 0:
        raise ValueError(f"{kind.name} needs a positive frequency, got {frequency_hz}")
    if sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate}")
    if fade_samples < 0:
        raise ValueError(f"Fade window must not be negative, got {fade_samples}")

    frame_count = int(round(sample_rate * duration_s))
    index = np.arange(frame_count, dtype=np.float64)
    t = index / sample_rate

    if kind is WaveformKind.SINE:
        wave = np.sin(2.0 * np.pi * frequency_hz * t)
    elif kind is WaveformKind.SQUARE:
        wave = np.where(np.sin(2.0 * np.pi * frequency_hz * t) > 0, 0.5, -0.5)
    elif kind is WaveformKind.NOISE:
        if rng is None:
            wave = np.random.uniform(-1.0, 1.0, frame_count)
        else:
            wave = rng.uniform(-1.0, 1.0, frame_count)
    else:
        period = sample_rate / frequency_hz
        wave = 2.0 * (np.fmod(index, period) / period) - 1.0

    if fade_samples > 0:
        remaining = frame_count - index
        wave = wave * np.minimum(remaining / fade_samples, 1.0)

    # astype truncates toward zero, peak stays well inside int16
    return (wave * amplitude).astype(np.int16)

"""
Game system configuration
"""

from dataclasses import dataclass, field

ALPHABET_SIZE = 26
INT16_MAX = 32767


@dataclass
class WindowConfig:
    """Game window configuration"""
    width: int = 1000
    height: int = 850
    title: str = "Ultimate Hangman"


@dataclass
class KeyboardLayoutConfig:
    """Placement of the 26 on-screen letter keys"""
    start_x: int = 100
    start_y: int = 480
    key_size: int = 50
    padding: int = 10
    columns: int = 13

    @property
    def rows(self) -> int:
        return -(-ALPHABET_SIZE // self.columns)

    @property
    def width(self) -> int:
        return self.columns * self.key_size + (self.columns - 1) * self.padding

    @property
    def height(self) -> int:
        return self.rows * self.key_size + (self.rows - 1) * self.padding


@dataclass
class AudioConfig:
    """Sound synthesis and playback configuration"""
    enabled: bool = True
    sample_rate: int = 44100
    amplitude: int = 10000   # peak, in int16 units
    fade_samples: int = 1000


@dataclass
class GameConfig:
    """Main game configuration"""

    window: WindowConfig = field(default_factory=WindowConfig)
    keyboard_layout: KeyboardLayoutConfig = field(default_factory=KeyboardLayoutConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)

    # Timing configuration
    frame_duration_ms: float = 1000.0 / 60  # 60 FPS

    # Rules
    max_lives: int = 6

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.window.width <= 0 or self.window.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.window.width}x{self.window.height}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.max_lives <= 0:
            raise ValueError(f"Max lives must be positive, got {self.max_lives}")

        layout = self.keyboard_layout
        if layout.columns <= 0 or layout.key_size <= 0 or layout.padding < 0:
            raise ValueError("Keyboard layout needs positive columns and key size, non-negative padding")

        if layout.start_x < 0 or layout.start_y < 0:
            raise ValueError("Keyboard layout must start inside the window")

        if layout.start_x + layout.width > self.window.width or layout.start_y + layout.height > self.window.height:
            raise ValueError(
                f"Keyboard ({layout.width}x{layout.height} at {layout.start_x},{layout.start_y}) "
                f"does not fit in a {self.window.width}x{self.window.height} window"
            )

        if self.audio.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {self.audio.sample_rate}")

        if not (0 < self.audio.amplitude <= INT16_MAX):
            raise ValueError(f"Amplitude must be in 1-{INT16_MAX}, got {self.audio.amplitude}")

        if self.audio.fade_samples < 0:
            raise ValueError(f"Fade window must not be negative, got {self.audio.fade_samples}")

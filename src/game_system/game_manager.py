"""
Main game manager - orchestrates state machine, input, sound and rendering
"""

import random
import time
from typing import Optional, TYPE_CHECKING

import psutil

from utils import OnceInMs
from .config import GameConfig
from .game_session import GameSession
from .level_catalog import LevelCatalog
from .states import GamePhase, GameState, MenuState, PlayingState, GameCompleteState

if TYPE_CHECKING:
    from audio_system.sound_bank import SoundBank
    from input_system.interfaces import IInputReader
    from game_system.renderer import HangmanRenderer
    from utils import ClassLogger


class GameManager:
    """
    Main game manager that orchestrates the entire game system.

    Responsibilities:
    - Own the round session, current tier and sound bank
    - Manage state transitions
    - Run one process-input-then-render step per frame
    - Maintain consistent frame timing
    """

    def __init__(self,
                 input_reader: 'IInputReader',
                 sound_bank: 'SoundBank',
                 catalog: LevelCatalog,
                 logger: 'ClassLogger',
                 config: Optional[GameConfig] = None,
                 renderer: Optional['HangmanRenderer'] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the game manager.

        Args:
            input_reader: Interface for reading player input
            sound_bank: Synthesized game sounds
            catalog: Word tiers
            logger: Logger for debugging and monitoring
            config: Game configuration (defaults when None)
            renderer: Draws each frame; None for headless runs
            rng: Random source for word selection
        """
        self.input_reader = input_reader
        self.sound_bank = sound_bank
        self.catalog = catalog
        self.logger = logger
        self.config = config or GameConfig()
        self.renderer = renderer
        self.rng = rng or random.Random()
        self.target_frame_duration = self.config.frame_duration_ms / 1000.0
        self.running = True

        self.session: Optional[GameSession] = None
        self.current_tier = 0

        # Resource usage monitoring
        self._memory_monitor = OnceInMs(60000)
        self._process = psutil.Process()

        # State management - start at the menu
        self.current_state: GameState = MenuState(self)
        self.current_state.on_enter()

        self.logger.info(f"GameManager initialized: {self.config.target_fps:.0f} FPS, {catalog.tier_count()} tiers")

    @property
    def phase(self) -> GamePhase:
        return self.current_state.phase

    @property
    def tier_count(self) -> int:
        return self.catalog.tier_count()

    # ── Round and tier control (called by states) ─────────────────────────

    def start_new_game(self) -> PlayingState:
        """Reset to the first tier and start a round"""
        return self.start_round(0)

    def start_round(self, tier_index: int) -> PlayingState:
        """Start a fresh round at the given tier"""
        self.session = GameSession.start_round(
            self.catalog,
            tier_index,
            rng=self.rng,
            max_lives=self.config.max_lives,
            keyboard_layout=self.config.keyboard_layout,
        )
        self.current_tier = tier_index
        self.logger.info(f"Round started: tier {tier_index + 1}/{self.tier_count} ({self.catalog.tier_name(tier_index)})")
        return PlayingState(self)

    def advance_tier(self) -> GameState:
        """Move on after a won round, or finish the game after the last tier"""
        if self.current_tier + 1 < self.tier_count:
            return self.start_round(self.current_tier + 1)
        return GameCompleteState(self)

    # ── Commands (headless driving) ──────────────────────────────────────

    def submit_guess(self, letter: str) -> None:
        """Submit a letter to the current state; ignored outside PLAYING and after stop()"""
        if not self.running:
            return
        self._apply(self.current_state.submit_guess(letter))

    def confirm(self) -> None:
        """Send the confirm command to the current state; ignored after stop()"""
        if not self.running:
            return
        self._apply(self.current_state.on_confirm())

    # ── Frame loop ───────────────────────────────────────────────────────

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Returns when the player closes the window.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.time()

                self.update()

                # Frame duration limiting
                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One frame: read input, let the state handle it, then render.

        All mutation happens before rendering, which only reads state.
        """
        if not self.running:
            return

        if self._memory_monitor.should_execute():
            self._log_memory_usage()

        # 1. Sample input
        event = self.input_reader.read_input()
        if event.quit_requested:
            self.logger.info("Window close requested")
            self.running = False
            return

        # 2. Let state handle input and check for state transitions
        self._apply(self.current_state.state_update(event))

        # 3. Render
        if self.renderer is not None:
            self.renderer.render(self)

    def stop(self) -> None:
        """Stop the game and release sounds and input"""
        self.running = False

        if self.sound_bank is not None:
            self.sound_bank.release_all()
            self.sound_bank.player.cleanup()
            self.sound_bank = None

        self.input_reader.cleanup()
        self.logger.info("Game stopped")

    def _apply(self, new_state: Optional[GameState]) -> None:
        if new_state:
            self._transition_to_state(new_state)

    def _log_memory_usage(self) -> None:
        """Log process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            cpu_percent = self._process.cpu_percent(interval=None)
            self.logger.info(f"💾 Memory: {process_mb:.1f}MB | CPU: {cpu_percent:.1f}%")
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")

    def _transition_to_state(self, new_state: GameState) -> None:
        """
        Handle transition to a new game state.

        Args:
            new_state: The new state to transition to
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.current_state.on_enter()

    def get_current_state_name(self) -> str:
        return self.current_state.__class__.__name__

"""
Game state base class and concrete implementations
"""

import enum
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from audio_system.sound_bank import GameSounds
from .game_session import GuessOutcome

if TYPE_CHECKING:
    from input_system.input_event import InputEvent
    from game_system.game_manager import GameManager


class GamePhase(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    VICTORY = "victory"
    GAME_COMPLETE = "game_complete"


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state represents one phase of the game with its own:
    - Input handling logic
    - Reaction to the confirm (ENTER) command
    - State transition conditions

    Every handler returns the next GameState, or None to stay.
    """

    phase: GamePhase

    def __init__(self, game_manager: 'GameManager'):
        self.game_manager: 'GameManager' = game_manager
        self.logger = game_manager.logger.create_class_logger(self.__class__.__name__)

    def state_update(self, event: 'InputEvent') -> Optional['GameState']:
        """
        Handle one frame of input.

        The default waits for the confirm command; letters and clicks are ignored.

        Args:
            event: This frame's input

        Returns:
            New GameState instance if transition needed, None to stay
        """
        if event.confirm_pressed:
            return self.on_confirm()
        return None

    @abstractmethod
    def on_confirm(self) -> Optional['GameState']:
        """Confirm command (start, retry, continue or play again)"""
        pass

    def submit_guess(self, letter: str) -> Optional['GameState']:
        """Letter guess; ignored outside of PlayingState"""
        return None

    def on_enter(self) -> None:
        """Called when entering this state (override if needed)"""
        pass

    def on_exit(self) -> None:
        """Called when exiting this state (override if needed)"""
        pass


class MenuState(GameState):
    """
    Title screen.

    Transitions:
    - Confirm → PlayingState at tier 0
    """

    phase = GamePhase.MENU

    def on_confirm(self) -> Optional[GameState]:
        return self.game_manager.start_new_game()


class PlayingState(GameState):
    """
    A round in progress: letters from the keyboard or clicked virtual keys
    are evaluated against the session.

    Transitions:
    - Word fully revealed → VictoryState
    - Lives exhausted → GameOverState
    """

    phase = GamePhase.PLAYING

    def on_enter(self) -> None:
        session = self.game_manager.session
        self.logger.debug(f"Round word has {len(session.target_word)} letters, hint: {session.target_hint}")

    def state_update(self, event: 'InputEvent') -> Optional[GameState]:
        session = self.game_manager.session
        session.update_hover(event.mouse_pos)

        guesses = list(event.letters)
        if event.mouse_clicked:
            key = session.key_at(event.mouse_pos)
            if key is not None and not key.is_used:
                guesses.append(key.letter)

        for letter in guesses:
            new_state = self.submit_guess(letter)
            if new_state:
                return new_state

        return None

    def on_confirm(self) -> Optional[GameState]:
        return None

    def submit_guess(self, letter: str) -> Optional[GameState]:
        """
        Evaluate a guess, play its sound and check for the end of the round.

        A completed word wins even on the same guess that would otherwise
        end the round. Correct guesses never cost a life, so at most one of
        WIN/LOSE plays per guess.
        """
        session = self.game_manager.session
        sounds = self.game_manager.sound_bank

        outcome = session.submit_guess(letter)
        if outcome is GuessOutcome.IGNORED:
            self.logger.debug(f"Ignored guess {letter!r}")
            return None

        if outcome is GuessOutcome.CORRECT:
            sounds.play(GameSounds.CORRECT)
        else:
            sounds.play(GameSounds.WRONG)
        self.logger.debug(f"Guess {letter.upper()}: {outcome.value} → {session.display_word}, lives {session.lives}")

        if session.is_word_complete:
            sounds.play(GameSounds.WIN)
            return VictoryState(self.game_manager)

        if session.is_out_of_lives:
            sounds.play(GameSounds.LOSE)
            return GameOverState(self.game_manager)

        return None


class GameOverState(GameState):
    """
    Round lost.

    Transitions:
    - Confirm → PlayingState, new word from the same tier
    """

    phase = GamePhase.GAME_OVER

    def on_enter(self) -> None:
        self.logger.info(f"Round lost on tier {self.game_manager.current_tier + 1}, word was {self.game_manager.session.target_word}")

    def on_confirm(self) -> Optional[GameState]:
        return self.game_manager.start_round(self.game_manager.current_tier)


class VictoryState(GameState):
    """
    Round won.

    Transitions:
    - Confirm → PlayingState at the next tier
    - Confirm on the last tier → GameCompleteState
    """

    phase = GamePhase.VICTORY

    def on_enter(self) -> None:
        session = self.game_manager.session
        self.logger.info(f"Round won on tier {self.game_manager.current_tier + 1} with {session.lives} lives left")

    def on_confirm(self) -> Optional[GameState]:
        return self.game_manager.advance_tier()


class GameCompleteState(GameState):
    """
    Every tier cleared.

    Transitions:
    - Confirm → PlayingState at tier 0
    """

    phase = GamePhase.GAME_COMPLETE

    def on_enter(self) -> None:
        self.logger.info("🏆 All tiers cleared")

    def on_confirm(self) -> Optional[GameState]:
        return self.game_manager.start_new_game()

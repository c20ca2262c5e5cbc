"""
Per-round game state: target word, reveal mask, lives and the virtual keyboard
"""

import enum
import random
import string
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from .config import KeyboardLayoutConfig
from .level_catalog import LevelCatalog, WordEntry

MAX_LIVES = 6
PLACEHOLDER = "_"


class GuessState(enum.Enum):
    UNUSED = 0
    CORRECT = 1
    WRONG = 2


class GuessOutcome(enum.Enum):
    """Result of submitting one letter"""
    IGNORED = "ignored"   # not a letter, or already used this round
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass
class VirtualKey:
    """One on-screen letter button"""
    letter: str
    rect: pygame.Rect
    guess_state: GuessState = GuessState.UNUSED
    hover: bool = False   # presentation only

    @property
    def is_used(self) -> bool:
        return self.guess_state is not GuessState.UNUSED


def build_keyboard(layout: Optional[KeyboardLayoutConfig] = None) -> List[VirtualKey]:
    """Create the 26 keys A-Z in rows of layout.columns, all UNUSED"""
    layout = layout or KeyboardLayoutConfig()
    step = layout.key_size + layout.padding
    keys = []
    for i, letter in enumerate(string.ascii_uppercase):
        row, col = divmod(i, layout.columns)
        rect = pygame.Rect(layout.start_x + col * step, layout.start_y + row * step,
                           layout.key_size, layout.key_size)
        keys.append(VirtualKey(letter, rect))
    return keys


class GameSession:
    """
    State of a single round.

    A new session is created for every round (see start_round()); the
    previous one is simply dropped. Letter positions are indexed once at
    construction so each guess is a dictionary lookup.
    """

    def __init__(self,
                 entry: WordEntry,
                 tier_index: int = 0,
                 max_lives: int = MAX_LIVES,
                 keyboard_layout: Optional[KeyboardLayoutConfig] = None):
        self.entry = entry
        self.tier_index = tier_index
        self.max_lives = max_lives
        self.lives = max_lives
        self.reveal_mask: List[str] = [PLACEHOLDER] * len(entry.word)
        self.keyboard: List[VirtualKey] = build_keyboard(keyboard_layout)

        self._keys_by_letter: Dict[str, VirtualKey] = {key.letter: key for key in self.keyboard}
        self._positions: Dict[str, Tuple[int, ...]] = {}
        for index, letter in enumerate(entry.word):
            self._positions[letter] = self._positions.get(letter, ()) + (index,)
        self._hidden_count = len(entry.word)

    @classmethod
    def start_round(cls,
                    catalog: LevelCatalog,
                    tier_index: int,
                    rng: Optional[random.Random] = None,
                    max_lives: int = MAX_LIVES,
                    keyboard_layout: Optional[KeyboardLayoutConfig] = None) -> 'GameSession':
        """
        Start a round with a word picked uniformly at random from a tier.

        Args:
            catalog: LevelCatalog to pick from
            tier_index: Tier to pick from (0-based)
            rng: Random source, the module-level generator when None
            max_lives: Lives at round start
            keyboard_layout: Placement of the virtual keys

        Returns:
            GameSession with nothing revealed, full lives and every key UNUSED
        """
        entry = (rng or random).choice(catalog.entries_for(tier_index))
        return cls(entry, tier_index, max_lives, keyboard_layout)

    @property
    def target_word(self) -> str:
        return self.entry.word

    @property
    def target_hint(self) -> str:
        return self.entry.hint

    @property
    def display_word(self) -> str:
        return "".join(self.reveal_mask)

    @property
    def mistakes(self) -> int:
        return self.max_lives - self.lives

    @property
    def is_word_complete(self) -> bool:
        return self._hidden_count == 0

    @property
    def is_out_of_lives(self) -> bool:
        return self.lives == 0

    def key_for(self, letter: str) -> Optional[VirtualKey]:
        return self._keys_by_letter.get(letter.upper())

    def key_at(self, pos: Tuple[int, int]) -> Optional[VirtualKey]:
        """Virtual key under a screen position, if any"""
        for key in self.keyboard:
            if key.rect.collidepoint(pos):
                return key
        return None

    def update_hover(self, pos: Tuple[int, int]) -> None:
        for key in self.keyboard:
            key.hover = bool(key.rect.collidepoint(pos))

    def submit_guess(self, letter: str) -> GuessOutcome:
        """
        Evaluate one letter.

        Reveals every occurrence on a hit, costs one life on a miss.
        Letters already used this round, and anything that is not A-Z,
        are ignored without changing state.

        Args:
            letter: Single letter, case-insensitive

        Returns:
            GuessOutcome
        """
        key = self.key_for(letter) if len(letter) == 1 and letter in string.ascii_letters else None
        if key is None or key.is_used or self.is_out_of_lives or self.is_word_complete:
            return GuessOutcome.IGNORED

        positions = self._positions.get(key.letter, ())
        if positions:
            for index in positions:
                self.reveal_mask[index] = key.letter
            self._hidden_count -= len(positions)
            key.guess_state = GuessState.CORRECT
            return GuessOutcome.CORRECT

        key.guess_state = GuessState.WRONG
        self.lives -= 1
        return GuessOutcome.WRONG

"""
Shared fixtures for running the game headless
"""

import logging
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from audio_system import MockSoundPlayer, SoundBank
from game_system import GameConfig, GameManager, LevelCatalog
from input_system import ScriptedInputReader
from utils import HybridLogger


@pytest.fixture
def logger():
    hybrid = HybridLogger("HangmanTest")
    yield hybrid.get_main_logger(logging.DEBUG)
    hybrid.cleanup()


@pytest.fixture
def mock_player(logger):
    return MockSoundPlayer(logger)


@pytest.fixture
def sound_bank(mock_player, logger):
    return SoundBank.build_all(mock_player, logger)


@pytest.fixture
def single_word_catalog():
    """Three tiers with exactly one word each, so rounds are predictable"""
    return LevelCatalog.from_dict({
        "Easy": [("CAT", "A small pet.")],
        "Medium": [("DOG", "Another pet.")],
        "Hard": [("ZEBRA", "Striped horse.")],
    })


@pytest.fixture
def make_manager(sound_bank, logger):
    """Factory for a headless GameManager over a given catalog"""
    def _make(catalog, events=None, seed=1234):
        return GameManager(
            input_reader=ScriptedInputReader(events),
            sound_bank=sound_bank,
            catalog=catalog,
            logger=logger,
            config=GameConfig(),
            rng=random.Random(seed),
        )
    return _make


@pytest.fixture
def played(sound_bank, mock_player):
    """Callable returning the GameSounds played so far, in order"""
    by_handle = {handle: sound for sound, handle in sound_bank.handles.items()}

    def _played():
        return [by_handle[handle] for handle in mock_player.played]
    return _played

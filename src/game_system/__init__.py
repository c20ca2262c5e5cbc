"""
Game System - State machine based hangman game

This module provides the core of the game: the level catalog, the
per-round session, the phase state machine and the frame-driven manager.
"""

from .config import GameConfig, WindowConfig, KeyboardLayoutConfig, AudioConfig
from .level_catalog import WordEntry, Tier, LevelCatalog, load_default_catalog
from .game_session import GameSession, GuessState, GuessOutcome, VirtualKey, MAX_LIVES, PLACEHOLDER
from .states import GamePhase, GameState, MenuState, PlayingState, GameOverState, VictoryState, GameCompleteState
from .game_manager import GameManager
from .renderer import HangmanRenderer

__all__ = [
    # Configuration
    "GameConfig",
    "WindowConfig",
    "KeyboardLayoutConfig",
    "AudioConfig",
    # Data model
    "WordEntry",
    "Tier",
    "LevelCatalog",
    "load_default_catalog",
    "GameSession",
    "GuessState",
    "GuessOutcome",
    "VirtualKey",
    "MAX_LIVES",
    "PLACEHOLDER",
    # States
    "GamePhase",
    "GameState",
    "MenuState",
    "PlayingState",
    "GameOverState",
    "VictoryState",
    "GameCompleteState",
    # Orchestration
    "GameManager",
    "HangmanRenderer"
]

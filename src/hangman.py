#!/usr/bin/env python3
"""
Ultimate Hangman - entry point

Builds the configuration, window, synthesized sound bank and game manager,
then runs the frame loop until the window is closed.
"""

import sys

import pygame

from audio_system import MockSoundPlayer, PygameSoundPlayer, SoundBank
from game_system import GameConfig, GameManager, HangmanRenderer, load_default_catalog
from input_system import PygameInputReader
from utils import ClassLogger, HybridLogger


def create_default_config() -> GameConfig:
    """Default configuration: 1000x850 window, 60 FPS, six lives"""
    return GameConfig()


def create_sound_player(config: GameConfig, logger: ClassLogger):
    """
    Open the audio device, or fall back to the silent mock.

    Game logic never depends on audio, so a missing device only costs sound.
    """
    audio_logger = logger.create_class_logger("SoundPlayer")
    if not config.audio.enabled:
        return MockSoundPlayer(audio_logger)

    try:
        return PygameSoundPlayer(audio_logger, sample_rate=config.audio.sample_rate)
    except pygame.error as e:
        logger.warning(f"⚠️ Audio device unavailable ({e}) - continuing without sound")
        return MockSoundPlayer(audio_logger)


def create_game_system(config: GameConfig, logger: ClassLogger) -> GameManager:
    """
    Create and configure the complete game system.

    Raises:
        ValueError: On any configuration error (nothing becomes playable)
    """
    config.validate()
    catalog = load_default_catalog()

    # Display and fonts only; the mixer is opened by the sound player
    pygame.display.init()
    pygame.font.init()
    screen = pygame.display.set_mode((config.window.width, config.window.height))
    pygame.display.set_caption(config.window.title)

    player = create_sound_player(config, logger)
    sound_bank = SoundBank.build_all(
        player,
        logger.create_class_logger("SoundBank"),
        sample_rate=config.audio.sample_rate,
        amplitude=config.audio.amplitude,
        fade_samples=config.audio.fade_samples,
    )

    game_manager = GameManager(
        input_reader=PygameInputReader(logger.create_class_logger("InputReader")),
        sound_bank=sound_bank,
        catalog=catalog,
        logger=logger.create_class_logger("GameManager"),
        config=config,
        renderer=HangmanRenderer(screen),
    )

    logger.info("Game system initialized successfully")
    return game_manager


def runMain() -> int:
    with HybridLogger("Hangman") as logger:
        try:
            logger.info("Ultimate Hangman started")
            game_manager = create_game_system(create_default_config(), logger)
            game_manager.run_game_loop()

        except Exception as e:
            logger.error(f"Failed to run game: {e}", exception=e)
            raise

        finally:
            pygame.quit()
            logger.info("Ultimate Hangman stopped")

    return 0


if __name__ == "__main__":
    sys.exit(runMain())

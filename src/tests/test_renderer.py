import pygame
import pytest

from game_system import HangmanRenderer
from game_system.renderer import BG_TOP, BTN_CORRECT, BTN_HOVER, BTN_NORMAL, BTN_WRONG, LIVES_LOW, LIVES_OK


@pytest.fixture
def screen():
    pygame.font.init()
    yield pygame.Surface((1000, 850))
    pygame.font.quit()


@pytest.fixture
def playing_manager(make_manager, single_word_catalog):
    manager = make_manager(single_word_catalog)
    manager.confirm()
    return manager


def key_fill(screen, key):
    # Left edge midpoint, clear of the rounded corners and the label
    return tuple(screen.get_at((key.rect.left + 3, key.rect.centery)))[:3]


def test_menu_draws_over_background(make_manager, single_word_catalog, screen):
    manager = make_manager(single_word_catalog)
    HangmanRenderer(screen).render(manager)

    assert tuple(screen.get_at((0, 0)))[:3] == BG_TOP
    assert pygame.mask.from_threshold(screen, (100, 200, 255), (10, 10, 10, 255)).count() > 0


def test_keys_are_colored_by_guess_state(playing_manager, screen):
    session = playing_manager.session
    playing_manager.submit_guess("C")
    playing_manager.submit_guess("Q")
    session.update_hover(session.key_for("M").rect.center)

    HangmanRenderer(screen).render(playing_manager)

    assert key_fill(screen, session.key_for("C")) == BTN_CORRECT
    assert key_fill(screen, session.key_for("Q")) == BTN_WRONG
    assert key_fill(screen, session.key_for("M")) == BTN_HOVER
    assert key_fill(screen, session.key_for("B")) == BTN_NORMAL


def test_render_does_not_change_game_state(playing_manager, screen):
    session = playing_manager.session
    playing_manager.submit_guess("Q")
    before = (session.display_word, session.lives, [k.guess_state for k in session.keyboard])

    HangmanRenderer(screen).render(playing_manager)

    assert (session.display_word, session.lives, [k.guess_state for k in session.keyboard]) == before
    assert playing_manager.phase.value == "playing"


@pytest.mark.parametrize("letters,title_color", [
    ("QWXZJK", LIVES_LOW),    # game over
    ("CAT", LIVES_OK),        # victory
])
def test_end_of_round_screens_render(playing_manager, screen, letters, title_color):
    for letter in letters:
        playing_manager.submit_guess(letter)

    HangmanRenderer(screen).render(playing_manager)
    assert pygame.mask.from_threshold(screen, title_color, (10, 10, 10, 255)).count() > 0


def test_champion_screen_renders(playing_manager, screen):
    for word in ("CAT", "DOG", "ZEBRA"):
        for letter in word:
            playing_manager.submit_guess(letter)
        playing_manager.confirm()

    HangmanRenderer(screen).render(playing_manager)
    assert pygame.mask.from_threshold(screen, (255, 203, 0), (10, 10, 10, 255)).count() > 0

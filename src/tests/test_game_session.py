import random
import string

import pytest

from game_system.config import KeyboardLayoutConfig
from game_system.game_session import (
    MAX_LIVES, PLACEHOLDER, GameSession, GuessOutcome, GuessState, build_keyboard,
)
from game_system.level_catalog import WordEntry, load_default_catalog


def make_session(word, max_lives=MAX_LIVES):
    return GameSession(WordEntry(word, "hint"), max_lives=max_lives)


def test_start_round_postconditions():
    catalog = load_default_catalog()
    rng = random.Random(3)

    for tier_index in range(catalog.tier_count()):
        for _ in range(20):
            session = GameSession.start_round(catalog, tier_index, rng=rng)

            assert session.entry in catalog.entries_for(tier_index)
            assert session.tier_index == tier_index
            assert session.reveal_mask == [PLACEHOLDER] * len(session.target_word)
            assert session.lives == MAX_LIVES
            assert [key.letter for key in session.keyboard] == list(string.ascii_uppercase)
            assert all(key.guess_state is GuessState.UNUSED for key in session.keyboard)
            assert not session.is_word_complete


def test_start_round_picks_across_the_tier():
    catalog = load_default_catalog()
    rng = random.Random(11)

    words = {GameSession.start_round(catalog, 2, rng=rng).target_word for _ in range(200)}

    assert words == {entry.word for entry in catalog.entries_for(2)}


def test_correct_guess_reveals_every_occurrence():
    session = make_session("BANANA")

    assert session.submit_guess("A") is GuessOutcome.CORRECT
    assert session.display_word == "_A_A_A"
    assert session.key_for("A").guess_state is GuessState.CORRECT
    assert session.lives == MAX_LIVES


def test_wrong_guess_costs_one_life():
    session = make_session("CAT")

    assert session.submit_guess("Q") is GuessOutcome.WRONG
    assert session.lives == MAX_LIVES - 1
    assert session.mistakes == 1
    assert session.key_for("Q").guess_state is GuessState.WRONG
    assert session.display_word == "___"


def test_repeated_guess_is_a_no_op():
    session = make_session("CAT")
    session.submit_guess("Z")
    session.submit_guess("C")
    snapshot = (list(session.reveal_mask), session.lives, [k.guess_state for k in session.keyboard])

    assert session.submit_guess("Z") is GuessOutcome.IGNORED
    assert session.submit_guess("C") is GuessOutcome.IGNORED
    assert session.submit_guess("c") is GuessOutcome.IGNORED
    assert (list(session.reveal_mask), session.lives, [k.guess_state for k in session.keyboard]) == snapshot


@pytest.mark.parametrize("guess", ["", "1", "AB", "?", "é", "ı", "ſ"])
def test_non_letters_are_ignored(guess):
    session = make_session("CAT")

    assert session.submit_guess(guess) is GuessOutcome.IGNORED
    assert session.lives == MAX_LIVES
    assert all(key.guess_state is GuessState.UNUSED for key in session.keyboard)


def test_lower_case_guess_counts():
    session = make_session("CAT")

    assert session.submit_guess("t") is GuessOutcome.CORRECT
    assert session.display_word == "__T"


def test_lives_never_go_below_zero():
    session = make_session("CAT", max_lives=3)
    previous = session.lives

    for letter in "QWERTYUIOP":
        session.submit_guess(letter)
        assert 0 <= session.lives <= previous
        previous = session.lives

    assert session.lives == 0
    assert session.is_out_of_lives
    # Guesses after the round is lost change nothing
    assert session.submit_guess("C") is GuessOutcome.IGNORED
    assert session.display_word == "___"


def test_word_complete_after_all_letters():
    session = make_session("LOOP")
    for letter in "LOP":
        session.submit_guess(letter)

    assert session.is_word_complete
    assert session.display_word == "LOOP"
    assert session.submit_guess("X") is GuessOutcome.IGNORED


def test_reveal_mask_matches_guessed_letters():
    session = make_session("RECURSION")
    guessed = set()
    for letter in "RXSNZE":
        if session.submit_guess(letter) is GuessOutcome.CORRECT:
            guessed.add(letter)

    for position, letter in enumerate(session.target_word):
        expected = letter if letter in guessed else PLACEHOLDER
        assert session.reveal_mask[position] == expected


def test_keyboard_layout():
    keys = build_keyboard(KeyboardLayoutConfig(start_x=100, start_y=480, key_size=50, padding=10, columns=13))

    assert keys[0].rect.topleft == (100, 480)
    assert keys[12].rect.topleft == (100 + 12 * 60, 480)
    assert keys[13].letter == "N"
    assert keys[13].rect.topleft == (100, 540)
    assert keys[25].rect.size == (50, 50)


def test_key_at_hit_test():
    session = make_session("CAT")

    assert session.key_at((125, 505)).letter == "A"
    assert session.key_at((165, 545)).letter == "O"
    # Gap between keys and outside the keyboard
    assert session.key_at((155, 505)) is None
    assert session.key_at((10, 10)) is None


def test_update_hover_marks_only_the_key_under_pointer():
    session = make_session("CAT")
    session.update_hover((125, 505))

    assert [key.letter for key in session.keyboard if key.hover] == ["A"]

    session.update_hover((0, 0))
    assert not any(key.hover for key in session.keyboard)


def test_letters_that_only_upper_case_to_a_z_are_ignored():
    session = make_session("SIT")

    # "ı".upper() == "I" and "ſ".upper() == "S"
    assert session.submit_guess("ı") is GuessOutcome.IGNORED
    assert session.submit_guess("ſ") is GuessOutcome.IGNORED
    assert session.display_word == "___"
    assert session.lives == MAX_LIVES

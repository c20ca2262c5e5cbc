import pygame
import pytest

from input_system import InputEvent, ScriptedInputReader, translate_events


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="", scancode=0)


def test_letter_keys_become_upper_case_letters():
    event = translate_events([key_down(pygame.K_h), key_down(pygame.K_i)], (0, 0))

    assert event.letters == ["H", "I"]
    assert not event.confirm_pressed
    assert event.any_input


def test_enter_confirms():
    assert translate_events([key_down(pygame.K_RETURN)], (0, 0)).confirm_pressed
    assert translate_events([key_down(pygame.K_KP_ENTER)], (0, 0)).confirm_pressed


def test_other_keys_are_ignored():
    event = translate_events([key_down(pygame.K_1), key_down(pygame.K_SPACE), key_down(pygame.K_ESCAPE)], (5, 5))

    assert event.letters == []
    assert not event.any_input
    assert event.mouse_pos == (5, 5)


def test_left_click_uses_click_position():
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(130, 500))
    event = translate_events([click], (0, 0))

    assert event.mouse_clicked
    assert event.mouse_pos == (130, 500)


def test_right_click_is_not_a_click():
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(130, 500))
    event = translate_events([click], (7, 8))

    assert not event.mouse_clicked
    assert event.mouse_pos == (7, 8)


def test_window_close_requests_quit():
    assert translate_events([pygame.event.Event(pygame.QUIT)], (0, 0)).quit_requested


def test_input_event_keeps_only_letters():
    event = InputEvent(letters=["a", "1", "Z", "", "ab", "é", "ı", "ſ"])

    assert event.letters == ["A", "Z"]


def test_input_event_rejects_bad_fields():
    with pytest.raises(TypeError):
        InputEvent(letters="ABC")
    with pytest.raises(ValueError):
        InputEvent(mouse_pos=(1, 2, 3))


def test_empty_event_has_no_input():
    event = InputEvent()

    assert not event.any_input
    assert "letters=''" in str(event)


def test_scripted_reader_replays_in_order():
    first = InputEvent(confirm_pressed=True)
    second = InputEvent(letters=["C"])
    reader = ScriptedInputReader([first])
    reader.push(second)

    assert reader.pending == 2
    assert reader.read_input() is first
    assert reader.read_input() is second
    assert not reader.read_input().any_input
    assert reader.frames_read == 3


def test_scripted_reader_can_quit_when_exhausted():
    reader = ScriptedInputReader(quit_when_exhausted=True)

    assert reader.read_input().quit_requested

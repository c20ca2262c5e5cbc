"""
pygame event queue reader
"""

from typing import Iterable, Tuple

import pygame

from .input_event import InputEvent
from .interfaces import IInputReader

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
LEFT_MOUSE_BUTTON = 1


def translate_events(events: Iterable[pygame.event.Event], mouse_pos: Tuple[int, int]) -> InputEvent:
    """
    Fold a batch of pygame events into one InputEvent.

    Letter keys become upper-case letters regardless of shift state.
    A left click reports the click position rather than the current pointer.

    Args:
        events: Events drained from the pygame queue this frame
        mouse_pos: Current pointer position

    Returns:
        InputEvent for this frame
    """
    letters = []
    clicked = False
    confirm = False
    quit_requested = False

    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in CONFIRM_KEYS:
                confirm = True
            elif pygame.K_a <= event.key <= pygame.K_z:
                letters.append(chr(event.key).upper())
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_MOUSE_BUTTON:
            clicked = True
            mouse_pos = event.pos

    return InputEvent(
        letters=letters,
        mouse_pos=tuple(mouse_pos),
        mouse_clicked=clicked,
        confirm_pressed=confirm,
        quit_requested=quit_requested,
    )


class PygameInputReader(IInputReader):
    """
    Reads keyboard, mouse and window events from pygame.

    pygame.display must be initialized before the first read_input() call.
    """

    def __init__(self, logger):
        """
        Args:
            logger: ClassLogger instance for logging
        """
        self._logger = logger
        self._logger.info("PygameInputReader initialized")

    def read_input(self) -> InputEvent:
        event = translate_events(pygame.event.get(), pygame.mouse.get_pos())
        if event.any_input:
            self._logger.debug(str(event))
        return event

    def cleanup(self) -> None:
        pygame.event.clear()
        self._logger.info("Input reader cleaned up")

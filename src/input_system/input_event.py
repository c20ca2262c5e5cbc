"""
InputEvent - Snapshot of one frame's player input
"""

import string
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class InputEvent:
    """
    Everything the player did during one frame.

    Usage:
        event = InputEvent(letters=["C"], mouse_pos=(120, 500))
        if event.confirm_pressed:
            ...
    """
    letters: List[str] = field(default_factory=list)   # A-Z typed this frame, in order
    mouse_pos: Tuple[int, int] = (0, 0)
    mouse_clicked: bool = False      # Left button press edge
    confirm_pressed: bool = False    # ENTER
    quit_requested: bool = False     # Window close

    # Calculated field
    any_input: bool = field(init=False)

    def __post_init__(self):
        if not isinstance(self.letters, list):
            raise TypeError("letters must be a list of str")
        if len(self.mouse_pos) != 2:
            raise ValueError(f"mouse_pos must be an (x, y) pair, got {self.mouse_pos!r}")

        # Only upper-case A-Z matter to the game
        self.letters = [
            letter.upper() for letter in self.letters
            if len(letter) == 1 and letter in string.ascii_letters
        ]
        self.any_input = bool(self.letters) or self.mouse_clicked or self.confirm_pressed or self.quit_requested

    def __str__(self) -> str:
        return (
            f"InputEvent("
            f"letters={''.join(self.letters)!r}, "
            f"mouse={self.mouse_pos}, "
            f"clicked={self.mouse_clicked}, "
            f"confirm={self.confirm_pressed}, "
            f"quit={self.quit_requested}"
            f")"
        )

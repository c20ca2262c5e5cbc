"""
Level catalog - difficulty tiers of (word, hint) entries
"""

import string
from dataclasses import dataclass
from typing import Iterable, Tuple

_LETTERS = frozenset(string.ascii_uppercase)


@dataclass(frozen=True)
class WordEntry:
    """A target word and the hint shown while guessing it"""
    word: str
    hint: str

    def __post_init__(self):
        if not self.word:
            raise ValueError("Word must not be empty")
        if not set(self.word) <= _LETTERS:
            raise ValueError(f"Word must contain only letters A-Z, got {self.word!r}")


@dataclass(frozen=True)
class Tier:
    """Named difficulty bucket"""
    name: str
    entries: Tuple[WordEntry, ...]

    def __post_init__(self):
        if not self.entries:
            raise ValueError(f"Tier '{self.name}' has no words")


class LevelCatalog:
    """
    Ordered, read-only list of tiers. Index 0 is the easiest.

    Raises ValueError on construction if the catalog or any tier is empty,
    so a broken catalog never reaches the game loop.
    """

    def __init__(self, tiers: Iterable[Tier]):
        self._tiers: Tuple[Tier, ...] = tuple(tiers)
        if not self._tiers:
            raise ValueError("Level catalog needs at least one tier")

    def tier_count(self) -> int:
        return len(self._tiers)

    def entries_for(self, tier_index: int) -> Tuple[WordEntry, ...]:
        return self._tier(tier_index).entries

    def tier_name(self, tier_index: int) -> str:
        return self._tier(tier_index).name

    def _tier(self, tier_index: int) -> Tier:
        if not (0 <= tier_index < len(self._tiers)):
            raise IndexError(f"Tier {tier_index} out of range (0-{len(self._tiers) - 1})")
        return self._tiers[tier_index]

    @classmethod
    def from_dict(cls, data: dict) -> 'LevelCatalog':
        """
        Build a catalog from {tier name: [(word, hint), ...]}, preserving order.

        Words are upper-cased before validation.
        """
        return cls(
            Tier(name, tuple(WordEntry(word.upper(), hint) for word, hint in pairs))
            for name, pairs in data.items()
        )


DEFAULT_LEVELS = {
    "Easy": [
        ("PIXEL", "The smallest unit of a digital image."),
        ("CODE", "Instructions for a computer."),
        ("BUG", "An error in a program."),
        ("RAM", "Temporary computer memory."),
        ("LOOP", "Repeating a block of code."),
        ("DATA", "Information processed by a computer."),
        ("WIFI", "Wireless networking technology."),
        ("JAVA", "A popular programming language."),
        ("MOUSE", "Handheld pointing device."),
        ("FILE", "A resource for storing information."),
    ],
    "Medium": [
        ("POINTER", "A variable that stores a memory address."),
        ("ARRAY", "A collection of items stored at contiguous memory."),
        ("SYNTAX", "The grammar rules of a programming language."),
        ("STRING", "A sequence of characters."),
        ("BINARY", "A system of zeros and ones."),
        ("SERVER", "A computer that provides data to others."),
        ("PYTHON", "A snake, but also a coding language."),
        ("DRIVER", "Software that controls hardware."),
        ("KERNEL", "The core part of an operating system."),
        ("SOCKET", "Endpoint for sending or receiving data."),
    ],
    "Hard": [
        ("ALGORITHM", "A step-by-step procedure for solving a problem."),
        ("COMPILER", "Translates code into machine language."),
        ("POLYMORPHISM", "Objects of different types treated as the same."),
        ("RECURSION", "When a function calls itself."),
        ("ENCRYPTION", "Encoding data to prevent unauthorized access."),
        ("ABSTRACTION", "Hiding complex implementation details."),
        ("INHERITANCE", "Deriving a class from another class."),
        ("BANDWIDTH", "Maximum data transfer rate."),
        ("FIREWALL", "Network security system."),
        ("DEBUGGING", "The process of finding and fixing bugs."),
    ],
}


def load_default_catalog() -> LevelCatalog:
    """The built-in three-tier catalog"""
    return LevelCatalog.from_dict(DEFAULT_LEVELS)

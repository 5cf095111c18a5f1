"""
charsets.py - The four character classes and their fixed alphabets.

Shared by the generator (what to draw from) and the evaluator (what to
recognize). ASCII only.
"""

import enum
import string
from typing import FrozenSet

# Character sets
UPPERCASE = string.ascii_uppercase      # A-Z
LOWERCASE = string.ascii_lowercase      # a-z
DIGITS = string.digits                  # 0-9
SYMBOLS = "!@#$%^&*()_-+=<>?/{}[]|"

# Ambiguous characters that look similar in many fonts
# The GUI offers to add these to the exclusion set
AMBIGUOUS = "Il1O0oS5Z2"


class CharacterClass(enum.Enum):
    """One of the four character categories a password can draw from."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]


_ALPHABETS = {
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.DIGIT: DIGITS,
    CharacterClass.SYMBOL: SYMBOLS,
}

ALL_CLASSES: FrozenSet[CharacterClass] = frozenset(CharacterClass)

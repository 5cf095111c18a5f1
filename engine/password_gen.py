"""
password_gen.py - Secure password generator.

How this works:
1. The caller picks a length, the character classes to use and any
   characters to exclude
2. Excluded characters are stripped from each class's alphabet
3. We guarantee at least one character from every class that still has
   characters left after exclusion
4. The rest is filled from the combined pool and the whole thing is
   shuffled with Fisher-Yates so the guaranteed characters can land anywhere

Every draw goes through a RandomSource (see randomness.py). The default one
uses the `secrets` module, NOT `random`: `random` is a Mersenne Twister whose
output can be predicted once enough of it has been observed.

Generation is all-or-nothing. It either returns a password that honors every
rule or raises a GenerationError before producing anything.
"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Optional

from engine.charsets import ALL_CLASSES, AMBIGUOUS, CharacterClass
from engine.randomness import DEFAULT_SOURCE, RandomSource

logger = logging.getLogger(__name__)


class GenerationError(ValueError):
    """Base class for the ways password generation can fail."""


class ConfigurationError(GenerationError):
    """No character class was enabled."""


class PoolExhaustedError(GenerationError):
    """Every character of every enabled class was excluded."""


def filter_alphabets(
    classes: Iterable[CharacterClass],
    exclude: Iterable[str] = "",
) -> Dict[CharacterClass, str]:
    """
    Strip excluded characters from each enabled class's alphabet.

    Classes come back in canonical order (upper, lower, digit, symbol) with
    their characters in alphabet order. A class left with nothing after the
    exclusions is dropped from the result instead of failing.

    Args:
        classes: The enabled character classes
        exclude: Characters that must never appear in the output

    Returns:
        Dict of class -> filtered alphabet, only for non-empty alphabets
    """
    enabled = set(classes)
    excluded = set(exclude)
    filtered = {}

    for char_class in CharacterClass:
        if char_class not in enabled:
            continue
        chars = "".join(c for c in char_class.alphabet if c not in excluded)
        if chars:
            filtered[char_class] = chars
        else:
            logger.info("All %s characters excluded; dropping the class", char_class.value)

    return filtered


def _shuffle(chars: List[str], source: RandomSource) -> None:
    """In-place Fisher-Yates shuffle driven by the given source."""
    for i in range(len(chars) - 1, 0, -1):
        j = source.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def generate_password(
    length: int = 16,
    classes: AbstractSet[CharacterClass] = ALL_CLASSES,
    exclude: Iterable[str] = "",
    source: Optional[RandomSource] = None,
) -> str:
    """
    Generate a random password.

    The approach:
    1. Filter each selected class's alphabet against the exclusions
    2. Pick one character from every class that still has characters
    3. Fill the rest from the combined pool
    4. Shuffle everything so the guaranteed chars aren't always at the start

    The result can be LONGER than `length`: when fewer slots are requested
    than there are classes to cover (say length 2 with all four classes), the
    password grows to one character per class. This is intentional. Capping
    it would drop the one-of-each-class guarantee.

    Args:
        length: Requested password length
        classes: Character classes to draw from
        exclude: Characters that must never appear (any iterable of chars)
        source: Where the randomness comes from (default: OS CSPRNG)

    Returns:
        The generated password, max(length, number of non-empty classes) long

    Raises:
        ConfigurationError: If no character class is selected
        PoolExhaustedError: If the exclusions remove every candidate character
    """
    if source is None:
        source = DEFAULT_SOURCE

    if not classes:
        logger.warning("Generation failed: no character class selected")
        raise ConfigurationError("At least one character type must be selected.")

    alphabets = filter_alphabets(classes, exclude)
    pool = "".join(alphabets.values())

    if not pool:
        logger.warning("Generation failed: exclusions removed every candidate character")
        raise PoolExhaustedError("Every character of the selected types is excluded.")

    # Guarantee at least one from each surviving class
    required_chars = [source.choice(chars) for chars in alphabets.values()]

    actual_length = max(length, len(required_chars))
    remaining = actual_length - len(required_chars)
    password_chars = required_chars + [source.choice(pool) for _ in range(remaining)]

    _shuffle(password_chars, source)

    logger.debug(
        "Generated password: requested=%d actual=%d classes=%s pool=%d",
        length, actual_length, [c.value for c in alphabets], len(pool),
    )
    return "".join(password_chars)


@dataclass(frozen=True)
class GenerationRequest:
    """
    A snapshot of generator settings, built once per generation.

    Args:
        length: Requested password length
        classes: Enabled character classes
        exclude: Characters to leave out
    """

    length: int = 16
    classes: FrozenSet[CharacterClass] = ALL_CLASSES
    exclude: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_options(
        cls,
        length: int,
        use_uppercase: bool = True,
        use_lowercase: bool = True,
        use_digits: bool = True,
        use_symbols: bool = True,
        exclude: str = "",
        exclude_ambiguous: bool = False,
    ) -> "GenerationRequest":
        """Build a request from checkbox-style flags, as the generator view does."""
        flags = {
            CharacterClass.UPPERCASE: use_uppercase,
            CharacterClass.LOWERCASE: use_lowercase,
            CharacterClass.DIGIT: use_digits,
            CharacterClass.SYMBOL: use_symbols,
        }
        excluded = set(exclude)
        if exclude_ambiguous:
            excluded.update(AMBIGUOUS)
        return cls(
            length=length,
            classes=frozenset(c for c, on in flags.items() if on),
            exclude=frozenset(excluded),
        )

    def generate(self, source: Optional[RandomSource] = None) -> str:
        return generate_password(self.length, self.classes, self.exclude, source)

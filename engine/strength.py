"""
strength.py - Password strength evaluation.

Two independent measurements:

1. Entropy estimate: length * log2(charset size), where the charset size is
   the sum of the sizes of the character classes actually present in the
   password. This is the classic brute-force estimate, not real Shannon
   entropy, but it is easy to explain to a user.
2. Heuristic score: points for length and variety, minus penalties for the
   patterns people reach for (keyboard runs, "password", "aaa", ...). The
   score and the number of character types decide the StrengthLevel.

Everything here is a pure function of the input string. Nothing is cached
and the same input always gives the same result.
"""

import enum
import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from engine.charsets import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE

logger = logging.getLogger(__name__)


MIN_LENGTH = 8

# Score thresholds for the final categorization
SCORE_THRESHOLD_VERY_STRONG = 45
SCORE_THRESHOLD_STRONG = 30
SCORE_THRESHOLD_MEDIUM = 15

SEQUENCE_PENALTY = 7
WEAK_WORD_PENALTY = 12
REPEAT_RUN_PENALTY = 6
OVERUSE_PENALTY = 3

# Alphabet runs plus the three keyboard rows
COMMON_SEQUENCES_ALPHA = (
    "abc", "bcd", "cde", "def", "efg", "fgh", "ghi", "hij", "ijk", "jkl", "klm", "lmn",
    "mno", "nop", "opq", "pqr", "qrs", "rst", "stu", "tuv", "uvw", "vwx", "wxy", "xyz",
    "qwe", "wer", "ert", "rty", "tyu", "yui", "uio", "iop",
    "asd", "sdf", "dfg", "fgh", "ghj", "hjk", "jkl",
    "zxc", "xcv", "cvb", "vbn", "bnm",
)

COMMON_SEQUENCES_NUM = (
    "123", "234", "345", "456", "567", "678", "789", "890",
    "098", "987", "876", "765", "654", "543", "432", "321",
)

COMMON_WEAK_WORDS = (
    "password", "pass", "admin", "administrator", "user", "username", "login",
    "logon", "guest", "test", "secret", "qwerty", "azerty", "12345", "123456",
    "1234567", "12345678", "123456789", "root", "support", "service", "welcome",
    "example", "demo", "changeme",
)


class StrengthLevel(enum.IntEnum):
    """
    Discrete strength category, ordered weakest to strongest.

    EMPTY is only ever returned for empty input. Display names and colors
    belong to the GUI (see gui/theme.py).
    """

    EMPTY = 0
    WEAK = 1
    MEDIUM = 2
    STRONG = 3
    VERY_STRONG = 4


@dataclass(frozen=True)
class Composition:
    """Which character classes a password actually contains."""

    has_lowercase: bool = False
    has_uppercase: bool = False
    has_digits: bool = False
    has_symbols: bool = False

    @property
    def types_count(self) -> int:
        return sum((self.has_lowercase, self.has_uppercase, self.has_digits, self.has_symbols))

    @property
    def charset_size(self) -> int:
        size = 0
        if self.has_lowercase:
            size += len(LOWERCASE)
        if self.has_uppercase:
            size += len(UPPERCASE)
        if self.has_digits:
            size += len(DIGITS)
        if self.has_symbols:
            size += len(SYMBOLS)
        return size


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of evaluate().

    Args:
        level: The strength category
        entropy_bits: Brute-force entropy estimate, 0.0 for empty input
        score: Raw heuristic score behind the category
    """

    level: StrengthLevel
    entropy_bits: float
    score: int = 0


def analyze_composition(password: Optional[str]) -> Composition:
    """
    Scan the password once and record which classes it contains.

    Only ASCII letters, digits and the generator's symbol set count.
    Anything else (spaces, accented letters, emoji, ...) is ignored here.
    """
    has_lower = has_upper = has_digit = has_symbol = False
    for c in password or "":
        if c in LOWERCASE:
            has_lower = True
        elif c in UPPERCASE:
            has_upper = True
        elif c in DIGITS:
            has_digit = True
        elif c in SYMBOLS:
            has_symbol = True
    return Composition(has_lower, has_upper, has_digit, has_symbol)


def estimate_entropy(password: Optional[str]) -> float:
    """
    Estimate password entropy in bits.

    Entropy = length * log2(pool_size)

    pool_size only counts the classes present in the password. Unrecognized
    characters still add to the length. A pool of 0 or 1 gives 0.0 so we never
    take log2 of something degenerate.

    Args:
        password: The password to measure (None is treated as empty)

    Returns:
        Entropy in bits
    """
    if not password:
        return 0.0
    return _entropy(len(password), analyze_composition(password))


def _entropy(length: int, composition: Composition) -> float:
    pool_size = composition.charset_size
    if pool_size <= 1:
        return 0.0
    return length * math.log2(pool_size)


def _length_score(length: int) -> int:
    if 8 <= length <= 9:
        return -5   # bare minimum
    if 10 <= length <= 12:
        return 10
    if 13 <= length <= 15:
        return 15
    if 16 <= length <= 20:
        return 20
    if length > 20:
        return 25
    return 0


def _presence_score(composition: Composition) -> int:
    score = 0
    if composition.has_lowercase:
        score += 5
    if composition.has_uppercase:
        score += 8
    if composition.has_digits:
        score += 8
    if composition.has_symbols:
        score += 12
    return score


def _types_bonus(types_count: int, length: int) -> int:
    if types_count == 1 and length >= MIN_LENGTH:
        return -5
    if types_count == 2:
        return 7
    if types_count == 3:
        return 12
    if types_count == 4:
        return 18
    return 0


def _penalties(password: str) -> int:
    """Total points taken off for predictable patterns."""
    penalty = 0
    lowered = password.lower()
    length = len(password)

    # Only one sequence penalty ever applies: letters first, then digits
    if any(seq in lowered for seq in COMMON_SEQUENCES_ALPHA):
        penalty += SEQUENCE_PENALTY
    elif any(seq in password for seq in COMMON_SEQUENCES_NUM):
        penalty += SEQUENCE_PENALTY

    if any(word in lowered for word in COMMON_WEAK_WORDS):
        penalty += WEAK_WORD_PENALTY

    # 3+ identical characters in a row
    for i in range(length - 2):
        if password[i] == password[i + 1] == password[i + 2]:
            penalty += REPEAT_RUN_PENALTY
            break

    # Any single character making up more than a third of the password
    if length > 5:
        limit = length // 3
        for count in Counter(password).values():
            if count > limit:
                penalty += OVERUSE_PENALTY * (count - limit)

    return penalty


def score_password(password: Optional[str]) -> int:
    """
    Compute the heuristic strength score.

    Score = length bracket + per-class bonus + variety bonus - penalties.
    The score alone doesn't decide the level; see evaluate().
    """
    if not password:
        return 0
    return _score(password, analyze_composition(password))


def _score(password: str, composition: Composition) -> int:
    length = len(password)
    return (
        _length_score(length)
        + _presence_score(composition)
        + _types_bonus(composition.types_count, length)
        - _penalties(password)
    )


def _categorize(types_count: int, score: int) -> StrengthLevel:
    if types_count == 4 and score >= SCORE_THRESHOLD_VERY_STRONG:
        return StrengthLevel.VERY_STRONG
    if types_count >= 3 and score >= SCORE_THRESHOLD_STRONG:
        return StrengthLevel.STRONG
    if types_count >= 2 and score >= SCORE_THRESHOLD_MEDIUM:
        return StrengthLevel.MEDIUM
    return StrengthLevel.WEAK


def evaluate(password: Optional[str]) -> EvaluationResult:
    """
    Evaluate a password's strength.

    Rules, in order:
    - Empty or None -> EMPTY with 0.0 bits
    - Shorter than 8 characters -> WEAK, whatever the score
    - No recognized character class at all -> WEAK
    - Otherwise the score and the number of classes present pick the level

    Never raises for None or str input.

    Args:
        password: The password to evaluate

    Returns:
        EvaluationResult with level, entropy estimate and raw score
    """
    if not password:
        return EvaluationResult(StrengthLevel.EMPTY, 0.0, 0)

    composition = analyze_composition(password)
    entropy = _entropy(len(password), composition)
    score = _score(password, composition)

    if len(password) < MIN_LENGTH or composition.types_count == 0:
        level = StrengthLevel.WEAK
    else:
        level = _categorize(composition.types_count, score)

    logger.debug(
        "Evaluated password: length=%d types=%d score=%d level=%s",
        len(password), composition.types_count, score, level.name,
    )
    return EvaluationResult(level, entropy, score)

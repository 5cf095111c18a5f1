"""
randomness.py - Random source used by the password generator.

All randomness in the generator goes through a RandomSource. The shipped
implementation is backed by Python's `secrets` module, which reads from the
operating system's CSPRNG (/dev/urandom on Linux, BCryptGenRandom on
Windows). It is never seeded and is safe to share between threads.

Tests swap in a scripted source so the generator's output can be replayed
draw by draw.
"""

import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """
    Interface for "pick a uniform index in a range".

    Subclasses only need to implement randbelow(); choice() is built on it so
    every draw the generator makes is a single randbelow() call.
    """

    def randbelow(self, n: int) -> int:
        """Return a uniformly distributed integer in [0, n)."""
        raise NotImplementedError

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence.")
        return seq[self.randbelow(len(seq))]


class SecureRandomSource(RandomSource):
    """RandomSource backed by the OS cryptographic random number generator."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


# Process-wide default, shared read-only by every generator call
DEFAULT_SOURCE = SecureRandomSource()

"""
session.py - In-memory history of the passwords copied this session.

Newest first, capped at a fixed size, gone when the app closes. Nothing
here ever touches the disk. Kept free of Tk imports so it can be used and
tested without a display.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from engine.strength import EvaluationResult, StrengthLevel


@dataclass(frozen=True)
class HistoryItem:
    password: str
    level: StrengthLevel
    entropy_bits: float
    created_at: datetime = field(default_factory=datetime.now)


class SessionHistory:
    """
    Bounded, newest-first list of generated passwords.

    Args:
        limit: Maximum number of entries kept; the oldest drop off first
    """

    def __init__(self, limit: int = 50):
        if limit < 1:
            raise ValueError("History limit must be at least 1.")
        self.limit = limit
        self._items: List[HistoryItem] = []

    def add(self, password: str, result: EvaluationResult) -> HistoryItem:
        item = HistoryItem(password, result.level, result.entropy_bits)
        self._items.insert(0, item)
        del self._items[self.limit:]
        return item

    def items(self) -> List[HistoryItem]:
        return list(self._items)

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

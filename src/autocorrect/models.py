# src/autocorrect/models.py
"""
Data models for the autocorrect engine.

- Dictionary: the loaded word list, an immutable ordered tuple.
- Suggestion: one ranked dictionary word plus its edit distance to the query.

These are plain containers; scoring and ranking live in distance.py and
engine.py.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Tuple

# Loaded once, never mutated afterwards
Dictionary = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Suggestion:
    """
    A dictionary word returned for a query.

    Attributes
    ----------
    word : str
        The dictionary entry, verbatim as loaded.
    distance : int
        Levenshtein distance between ``word`` and the query. Always within
        the engine threshold.
    """
    word: str
    distance: int

    def sort_key(self) -> tuple[int, str]:
        # distance first, then code point order of the raw word
        return (self.distance, self.word)

    def to_dict(self) -> dict:
        return asdict(self)

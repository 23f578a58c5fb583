# autocorrect/engine.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from . import config as CFG
from .distance import levenshtein
from .loader import load_dictionary
from .models import Dictionary, Suggestion

log = logging.getLogger(__name__)


class Engine:
    """
    Holds the loaded dictionary and the edit-distance threshold, and ranks
    dictionary words against a typed query.

    Public API (used by CLI/Flask):
      * Engine(words, threshold)
      * Engine.from_dictionary(name, root=..., threshold=...)
      * rank(typed):     list[Suggestion], closest first
      * query(typed):    list[str], the words of rank(typed)
      * is_valid(typed): exact dictionary membership

    Ordering is (distance ascending, word ascending). Python's sort is
    stable, so duplicate dictionary entries keep their load order.
    """

    # ------------- lifecycle -------------

    def __init__(self, words: Iterable[str], threshold: int = CFG.DEFAULT_THRESHOLD) -> None:
        threshold = int(threshold)
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        self._words: Dictionary = tuple(words)
        self._threshold = threshold
        self._lookup = frozenset(self._words)

    @classmethod
    def from_dictionary(
        cls,
        name: str = CFG.DEFAULT_DICTIONARY,
        *,
        root: str | Path = CFG.DICTIONARY_DIR,
        threshold: int = CFG.DEFAULT_THRESHOLD,
    ) -> "Engine":
        words = load_dictionary(name, root)
        eng = cls(words, threshold)
        log.info("Engine ready: words=%d threshold=%d", len(eng.words), eng.threshold)
        return eng

    @property
    def words(self) -> Dictionary:
        return self._words

    @property
    def threshold(self) -> int:
        return self._threshold

    # ------------- query -------------

    # /* ~~~ score every word once, keep those within threshold, sort ~~~ */
    def rank(self, typed: str) -> List[Suggestion]:
        t = self._threshold
        hits: List[Suggestion] = []
        for w in self._words:
            d = levenshtein(w, typed, limit=t)
            if d <= t:
                hits.append(Suggestion(word=w, distance=d))
        hits.sort(key=Suggestion.sort_key)
        log.debug("rank(%r): %d of %d words within %d", typed, len(hits), len(self._words), t)
        return hits

    def query(self, typed: str) -> List[str]:
        return [s.word for s in self.rank(typed)]

    def is_valid(self, typed: str) -> bool:
        return typed in self._lookup

    def __len__(self) -> int:
        return len(self._words)

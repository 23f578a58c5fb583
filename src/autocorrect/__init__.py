"""
Autocorrect Module

Suggests dictionary words close to a typed word. Closeness is Levenshtein
edit distance; a word qualifies when its distance to the query is at most a
fixed threshold. Suggestions come back closest first, ties in alphabetical
(code point) order.

The module keeps the concerns apart:
- Edit distance scoring (distance)
- Dictionary loading (loader)
- Ranking against the dictionary (engine)
- The interactive prompt loop (driver)

Main Functions:
    load_dictionary(name): Load dictionaries/<name>.txt into a tuple
    Engine(words, threshold).query(typed): Ranked suggestions for a word

Example Usage:
    from autocorrect import Engine

    engine = Engine(["kitten", "sitting", "bitten", "mitten"], threshold=2)
    engine.query("kitten")   # ['kitten', 'bitten', 'mitten']
"""

# src/autocorrect/__init__.py
from .distance import levenshtein
from .loader import load_dictionary
from .engine import Engine
from .models import Suggestion

__version__ = "1.0.0"
__all__ = ["levenshtein", "load_dictionary", "Engine", "Suggestion"]

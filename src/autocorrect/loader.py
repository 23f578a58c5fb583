"""
Dictionary Loading Module

Reads a word list from ``<root>/<name>.txt`` into an immutable tuple.

File format:
    line 1        decimal word count n (n >= 0)
    lines 2..n+1  one word per line

The count is authoritative: anything after the n-th word is ignored, and a
file holding fewer than n words is rejected. Every failure raises, so the
caller never sees a partial dictionary.

Key Functions:
    dictionary_path(name, root): Resolve a logical name to a file path
    read_dictionary(stream): Parse an open text stream
    load_dictionary(name, root): Open, parse and close in one call
"""

# src/autocorrect/loader.py
from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import List, TextIO

from .config import DICTIONARY_DIR, DICTIONARY_EXT, ENCODING
from .models import Dictionary

log = logging.getLogger(__name__)

# ASCII digits only; str.isdigit() would also accept other scripts
_COUNT_RE = re.compile(r"[0-9]+")


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def dictionary_path(name: str, root: str | Path = DICTIONARY_DIR) -> Path:
    """Map a dictionary name to ``<root>/<name>.txt``."""
    return Path(root) / f"{name}{DICTIONARY_EXT}"


def read_dictionary(stream: TextIO) -> Dictionary:
    """
    Parse the count header and exactly that many word lines from ``stream``.

    Raises:
        ValueError: header missing or not a decimal integer, or the body
            holds fewer lines than the header announces.
    """
    header = stream.readline()
    if header == "":
        raise ValueError("dictionary is empty: missing word count line")
    count_text = _strip_eol(header).strip()
    if not _COUNT_RE.fullmatch(count_text):
        raise ValueError(f"invalid word count line: {count_text!r}")
    n = int(count_text)

    words: List[str] = []
    for i in range(n):
        line = stream.readline()
        if line == "":
            raise ValueError(f"dictionary truncated: expected {n} words, found {i}")
        words.append(_strip_eol(line))
    return tuple(words)


def load_dictionary(name: str, root: str | Path = DICTIONARY_DIR) -> Dictionary:
    """
    Load the dictionary called ``name`` from ``root``.

    Raises:
        OSError: the file cannot be opened (FileNotFoundError when missing).
        ValueError: malformed header, truncated body or undecodable text.
    """
    path = dictionary_path(name, root)
    with path.open("r", encoding=ENCODING) as f:
        words = read_dictionary(f)
    log.info("Loaded dictionary %s: words=%d", path, len(words))
    return words

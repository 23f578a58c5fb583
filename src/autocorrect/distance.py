from __future__ import annotations
from typing import List, Optional


def levenshtein(a: str, b: str, limit: Optional[int] = None) -> int:
    """
    Unit-cost edit distance (insert / delete / substitute) between a and b.

    Rows of the DP table are kept two at a time:
        D[0][j] = j, D[i][0] = i
        D[i][j] = D[i-1][j-1]                                  if a[i-1] == b[j-1]
                = 1 + min(D[i-1][j], D[i][j-1], D[i-1][j-1])   otherwise

    With ``limit`` set, the scan stops as soon as the result is known to be
    larger than limit and returns ``limit + 1``. Any result <= limit is exact.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    if a == b:
        return 0
    if limit is not None and abs(len(a) - len(b)) > limit:
        return limit + 1

    # keep the inner loop on the shorter string
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        row_min = i
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cell = prev[j - 1]
            else:
                cell = 1 + min(prev[j], cur[j - 1], prev[j - 1])
            cur[j] = cell
            if cell < row_min:
                row_min = cell
        # row minimum never decreases further down the table
        if limit is not None and row_min > limit:
            return limit + 1
        prev = cur

    d = prev[-1]
    if limit is not None and d > limit:
        return limit + 1
    return d


def within(a: str, b: str, threshold: int) -> bool:
    """True iff levenshtein(a, b) <= threshold."""
    return levenshtein(a, b, limit=threshold) <= threshold

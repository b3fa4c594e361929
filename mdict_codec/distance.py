# ==================================================
# mdict_codec/distance.py
# ==================================================
from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

import numpy as np

from .const import NO_MATCH_DISTANCE, FUZZY_LIMIT, FUZZY_MAX_DISTANCE


class Suggestion(NamedTuple):
    key: str
    distance: int


def levenshtein_distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Edit distance (insert / delete / substitute, no transpositions).
    A missing or empty operand gives NO_MATCH_DISTANCE instead of raising.
    """
    if not a or not b:
        return NO_MATCH_DISTANCE
    m, n = len(a), len(b)
    cols = np.arange(n + 1, dtype=np.int64)
    b_codes = np.fromiter(map(ord, b), dtype=np.int64, count=n)
    table = np.empty((m + 1, n + 1), dtype=np.int64)
    table[0] = cols
    # one row at a time: deletion and substitution are elementwise over the
    # previous row, insertion is a running minimum along the current one
    for i in range(1, m + 1):
        prev = table[i - 1]
        cost = (b_codes != ord(a[i - 1])).astype(np.int64)
        row = np.empty(n + 1, dtype=np.int64)
        row[0] = i
        row[1:] = np.minimum(prev[1:] + 1, prev[:-1] + cost)
        table[i] = np.minimum.accumulate(row - cols) + cols
    return int(table[m, n])


def suggest(word: str,
            candidates: Iterable[str],
            limit: int = FUZZY_LIMIT,
            max_distance: int = FUZZY_MAX_DISTANCE) -> list[Suggestion]:
    """
    Rank near-miss keys for a "did you mean" list.
    Closest first; ties keep the order the candidates came in.
    """
    scored = []
    for pos, key in enumerate(candidates):
        dist = levenshtein_distance(word, key)
        if dist != NO_MATCH_DISTANCE and dist <= max_distance:
            scored.append((dist, pos, key))
    scored.sort()
    return [Suggestion(key, dist) for dist, _, key in scored[:max(limit, 0)]]

# ==================================================
# mdict_codec/keys.py
# ==================================================
"""Lookup-key normalization and the orderings MDict indexes are sorted by."""
from __future__ import annotations

import re
from enum import Enum
from functools import cmp_to_key, lru_cache
from typing import Callable, Optional, Sequence

from pyuca import Collator

from .errors import InvalidArgument


class Flavor(Enum):
    INDEX    = "mdx"     # headword index
    RESOURCE = "mdd"     # companion resource archive


# -------- normalization ---------------------------------------------------

# RESOURCE keeps the last ".ext" (group 1) and strips the rest
STRIP_KEY_PATTERNS = {
    Flavor.INDEX:    re.compile(r"[()., '/\\@_-]"),
    Flavor.RESOURCE: re.compile(r"([.][^.]*$)|[()., '/\\@_-]"),
}
_EXTENSION = re.compile(r"(?:\.([^.]+))?$")


def strip_key(key: str, flavor: Flavor = Flavor.INDEX) -> str:
    """Remove punctuation and blanks the way the container writer did."""
    if not key:
        return ""
    return STRIP_KEY_PATTERNS[flavor].sub(r"\1" if flavor is Flavor.RESOURCE else "", key)


def adapt_key(key: str, settings) -> str:
    """Prepare a user-typed key for lookup in the file described by `settings`."""
    if settings.strip_key:
        key = strip_key(key, settings.flavor)
    if not settings.key_case_sensitive:
        key = key.lower()
    return key


def get_extension(filename: str, default: Optional[str] = None) -> Optional[str]:
    """'a/b.mdd' -> 'mdd'; no extension -> `default`."""
    return _EXTENSION.search(filename).group(1) or default


def flavor_for(filename: str) -> Flavor:
    ext = (get_extension(filename) or "").lower()
    return Flavor.RESOURCE if ext == Flavor.RESOURCE.value else Flavor.INDEX


# -------- comparators -----------------------------------------------------

def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def casefold_compare(word1: str, word2: str) -> int:
    """
    Case-insensitive compare used by indexes that were sorted ignoring case.
    The first character that differs even after lower-casing decides; if
    none does, the shorter word sorts first.
    """
    if not word1 or not word2:
        raise InvalidArgument(f"cannot compare keys {word1!r} and {word2!r}")
    for c1, c2 in zip(word1, word2):
        if c1 == c2:
            continue
        l1, l2 = c1.lower(), c2.lower()
        if l1 != l2:
            return -1 if l1 < l2 else 1
    return _sign(len(word1) - len(word2))


def ordinal_compare(word1: str, word2: str) -> int:
    """Plain code-point order ('Z' < 'a'), for case-sensitive indexes."""
    return (word1 > word2) - (word1 < word2)


@lru_cache(maxsize=None)
def _collator() -> Collator:
    # parses the bundled allkeys table
    return Collator()


def locale_compare(word1: str, word2: str) -> int:
    """
    Unicode collation (root locale): "a.png" < "B.png", "b.png" < "B.png".
    Code-point order only breaks ties the collation leaves.
    """
    sort_key = _collator().sort_key
    k1, k2 = sort_key(word1), sort_key(word2)
    return ((k1 > k2) - (k1 < k2)) or ordinal_compare(word1, word2)


class KeyOrder(Enum):
    """The ordering an index was written in; pick one per file and keep it."""
    CASE_FOLDING = "casefold"
    ORDINAL      = "ordinal"
    LOCALE       = "locale"

    @property
    def comparator(self) -> Callable[[str, str], int]:
        return _COMPARATORS[self]

    def compare(self, word1: str, word2: str) -> int:
        return _COMPARATORS[self](word1, word2)

    def sort_key(self, word: str):
        return cmp_to_key(_COMPARATORS[self])(word)


_COMPARATORS = {
    KeyOrder.CASE_FOLDING: casefold_compare,
    KeyOrder.ORDINAL:      ordinal_compare,
    KeyOrder.LOCALE:       locale_compare,
}


def select_key_order(case_sensitive: bool, flavor: Flavor = Flavor.INDEX) -> KeyOrder:
    if flavor is Flavor.RESOURCE:
        return KeyOrder.LOCALE
    return KeyOrder.ORDINAL if case_sensitive else KeyOrder.CASE_FOLDING


def bisect_keys(keys: Sequence[str], key: str, order: KeyOrder) -> int:
    """
    Leftmost insertion point of `key` in `keys`.
    `keys` must already be sorted by `order`, otherwise the answer is garbage.
    """
    lo, hi = 0, len(keys)
    while lo < hi:
        mid = (lo + hi) // 2
        if order.compare(keys[mid], key) < 0:
            lo = mid + 1
        else:
            hi = mid
    return lo

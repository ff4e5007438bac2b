"""Longest-token search over a TokenCollection."""

from typing import Iterable, List, Optional

from .models import LongestTokens, TokenEntry


def find_longest(collection: Iterable[TokenEntry]) -> Optional[LongestTokens]:
    """
    Return the maximum token length and every entry of that length.

    Ties are sorted ascending by text. The collection is alphabetical but
    tied entries need not be adjacent in it, so the tied subset is sorted
    on its own. An empty collection returns None.
    """
    entries: List[TokenEntry] = list(collection)
    if not entries:
        return None

    max_length = 0
    for entry in entries:
        if entry.length > max_length:
            max_length = entry.length

    tied = [entry for entry in entries if entry.length == max_length]
    tied.sort(key=lambda entry: entry.text)
    return LongestTokens(length=max_length, entries=tied)

"""
Token Collection - Alphabetically ordered table of unique words or lines.

One collection type serves both word and line analysis; the two differ only
in the tokenizer that feeds them:

- iter_words(): maximal runs of non-whitespace bytes
- iter_lines(): newline-delimited records with the trailing newline removed

Tokens are decoded as latin-1 so every byte maps to exactly one code point.
Ordering and equality on the decoded text are therefore byte-wise.
"""

from __future__ import annotations

import bisect
import logging
from typing import BinaryIO, Callable, Dict, Iterator, List

from .models import TokenEntry

logger = logging.getLogger(__name__)

TOKEN_ENCODING = "latin-1"

Tokenizer = Callable[[BinaryIO], Iterator[str]]


# =============================================================================
# TOKENIZERS
# =============================================================================

def iter_words(stream: BinaryIO) -> Iterator[str]:
    """Yield whitespace-delimited words from offset zero.

    Whitespace is space, tab, newline, carriage return, vertical tab and
    form feed. Words never span lines because newline is whitespace.
    """
    stream.seek(0)
    for raw_line in stream:
        for raw_word in raw_line.split():
            yield raw_word.decode(TOKEN_ENCODING)


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield newline-delimited lines from offset zero.

    The trailing ``\\n`` is stripped; empty lines are yielded as ``""``.
    A final record without a newline is still a line.
    """
    stream.seek(0)
    for raw_line in stream:
        if raw_line.endswith(b"\n"):
            raw_line = raw_line[:-1]
        yield raw_line.decode(TOKEN_ENCODING)


# =============================================================================
# COLLECTION
# =============================================================================

class TokenCollection:
    """
    Unique tokens kept in strict ascending order at all times.

    ``insert`` either bumps the frequency of an existing entry (its first
    index is left untouched) or splices a new entry in at its sorted
    position. Iteration always yields entries alphabetically.
    """

    def __init__(self, name: str = "token"):
        self.name = name
        self.total = 0
        self._keys: List[str] = []
        self._entries: Dict[str, TokenEntry] = {}

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO,
        tokenizer: Tokenizer,
        name: str = "token",
    ) -> "TokenCollection":
        """Build a collection from every token ``tokenizer`` reads from ``stream``."""
        collection = cls(name=name)
        for appearance_index, text in enumerate(tokenizer(stream)):
            collection.insert(text, appearance_index)
        logger.debug(
            "Built %s collection: %d total, %d unique",
            name, collection.total, len(collection),
        )
        return collection

    def insert(self, text: str, appearance_index: int) -> TokenEntry:
        self.total += 1
        entry = self._entries.get(text)
        if entry is not None:
            entry.frequency += 1
            return entry

        entry = TokenEntry(text=text, first_index=appearance_index)
        position = bisect.bisect_left(self._keys, text)
        self._keys.insert(position, text)
        self._entries[text] = entry
        return entry

    def texts(self) -> List[str]:
        return list(self._keys)

    @property
    def is_empty(self) -> bool:
        return not self._keys

    def __contains__(self, text: object) -> bool:
        return text in self._entries

    def __iter__(self) -> Iterator[TokenEntry]:
        for key in self._keys:
            yield self._entries[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"TokenCollection(name={self.name!r}, total={self.total}, unique={len(self)})"


def build_word_collection(stream: BinaryIO) -> TokenCollection:
    return TokenCollection.from_stream(stream, iter_words, name="word")


def build_line_collection(stream: BinaryIO) -> TokenCollection:
    return TokenCollection.from_stream(stream, iter_lines, name="line")

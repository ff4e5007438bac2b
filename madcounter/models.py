"""
MADCounter Models - Data structures shared by the analysis pipeline.

Core Types:
- AnalysisKind: The five analyses a request can ask for, keyed by flag
- AnalysisRequest: One validated analysis instruction (input, output, order)
- CharacterTally: Frequency and first position for each 7-bit byte value
- TokenEntry: Statistics for one unique word or line
- LongestTokens: Maximum token length plus the alphabetically ordered ties
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


ASCII_RANGE = 128


class AnalysisKind(str, Enum):
    """Analyses supported by a request. Values are the command-line flags."""

    CHARACTERS = "-c"
    WORDS = "-w"
    LINES = "-l"
    LONGEST_WORD = "-Lw"
    LONGEST_LINE = "-Ll"

    @property
    def flag(self) -> str:
        return self.value

    @classmethod
    def from_flag(cls, flag: str) -> Optional["AnalysisKind"]:
        """Return the kind for an exact flag match, or None."""
        for kind in cls:
            if kind.value == flag:
                return kind
        return None

    @property
    def uses_words(self) -> bool:
        return self in {AnalysisKind.WORDS, AnalysisKind.LONGEST_WORD}

    @property
    def uses_lines(self) -> bool:
        return self in {AnalysisKind.LINES, AnalysisKind.LONGEST_LINE}


class AnalysisRequest(BaseModel):
    """
    A validated request: which file to read, where to write, and which
    analyses to render in which order.

    ``order`` records each kind once, in the order its flag was first seen.
    Report sections follow this order, not the enum order.
    """

    input_path: str = Field(..., min_length=1, description="File to analyze")
    output_path: Optional[str] = Field(
        default=None,
        description="Report destination; None writes to standard output",
    )
    order: List[AnalysisKind] = Field(
        default_factory=list,
        description="Requested analyses in first-seen flag order",
    )

    @field_validator("order")
    @classmethod
    def _drop_repeated_kinds(cls, value: List[AnalysisKind]) -> List[AnalysisKind]:
        seen: List[AnalysisKind] = []
        for kind in value:
            if kind not in seen:
                seen.append(kind)
        return seen

    def wants(self, kind: AnalysisKind) -> bool:
        return kind in self.order

    @property
    def needs_characters(self) -> bool:
        return self.wants(AnalysisKind.CHARACTERS)

    @property
    def needs_words(self) -> bool:
        return any(kind.uses_words for kind in self.order)

    @property
    def needs_lines(self) -> bool:
        return any(kind.uses_lines for kind in self.order)


@dataclass
class CharacterTally:
    """Per-byte statistics for the 0-127 domain.

    ``first_position[v]`` is meaningful only when ``frequency[v] > 0``.
    """

    frequency: List[int] = field(default_factory=lambda: [0] * ASCII_RANGE)
    first_position: List[int] = field(default_factory=lambda: [0] * ASCII_RANGE)
    unique_count: int = 0
    total_count: int = 0

    def present(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(value, count, first_position)`` for every seen byte, ascending."""
        for value in range(ASCII_RANGE):
            count = self.frequency[value]
            if count > 0:
                yield value, count, self.first_position[value]


@dataclass
class TokenEntry:
    """One unique token. ``first_index`` is fixed at creation."""

    text: str
    first_index: int
    frequency: int = 1

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass
class LongestTokens:
    """Result of a longest-token search."""

    length: int
    entries: List[TokenEntry] = field(default_factory=list)

    @property
    def texts(self) -> List[str]:
        return [entry.text for entry in self.entries]

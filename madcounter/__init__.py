"""
MADCounter - Character, word and line statistics for 7-bit text files.

This package analyzes a text file and reports:

1. **Characters**: frequency and first byte offset for every value 0-127
2. **Words / Lines**: alphabetical table of unique tokens with frequency and
   first-appearance index
3. **Longest Word / Line**: maximum token length and every tied token

Single request:
    from madcounter import parse_arguments, run_request

    request = parse_arguments(["-f", "notes.txt", "-w", "-Lw"])
    report = run_request(request)

Batch (one request per control-file line):
    from madcounter import run_batch

    summary = run_batch("jobs.txt")

Building blocks:
    from madcounter import TokenCollection, iter_words, find_longest

    with open("notes.txt", "rb") as fh:
        words = TokenCollection.from_stream(fh, iter_words, name="word")
    longest = find_longest(words)

Known limitation: input must be 7-bit clean. The character analysis raises
CharacterRangeError on any byte above 127.
"""

from .models import (
    ASCII_RANGE,
    AnalysisKind,
    AnalysisRequest,
    CharacterTally,
    TokenEntry,
    LongestTokens,
)
from .errors import (
    MadCounterError,
    UsageError,
    InvalidFlagError,
    NoInputFileError,
    CantOpenInputFileError,
    InputFileEmptyError,
    NoOutputFileError,
    CantOpenOutputFileError,
    CantOpenBatchFileError,
    BatchFileEmptyError,
    CharacterRangeError,
)
from .char_tally import tally_characters
from .token_collection import (
    TokenCollection,
    iter_words,
    iter_lines,
    build_word_collection,
    build_line_collection,
)
from .longest import find_longest
from .request_parser import parse_arguments
from .report import (
    AnalysisArtifacts,
    build_artifacts,
    render_report,
)
from .pipeline import run_request
from .batch import BatchSummary, run_batch

__all__ = [
    # Models
    "ASCII_RANGE",
    "AnalysisKind",
    "AnalysisRequest",
    "CharacterTally",
    "TokenEntry",
    "LongestTokens",
    # Errors
    "MadCounterError",
    "UsageError",
    "InvalidFlagError",
    "NoInputFileError",
    "CantOpenInputFileError",
    "InputFileEmptyError",
    "NoOutputFileError",
    "CantOpenOutputFileError",
    "CantOpenBatchFileError",
    "BatchFileEmptyError",
    "CharacterRangeError",
    # Analyses
    "tally_characters",
    "TokenCollection",
    "iter_words",
    "iter_lines",
    "build_word_collection",
    "build_line_collection",
    "find_longest",
    # Requests and reports
    "parse_arguments",
    "AnalysisArtifacts",
    "build_artifacts",
    "render_report",
    "run_request",
    # Batch
    "BatchSummary",
    "run_batch",
]

__version__ = "1.0.0"

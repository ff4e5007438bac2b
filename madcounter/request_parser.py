"""
Request Parser - Turns an argument list into an AnalysisRequest.

Grammar (left to right, first error aborts):
    -f <path>    input file (required); path must not start with "-"
    -o <path>    output file (optional); path must not start with "-"
    -c -w -l -Lw -Ll
                 analyses; first appearance fixes report order, repeats are ignored
    anything else
                 InvalidFlagError
"""

import logging
from typing import List, Optional, Sequence

from .config import config
from .errors import (
    InvalidFlagError,
    NoInputFileError,
    NoOutputFileError,
    UsageError,
)
from .models import AnalysisKind, AnalysisRequest

logger = logging.getLogger(__name__)

FLAG_MARKER = "-"
INPUT_FLAG = "-f"
OUTPUT_FLAG = "-o"
BATCH_FLAG = "-B"

# Program name excluded
MIN_ARGUMENTS = 2


def _looks_like_flag(arg: str) -> bool:
    return arg.startswith(FLAG_MARKER)


def _take_path(args: Sequence[str], index: int, error: type) -> str:
    """Return the path after the flag at ``index`` or raise ``error``."""
    if index + 1 >= len(args):
        raise error()
    candidate = args[index + 1]
    if not candidate or _looks_like_flag(candidate):
        raise error()
    return candidate


def check_argument_count(args: Sequence[str]) -> None:
    if len(args) < MIN_ARGUMENTS:
        raise UsageError(config.PROGRAM_NAME)


def parse_arguments(args: Sequence[str]) -> AnalysisRequest:
    """
    Validate ``args`` (without the program name) and build a request.

    Raises UsageError, InvalidFlagError, NoInputFileError or
    NoOutputFileError; the first problem found wins.
    """
    check_argument_count(args)

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    order: List[AnalysisKind] = []

    index = 0
    while index < len(args):
        arg = args[index]

        if arg == INPUT_FLAG:
            input_path = _take_path(args, index, NoInputFileError)
            index += 2
            continue

        if arg == OUTPUT_FLAG:
            output_path = _take_path(args, index, NoOutputFileError)
            index += 2
            continue

        kind = AnalysisKind.from_flag(arg)
        if kind is None:
            logger.debug("Rejecting argument %r at position %d", arg, index)
            raise InvalidFlagError(arg)
        if kind not in order:
            order.append(kind)
        index += 1

    if input_path is None:
        raise NoInputFileError()

    return AnalysisRequest(input_path=input_path, output_path=output_path, order=order)

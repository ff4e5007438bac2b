"""Command-line entry point for MADCounter."""

import logging
import sys
from typing import List, Optional

from .batch import run_batch
from .errors import MadCounterError, UsageError
from .logging_utils import configure_logging, report_error
from .pipeline import run_request
from .request_parser import BATCH_FLAG, check_argument_count, parse_arguments

logger = logging.getLogger(__name__)


def _run_single(args: List[str]) -> int:
    try:
        request = parse_arguments(args)
        run_request(request)
    except MadCounterError as exc:
        report_error(exc)
        return 1
    return 0


def _run_batch(args: List[str]) -> int:
    if len(args) > 2:
        logger.debug("Ignoring arguments after batch file: %s", args[2:])
    try:
        run_batch(args[1])
    except MadCounterError as exc:
        report_error(exc)
    # Batch mode always exits 0 once the arguments are well formed
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging()

    try:
        check_argument_count(args)
    except UsageError as exc:
        report_error(exc)
        return 1

    try:
        if args[0] == BATCH_FLAG:
            return _run_batch(args)
        return _run_single(args)
    except MemoryError:
        report_error(MadCounterError("Memory allocation failed"))
        return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())

"""
Batch Driver - Runs one independent request per control-file line.

Each non-blank line uses the single-run flag grammar without a program name.
A failing line is reported and skipped; it never stops the batch.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .errors import BatchFileEmptyError, CantOpenBatchFileError, MadCounterError
from .logging_utils import AnalysisLogger, Phase, report_error
from .pipeline import run_request
from .request_parser import parse_arguments

logger = logging.getLogger(__name__)


@dataclass
class BatchSummary:
    """Outcome counts for one batch run."""

    processed: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0


def read_batch_lines(batch_path: str) -> List[str]:
    """
    Return the control file's lines with trailing newlines removed.

    Lines are decoded with the filesystem encoding, so paths that are not
    valid text round-trip unchanged to ``open()``.
    """
    try:
        handle = open(batch_path, "rb")
    except OSError as exc:
        logger.debug("Opening batch file %s failed: %s", batch_path, exc)
        raise CantOpenBatchFileError() from exc
    with handle:
        return [os.fsdecode(line.rstrip(b"\n")) for line in handle]


def run_batch(
    batch_path: str,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> BatchSummary:
    """
    Process every line of ``batch_path`` as its own request.

    Raises CantOpenBatchFileError or BatchFileEmptyError for the control file
    itself. Errors raised while handling a line are reported to ``stderr``
    and counted; processing continues with the next line.
    """
    lines = read_batch_lines(batch_path)
    if not lines:
        raise BatchFileEmptyError()

    summary = BatchSummary()
    for line_number, line in enumerate(lines, start=1):
        args = line.split()
        if not args:
            summary.skipped += 1
            continue

        summary.processed += 1
        run_logger = AnalysisLogger(label=f"{batch_path}:{line_number}")
        try:
            with run_logger.phase(Phase.BATCH):
                request = parse_arguments(args)
                run_request(request, stdout=stdout, run_logger=run_logger)
        except MadCounterError as exc:
            summary.failed += 1
            run_logger.info(f"Line {line_number} failed: {type(exc).__name__}")
            report_error(exc, stderr)
            continue
        summary.succeeded += 1

    logger.info(
        "Batch %s finished: %d processed, %d succeeded, %d failed, %d blank",
        batch_path, summary.processed, summary.succeeded, summary.failed, summary.skipped,
    )
    return summary

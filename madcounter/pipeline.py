"""
Single-request runner: open input, analyze, render, write.

File handles never outlive the request. The input is closed before the
report is written, and the output file is opened only once the report is
fully rendered, so a failing request leaves no partial output behind.

Report text is written with ``config.OUTPUT_ENCODING`` to every sink, so
standard output carries the same bytes an output file would.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from .config import config
from .errors import CantOpenInputFileError, CantOpenOutputFileError, InputFileEmptyError
from .logging_utils import AnalysisLogger, Phase
from .models import AnalysisRequest
from .report import build_artifacts, render_report

logger = logging.getLogger(__name__)


def _write_stream(report: str, sink: TextIO) -> None:
    buffer = getattr(sink, "buffer", None)
    if buffer is None:
        sink.write(report)
        sink.flush()
        return
    # Text layer encoding is bypassed
    sink.flush()
    buffer.write(report.encode(config.OUTPUT_ENCODING, errors="replace"))
    buffer.flush()


def write_report(report: str, output_path: Optional[str], stdout: Optional[TextIO] = None) -> None:
    """Write ``report`` to ``output_path`` (truncating it) or to stdout."""
    if output_path is None:
        _write_stream(report, stdout or sys.stdout)
        return

    try:
        handle = open(
            output_path, "w",
            encoding=config.OUTPUT_ENCODING, errors="replace", newline="",
        )
    except OSError as exc:
        logger.debug("Opening output %s failed: %s", output_path, exc)
        raise CantOpenOutputFileError() from exc

    try:
        with handle:
            handle.write(report)
    except OSError as exc:
        logger.debug("Writing output %s failed: %s", output_path, exc)
        raise CantOpenOutputFileError() from exc


def run_request(
    request: AnalysisRequest,
    stdout: Optional[TextIO] = None,
    run_logger: Optional[AnalysisLogger] = None,
) -> str:
    """
    Execute one validated request and return the rendered report.

    Raises:
        CantOpenInputFileError: input cannot be opened or read
        InputFileEmptyError: input holds zero bytes (checked before any analysis)
        CharacterRangeError: character analysis met a byte above 127
        CantOpenOutputFileError: output cannot be opened or written
    """
    run_logger = run_logger or AnalysisLogger(label=request.input_path)

    try:
        handle = open(request.input_path, "rb")
    except OSError as exc:
        logger.debug("Opening input %s failed: %s", request.input_path, exc)
        raise CantOpenInputFileError() from exc

    with handle:
        try:
            if os.fstat(handle.fileno()).st_size == 0:
                raise InputFileEmptyError()
            artifacts = build_artifacts(handle, request, run_logger)
        except OSError as exc:
            logger.debug("Reading input %s failed: %s", request.input_path, exc)
            raise CantOpenInputFileError() from exc

    with run_logger.phase(Phase.RENDER):
        report = render_report(request, artifacts)

    write_report(report, request.output_path, stdout)
    run_logger.log_timing_summary()
    run_logger.debug(f"Finished {request.input_path} ({len(request.order)} analyses requested)")
    return report

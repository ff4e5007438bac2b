"""
Logging Utilities for MADCounter
================================

Logging setup, per-analysis phase timing and colored error reporting.

Log records go to stderr through the standard ``logging`` module. Report
text is never routed through here; it is written directly to its sink.
IMPORTANT: No emojis in console output (Windows encoding issues).
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, TextIO

from colorama import Fore, Style, init

from .config import config
from .errors import MadCounterError

# Initialize colorama for Windows
init(autoreset=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Phase:
    """Phase constants for one analysis request"""
    CHARACTERS = "CHARACTER_TALLY"
    WORDS = "WORD_COLLECTION"
    LINES = "LINE_COLLECTION"
    LONGEST = "LONGEST_SEARCH"
    RENDER = "REPORT_RENDER"
    BATCH = "BATCH_LINE"


PHASE_COLORS = {
    Phase.CHARACTERS: Fore.CYAN,
    Phase.WORDS: Fore.GREEN,
    Phase.LINES: Fore.BLUE,
    Phase.LONGEST: Fore.MAGENTA,
    Phase.RENDER: Fore.YELLOW,
    Phase.BATCH: Fore.WHITE + Style.BRIGHT,
}

# Text-based tags, no emojis
PHASE_ICONS = {
    Phase.CHARACTERS: "[CHR]",
    Phase.WORDS: "[WRD]",
    Phase.LINES: "[LIN]",
    Phase.LONGEST: "[LNG]",
    Phase.RENDER: "[OUT]",
    Phase.BATCH: "[BAT]",
}


def configure_logging(level: Optional[int] = None) -> None:
    """Route log records to stderr at ``level`` (defaults to the configured level)."""
    logging.basicConfig(
        level=level if level is not None else config.log_level_value,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _paint(text: str, color: str) -> str:
    if not config.COLOR_OUTPUT:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def report_error(error: MadCounterError, stream: Optional[TextIO] = None) -> None:
    """Print a user-facing error, red when colors are enabled."""
    stream = stream or sys.stderr
    stream.write(_paint(error.render(), Fore.RED + Style.BRIGHT) + "\n")
    stream.flush()


class TimingTracker:
    """Accumulate elapsed wall time per phase name"""

    def __init__(self):
        self._timings: Dict[str, float] = {}
        self._order: List[str] = []

    @contextmanager
    def measure(self, key: str) -> Iterator[None]:
        started = time.perf_counter()
        try:
            yield
        finally:
            self.add(key, time.perf_counter() - started)

    def add(self, key: str, elapsed: float) -> None:
        if key not in self._timings:
            self._order.append(key)
            self._timings[key] = 0.0
        self._timings[key] += elapsed

    def get(self, key: str) -> Optional[float]:
        return self._timings.get(key)

    def items(self) -> List[tuple]:
        return [(key, self._timings[key]) for key in self._order]

    @property
    def total(self) -> float:
        return sum(self._timings.values())


class AnalysisLogger:
    """
    Phase-aware logger for a single request

    Usage:
        run_logger = AnalysisLogger(label="notes.txt", verbose=True)

        with run_logger.phase(Phase.WORDS):
            collection = build_word_collection(stream)

        run_logger.log_timing_summary()
    """

    def __init__(
        self,
        label: str,
        verbose: Optional[bool] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.label = label
        self.verbose = config.VERBOSE if verbose is None else verbose
        self.logger = logger or logging.getLogger(__name__)
        self.timing_tracker = TimingTracker()
        self._current_phase: Optional[str] = None

    @contextmanager
    def phase(self, phase_name: str) -> Iterator["AnalysisLogger"]:
        previous = self._current_phase
        self._current_phase = phase_name
        if self.verbose:
            self._log_phase_line(phase_name, "start")
        try:
            with self.timing_tracker.measure(phase_name):
                yield self
        finally:
            if self.verbose:
                elapsed = self.timing_tracker.get(phase_name) or 0.0
                self._log_phase_line(phase_name, f"done in {elapsed * 1000:.2f}ms")
            self._current_phase = previous

    def _log_phase_line(self, phase_name: str, status: str) -> None:
        color = PHASE_COLORS.get(phase_name, Fore.WHITE)
        icon = PHASE_ICONS.get(phase_name, "[???]")
        self.logger.info(_paint(f"{icon} {phase_name} ({self.label}) {status}", color))

    def info(self, message: str) -> None:
        if self._current_phase:
            icon = PHASE_ICONS.get(self._current_phase, "[???]")
            self.logger.info(f"{icon} {message}")
        else:
            self.logger.info(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def log_timing_summary(self) -> None:
        """Log elapsed time per phase (verbose only)"""
        if not self.verbose:
            return
        timings = self.timing_tracker.items()
        if not timings:
            return
        self.logger.info(_paint(f"TIMING SUMMARY ({self.label})", Fore.WHITE + Style.BRIGHT))
        for phase_name, elapsed in timings:
            color = PHASE_COLORS.get(phase_name, Fore.WHITE)
            self.logger.info(_paint(f"{phase_name:20s} {elapsed * 1000:10.2f}ms", color))
        self.logger.info(
            _paint(f"TOTAL TIME: {self.timing_tracker.total * 1000:.2f}ms", Fore.WHITE + Style.BRIGHT)
        )

"""
Report Renderer
===============

Builds the artifacts a request needs and renders them as plain text.

Sections appear in the request's flag order and are separated by exactly one
blank line. A longest-word or longest-line section whose collection is empty
is skipped entirely and contributes no separator.
"""

from dataclasses import dataclass
from typing import BinaryIO, List, Optional

from .char_tally import tally_characters
from .logging_utils import AnalysisLogger, Phase
from .longest import find_longest
from .models import AnalysisKind, AnalysisRequest, CharacterTally, LongestTokens
from .token_collection import TokenCollection, build_line_collection, build_word_collection


@dataclass
class AnalysisArtifacts:
    """Everything computed for one request. Unrequested parts stay None."""

    characters: Optional[CharacterTally] = None
    words: Optional[TokenCollection] = None
    lines: Optional[TokenCollection] = None
    longest_word: Optional[LongestTokens] = None
    longest_line: Optional[LongestTokens] = None


def build_artifacts(
    stream: BinaryIO,
    request: AnalysisRequest,
    run_logger: Optional[AnalysisLogger] = None,
) -> AnalysisArtifacts:
    """Run each needed analysis as its own full pass over ``stream``."""
    run_logger = run_logger or AnalysisLogger(label=request.input_path)
    artifacts = AnalysisArtifacts()

    if request.needs_characters:
        with run_logger.phase(Phase.CHARACTERS):
            artifacts.characters = tally_characters(stream)
            run_logger.info(
                f"{artifacts.characters.unique_count} unique of {artifacts.characters.total_count} chars"
            )

    if request.needs_words:
        with run_logger.phase(Phase.WORDS):
            artifacts.words = build_word_collection(stream)
            run_logger.info(f"{len(artifacts.words)} unique of {artifacts.words.total} words")
        if request.wants(AnalysisKind.LONGEST_WORD):
            with run_logger.phase(Phase.LONGEST):
                artifacts.longest_word = find_longest(artifacts.words)

    if request.needs_lines:
        with run_logger.phase(Phase.LINES):
            artifacts.lines = build_line_collection(stream)
            run_logger.info(f"{len(artifacts.lines)} unique of {artifacts.lines.total} lines")
        if request.wants(AnalysisKind.LONGEST_LINE):
            with run_logger.phase(Phase.LONGEST):
                artifacts.longest_line = find_longest(artifacts.lines)

    stream.seek(0)
    return artifacts


# =============================================================================
# SECTION RENDERERS
# =============================================================================

def render_characters(tally: CharacterTally) -> List[str]:
    lines = [
        f"Total Number of Chars = {tally.total_count}",
        f"Total Unique Chars = {tally.unique_count}",
        "",
    ]
    for value, count, position in tally.present():
        lines.append(
            f"Ascii Value: {value}, Char: {chr(value)}, Count: {count}, Initial Position: {position}"
        )
    return lines


def render_tokens(collection: TokenCollection, label: str) -> List[str]:
    """Render a word or line table; ``label`` is "Word" or "Line"."""
    lines = [
        f"Total Number of {label}s: {collection.total}",
        f"Total Unique {label}s: {len(collection)}",
        "",
    ]
    for entry in collection:
        lines.append(
            f"{label}: {entry.text}, Freq: {entry.frequency}, Initial Position: {entry.first_index}"
        )
    return lines


def render_longest(longest: LongestTokens, label: str) -> List[str]:
    lines = [f"Longest {label} is {longest.length} characters long:"]
    lines.extend(f"\t{text}" for text in longest.texts)
    return lines


def render_section(kind: AnalysisKind, artifacts: AnalysisArtifacts) -> Optional[List[str]]:
    """Return the lines for one section, or None when it is skipped."""
    if kind is AnalysisKind.CHARACTERS:
        return render_characters(artifacts.characters) if artifacts.characters is not None else None
    if kind is AnalysisKind.WORDS:
        return render_tokens(artifacts.words, "Word") if artifacts.words is not None else None
    if kind is AnalysisKind.LINES:
        return render_tokens(artifacts.lines, "Line") if artifacts.lines is not None else None
    if kind is AnalysisKind.LONGEST_WORD:
        return render_longest(artifacts.longest_word, "Word") if artifacts.longest_word is not None else None
    if kind is AnalysisKind.LONGEST_LINE:
        return render_longest(artifacts.longest_line, "Line") if artifacts.longest_line is not None else None
    return None


def render_report(request: AnalysisRequest, artifacts: AnalysisArtifacts) -> str:
    """Render every emitted section in request order, one blank line apart."""
    sections: List[str] = []
    for kind in request.order:
        section = render_section(kind, artifacts)
        if section is None:
            continue
        sections.append("".join(f"{line}\n" for line in section))
    return "\n".join(sections)

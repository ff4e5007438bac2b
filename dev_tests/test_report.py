"""
Tests for report.py - Artifact building and section rendering.

Functions tested:
- build_artifacts(): runs only the needed passes
- render_characters() / render_tokens() / render_longest()
- render_report(): request order and blank-line separators
"""

import io

from madcounter.models import AnalysisKind, AnalysisRequest
from madcounter.report import (
    AnalysisArtifacts,
    build_artifacts,
    render_characters,
    render_longest,
    render_report,
    render_tokens,
)
from madcounter.char_tally import tally_characters
from madcounter.longest import find_longest
from madcounter.token_collection import build_line_collection, build_word_collection


def _request(*kinds):
    return AnalysisRequest(input_path="in.txt", order=list(kinds))


def _report(data, *kinds):
    request = _request(*kinds)
    artifacts = build_artifacts(io.BytesIO(data), request)
    return render_report(request, artifacts)


class TestBuildArtifacts:
    """Tests for build_artifacts()."""

    def test_only_requested_passes_run(self):
        artifacts = build_artifacts(io.BytesIO(b"a b\n"), _request(AnalysisKind.WORDS))
        assert artifacts.words is not None
        assert artifacts.characters is None
        assert artifacts.lines is None
        assert artifacts.longest_word is None

    def test_longest_line_builds_line_collection(self):
        artifacts = build_artifacts(io.BytesIO(b"a\nbb\n"), _request(AnalysisKind.LONGEST_LINE))
        assert artifacts.lines is not None
        assert artifacts.longest_line.texts == ["bb"]
        assert artifacts.words is None

    def test_stream_rewound_afterwards(self):
        stream = io.BytesIO(b"abc")
        build_artifacts(stream, _request(AnalysisKind.CHARACTERS))
        assert stream.tell() == 0


class TestRenderSections:
    """Tests for the per-section renderers."""

    def test_characters_format(self):
        lines = render_characters(tally_characters(io.BytesIO(b"ba")))
        assert lines == [
            "Total Number of Chars = 2",
            "Total Unique Chars = 2",
            "",
            "Ascii Value: 97, Char: a, Count: 1, Initial Position: 1",
            "Ascii Value: 98, Char: b, Count: 1, Initial Position: 0",
        ]

    def test_characters_print_raw_control_characters(self):
        lines = render_characters(tally_characters(io.BytesIO(b"\t")))
        assert lines[-1] == "Ascii Value: 9, Char: \t, Count: 1, Initial Position: 0"

    def test_words_format(self):
        lines = render_tokens(build_word_collection(io.BytesIO(b"hello world hello\n")), "Word")
        assert lines == [
            "Total Number of Words: 3",
            "Total Unique Words: 2",
            "",
            "Word: hello, Freq: 2, Initial Position: 0",
            "Word: world, Freq: 1, Initial Position: 1",
        ]

    def test_lines_format_includes_empty_line(self):
        lines = render_tokens(build_line_collection(io.BytesIO(b"b\na\n\nb")), "Line")
        assert lines == [
            "Total Number of Lines: 4",
            "Total Unique Lines: 3",
            "",
            "Line: , Freq: 1, Initial Position: 2",
            "Line: a, Freq: 1, Initial Position: 1",
            "Line: b, Freq: 2, Initial Position: 0",
        ]

    def test_longest_format(self):
        longest = find_longest(build_word_collection(io.BytesIO(b"xyz ab abc")))
        assert render_longest(longest, "Word") == [
            "Longest Word is 3 characters long:",
            "\tabc",
            "\txyz",
        ]


class TestRenderReport:
    """Tests for render_report()."""

    def test_sections_follow_flag_order(self):
        """
        Given: -Lw then -Ll, and the reverse
        When: Reports are rendered
        Then: Section order swaps, section content does not
        """
        data = b"hello world\n"
        word_section = "Longest Word is 5 characters long:\n\thello\n\tworld\n"
        line_section = "Longest Line is 11 characters long:\n\thello world\n"

        forward = _report(data, AnalysisKind.LONGEST_WORD, AnalysisKind.LONGEST_LINE)
        backward = _report(data, AnalysisKind.LONGEST_LINE, AnalysisKind.LONGEST_WORD)

        assert forward == word_section + "\n" + line_section
        assert backward == line_section + "\n" + word_section

    def test_single_blank_line_between_sections(self):
        report = _report(b"a\n", AnalysisKind.WORDS, AnalysisKind.LINES, AnalysisKind.CHARACTERS)
        assert report == (
            "Total Number of Words: 1\n"
            "Total Unique Words: 1\n"
            "\n"
            "Word: a, Freq: 1, Initial Position: 0\n"
            "\n"
            "Total Number of Lines: 1\n"
            "Total Unique Lines: 1\n"
            "\n"
            "Line: a, Freq: 1, Initial Position: 0\n"
            "\n"
            "Total Number of Chars = 2\n"
            "Total Unique Chars = 2\n"
            "\n"
            "Ascii Value: 10, Char: \n, Count: 1, Initial Position: 1\n"
            "Ascii Value: 97, Char: a, Count: 1, Initial Position: 0\n"
        )
        assert not report.startswith("\n")
        assert not report.endswith("\n\n")

    def test_empty_longest_word_section_is_skipped(self):
        """
        Given: Whitespace-only input with -Lw then -w
        When: The report is rendered
        Then: Only the zero-count word section appears, with no leading separator
        """
        report = _report(b"   \n", AnalysisKind.LONGEST_WORD, AnalysisKind.WORDS)
        assert report == "Total Number of Words: 0\nTotal Unique Words: 0\n\n"

    def test_skipped_section_between_sections_adds_no_separator(self):
        report = _report(b" \n", AnalysisKind.LINES, AnalysisKind.LONGEST_WORD, AnalysisKind.LONGEST_LINE)
        assert report == (
            "Total Number of Lines: 1\n"
            "Total Unique Lines: 1\n"
            "\n"
            "Line:  , Freq: 1, Initial Position: 0\n"
            "\n"
            "Longest Line is 1 characters long:\n"
            "\t \n"
        )

    def test_no_sections_renders_nothing(self):
        assert render_report(_request(), AnalysisArtifacts()) == ""

    def test_rendering_is_repeatable(self):
        data = b"the cat\nthe hat\n"
        kinds = (AnalysisKind.CHARACTERS, AnalysisKind.WORDS, AnalysisKind.LONGEST_LINE)
        assert _report(data, *kinds) == _report(data, *kinds)

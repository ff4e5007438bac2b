"""Shared pytest fixtures for MADCounter tests."""

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from madcounter.config import config


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Disable colors and phase logging so captured output is exact."""
    monkeypatch.setattr(config, "COLOR_OUTPUT", False)
    monkeypatch.setattr(config, "VERBOSE", False)
    yield


# ============================================================================
# File Fixtures
# ============================================================================

@pytest.fixture
def write_input(tmp_path):
    """Factory that writes bytes or text to a file under tmp_path and returns its path."""
    def _write(content, name="input.txt"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("latin-1")
        path.write_bytes(content)
        return str(path)
    return _write


@pytest.fixture
def hello_file(write_input):
    """Input used by the canonical word-count example."""
    return write_input("hello world hello\n", name="hello.txt")


@pytest.fixture
def mixed_file(write_input):
    """Three lines with a repeated line, a blank line and no trailing newline."""
    return write_input("b\na\n\nb", name="mixed.txt")

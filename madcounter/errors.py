"""
MADCounter Errors
=================

Exception hierarchy for argument validation, file handling and analysis.

Every error carries the fixed human-readable message that the command line
prints. ``str(error)`` returns that message; ``error.render()`` returns the
line as it is shown to the user.
"""

from typing import Optional


class MadCounterError(Exception):
    """Base exception for every reportable MADCounter failure."""

    message = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    def render(self) -> str:
        return f"ERROR: {self}"


class UsageError(MadCounterError):
    """Raised when too few arguments are supplied."""

    def __init__(self, program_name: str = "MADCounter"):
        self.program_name = program_name
        super().__init__(
            "USAGE:\n"
            f"\t./{program_name} -f <input file> -o <output file> -c -w -l -Lw -Ll\n"
            "\t\tOR\n"
            f"\t./{program_name} -B <batch file>"
        )

    def render(self) -> str:
        return str(self)


class InvalidFlagError(MadCounterError):
    """Raised for an unrecognized argument."""

    message = "Invalid Flag Types"

    def __init__(self, flag: Optional[str] = None):
        self.flag = flag
        super().__init__()


class NoInputFileError(MadCounterError):
    """Raised when ``-f`` is missing or lacks a path."""

    message = "No Input File Provided"


class CantOpenInputFileError(MadCounterError):
    """Raised when the input file cannot be opened for reading."""

    message = "Can't open input file"


class InputFileEmptyError(MadCounterError):
    """Raised when the input file holds zero bytes."""

    message = "Input File Empty"


class NoOutputFileError(MadCounterError):
    """Raised when ``-o`` lacks a path."""

    message = "No Output File Provided"


class CantOpenOutputFileError(MadCounterError):
    """Raised when the output file cannot be opened for writing."""

    message = "Can't open output file"


class CantOpenBatchFileError(MadCounterError):
    """Raised when the batch control file cannot be opened."""

    message = "Can't open batch file"


class BatchFileEmptyError(MadCounterError):
    """Raised when the batch control file contains no lines."""

    message = "Batch File Empty"


class CharacterRangeError(MadCounterError):
    """Raised when the character scan meets a byte outside the 7-bit domain."""

    def __init__(self, value: int, position: int):
        self.value = value
        self.position = position
        super().__init__(
            f"Input contains non-ASCII byte 0x{value:02x} at position {position}"
        )

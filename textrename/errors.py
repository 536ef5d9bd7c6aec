"""Exceptions raised by the rename pipeline.

Components raise these and never exit the process; the CLI is the single place
that turns them into an error message and a non-zero exit code.
"""

from pathlib import Path


class TextRenameError(Exception):
    """Base error for the project."""


class PatternError(TextRenameError):
    """One or more file selection patterns could not be expanded."""

    def __init__(self, indices: list[int]) -> None:
        self.indices = list(indices)
        labels = [f"#{index}" for index in self.indices]
        if len(labels) == 1:
            message = f"Unable to create search pattern from argument {labels[0]}."
        else:
            message = f"Unable to create search pattern from arguments {', '.join(labels[:-1])} and {labels[-1]}."
        super().__init__(message)


class NameExtractionError(TextRenameError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Unable to get file name out of path '{path}'.")


class BufferWriteError(TextRenameError):
    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to write filenames to buffer file '{path}': {reason}")


class BufferReadError(TextRenameError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read filenames from buffer file '{path}': {reason}")


class CountMismatchError(TextRenameError):
    """The edited buffer holds a different number of names than were written."""

    TOO_FEW = "too few"
    TOO_MANY = "too many"

    def __init__(self, kind: str, actual: int, expected: int) -> None:
        self.kind = kind
        self.actual = actual
        self.expected = expected
        if kind == self.TOO_FEW:
            message = f"Not enough filenames in text file after edit ({actual} instead of {expected})."
        else:
            message = f"Too many filenames in text file after edit ({actual} instead of {expected})."
        super().__init__(message)


class PlanError(TextRenameError):
    def __init__(self, path: Path, name: str) -> None:
        self.path = path
        self.name = name
        super().__init__(f"Invalid new name '{name}' for '{path}'.")


class UnsafeRenameError(TextRenameError):
    """A rename was refused or failed at the OS level."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"File renaming was not safe: '{source}' -> '{target}' ({reason}).")


class RollbackError(TextRenameError):
    """Undoing committed renames after a failure did not fully succeed."""

    def __init__(self, cause: TextRenameError, stranded: list[tuple[Path, Path]]) -> None:
        self.cause = cause
        self.stranded = list(stranded)
        details = ", ".join(f"'{current}' (was '{original}')" for current, original in self.stranded)
        super().__init__(f"{cause} Rollback failed; could not restore: {details}.")

"""Round-tripping filenames through an editable text buffer."""

import logging
import os
import tempfile
from pathlib import Path

import click

from textrename.errors import BufferReadError, BufferWriteError, CountMismatchError
from textrename.models.entry import FileEntry


logger = logging.getLogger(__name__)

BUFFER_PREFIX = "textrename-"
BUFFER_SUFFIX = ".txt"
BUFFER_ENCODING = "utf-8"


class ScratchBuffer:
    """A per-run text file holding one name per line."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def create(cls, directory: Path | None = None) -> "ScratchBuffer":
        """Create a uniquely named, empty buffer file.

        Args:
            directory: Where to create the file. Defaults to the system temp directory.

        Raises:
            BufferWriteError: If the file cannot be created.
        """
        try:
            fd, name = tempfile.mkstemp(prefix=BUFFER_PREFIX, suffix=BUFFER_SUFFIX, dir=directory)
        except OSError as e:
            raise BufferWriteError(directory, str(e)) from e
        os.close(fd)
        logger.debug("created scratch buffer %s", name)
        return cls(Path(name))

    def write(self, names: list[str]) -> None:
        """Write names one per line, each followed by a newline.

        Raises:
            BufferWriteError: If the file cannot be written or a name is not
                encodable as UTF-8.
        """
        content = "".join(f"{name}\n" for name in names)
        try:
            # newline="" keeps "\n" on every platform
            with self.path.open("w", encoding=BUFFER_ENCODING, newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise BufferWriteError(self.path, str(e)) from e
        logger.debug("wrote %d names to %s", len(names), self.path)

    def read(self) -> list[str]:
        """Read the edited names back.

        Lines are split on newlines only. Surrounding whitespace is trimmed and
        blank lines are dropped.

        Raises:
            BufferReadError: If the file is missing or is not valid text.
        """
        try:
            content = self.path.read_text(encoding=BUFFER_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise BufferReadError(self.path, str(e)) from e

        names = [line.strip() for line in content.split("\n")]
        names = [name for name in names if name]
        logger.debug("read %d names from %s", len(names), self.path)
        return names

    def edit(self, editor: str | None = None) -> None:
        """Open the buffer in an external editor and wait for it to close.

        Args:
            editor: Editor command. If None, click falls back to $VISUAL, $EDITOR
                or a platform default.
        """
        try:
            click.edit(filename=str(self.path), editor=editor)
        except click.ClickException as e:
            raise BufferReadError(self.path, e.format_message()) from e

    def remove(self) -> None:
        """Delete the buffer file if it still exists."""
        self.path.unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"ScratchBuffer('{self.path}')"


def validate_names(names: list[str], expected: int) -> None:
    """Check that the edited buffer holds exactly one name per entry.

    Raises:
        CountMismatchError: If there are fewer or more names than ``expected``.
    """
    if len(names) < expected:
        raise CountMismatchError(CountMismatchError.TOO_FEW, len(names), expected)
    if len(names) > expected:
        raise CountMismatchError(CountMismatchError.TOO_MANY, len(names), expected)


def write_names(buffer: ScratchBuffer, entries: list[FileEntry]) -> None:
    """Write every entry's original name to the buffer, in entry order."""
    buffer.write([entry.original_name for entry in entries])


def read_edited_names(buffer: ScratchBuffer, entries: list[FileEntry]) -> list[str]:
    """Read and validate the edited names for ``entries``.

    Returns:
        The edited names, positionally aligned with ``entries``.

    Raises:
        BufferReadError: If the buffer cannot be read.
        CountMismatchError: If the number of names differs from the number of entries.
    """
    names = buffer.read()
    validate_names(names, len(entries))
    return names

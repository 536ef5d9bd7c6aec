"""Applying planned renames to disk."""

import logging
from pathlib import Path

from textrename.errors import RollbackError, TextRenameError, UnsafeRenameError
from textrename.models.entry import FileEntry, Outcome


logger = logging.getLogger(__name__)


def rename_if_safe(source: Path, target: Path) -> None:
    """Rename ``source`` to ``target`` unless ``target`` already exists.

    The existence check and the rename are not atomic.

    Raises:
        UnsafeRenameError: If the target exists or the OS rename fails.
    """
    try:
        if target.exists():
            raise UnsafeRenameError(source, target, "target already exists")
        source.rename(target)
    except OSError as e:
        raise UnsafeRenameError(source, target, e.strerror or str(e)) from e
    except ValueError as e:
        raise UnsafeRenameError(source, target, str(e)) from e


class RenameExecutor:
    """Applies planned renames one at a time, in entry order."""

    def __init__(self, rollback_on_failure: bool = False) -> None:
        """Initialize the executor.

        Args:
            rollback_on_failure: If True, renames already committed are undone
                (in reverse order) when a later rename fails. Otherwise they
                stay on disk.
        """
        self.rollback_on_failure = rollback_on_failure

    def preview(self, entries: list[FileEntry]) -> list[tuple[Path, Path]]:
        """Return the (before, after) pairs without touching the filesystem."""
        return [(entry.original_path, self._target(entry)) for entry in entries]

    def run(self, entries: list[FileEntry]) -> list[FileEntry]:
        """Apply the planned renames.

        Processing stops at the first failure.

        Args:
            entries: Planned entries, in enumeration order.

        Returns:
            The same entries with their outcomes updated.

        Raises:
            UnsafeRenameError: If a target exists or a rename fails.
            RollbackError: If rollback was requested and could not restore every entry.
        """
        for index, entry in enumerate(entries):
            target = self._target(entry)

            if entry.is_noop:
                entry.outcome = Outcome.NOOP_UNCHANGED
                logger.debug("#%d %s unchanged", index, entry.original_path)
                continue

            try:
                rename_if_safe(entry.original_path, target)
            except UnsafeRenameError as e:
                logger.debug("#%d failed: %s", index, e)
                if self.rollback_on_failure:
                    self.rollback(entries, cause=e)
                raise

            entry.outcome = Outcome.RENAMED
            logger.info("renamed %s -> %s", entry.original_path, target)

        return entries

    def rollback(self, entries: list[FileEntry], cause: TextRenameError) -> None:
        """Undo every committed rename, last one first.

        Restored entries go back to ``Outcome.UNCHANGED``. Entries that cannot be
        restored are left in place and reported together.

        Raises:
            RollbackError: If any entry could not be restored.
        """
        stranded: list[tuple[Path, Path]] = []

        for entry in reversed(entries):
            if entry.outcome != Outcome.RENAMED:
                continue
            target = self._target(entry)
            try:
                rename_if_safe(target, entry.original_path)
            except UnsafeRenameError as e:
                logger.warning("could not restore %s: %s", entry.original_path, e.reason)
                stranded.append((target, entry.original_path))
                continue
            entry.outcome = Outcome.UNCHANGED
            logger.info("restored %s -> %s", target, entry.original_path)

        if stranded:
            raise RollbackError(cause, stranded) from cause

    @staticmethod
    def _target(entry: FileEntry) -> Path:
        if entry.target_path is None:
            raise ValueError(f"Entry '{entry.original_path}' has not been planned.")
        return entry.target_path

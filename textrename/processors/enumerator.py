"""Expansion of file selection patterns into an ordered list of entries."""

import glob
import logging
import os
import re
from pathlib import Path

from textrename.errors import PatternError
from textrename.models.entry import FileEntry
from textrename.processors.names import extract_name


logger = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


def _literal_root(pattern: str) -> str:
    """Return the leading part of ``pattern`` that contains no wildcards."""
    head, tail = os.path.split(pattern)
    while glob.has_magic(head):
        head, tail = os.path.split(head)
    return head


def _listed_directories(pattern: str) -> list[str]:
    """Return the directories glob has to list to expand a non-recursive pattern."""
    dirname, basename = os.path.split(pattern)
    if dirname == pattern:
        return []

    if glob.has_magic(dirname):
        parents = glob.glob(dirname)
        listed = _listed_directories(dirname)
    else:
        parents = [dirname]
        listed = []

    if glob.has_magic(basename):
        listed.extend(parent for parent in parents if os.path.isdir(parent or os.curdir))
    return listed


def check_readable(pattern: str) -> None:
    """Make sure every directory the pattern descends into can be listed.

    ``glob`` silently skips directories it cannot read, so this walks the same
    directories first. Hidden directories are skipped, as glob does.

    Raises:
        OSError: If a directory cannot be listed.
    """
    if "**" in pattern:
        root = _literal_root(pattern) or os.curdir
        if not os.path.isdir(root):
            return
        for _, dirnames, _ in os.walk(root, onerror=_raise):
            dirnames[:] = [name for name in dirnames if not name.startswith(".")]
        return

    for directory in _listed_directories(pattern):
        with os.scandir(directory or os.curdir):
            pass


def expand_pattern(pattern: str) -> list[Path]:
    """Expand a single glob pattern, keeping the matcher's order.

    ``**`` matches any number of directories.

    Raises:
        ValueError: If the pattern is empty.
        OSError: If a directory cannot be read during expansion.
    """
    if not pattern:
        raise ValueError("empty pattern")
    check_readable(pattern)
    return [Path(match) for match in glob.iglob(pattern, recursive=True)]


def enumerate_files(patterns: list[str], include_extensions: bool) -> list[FileEntry]:
    """Build the ordered entry list for all patterns.

    Entries keep pattern order, then matcher order within a pattern. A path matched
    by more than one pattern appears once per match. An empty result is not an error.

    Args:
        patterns: File selection patterns, in command-line order.
        include_extensions: Whether the editable name includes the file extension.

    Returns:
        One FileEntry per matched path.

    Raises:
        PatternError: If any pattern could not be expanded. All failing indices
            are reported together and no entries are returned.
        NameExtractionError: If a matched path has no final component.
    """
    entries: list[FileEntry] = []
    invalid_indices: list[int] = []

    for index, pattern in enumerate(patterns):
        try:
            paths = expand_pattern(pattern)
        except (OSError, ValueError, re.error) as e:
            logger.debug("pattern #%d (%r) is invalid: %s", index, pattern, e)
            invalid_indices.append(index)
            continue

        logger.debug("expanded pattern #%d (%r) to %d paths", index, pattern, len(paths))
        for path in paths:
            entries.append(
                FileEntry(
                    original_path=path,
                    original_name=extract_name(path, include_extensions),
                )
            )

    if invalid_indices:
        raise PatternError(invalid_indices)

    return entries

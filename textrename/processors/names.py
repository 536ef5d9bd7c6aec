"""Extraction of the editable part of a filename."""

from pathlib import Path

from textrename.errors import NameExtractionError


def extract_name(path: Path, include_extensions: bool) -> str:
    """Return the part of ``path`` exposed for editing.

    Args:
        path: Matched filesystem path.
        include_extensions: If True, the whole final component is returned,
            otherwise the final component without its suffix.

    Returns:
        The filename or the stem of ``path``.

    Raises:
        NameExtractionError: If the path has no final component (e.g. ``/`` or ``..``).
    """
    if path.name in ("", ".."):
        raise NameExtractionError(path)
    return path.name if include_extensions else path.stem

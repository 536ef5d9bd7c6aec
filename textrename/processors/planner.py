"""Turning edited names into target paths."""

from textrename.errors import PlanError
from textrename.models.entry import FileEntry
from textrename.processors.buffer import validate_names


def build_filename(entry: FileEntry, edited_name: str, include_extensions: bool) -> str:
    """Return the final filename for an entry.

    When extensions were excluded from editing, the original suffix is reattached
    to the edited stem.
    """
    if include_extensions:
        return edited_name
    return edited_name + entry.original_path.suffix


def plan_renames(entries: list[FileEntry], names: list[str], include_extensions: bool) -> list[FileEntry]:
    """Fill in ``edited_name`` and ``target_path`` for every entry.

    The name at position ``i`` always belongs to the entry at position ``i``,
    whatever its content. No filesystem access happens here.

    Args:
        entries: Entries in enumeration order.
        names: Edited names in buffer order.
        include_extensions: Whether the edited names include extensions.

    Returns:
        The same entries, updated in place.

    Raises:
        CountMismatchError: If ``names`` and ``entries`` differ in length.
        PlanError: If an edited name is not a valid single path component
            or contains a NUL byte.
    """
    validate_names(names, len(entries))

    for entry, edited_name in zip(entries, names, strict=True):
        filename = build_filename(entry, edited_name, include_extensions)
        if "\0" in filename:
            raise PlanError(entry.original_path, edited_name)
        try:
            target_path = entry.original_path.with_name(filename)
        except ValueError as e:
            raise PlanError(entry.original_path, edited_name) from e
        entry.edited_name = edited_name
        entry.target_path = target_path

    return entries

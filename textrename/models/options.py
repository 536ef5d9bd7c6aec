"""Run configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RenameOptions(BaseModel):
    """Options for a single rename run, as collected from the command line."""

    model_config = ConfigDict(frozen=True)

    patterns: list[str] = Field(description="File selection patterns, in order", min_length=1)
    include_extensions: bool = Field(description="Expose extensions in the editable names", default=True)
    dry_run: bool = Field(description="Print the rename map instead of renaming", default=False)
    edit: bool = Field(description="Open the buffer in an editor before reading it back", default=True)
    editor: str | None = Field(description="Editor command; falls back to $VISUAL / $EDITOR", default=None)
    rollback_on_failure: bool = Field(description="Undo committed renames when a rename fails", default=False)
    keep_buffer: bool = Field(description="Leave the scratch buffer behind after a successful run", default=False)

"""Rename entry data models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    """What happened to a single entry on disk."""

    UNCHANGED = "unchanged"
    RENAMED = "renamed"
    NOOP_UNCHANGED = "noop_unchanged"


class FileEntry(BaseModel):
    """A single matched file tracked through the rename pipeline."""

    original_path: Path = Field(description="Path as matched by the file pattern", frozen=True)
    original_name: str = Field(description="Renamable segment (filename or stem) at match time")
    edited_name: str | None = Field(description="Renamable segment after the edit round-trip", default=None)
    target_path: Path | None = Field(description="Path the file is renamed to", default=None)
    outcome: Outcome = Field(description="Outcome of applying the rename", default=Outcome.UNCHANGED)

    @property
    def is_noop(self) -> bool:
        """True when the planned target is the original path."""
        return self.target_path is not None and self.target_path == self.original_path

    def __str__(self) -> str:
        return f"FileEntry('{self.original_path}' -> '{self.target_path}', outcome={self.outcome.value})"


class RenameSummary(BaseModel):
    """Aggregated outcome counts over a finished run."""

    renamed: int = 0
    noop: int = 0
    unchanged: int = 0

    @classmethod
    def from_entries(cls, entries: list[FileEntry]) -> "RenameSummary":
        summary = cls()
        for entry in entries:
            if entry.outcome == Outcome.RENAMED:
                summary.renamed += 1
            elif entry.outcome == Outcome.NOOP_UNCHANGED:
                summary.noop += 1
            else:
                summary.unchanged += 1
        return summary

    @property
    def is_clean(self) -> bool:
        """True when every entry reached a terminal outcome."""
        return self.unchanged == 0

    def __len__(self) -> int:
        return self.renamed + self.noop + self.unchanged

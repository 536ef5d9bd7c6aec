"""Unit tests for the rename planner."""

from pathlib import Path

import pytest

from textrename.errors import CountMismatchError, PlanError
from textrename.models.entry import FileEntry, Outcome
from textrename.processors.planner import build_filename, plan_renames


def make_entries(*paths: str, include_extensions: bool = True) -> list[FileEntry]:
    entries = []
    for path in paths:
        p = Path(path)
        entries.append(FileEntry(original_path=p, original_name=p.name if include_extensions else p.stem))
    return entries


class TestBuildFilename:
    """Tests for build_filename."""

    def test_with_extensions_uses_name_verbatim(self):
        """Test that edited names are used as-is when extensions were editable."""
        entry = make_entries("a/report.txt")[0]

        assert build_filename(entry, "summary.md", include_extensions=True) == "summary.md"

    def test_reattaches_extension(self):
        """Test that the original extension is appended to the edited stem."""
        entry = make_entries("a/report.txt", include_extensions=False)[0]

        assert build_filename(entry, "summary", include_extensions=False) == "summary.txt"

    def test_no_extension_to_reattach(self):
        """Test a file without a suffix."""
        entry = make_entries("a/Makefile", include_extensions=False)[0]

        assert build_filename(entry, "GNUmakefile", include_extensions=False) == "GNUmakefile"


class TestPlanRenames:
    """Tests for plan_renames."""

    def test_extension_reattachment(self):
        """Test that a/report.txt with stem 'summary' targets a/summary.txt."""
        entries = make_entries("a/report.txt", include_extensions=False)

        plan_renames(entries, ["summary"], include_extensions=False)

        assert entries[0].edited_name == "summary"
        assert entries[0].target_path == Path("a/summary.txt")

    def test_target_keeps_directory(self):
        """Test that only the final component changes."""
        entries = make_entries("/very/long/path/to/file.pdf")

        plan_renames(entries, ["renamed.pdf"], include_extensions=True)

        assert entries[0].target_path == Path("/very/long/path/to/renamed.pdf")

    def test_positional_correspondence(self):
        """Test that swapping lines swaps targets by position, not by content."""
        entries = make_entries("d/alpha.txt", "d/beta.txt")

        plan_renames(entries, ["beta.txt", "alpha.txt"], include_extensions=True)

        assert entries[0].original_path == Path("d/alpha.txt")
        assert entries[0].target_path == Path("d/beta.txt")
        assert entries[1].original_path == Path("d/beta.txt")
        assert entries[1].target_path == Path("d/alpha.txt")

    def test_unchanged_names_are_noops(self):
        """Test that reading back the original names plans no changes."""
        entries = make_entries("x/one.txt", "y/two.txt")

        plan_renames(entries, [e.original_name for e in entries], include_extensions=True)

        assert all(e.target_path == e.original_path for e in entries)
        assert all(e.is_noop for e in entries)

    def test_unchanged_stems_are_noops(self):
        """Test the no-op case when extensions were excluded."""
        entries = make_entries("x/one.txt", "y/two.tar.gz", include_extensions=False)

        plan_renames(entries, [e.original_name for e in entries], include_extensions=False)

        assert all(e.is_noop for e in entries)

    def test_planning_does_not_touch_outcome(self):
        """Test that outcomes are left for the executor."""
        entries = make_entries("a.txt")

        plan_renames(entries, ["b.txt"], include_extensions=True)

        assert entries[0].outcome == Outcome.UNCHANGED

    @pytest.mark.parametrize("names", [["one.txt"], ["one.txt", "two.txt", "three.txt"]])
    def test_count_mismatch(self, names):
        """Test that pairing refuses names of a different length."""
        entries = make_entries("a.txt", "b.txt")

        with pytest.raises(CountMismatchError):
            plan_renames(entries, names, include_extensions=True)

        assert all(e.target_path is None for e in entries)

    def test_name_with_nul_byte_is_rejected(self):
        """Test that a NUL byte in a new name is refused before any rename."""
        entries = make_entries("a/report.txt", "a/notes.txt")

        with pytest.raises(PlanError):
            plan_renames(entries, ["ok.txt", "bad\0.txt"], include_extensions=True)

    def test_name_with_separator_is_rejected(self):
        """Test that a new name must be a single path component."""
        entries = make_entries("a/report.txt")

        with pytest.raises(PlanError, match="sub/report.txt"):
            plan_renames(entries, ["sub/report.txt"], include_extensions=True)

"""CLI entrypoints."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from textrename.errors import TextRenameError
from textrename.models.entry import FileEntry, RenameSummary
from textrename.models.options import RenameOptions
from textrename.processors.buffer import ScratchBuffer, read_edited_names, write_names
from textrename.processors.enumerator import enumerate_files
from textrename.processors.executor import RenameExecutor
from textrename.processors.planner import plan_renames


console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_preview(pairs: list[tuple[Path, Path]]) -> None:
    for before, after in pairs:
        console.print(f"{escape(str(before))} -> {escape(str(after))}", soft_wrap=True, highlight=False)


def _print_summary(summary: RenameSummary) -> None:
    style = "green" if summary.is_clean else "yellow"
    console.print(f"[{style}]DONE.[/{style}]  renamed             ... {summary.renamed}", highlight=False)
    if summary.noop > 0:
        console.print(f"       skipped (no change) ... {summary.noop}", highlight=False)
    if summary.unchanged > 0:
        console.print(f"       skipped (problem)   ... {summary.unchanged}", highlight=False)


def _print_no_matches(patterns: list[str]) -> None:
    if len(patterns) == 1:
        console.print("No files matched pattern.")
    else:
        console.print("No files matched any patterns.")


def run_rename(options: RenameOptions) -> RenameSummary | None:
    """Run the whole pipeline for ``options``.

    Returns:
        The outcome summary, or None when nothing was renamed because no files
        matched or the run was a dry run.

    Raises:
        TextRenameError: On the first problem. Renames committed before the
            failure stay on disk unless rollback was requested.
    """
    entries: list[FileEntry] = enumerate_files(options.patterns, options.include_extensions)
    if not entries:
        _print_no_matches(options.patterns)
        return None

    buffer = ScratchBuffer.create()
    edited = False
    try:
        write_names(buffer, entries)
        if options.edit:
            buffer.edit(options.editor)
            edited = True
        names = read_edited_names(buffer, entries)
        plan_renames(entries, names, options.include_extensions)

        executor = RenameExecutor(rollback_on_failure=options.rollback_on_failure)
        if options.dry_run:
            _print_preview(executor.preview(entries))
            summary = None
        else:
            executor.run(entries)
            summary = RenameSummary.from_entries(entries)
    except TextRenameError:
        if edited:
            err_console.print(
                f"Edited names were kept in [bold cyan]{escape(str(buffer.path))}[/bold cyan].",
                soft_wrap=True,
            )
        else:
            buffer.remove()
        raise

    if not options.keep_buffer:
        buffer.remove()
    return summary


@click.command(context_settings=dict(show_default=True))
@click.option(
    "-f",
    "--files",
    "patterns",
    type=str,
    multiple=True,
    required=True,
    help="Files selection pattern (repeatable, supports '**').",
)
@click.option(
    "-x/-X",
    "--include-extensions/--exclude-extensions",
    default=True,
    help="Whether or not to include extensions in the editable names.",
)
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the renaming map instead of renaming files.",
)
@click.option(
    "--edit/--no-edit",
    default=True,
    help="Open the list of names in an editor before renaming.",
)
@click.option("--editor", type=str, default=None, help="Editor command (defaults to $VISUAL or $EDITOR).")
@click.option(
    "--rollback/--no-rollback",
    default=False,
    help="Undo renames already applied when a later rename fails.",
)
@click.option("--keep-buffer", is_flag=True, default=False, help="Keep the names file after a successful run.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(
    patterns: tuple[str, ...],
    include_extensions: bool,
    dry_run: bool,
    edit: bool,
    editor: str | None,
    rollback: bool,
    keep_buffer: bool,
    verbose: bool,
) -> None:
    """textrename - Rename files by editing their names as text.

    The names of all files matched by the given patterns are written to a text
    file, one per line, and opened in your editor. Change the lines, save and
    close: line N becomes the new name of file N.

    Examples:

        textrename -f "*.txt"

        textrename -X -f "photos/**/*.jpg" -f "*.png" --dry-run
    """
    _configure_logging(verbose)

    options = RenameOptions(
        patterns=list(patterns),
        include_extensions=include_extensions,
        dry_run=dry_run,
        edit=edit,
        editor=editor,
        rollback_on_failure=rollback,
        keep_buffer=keep_buffer,
    )
    logger.debug("running with %s", options)

    try:
        summary = run_rename(options)
    except TextRenameError as e:
        err_console.print(f"[bold red]ERROR.[/bold red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise SystemExit(1) from e

    if summary is not None:
        _print_summary(summary)

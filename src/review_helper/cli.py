"""
Command line interface for the review_helper tool.

This module defines the ``main`` click group used as the entry point of
the ``review-helper`` command. Its subcommands list changed files,
draft a commit message, write a markdown report, or do all three in one
``review`` run. Exit codes are defined at the top of this module.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click

from review_helper import __version__
from review_helper.changes.change_lister import list_changes
from review_helper.commit.categories import CommitCategory
from review_helper.commit.drafter import draft_commit_message
from review_helper.config.loader import ConfigError, load_config
from review_helper.report.review_body import compose_review
from review_helper.report.writer import write_report
from review_helper.tools import TOOL_DESCRIPTIONS
from review_helper.vcs.backend import BackendError
from review_helper.vcs.git_client import GitClient

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). When logging is configured by
# the CLI, root handlers will be added and messages will propagate.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_NO_REPO = 3
EXIT_NO_CHANGES = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_WRITE_FAILURE = 7

COMMIT_TYPES = [category.value for category in CommitCategory]


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def print_message_box(title: str, message: str):
    """Print a multi-line message inside a box."""
    lines = message.splitlines() or [""]
    width = min(max(len(title), max(len(line) for line in lines)) + 2, 76)
    click.echo(f"┌{'─' * width}┐")
    click.echo(f"│ {title.ljust(width - 1)}│")
    click.echo(f"├{'─' * width}┤")
    for line in lines:
        click.echo(f"│ {line[:width - 2].ljust(width - 1)}│")
    click.echo(f"└{'─' * width}┘")


def fail(message: str, code: int) -> None:
    """Print ``message`` as an error and exit with ``code``."""
    print_error(message)
    raise click.exceptions.Exit(code)


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def detect_repository(start_dir: Path) -> Path:
    """Return the Git repository root containing ``start_dir``.

    Raises
    ------
    click.exceptions.Exit
        With code EXIT_NO_REPO if no repository is found.
    """
    repo_root = GitClient.find_repo_root(start_dir)
    if repo_root is None:
        fail(f"No Git repository found at or above: {start_dir}", EXIT_NO_REPO)
    logger.debug("Detected Git repository at %s", repo_root)
    return repo_root


def read_notes(path: Optional[str]) -> Optional[str]:
    if path is None:
        return None
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        fail(f"Cannot read notes file {path}: {exc}", EXIT_INVALID_USAGE)
    return None


def _settings(ctx: click.Context) -> Dict[str, Any]:
    return ctx.ensure_object(dict)["config"]


@click.group()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="review-helper")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """🔍 Review local changes, draft commit messages and write review reports."""
    try:
        config = load_config()
    except ConfigError as exc:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s", force=True)
        fail(f"Configuration error: {exc}", EXIT_CONFIG_ERROR)

    # Use force=True to ensure handlers are reconfigured on subsequent
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config["log_level"]),
        format="%(levelname)s: %(message)s",
        force=True,
    )
    ctx.ensure_object(dict)["config"] = config


@main.command("changes")
@click.option("--root", "root", default=".", type=click.Path(file_okay=False), show_default=True,
              help="Directory inside the repository to inspect.")
@click.option("--show-diff", is_flag=True, help="Print the unified diff of every file.")
@click.option("--json", "as_json", is_flag=True, help="Print the changes as JSON.")
def changes_command(root: str, show_diff: bool, as_json: bool) -> None:
    """List changed files and their diffs."""
    repo_root = detect_repository(Path(root))
    try:
        changes = list_changes(str(repo_root), reader=GitClient(repo_root))
    except BackendError as exc:
        fail(f"VCS error: {exc}", EXIT_VCS_FAILURE)

    if as_json:
        click.echo(json.dumps([{"file": c.file, "diff": c.diff} for c in changes], indent=2))
        return
    if not changes:
        print_warning("No changes detected.")
        raise click.exceptions.Exit(EXIT_NO_CHANGES)

    print_success(f"Found {len(changes)} changed file{'s' if len(changes) != 1 else ''}")
    for change in changes:
        print_info(change.file, indent=1)
        if show_diff:
            click.echo(change.diff)


@main.command("commit-message")
@click.option("--root", "root", default=".", type=click.Path(file_okay=False), show_default=True,
              help="Directory inside the repository to inspect.")
@click.option("--type", "commit_type", type=click.Choice(COMMIT_TYPES),
              help="Commit type; inferred from the changes when omitted.")
@click.option("--json", "as_json", is_flag=True, help="Print the draft as JSON.")
@click.pass_context
def commit_message_command(ctx: click.Context, root: str, commit_type: Optional[str], as_json: bool) -> None:
    """Draft a Conventional Commit message for the working tree."""
    commit_type = commit_type or _settings(ctx)["default_commit_type"]
    repo_root = detect_repository(Path(root))
    try:
        draft = draft_commit_message(str(repo_root), commit_type, reader=GitClient(repo_root))
    except BackendError as exc:
        fail(f"VCS error: {exc}", EXIT_VCS_FAILURE)

    if as_json:
        click.echo(json.dumps(draft.to_dict(), indent=2))
        return
    click.echo(draft.message)


@main.command("report")
@click.option("--name", "file_name", help="Report file name without the .md extension.")
@click.option("--dir", "file_path", help="Existing directory the report is written to.")
@click.option("--content", help="Report body. Read from --input or stdin when omitted.")
@click.option("--input", "input_file", type=click.File("r", encoding="utf-8"),
              help="File to read the report body from ('-' for stdin).")
@click.pass_context
def report_command(
    ctx: click.Context,
    file_name: Optional[str],
    file_path: Optional[str],
    content: Optional[str],
    input_file,
) -> None:
    """Write a markdown report wrapping the given content."""
    settings = _settings(ctx)
    if content is None:
        stream = input_file or click.get_text_stream("stdin")
        content = stream.read()
    if not content or not content.strip():
        fail("Report content must not be empty.", EXIT_INVALID_USAGE)

    result = write_report(
        file_path or settings["report_dir"],
        file_name or settings["report_name"],
        content,
    )
    if not result.success:
        fail(f"{result.message}: {result.error}", EXIT_WRITE_FAILURE)
    print_success(result.message)


@main.command("review")
@click.option("--root", "root", default=".", type=click.Path(file_okay=False), show_default=True,
              help="Directory inside the repository to inspect.")
@click.option("--dir", "file_path", help="Existing directory the report is written to.")
@click.option("--name", "file_name", help="Report file name without the .md extension.")
@click.option("--type", "commit_type", type=click.Choice(COMMIT_TYPES),
              help="Commit type; inferred from the changes when omitted.")
@click.option("--notes", "notes_file", type=click.Path(dir_okay=False),
              help="Markdown file with reviewer notes to append to the report.")
@click.pass_context
def review_command(
    ctx: click.Context,
    root: str,
    file_path: Optional[str],
    file_name: Optional[str],
    commit_type: Optional[str],
    notes_file: Optional[str],
) -> None:
    """List changes, draft a commit message and write a review report."""
    settings = _settings(ctx)
    notes = read_notes(notes_file)
    repo_root = detect_repository(Path(root))
    client = GitClient(repo_root)

    try:
        changes = list_changes(str(repo_root), reader=client)
        if not changes:
            print_warning("No changes detected.")
            raise click.exceptions.Exit(EXIT_NO_CHANGES)
        print_success(f"Found {len(changes)} changed file{'s' if len(changes) != 1 else ''}")
        for change in changes[:5]:
            print_info(change.file, indent=1)
        if len(changes) > 5:
            print_info(f"... and {len(changes) - 5} more", indent=1)

        draft = draft_commit_message(
            str(repo_root),
            commit_type or settings["default_commit_type"],
            reader=client,
        )
    except BackendError as exc:
        fail(f"VCS error: {exc}", EXIT_VCS_FAILURE)

    click.echo("")
    print_message_box("Suggested commit message", draft.message)

    result = write_report(
        file_path or settings["report_dir"],
        file_name or settings["report_name"],
        compose_review(changes, draft, notes),
    )
    if not result.success:
        fail(f"{result.message}: {result.error}", EXIT_WRITE_FAILURE)
    print_success(result.message)


@main.command("tools")
def tools_command() -> None:
    """Describe the operations available to an orchestrating agent."""
    width = max(len(name) for name in TOOL_DESCRIPTIONS)
    for name, description in TOOL_DESCRIPTIONS.items():
        click.echo(f"{name.ljust(width)}  {description}")


def run() -> None:
    """Console script entry point."""
    try:
        main(prog_name="review-helper")
    except Exception as exc:  # pragma: no cover
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise SystemExit(EXIT_GENERIC_ERROR)

"""
Git client implementation for review_helper.

This module wraps the read-only Git queries required by the change lister
and the commit message drafter. It never stages, commits or checks out
anything. All subprocess calls go through :meth:`GitClient._run` so that
unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from review_helper.vcs.backend import (
    BackendError,
    DiffSummary,
    DiffSummaryFile,
    RepositoryStatus,
)


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# Index-column status codes that mean the path is staged.
_STAGED_CODES = {"M", "A", "D", "R", "C"}


class GitError(BackendError):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Read-only client for a Git working tree."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------
    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If Git cannot be started, its output cannot be decoded, or it
            exits with a non-zero status.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Unable to run Git in %s: %s", self.repo_root, e)
            raise GitError(f"Unable to run git in {self.repo_root}: {e}") from e

        if result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(
                result.stderr.strip()
                or result.stdout.strip()
                or f"git {args[0]} exited with status {result.returncode}"
            )
        return result

    # ------------------------------------------------------------------
    # Diff queries
    # ------------------------------------------------------------------
    def diff_summary(self) -> DiffSummary:
        """Summarise unstaged working-tree changes.

        Parses NUL-terminated ``git diff --numstat -z`` records so that
        paths arrive unquoted. Binary files are reported by Git as
        ``-\\t-\\tpath`` and are counted with zero lines.

        Returns
        -------
        DiffSummary
            Changed files in Git's order together with total counts.
        """
        result = self._run(["diff", "--numstat", "-z", "--no-renames"])
        summary = DiffSummary()
        for record in result.stdout.split("\0"):
            if not record.strip():
                continue
            parts = record.split("\t", 2)
            if len(parts) != 3:
                logger.debug("Ignoring unexpected numstat record: %r", record)
                continue
            added, removed, path = parts
            entry = DiffSummaryFile(
                file=path,
                insertions=int(added) if added.isdigit() else 0,
                deletions=int(removed) if removed.isdigit() else 0,
            )
            summary.files.append(entry)
            summary.insertions += entry.insertions
            summary.deletions += entry.deletions
        return summary

    def file_diff(self, path: str) -> str:
        """Return the unified diff of a single path."""
        return self._run(["diff", "--", path]).stdout

    def diff_stat(self) -> str:
        """Return the raw ``git diff --stat`` text."""
        return self._run(["diff", "--stat"]).stdout

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------
    def status(self) -> RepositoryStatus:
        """Classify the working tree into staged/modified/created/deleted paths.

        Git porcelain format is ``XY path`` where X is the index status and
        Y the working tree status. With ``-z`` each entry is NUL-terminated
        and unquoted; renamed and copied entries are followed by an extra
        record holding the original path, which is skipped. Untracked files
        (``??``) are ignored.
        """
        result = self._run(["status", "--porcelain", "-z"])
        status = RepositoryStatus()

        records = iter(result.stdout.split("\0"))
        for record in records:
            if len(record) < 4:
                continue

            index_code, tree_code = record[0], record[1]
            path = record[3:]
            if index_code in ("R", "C"):
                next(records, None)
            if index_code == "?" or index_code == "!":
                continue

            if index_code in _STAGED_CODES:
                status.staged.append(path)
            if index_code == "A":
                status.created.append(path)
            if "D" in (index_code, tree_code):
                status.deleted.append(path)
            elif "M" in (index_code, tree_code):
                status.modified.append(path)

        return status

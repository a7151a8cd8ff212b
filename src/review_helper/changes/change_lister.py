"""
Change listing utilities.

This module retrieves the unified diff of every changed file in a
working tree. The caller provides a repository root and optionally a
:class:`~review_helper.vcs.backend.RepositoryReader`; when none is given
a :class:`~review_helper.vcs.git_client.GitClient` rooted at the
directory is used. Build output and lockfiles are never listed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import List, Optional

from review_helper.vcs.backend import RepositoryReader
from review_helper.vcs.git_client import GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# Paths skipped while listing changes. Not configurable.
EXCLUDED_FILES = ("dist", "bun.lock")


@dataclass
class FileChange:
    """A changed file together with its unified diff."""

    file: str
    diff: str


def is_excluded(path: str) -> bool:
    """Return True if ``path`` is, or lives under, an excluded name."""
    return any(part in EXCLUDED_FILES for part in PurePosixPath(path).parts)


def list_changes(
    root_dir: str,
    reader: Optional[RepositoryReader] = None,
) -> List[FileChange]:
    """List changed files in ``root_dir`` with their diffs.

    Parameters
    ----------
    root_dir : str
        Root directory of the working tree. Must not be empty.
    reader : RepositoryReader, optional
        Backend to query. Defaults to a :class:`GitClient` for ``root_dir``.

    Returns
    -------
    List[FileChange]
        One entry per changed file, in diff summary order.

    Raises
    ------
    ValueError
        If ``root_dir`` is empty.
    BackendError
        If the backend cannot be queried. No partial result is returned.
    """
    if not root_dir or not str(root_dir).strip():
        raise ValueError("root_dir must be a non-empty path")
    if reader is None:
        reader = GitClient(Path(root_dir))

    summary = reader.diff_summary()
    changes: List[FileChange] = []
    seen = set()
    for entry in summary.files:
        if entry.file in seen:
            continue
        seen.add(entry.file)
        if is_excluded(entry.file):
            logger.debug("Skipping excluded path: %s", entry.file)
            continue
        changes.append(FileChange(file=entry.file, diff=reader.file_diff(entry.file)))

    logger.debug("Listed %d changed file(s) in %s", len(changes), root_dir)
    return changes

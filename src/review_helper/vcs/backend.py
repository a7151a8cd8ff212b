"""
Read interface to a version control backend.

The operations in :mod:`review_helper.changes` and
:mod:`review_helper.commit` never talk to Git directly. They receive an
object implementing :class:`RepositoryReader`, which makes it easy to
substitute an in-memory fake in unit tests. :class:`~review_helper.vcs.git_client.GitClient`
is the production implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol


class BackendError(Exception):
    """Raised when the version control backend cannot be queried."""

    pass


@dataclass
class DiffSummaryFile:
    """Insertion/deletion counts for a single changed path."""

    file: str
    insertions: int = 0
    deletions: int = 0


@dataclass
class DiffSummary:
    """Aggregate list of changed files with total insertion/deletion counts.

    Attributes
    ----------
    files : List[DiffSummaryFile]
        Changed files in the order reported by the backend.
    insertions : int
        Total inserted lines across all files.
    deletions : int
        Total deleted lines across all files.
    """

    files: List[DiffSummaryFile] = field(default_factory=list)
    insertions: int = 0
    deletions: int = 0

    @property
    def changed(self) -> int:
        return len(self.files)

    @property
    def paths(self) -> List[str]:
        return [entry.file for entry in self.files]


@dataclass
class RepositoryStatus:
    """Working-tree status split into staged/modified/created/deleted paths."""

    staged: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    created: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)


class RepositoryReader(Protocol):
    """Read-only queries against a working tree."""

    def diff_summary(self) -> DiffSummary:
        ...

    def file_diff(self, path: str) -> str:
        ...

    def status(self) -> RepositoryStatus:
        ...

    def diff_stat(self) -> str:
        ...

"""
Version control system (VCS) integration.

This package contains the read interface used by the change lister and
commit message drafter, together with a Git client implementing it. The
client only issues read-only queries: diff summaries, per-file diffs,
working-tree status and ``--stat`` output.
"""

from .backend import (  # noqa: F401
    BackendError,
    DiffSummary,
    DiffSummaryFile,
    RepositoryReader,
    RepositoryStatus,
)
from .git_client import GitClient, GitError  # noqa: F401

"""
Top-level package for review_helper.

This package lists local version-control changes, drafts commit
messages from them and writes markdown review reports. The command line
entry point lives in :mod:`review_helper.cli`.
"""

__all__ = [
    "__version__",
    "draft_commit_message",
    "list_changes",
    "write_report",
]

__version__ = "0.1.0"

from review_helper.changes import list_changes  # noqa: E402
from review_helper.commit import draft_commit_message  # noqa: E402
from review_helper.report import write_report  # noqa: E402

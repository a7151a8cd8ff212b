"""
Listing of changed files and their diffs.

See :mod:`review_helper.changes.change_lister` for details.
"""

from .change_lister import EXCLUDED_FILES, FileChange, is_excluded, list_changes  # noqa: F401

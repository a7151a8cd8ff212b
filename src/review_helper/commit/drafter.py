"""
Commit message drafting.

This module provides the :class:`CommitMessageDrafter` class, which
reads the working-tree status and diff statistics from a
:class:`~review_helper.vcs.backend.RepositoryReader` and renders a
Conventional Commit style message. When no commit type is given, one is
inferred with :func:`~review_helper.commit.heuristics.infer_category`.

All drafted messages follow the format::

  type(scope): short description

  Changes:
  - N file(s) modified
  - +I insertions, -D deletions

  Files changed:
  - file1
  - ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from review_helper.commit.categories import CommitCategory
from review_helper.commit.draft_model import CommitDraft
from review_helper.commit.heuristics import (
    compute_scope,
    infer_category,
    leading_files,
    render_message,
    short_description,
)
from review_helper.vcs.backend import RepositoryReader
from review_helper.vcs.git_client import GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class CommitMessageDrafter:
    """Draft commit messages from the state of a working tree."""

    def __init__(self, reader: RepositoryReader) -> None:
        self.reader = reader

    def draft(self, commit_type: Optional[Union[CommitCategory, str]] = None) -> CommitDraft:
        """Draft a commit message.

        Parameters
        ----------
        commit_type : CommitCategory or str, optional
            Explicit category. When given, inference is skipped.

        Returns
        -------
        CommitDraft
            The rendered message and the statistics behind it.

        Raises
        ------
        ValueError
            If ``commit_type`` is not a known category.
        BackendError
            If the status or diff queries fail.
        """
        explicit = CommitCategory.parse(commit_type) if commit_type is not None else None

        summary = self.reader.diff_summary()
        status = self.reader.status()

        if explicit is not None:
            category = explicit
        else:
            category = infer_category(status)
            logger.debug(
                "Inferred commit type %s (created=%d, deleted=%d, modified=%d)",
                category.value,
                len(status.created),
                len(status.deleted),
                len(status.modified),
            )

        stat_text = self.reader.diff_stat()

        leading = leading_files(summary)
        scope = compute_scope(leading)
        description = short_description(category, leading)
        message = render_message(category, scope, description, summary)

        return CommitDraft(
            message=message,
            type=category,
            files_changed=summary.changed,
            insertions=summary.insertions,
            deletions=summary.deletions,
            summary_text=stat_text,
        )


def draft_commit_message(
    root_dir: str,
    commit_type: Optional[Union[CommitCategory, str]] = None,
    reader: Optional[RepositoryReader] = None,
) -> CommitDraft:
    """Draft a commit message for the working tree at ``root_dir``.

    ``reader`` defaults to a :class:`GitClient` rooted at ``root_dir``.
    See :meth:`CommitMessageDrafter.draft` for the remaining semantics.
    """
    if not root_dir or not str(root_dir).strip():
        raise ValueError("root_dir must be a non-empty path")
    if reader is None:
        reader = GitClient(Path(root_dir))
    return CommitMessageDrafter(reader).draft(commit_type)

"""
Composition of review report bodies.

Builds the markdown body that the ``review`` command stores with
:func:`~review_helper.report.writer.write_report`: the analysed files,
the suggested commit message and a summary, followed by any reviewer
notes supplied by the caller.
"""

from __future__ import annotations

from typing import Optional, Sequence

from review_helper.changes.change_lister import FileChange
from review_helper.commit.draft_model import CommitDraft


def compose_review(
    changes: Sequence[FileChange],
    draft: CommitDraft,
    notes: Optional[str] = None,
) -> str:
    """Return the markdown body of a review report."""
    files = "\n".join(f"- {change.file}" for change in changes) or "- (no changes)"
    summary = (
        f"{draft.files_changed} file(s) changed, "
        f"+{draft.insertions} insertions, -{draft.deletions} deletions."
    )
    sections = [
        "## Review Report",
        "### Files Analyzed\n" + files,
        "### Suggested Commit\n```\n" + draft.message + "\n```",
        "### Summary\n" + summary,
    ]
    if notes and notes.strip():
        sections.append("### Reviewer Notes\n" + notes.strip())
    return "\n\n".join(sections)

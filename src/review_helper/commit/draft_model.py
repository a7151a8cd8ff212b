"""
Data model for drafted commit messages.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from review_helper.commit.categories import CommitCategory


@dataclass(frozen=True)
class CommitDraft:
    """A drafted commit message and the statistics it was built from.

    Attributes
    ----------
    message : str
        Full multi-line commit message.
    type : CommitCategory
        Category used in the subject line.
    files_changed : int
        Number of files in the diff summary.
    insertions : int
        Total inserted lines.
    deletions : int
        Total deleted lines.
    summary_text : str
        Raw ``git diff --stat`` output.
    """

    message: str
    type: CommitCategory
    files_changed: int
    insertions: int
    deletions: int
    summary_text: str

    @property
    def subject(self) -> str:
        return self.message.splitlines()[0] if self.message else ""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data

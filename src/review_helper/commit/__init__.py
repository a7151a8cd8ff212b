"""
Commit message drafting.

The pure heuristics in :mod:`review_helper.commit.heuristics` decide the
category, scope and description; :mod:`review_helper.commit.drafter`
combines them with repository statistics into a :class:`CommitDraft`.
"""

from .categories import CommitCategory  # noqa: F401
from .draft_model import CommitDraft  # noqa: F401
from .drafter import CommitMessageDrafter, draft_commit_message  # noqa: F401

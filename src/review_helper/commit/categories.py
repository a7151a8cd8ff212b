"""
Conventional Commit categories understood by the drafter.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class CommitCategory(str, Enum):
    """Closed set of commit categories."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    CHORE = "chore"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["CommitCategory", str]) -> "CommitCategory":
        """Return the category named by ``value``.

        Raises
        ------
        ValueError
            If ``value`` is not one of the known categories.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown commit type {value!r}; expected one of: {valid}") from None

"""
Descriptions of the operations exposed to an orchestrating agent.

The agent decides when to call each operation; this module only names
them and says what they do.
"""

from __future__ import annotations

from typing import Callable, Dict, NamedTuple

from review_helper.changes import list_changes
from review_helper.commit import draft_commit_message
from review_helper.report import write_report


class ToolSpec(NamedTuple):
    function: Callable
    description: str


TOOLS: Dict[str, ToolSpec] = {
    "list_changes": ToolSpec(
        list_changes,
        "Gets the code changes made in given directory",
    ),
    "draft_commit_message": ToolSpec(
        draft_commit_message,
        "Generates a conventional commit message based on git changes in the directory",
    ),
    "write_report": ToolSpec(
        write_report,
        "Writes content to a markdown file with proper formatting",
    ),
}

TOOL_DESCRIPTIONS: Dict[str, str] = {name: spec.description for name, spec in TOOLS.items()}

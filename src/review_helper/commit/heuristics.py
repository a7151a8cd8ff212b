"""
Heuristics for drafting commit messages.

Everything in this module is pure: it operates on a
:class:`~review_helper.vcs.backend.RepositoryStatus` or on lists of paths
and never touches the repository, so it can be unit tested without any
I/O. The rules are intentionally simple substring checks on file paths.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple, Union

from review_helper.commit.categories import CommitCategory
from review_helper.vcs.backend import DiffSummary, RepositoryStatus


# Number of leading summary files used for scope and description.
LEADING_FILES = 3
# Number of files listed under "Files changed:".
LISTED_FILES = 5

# category -> (template, fallback used when no file names are available)
DESCRIPTION_TEMPLATES: Dict[str, Tuple[str, str]] = {
    CommitCategory.FEAT.value: ("add new functionality to {names}", "codebase"),
    CommitCategory.FIX.value: ("resolve issues in {names}", "codebase"),
    CommitCategory.DOCS.value: ("update documentation for {names}", "project"),
    CommitCategory.STYLE.value: ("improve code formatting and style", ""),
    CommitCategory.REFACTOR.value: ("restructure {names} without changing functionality", "code"),
    CommitCategory.TEST.value: ("add or update tests for {names}", "codebase"),
    CommitCategory.CHORE.value: ("maintain {names} and dependencies", "codebase"),
}
DEFAULT_TEMPLATE = ("update {names}", "codebase")


def infer_category(status: RepositoryStatus) -> CommitCategory:
    """Infer a commit category from the working-tree status.

    Rules are evaluated in order and the first match wins:

    1. any created file -> ``feat``
    2. any deleted file -> ``chore``
    3. a modified path containing ``test`` or ``spec`` -> ``test``
    4. a modified path containing ``README`` or ``.md`` -> ``docs``
    5. otherwise ``fix``
    """
    if status.created:
        return CommitCategory.FEAT
    if status.deleted:
        return CommitCategory.CHORE
    if any("test" in path or "spec" in path for path in status.modified):
        return CommitCategory.TEST
    if any("README" in path or ".md" in path for path in status.modified):
        return CommitCategory.DOCS
    return CommitCategory.FIX


def leading_files(summary: DiffSummary) -> List[str]:
    """Return the paths the scope and description are derived from."""
    return summary.paths[:LEADING_FILES]


def file_stem(path: str) -> str:
    """Return the basename of ``path`` up to its first dot.

    ``src/a.test.ts`` gives ``a``; dotfiles such as ``.gitignore`` give
    an empty string.
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    return name.split(".", 1)[0]


def compute_scope(paths: Sequence[str]) -> str:
    """Compute the ``(scope)`` annotation for the leading paths.

    An empty set of paths satisfies the "all tests" rule and gives
    ``(tests)``.
    """
    if len(paths) == 1:
        stem = file_stem(paths[0])
        return f"({stem})" if stem else ""
    if all("test" in path for path in paths):
        return "(tests)"
    if all("doc" in path or "README" in path for path in paths):
        return "(docs)"
    return ""


def short_description(category: Union[CommitCategory, str], paths: Iterable[str]) -> str:
    """Render the one-line description for ``category``.

    File names are the stems of ``paths`` joined with ``", "``. When no
    usable name remains, a per-category fallback word is used instead.
    """
    key = category.value if isinstance(category, CommitCategory) else str(category)
    template, fallback = DESCRIPTION_TEMPLATES.get(key, DEFAULT_TEMPLATE)
    names = ", ".join(stem for stem in (file_stem(p) for p in paths) if stem)
    return template.format(names=names or fallback)


def render_message(
    category: Union[CommitCategory, str],
    scope: str,
    description: str,
    summary: DiffSummary,
) -> str:
    """Assemble the full commit message."""
    label = category.value if isinstance(category, CommitCategory) else str(category)
    lines = [
        f"{label}{scope}: {description}",
        "",
        "Changes:",
        f"- {summary.changed} file(s) modified",
        f"- +{summary.insertions} insertions, -{summary.deletions} deletions",
        "",
        "Files changed:",
    ]
    lines.extend(f"- {path}" for path in summary.paths[:LISTED_FILES])
    if not summary.paths:
        lines.append("")
    if summary.changed > LISTED_FILES:
        lines.append(f"- ... and {summary.changed - LISTED_FILES} more")
    return "\n".join(lines)

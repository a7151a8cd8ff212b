"""
Markdown report writer.

:func:`write_report` wraps review text in a fixed markdown template and
stores it at ``{file_path}/{file_name}.md``. An existing file at that
path is overwritten. I/O failures never escape the function; they are
reported through a :class:`WriteResult` instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Protocol


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


REPORT_TEMPLATE = """# Code Review Report

Generated on: {timestamp}

---

{content}

---

*Generated by Code Review Agent*
"""


class WriteError(Exception):
    """Raised when a report cannot be written."""

    pass


class TextFileWriter(Protocol):
    """Capability to write a text file."""

    def write_text(self, path: str, text: str) -> None:
        ...


class LocalFileWriter:
    """Write UTF-8 text files on the local filesystem."""

    def write_text(self, path: str, text: str) -> None:
        try:
            Path(path).write_text(text, encoding="utf-8")
        except (OSError, ValueError) as exc:
            reason = getattr(exc, "strerror", None) or exc
            raise WriteError(f"{reason}: {path!r}") from exc


@dataclass
class WriteResult:
    """Outcome of a report write."""

    success: bool
    message: str
    file_path: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.success:
            data["filePath"] = self.file_path
        else:
            data["error"] = self.error
        return data


def build_report_path(file_path: str, file_name: str) -> str:
    """Return ``{file_path}/{file_name}.md`` without normalising it."""
    return f"{file_path}/{file_name}.md"


def render_report(content: str, now: Optional[datetime] = None) -> str:
    """Wrap ``content`` in the report template.

    The timestamp is local wall-clock time in the locale's preferred
    format.
    """
    timestamp = (now or datetime.now()).strftime("%c")
    return REPORT_TEMPLATE.format(timestamp=timestamp, content=content)


def write_report(
    file_path: str,
    file_name: str,
    content: str,
    writer: Optional[TextFileWriter] = None,
    now: Optional[datetime] = None,
) -> WriteResult:
    """Write ``content`` as a markdown report.

    Parameters
    ----------
    file_path : str
        Existing directory to write into. It is not created.
    file_name : str
        Report name without the ``.md`` extension.
    content : str
        Markdown body of the report.
    writer : TextFileWriter, optional
        Defaults to :class:`LocalFileWriter`.
    now : datetime, optional
        Timestamp to render; defaults to the current local time.

    Returns
    -------
    WriteResult
        ``success=True`` with the written path, or ``success=False`` with
        the error text.

    Raises
    ------
    ValueError
        If any argument is empty.
    """
    for name, value in (("file_path", file_path), ("file_name", file_name), ("content", content)):
        if not value:
            raise ValueError(f"{name} must be a non-empty string")

    full_path = build_report_path(file_path, file_name)
    if writer is None:
        writer = LocalFileWriter()

    try:
        writer.write_text(full_path, render_report(content, now))
    except (WriteError, OSError, ValueError) as exc:
        logger.error("Failed to write report to %s: %s", full_path, exc)
        return WriteResult(
            success=False,
            message="Failed to write markdown file",
            error=str(exc) or exc.__class__.__name__,
        )

    logger.debug("Wrote report to %s", full_path)
    return WriteResult(
        success=True,
        message=f"Markdown file successfully written to {full_path}",
        file_path=full_path,
    )

"""
Markdown report generation.

See :mod:`review_helper.report.writer` for the template and the write
semantics.
"""

from .review_body import compose_review  # noqa: F401
from .writer import (  # noqa: F401
    LocalFileWriter,
    TextFileWriter,
    WriteError,
    WriteResult,
    build_report_path,
    render_report,
    write_report,
)

#!/usr/bin/env python
"""
Thin wrapper script to invoke the review_helper CLI.

Running ``python reviewhelper.py`` is equivalent to running the
``review-helper`` console script installed via ``pyproject.toml``.
"""

from review_helper.cli import run


if __name__ == "__main__":
    run()

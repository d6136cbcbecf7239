# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic reports for command-line tools.

This package provides `NiceError`, an exception that renders a report made of
its message, an optional suggestion list, and an optional source excerpt with
a caret under the offending column.

Design:
    - `NiceError` owns the report assembly (ordering, headers, omission rules).
    - `nicerror.diagnostic.context` owns the line window and caret alignment.
    - Styling is injected as a `Styler` and never affects the layout.
"""

from __future__ import annotations

from nicerror.diagnostic.context import (
    ContextLine,
    caret_line,
    extract_context,
    format_context,
    format_source_line,
)
from nicerror.diagnostic.model import NiceError, NiceErrorOptions

__all__ = [
    "ContextLine",
    "NiceError",
    "NiceErrorOptions",
    "caret_line",
    "extract_context",
    "format_context",
    "format_source_line",
]

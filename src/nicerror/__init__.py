# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NiceError package.

NiceError renders source-aware diagnostic reports for command-line tools: an
error message, a bulleted list of suggestions, and the offending source line
shown in context with a caret under the exact column. It exposes both a small
typed API and a CLI.
"""

from __future__ import annotations

from nicerror.diagnostic import NiceError, NiceErrorOptions
from nicerror.rendering.styles import StyleRole, Styler, chalk_styler, plain_styler

__all__ = [
    "NiceError",
    "NiceErrorOptions",
    "StyleRole",
    "Styler",
    "chalk_styler",
    "plain_styler",
]

# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for NiceError."""

from __future__ import annotations

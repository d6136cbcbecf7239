# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NiceError CLI subcommands."""

from __future__ import annotations

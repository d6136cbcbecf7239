# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for NiceError.

Public modules:
    - nicerror.config.logging: TRACE-aware logging setup.
    - nicerror.config.settings: render settings loaded from TOML and the environment.
"""

from __future__ import annotations

# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for NiceError.

Terminal styling is kept here, separate from the report layout, so that the
layout can be tested with styling stripped to the identity.

Public modules:
    - nicerror.rendering.colored_enum
    - nicerror.rendering.styles
"""

from __future__ import annotations

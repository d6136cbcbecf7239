# topmark:header:start
#
#   project      : NiceError
#   file         : __init__.py
#   file_relpath : src/nicerror/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends.

Modules here must not import Click so they can be reused from other
frontends and from tests.
"""

from __future__ import annotations

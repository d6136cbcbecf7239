# topmark:header:start
#
#   project      : NiceError
#   file         : __main__.py
#   file_relpath : src/nicerror/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NiceError via ``python -m nicerror``.

Delegates to `nicerror.cli.main.cli`, the single authoritative CLI entry
point, so that ``python -m nicerror render ...`` behaves like the
``nicerror`` console script.
"""

from __future__ import annotations

from nicerror.cli.main import cli

if __name__ == "__main__":
    cli()

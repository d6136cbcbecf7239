# topmark:header:start
#
#   project      : NiceError
#   file         : constants.py
#   file_relpath : src/nicerror/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NiceError Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

NICERROR_VERSION: str = get_version("nicerror")

# Number of source lines shown on each side of the target line.
DEFAULT_CONTEXT_SIZE: Final[int] = 2

CARET_MARKER: Final[str] = "^"
SUGGESTION_BULLET: Final[str] = " * "

# Configuration sources, lowest precedence first.
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "nicerror"
NICERROR_TOML_NAME: Final[str] = "nicerror.toml"

ENV_LOG_LEVEL: Final[str] = "NICERROR_LOG_LEVEL"
ENV_CONTEXT_SIZE: Final[str] = "NICERROR_CONTEXT_SIZE"

# topmark:header:start
#
#   project      : NiceError
#   file         : exit_codes.py
#   file_relpath : src/nicerror/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the NiceError CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the NiceError CLI.

    Attributes:
        SUCCESS: The report was rendered.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: The source file is not valid UTF-8. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The source file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: The source file could not be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid or malformed configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

# topmark:header:start
#
#   project      : Formate
#   file         : exit_codes.py
#   file_relpath : src/formate/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Formate CLI.

Formate aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, which signals a dry run in which files would be reformatted.
Click's own parsing errors also exit with 2; Formate's usage errors use
`USAGE_ERROR` instead.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Formate CLI.

    Attributes:
        SUCCESS: Successful execution; nothing to reformat (or everything written).
        FAILURE: Generic failure. Prefer a more specific code if available.
        WOULD_CHANGE: Dry run: files would be reformatted if ``--apply`` were set.
        USAGE_ERROR: Invalid flags/args. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: File is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_FILE_TYPE: Not a stylesheet. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        PIPELINE_ERROR: Formatting failed (beautifier error). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255

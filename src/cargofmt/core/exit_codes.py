# topmark:header:start
#
#   project      : CargoFmt
#   file         : exit_codes.py
#   file_relpath : src/cargofmt/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for CargoFmt.

CargoFmt follows the BSD ``sysexits`` convention where practical. The one
divergence is ``WOULD_CHANGE = 2``, returned by ``--check`` when a manifest is
not formatted. Click's own usage errors also exit with 2, so tests assert
``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ``cargofmt`` command.

    Attributes:
        SUCCESS: Every manifest was formatted or already up-to-date.
        FAILURE: Generic failure; prefer a more specific code.
        WOULD_CHANGE: ``--check`` found manifests that are not formatted.
        USAGE_ERROR: Invalid invocation. Mirrors ``EX_USAGE (64)``.
        ENCODING_ERROR: A manifest is not valid UTF-8 or not valid TOML.
        FILE_NOT_FOUND: A manifest or config file does not exist.
        PIPELINE_ERROR: Formatting failed, including a failed verification.
        IO_ERROR: Writing a manifest failed.
        PERMISSION_DENIED: Insufficient permissions to read or write.
        CONFIG_ERROR: A config file is unreadable or not valid TOML.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # see class docstring

    # BSD sysexits
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

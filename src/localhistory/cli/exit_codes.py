"""Exit codes for the localhistory CLI.

Ranges:
- 0: success
- 1-9: general errors
- 10-19: validation errors
- 20-29: negative results of a check
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1

    INVALID_ARGUMENT = 10
    CONFIG_ERROR = 11

    # is-subpath answered "false"
    NOT_SUB_PATH = 20

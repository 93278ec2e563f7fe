"""Process exit statuses and a helper that reports errors and exits."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import NoReturn

__all__ = ["ExitStatus", "terminate"]


class ExitStatus(IntEnum):
    """Exit statuses of the command."""

    OK = 0
    # Unknown errors: restarting the service may help.
    FATAL = 1
    PANIC = 2
    # Known errors: restarting will not help.
    GENERAL_ERROR = 11
    INVALID_FLAG = 12
    INVALID_ARG = 13
    INVALID_CONFIG = 14


def terminate(status: ExitStatus | int, *args: BaseException | str) -> NoReturn:
    """Print each error to stderr as ``error: <message>`` and exit with *status*."""
    for error in args:
        print(f"error: {error}", file=sys.stderr)
    raise SystemExit(int(status))
#!/usr/bin/env python3
"""
Error types for the setup utilities.

Every error carries the exit code the command line should terminate with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .process import ExitStatus


ERR_GENERAL = 1
ERR_CONFIG = 2
ERR_NOT_STARTED = 127


class SetupError(Exception):
    """Fatal condition reported as ``prog: message`` at the top level."""

    def __init__(self, message: str, exit_code: int = ERR_GENERAL):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


class ConfigError(SetupError):
    def __init__(self, message: str):
        super().__init__(message, ERR_CONFIG)


class ArgumentBudgetError(ConfigError):
    """The fixed arguments alone do not fit under the batch size limit."""

    def __init__(self, max_size: int, fixed_size: int):
        super().__init__(
            f"fixed arguments need {fixed_size} bytes, "
            f"which leaves no room under the limit of {max_size}"
        )
        self.max_size = max_size
        self.fixed_size = fixed_size


class ProcessStartError(SetupError):
    """The program could not be started at all."""

    def __init__(self, path: str, reason: object):
        super().__init__(f"cannot run {path}: {reason}", ERR_NOT_STARTED)
        self.path = path
        self.reason = reason


class ProcessExitError(SetupError):
    """The program ran and finished with a non-success exit status."""

    def __init__(self, path: str, status: "ExitStatus"):
        super().__init__(f"{path} failed with {status}", status.exit_code)
        self.path = path
        self.status = status

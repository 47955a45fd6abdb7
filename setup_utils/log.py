#!/usr/bin/env python3
"""
Verbosity-aware status output for the setup utilities.

A Logger is built once (usually by the command line) and passed to every
routine that reports progress. Output goes through rich consoles, stdout for
status messages and stderr for warnings and fatal errors.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, NoReturn, Optional

from rich.console import Console

from .errors import ProcessExitError, SetupError
from .verbosity import Verbosity


class Logger:
    """Status messages gated on a verbosity level"""

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        prog: Optional[str] = None,
    ):
        self.verbosity = verbosity
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.prog = prog or Path(sys.argv[0]).name

    def _emit(self, console: Console, msg: str, style: Optional[str] = None) -> None:
        # Paths and argument lists may contain brackets and colons: print verbatim.
        console.print(
            msg,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def flush(self) -> None:
        self.console.file.flush()

    def warn(self, msg: str) -> None:
        """
        Non fatal conditions that may be indicative of an error or problem.

        Shown at the normal verbosity level.
        """
        if self.verbosity >= Verbosity.NORMAL:
            self.flush()
            self._emit(self.err_console, f"Warning: {msg}", style="yellow")

    def notice(self, msg: str) -> None:
        """
        Useful status messages, shown at the normal verbosity level.

        Just enough information to know that things are working but not
        floods of detail.
        """
        if self.verbosity >= Verbosity.NORMAL:
            self._emit(self.console, msg)

    def info(self, msg: str) -> None:
        """More detail on the operation of some action."""
        if self.verbosity >= Verbosity.VERBOSE:
            self._emit(self.console, msg)

    def debug(self, msg: str) -> None:
        """Detailed internal debugging information."""
        if self.verbosity >= Verbosity.DEAFENING:
            self._emit(self.console, msg)

    def die(self, msg: str) -> NoReturn:
        raise SetupError(msg)

    def die_with_location(self, filename: str, line: Optional[int], msg: str) -> NoReturn:
        if line is None:
            self.die(f"{filename}: {msg}")
        self.die(f"{filename}:{line}: {msg}")

    def report(self, error: SetupError) -> None:
        """Print a fatal error as ``prog: message`` on stderr."""
        if isinstance(error, ProcessExitError):
            # The child already had its say on its own stderr.
            return
        self.flush()
        self._emit(self.err_console, f"{self.prog}: {error}", style="red")

    def chatty_try(self, description: str, action: Callable[[], object]) -> None:
        """Run an action, printing instead of raising any OS error it hits."""
        try:
            action()
        except OSError as e:
            self._emit(self.console, f"Error while {description}: {e}")

#!/usr/bin/env python3
"""
Process invocation for the setup utilities
Run a program with inherited stdio, or capture its standard output
"""

from __future__ import annotations

import os
import subprocess
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, Optional, Sequence

from .errors import ProcessExitError, ProcessStartError
from .log import Logger
from .verbosity import Verbosity


OUTPUT_ENCODING = "utf-8"
_DRAIN_CHUNK = 64 * 1024


########################################################################
# Results
########################################################################

@dataclass(frozen=True)
class ExitStatus:
    """How a child process ended: an exit code, or the signal that killed it."""

    code: Optional[int] = 0
    signal: Optional[int] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExitStatus":
        if returncode < 0:
            return cls(code=None, signal=-returncode)
        return cls(code=returncode)

    @property
    def success(self) -> bool:
        return self.code == 0

    @property
    def exit_code(self) -> int:
        """A code to exit with on the child's behalf."""
        if self.signal is not None:
            return 128 + self.signal
        return self.code

    def __str__(self) -> str:
        if self.signal is not None:
            return f"signal {self.signal}"
        return f"exit code {self.code}"


@dataclass(frozen=True)
class ProcessResult:
    stdout: str
    status: ExitStatus


def _decode(output: bytes) -> str:
    return output.decode(OUTPUT_ENCODING, errors="replace")


########################################################################
# Spawners
########################################################################

class Spawner(ABC):
    """How child processes get started on this platform"""

    name = "abstract"

    @abstractmethod
    def capture(self, path: str, args: Sequence[str]) -> ProcessResult:
        """
        Run *path* with *args*, returning its whole stdout and exit status.

        stdin is not connected and stderr is discarded. Raises
        ProcessStartError if the program cannot be started.
        """

    @abstractmethod
    def run(self, path: str, args: Sequence[str]) -> ExitStatus:
        """Run *path* with *args* on the caller's stdio and wait for it."""


def _drain(stream: IO[bytes]) -> None:
    # Pull on (and discard) stderr so a chatty child never blocks on a full pipe.
    with stream:
        while stream.read(_DRAIN_CHUNK):
            pass


class PipeSpawner(Spawner):
    """Portable spawner on subprocess pipes and a stderr drain thread"""

    name = "pipe"

    def capture(self, path: str, args: Sequence[str]) -> ProcessResult:
        try:
            proc = subprocess.Popen(
                [path, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise ProcessStartError(path, e.strerror or e) from e

        # Once started, the drain thread owns stderr and closes it at EOF.
        drain_started = False
        try:
            with proc.stdout:
                drain = threading.Thread(target=_drain, args=(proc.stderr,), daemon=True)
                drain.start()
                drain_started = True
                output = proc.stdout.read()
        finally:
            if not drain_started:
                proc.stderr.close()
            # All of stdout is in before waiting, or a child blocked on a
            # full stdout pipe would never exit.
            returncode = proc.wait()

        return ProcessResult(_decode(output), ExitStatus.from_returncode(returncode))

    def run(self, path: str, args: Sequence[str]) -> ExitStatus:
        try:
            returncode = subprocess.call([path, *args])
        except OSError as e:
            raise ProcessStartError(path, e.strerror or e) from e
        return ExitStatus.from_returncode(returncode)


def _fork_failure_reason(error: Exception) -> str:
    # sh reports a failed exec with the child's whole traceback; keep its last line.
    lines = [line.strip() for line in str(error).splitlines() if line.strip()]
    return lines[-1] if lines else "exec failed"


class ShSpawner(Spawner):
    """POSIX spawner built on the sh library"""

    name = "sh"

    def _command(self, path: str):
        import sh  # POSIX only

        try:
            return sh.Command(path)
        except sh.CommandNotFound as e:
            raise ProcessStartError(path, "command not found") from e

    def capture(self, path: str, args: Sequence[str]) -> ProcessResult:
        import sh

        command = self._command(path)
        try:
            with open(os.devnull, "rb") as devnull:
                running = command(
                    *args,
                    _in=devnull,
                    _err=os.devnull,
                    _tty_out=False,
                    _return_cmd=True,
                )
        except sh.ErrorReturnCode as e:
            # Non-zero exits and fatal signals are data here, not errors.
            return ProcessResult(_decode(e.stdout), ExitStatus.from_returncode(e.exit_code))
        except sh.ForkException as e:
            raise ProcessStartError(path, _fork_failure_reason(e)) from e
        except OSError as e:
            raise ProcessStartError(path, e.strerror or e) from e

        return ProcessResult(_decode(running.stdout), ExitStatus.from_returncode(running.exit_code))

    def run(self, path: str, args: Sequence[str]) -> ExitStatus:
        import sh

        command = self._command(path)
        try:
            command(*args, _fg=True)
        except sh.ErrorReturnCode as e:
            return ExitStatus.from_returncode(e.exit_code)
        except sh.ForkException as e:
            raise ProcessStartError(path, _fork_failure_reason(e)) from e
        except OSError as e:
            raise ProcessStartError(path, e.strerror or e) from e
        return ExitStatus()


def default_spawner(choice: str = "auto") -> Spawner:
    """
    Pick the spawner for this platform.

    Args:
        choice: "sh", "pipe", or "auto" (sh on POSIX, pipes elsewhere)
    """
    if choice == "sh" or (choice == "auto" and os.name == "posix"):
        return ShSpawner()
    return PipeSpawner()


########################################################################
# Running Programs
########################################################################

def print_command(logger: Logger, path: str, args: Sequence[str]) -> None:
    if logger.verbosity >= Verbosity.DEAFENING:
        logger.debug(repr((path, list(args))))
    else:
        logger.info(" ".join([path, *args]))


def maybe_exit(path: str, status: ExitStatus) -> None:
    """Raise ProcessExitError unless *status* is a success."""
    if not status.success:
        raise ProcessExitError(path, status)


def run_command(
    logger: Logger,
    path: str,
    args: Sequence[str],
    spawner: Optional[Spawner] = None,
) -> None:
    """
    Run a program on the caller's stdio.

    Raises ProcessExitError, carrying the child's exit code, if it fails.
    """
    print_command(logger, path, args)
    logger.flush()
    status = (spawner or default_spawner()).run(path, list(args))
    maybe_exit(path, status)


def run_stdout_status(
    logger: Logger,
    path: str,
    args: Sequence[str],
    spawner: Optional[Spawner] = None,
) -> ProcessResult:
    """Run a program and return its output together with its exit status."""
    print_command(logger, path, args)
    return (spawner or default_spawner()).capture(path, list(args))


def run_stdout(
    logger: Logger,
    path: str,
    args: Sequence[str],
    spawner: Optional[Spawner] = None,
) -> str:
    """Run a program and return its output, failing if it does."""
    result = run_stdout_status(logger, path, args, spawner)
    maybe_exit(path, result.status)
    return result.stdout

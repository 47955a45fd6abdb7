"""Shared pytest fixtures for setup_utils tests."""

from __future__ import annotations

import io
import os
import pathlib
import sys
from dataclasses import dataclass

import pytest
from rich.console import Console

# Add repository root to path for imports
REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from setup_utils.log import Logger  # noqa: E402
from setup_utils.process import PipeSpawner, ShSpawner  # noqa: E402
from setup_utils.verbosity import Verbosity  # noqa: E402


@dataclass
class CapturedLogger:
    logger: Logger
    out: io.StringIO
    err: io.StringIO


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=200, color_system=None, highlight=False)


@pytest.fixture
def make_logger():
    """Build a Logger whose stdout and stderr land in StringIO buffers."""

    def factory(verbosity: Verbosity = Verbosity.NORMAL) -> CapturedLogger:
        out, err = io.StringIO(), io.StringIO()
        logger = Logger(verbosity, console=_console(out), err_console=_console(err), prog="setup-utils")
        return CapturedLogger(logger, out, err)

    return factory


@pytest.fixture
def quiet_logger(make_logger) -> Logger:
    return make_logger(Verbosity.SILENT).logger


@pytest.fixture
def python() -> str:
    """Path of the running interpreter, used to script child processes."""
    return sys.executable


SPAWNERS = [
    pytest.param(PipeSpawner, id="pipe"),
    pytest.param(
        ShSpawner,
        id="sh",
        marks=pytest.mark.skipif(os.name != "posix", reason="sh needs POSIX"),
    ),
]


@pytest.fixture(params=SPAWNERS)
def spawner(request):
    """Every spawner available on this platform."""
    return request.param()

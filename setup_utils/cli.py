#!/usr/bin/env python3
"""
Command line for the setup utilities
Exposes process running, argument batching, text wrapping and source lookup
"""

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer

from .config import CURRENT_DIR, OS_SYSTEM, get_settings
from .errors import ConfigError, SetupError
from .files import smart_copy_sources
from .log import Logger
from .paths import module_to_file_path
from .process import Spawner, default_spawner, run_command, run_stdout
from .text import wrap_text
from .verbosity import Verbosity
from .xargs import xargs


PROG = "setup-utils"
HELP_OPTIONS = {"help_option_names": ["-h", "--help"]}
# Everything after the program name belongs to the program.
PASSTHROUGH = {**HELP_OPTIONS, "ignore_unknown_options": True}


app = typer.Typer(add_completion=False, help="Build tool helper commands")


@dataclass
class CliState:
    logger: Logger
    settings: dict
    spawner: Spawner


@contextmanager
def reporting_errors(logger: Logger):
    """Turn a SetupError into a report on stderr and the matching exit code."""
    try:
        yield
    except SetupError as e:
        logger.report(e)
        raise typer.Exit(e.exit_code)


@app.callback(context_settings=HELP_OPTIONS)
def main_callback(
    ctx: typer.Context,
    verbosity: Optional[str] = typer.Option(
        None,
        "--verbosity",
        "-v",
        help="0-3 or silent/normal/verbose/deafening (default: $SETUP_UTILS_VERBOSITY or normal)",
    ),
):
    with reporting_errors(Logger(prog=PROG)):
        settings = get_settings()
        if verbosity is not None:
            settings['VERBOSITY'] = Verbosity.parse(verbosity)

    ctx.obj = CliState(
        logger=Logger(settings['VERBOSITY'], prog=PROG),
        settings=settings,
        spawner=default_spawner(settings['SPAWNER']),
    )


@app.command("run", context_settings=PASSTHROUGH)
def run_cmd(
    ctx: typer.Context,
    program: str = typer.Argument(..., help="Program to run"),
    args: Optional[List[str]] = typer.Argument(None, help="Arguments for the program"),
):
    """
    Run a program and print its standard output, exiting with its code on failure.
    """
    state: CliState = ctx.obj
    with reporting_errors(state.logger):
        output = run_stdout(state.logger, program, args or [], state.spawner)
    typer.echo(output, nl=False)


@app.command("xargs", context_settings=PASSTHROUGH)
def xargs_cmd(
    ctx: typer.Context,
    program: str = typer.Argument(..., help="Program to run for every batch"),
    fixed: Optional[List[str]] = typer.Argument(None, help="Arguments repeated in every batch"),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        "-s",
        min=1,
        help="Command line size limit in bytes (default: $SETUP_UTILS_XARGS_MAX_SIZE or 32768)",
    ),
):
    """
    Read arguments from stdin and run the program on them in batches.
    """
    state: CliState = ctx.obj
    big_args = sys.stdin.read().split()
    limit = max_size or state.settings['XARGS_MAX_SIZE']

    def run_batch(argv: List[str]) -> None:
        run_command(state.logger, program, argv, state.spawner)

    with reporting_errors(state.logger):
        xargs(limit, run_batch, fixed or [], big_args)


@app.command("wrap", context_settings=HELP_OPTIONS)
def wrap_cmd(
    width: int = typer.Option(79, "--width", "-w", min=1, help="Line width"),
):
    """
    Wrap the words read from stdin to lines of the given width.
    """
    for line in wrap_text(width, sys.stdin.read().split()):
        typer.echo(line)


@app.command("find-module", context_settings=HELP_OPTIONS)
def find_module_cmd(
    ctx: typer.Context,
    module: str = typer.Argument(..., help="Dotted module name"),
    search: Optional[List[str]] = typer.Option(None, "--search", "-s", help="Search directory (repeatable)"),
    suffix: Optional[List[str]] = typer.Option(None, "--suffix", "-x", help="File extension (repeatable)"),
):
    """
    Print the files that implement a module.
    """
    state: CliState = ctx.obj
    with reporting_errors(state.logger):
        if not suffix:
            raise ConfigError("at least one --suffix is required")
        paths = module_to_file_path(search or [CURRENT_DIR], module, suffix)
        if not paths:
            state.logger.die(f"Could not find module: {module} with any suffix: {suffix}")
    for path in paths:
        typer.echo(str(path))


@app.command("copy-sources", context_settings=HELP_OPTIONS)
def copy_sources_cmd(
    ctx: typer.Context,
    target: Path = typer.Argument(..., help="Directory to copy into"),
    modules: List[str] = typer.Argument(..., help="Dotted module names"),
    search: Optional[List[str]] = typer.Option(None, "--search", "-s", help="Search directory (repeatable)"),
    suffix: Optional[List[str]] = typer.Option(None, "--suffix", "-x", help="File extension (repeatable)"),
    preserve_dirs: bool = typer.Option(
        False,
        "--preserve-dirs",
        "-p",
        help="Keep the search directory in the target path",
    ),
    allow_missing: bool = typer.Option(
        False,
        "--allow-missing",
        help="Skip modules with no source file instead of failing",
    ),
):
    """
    Copy the source files of the given modules into a directory.
    """
    state: CliState = ctx.obj
    with reporting_errors(state.logger):
        if not suffix:
            raise ConfigError("at least one --suffix is required")
        smart_copy_sources(
            state.logger,
            search or [CURRENT_DIR],
            target,
            modules,
            suffix,
            exit_if_none=not allow_missing,
            preserve_dirs=preserve_dirs,
        )
    state.logger.notice(f"Copied sources for {len(modules)} module(s) to {target}")


@app.command("info", context_settings=HELP_OPTIONS)
def info_cmd(ctx: typer.Context):
    """
    Show the effective configuration.
    """
    state: CliState = ctx.obj
    typer.echo("Configuration:")
    typer.echo(f"  Platform: {OS_SYSTEM}")
    typer.echo(f"  Verbosity: {str(state.settings['VERBOSITY'])}")
    typer.echo(f"  xargs size limit: {state.settings['XARGS_MAX_SIZE']}")
    typer.echo(f"  Spawner: {state.spawner.name} (requested: {state.settings['SPAWNER']})")


def main():
    app(prog_name=PROG)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Helper routines for package build tools.

Modules:
- config: Defaults, naming constants and environment overrides
- verbosity: Verbosity levels
- log: Verbosity-aware status output
- errors: Error types and their exit codes
- process: Running programs and capturing their output
- xargs: Splitting long argument lists into command-sized batches
- text: Word wrapping and splitting
- paths: Module name to file path resolution
- files: Verbose file copying and temporary files
- naming: Library file names
"""

from .config import (
    CURRENT_DIR,
    DEFAULT_XARGS_MAX_SIZE,
    get_settings,
)

from .errors import (
    SetupError,
    ConfigError,
    ArgumentBudgetError,
    ProcessStartError,
    ProcessExitError,
)

from .verbosity import Verbosity

from .log import Logger

from .process import (
    ExitStatus,
    ProcessResult,
    Spawner,
    PipeSpawner,
    ShSpawner,
    default_spawner,
    print_command,
    maybe_exit,
    run_command,
    run_stdout,
    run_stdout_status,
)

from .xargs import batch, xargs

from .text import breaks, wrap_text

from .paths import (
    dot_to_sep,
    module_to_possible_paths,
    module_to_file_path,
    module_to_file_path2,
    find_file,
)

from .files import (
    create_directory_if_missing_verbose,
    copy_file_verbose,
    smart_copy_sources,
    with_temp_file,
)

from .naming import mk_lib_name, mk_prof_lib_name, mk_shared_lib_name

__all__ = [
    # config
    "CURRENT_DIR",
    "DEFAULT_XARGS_MAX_SIZE",
    "get_settings",
    # errors
    "SetupError",
    "ConfigError",
    "ArgumentBudgetError",
    "ProcessStartError",
    "ProcessExitError",
    # verbosity / log
    "Verbosity",
    "Logger",
    # process
    "ExitStatus",
    "ProcessResult",
    "Spawner",
    "PipeSpawner",
    "ShSpawner",
    "default_spawner",
    "print_command",
    "maybe_exit",
    "run_command",
    "run_stdout",
    "run_stdout_status",
    # xargs
    "batch",
    "xargs",
    # text
    "breaks",
    "wrap_text",
    # paths
    "dot_to_sep",
    "module_to_possible_paths",
    "module_to_file_path",
    "module_to_file_path2",
    "find_file",
    # files
    "create_directory_if_missing_verbose",
    "copy_file_verbose",
    "smart_copy_sources",
    "with_temp_file",
    # naming
    "mk_lib_name",
    "mk_prof_lib_name",
    "mk_shared_lib_name",
]

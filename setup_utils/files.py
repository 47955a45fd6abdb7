#!/usr/bin/env python3
"""
File utilities that report what they do at the verbose level.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Sequence, Tuple

from .log import Logger
from .paths import PathLike, module_to_file_path2


def create_directory_if_missing_verbose(logger: Logger, parents: bool, directory: PathLike) -> None:
    msg_parents = " (and its parents)" if parents else ""
    logger.info(f"Creating {os.fspath(directory)}{msg_parents}")
    Path(directory).mkdir(parents=parents, exist_ok=True)


def copy_file_verbose(logger: Logger, src: PathLike, dest: PathLike) -> None:
    logger.info(f"copy {os.fspath(src)} to {os.fspath(dest)}")
    shutil.copy(src, dest)


def smart_copy_sources(
    logger: Logger,
    src_dirs: Sequence[PathLike],
    target_dir: PathLike,
    modules: Sequence[str],
    suffixes: Sequence[str],
    exit_if_none: bool,
    preserve_dirs: bool,
) -> None:
    """
    Copy the source files of the given modules into the target directory.

    Args:
        logger: Where progress is reported
        src_dirs: Build prefixes to look for the modules in
        target_dir: Directory to copy into
        modules: Dotted module names
        suffixes: File extensions to search for
        exit_if_none: Die if a module has no file with any of the suffixes
        preserve_dirs: Keep the source directory as part of the target path
    """
    target = Path(target_dir)
    create_directory_if_missing_verbose(logger, True, target)

    locations = []
    for module in modules:
        found = module_to_file_path2(src_dirs, module, suffixes)
        if not found and exit_if_none:
            logger.die(f"Error: Could not find module: {module} with any suffix: {list(suffixes)}")
        locations.extend(found)

    copies = [
        (src_dir / name, target / src_dir / name if preserve_dirs else target / name)
        for src_dir, name in locations
    ]

    # Create parent directories for everything, once each
    for parent in dict.fromkeys(dest.parent for _, dest in copies):
        create_directory_if_missing_verbose(logger, True, parent)

    for src_file, dest_file in copies:
        copy_file_verbose(logger, src_file, dest_file)


@contextmanager
def with_temp_file(tmp_dir: PathLike, template: str) -> Iterator[Tuple[Path, IO[str]]]:
    """
    Use a temporary file that doesn't already exist.

    The file is named after *template* ("name.ext" gives "name<random>.ext"),
    opened for reading and writing, and removed on exit.
    """
    prefix, suffix = os.path.splitext(template)
    fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=tmp_dir)
    handle = os.fdopen(fd, "w+")
    path = Path(name)
    try:
        yield path, handle
    finally:
        handle.close()
        path.unlink(missing_ok=True)

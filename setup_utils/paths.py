#!/usr/bin/env python3
"""
Module name and search path resolution.

Turns dotted module names into file paths and looks them up in a list of
search directories.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from .log import Logger

PathLike = Union[str, os.PathLike]


def dot_to_sep(name: str) -> str:
    """Foo.Bar.Baz -> Foo/Bar/Baz (with the platform's separator)."""
    return name.replace(".", os.sep)


def _add_extension(name: str, ext: str) -> str:
    if not ext:
        return name
    if ext.startswith("."):
        return name + ext
    return f"{name}.{ext}"


def _unique(items: Sequence) -> list:
    return list(dict.fromkeys(items))


def module_to_possible_paths(prefix: PathLike, module: str, suffixes: Sequence[str]) -> List[Path]:
    """
    Get the possible file paths for a module under one search prefix.

    Args:
        prefix: Search directory ("" for the current directory)
        module: Dotted module name
        suffixes: File extensions to try, with or without the leading dot

    Returns:
        One candidate path per suffix, in suffix order
    """
    fname = os.path.join(os.fspath(prefix), dot_to_sep(module))
    return [Path(_add_extension(fname, ext)) for ext in suffixes]


def module_to_file_path(
    search_dirs: Sequence[PathLike],
    module: str,
    suffixes: Sequence[str],
) -> List[Path]:
    """
    Get the existing file paths for a module.

    Returns an empty list if no such files exist.
    """
    return [
        path
        for prefix in search_dirs
        for path in module_to_possible_paths(prefix, module, suffixes)
        if path.is_file()
    ]


def module_to_file_path2(
    search_dirs: Sequence[PathLike],
    module: str,
    suffixes: Sequence[str],
) -> List[Tuple[Path, Path]]:
    """
    Like module_to_file_path, but return the search location and the rest
    of the path as separate results.
    """
    fname = dot_to_sep(module)
    found = []
    for loc in search_dirs:
        for ext in suffixes:
            relname = Path(_add_extension(fname, ext))
            if (Path(loc) / relname).is_file():
                found.append((Path(loc), relname))
    return found


def find_file(logger: Logger, search_dirs: Sequence[PathLike], rel_path: PathLike) -> Path:
    """
    Find *rel_path* in exactly one of the search directories.

    Dies if it is found nowhere, or in more than one place.
    """
    candidates = [Path(d) / rel_path for d in _unique([os.fspath(d) for d in search_dirs])]
    paths = _unique([p for p in candidates if p.is_file()])
    if len(paths) == 1:
        return paths[0]
    if not paths:
        logger.die(f"{os.fspath(rel_path)} doesn't exist")
    places = "\n".join(f"    {p}" for p in paths)
    logger.die(f"{os.fspath(rel_path)} is found in multiple places:\n{places}")

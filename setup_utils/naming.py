"""Library file naming conventions."""

from __future__ import annotations

from pathlib import Path

from .config import LIB_PREFIX, PROFILING_SUFFIX, STATIC_LIB_EXT
from .paths import PathLike


def mk_lib_name(prefix: PathLike, lib: str) -> Path:
    """prefix/lib<name>.a"""
    return Path(prefix) / f"{LIB_PREFIX}{lib}{STATIC_LIB_EXT}"


def mk_prof_lib_name(prefix: PathLike, lib: str) -> Path:
    return mk_lib_name(prefix, lib + PROFILING_SUFFIX)


def mk_shared_lib_name(
    prefix: PathLike,
    lib: str,
    compiler: str,
    compiler_version: str,
    extension: str,
) -> Path:
    """
    Name of a shared library, mangled with the compiler that built it.

    e.g. ``libbase-2.1-gcc13.2.so`` for lib "base-2.1" built by gcc 13.2
    """
    ext = extension if extension.startswith(".") or not extension else f".{extension}"
    return Path(prefix) / f"{LIB_PREFIX}{lib}-{compiler}{compiler_version}{ext}"

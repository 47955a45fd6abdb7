from __future__ import annotations

from pathlib import Path

from setup_utils.naming import mk_lib_name, mk_prof_lib_name, mk_shared_lib_name


def test_static_library_name() -> None:
    assert mk_lib_name("dist/build", "containers") == Path("dist/build/libcontainers.a")


def test_profiling_library_name() -> None:
    assert mk_prof_lib_name("dist/build", "containers") == Path("dist/build/libcontainers_p.a")


def test_shared_library_name() -> None:
    assert mk_shared_lib_name("out", "base-2.1", "gcc", "13.2", "so") == Path("out/libbase-2.1-gcc13.2.so")
    assert mk_shared_lib_name("out", "base-2.1", "gcc", "13.2", ".dylib") == Path("out/libbase-2.1-gcc13.2.dylib")

#!/usr/bin/env python3
"""
Argument batching, like the unix xargs program.

Useful when a command line could overflow an OS limit on its length: the
command is invoked several times, each time with the fixed arguments
followed by as many of the remaining arguments as fit.

    xargs(32 * 1024, lambda argv: run_command(logger, prog, argv), fixed_args, big_args)
"""

from __future__ import annotations

import os
from typing import Callable, Iterator, List, Sequence

from .errors import ArgumentBudgetError


def arg_size(arg: str) -> int:
    """Size of an argument in bytes, as the OS counts it."""
    return len(os.fsencode(arg))


def fixed_args_size(fixed_args: Sequence[str]) -> int:
    """Room taken by the fixed arguments, one separator each included."""
    return sum(arg_size(arg) for arg in fixed_args) + len(fixed_args)


def _chunks(chunk_budget: int, big_args: Sequence[str]) -> Iterator[List[str]]:
    chunk: List[str] = []
    remaining = chunk_budget
    for arg in big_args:
        needed = arg_size(arg) + 1
        if needed > remaining and chunk:
            yield chunk
            chunk, remaining = [], chunk_budget
        # An argument larger than a whole chunk still goes out, alone.
        chunk.append(arg)
        remaining -= needed
    if chunk:
        yield chunk


def batch(max_size: int, fixed_args: Sequence[str], big_args: Sequence[str]) -> Iterator[List[str]]:
    """
    Split *big_args* into batches that fit under *max_size* with *fixed_args*.

    Returns a lazy iterator over the variable part of each batch, in order.
    Concatenated, the batches reproduce *big_args*. No batch is empty, and an
    argument that cannot fit even in a fresh batch is emitted as a batch of
    its own rather than dropped.

    Raises ArgumentBudgetError straight away if *fixed_args* alone leave no
    room under *max_size*.
    """
    fixed_size = fixed_args_size(fixed_args)
    chunk_budget = max_size - fixed_size
    if chunk_budget <= 0:
        raise ArgumentBudgetError(max_size, fixed_size)
    return _chunks(chunk_budget, list(big_args))


def xargs(
    max_size: int,
    run_batch: Callable[[List[str]], object],
    fixed_args: Sequence[str],
    big_args: Sequence[str],
) -> None:
    """
    Call *run_batch* with ``fixed_args + batch`` for every batch, in order.

    Results of *run_batch* are ignored; whatever it raises stops the run.
    """
    fixed = list(fixed_args)
    for chunk in batch(max_size, fixed, big_args):
        run_batch(fixed + chunk)

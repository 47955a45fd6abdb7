"""Small text transforms used when formatting help and command output."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=Sequence)


def breaks(pred: Callable[[T], bool], xs: S) -> List[S]:
    """
    Split *xs* into the runs of elements that do not satisfy *pred*.

    Leading separators are skipped before every run, so consecutive
    separators never produce empty groups. A trailing separator run does
    produce one final empty group. Groups are slices of *xs*, so a string
    splits into strings.
    """
    groups: List[S] = []
    i, n = 0, len(xs)
    while i < n:
        while i < n and pred(xs[i]):
            i += 1
        start = i
        while i < n and not pred(xs[i]):
            i += 1
        groups.append(xs[start:i])
    return groups


def wrap_text(width: int, words: Iterable[str]) -> List[str]:
    """Wrap a list of words to lines of at most *width* columns."""
    lines: List[str] = []
    line: List[str] = []
    col = 0
    for word in words:
        if line and col + len(word) + 1 > width:
            lines.append(" ".join(line))
            line, col = [], 0
        if not line and len(word) + 1 > width:
            # Too long for any line: it gets one to itself.
            line, col = [word], len(word)
            continue
        line.append(word)
        col += len(word) + 1
    if line:
        lines.append(" ".join(line))
    return lines

#!/usr/bin/env python3
"""
Verbosity levels for status output.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import ConfigError


class Verbosity(IntEnum):
    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEAFENING = 3

    @classmethod
    def parse(cls, text: str) -> "Verbosity":
        """
        Parse a verbosity given as a number or a level name.

        Numbers above the loudest level clamp to DEAFENING.
        """
        value = text.strip()
        if value.isdigit():
            return cls(min(int(value), cls.DEAFENING))
        try:
            return cls[value.upper()]
        except KeyError:
            raise ConfigError(
                f"can't parse verbosity {text!r}: expected 0-3 or one of "
                f"{', '.join(level.name.lower() for level in cls)}"
            ) from None

    def __str__(self) -> str:
        return self.name.lower()

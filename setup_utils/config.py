#!/usr/bin/env python3
"""
Configuration module for the setup utilities
Manages defaults, naming conventions, and environment overrides
"""

import os
import platform
from typing import Mapping, Optional

from .errors import ConfigError
from .verbosity import Verbosity


########################################################################
# System Information
########################################################################

OS_SYSTEM = platform.system()

# The path name that represents the current directory.
CURRENT_DIR = "."


########################################################################
# Process Invocation
########################################################################

# Conservative command line size; well under ARG_MAX on every supported OS.
DEFAULT_XARGS_MAX_SIZE = 32 * 1024

SPAWNER_CHOICES = ("auto", "sh", "pipe")


########################################################################
# Library Naming
########################################################################

LIB_PREFIX = "lib"
STATIC_LIB_EXT = ".a"
PROFILING_SUFFIX = "_p"


########################################################################
# Environment Overrides
########################################################################

ENV_VERBOSITY = "SETUP_UTILS_VERBOSITY"
ENV_XARGS_MAX_SIZE = "SETUP_UTILS_XARGS_MAX_SIZE"
ENV_SPAWNER = "SETUP_UTILS_SPAWNER"


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def get_settings(environ: Optional[Mapping[str, str]] = None):
    """Get settings from the environment or defaults"""
    env = os.environ if environ is None else environ

    verbosity = Verbosity.NORMAL
    if env.get(ENV_VERBOSITY):
        verbosity = Verbosity.parse(env[ENV_VERBOSITY])

    max_size = DEFAULT_XARGS_MAX_SIZE
    if env.get(ENV_XARGS_MAX_SIZE):
        max_size = _positive_int(ENV_XARGS_MAX_SIZE, env[ENV_XARGS_MAX_SIZE])

    spawner = env.get(ENV_SPAWNER, "auto").strip().lower() or "auto"
    if spawner not in SPAWNER_CHOICES:
        raise ConfigError(
            f"{ENV_SPAWNER} must be one of {', '.join(SPAWNER_CHOICES)}, got {spawner!r}"
        )

    return {
        'VERBOSITY': verbosity,
        'XARGS_MAX_SIZE': max_size,
        'SPAWNER': spawner,
    }

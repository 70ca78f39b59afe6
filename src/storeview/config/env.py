"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Collection


def env_or_default(name: str, default: str) -> str:
    """Return the environment variable, falling back to ``default`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_choice(name: str, *, choices: Collection[str], default: str) -> str:
    """Return a lower-cased environment value restricted to ``choices``."""

    value = env_or_default(name, default).lower()
    if value not in choices:
        allowed = ", ".join(sorted(choices))
        raise ConfigurationError(f"Invalid value for {name}: {value!r} (expected one of {allowed})")
    return value

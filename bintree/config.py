"""Runtime configuration read from the environment.

Variables:
    BINTREE_LOG_LEVEL   -- minimum level of library log events (default WARNING)
    BINTREE_CHECK_LINKS -- verify parent/child links before and after every structural edit

Output formatting is left to the host application's structlog setup;
see bintree.logging for the level filter applied to library loggers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _normalise_level(value: str | None) -> str:
    if value is None:
        return "WARNING"
    level = value.strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {value}")
    return level


@dataclass(frozen=True)
class RuntimeConfig:
    """Settings shared by every tree and cursor in the process.

    Attributes:
        log_level: Name of the minimum level emitted by library loggers.
        check_links: Run BinaryTree.check_links() after each structural edit.
    """

    log_level: str
    check_links: bool

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig(
        log_level=_normalise_level(os.getenv("BINTREE_LOG_LEVEL")),
        check_links=_bool_from_env(os.getenv("BINTREE_CHECK_LINKS"), default=False),
    )
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()

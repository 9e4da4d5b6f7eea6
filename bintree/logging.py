"""Package loggers that honour `RuntimeConfig`."""

from __future__ import annotations

from typing import Any

import structlog

from .config import RuntimeConfig, runtime_config


def get_logger(name: str, config: RuntimeConfig | None = None) -> Any:
    """Return a structlog logger filtered at the configured level.

    Only the wrapper class is set here; processors and the logger
    factory are whatever the host configured through structlog.
    """
    runtime = runtime_config() if config is None else config
    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(runtime.log_level_number),
        logger_factory_args=(name,),
    )

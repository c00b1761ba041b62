"""Shared utility helpers: runtime configuration and logging."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    ValueMaskFilter,
    get_logger,
    configure_logging,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "ValueMaskFilter",
    "get_logger",
    "configure_logging",
]

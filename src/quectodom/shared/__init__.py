"""Shared utilities for quectodom.

This module provides configuration objects and correlation-aware logging used
across the tree, formatting and network layers.
"""

from .config import (
    DEFAULT_CACHE_TTL_MS,
    CacheConfig,
    ConfigError,
    ConfigValidationError,
    FetchConfig,
    FormatConfig,
    QuectodomConfig,
    TableConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "DEFAULT_CACHE_TTL_MS",
    "CacheConfig",
    "ConfigError",
    "ConfigValidationError",
    "FetchConfig",
    "FormatConfig",
    "QuectodomConfig",
    "TableConfig",
    "CorrelationLogger",
    "get_logger",
]

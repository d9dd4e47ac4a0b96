"""Configuration classes for quectodom.

This module provides configuration objects for the formatting helpers, the
fetch layer, the time-expiring cache and the table renderer.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_CACHE_TTL_MS = 86_400_000

_COMPONENTS = ("formatting", "fetch", "cache", "table")


@dataclass
class FormatConfig:
    """Sign, width and separator settings for numeric formatting."""

    minus: str = "-"
    zero: str = ""
    plus: str = ""
    frac_sep: str = "."
    places: int = 3
    digits: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate formatting configuration."""
        if self.places < 0:
            raise ValueError("places must be >= 0")
        if self.digits is not None and self.digits < 0:
            raise ValueError("digits must be >= 0 or None")


@dataclass
class FetchConfig:
    """Configuration for HTTP fetches."""

    timeout_seconds: float = 30.0
    accept: str = "application/json"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate fetch configuration."""
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if not self.encoding:
            raise ValueError("encoding cannot be empty")


@dataclass
class CacheConfig:
    """Configuration for the time-expiring fetch cache."""

    ttl_ms: int = DEFAULT_CACHE_TTL_MS

    def __post_init__(self) -> None:
        """Validate cache configuration."""
        if self.ttl_ms < 0:
            raise ValueError("ttl_ms must be >= 0")


@dataclass
class TableConfig:
    """Class tokens applied to the table structure at construction."""

    table_classes: Tuple[str, ...] = ()
    header_classes: Tuple[str, ...] = ()
    body_classes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalise class token sequences."""
        # JSON round trips hand back lists
        self.table_classes = tuple(self.table_classes)
        self.header_classes = tuple(self.header_classes)
        self.body_classes = tuple(self.body_classes)
        for token in self.table_classes + self.header_classes + self.body_classes:
            if not isinstance(token, str) or any(ch.isspace() for ch in token):
                raise ValueError(f"Invalid class token: {token!r}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class QuectodomConfig:
    """Aggregate configuration for all quectodom components.

    Immutable; use :meth:`override` to derive a modified copy.
    """

    formatting: FormatConfig = field(default_factory=FormatConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    table: TableConfig = field(default_factory=TableConfig)

    logging_level: str = "WARNING"
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            for name in _COMPONENTS:
                getattr(self, name).__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level not in valid_levels:
            raise ConfigValidationError(
                f"logging_level must be one of {valid_levels}",
                field_name="logging_level",
                suggestions=valid_levels,
            )

    def override(self, **kwargs: Any) -> "QuectodomConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New QuectodomConfig instance with overrides applied

        Example:
            >>> config = QuectodomConfig()
            >>> new_config = config.override(
            ...     cache__ttl_ms=1000,
            ...     formatting__frac_sep=","
            ... )
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=list(_COMPONENTS),
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        new_fields: Dict[str, Any] = {}
        try:
            for name, overrides in nested_overrides.items():
                new_fields[name] = replace(getattr(self, name), **overrides)
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e
        new_fields.update(top_level)

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            """Recursively convert dataclass to dict."""
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, (list, tuple)):
                return [_dataclass_to_dict(item) for item in obj]
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuectodomConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back to
        defaults.
        """
        component_types = {
            "formatting": FormatConfig,
            "fetch": FetchConfig,
            "cache": CacheConfig,
            "table": TableConfig,
        }
        field_values: Dict[str, Any] = {}
        try:
            for key, value in data.items():
                if key in component_types:
                    if not isinstance(value, dict):
                        raise ConfigValidationError(
                            f"{key} must be an object", field_name=key
                        )
                    field_values[key] = component_types[key](**value)
                elif key in ("logging_level", "correlation_id"):
                    field_values[key] = value
                else:
                    raise ConfigValidationError(
                        f"Unknown configuration key: {key}", field_name=key
                    )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        return cls(**field_values)

    @classmethod
    def from_json(cls, json_str: str) -> "QuectodomConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

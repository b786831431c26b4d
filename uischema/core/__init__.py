"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import (
    JSON_DEPTH_CEILING,
    MAX_JSON_DEPTH,
    JSONParseError,
    decode_json,
    line_and_column,
    safe_json_dumps,
    validate_json_depth,
)


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "JSONParseError",
    "decode_json",
    "line_and_column",
    "safe_json_dumps",
    "validate_json_depth",
    "MAX_JSON_DEPTH",
    "JSON_DEPTH_CEILING",
    # DI
    "create_container",
]

"""Cross-platform adaptation of UI schemas."""

from .mappings import COMPONENT_MAPPINGS, DEFAULT_MAPPINGS, PlatformMapping, PlatformType, to_platform
from .registry import ComponentDefinition, ComponentRegistry
from .adapter import PlatformAdapter, create_platform_adapter

__all__ = [
    "PlatformType",
    "PlatformMapping",
    "DEFAULT_MAPPINGS",
    "COMPONENT_MAPPINGS",
    "to_platform",
    "ComponentDefinition",
    "ComponentRegistry",
    "PlatformAdapter",
    "create_platform_adapter",
]

"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..schema.serializer import SchemaCodec
from ..platform.adapter import PlatformAdapter
from ..platform.registry import ComponentRegistry


class EngineModule(Module):
    """Engine dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings, falling back to the environment."""
        if self.settings is not None:
            return self.settings
        return get_settings()

    @singleton
    @provider
    def provide_component_registry(self) -> ComponentRegistry:
        """Provide component registry singleton."""
        return ComponentRegistry()

    @provider
    def provide_schema_codec(self, registry: ComponentRegistry, settings: Settings) -> SchemaCodec:
        """Provide schema codec configured from settings.

        Component types are checked against the registry once it holds
        definitions.
        """
        return SchemaCodec(
            pretty=settings.pretty_json,
            indent=settings.json_indent,
            check_unique_ids=settings.check_unique_ids,
            max_depth=settings.max_depth,
            registry=registry,
        )

    @provider
    def provide_platform_adapter(self, registry: ComponentRegistry, settings: Settings) -> PlatformAdapter:
        """Provide a fresh adapter; registered mappings stay per instance."""
        return PlatformAdapter(registry, default_platform=settings.default_platform)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([EngineModule(settings)])

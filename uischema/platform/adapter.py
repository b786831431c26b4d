"""
Platform Adapter
Rewrites prop, style and event names of a schema for a target platform.

Only keys change. Values, ids, types, text, child order, data and meta are
carried over untouched.
"""

from typing import Any

from ..core.logging_config import get_logger
from ..schema.models import UIComponent, UISchema
from .mappings import COMPONENT_MAPPINGS, DEFAULT_MAPPINGS, PlatformMapping, PlatformType, to_platform
from .registry import ComponentRegistry

logger = get_logger(__name__)


def _remap_keys(
    entries: dict[str, Any],
    table: dict[str, str],
    component_id: str,
    section: str,
) -> dict[str, Any]:
    """Rename keys of ``entries`` through ``table``, keeping every entry.

    A rename is skipped when its target is already a key of ``entries`` or
    was produced by an earlier rename, so two entries never merge.
    """
    result: dict[str, Any] = {}
    for key, value in entries.items():
        target = table.get(key, key)
        if target != key and (target in entries or target in result):
            logger.debug(
                "rename_skipped",
                component=component_id,
                section=section,
                key=key,
                target=target,
            )
            target = key
        result[target] = value
    return result


class PlatformAdapter:
    """
    Adapts UI schemas to a target platform.

    Mappings resolve in three tiers: platform default, then the built-in
    override for the component type, then overrides registered on this
    instance with ``register_mapping``. The registered tier is per
    instance; share an adapter across threads only with external locking.
    """

    def __init__(
        self,
        registry: ComponentRegistry | None = None,
        default_platform: PlatformType | str = PlatformType.PC_WEB,
    ) -> None:
        self.registry = registry
        self.default_platform = to_platform(default_platform)
        self._custom: dict[str, dict[PlatformType, PlatformMapping]] = {}

    def _resolve_mapping(self, component_type: str, platform: PlatformType) -> PlatformMapping:
        return DEFAULT_MAPPINGS[platform].merged(
            COMPONENT_MAPPINGS.get(component_type, {}).get(platform),
            self._custom.get(component_type, {}).get(platform),
        )

    def _adapt_component(
        self,
        component: UIComponent,
        platform: PlatformType,
        mappings: dict[str, PlatformMapping],
    ) -> UIComponent:
        mapping = mappings.get(component.type)
        if mapping is None:
            mapping = mappings[component.type] = self._resolve_mapping(component.type, platform)

        update: dict[str, Any] = {}
        if component.props is not None:
            update["props"] = _remap_keys(component.props, mapping.props, component.id, "props")
        if component.style is not None:
            update["style"] = _remap_keys(component.style, mapping.styles, component.id, "style")
        if component.events is not None:
            update["events"] = [
                binding.model_copy(update={"event": mapping.events.get(binding.event, binding.event)})
                for binding in component.events
            ]
        if component.children is not None:
            update["children"] = [
                self._adapt_component(child, platform, mappings) for child in component.children
            ]

        return component.model_copy(update=update)

    def adapt(self, schema: UISchema, target_platform: PlatformType | str | None = None) -> UISchema:
        """
        Adapt a schema to the target platform.

        Args:
            schema: Source schema (authored for pc-web)
            target_platform: Platform to adapt to; defaults to the adapter's
                ``default_platform``

        Returns:
            New schema with renamed keys; the input is not modified

        Raises:
            ValueError: If the platform is not supported
        """
        platform = to_platform(target_platform or self.default_platform)
        root = self._adapt_component(schema.root, platform, {})
        logger.debug("schema_adapted", platform=platform.value, components=schema.component_count())
        return schema.model_copy(update={"root": root})

    def get_mapping(
        self,
        component_type: str,
        source_platform: PlatformType | str,
        target_platform: PlatformType | str,
    ) -> PlatformMapping:
        """
        Get the merged mapping for a component type.

        Mappings are always expressed from the pc-web authoring names, so
        ``source_platform`` is only checked for validity.

        Args:
            component_type: Component type name
            source_platform: Platform the schema was authored for
            target_platform: Platform to adapt to

        Returns:
            Platform mapping with all three tiers applied
        """
        to_platform(source_platform)
        return self._resolve_mapping(component_type, to_platform(target_platform))

    def register_mapping(
        self,
        component_type: str,
        platform: PlatformType | str,
        mapping: PlatformMapping,
    ) -> None:
        """Register an override for a component type on one platform."""
        target = to_platform(platform)
        self._custom.setdefault(component_type, {})[target] = mapping
        logger.info(
            "mapping_registered",
            component=component_type,
            platform=target.value,
            props=len(mapping.props),
            styles=len(mapping.styles),
            events=len(mapping.events),
        )

    def is_supported(self, component_type: str, platform: PlatformType | str) -> bool:
        """
        Check if a component type can be used on a platform.

        Without a registry everything is supported; a type missing from the
        registry is not.
        """
        target = to_platform(platform)
        if self.registry is None:
            return True

        definition = self.registry.get(component_type)
        if definition is None:
            return False
        return definition.supports(target)

    def get_unsupported_components(self, platform: PlatformType | str) -> list[str]:
        """Names of registered component types that exclude the platform."""
        target = to_platform(platform)
        if self.registry is None:
            return []
        return [d.name for d in self.registry.list_all() if not d.supports(target)]


def create_platform_adapter(
    registry: ComponentRegistry | None = None,
    default_platform: PlatformType | str = PlatformType.PC_WEB,
) -> PlatformAdapter:
    """Create a platform adapter."""
    return PlatformAdapter(registry, default_platform)

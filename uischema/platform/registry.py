"""
Component Registry
Explicitly constructed catalogue of component types and the platforms they run on.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from ..core.logging_config import get_logger
from .mappings import PlatformType

logger = get_logger(__name__)


class ComponentDefinition(BaseModel):
    """Registry entry for one component type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Component type identifier")
    version: str | None = Field(default=None, description="Component version (semver)")
    platforms: list[PlatformType] | None = Field(
        default=None, description="Platform allow-list; None or empty means every platform"
    )
    description: str = Field(default="")
    category: str | None = Field(default=None)
    deprecated: bool = Field(default=False)
    deprecation_message: str | None = Field(default=None, description="Replacement hint shown when deprecated")

    def supports(self, platform: PlatformType) -> bool:
        """True unless the definition restricts platforms and omits this one."""
        return not self.platforms or platform in self.platforms


class ComponentRegistry:
    """
    Registry of component definitions.
    Owned by whoever constructs it and handed to the code that needs it.
    """

    def __init__(self, definitions: Optional[List[ComponentDefinition]] = None):
        self.definitions: Dict[str, ComponentDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: ComponentDefinition) -> None:
        """
        Register a component definition.

        Args:
            definition: Component definition
        """
        if definition.name in self.definitions:
            logger.warning("component_already_registered", component=definition.name)
            return

        self.definitions[definition.name] = definition
        logger.info(
            "component_registered",
            component=definition.name,
            platforms=[p.value for p in definition.platforms or []],
        )

    def unregister(self, name: str) -> None:
        """Remove a component definition"""
        if self.definitions.pop(name, None) is not None:
            logger.info("component_unregistered", component=name)

    def get(self, name: str) -> Optional[ComponentDefinition]:
        """Get a component definition by type name"""
        return self.definitions.get(name)

    def list_all(self, category: Optional[str] = None) -> List[ComponentDefinition]:
        """
        List registered definitions.

        Args:
            category: Optional category filter

        Returns:
            Definitions in registration order
        """
        definitions = list(self.definitions.values())
        if category:
            definitions = [d for d in definitions if d.category == category]
        return definitions

    def __contains__(self, name: str) -> bool:
        return name in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)

    def suggest(self, name: str, limit: int = 3) -> List[str]:
        """
        Registered names that look like a misspelling of ``name``.

        Matching is case-insensitive edit distance; a candidate qualifies
        when it is at most ``max(len(name) // 2, 2)`` edits away.

        Args:
            name: Unknown component type
            limit: Maximum number of suggestions

        Returns:
            Closest names first
        """
        matches = process.extract(
            name,
            list(self.definitions),
            scorer=Levenshtein.distance,
            processor=str.lower,
            limit=limit,
            score_cutoff=max(len(name) // 2, 2),
        )
        return [match[0] for match in matches]

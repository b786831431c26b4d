"""UI Schema data models.

Wire form is camelCase JSON; attributes are snake_case with aliases.
Models are frozen and keep unknown keys so a parsed schema serializes back
to the same document.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DataContext = dict[str, Any]
StyleProps = dict[str, Any]


class SchemaModel(BaseModel):
    """Base model with the engine's wire configuration."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="allow",
    )


# ============================================================================
# Event actions (closed sum type, discriminated by ``type``)
# ============================================================================

class NavigateAction(SchemaModel):
    """Navigate to a URL."""

    type: Literal["navigate"]
    url: str


class SubmitAction(SchemaModel):
    """Submit the enclosing form, optionally to an explicit endpoint."""

    type: Literal["submit"]
    endpoint: str | None = None


class UpdateAction(SchemaModel):
    """Write ``value`` at ``path`` in the data context."""

    type: Literal["update"]
    path: str
    value: Any = None


class ToggleAction(SchemaModel):
    """Flip the boolean at ``path`` in the data context."""

    type: Literal["toggle"]
    path: str


class CustomAction(SchemaModel):
    """Call a host-registered handler by name."""

    type: Literal["custom"]
    handler: str
    params: dict[str, Any] | None = None


EventAction = Annotated[
    Union[NavigateAction, SubmitAction, UpdateAction, ToggleAction, CustomAction],
    Field(discriminator="type"),
]

ACTION_TYPES: frozenset[str] = frozenset({"navigate", "submit", "update", "toggle", "custom"})


class EventBinding(SchemaModel):
    """Binds a component event name to an action."""

    event: str
    action: EventAction


# ============================================================================
# Components
# ============================================================================

class LoopConfig(SchemaModel):
    """Repeat a component for every item of the array at ``source``."""

    source: str
    item_name: str | None = Field(default=None, alias="itemName")
    index_name: str | None = Field(default=None, alias="indexName")


class UIComponent(SchemaModel):
    """A node of the UI tree."""

    id: str
    type: str
    props: dict[str, Any] | None = None
    style: StyleProps | None = None
    children: list["UIComponent"] | None = None
    text: str | None = None
    binding: str | None = None
    events: list[EventBinding] | None = None
    loop: LoopConfig | None = None
    condition: str | None = None

    def walk(self):
        """Yield this component and every descendant, depth first, in order."""
        yield self
        for child in self.children or ():
            yield from child.walk()


class SchemaMeta(SchemaModel):
    """Descriptive metadata carried alongside a schema."""

    title: str | None = None
    description: str | None = None
    author: str | None = None
    created_at: str | int | float | None = Field(default=None, alias="createdAt")
    updated_at: str | int | float | None = Field(default=None, alias="updatedAt")


class UISchema(SchemaModel):
    """Complete UI description: a versioned component tree plus data."""

    version: str
    root: UIComponent
    data: DataContext | None = None
    meta: SchemaMeta | None = None

    def to_wire(self) -> dict[str, Any]:
        """Plain JSON-compatible dict with wire (camelCase) keys.

        Only fields present on input (or passed explicitly) are emitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def component_count(self) -> int:
        """Number of components in the tree."""
        return sum(1 for _ in self.root.walk())


UIComponent.model_rebuild()

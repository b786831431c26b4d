"""Discovery of data bindings in a component tree."""

from dataclasses import dataclass
from typing import Any

from ..schema.models import UIComponent, UISchema
from .parser import PathSegment, parse_binding_expression, parse_path, scan_bindings


@dataclass(frozen=True)
class DataField:
    """One binding occurrence found in a schema.

    ``property`` locates the occurrence relative to the root component,
    e.g. ``"text"``, ``"props.items[1].label"`` or
    ``"children[0].children[2].loop.source"``. The prefix accumulates
    from the root through every ancestor, so a field two levels down reads
    ``children[i].children[j].<prop>`` rather than just ``children[j].<prop>``;
    the path alone is enough to walk back to the component.
    """

    binding: str
    path: str
    segments: tuple[PathSegment, ...]
    component_id: str
    property: str


def _from_text(text: str, component_id: str, prop: str, fields: list[DataField]) -> None:
    for match in scan_bindings(text):
        parsed = parse_path(match.expression)
        if parsed.success:
            fields.append(DataField(match.raw, parsed.expression, parsed.segments, component_id, prop))


def _from_value(value: Any, component_id: str, prop: str, fields: list[DataField]) -> None:
    if isinstance(value, str):
        _from_text(value, component_id, prop, fields)
    elif isinstance(value, dict):
        for key, item in value.items():
            _from_value(item, component_id, f"{prop}.{key}", fields)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _from_value(item, component_id, f"{prop}[{index}]", fields)


def _from_loop_source(source: str, component_id: str, prop: str, fields: list[DataField]) -> None:
    # Usually a bare path; a {{...}} wrapped source is accepted too.
    parsed = parse_binding_expression(source)
    binding = source
    if not parsed.success:
        parsed = parse_path(source)
        binding = f"{{{{{source}}}}}"
    if parsed.success:
        fields.append(DataField(binding, parsed.expression, parsed.segments, component_id, prop))


def _from_component(component: UIComponent, prefix: str, fields: list[DataField]) -> None:
    def where(name: str) -> str:
        return f"{prefix}.{name}" if prefix else name

    if component.binding:
        parsed = parse_binding_expression(component.binding)
        if parsed.success:
            fields.append(
                DataField(component.binding, parsed.expression, parsed.segments, component.id, where("binding"))
            )

    if component.text:
        _from_text(component.text, component.id, where("text"), fields)

    if component.props:
        _from_value(component.props, component.id, where("props"), fields)

    if component.loop and component.loop.source:
        _from_loop_source(component.loop.source, component.id, where("loop.source"), fields)

    if component.condition:
        _from_text(component.condition, component.id, where("condition"), fields)

    for index, child in enumerate(component.children or ()):
        _from_component(child, where(f"children[{index}]"), fields)


def extract_data_fields(schema: UISchema) -> list[DataField]:
    """
    Extract every data binding from a schema.

    Per component the order is: ``binding``, ``text``, ``props``,
    ``loop.source``, ``condition``; children follow their parent.

    Args:
        schema: Schema to scan

    Returns:
        DataField for each parseable binding occurrence
    """
    fields: list[DataField] = []
    _from_component(schema.root, "", fields)
    return fields


def get_unique_paths(schema: UISchema) -> list[str]:
    """Distinct binding paths in the schema, in first-seen order."""
    return list(dict.fromkeys(f.path for f in extract_data_fields(schema)))

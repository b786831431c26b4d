"""UI Schema serialization/deserialization.

Converts ``UISchema`` values to and from JSON text. For every valid schema
``s``, ``deserialize(serialize(s)).schema`` is structurally equal to ``s``.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from returns.pipeline import is_successful

from ..core.json import MAX_JSON_DEPTH, JSONParseError, decode_json, safe_json_dumps
from ..core.logging_config import get_logger
from .models import UISchema
from .validate import ValidationError, check_schema

if TYPE_CHECKING:
    from ..platform.registry import ComponentRegistry

logger = get_logger(__name__)

EMPTY_INPUT_ERROR = "Empty input: JSON string is empty or contains only whitespace"


@dataclass(frozen=True)
class DeserializeResult:
    """Outcome of ``deserialize``.

    ``position`` (0-based), ``line`` and ``column`` (1-based) locate JSON
    syntax errors; ``errors`` carries structured validation failures.
    """

    success: bool
    schema: UISchema | None = None
    error: str | None = None
    position: int | None = None
    line: int | None = None
    column: int | None = None
    errors: list[ValidationError] = field(default_factory=list)


def serialize(schema: UISchema, *, pretty: bool = True, indent: int = 2) -> str:
    """
    Serialize a UISchema to JSON text.

    Args:
        schema: Schema to encode
        pretty: Indent output; compact otherwise
        indent: Spaces per level when pretty

    Returns:
        JSON text of the wire form
    """
    return safe_json_dumps(schema.to_wire(), indent=indent if pretty else 0)


def deserialize(
    text: str,
    *,
    check_unique_ids: bool = False,
    max_depth: int = MAX_JSON_DEPTH,
    registry: "ComponentRegistry | None" = None,
) -> DeserializeResult:
    """
    Deserialize JSON text to a UISchema.

    Args:
        text: JSON document
        check_unique_ids: Also reject schemas whose component ids repeat
        max_depth: Deepest JSON nesting accepted; deeper documents fail
            with a MAX_DEPTH_EXCEEDED error
        registry: Optional catalogue that component types are checked against

    Returns:
        DeserializeResult with the schema or error information
    """
    if not text or not text.strip():
        return DeserializeResult(success=False, error=EMPTY_INPUT_ERROR)

    try:
        parsed = decode_json(text)
    except JSONParseError as e:
        logger.debug("deserialize_failed", reason="json_syntax", position=e.position)
        return DeserializeResult(
            success=False,
            error=f"JSON parse error: {e.message}",
            position=e.position,
            line=e.line,
            column=e.column,
        )

    result = check_schema(parsed, check_unique_ids=check_unique_ids, max_depth=max_depth, registry=registry)
    if not is_successful(result):
        errors = result.failure()
        logger.debug("deserialize_failed", reason="structure", error_count=len(errors))
        return DeserializeResult(
            success=False,
            error="; ".join(e.message for e in errors),
            errors=errors,
        )

    return DeserializeResult(success=True, schema=result.unwrap())


def _json_equal(a: Any, b: Any) -> bool:
    """Structural JSON equality: key order ignored, list order kept, bool != number."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict):
        return (
            isinstance(b, dict)
            and a.keys() == b.keys()
            and all(_json_equal(a[key], b[key]) for key in a)
        )
    if isinstance(a, list):
        return (
            isinstance(b, list)
            and len(a) == len(b)
            and all(_json_equal(x, y) for x, y in zip(a, b))
        )
    if isinstance(a, (int, float)):
        return isinstance(b, (int, float)) and a == b
    return type(a) is type(b) and a == b


def schemas_equal(a: UISchema, b: UISchema) -> bool:
    """Check if two UISchemas are structurally equal, independent of key order."""
    return _json_equal(a.to_wire(), b.to_wire())


class SchemaCodec:
    """Serializer/deserializer bound to one output and validation policy."""

    def __init__(
        self,
        pretty: bool = True,
        indent: int = 2,
        check_unique_ids: bool = False,
        max_depth: int = MAX_JSON_DEPTH,
        registry: "ComponentRegistry | None" = None,
    ) -> None:
        if indent <= 0:
            raise ValueError("indent must be positive")
        self.pretty = pretty
        self.indent = indent
        self.check_unique_ids = check_unique_ids
        self.max_depth = max_depth
        self.registry = registry

    def dumps(self, schema: UISchema) -> str:
        return serialize(schema, pretty=self.pretty, indent=self.indent)

    def loads(self, text: str) -> DeserializeResult:
        return deserialize(
            text,
            check_unique_ids=self.check_unique_ids,
            max_depth=self.max_depth,
            registry=self.registry,
        )


__all__ = [
    "DeserializeResult",
    "EMPTY_INPUT_ERROR",
    "SchemaCodec",
    "deserialize",
    "schemas_equal",
    "serialize",
]

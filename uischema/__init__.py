"""UI Schema Engine.

Validation, serialization, data binding and cross-platform adaptation of
JSON UI schemas.
"""

from .schema import (
    DeserializeResult,
    ErrorCode,
    EventBinding,
    SchemaCodec,
    SchemaMeta,
    UIComponent,
    UISchema,
    ValidationError,
    ValidationResult,
    check_schema,
    deserialize,
    schemas_equal,
    serialize,
    validate,
)
from .binding import (
    BindingResult,
    DataField,
    ParseResult,
    extract_data_fields,
    get_unique_paths,
    parse_binding_expression,
    parse_path,
    resolve_binding,
    resolve_bindings,
    resolve_path,
)
from .platform import (
    ComponentDefinition,
    ComponentRegistry,
    PlatformAdapter,
    PlatformMapping,
    PlatformType,
    create_platform_adapter,
)

__version__ = "1.0.0"

__all__ = [
    # Schema
    "UISchema",
    "UIComponent",
    "SchemaMeta",
    "EventBinding",
    "ErrorCode",
    "ValidationError",
    "ValidationResult",
    "validate",
    "check_schema",
    "DeserializeResult",
    "SchemaCodec",
    "serialize",
    "deserialize",
    "schemas_equal",
    # Binding
    "ParseResult",
    "BindingResult",
    "DataField",
    "parse_path",
    "parse_binding_expression",
    "resolve_path",
    "resolve_binding",
    "resolve_bindings",
    "extract_data_fields",
    "get_unique_paths",
    # Platform
    "PlatformType",
    "PlatformMapping",
    "ComponentDefinition",
    "ComponentRegistry",
    "PlatformAdapter",
    "create_platform_adapter",
]

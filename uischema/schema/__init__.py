"""UI Schema model, structural validation and serialization."""

from .models import (
    ACTION_TYPES,
    CustomAction,
    DataContext,
    EventAction,
    EventBinding,
    LoopConfig,
    NavigateAction,
    SchemaMeta,
    StyleProps,
    SubmitAction,
    ToggleAction,
    UIComponent,
    UISchema,
    UpdateAction,
)
from .validate import ErrorCode, ValidationError, ValidationResult, check_schema, validate
from .serializer import (
    EMPTY_INPUT_ERROR,
    DeserializeResult,
    SchemaCodec,
    deserialize,
    schemas_equal,
    serialize,
)

__all__ = [
    # Models
    "UISchema",
    "UIComponent",
    "SchemaMeta",
    "LoopConfig",
    "EventBinding",
    "EventAction",
    "NavigateAction",
    "SubmitAction",
    "UpdateAction",
    "ToggleAction",
    "CustomAction",
    "ACTION_TYPES",
    "DataContext",
    "StyleProps",
    # Validation
    "ErrorCode",
    "ValidationError",
    "ValidationResult",
    "validate",
    "check_schema",
    # Serialization
    "DeserializeResult",
    "EMPTY_INPUT_ERROR",
    "SchemaCodec",
    "serialize",
    "deserialize",
    "schemas_equal",
]

"""Structural validation of untyped JSON values against the UI Schema shape.

``validate`` reports every problem in one pass; ``check_schema`` is the
Result-pattern version that also produces the typed ``UISchema``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from ..core.json import JSON_DEPTH_CEILING, MAX_JSON_DEPTH, JSONParseError, validate_json_depth
from ..core.logging_config import get_logger
from .models import ACTION_TYPES, UISchema

if TYPE_CHECKING:
    from ..platform.registry import ComponentRegistry

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Machine-checkable validation error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_VALUE = "INVALID_VALUE"
    DUPLICATE_ID = "DUPLICATE_ID"
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"
    UNKNOWN_COMPONENT = "UNKNOWN_COMPONENT"
    DEPRECATED_COMPONENT = "DEPRECATED_COMPONENT"


@dataclass(frozen=True)
class ValidationError:
    """A single structural problem, located by a dotted/bracketed path."""

    path: str
    message: str
    code: ErrorCode
    suggestion: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation pass. Warnings never make a result invalid."""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _present(obj: dict[str, Any], key: str) -> bool:
    """Optional fields set to null count as absent."""
    return obj.get(key) is not None


def _missing(path: str, message: str) -> ValidationError:
    return ValidationError(path, message, ErrorCode.MISSING_FIELD)


def _invalid(path: str, message: str) -> ValidationError:
    return ValidationError(path, message, ErrorCode.INVALID_TYPE)


def _check_required_string(
    obj: dict[str, Any],
    key: str,
    path: str,
    where: str,
    errors: list[ValidationError],
    non_empty: bool = False,
) -> bool:
    """Check ``obj[key]`` exists and is a string; return True if it is.

    With ``non_empty`` a blank or whitespace-only string is also rejected.
    """
    suffix = f' at "{where}"' if where else ""
    if key not in obj:
        errors.append(_missing(f"{path}.{key}" if path else key, f"Missing required field: {key}{suffix}"))
        return False
    if not isinstance(obj[key], str):
        errors.append(_invalid(f"{path}.{key}" if path else key, f'Field "{key}" must be a string{suffix}'))
        return False
    if non_empty and not obj[key].strip():
        errors.append(
            ValidationError(
                f"{path}.{key}" if path else key,
                f'Field "{key}" cannot be empty{suffix}',
                ErrorCode.INVALID_VALUE,
            )
        )
        return False
    return True


def _check_optional_string(
    obj: dict[str, Any], key: str, path: str, errors: list[ValidationError]
) -> None:
    if _present(obj, key) and not isinstance(obj[key], str):
        errors.append(_invalid(f"{path}.{key}", f'Field "{key}" must be a string at "{path}"'))


def _check_action(action: Any, path: str, errors: list[ValidationError]) -> None:
    if not _is_object(action):
        errors.append(_invalid(path, f'Field "action" must be an object at "{path}"'))
        return

    if "type" not in action:
        errors.append(_missing(f"{path}.type", f'Missing required field: type in action at "{path}"'))
        return
    kind = action["type"]
    if not isinstance(kind, str):
        errors.append(_invalid(f"{path}.type", f'Field "type" must be a string in action at "{path}"'))
        return
    if kind not in ACTION_TYPES:
        errors.append(
            _invalid(
                f"{path}.type",
                f'Unknown action type "{kind}" at "{path}" (expected one of: {", ".join(sorted(ACTION_TYPES))})',
            )
        )
        return

    if kind == "navigate":
        _check_required_string(action, "url", path, path, errors)
    elif kind in ("update", "toggle"):
        _check_required_string(action, "path", path, path, errors)
    elif kind == "custom":
        _check_required_string(action, "handler", path, path, errors)
        if _present(action, "params") and not _is_object(action["params"]):
            errors.append(_invalid(f"{path}.params", f'Field "params" must be an object at "{path}"'))
    elif kind == "submit":
        _check_optional_string(action, "endpoint", path, errors)


def _check_event(event: Any, path: str, errors: list[ValidationError]) -> None:
    if not _is_object(event):
        errors.append(_invalid(path, f'Event binding at "{path}" must be an object'))
        return

    _check_required_string(event, "event", path, path, errors)

    if "action" not in event:
        errors.append(_missing(f"{path}.action", f'Missing required field: action at "{path}"'))
    else:
        _check_action(event["action"], f"{path}.action", errors)


def _check_loop(loop: Any, path: str, errors: list[ValidationError]) -> None:
    if not _is_object(loop):
        errors.append(_invalid(path, f'Loop config at "{path}" must be an object'))
        return

    _check_required_string(loop, "source", path, path, errors)
    _check_optional_string(loop, "itemName", path, errors)
    _check_optional_string(loop, "indexName", path, errors)


def _check_registered(
    component_type: str,
    path: str,
    registry: "ComponentRegistry",
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    definition = registry.get(component_type)
    if definition is None:
        similar = registry.suggest(component_type)
        if similar:
            suggestion = f"Did you mean: {', '.join(similar)}?"
        else:
            names = [d.name for d in registry.list_all()]
            suggestion = f"Valid types: {', '.join(names[:5])}{'...' if len(names) > 5 else ''}"
        errors.append(
            ValidationError(
                f"{path}.type",
                f'Unknown component type "{component_type}" at "{path}"',
                ErrorCode.UNKNOWN_COMPONENT,
                suggestion,
            )
        )
    elif definition.deprecated:
        since = f" (version {definition.version})" if definition.version else ""
        warnings.append(
            ValidationError(
                f"{path}.type",
                f'Component "{component_type}"{since} is deprecated at "{path}"',
                ErrorCode.DEPRECATED_COMPONENT,
                definition.deprecation_message or "Consider using an alternative component",
            )
        )


def _check_component(
    obj: Any,
    path: str,
    errors: list[ValidationError],
    seen_ids: dict[str, str] | None,
    registry: "ComponentRegistry | None" = None,
    warnings: list[ValidationError] | None = None,
) -> None:
    if not _is_object(obj):
        errors.append(_invalid(path, f'Component at "{path}" must be an object'))
        return

    if _check_required_string(obj, "id", path, path, errors, non_empty=True) and seen_ids is not None:
        component_id = obj["id"]
        if component_id in seen_ids:
            errors.append(
                ValidationError(
                    f"{path}.id",
                    f'Duplicate component id "{component_id}" at "{path}" (first seen at "{seen_ids[component_id]}")',
                    ErrorCode.DUPLICATE_ID,
                )
            )
        else:
            seen_ids[component_id] = path

    if _check_required_string(obj, "type", path, path, errors, non_empty=True) and registry is not None:
        _check_registered(obj["type"], path, registry, errors, warnings if warnings is not None else [])

    for key in ("props", "style"):
        if _present(obj, key) and not _is_object(obj[key]):
            errors.append(_invalid(f"{path}.{key}", f'Field "{key}" must be an object at "{path}"'))

    for key in ("text", "binding", "condition"):
        _check_optional_string(obj, key, path, errors)

    if _present(obj, "events"):
        events = obj["events"]
        if not isinstance(events, list):
            errors.append(_invalid(f"{path}.events", f'Field "events" must be an array at "{path}"'))
        else:
            for index, event in enumerate(events):
                _check_event(event, f"{path}.events[{index}]", errors)

    if _present(obj, "loop"):
        _check_loop(obj["loop"], f"{path}.loop", errors)

    if _present(obj, "children"):
        children = obj["children"]
        if not isinstance(children, list):
            errors.append(_invalid(f"{path}.children", f'Field "children" must be an array at "{path}"'))
        else:
            for index, child in enumerate(children):
                _check_component(child, f"{path}.children[{index}]", errors, seen_ids, registry, warnings)


def _check_meta(meta: Any, errors: list[ValidationError]) -> None:
    if not _is_object(meta):
        errors.append(_invalid("meta", 'Field "meta" must be an object'))
        return

    for key in ("title", "description", "author"):
        if _present(meta, key) and not isinstance(meta[key], str):
            errors.append(_invalid(f"meta.{key}", f'Field "{key}" must be a string in "meta"'))
    for key in ("createdAt", "updatedAt"):
        value = meta.get(key)
        if value is not None and not (isinstance(value, str) or _is_number(value)):
            errors.append(_invalid(f"meta.{key}", f'Field "{key}" must be a string or number in "meta"'))


def validate(
    value: Any,
    *,
    check_unique_ids: bool = False,
    max_depth: int = MAX_JSON_DEPTH,
    registry: "ComponentRegistry | None" = None,
) -> ValidationResult:
    """
    Check that an untyped JSON value has the UI Schema shape.

    Every problem is collected; nothing short-circuits except a non-object
    at the top level, nesting beyond ``max_depth``, or a non-object at a
    component position.

    Args:
        value: Decoded JSON value
        check_unique_ids: Also report component ids that repeat in the tree
        max_depth: Deepest JSON nesting accepted, at most ``JSON_DEPTH_CEILING``
        registry: When given and non-empty, component types must be
            registered; deprecated types are reported as warnings

    Returns:
        ValidationResult listing all errors and warnings

    Raises:
        ValueError: If ``max_depth`` is outside 1..JSON_DEPTH_CEILING
    """
    if not 0 < max_depth <= JSON_DEPTH_CEILING:
        raise ValueError(f"max_depth must be between 1 and {JSON_DEPTH_CEILING}, got {max_depth}")

    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    if not _is_object(value):
        errors.append(_invalid("", "Schema must be an object"))
        return ValidationResult(valid=False, errors=errors)

    try:
        validate_json_depth(value, max_depth)
    except JSONParseError as e:
        logger.debug("schema_too_deep", max_depth=max_depth)
        errors.append(ValidationError("", e.message, ErrorCode.MAX_DEPTH_EXCEEDED))
        return ValidationResult(valid=False, errors=errors)

    _check_required_string(value, "version", "", "", errors, non_empty=True)

    catalog = registry if registry is not None and len(registry) else None
    if "root" not in value:
        errors.append(_missing("root", "Missing required field: root"))
    else:
        _check_component(value["root"], "root", errors, {} if check_unique_ids else None, catalog, warnings)

    if _present(value, "data") and not _is_object(value["data"]):
        errors.append(_invalid("data", 'Field "data" must be an object'))

    if _present(value, "meta"):
        _check_meta(value["meta"], errors)

    if errors:
        logger.debug("schema_invalid", error_count=len(errors), first=errors[0].path)
    if warnings:
        logger.debug("schema_warnings", warning_count=len(warnings), first=warnings[0].path)
    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def check_schema(
    value: Any,
    *,
    check_unique_ids: bool = False,
    max_depth: int = MAX_JSON_DEPTH,
    registry: "ComponentRegistry | None" = None,
) -> Result[UISchema, list[ValidationError]]:
    """
    Validate and convert an untyped value to a typed ``UISchema``.

    Warnings are logged and dropped; call ``validate`` to inspect them.

    Args:
        value: Decoded JSON value
        check_unique_ids: Also report component ids that repeat in the tree
        max_depth: Deepest JSON nesting accepted
        registry: Optional catalogue that component types are checked against

    Returns:
        Success with the schema, or Failure with every validation error
    """
    result = validate(value, check_unique_ids=check_unique_ids, max_depth=max_depth, registry=registry)
    if not result.valid:
        return Failure(result.errors)

    try:
        return Success(UISchema.model_validate(value))
    except PydanticValidationError as e:
        # Shape checks above cover every field the model requires; this
        # only fires if the two drift apart.
        logger.warning("schema_model_rejected", errors=e.error_count())
        return Failure(
            [
                _invalid(".".join(str(part) for part in err["loc"]), err["msg"])
                for err in e.errors()
            ]
        )

"""Binding resolution against a data context."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from ..core.json import safe_json_dumps
from .parser import Index, ParseErrorCode, PathSegment, parse_binding_expression, parse_path, scan_bindings


class ResolveErrorCode(str, Enum):
    """Why a parsed path could not be resolved."""

    NULL_ACCESS = "NULL_ACCESS"
    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    NOT_AN_ARRAY = "NOT_AN_ARRAY"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"


@dataclass(frozen=True)
class BindingResult:
    """Result of resolving a binding.

    A missing terminal key resolves successfully to ``None`` with
    ``defined=False``; an explicit JSON null gives ``None`` with
    ``defined=True``.
    """

    success: bool
    value: Any = None
    defined: bool = True
    error: str | None = None
    code: ResolveErrorCode | ParseErrorCode | None = None


class _Undefined:
    """Marker for a key that does not exist."""

    def __repr__(self) -> str:
        return "undefined"


_UNDEFINED = _Undefined()


def _fail(code: ResolveErrorCode, message: str) -> BindingResult:
    return BindingResult(success=False, error=message, code=code)


def resolve_path(segments: Sequence[PathSegment], data: Mapping[str, Any]) -> BindingResult:
    """
    Walk ``segments`` through ``data``.

    Args:
        segments: Parsed path segments
        data: Data context to resolve against

    Returns:
        BindingResult with the value reached or the first failure
    """
    current: Any = data

    for segment in segments:
        if isinstance(segment, Index):
            if not isinstance(current, list):
                return _fail(
                    ResolveErrorCode.NOT_AN_ARRAY,
                    f"Cannot access index {segment.index} of non-array",
                )
            if segment.index >= len(current):
                return _fail(
                    ResolveErrorCode.INDEX_OUT_OF_BOUNDS,
                    f"Array index {segment.index} out of bounds (length: {len(current)})",
                )
            current = current[segment.index]
            continue

        if current is None or current is _UNDEFINED:
            kind = "null" if current is None else "undefined"
            return _fail(ResolveErrorCode.NULL_ACCESS, f"Cannot access property of {kind}")
        if not isinstance(current, Mapping):
            return _fail(
                ResolveErrorCode.NOT_AN_OBJECT,
                f'Cannot access property "{segment.name}" of non-object',
            )
        current = current.get(segment.name, _UNDEFINED)

    if current is _UNDEFINED:
        return BindingResult(success=True, value=None, defined=False)
    return BindingResult(success=True, value=current)


def resolve_binding(binding: str, data: Mapping[str, Any]) -> BindingResult:
    """
    Resolve a single ``{{...}}`` binding against a data context.

    Args:
        binding: The binding expression (e.g. ``"{{user.name}}"``)
        data: The data context

    Returns:
        BindingResult with resolved value or error
    """
    parsed = parse_binding_expression(binding)
    if not parsed.success:
        return BindingResult(
            success=False,
            error=parsed.error,
            code=parsed.code,
        )
    return resolve_path(parsed.segments, data)


def render_value(value: Any) -> str:
    """Render a resolved value for insertion into text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return safe_json_dumps(value)
    return str(value)


def resolve_bindings(template: str, data: Mapping[str, Any]) -> str:
    """
    Replace every ``{{...}}`` placeholder in ``template``.

    A placeholder that fails to parse or resolve is left as written, so one
    broken binding does not affect the rest of the text.

    Args:
        template: Text with binding expressions
        data: The data context

    Returns:
        Text with resolvable bindings substituted
    """
    if not template:
        return template

    parts: list[str] = []
    cursor = 0
    for match in scan_bindings(template):
        parts.append(template[cursor:match.start])
        cursor = match.end

        parsed = parse_path(match.expression)
        if not parsed.success:
            parts.append(match.raw)
            continue
        resolved = resolve_path(parsed.segments, data)
        parts.append(render_value(resolved.value) if resolved.success else match.raw)

    parts.append(template[cursor:])
    return "".join(parts)

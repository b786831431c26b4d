"""Binding expression parsing.

Expressions look like ``{{user.name}}`` or ``{{items[0].title}}``. The
placeholder scanner below is the only place ``{{...}}`` delimiters are
recognised; whole-expression parsing, template resolution and field
extraction all go through it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Property:
    """Named property access: ``.name``."""

    name: str


@dataclass(frozen=True)
class Index:
    """Array index access: ``[index]``."""

    index: int


PathSegment = Property | Index


class ParseErrorCode(str, Enum):
    """Why an expression failed to parse."""

    EMPTY_EXPRESSION = "EMPTY_EXPRESSION"
    LEADING_DOT = "LEADING_DOT"
    UNCLOSED_BRACKET = "UNCLOSED_BRACKET"
    INVALID_INDEX = "INVALID_INDEX"
    INVALID_FORMAT = "INVALID_FORMAT"


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a path or binding expression.

    On failure ``position`` is the offset into the trimmed expression where
    the problem was found.
    """

    success: bool
    segments: tuple[PathSegment, ...] = ()
    expression: str | None = None
    error: str | None = None
    code: ParseErrorCode | None = None
    position: int | None = None


@dataclass(frozen=True)
class BindingMatch:
    """One ``{{...}}`` placeholder found in free text."""

    start: int
    end: int
    raw: str
    expression: str


def _fail(code: ParseErrorCode, message: str, position: int | None = None) -> ParseResult:
    return ParseResult(success=False, error=message, code=code, position=position)


def parse_path(expression: str) -> ParseResult:
    """
    Parse a path expression (without braces) into segments.

    Supports dot notation (``a.b.c``) and bracket notation (``a[0].b``).

    Args:
        expression: Path text, outer whitespace ignored

    Returns:
        ParseResult with the segments or the first error
    """
    if not expression or not expression.strip():
        return _fail(ParseErrorCode.EMPTY_EXPRESSION, "Empty expression", 0)

    trimmed = expression.strip()
    segments: list[PathSegment] = []
    current = ""
    i = 0

    while i < len(trimmed):
        char = trimmed[i]

        if char == ".":
            if current:
                segments.append(Property(current))
                current = ""
            elif not segments:
                return _fail(ParseErrorCode.LEADING_DOT, "Invalid expression: leading dot", i)
            i += 1
        elif char == "[":
            if current:
                segments.append(Property(current))
                current = ""

            close = trimmed.find("]", i)
            if close == -1:
                return _fail(ParseErrorCode.UNCLOSED_BRACKET, "Invalid expression: unclosed bracket", i)

            raw = trimmed[i + 1:close]
            if not (raw.isascii() and raw.isdigit()):
                return _fail(ParseErrorCode.INVALID_INDEX, f"Invalid array index: {raw}", i + 1)

            segments.append(Index(int(raw)))
            i = close + 1
        else:
            current += char
            i += 1

    if current:
        segments.append(Property(current))

    return ParseResult(success=True, segments=tuple(segments), expression=trimmed)


def scan_bindings(text: str) -> Iterator[BindingMatch]:
    """
    Find ``{{...}}`` placeholders in free text, left to right.

    A placeholder is ``{{``, one or more characters other than ``}``, then
    ``}}``. Matches never overlap.
    """
    if not text:
        return
    start = text.find("{{")
    while start != -1:
        close = text.find("}", start + 2)
        if close == -1:
            return
        if close > start + 2 and text.startswith("}}", close):
            end = close + 2
            yield BindingMatch(start, end, text[start:end], text[start + 2:close])
            start = text.find("{{", end)
        else:
            start = text.find("{{", start + 1)


def parse_binding_expression(binding: str) -> ParseResult:
    """
    Parse a binding expression with ``{{ }}`` delimiters.

    The whole string must be a single placeholder; surrounding text is
    rejected.

    Args:
        binding: Binding text (e.g. ``"{{user.name}}"``)

    Returns:
        ParseResult with path segments or error
    """
    if not binding or not binding.strip():
        return _fail(ParseErrorCode.EMPTY_EXPRESSION, "Empty binding expression", 0)

    match = next(scan_bindings(binding), None)
    if match is None or match.start != 0 or match.end != len(binding):
        return _fail(ParseErrorCode.INVALID_FORMAT, "Invalid binding format: must be {{expression}}")

    return parse_path(match.expression)


def format_path(segments: Sequence[PathSegment]) -> str:
    """Render segments back to path text, e.g. ``items[2].name``."""
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, Index):
            parts.append(f"[{segment.index}]")
        elif parts:
            parts.append(f".{segment.name}")
        else:
            parts.append(segment.name)
    return "".join(parts)

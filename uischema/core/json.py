"""Fast JSON encoding/decoding with positional diagnostics."""

from typing import Any
import json
import re

import msgspec
import orjson

_BYTE_OFFSET = re.compile(r"\(byte (\d+)\)")

# Default nesting limit for decoded documents
MAX_JSON_DEPTH = 256

# Deepest nesting the typed schema models can be built from
JSON_DEPTH_CEILING = 400


class JSONParseError(Exception):
    """JSON parsing failed.

    ``position`` is a 0-based character offset into the decoded text;
    ``line`` and ``column`` are 1-based. All three are ``None`` when the
    decoder gave no usable location.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        original: Exception | None = None,
        *,
        text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.original = original
        self.line: int | None = None
        self.column: int | None = None
        if position is not None and text is not None:
            self.line, self.column = line_and_column(text, position)


def line_and_column(text: str, position: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based (line, column) pair."""
    head = text[:position]
    line = head.count("\n") + 1
    column = position - (head.rfind("\n") + 1) + 1
    return line, column


def _char_offset(text: str, byte_offset: int) -> int:
    """Map a UTF-8 byte offset reported by msgspec back to a str index."""
    raw = text.encode("utf-8", errors="surrogatepass")
    return len(raw[:byte_offset].decode("utf-8", errors="ignore"))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def decode_json(text: str) -> Any:
    """
    Decode JSON text into plain Python values.

    msgspec handles the common path; the standard library is consulted when
    msgspec refuses the input, both as a fallback decoder and for its
    precise error location.

    Args:
        text: JSON document

    Returns:
        Decoded value (dict, list, str, int, float, bool or None)

    Raises:
        JSONParseError: If the text is not valid JSON
    """
    try:
        return msgspec.json.decode(text)
    except (msgspec.DecodeError, ValueError, RecursionError) as e:
        fast_error = e

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JSONParseError(str(e), e.pos, e, text=text) from e
    except RecursionError as e:
        raise JSONParseError("Maximum nesting depth exceeded", None, e) from e
    except ValueError as e:
        match = _BYTE_OFFSET.search(str(fast_error))
        position = _char_offset(text, int(match.group(1))) if match else None
        raise JSONParseError(str(e), position, e, text=text) from e


def validate_json_depth(obj: Any, max_depth: int = MAX_JSON_DEPTH, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent stack overflow.

    Args:
        obj: Decoded JSON value
        max_depth: Maximum allowed depth
        current_depth: Depth of ``obj`` itself

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)


def safe_json_dumps(obj: Any, indent: int = 0) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        indent: Spaces per indentation level (0 = compact)

    Returns:
        JSON string
    """
    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError, OverflowError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

        try:
            return msgspec.json.encode(obj).decode("utf-8")
        except (TypeError, ValueError, OverflowError):
            pass

        return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))

    # Use stdlib for pretty-printed output
    return json.dumps(obj, indent=indent, ensure_ascii=False)

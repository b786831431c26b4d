"""Data binding: expression parsing, resolution and extraction."""

from .parser import (
    BindingMatch,
    Index,
    ParseErrorCode,
    ParseResult,
    PathSegment,
    Property,
    format_path,
    parse_binding_expression,
    parse_path,
    scan_bindings,
)
from .resolver import (
    BindingResult,
    ResolveErrorCode,
    render_value,
    resolve_binding,
    resolve_bindings,
    resolve_path,
)
from .extractor import DataField, extract_data_fields, get_unique_paths

__all__ = [
    # Parsing
    "Property",
    "Index",
    "PathSegment",
    "ParseErrorCode",
    "ParseResult",
    "BindingMatch",
    "parse_path",
    "parse_binding_expression",
    "scan_bindings",
    "format_path",
    # Resolution
    "BindingResult",
    "ResolveErrorCode",
    "resolve_path",
    "resolve_binding",
    "resolve_bindings",
    "render_value",
    # Extraction
    "DataField",
    "extract_data_fields",
    "get_unique_paths",
]

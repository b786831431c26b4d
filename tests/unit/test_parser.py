"""Binding expression parser tests."""

import pytest

from uischema.binding import (
    Index,
    ParseErrorCode,
    Property,
    format_path,
    parse_binding_expression,
    parse_path,
    scan_bindings,
)


@pytest.mark.unit
def test_parse_path_mixed():
    """Test dot and bracket notation."""
    result = parse_path("items[2].name")

    assert result.success
    assert result.segments == (Property("items"), Index(2), Property("name"))
    assert result.expression == "items[2].name"


@pytest.mark.unit
def test_parse_path_nested_indexes():
    """Test consecutive brackets."""
    result = parse_path("matrix[1][0]")
    assert result.segments == (Property("matrix"), Index(1), Index(0))


@pytest.mark.unit
def test_parse_path_trims():
    """Test outer whitespace is ignored."""
    result = parse_path("  user.name ")
    assert result.segments == (Property("user"), Property("name"))
    assert result.expression == "user.name"


@pytest.mark.unit
@pytest.mark.parametrize(
    "expression,code,message",
    [
        ("", ParseErrorCode.EMPTY_EXPRESSION, "Empty expression"),
        ("   ", ParseErrorCode.EMPTY_EXPRESSION, "Empty expression"),
        (".user", ParseErrorCode.LEADING_DOT, "Invalid expression: leading dot"),
        ("items[0", ParseErrorCode.UNCLOSED_BRACKET, "Invalid expression: unclosed bracket"),
        ("items[-1]", ParseErrorCode.INVALID_INDEX, "Invalid array index: -1"),
        ("items[x]", ParseErrorCode.INVALID_INDEX, "Invalid array index: x"),
        ("items[1abc]", ParseErrorCode.INVALID_INDEX, "Invalid array index: 1abc"),
        ("items[]", ParseErrorCode.INVALID_INDEX, "Invalid array index: "),
    ],
)
def test_parse_path_errors(expression, code, message):
    """Test each parse failure."""
    result = parse_path(expression)

    assert not result.success
    assert result.code == code
    assert result.error == message
    assert result.segments == ()


@pytest.mark.unit
def test_parse_path_error_position():
    """Test failures point into the trimmed expression."""
    assert parse_path("a[0").position == 1
    assert parse_path("a[zz]").position == 2


@pytest.mark.unit
def test_parse_binding_expression():
    """Test a whole-string binding."""
    result = parse_binding_expression("{{ user.name }}")

    assert result.success
    assert result.segments == (Property("user"), Property("name"))


@pytest.mark.unit
@pytest.mark.parametrize("binding", ["user.name", "Hi {{user}}", "{{user}} ", "{{a}}{{b}}", "{{}}", "{{a}"])
def test_parse_binding_expression_format(binding):
    """Test anything but a single placeholder is rejected."""
    result = parse_binding_expression(binding)

    assert not result.success
    assert result.code == ParseErrorCode.INVALID_FORMAT
    assert result.error.startswith("Invalid binding format")


@pytest.mark.unit
def test_parse_binding_expression_empty():
    """Test empty binding."""
    result = parse_binding_expression("  ")
    assert result.code == ParseErrorCode.EMPTY_EXPRESSION
    assert result.error == "Empty binding expression"


@pytest.mark.unit
def test_parse_binding_expression_bad_path():
    """Test path errors pass through."""
    result = parse_binding_expression("{{.x}}")
    assert result.code == ParseErrorCode.LEADING_DOT


@pytest.mark.unit
def test_scan_bindings():
    """Test placeholders are found left to right."""
    matches = list(scan_bindings("Hi {{first}} {{last}}!"))

    assert [m.expression for m in matches] == ["first", "last"]
    assert [m.raw for m in matches] == ["{{first}}", "{{last}}"]
    assert matches[0].start == 3
    assert matches[0].end == 12


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        ("no bindings", []),
        ("{{}}", []),
        ("{{a}", []),
        ("{{{a}}}", ["{a"]),
        ("{{a}}}", ["a"]),
        ("{{a} b}}", []),
        ("{{a {{b}}", ["a {{b"]),
    ],
)
def test_scan_bindings_edges(text, expected):
    """Test delimiter edge cases."""
    assert [m.expression for m in scan_bindings(text)] == expected


@pytest.mark.unit
def test_format_path():
    """Test segments render back to path text."""
    assert format_path(parse_path("items[2].name").segments) == "items[2].name"
    assert format_path((Index(0), Property("x"))) == "[0].x"
    assert format_path(()) == ""

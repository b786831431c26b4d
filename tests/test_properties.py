"""Property tests for round-trip, resolution, extraction and adaptation."""

from hypothesis import HealthCheck, given, settings, strategies as st

from uischema.binding import Index, Property, extract_data_fields, format_path, parse_path, resolve_path
from uischema.platform import PlatformAdapter, PlatformType
from uischema.schema import UISchema, deserialize, schemas_equal, serialize


# ============================================================================
# Strategies
# ============================================================================

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,7}", fullmatch=True)

plain_text = st.text(st.characters(exclude_categories=("Cs",)), max_size=12)

int64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**53), max_value=2**53)
    | st.floats(allow_nan=False, allow_infinity=False)
    | plain_text,
    lambda children: st.lists(children, max_size=3) | st.dictionaries(plain_text, children, max_size=3),
    max_leaves=10,
)

segments = st.tuples(
    identifiers.map(Property),
    st.lists(identifiers.map(Property) | st.integers(min_value=0, max_value=4).map(Index), max_size=5),
).map(lambda parts: (parts[0], *parts[1]))

paths = segments.map(format_path)

actions = st.one_of(
    st.builds(lambda url: {"type": "navigate", "url": url}, plain_text),
    st.just({"type": "submit"}),
    st.builds(lambda p, v: {"type": "update", "path": p, "value": v}, paths, json_values),
    st.builds(lambda p: {"type": "toggle", "path": p}, paths),
    st.builds(lambda h: {"type": "custom", "handler": h, "params": {"n": 1}}, identifiers),
)

# Keys that collide under several platform tables
prop_keys = st.sampled_from(
    ["className", "id", "alt", "title", "style", "variant", "type", "size", "value", "checked", "aria-label", "x"]
)
style_keys = st.sampled_from(["padding", "boxShadow", "elevation", "textDecoration", "textDecorationLine", "color"])
event_names = st.sampled_from(
    ["onClick", "onDoubleClick", "onChange", "onInput", "onPress", "onTap", "onMouseEnter", "onMouseDown", "onScroll"]
)
component_types = st.sampled_from(["Box", "Button", "Input", "Text", "Image"])


@st.composite
def templates(draw):
    """Free text with a known number of well-formed placeholders."""
    chunks = draw(
        st.lists(
            st.one_of(
                st.text(st.characters(exclude_characters="{}", exclude_categories=("Cs",)), max_size=6),
                paths.map(lambda p: ("binding", p)),
            ),
            max_size=4,
        )
    )
    text = "".join(f"{{{{{c[1]}}}}}" if isinstance(c, tuple) else c for c in chunks)
    return text, sum(1 for c in chunks if isinstance(c, tuple))


@st.composite
def components(draw, depth=0):
    """A component dict and the number of placeholders it carries."""
    count = 0
    node = {"id": draw(identifiers), "type": draw(component_types)}

    if draw(st.booleans()):
        node["binding"] = f"{{{{{draw(paths)}}}}}"
        count += 1
    if draw(st.booleans()):
        node["text"], n = draw(templates())
        count += n
    if draw(st.booleans()):
        props = {}
        for key in draw(st.lists(prop_keys, max_size=5, unique=True)):
            if draw(st.booleans()):
                props[key], n = draw(templates())
                count += n
            else:
                label, n = draw(templates())
                props[key] = [draw(int64), {"label": label}]
                count += n
        node["props"] = props
    if draw(st.booleans()):
        node["style"] = draw(st.dictionaries(style_keys, int64 | plain_text, max_size=4))
    if draw(st.booleans()):
        node["events"] = draw(st.lists(st.fixed_dictionaries({"event": event_names, "action": actions}), max_size=3))
    if draw(st.booleans()):
        node["loop"] = {"source": draw(paths), "itemName": "item"}
        count += 1
    if draw(st.booleans()):
        node["condition"], n = draw(templates())
        count += n
    if depth < 3 and draw(st.booleans()):
        children = draw(st.lists(components(depth=depth + 1), max_size=3))
        node["children"] = [child for child, _ in children]
        count += sum(n for _, n in children)

    return node, count


@st.composite
def schemas(draw):
    """A valid schema and its placeholder count."""
    root, count = draw(components())
    wire = {"version": draw(st.sampled_from(["1.0", "2.1"])), "root": root}
    if draw(st.booleans()):
        wire["data"] = draw(st.dictionaries(identifiers, json_values, max_size=3))
    if draw(st.booleans()):
        wire["meta"] = {"title": draw(plain_text), "createdAt": draw(st.integers(min_value=0, max_value=2**53))}
    return UISchema.model_validate(wire), count


def _nodes(schema):
    return list(schema.root.walk())


# ============================================================================
# Round-trip
# ============================================================================

@given(schemas(), st.booleans())
@settings(max_examples=50, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_round_trip_property(generated, pretty):
    """Property test: deserialize(serialize(s)) is structurally equal to s."""
    schema, _ = generated

    result = deserialize(serialize(schema, pretty=pretty))

    assert result.success, result.error
    assert schemas_equal(result.schema, schema)


# ============================================================================
# Path resolution
# ============================================================================

def _place(path, value):
    """Build a data context holding ``value`` at ``path``."""
    for segment in reversed(path):
        if isinstance(segment, Index):
            value = [None] * segment.index + [value]
        else:
            value = {segment.name: value}
    return value


@given(segments, json_values)
def test_resolve_placed_value(path, value):
    """Property test: resolving the path a value was placed at returns it."""
    result = resolve_path(path, _place(path, value))

    assert result.success
    assert result.value == value


@given(segments)
def test_format_parse_property(path):
    """Property test: formatted paths parse back to the same segments."""
    assert parse_path(format_path(path)).segments == path


# ============================================================================
# Extraction completeness
# ============================================================================

@given(schemas())
@settings(max_examples=50, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_extraction_counts_every_placeholder(generated):
    """Property test: one DataField per placeholder occurrence."""
    schema, count = generated

    assert len(extract_data_fields(schema)) == count


# ============================================================================
# Adaptation invariance
# ============================================================================

@given(schemas(), st.sampled_from(list(PlatformType)))
@settings(max_examples=50, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_adaptation_preserves_structure(generated, platform):
    """Property test: adapt() renames keys only."""
    schema, _ = generated

    adapted = PlatformAdapter().adapt(schema, platform)
    before, after = _nodes(schema), _nodes(adapted)

    assert len(after) == len(before)
    assert [n.id for n in after] == [n.id for n in before]
    assert [n.type for n in after] == [n.type for n in before]
    assert [n.text for n in after] == [n.text for n in before]
    assert adapted.data == schema.data
    assert adapted.meta == schema.meta
    for old, new in zip(before, after):
        assert len(new.props or {}) == len(old.props or {})
        assert sorted(map(repr, (new.props or {}).values())) == sorted(map(repr, (old.props or {}).values()))
        assert len(new.style or {}) == len(old.style or {})
        assert len(new.events or []) == len(old.events or [])
        assert [e.action for e in new.events or []] == [e.action for e in old.events or []]

"""Component registry tests."""

import pytest

from uischema.platform import ComponentDefinition, ComponentRegistry, PlatformType


@pytest.mark.unit
def test_register_and_get():
    """Test basic registration."""
    registry = ComponentRegistry()
    registry.register(ComponentDefinition(name="Button", version="1.2.0"))

    assert "Button" in registry
    assert len(registry) == 1
    assert registry.get("Button").version == "1.2.0"
    assert registry.get("Missing") is None


@pytest.mark.unit
def test_duplicate_registration_keeps_first():
    """Test re-registering a name is ignored."""
    registry = ComponentRegistry([ComponentDefinition(name="Button", description="first")])
    registry.register(ComponentDefinition(name="Button", description="second"))

    assert registry.get("Button").description == "first"
    assert len(registry) == 1


@pytest.mark.unit
def test_unregister():
    """Test removal, including of unknown names."""
    registry = ComponentRegistry([ComponentDefinition(name="Button")])

    registry.unregister("Button")
    registry.unregister("Button")

    assert "Button" not in registry


@pytest.mark.unit
def test_list_all_by_category(component_registry):
    """Test listing keeps registration order."""
    assert [d.name for d in component_registry.list_all()] == ["Button", "Input", "DataGrid", "SwipeDeck"]
    assert [d.name for d in component_registry.list_all(category="input")] == ["Button", "Input"]


@pytest.mark.unit
def test_definition_platforms_from_strings():
    """Test platform names coerce to PlatformType."""
    definition = ComponentDefinition(name="Map", platforms=["mobile-native"])

    assert definition.platforms == [PlatformType.MOBILE_NATIVE]
    assert definition.supports(PlatformType.MOBILE_NATIVE)
    assert not definition.supports(PlatformType.PC_WEB)


@pytest.mark.unit
def test_definition_requires_name():
    """Test empty names are rejected."""
    with pytest.raises(Exception):
        ComponentDefinition(name="")


@pytest.mark.unit
def test_suggest_close_names():
    """Test suggestions are case-insensitive and nearest first."""
    registry = ComponentRegistry(
        [ComponentDefinition(name=n) for n in ("Button", "Input", "TextArea", "Text", "Tent")]
    )

    assert registry.suggest("buttn") == ["Button"]
    assert registry.suggest("TEXT") == ["Text", "Tent"]
    assert registry.suggest("Tex", limit=1) == ["Text"]
    assert registry.suggest("Slider") == []

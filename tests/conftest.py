"""Pytest configuration and fixtures."""

import os
import pytest

from uischema.core import create_container, get_settings
from uischema.platform import ComponentDefinition, ComponentRegistry, PlatformAdapter, PlatformType
from uischema.schema import UISchema


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['UISCHEMA_LOG_LEVEL'] = 'DEBUG'
    os.environ['UISCHEMA_CHECK_UNIQUE_IDS'] = 'false'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def di_container():
    """Dependency injection container for testing."""
    return create_container()


# ============================================================================
# Platform Fixtures
# ============================================================================

@pytest.fixture
def component_registry():
    """Registry with a few platform-restricted components."""
    return ComponentRegistry(
        [
            ComponentDefinition(name="Button", category="input"),
            ComponentDefinition(name="Input", category="input", platforms=[]),
            ComponentDefinition(
                name="DataGrid",
                category="data",
                platforms=[PlatformType.PC_WEB, PlatformType.PC_DESKTOP],
            ),
            ComponentDefinition(
                name="SwipeDeck",
                category="layout",
                platforms=[PlatformType.MOBILE_WEB, PlatformType.MOBILE_NATIVE],
            ),
        ]
    )


@pytest.fixture
def adapter():
    """Adapter without a registry."""
    return PlatformAdapter()


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_schema_dict():
    """Sample UI schema in wire form."""
    return {
        "version": "1.0",
        "root": {
            "id": "root",
            "type": "Container",
            "style": {"padding": 16, "display": "flex"},
            "children": [
                {
                    "id": "title",
                    "type": "Text",
                    "text": "Hello {{user.name}}, you have {{inbox.count}} messages",
                },
                {
                    "id": "email",
                    "type": "Input",
                    "binding": "{{user.email}}",
                    "props": {"placeholder": "Email for {{user.name}}", "className": "field"},
                    "events": [
                        {"event": "onChange", "action": {"type": "update", "path": "user.email"}}
                    ],
                },
                {
                    "id": "item",
                    "type": "Card",
                    "loop": {"source": "inbox.items", "itemName": "message"},
                    "condition": "{{inbox.count}}",
                    "children": [
                        {"id": "subject", "type": "Text", "text": "{{message.subject}}"}
                    ],
                },
                {
                    "id": "send",
                    "type": "Button",
                    "props": {"className": "primary", "disabled": False},
                    "events": [
                        {"event": "onClick", "action": {"type": "submit", "endpoint": "/api/send"}}
                    ],
                },
            ],
        },
        "data": {
            "user": {"name": "Ada", "email": "ada@example.com"},
            "inbox": {"count": 2, "items": [{"subject": "Hi"}, {"subject": "Re: Hi"}]},
        },
        "meta": {"title": "Inbox", "author": "tests", "createdAt": 1700000000},
    }


@pytest.fixture
def sample_schema(sample_schema_dict):
    """Sample UI schema as a typed model."""
    return UISchema.model_validate(sample_schema_dict)


@pytest.fixture
def data_context():
    """Data context for binding resolution."""
    return {
        "user": {"name": "Ada", "age": 36, "active": True, "nickname": None},
        "items": ["a", "b"],
        "matrix": [[1, 2], [3, 4]],
        "a": {"b": [10, 20, 30]},
        "price": 10.0,
    }

"""Pytest configuration and shared fixtures."""
import pytest

from genui.components import UIComponentNode
from genui.conversation import ConversationSession

from fakes import FakeAgentClient


@pytest.fixture
def fake_client():
    """Return an unscripted fake agent client."""
    return FakeAgentClient()


@pytest.fixture
def session(fake_client):
    """Return a conversation session without the greeting card."""
    return ConversationSession(fake_client, greeting=False)


@pytest.fixture
def order_form():
    """Return a small order form tree."""
    return UIComponentNode.model_validate({
        "type": "card",
        "props": {"title": "Order"},
        "children": [
            {"type": "input", "props": {"id": "qty", "label": "Quantity", "type": "number"}},
            {"type": "select", "props": {"id": "size", "options": "S,M,L"}},
            {"type": "checkbox", "props": {"name": "gift", "label": "Gift wrap"}},
            {"type": "button", "props": {"label": "Order", "action": "submit_order"}},
        ],
    })


@pytest.fixture
def connection_values():
    """Return complete connection settings."""
    return {
        "endpoint": "https://example.openai.azure.com/",
        "api_key": "secret-key",
        "deployment_name": "gpt-4o",
        "api_version": "2024-05-01-preview",
    }

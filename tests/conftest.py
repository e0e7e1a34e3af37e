"""Pytest fixtures for FormGen tests."""

import pytest


@pytest.fixture
def sample_schema():
    """Schema as the model is asked to return it."""
    return {
        "formTitle": "Contact Us",
        "formDescription": "Send us a message",
        "fields": [
            {"id": "name", "label": "Name", "type": "text", "placeholder": "Jane Doe", "required": True},
            {"id": "email", "label": "Email", "type": "email", "required": True},
            {"id": "topic", "label": "Topic", "type": "select", "required": False, "options": ["Sales", "Support"]},
            {"id": "message", "label": "Message", "type": "textarea", "required": False},
            {"id": "subscribe", "label": "Subscribe", "type": "checkbox", "placeholder": "Send me updates", "required": False},
        ],
    }


class FakeClient:
    """Stand-in for OllamaClient returning a fixed completion."""

    def __init__(self, completion="", error=None):
        self.completion = completion
        self.error = error
        self.calls = []

    def query(self, prompt, system=None):
        self.calls.append((prompt, system))
        if self.error is not None:
            raise self.error
        return self.completion


@pytest.fixture
def fake_client():
    return FakeClient

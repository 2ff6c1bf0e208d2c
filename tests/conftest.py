import os

# Must be set before polarbot.config is imported
os.environ["RATE_LIMIT_PER_MINUTE"] = "1000"
os.environ["OPENROUTER_API_KEY"] = ""
os.environ["AI_MODE"] = "false"

import pytest

from polarbot.services import ai_service, history_service
from polarbot.services.translation_service import reset_localizer


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    history_service.clear_all()
    reset_localizer()
    monkeypatch.setattr(ai_service, "client", None)
    monkeypatch.setattr(ai_service, "_api_key", "")
    monkeypatch.setattr(ai_service, "_state", dict(ai_service._state, available=False, ai_mode=False))
    yield
    history_service.clear_all()
    reset_localizer()


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        return type("Completion", (), {"choices": [choice]})()


class FakeClient:
    """Just enough of ``openai.AsyncOpenAI`` for chat completions."""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content, error)
        self.chat = type("Chat", (), {"completions": self.completions})()


@pytest.fixture
def fake_client_factory():
    return FakeClient

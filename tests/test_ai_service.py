from polarbot.models.schemas import ConversationMessage
from polarbot.services import ai_service
from polarbot.services.responses import GENERAL_RESPONSES, TOPIC_RESPONSES


def enable_ai(monkeypatch, client):
    monkeypatch.setattr(ai_service, "client", client)
    monkeypatch.setitem(ai_service._state, "available", True)
    monkeypatch.setitem(ai_service._state, "ai_mode", True)


def test_api_key_validation():
    assert not ai_service._is_real_api_key("")
    assert not ai_service._is_real_api_key("sk-your-key-goes-here-xxxxxxxxxxxxxx")
    assert not ai_service._is_real_api_key("pk-" + "a" * 40)
    assert not ai_service._is_real_api_key("sk-short")
    assert ai_service._is_real_api_key("sk-or-v1-" + "a" * 40)


async def test_fallback_when_unavailable():
    reply = await ai_service.generate_response("what do you eat?", language="en", ai_mode=True)
    assert reply in TOPIC_RESPONSES["en"]["diet"]


async def test_fallback_when_ai_mode_off(monkeypatch, fake_client_factory):
    fake = fake_client_factory(content="LLM reply")
    enable_ai(monkeypatch, fake)
    reply = await ai_service.generate_response("hmm", language="es", ai_mode=False)
    assert reply in GENERAL_RESPONSES["es"]
    assert fake.completions.calls == []


async def test_uses_llm(monkeypatch, fake_client_factory):
    fake = fake_client_factory(content="  I love seals! 🐻‍❄️ ")
    enable_ai(monkeypatch, fake)

    reply = await ai_service.generate_response("wat do u eet?", language="en")

    assert reply == "I love seals! 🐻‍❄️"
    call = fake.completions.calls[0]
    assert call["messages"][-1] == {"role": "user", "content": "what do you eat?"}
    assert call["presence_penalty"] == 0.6
    assert call["frequency_penalty"] == 0.3


async def test_provider_error_falls_back(monkeypatch, fake_client_factory):
    enable_ai(monkeypatch, fake_client_factory(error=RuntimeError("boom")))
    reply = await ai_service.generate_response("what do you eat?", language="en")
    assert reply in TOPIC_RESPONSES["en"]["diet"]


async def test_empty_completion_falls_back(monkeypatch, fake_client_factory):
    enable_ai(monkeypatch, fake_client_factory(content="   "))
    reply = await ai_service.generate_response("hello", language="en")
    assert reply in TOPIC_RESPONSES["en"]["greeting"]


def test_message_history_window():
    history = [
        ConversationMessage(role="user" if i % 2 == 0 else "assistant", content=f"m{i}")
        for i in range(15)
    ]
    messages = ai_service.build_message_history(history, "latest", "es")

    assert messages[0] == {"role": "system", "content": ai_service.SYSTEM_PROMPTS["es"]}
    assert [m["content"] for m in messages[1:-1]] == [f"m{i}" for i in range(5, 15)]
    assert messages[-1] == {"role": "user", "content": "latest"}


def test_unknown_language_uses_english_prompt():
    messages = ai_service.build_message_history([], "hi", "fr")
    assert messages[0]["content"] == ai_service.SYSTEM_PROMPTS["en"]


async def test_init_without_key():
    assert await ai_service.init() is False
    assert ai_service.get_status()["is_available"] is False
    assert ai_service.get_client() is None


async def test_init_with_placeholder_key():
    assert await ai_service.init("sk-your-openrouter-key") is False
    assert ai_service.get_status()["has_api_key"] is True


def test_update_settings():
    status = ai_service.update_settings(model="some/model", max_tokens=200, temperature=0.0, ai_mode=True)
    assert status["model"] == "some/model"
    assert status["max_tokens"] == 200
    assert status["temperature"] == 0.0
    assert status["ai_mode"] is True


def test_detect_topic():
    assert ai_service.detect_topic("wat do u eet?") == "diet"
    assert ai_service.detect_topic("hmm") is None

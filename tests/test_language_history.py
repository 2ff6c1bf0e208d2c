import pytest

from polarbot.services import history_service
from polarbot.services.language_service import primary_language, resolve_language


@pytest.mark.parametrize(
    "value,expected",
    [("es-MX", "es"), ("en-US,en;q=0.9", "en"), (" ES ", "es"), ("", None), (None, None), ("*", None)],
)
def test_primary_language(value, expected):
    assert primary_language(value) == expected


def test_resolve_language_order():
    assert resolve_language("es", "en") == "es"
    assert resolve_language("fr", None, "es-MX,es;q=0.9") == "es"
    assert resolve_language(None, None, None) == "en"
    assert resolve_language("de-DE") == "en"


def test_history_roundtrip():
    history_service.append_message("s1", "user", "hello")
    history_service.append_message("s1", "assistant", "hi!")

    messages = history_service.get_messages("s1")
    assert [(m.role, m.content) for m in messages] == [("user", "hello"), ("assistant", "hi!")]

    messages.clear()
    assert len(history_service.get_messages("s1")) == 2
    assert history_service.session_ids() == ["s1"]


def test_export_and_reset():
    history_service.append_message("s2", "user", "what do you eat?")
    export = history_service.export_session("s2")
    assert export.message_count == 1
    assert export.messages[0].content == "what do you eat?"

    assert history_service.reset_session("s2") == 1
    assert not history_service.has_session("s2")
    assert history_service.reset_session("s2") == 0
    assert history_service.get_messages("s2") == []


def test_session_cap_evicts_least_recent(monkeypatch):
    monkeypatch.setattr(history_service.settings, "HISTORY_MAX_SESSIONS", 2)

    history_service.append_message("a", "user", "one")
    history_service.append_message("b", "user", "two")
    history_service.append_message("a", "assistant", "three")
    history_service.append_message("c", "user", "four")

    assert history_service.session_ids() == ["a", "c"]
    assert not history_service.has_session("b")


def test_message_cap_keeps_latest(monkeypatch):
    monkeypatch.setattr(history_service.settings, "HISTORY_MAX_MESSAGES", 3)

    for i in range(5):
        history_service.append_message("s", "user", f"m{i}")

    assert [m.content for m in history_service.get_messages("s")] == ["m2", "m3", "m4"]

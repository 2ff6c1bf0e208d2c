import pytest

from polarbot.services import ai_service
from polarbot.services.translation_service import (
    SectionLocalizer,
    _extract_json,
    get_localizer,
    translate_sections,
)

SECTIONS = {"habitat": ["I roam the sea ice."], "diet": ["I hunt seals.", "I eat fish."], "future": []}


class CountingTranslator:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = 0

    async def __call__(self, sections, language):
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return {key: [f"[{language}] {item}" for item in items] for key, items in sections.items()}


async def test_translates_and_caches():
    translator = CountingTranslator()
    localizer = SectionLocalizer(translator, supported_languages=("en", "es"))

    first = await localizer.localize(SECTIONS, "es")
    second = await localizer.localize(SECTIONS, "es")

    assert first == second
    assert first["diet"] == ["[es] I hunt seals.", "[es] I eat fish."]
    assert first["future"] == []
    assert translator.calls == 1


async def test_cached_result_is_a_copy():
    localizer = SectionLocalizer(CountingTranslator(), supported_languages=("es",))
    first = await localizer.localize(SECTIONS, "es")
    first["diet"].append("mutated")
    second = await localizer.localize(SECTIONS, "es")
    assert "mutated" not in second["diet"]


async def test_fail_open_on_error():
    translator = CountingTranslator(error=RuntimeError("provider down"))
    localizer = SectionLocalizer(translator, supported_languages=("es",))

    assert await localizer.localize(SECTIONS, "es") == SECTIONS
    assert len(localizer) == 0


@pytest.mark.parametrize(
    "bad",
    [
        "not a dict",
        {"habitat": ["x"], "diet": ["only one"], "future": []},
        {"habitat": ["x"], "future": []},
        {"habitat": "x", "diet": ["a", "b"], "future": []},
    ],
)
async def test_malformed_translation_discarded(bad):
    localizer = SectionLocalizer(CountingTranslator(result=bad), supported_languages=("es",))
    assert await localizer.localize(SECTIONS, "es") == SECTIONS
    assert len(localizer) == 0


async def test_items_coerced_to_strings():
    result = {"habitat": [1], "diet": ["a", None], "future": []}
    localizer = SectionLocalizer(CountingTranslator(result=result), supported_languages=("es",))
    out = await localizer.localize(SECTIONS, "es")
    assert out == {"habitat": ["1"], "diet": ["a", "None"], "future": []}


async def test_unsupported_language_untouched():
    translator = CountingTranslator()
    localizer = SectionLocalizer(translator, supported_languages=("en", "es"))
    assert await localizer.localize(SECTIONS, "fr") == SECTIONS
    assert translator.calls == 0


async def test_empty_sections_untouched():
    translator = CountingTranslator()
    localizer = SectionLocalizer(translator, supported_languages=("es",))
    empty = {"habitat": [], "diet": []}
    assert await localizer.localize(empty, "es") is empty
    assert translator.calls == 0


async def test_no_translator():
    localizer = SectionLocalizer(None, supported_languages=("es",))
    assert await localizer.localize(SECTIONS, "es") == SECTIONS


async def test_lru_eviction():
    translator = CountingTranslator()
    localizer = SectionLocalizer(translator, supported_languages=("es",), cache_size=2)
    a, b, c = ({"diet": [name]} for name in ("a", "b", "c"))

    await localizer.localize(a, "es")
    await localizer.localize(b, "es")
    await localizer.localize(a, "es")  # a becomes most recent
    await localizer.localize(c, "es")  # evicts b
    assert len(localizer) == 2
    assert translator.calls == 3

    await localizer.localize(a, "es")
    assert translator.calls == 3
    await localizer.localize(b, "es")
    assert translator.calls == 4


def test_cache_key_ignores_key_order():
    one = SectionLocalizer.cache_key({"a": ["x"], "b": []}, "es")
    two = SectionLocalizer.cache_key({"b": [], "a": ["x"]}, "es")
    assert one == two
    assert one != SectionLocalizer.cache_key({"a": ["x"], "b": []}, "en")


def test_extract_json():
    assert _extract_json('{"diet": ["a"]}') == {"diet": ["a"]}
    assert _extract_json('Sure!\n```json\n{"sections": {"diet": ["a"]}}\n```') == {"diet": ["a"]}
    with pytest.raises(ValueError):
        _extract_json("no json at all")


async def test_translate_sections_without_client():
    with pytest.raises(RuntimeError):
        await translate_sections(SECTIONS, "es")


async def test_translate_sections_with_client(monkeypatch, fake_client_factory):
    fake = fake_client_factory(content='{"sections": {"diet": ["Cazo focas."]}}')
    monkeypatch.setattr(ai_service, "client", fake)

    result = await translate_sections({"diet": ["I hunt seals."]}, "es")

    assert result == {"diet": ["Cazo focas."]}
    call = fake.completions.calls[0]
    assert "Spanish" in call["messages"][0]["content"]
    assert call["max_tokens"] == 800


def test_localizer_without_credentials_has_no_translator():
    assert get_localizer().translator is None
    assert get_localizer() is get_localizer()

import pytest

from polarbot.models.schemas import ConversationMessage
from polarbot.services.blueprint_service import BlueprintGenerator, count_items
from polarbot.services.lexicon import BLUEPRINT_SECTION_ORDER


@pytest.fixture
def generator():
    return BlueprintGenerator()


def bot(text, role="assistant"):
    return {"role": role, "content": text}


def test_split_into_sentences():
    split = BlueprintGenerator.split_into_sentences
    assert split("A. B! C?") == ["A.", "B!", "C?"]
    assert split("Wait... what?!") == ["Wait...", "what?!"]
    assert split("no terminator here") == ["no terminator here"]
    assert split("First.  Then\nsecond") == ["First.", "Then second"]
    assert split("") == []
    assert split("   ") == []
    assert split(None) == []


def test_punctuation_only_is_one_sentence():
    assert BlueprintGenerator.split_into_sentences("?!") == ["?!"]


def test_habitat_and_diet(generator):
    sections = generator.build_sections([bot("I roam the sea ice near Svalbard. I hunt ringed seals.")])
    assert sections["habitat"] == ["I roam the sea ice near Svalbard."]
    assert sections["diet"] == ["I hunt ringed seals."]
    for key in BLUEPRINT_SECTION_ORDER:
        if key not in ("habitat", "diet"):
            assert sections[key] == []


def test_sections_in_display_order(generator):
    assert list(generator.build_sections([])) == list(BLUEPRINT_SECTION_ORDER)
    assert len(BLUEPRINT_SECTION_ORDER) == 7


def test_user_messages_ignored(generator):
    sections = generator.build_sections([bot("I live in the Arctic.", role="user")])
    assert count_items(sections) == 0


def test_bot_role_and_model_messages(generator):
    messages = [
        bot("I hunt ringed seals.", role="bot"),
        ConversationMessage(role="assistant", content="The sea ice is my home."),
        None,
    ]
    sections = generator.build_sections(messages)
    assert sections["diet"] == ["I hunt ringed seals."]
    assert sections["habitat"] == ["The sea ice is my home."]


def test_cap_per_section(generator):
    text = "I eat seals. I eat fish. I hunt at dawn. I love blubber. My food is seals."
    sections = generator.build_sections([bot(text)])
    assert sections["diet"] == ["I eat seals.", "I eat fish.", "I hunt at dawn."]


def test_no_duplicates(generator):
    sections = generator.build_sections([bot("I hunt ringed seals."), bot("I hunt ringed seals.")])
    assert sections["diet"] == ["I hunt ringed seals."]


def test_custom_cap():
    generator = BlueprintGenerator(max_items=1)
    sections = generator.build_sections([bot("I eat seals. I eat fish.")])
    assert sections["diet"] == ["I eat seals."]


def test_spanish_sentences(generator):
    sections = generator.build_sections([bot("Vivo en el hielo ártico. Me encanta cazar focas.")])
    assert sections["habitat"] == ["Vivo en el hielo ártico."]
    assert sections["diet"] == ["Me encanta cazar focas."]


def test_count_items():
    assert count_items({"a": ["x", "y"], "b": [], "c": ["z"]}) == 3


def test_more_messages_only_append(generator):
    first = [bot("I roam the sea ice near Svalbard. I hunt ringed seals.")]
    more = [bot("I eat fish. My home is the Arctic. I swim for hours.")]

    before = generator.build_sections(first)
    after = generator.build_sections(first + more)

    for key in BLUEPRINT_SECTION_ORDER:
        assert after[key][: len(before[key])] == before[key]
    assert after["diet"] == ["I hunt ringed seals.", "I eat fish."]
    assert after["skills"] == ["I swim for hours."]


def test_full_section_ignores_later_sentences(generator):
    first = [bot("I eat seals. I eat fish. I hunt at dawn.")]
    before = generator.build_sections(first)
    after = generator.build_sections(first + [bot("I love blubber.")])

    assert before["diet"] == ["I eat seals.", "I eat fish.", "I hunt at dawn."]
    assert after["diet"] == before["diet"]

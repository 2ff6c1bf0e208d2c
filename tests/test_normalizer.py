import pytest

from polarbot.services.lexicon import CORRECTIONS
from polarbot.services.normalizer import Normalizer, normalize


def test_fixes_typos_and_shorthand():
    assert normalize("wat do u eet?") == "what do you eat?"


def test_lowercases():
    assert normalize("HELLO There") == "hello there"


def test_only_whole_words_are_rewritten():
    # "u" inside "you" / "hunt" must not be touched
    assert normalize("you hunt") == "you hunt"
    assert normalize("r u ok") == "are you ok"


def test_spanish_shorthand():
    assert normalize("xq q comes") == "por que que comes"


def test_idempotent():
    for text in ["wat do u eet?", "ur nam pls", "HeLLo thx", "tomorow n hop"]:
        once = normalize(text)
        assert normalize(once) == once


def test_non_string_input():
    assert normalize(None) == ""
    assert normalize(42) == ""


def test_empty_table_only_lowercases():
    assert Normalizer({}).normalize("Wat U") == "wat u"


def test_rejects_self_mapping():
    with pytest.raises(ValueError):
        Normalizer({"cat": "cat"})


def test_rejects_chained_corrections():
    with pytest.raises(ValueError):
        Normalizer({"a": "b", "b": "c"})


def test_corrections_property_is_a_copy():
    norm = Normalizer({"wat": "what"})
    norm.corrections["wat"] = "who"
    assert norm.normalize("wat") == "what"


def test_default_table_is_valid():
    assert Normalizer(CORRECTIONS).corrections

from hypothesis import given
from hypothesis import strategies as st

from hemoglobin.text import clean_ascii, clean_ascii_keep_case

REMOVED = set("äëïöü\"'.,")


def test_clean_ascii_folds_umlaut_and_lowercases():
    assert clean_ascii("Cult of Nä") == "cult of na"


def test_keep_case_preserves_capitals():
    assert clean_ascii_keep_case("Cult of Nä") == "Cult of Na"


def test_punctuation_is_removed():
    assert clean_ascii_keep_case('"Hi," he said.') == "Hi he said"


def test_uppercase_umlaut_is_untouched_when_keeping_case():
    assert clean_ascii_keep_case("Ä") == "Ä"


@given(st.text())
def test_no_removed_characters_remain(text):
    cleaned = clean_ascii_keep_case(text)
    assert REMOVED.intersection(cleaned) == set()


@given(st.text())
def test_idempotent(text):
    once = clean_ascii_keep_case(text)
    assert clean_ascii_keep_case(once) == once


@given(st.text())
def test_clean_ascii_is_keep_case_of_lowered(text):
    assert clean_ascii(text) == clean_ascii_keep_case(text.lower())


@given(st.text(alphabet="abcXYZ 123-"))
def test_plain_text_unchanged(text):
    assert clean_ascii_keep_case(text) == text
import pytest

from juicetally.kebab import kebab_case, undo_kebab_case


def test_kebab_case_collapses_whitespace_and_lowercases():
    assert kebab_case("  Apple \t Juice\n") == "apple-juice"


@pytest.mark.parametrize("title", ["Apple Juice", "Mango", "Cranberry Grape Blend"])
def test_round_trip_of_title_case_names(title):
    assert undo_kebab_case(kebab_case(title)) == title


@pytest.mark.parametrize("name", ["Orange  Juice", "KIWI lime", "single"])
def test_kebab_case_has_no_whitespace_and_is_lowercase(name):
    result = kebab_case(name)
    assert result == result.lower()
    assert not any(ch.isspace() for ch in result)


def test_kebab_case_of_blank_is_empty():
    assert kebab_case("   ") == ""


def test_undo_only_touches_first_letter():
    assert undo_kebab_case("apple-jUICE") == "Apple JUICE"


@pytest.mark.parametrize("bad", ["", "a--b", "-lead", "trail-"])
def test_undo_rejects_empty_words(bad):
    with pytest.raises(ValueError, match="Empty word"):
        undo_kebab_case(bad)
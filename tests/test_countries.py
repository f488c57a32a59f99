import pytest

from ymlfeed.countries import COUNTRIES, is_known_country


@pytest.mark.parametrize(
    "name",
    [
        "Россия",
        "США",
        "Кот-д’Ивуар",
        "Тёркс и Кайкос",
        "Объединённые Арабские Эмираты",
        "Папуа - Новая Гвинея",
        "Япония",
        "Австралия",
    ],
)
def test_listed_countries_are_known(name):
    assert is_known_country(name) is True


@pytest.mark.parametrize(
    "name",
    [
        "",
        "Narnia",
        "россия",
        "Россия ",
        " США",
        "РОССИЯ",
    ],
)
def test_unlisted_names_are_not_known(name):
    assert is_known_country(name) is False


def test_every_country_in_set_is_known():
    assert all(is_known_country(name) for name in COUNTRIES)


def test_country_names_have_no_surrounding_whitespace():
    for name in COUNTRIES:
        assert name and name == name.strip()
        assert is_known_country(name) is True
        assert is_known_country(f" {name} ") is False


def test_straight_apostrophe_variant_is_not_known():
    assert is_known_country("Кот-д'Ивуар") is False


def test_set_is_immutable():
    with pytest.raises(AttributeError):
        COUNTRIES.add("Narnia")  # type: ignore[attr-defined]
    assert is_known_country("Narnia") is False
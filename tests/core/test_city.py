"""Tests for city names, ids and cities."""

import pytest

from core.city import City, CityId, CityName
from core.errors import InvalidCityIdError, InvalidCityNameError


@pytest.mark.parametrize(
    "name",
    ["Paris", "Aix-en-Provence", "L'Haÿ-les-Roses", "Neuilly (Aisne)", "Y", "Saint Martin"],
)
def test_valid_city_names(name: str) -> None:
    """Test realistic French city names are accepted."""
    assert CityName.create(name).value == name


def test_city_name_is_trimmed() -> None:
    """Test surrounding whitespace is removed."""
    assert CityName.create("  Lyon ").value == "Lyon"


@pytest.mark.parametrize(
    "name",
    [
        "",
        "   ",
        "paris",
        "Paris-",
        "Saint--Denis",
        "Saint  Martin",
        "Neuilly (Aisne",
        "Lyon2",
        "A" * 101,
    ],
)
def test_invalid_city_names(name: str) -> None:
    """Test malformed names raise InvalidCityNameError."""
    with pytest.raises(InvalidCityNameError):
        CityName.create(name)


def test_city_name_ordering_ignores_case_and_accents() -> None:
    """Test compare_to is accent-insensitive."""
    assert CityName.create("Évry").compare_to(CityName.create("Evry")) == 0
    assert CityName.create("Lille").compare_to(CityName.create("Lyon")) < 0
    assert CityName.create("Paris").compare_to(CityName.create("Lyon")) > 0


def test_city_name_to_normalized() -> None:
    """Test normalization strips accents and separators."""
    assert CityName.create("L'Haÿ-les-Roses").to_normalized() == "lhaylesroses"


def test_city_id_normalization() -> None:
    """Test ids are lowercase, accent-free and hyphenated."""
    assert CityId.from_city_name("Saint-Étienne").value == "saint-etienne"
    assert CityId.from_city_name("  Neuilly (Aisne) ").value == "neuilly-aisne"


def test_city_id_rejects_empty() -> None:
    """Test an empty id is refused."""
    with pytest.raises(InvalidCityIdError):
        CityId.from_city_name(" ")


def test_city_equality_uses_id_only() -> None:
    """Test two cities with the same id are equal and hash alike."""
    first = City(CityId("paris"), CityName("Paris"))
    second = City(CityId("paris"), CityName("Paris (Capitale)"))
    assert first == second
    assert len({first, second}) == 1
    assert City.create("Lyon") != first


def test_city_key_is_normalized_id() -> None:
    """Test spellings of one city share the same graph key."""
    assert City.create("Saint-Étienne").key == "saint-etienne"
    assert City.create("Saint Etienne").key == City.create("Saint-Étienne").key

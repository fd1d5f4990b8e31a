"""City identity and display name."""

import re
import unicodedata
from dataclasses import dataclass, field

from core.errors import InvalidCityIdError, InvalidCityNameError

MAX_CITY_NAME_LENGTH = 100

# Letters (accented included), spaces, hyphens, apostrophes and parentheses,
# starting with an uppercase letter. Covers names like "Aix-en-Provence",
# "L'Haÿ-les-Roses" or "Neuilly (Aisne)".
_CITY_NAME_PATTERN = re.compile(
    r"^[A-ZÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØÙÚÛÜÝÞŸŒ]"
    r"[a-zA-ZÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØÙÚÛÜÝÞßàáâãäåæçèéêëìíîïðñòóôõöøùúûüýþÿŒœ\s'\-()]*$"
)
_EDGE_CHARACTERS = re.compile(r"^[\s\-']|[\s\-']$")
_REPEATED_SEPARATORS = re.compile(r"\s{2,}|--")


def _strip_diacritics(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


@dataclass(frozen=True)
class CityName:
    """Validated, trimmed display name of a city."""

    value: str

    def __post_init__(self) -> None:
        _validate_city_name(self.value)

    @classmethod
    def create(cls, name: str) -> "CityName":
        if not name or not name.strip():
            raise InvalidCityNameError("City name cannot be empty")
        return cls(name.strip())

    def sort_key(self) -> str:
        """Case- and accent-insensitive key used to order city names."""
        return _strip_diacritics(self.value).casefold()

    def compare_to(self, other: "CityName") -> int:
        mine, theirs = self.sort_key(), other.sort_key()
        return (mine > theirs) - (mine < theirs)

    def to_normalized(self) -> str:
        return re.sub(r"['\-\s()]", "", _strip_diacritics(self.value).lower())

    def __str__(self) -> str:
        return self.value


def _validate_city_name(name: str) -> None:
    if not name or not name.strip():
        raise InvalidCityNameError("City name cannot be empty")
    if name != name.strip():
        raise InvalidCityNameError("City name must be trimmed")
    if len(name) > MAX_CITY_NAME_LENGTH:
        raise InvalidCityNameError(
            f"City name cannot exceed {MAX_CITY_NAME_LENGTH} characters"
        )
    if _EDGE_CHARACTERS.search(name):
        raise InvalidCityNameError(
            "City name cannot start or end with a space, hyphen or apostrophe"
        )
    if name.count("(") != name.count(")"):
        raise InvalidCityNameError("Parentheses in a city name must be balanced")
    if _REPEATED_SEPARATORS.search(name):
        raise InvalidCityNameError(
            "City name cannot contain consecutive spaces or hyphens"
        )
    if not _CITY_NAME_PATTERN.match(name):
        raise InvalidCityNameError(
            "City name contains invalid characters. Only letters (accents included), "
            "spaces, hyphens, apostrophes and parentheses are allowed, "
            "and it must start with an uppercase letter"
        )


@dataclass(frozen=True)
class CityId:
    """Stable identity derived from a city name ("Saint-Étienne" -> "saint-etienne")."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise InvalidCityIdError.empty()

    @classmethod
    def from_city_name(cls, city_name: str) -> "CityId":
        if not city_name or not city_name.strip():
            raise InvalidCityIdError.empty()
        return cls(cls.normalize(city_name))

    @staticmethod
    def normalize(city_name: str) -> str:
        lowered = _strip_diacritics(city_name.strip().lower())
        return re.sub(r"[^a-z0-9]+", "-", lowered).strip("-")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class City:
    """A location in the road network. Equality and hashing use the id only."""

    id: CityId
    name: CityName = field(compare=False)

    @classmethod
    def create(cls, name: str) -> "City":
        """Build a city from its display name, deriving the id."""
        city_name = CityName.create(name)
        return cls(CityId.from_city_name(city_name.value), city_name)

    @property
    def key(self) -> str:
        """Normalized id used as the key inside the search graph."""
        return self.id.value

    def __str__(self) -> str:
        return self.name.value

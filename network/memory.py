"""In-memory collaborators: a read-only road network and a fixed weather table."""

import logging
from collections.abc import Iterable, Mapping

from core.city import City, CityId, CityName
from core.errors import CityNotFoundError, WeatherLookupError
from core.road_segment import RoadSegment
from core.types import WeatherCondition

logger = logging.getLogger(__name__)


class InMemoryRoadNetwork:
    """Road segments and cities held in memory.

    Built once and only read afterwards, so a single instance can serve
    concurrent queries. Each query gets its own copy of the segment list.
    """

    def __init__(self, segments: Iterable[RoadSegment]) -> None:
        self._segments: tuple[RoadSegment, ...] = tuple(segments)
        self._cities: dict[str, City] = {}
        for segment in self._segments:
            for city in segment.cities:
                self._cities.setdefault(city.id.value, city)

    async def find_all(self) -> list[RoadSegment]:
        return list(self._segments)

    async def find_by_name(self, name: CityName) -> City:
        city = self.get_city(name.value)
        if city is None:
            raise CityNotFoundError.for_city_name(name.value)
        return city

    def get_city(self, name: str) -> City | None:
        """Find a city by name, ignoring case and accents."""
        return self._cities.get(CityId.from_city_name(name).value)

    @property
    def cities(self) -> list[City]:
        return list(self._cities.values())

    def __len__(self) -> int:
        return len(self._segments)


class StaticWeatherProvider:
    """Weather provider answering from a fixed city -> condition table.

    Cities are matched by id, so "Saint-Étienne" and "saint etienne" share an entry.
    Unknown cities get ``default`` when set, otherwise the lookup fails.
    """

    def __init__(
        self,
        conditions: Mapping[str, WeatherCondition | str] | None = None,
        default: WeatherCondition | str | None = None,
    ) -> None:
        self._conditions: dict[str, WeatherCondition] = {
            City.create(name).id.value: WeatherCondition.parse(condition)
            for name, condition in (conditions or {}).items()
        }
        self.default = WeatherCondition.parse(default) if default is not None else None
        self.lookups = 0

    async def for_city(self, city: City) -> WeatherCondition:
        """Return the recorded condition for a city.

        Raises:
            WeatherLookupError: If the city has no entry and no default is set
        """
        self.lookups += 1
        condition = self._conditions.get(city.id.value, self.default)
        if condition is None:
            raise WeatherLookupError.for_city_name(city.name.value)
        logger.debug(f"Weather for {city}: {condition.value}")
        return condition

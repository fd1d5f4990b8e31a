"""Collaborators the route engine and planner depend on."""

from typing import Protocol

from core.city import City, CityName
from core.road_segment import RoadSegment
from core.types import WeatherCondition


class WeatherConditionProvider(Protocol):
    """Supplies the current weather of a city.

    Errors raised by an implementation propagate to the caller of the engine
    unchanged; the engine does not retry nor substitute a default condition.
    """

    async def for_city(self, city: City) -> WeatherCondition:
        ...


class RoadSegmentSource(Protocol):
    """Supplies the snapshot of road segments a query runs against."""

    async def find_all(self) -> list[RoadSegment]:
        ...


class CitySource(Protocol):
    """Resolves city names to cities known to the road network."""

    async def find_by_name(self, name: CityName) -> City:
        """Look a city up by display name.

        Raises:
            CityNotFoundError: If no city has this name
        """
        ...

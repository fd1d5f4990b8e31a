"""Segment admission criteria used to filter the road network before a search."""

from collections.abc import Mapping
from typing import Protocol

from core.types import CityKey, WeatherCondition
from network.graph.segment import Segment


class SegmentCriteria(Protocol):
    """Protocol for rules deciding whether a segment may be traversed."""

    def admits(self, segment: Segment) -> bool:
        """Check if a segment satisfies the rule.

        Args:
            segment: The directed segment to check

        Returns:
            True if the segment may be used by the search
        """
        ...


class MaxDistanceCriteria:
    """Admits segments no longer than a distance bound (inclusive)."""

    def __init__(self, max_distance_km: float) -> None:
        self.max_distance_km = max_distance_km

    def admits(self, segment: Segment) -> bool:
        return segment.distance_km <= self.max_distance_km


class MinSpeedCriteria:
    """Admits segments whose speed limit reaches a minimum (inclusive)."""

    def __init__(self, min_speed_kph: float) -> None:
        self.min_speed_kph = min_speed_kph

    def admits(self, segment: Segment) -> bool:
        return segment.speed_kph >= self.min_speed_kph


class ArrivalWeatherCriteria:
    """Rejects segments arriving in a city whose weather is excluded.

    A destination with no recorded weather is admitted.
    """

    def __init__(
        self,
        excluded: set[WeatherCondition],
        weather_by_city: Mapping[CityKey, WeatherCondition],
    ) -> None:
        """Initialize arrival weather criteria.

        Args:
            excluded: Conditions that make a destination unreachable
            weather_by_city: Weather recorded for each city of the network
        """
        self.excluded = excluded
        self.weather_by_city = weather_by_city

    def admits(self, segment: Segment) -> bool:
        weather = self.weather_by_city.get(segment.to_city)
        if weather is None:
            return True
        return weather not in self.excluded


class CompositeCriteria:
    """Admits a segment only if every wrapped criteria admits it."""

    def __init__(self, criteria_list: list[SegmentCriteria]) -> None:
        self.criteria_list = criteria_list

    def admits(self, segment: Segment) -> bool:
        return all(criteria.admits(segment) for criteria in self.criteria_list)

    def __len__(self) -> int:
        return len(self.criteria_list)

"""Weather-aware fastest-route engine."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from core.city import City
from core.constraints import RouteConstraints
from core.measures import Distance, Duration, Speed
from core.road_segment import RoadSegment
from core.types import CityKey, WeatherCondition
from network.graph.builder import GraphBuilder
from network.graph.segment import Segment
from network.routing.dijkstra import ShortestTimeSearch
from network.routing.filter import ConstraintFilter, SegmentConstraints
from network.routing.protocols import WeatherConditionProvider
from network.routing.reconstructor import InternalPathfindingResult, PathReconstructor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteStep:
    from_city: City
    to_city: City
    distance: Distance
    speed_limit: Speed
    travel_time: Duration
    weather: WeatherCondition | None = None


@dataclass(frozen=True)
class PathfindingResult:
    """Fastest route between two cities."""

    path: list[City]
    total_distance: Distance
    estimated_time: Duration
    steps: list[RouteStep] = field(default_factory=list)

    @property
    def path_names(self) -> list[str]:
        return [city.name.value for city in self.path]


class PathfindingEngine:
    """Computes the minimum-travel-time route for one query at a time.

    Every call fetches weather, filters the segments, builds a fresh graph and
    runs a new search. Nothing is kept between calls.
    """

    def __init__(self, weather_provider: WeatherConditionProvider) -> None:
        if weather_provider is None:
            raise ValueError("A weather condition provider must be provided")
        self.weather_provider = weather_provider
        self.segment_filter = ConstraintFilter()
        self.graph_builder = GraphBuilder()
        self.search = ShortestTimeSearch()
        self.path_reconstructor = PathReconstructor()

    async def find_fastest_route(
        self,
        segments: list[RoadSegment],
        start_city: City,
        end_city: City,
        constraints: RouteConstraints | None = None,
    ) -> PathfindingResult | None:
        """Find the fastest route from start_city to end_city.

        Args:
            segments: Road network snapshot, assumed valid
            start_city: Where the route starts
            end_city: Where the route ends
            constraints: Optional distance, speed and arrival weather restrictions

        Returns:
            The fastest admissible route, or None if end_city cannot be reached
            under the active constraints (including when either city is not
            part of the network).

        Raises:
            Any error raised by the weather provider, unchanged.
            InvalidValueError: If a derived value cannot form a valid domain value.
        """
        cities = self._extract_cities(segments)
        logger.debug(
            f"Routing {start_city} -> {end_city} over {len(segments)} segments, "
            f"{len(cities)} cities"
        )
        weather_by_city = await self._fetch_weather(cities)

        directed_segments = self._to_directed_segments(segments)
        segment_constraints = self._to_segment_constraints(constraints)
        start_key = CityKey(start_city.key)
        end_key = CityKey(end_city.key)

        admitted = self.segment_filter.filter(
            directed_segments, weather_by_city, segment_constraints
        )
        graph = self.graph_builder.build(admitted)

        result = self.search.execute(graph, start_key, end_key)
        if result is None:
            logger.debug(f"No route from {start_city} to {end_city} in {graph}")
            return None

        internal_result = self.path_reconstructor.reconstruct(
            result.previous,
            start_key,
            end_key,
            result.total_time(end_key),
            weather_by_city,
        )
        logger.debug(
            f"Route {start_city} -> {end_city}: {len(internal_result.steps)} steps, "
            f"{internal_result.estimated_time_h:.3f}h"
        )

        return self._to_domain_result(internal_result, segments, start_city, end_city)

    @staticmethod
    def _extract_cities(segments: Iterable[RoadSegment]) -> list[City]:
        cities: dict[CityKey, City] = {}
        for segment in segments:
            cities.setdefault(CityKey(segment.city_a.key), segment.city_a)
            cities.setdefault(CityKey(segment.city_b.key), segment.city_b)
        return list(cities.values())

    async def _fetch_weather(self, cities: list[City]) -> dict[CityKey, WeatherCondition]:
        """Look up every city concurrently; the first failure fails the query."""
        conditions = await asyncio.gather(
            *(self.weather_provider.for_city(city) for city in cities)
        )
        return {
            CityKey(city.key): condition
            for city, condition in zip(cities, conditions, strict=True)
        }

    @staticmethod
    def _to_directed_segments(segments: Iterable[RoadSegment]) -> list[Segment]:
        directed: list[Segment] = []
        for segment in segments:
            # A closed road (speed 0) has no travel time and is never traversable
            if segment.speed_limit.km_per_hour == 0:
                logger.debug(f"Skipping zero-speed segment {segment.city_a} - {segment.city_b}")
                continue
            directed.extend(Segment.both_directions(segment))
        return directed

    @staticmethod
    def _to_segment_constraints(
        constraints: RouteConstraints | None,
    ) -> SegmentConstraints | None:
        if constraints is None:
            return None

        return SegmentConstraints(
            max_distance_km=(
                constraints.max_distance.kilometers
                if constraints.max_distance is not None
                else None
            ),
            min_speed_kph=(
                constraints.min_speed_limit.km_per_hour
                if constraints.min_speed_limit is not None
                else None
            ),
            exclude_weather_conditions=constraints.exclude_weather_conditions,
        )

    @staticmethod
    def _to_domain_result(
        internal_result: InternalPathfindingResult,
        segments: Iterable[RoadSegment],
        start_city: City,
        end_city: City,
    ) -> PathfindingResult:
        # Keys are normalized ids; the query cities keep their spelling, others the first seen
        city_by_key: dict[str, City] = {start_city.key: start_city, end_city.key: end_city}
        for segment in segments:
            for city in segment.cities:
                city_by_key.setdefault(city.key, city)

        def resolve(key: str) -> City:
            return city_by_key[key]

        return PathfindingResult(
            path=[resolve(key) for key in internal_result.path],
            total_distance=Distance.from_kilometers(internal_result.total_distance_km),
            estimated_time=Duration.from_hours(internal_result.estimated_time_h),
            steps=[
                RouteStep(
                    from_city=resolve(step.from_city),
                    to_city=resolve(step.to_city),
                    distance=Distance.from_kilometers(step.distance_km),
                    speed_limit=Speed.from_km_per_hour(step.speed_kph),
                    travel_time=Duration.from_hours(step.travel_time_h),
                    weather=step.weather,
                )
                for step in internal_result.steps
            ],
        )

from collections.abc import Mapping
from dataclasses import dataclass, field

from core.types import CityKey, WeatherCondition
from network.routing.dijkstra import Predecessor


@dataclass(frozen=True)
class InternalRouteStep:
    from_city: CityKey
    to_city: CityKey
    distance_km: float
    speed_kph: float
    travel_time_h: float
    weather: WeatherCondition | None = None


@dataclass(frozen=True)
class InternalPathfindingResult:
    """Route expressed in plain numbers, before translation to domain values."""

    path: list[CityKey]
    total_distance_km: float
    estimated_time_h: float
    steps: list[InternalRouteStep] = field(default_factory=list)


class PathReconstructor:
    """Turns the predecessor map of a search into an ordered route."""

    def reconstruct(
        self,
        previous: Mapping[CityKey, Predecessor],
        start_city: CityKey,
        end_city: CityKey,
        total_time: float,
        weather_by_city: Mapping[CityKey, WeatherCondition],
    ) -> InternalPathfindingResult:
        """Build the route from start_city to end_city.

        Args:
            previous: Predecessor of every city reached by the search
            start_city: First city of the route
            end_city: Last city of the route
            total_time: Travel time computed by the search, reported as-is
            weather_by_city: Weather recorded per city, looked up at arrival

        Returns:
            Path, steps and totals. Total distance is the sum of the step distances.
        """
        path = self._build_path(previous, start_city, end_city)
        steps = self._build_steps(path, previous, weather_by_city)

        return InternalPathfindingResult(
            path=path,
            total_distance_km=sum((step.distance_km for step in steps), 0.0),
            estimated_time_h=total_time,
            steps=steps,
        )

    @staticmethod
    def _build_path(
        previous: Mapping[CityKey, Predecessor], start_city: CityKey, end_city: CityKey
    ) -> list[CityKey]:
        reverse_path: list[CityKey] = []
        current = end_city

        while current != start_city:
            reverse_path.append(current)
            predecessor = previous.get(current)
            if predecessor is None:
                # Unreachable after a successful search
                break
            current = predecessor.city

        reverse_path.append(start_city)
        reverse_path.reverse()
        return reverse_path

    @staticmethod
    def _build_steps(
        path: list[CityKey],
        previous: Mapping[CityKey, Predecessor],
        weather_by_city: Mapping[CityKey, WeatherCondition],
    ) -> list[InternalRouteStep]:
        steps: list[InternalRouteStep] = []

        for from_city, to_city in zip(path, path[1:]):
            predecessor = previous.get(to_city)
            if predecessor is None or predecessor.city != from_city:
                continue

            # Parallel roads may join the same pair; use the one the search recorded
            segment = predecessor.segment
            steps.append(
                InternalRouteStep(
                    from_city=segment.from_city,
                    to_city=segment.to_city,
                    distance_km=segment.distance_km,
                    speed_kph=segment.speed_kph,
                    travel_time_h=segment.duration_h,
                    weather=weather_by_city.get(segment.to_city),
                )
            )

        return steps

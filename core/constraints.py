from dataclasses import dataclass

from core.measures import Distance, Speed
from core.types import WeatherCondition


@dataclass(frozen=True)
class RouteConstraints:
    """Optional per-query restrictions on which road segments may be used.

    Every field is independent; a field left as None (or an empty exclusion list)
    does not restrict anything.
    """

    exclude_weather_conditions: tuple[WeatherCondition, ...] | None = None
    max_distance: Distance | None = None
    min_speed_limit: Speed | None = None

    @classmethod
    def create(
        cls,
        exclude_weather_conditions: list[str | WeatherCondition] | None = None,
        max_distance_km: float | None = None,
        min_speed_kph: float | None = None,
    ) -> "RouteConstraints":
        """Build constraints from raw values.

        Raises:
            InvalidWeatherConditionError: If an excluded condition is unknown
            InvalidDistanceError: If max_distance_km is negative or not finite
            InvalidSpeedError: If min_speed_kph is negative or not finite
        """
        excluded = (
            tuple(WeatherCondition.parse(value) for value in exclude_weather_conditions)
            if exclude_weather_conditions is not None
            else None
        )
        return cls(
            exclude_weather_conditions=excluded,
            max_distance=(
                Distance.from_kilometers(max_distance_km) if max_distance_km is not None else None
            ),
            min_speed_limit=(
                Speed.from_km_per_hour(min_speed_kph) if min_speed_kph is not None else None
            ),
        )

    def is_unrestricted(self) -> bool:
        return (
            not self.exclude_weather_conditions
            and self.max_distance is None
            and self.min_speed_limit is None
        )

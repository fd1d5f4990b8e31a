"""DTOs for fastest-route requests and responses.

- RouteConstraintsDTO: Optional restrictions sent with a request
- FastestRouteRequest: Start/end city names and constraints
- RouteStepDTO / FastestRouteResponse: Serializable route returned to callers
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constraints import RouteConstraints
from network.routing.engine import PathfindingResult, RouteStep


class RouteConstraintsDTO(BaseModel):
    """Constraints as received from a caller, before domain validation."""

    exclude_weather_conditions: list[str] | None = Field(
        default=None, description="Weather conditions the route must not arrive in"
    )
    max_distance: float | None = Field(
        default=None, ge=0.0, allow_inf_nan=False, description="Maximum length of any segment in km"
    )
    min_speed_limit: float | None = Field(
        default=None, ge=0.0, allow_inf_nan=False, description="Minimum speed limit of any segment in km/h"
    )

    @field_validator("exclude_weather_conditions")
    @classmethod
    def normalize_conditions(cls, v: list[str] | None) -> list[str] | None:
        """Strip and lowercase condition names; parsing happens in to_domain()."""
        if v is None:
            return None
        return [condition.strip().lower() for condition in v]

    def to_domain(self) -> RouteConstraints:
        """Convert to domain constraints.

        Raises:
            InvalidWeatherConditionError: If a condition is not one of the known values
        """
        return RouteConstraints.create(
            exclude_weather_conditions=self.exclude_weather_conditions,
            max_distance_km=self.max_distance,
            min_speed_kph=self.min_speed_limit,
        )


class FastestRouteRequest(BaseModel):
    """Fastest route query between two cities, identified by display name."""

    model_config = ConfigDict(str_strip_whitespace=True)

    start_city: str = Field(min_length=1, description="Name of the departure city")
    end_city: str = Field(min_length=1, description="Name of the arrival city")
    constraints: RouteConstraintsDTO | None = None


class RouteStepDTO(BaseModel):
    from_city: str
    to_city: str
    distance_km: float
    speed_kph: float
    travel_time_hours: float
    weather: str | None = None

    @classmethod
    def from_step(cls, step: RouteStep) -> "RouteStepDTO":
        return cls(
            from_city=step.from_city.name.value,
            to_city=step.to_city.name.value,
            distance_km=step.distance.kilometers,
            speed_kph=step.speed_limit.km_per_hour,
            travel_time_hours=step.travel_time.hours,
            weather=step.weather.value if step.weather is not None else None,
        )


class FastestRouteResponse(BaseModel):
    """Route returned to callers. An empty path means no route exists."""

    path: list[str] = Field(default_factory=list)
    total_distance_km: float = 0.0
    estimated_time_hours: float = Field(
        default=0.0, description="Total travel time rounded to one decimal"
    )
    steps: list[RouteStepDTO] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @classmethod
    def empty(cls) -> "FastestRouteResponse":
        return cls()

    @classmethod
    def from_result(cls, result: PathfindingResult | None) -> "FastestRouteResponse":
        if result is None:
            return cls.empty()

        return cls(
            path=result.path_names,
            total_distance_km=result.total_distance.kilometers,
            estimated_time_hours=round_half_up(result.estimated_time.hours, 1),
            steps=[RouteStepDTO.from_step(step) for step in result.steps],
        )


def round_half_up(value: float, digits: int) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor

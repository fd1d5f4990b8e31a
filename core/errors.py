"""Typed errors raised by the domain and application layers."""

from typing import ClassVar


class DomainError(Exception):
    """Base class for every error raised deliberately by this project.

    Subclasses set ``code`` to a stable identifier that callers can switch on.
    """

    code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidValueError(DomainError, ValueError):
    """A value object refused to be constructed from invalid input."""

    code = "INVALID_VALUE"


class InvalidDistanceError(InvalidValueError):
    code = "INVALID_DISTANCE"

    @classmethod
    def negative(cls) -> "InvalidDistanceError":
        return cls("Distance cannot be negative")

    @classmethod
    def not_finite(cls) -> "InvalidDistanceError":
        return cls("Distance must be a finite number")


class InvalidSpeedError(InvalidValueError):
    code = "INVALID_SPEED"

    @classmethod
    def negative(cls) -> "InvalidSpeedError":
        return cls("Speed cannot be negative")

    @classmethod
    def not_finite(cls) -> "InvalidSpeedError":
        return cls("Speed must be a finite number")


class InvalidDurationError(InvalidValueError):
    code = "INVALID_DURATION"

    @classmethod
    def negative(cls) -> "InvalidDurationError":
        return cls("Travel time cannot be negative")

    @classmethod
    def not_finite(cls) -> "InvalidDurationError":
        return cls("Travel time must be a finite number")

    @classmethod
    def zero_speed(cls) -> "InvalidDurationError":
        return cls("Cannot compute travel time with a speed of zero")


class InvalidCityNameError(InvalidValueError):
    code = "INVALID_CITY_NAME"


class InvalidCityIdError(InvalidValueError):
    code = "INVALID_CITY_ID"

    @classmethod
    def empty(cls) -> "InvalidCityIdError":
        return cls("City id cannot be empty")


class InvalidRoadSegmentError(InvalidValueError):
    code = "INVALID_ROAD_SEGMENT"

    @classmethod
    def same_city_connection(cls) -> "InvalidRoadSegmentError":
        return cls("A road segment cannot connect a city to itself")


class InvalidWeatherConditionError(InvalidValueError):
    code = "INVALID_WEATHER_CONDITION"

    @classmethod
    def for_invalid_condition(
        cls, condition: str, valid_conditions: list[str]
    ) -> "InvalidWeatherConditionError":
        return cls(
            f'Invalid weather condition "{condition}". '
            f"Valid values are: {', '.join(valid_conditions)}"
        )


class SameStartAndEndCityError(DomainError):
    code = "SAME_START_AND_END_CITY"

    @classmethod
    def for_city_name(cls, city_name: str) -> "SameStartAndEndCityError":
        return cls(f'Start city and end city cannot be the same: "{city_name}"')


class CityNotFoundError(DomainError):
    code = "CITY_NOT_FOUND"

    @classmethod
    def for_city_name(cls, city_name: str) -> "CityNotFoundError":
        return cls(f'City "{city_name}" was not found in the road network')


class WeatherLookupError(DomainError):
    """The weather provider could not produce a condition for a city."""

    code = "WEATHER_LOOKUP_FAILED"

    @classmethod
    def for_city_name(cls, city_name: str) -> "WeatherLookupError":
        return cls(f'No weather condition available for "{city_name}"')


class RouteTimeoutError(DomainError):
    code = "ROUTE_TIMEOUT"

    @classmethod
    def after(cls, timeout_s: float) -> "RouteTimeoutError":
        return cls(f"Route computation did not finish within {timeout_s}s")

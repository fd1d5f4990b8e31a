"""Validated physical quantities used across the road network."""

import math
from dataclasses import dataclass

from core.errors import InvalidDistanceError, InvalidDurationError, InvalidSpeedError


@dataclass(frozen=True, order=True)
class Distance:
    """Non-negative, finite distance in kilometers."""

    kilometers: float

    def __post_init__(self) -> None:
        if self.kilometers < 0:
            raise InvalidDistanceError.negative()
        if not math.isfinite(self.kilometers):
            raise InvalidDistanceError.not_finite()

    @classmethod
    def from_kilometers(cls, kilometers: float) -> "Distance":
        return cls(float(kilometers))

    @property
    def meters(self) -> float:
        return self.kilometers * 1000.0

    def add(self, other: "Distance") -> "Distance":
        return Distance(self.kilometers + other.kilometers)

    def __str__(self) -> str:
        return f"{self.kilometers:g} km"


@dataclass(frozen=True, order=True)
class Speed:
    """Non-negative, finite speed limit in km/h."""

    km_per_hour: float

    def __post_init__(self) -> None:
        if self.km_per_hour < 0:
            raise InvalidSpeedError.negative()
        if not math.isfinite(self.km_per_hour):
            raise InvalidSpeedError.not_finite()

    @classmethod
    def from_km_per_hour(cls, km_per_hour: float) -> "Speed":
        return cls(float(km_per_hour))

    def __str__(self) -> str:
        return f"{self.km_per_hour:g} km/h"


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative, finite travel time in hours."""

    hours: float

    def __post_init__(self) -> None:
        if self.hours < 0:
            raise InvalidDurationError.negative()
        if not math.isfinite(self.hours):
            raise InvalidDurationError.not_finite()

    @classmethod
    def from_hours(cls, hours: float) -> "Duration":
        return cls(float(hours))

    @classmethod
    def from_distance_and_speed(cls, distance_km: float, speed_kph: float) -> "Duration":
        """Travel time for a distance covered at a constant speed.

        Raises:
            InvalidDurationError: If speed is zero. A zero-speed road never has a
                finite travel time and must be filtered out before this point.
        """
        if speed_kph == 0:
            raise InvalidDurationError.zero_speed()
        return cls(distance_km / speed_kph)

    @property
    def minutes(self) -> float:
        return self.hours * 60.0

    @property
    def seconds(self) -> float:
        return self.hours * 3600.0

    def add(self, other: "Duration") -> "Duration":
        return Duration(self.hours + other.hours)

    def subtract(self, other: "Duration") -> "Duration":
        return Duration(self.hours - other.hours)

    def __str__(self) -> str:
        whole_hours = math.floor(self.hours)
        minutes = math.floor((self.hours - whole_hours) * 60)
        return f"{whole_hours}h {minutes}m"

from enum import Enum
from typing import NewType

from core.errors import InvalidWeatherConditionError

# Keys
CityKey = NewType("CityKey", str)  # Normalized city id used as the internal graph key
RoadSegmentID = NewType("RoadSegmentID", str)


class WeatherCondition(str, Enum):
    """Weather observed at a city, checked at the arrival city of each step."""

    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    FOG = "fog"

    @classmethod
    def values(cls) -> list[str]:
        """Return every valid condition string in declaration order."""
        return [condition.value for condition in cls]

    @classmethod
    def parse(cls, value: "str | WeatherCondition") -> "WeatherCondition":
        """Parse a condition name.

        Args:
            value: Condition string (e.g. "rain") or an existing enum member

        Returns:
            The matching WeatherCondition

        Raises:
            InvalidWeatherConditionError: If the value is not one of the six conditions
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidWeatherConditionError.for_invalid_condition(
                str(value), cls.values()
            ) from None

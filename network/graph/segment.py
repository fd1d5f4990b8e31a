from dataclasses import dataclass

from core.measures import Duration
from core.road_segment import RoadSegment
from core.types import CityKey


@dataclass(frozen=True)
class Segment:
    """Directed, plain-number view of a road used inside the search."""

    from_city: CityKey
    to_city: CityKey
    distance_km: float
    speed_kph: float
    duration_h: float

    @classmethod
    def directed(
        cls, from_city: CityKey, to_city: CityKey, distance_km: float, speed_kph: float
    ) -> "Segment":
        """Build a segment, computing its travel time from distance and speed.

        Raises:
            InvalidDurationError: If speed_kph is zero
        """
        duration = Duration.from_distance_and_speed(distance_km, speed_kph)
        return cls(from_city, to_city, distance_km, speed_kph, duration.hours)

    @classmethod
    def both_directions(cls, road: RoadSegment) -> tuple["Segment", "Segment"]:
        """Expand a bidirectional road into its A->B and B->A segments."""
        city_a = CityKey(road.city_a.key)
        city_b = CityKey(road.city_b.key)
        distance_km = road.distance.kilometers
        speed_kph = road.speed_limit.km_per_hour
        duration_h = road.estimated_duration.hours
        return (
            cls(city_a, city_b, distance_km, speed_kph, duration_h),
            cls(city_b, city_a, distance_km, speed_kph, duration_h),
        )

"""Road segment connecting two cities."""

import uuid
from dataclasses import dataclass, field

from core.city import City
from core.errors import InvalidRoadSegmentError
from core.measures import Distance, Duration, Speed
from core.types import RoadSegmentID


def _new_segment_id() -> RoadSegmentID:
    return RoadSegmentID(str(uuid.uuid4()))


@dataclass
class RoadSegment:
    """Bidirectional road between two distinct cities.

    The endpoints are stored sorted by name so that a pair of cities has a single
    canonical segment regardless of the order they were given in.
    """

    city_a: City
    city_b: City
    distance: Distance
    speed_limit: Speed
    id: RoadSegmentID = field(default_factory=_new_segment_id)

    def __post_init__(self) -> None:
        if self.city_a == self.city_b:
            raise InvalidRoadSegmentError.same_city_connection()
        if self.city_a.name.compare_to(self.city_b.name) > 0:
            self.city_a, self.city_b = self.city_b, self.city_a

    @classmethod
    def create(
        cls,
        from_city: str | City,
        to_city: str | City,
        distance_km: float,
        speed_kph: float,
        segment_id: RoadSegmentID | None = None,
    ) -> "RoadSegment":
        """Build a segment from raw values, validating every one of them.

        Args:
            from_city: First endpoint, a City or a display name
            to_city: Second endpoint, a City or a display name
            distance_km: Length of the road in kilometers
            speed_kph: Speed limit in km/h
            segment_id: Explicit id, generated when omitted

        Raises:
            InvalidRoadSegmentError: If both endpoints are the same city
            InvalidDistanceError: If distance is negative or not finite
            InvalidSpeedError: If speed is negative or not finite
        """
        city_a = from_city if isinstance(from_city, City) else City.create(from_city)
        city_b = to_city if isinstance(to_city, City) else City.create(to_city)
        kwargs = {} if segment_id is None else {"id": segment_id}
        return cls(
            city_a=city_a,
            city_b=city_b,
            distance=Distance.from_kilometers(distance_km),
            speed_limit=Speed.from_km_per_hour(speed_kph),
            **kwargs,
        )

    @property
    def cities(self) -> tuple[City, City]:
        return self.city_a, self.city_b

    @property
    def estimated_duration(self) -> Duration:
        """Travel time at the speed limit. Raises for zero-speed segments."""
        return Duration.from_distance_and_speed(
            self.distance.kilometers, self.speed_limit.km_per_hour
        )

    def connects(self, city: City) -> bool:
        return city in (self.city_a, self.city_b)

    def update_speed_limit(self, new_speed_limit: Speed) -> None:
        self.speed_limit = new_speed_limit

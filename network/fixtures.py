"""Reference road network between ten French cities."""

from typing import NamedTuple

from core.city import City
from core.road_segment import RoadSegment
from network.memory import InMemoryRoadNetwork


class RawRoad(NamedTuple):
    from_city: str
    to_city: str
    distance_km: float
    speed_kph: float


CITY_NAMES: tuple[str, ...] = (
    "Lille",
    "Paris",
    "Strasbourg",
    "Lyon",
    "Bordeaux",
    "Toulouse",
    "Marseille",
    "Nice",
    "Nantes",
    "Dijon",
)

# Listed per origin city, so most roads appear once in each direction
ROADS: tuple[RawRoad, ...] = (
    # From Lille
    RawRoad("Lille", "Paris", 225, 130),
    RawRoad("Lille", "Strasbourg", 530, 120),
    # From Paris
    RawRoad("Paris", "Lille", 225, 130),
    RawRoad("Paris", "Strasbourg", 490, 120),
    RawRoad("Paris", "Dijon", 315, 110),
    RawRoad("Paris", "Lyon", 465, 120),
    RawRoad("Paris", "Nantes", 385, 110),
    # From Strasbourg
    RawRoad("Strasbourg", "Paris", 490, 120),
    RawRoad("Strasbourg", "Lille", 530, 120),
    RawRoad("Strasbourg", "Dijon", 330, 110),
    RawRoad("Strasbourg", "Lyon", 490, 110),
    # From Dijon
    RawRoad("Dijon", "Paris", 315, 110),
    RawRoad("Dijon", "Strasbourg", 330, 110),
    RawRoad("Dijon", "Lyon", 195, 110),
    # From Lyon
    RawRoad("Lyon", "Paris", 465, 120),
    RawRoad("Lyon", "Strasbourg", 490, 110),
    RawRoad("Lyon", "Dijon", 195, 110),
    RawRoad("Lyon", "Marseille", 315, 120),
    RawRoad("Lyon", "Nice", 470, 110),
    RawRoad("Lyon", "Toulouse", 540, 110),
    # From Marseille
    RawRoad("Marseille", "Lyon", 315, 120),
    RawRoad("Marseille", "Nice", 205, 110),
    RawRoad("Marseille", "Toulouse", 405, 110),
    # From Nice
    RawRoad("Nice", "Lyon", 470, 110),
    RawRoad("Nice", "Marseille", 205, 110),
    # From Toulouse
    RawRoad("Toulouse", "Lyon", 540, 110),
    RawRoad("Toulouse", "Marseille", 405, 110),
    RawRoad("Toulouse", "Bordeaux", 245, 110),
    # From Bordeaux
    RawRoad("Bordeaux", "Toulouse", 245, 110),
    RawRoad("Bordeaux", "Nantes", 330, 110),
    RawRoad("Bordeaux", "Paris", 580, 120),
    # From Nantes
    RawRoad("Nantes", "Paris", 385, 110),
    RawRoad("Nantes", "Bordeaux", 330, 110),
)


def validate_network(
    city_names: tuple[str, ...] = CITY_NAMES, roads: tuple[RawRoad, ...] = ROADS
) -> None:
    """Check that every road connects two listed cities.

    Raises:
        ValueError: On the first road referencing an unknown city
    """
    known = set(city_names)
    for road in roads:
        if road.from_city not in known or road.to_city not in known:
            raise ValueError(
                f"Invalid road segment: {road.from_city} -> {road.to_city}. "
                "City not found in network."
            )


def build_segments(
    city_names: tuple[str, ...] = CITY_NAMES, roads: tuple[RawRoad, ...] = ROADS
) -> list[RoadSegment]:
    """Create one canonical segment per pair of cities, in first-listed order.

    A reverse listing of an already-seen pair is skipped, since segments are
    bidirectional.
    """
    validate_network(city_names, roads)
    cities = {name: City.create(name) for name in city_names}

    segments: dict[frozenset[str], RoadSegment] = {}
    for road in roads:
        pair = frozenset((road.from_city, road.to_city))
        if pair in segments:
            continue
        segments[pair] = RoadSegment.create(
            cities[road.from_city], cities[road.to_city], road.distance_km, road.speed_kph
        )
    return list(segments.values())


def build_reference_network() -> InMemoryRoadNetwork:
    """Fresh in-memory network of the reference cities and roads."""
    return InMemoryRoadNetwork(build_segments())

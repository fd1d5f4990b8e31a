"""Tests for path reconstruction from search predecessors."""

import pytest

from core.types import CityKey, WeatherCondition
from network.graph.builder import GraphBuilder
from network.graph.segment import Segment
from network.routing.dijkstra import Predecessor, ShortestTimeSearch
from network.routing.reconstructor import PathReconstructor


def seg(from_city: str, to_city: str, distance_km: float, speed_kph: float) -> Segment:
    return Segment.directed(CityKey(from_city), CityKey(to_city), distance_km, speed_kph)


def test_single_step_route() -> None:
    """Test a one-segment route without weather data."""
    segment = seg("Paris", "Lyon", 465, 120)
    previous = {CityKey("Lyon"): Predecessor(CityKey("Paris"), segment)}

    result = PathReconstructor().reconstruct(
        previous, CityKey("Paris"), CityKey("Lyon"), 3.875, {}
    )

    assert result.path == ["Paris", "Lyon"]
    assert result.total_distance_km == 465
    assert result.estimated_time_h == 3.875
    assert len(result.steps) == 1
    step = result.steps[0]
    assert (step.from_city, step.to_city) == ("Paris", "Lyon")
    assert step.distance_km == 465
    assert step.speed_kph == 120
    assert step.travel_time_h == pytest.approx(3.875)
    assert step.weather is None


def test_same_start_and_end() -> None:
    """Test a trivial route has one city and no steps."""
    result = PathReconstructor().reconstruct({}, CityKey("Paris"), CityKey("Paris"), 0.0, {})

    assert result.path == ["Paris"]
    assert result.steps == []
    assert result.total_distance_km == 0
    assert result.estimated_time_h == 0


def test_weather_is_taken_at_arrival_city() -> None:
    """Test each step reports the weather of the city it arrives in."""
    graph = GraphBuilder().build(
        [seg("Paris", "Dijon", 315, 110), seg("Dijon", "Lyon", 195, 110)]
    )
    search = ShortestTimeSearch().execute(graph, CityKey("Paris"), CityKey("Lyon"))
    assert search is not None
    weather = {
        CityKey("Paris"): WeatherCondition.SUNNY,
        CityKey("Dijon"): WeatherCondition.FOG,
    }

    result = PathReconstructor().reconstruct(
        search.previous, CityKey("Paris"), CityKey("Lyon"), search.distances["Lyon"], weather
    )

    assert result.path == ["Paris", "Dijon", "Lyon"]
    assert [step.weather for step in result.steps] == [WeatherCondition.FOG, None]
    assert result.total_distance_km == 510
    assert result.estimated_time_h == search.distances["Lyon"]


def test_recorded_parallel_segment_is_used() -> None:
    """Test the step describes the segment chosen by the search."""
    slow = seg("A", "B", 100, 50)
    fast = seg("A", "B", 120, 120)
    graph = GraphBuilder().build([slow, fast])
    search = ShortestTimeSearch().execute(graph, CityKey("A"), CityKey("B"))
    assert search is not None

    result = PathReconstructor().reconstruct(
        search.previous, CityKey("A"), CityKey("B"), search.distances["B"], {}
    )

    assert result.steps[0].distance_km == 120
    assert result.steps[0].speed_kph == 120
    assert result.estimated_time_h == 1


def test_missing_predecessor_stops_backtracking() -> None:
    """Test reconstruction stops on a broken predecessor chain."""
    previous = {CityKey("C"): Predecessor(CityKey("B"), seg("B", "C", 50, 50))}

    result = PathReconstructor().reconstruct(previous, CityKey("A"), CityKey("C"), 1.0, {})

    assert result.path == ["A", "B", "C"]
    assert len(result.steps) == 1
    assert result.steps[0].from_city == "B"
    assert result.total_distance_km == 50


def test_total_distance_is_sum_of_steps() -> None:
    """Test totals are derived from the steps themselves."""
    graph = GraphBuilder().build(
        [seg("A", "B", 10.1, 100), seg("B", "C", 20.2, 100), seg("C", "D", 30.3, 100)]
    )
    search = ShortestTimeSearch().execute(graph, CityKey("A"), CityKey("D"))
    assert search is not None

    result = PathReconstructor().reconstruct(
        search.previous, CityKey("A"), CityKey("D"), search.distances["D"], {}
    )

    assert result.total_distance_km == sum(step.distance_km for step in result.steps)
    assert result.estimated_time_h == search.distances["D"]

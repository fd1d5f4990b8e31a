"""Tests for the fastest route use case over the reference network."""

import asyncio

import pytest

from core.city import City
from core.errors import (
    CityNotFoundError,
    InvalidCityNameError,
    InvalidWeatherConditionError,
    RouteTimeoutError,
    SameStartAndEndCityError,
)
from core.types import WeatherCondition
from network.fixtures import build_reference_network
from network.memory import StaticWeatherProvider
from network.routing.engine import PathfindingEngine
from planner.dto import FastestRouteRequest, RouteConstraintsDTO
from planner.use_case import GetFastestRoute


class SlowWeatherProvider:
    """Provider that takes longer than any reasonable timeout."""

    async def for_city(self, city: City) -> WeatherCondition:
        await asyncio.sleep(5)
        return WeatherCondition.SUNNY


def make_use_case(
    conditions: dict[str, str] | None = None, timeout_s: float | None = None
) -> GetFastestRoute:
    network = build_reference_network()
    provider = StaticWeatherProvider(conditions, default=WeatherCondition.SUNNY)
    return GetFastestRoute(
        engine=PathfindingEngine(provider),
        segment_source=network,
        city_source=network,
        timeout_s=timeout_s,
    )


@pytest.mark.asyncio
async def test_paris_to_marseille() -> None:
    """Test the unconstrained route goes through Lyon."""
    response = await make_use_case().execute(
        FastestRouteRequest(start_city="Paris", end_city="Marseille")
    )

    assert response.path == ["Paris", "Lyon", "Marseille"]
    assert response.total_distance_km == 780
    assert response.estimated_time_hours == 6.5
    assert [step.weather for step in response.steps] == ["sunny", "sunny"]


@pytest.mark.asyncio
async def test_rain_in_lyon_reroutes_through_bordeaux() -> None:
    """Test excluding rain avoids Lyon entirely."""
    request = FastestRouteRequest(
        start_city="Paris",
        end_city="Marseille",
        constraints=RouteConstraintsDTO(exclude_weather_conditions=["rain"]),
    )

    response = await make_use_case({"Lyon": "rain"}).execute(request)

    assert response.path == ["Paris", "Bordeaux", "Toulouse", "Marseille"]
    assert response.total_distance_km == 1230
    assert response.estimated_time_hours == 10.7
    assert "Lyon" not in response.path


@pytest.mark.asyncio
async def test_distance_bound_on_reference_network() -> None:
    """Test every step respects the distance bound."""
    request = FastestRouteRequest(
        start_city="Paris",
        end_city="Lyon",
        constraints=RouteConstraintsDTO(max_distance=400),
    )

    response = await make_use_case().execute(request)

    assert response.path == ["Paris", "Dijon", "Lyon"]
    assert all(step.distance_km <= 400 for step in response.steps)


@pytest.mark.asyncio
async def test_unreachable_returns_empty_response() -> None:
    """Test an impossible constraint yields an empty response."""
    request = FastestRouteRequest(
        start_city="Lille",
        end_city="Nice",
        constraints=RouteConstraintsDTO(min_speed_limit=200),
    )

    response = await make_use_case().execute(request)

    assert not response.found
    assert response.steps == []


@pytest.mark.asyncio
async def test_same_start_and_end_rejected() -> None:
    """Test identical cities are refused before any lookup."""
    with pytest.raises(SameStartAndEndCityError):
        await make_use_case().execute(FastestRouteRequest(start_city="Paris", end_city="Paris"))


@pytest.mark.asyncio
async def test_unknown_city_rejected() -> None:
    """Test cities outside the network raise CityNotFoundError."""
    with pytest.raises(CityNotFoundError, match="Brest"):
        await make_use_case().execute(FastestRouteRequest(start_city="Paris", end_city="Brest"))


@pytest.mark.asyncio
async def test_invalid_city_name_rejected() -> None:
    """Test malformed names raise InvalidCityNameError."""
    with pytest.raises(InvalidCityNameError):
        await make_use_case().execute(FastestRouteRequest(start_city="paris", end_city="Lyon"))


@pytest.mark.asyncio
async def test_invalid_weather_constraint_rejected() -> None:
    """Test unknown weather names raise InvalidWeatherConditionError."""
    request = FastestRouteRequest(
        start_city="Paris",
        end_city="Lyon",
        constraints=RouteConstraintsDTO(exclude_weather_conditions=["hail"]),
    )
    with pytest.raises(InvalidWeatherConditionError):
        await make_use_case().execute(request)


@pytest.mark.asyncio
async def test_timeout_wraps_engine_call() -> None:
    """Test a slow weather provider trips the caller-level timeout."""
    network = build_reference_network()
    use_case = GetFastestRoute(
        engine=PathfindingEngine(SlowWeatherProvider()),
        segment_source=network,
        city_source=network,
        timeout_s=0.05,
    )

    with pytest.raises(RouteTimeoutError):
        await use_case.execute(FastestRouteRequest(start_city="Paris", end_city="Lyon"))


def test_timeout_must_be_positive() -> None:
    """Test invalid timeouts are rejected at construction."""
    with pytest.raises(ValueError):
        make_use_case(timeout_s=0)

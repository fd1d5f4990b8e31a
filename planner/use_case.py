"""Fastest route use case: resolves cities, loads the network, runs the engine."""

import asyncio
import logging

from core.city import City, CityId, CityName
from core.constraints import RouteConstraints
from core.errors import RouteTimeoutError, SameStartAndEndCityError
from core.road_segment import RoadSegment
from network.routing.engine import PathfindingEngine, PathfindingResult
from network.routing.protocols import CitySource, RoadSegmentSource
from planner.dto import FastestRouteRequest, FastestRouteResponse

logger = logging.getLogger(__name__)


class GetFastestRoute:
    """Answers a FastestRouteRequest against the current road network."""

    def __init__(
        self,
        engine: PathfindingEngine,
        segment_source: RoadSegmentSource,
        city_source: CitySource,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            engine: Route engine, owning the weather provider
            segment_source: Supplies the road segments of each query
            city_source: Resolves city names
            timeout_s: Upper bound on the whole engine call, None for no limit
        """
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError("timeout_s must be a positive number")
        self.engine = engine
        self.segment_source = segment_source
        self.city_source = city_source
        self.timeout_s = timeout_s

    async def execute(self, request: FastestRouteRequest) -> FastestRouteResponse:
        """Compute the fastest route for a request.

        Raises:
            InvalidCityNameError: If a city name is malformed
            SameStartAndEndCityError: If both names designate the same city
            CityNotFoundError: If a city is not part of the network
            InvalidWeatherConditionError: If a constraint names an unknown condition
            RouteTimeoutError: If the engine does not answer within timeout_s
        """
        start_name = CityName.create(request.start_city)
        end_name = CityName.create(request.end_city)
        if CityId.from_city_name(start_name.value) == CityId.from_city_name(end_name.value):
            raise SameStartAndEndCityError.for_city_name(start_name.value)

        constraints = request.constraints.to_domain() if request.constraints else None

        start_city, end_city = await asyncio.gather(
            self.city_source.find_by_name(start_name),
            self.city_source.find_by_name(end_name),
        )
        segments = await self.segment_source.find_all()

        result = await self._find_route(segments, start_city, end_city, constraints)
        if result is None:
            logger.info(f"No route found between {start_city} and {end_city}")
        else:
            logger.info(
                f"Route {' -> '.join(result.path_names)}: "
                f"{result.total_distance}, {result.estimated_time}"
            )

        return FastestRouteResponse.from_result(result)

    async def _find_route(
        self,
        segments: list[RoadSegment],
        start_city: City,
        end_city: City,
        constraints: RouteConstraints | None,
    ) -> PathfindingResult | None:
        call = self.engine.find_fastest_route(segments, start_city, end_city, constraints)
        if self.timeout_s is None:
            return await call

        try:
            return await asyncio.wait_for(call, timeout=self.timeout_s)
        except asyncio.TimeoutError as e:
            raise RouteTimeoutError.after(self.timeout_s) from e

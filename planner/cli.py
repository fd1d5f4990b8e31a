"""Command-line entry point computing a route over the reference network."""

import argparse
import asyncio
import logging
import sys

import orjson
from pydantic import ValidationError

from core.errors import DomainError
from core.types import WeatherCondition
from network.fixtures import build_reference_network
from network.memory import StaticWeatherProvider
from network.routing.engine import PathfindingEngine
from planner.dto import FastestRouteRequest, FastestRouteResponse, RouteConstraintsDTO
from planner.logging_setup import configure_logging
from planner.use_case import GetFastestRoute

logger = logging.getLogger(__name__)


def parse_weather_assignment(value: str) -> tuple[str, str]:
    """Parse a ``CITY=CONDITION`` argument."""
    city, separator, condition = value.partition("=")
    if not separator or not city.strip() or not condition.strip():
        raise argparse.ArgumentTypeError(f"Expected CITY=CONDITION, got {value!r}")
    return city.strip(), condition.strip().lower()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weather-aware fastest route finder")
    parser.add_argument("--from", dest="start_city", required=True, help="Departure city")
    parser.add_argument("--to", dest="end_city", required=True, help="Arrival city")
    parser.add_argument(
        "--exclude-weather",
        action="append",
        choices=WeatherCondition.values(),
        help="Weather to avoid at arrival cities (repeatable)",
    )
    parser.add_argument("--max-distance", type=float, help="Maximum segment length in km")
    parser.add_argument("--min-speed", type=float, help="Minimum segment speed limit in km/h")
    parser.add_argument(
        "--weather",
        action="append",
        type=parse_weather_assignment,
        default=[],
        metavar="CITY=CONDITION",
        help="Current weather of a city (repeatable)",
    )
    parser.add_argument(
        "--default-weather",
        default=WeatherCondition.SUNNY.value,
        choices=WeatherCondition.values(),
        help="Weather of cities without a --weather entry",
    )
    parser.add_argument("--timeout", type=float, help="Timeout for the route computation (s)")
    parser.add_argument("--log-level", default="WARNING", help="Log level")
    return parser


def build_request(args: argparse.Namespace) -> FastestRouteRequest:
    constraints = None
    if args.exclude_weather or args.max_distance is not None or args.min_speed is not None:
        constraints = RouteConstraintsDTO(
            exclude_weather_conditions=args.exclude_weather,
            max_distance=args.max_distance,
            min_speed_limit=args.min_speed,
        )
    return FastestRouteRequest(
        start_city=args.start_city, end_city=args.end_city, constraints=constraints
    )


async def run(args: argparse.Namespace) -> FastestRouteResponse:
    network = build_reference_network()
    weather_provider = StaticWeatherProvider(
        conditions=dict(args.weather), default=args.default_weather
    )
    use_case = GetFastestRoute(
        engine=PathfindingEngine(weather_provider),
        segment_source=network,
        city_source=network,
        timeout_s=args.timeout,
    )
    return await use_case.execute(build_request(args))


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Prints the route as JSON and returns the exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        response = asyncio.run(run(args))
    except (DomainError, ValidationError) as e:
        logger.error(f"Route request failed: {e}")
        return 1

    sys.stdout.write(orjson.dumps(response.model_dump(), option=orjson.OPT_INDENT_2).decode())
    sys.stdout.write("\n")
    return 0 if response.found else 2


if __name__ == "__main__":
    sys.exit(main())

"""Application layer: request DTOs, the fastest-route use case and the CLI."""

from .dto import FastestRouteRequest, FastestRouteResponse, RouteConstraintsDTO, RouteStepDTO
from .use_case import GetFastestRoute

__all__ = [
    "FastestRouteRequest",
    "FastestRouteResponse",
    "GetFastestRoute",
    "RouteConstraintsDTO",
    "RouteStepDTO",
]

"""Constraint filtering, shortest-time search and route reconstruction."""

from .dijkstra import Predecessor, SearchResult, ShortestTimeSearch
from .engine import PathfindingEngine, PathfindingResult, RouteStep
from .filter import ConstraintFilter, SegmentConstraints
from .reconstructor import PathReconstructor

__all__ = [
    "ConstraintFilter",
    "PathReconstructor",
    "PathfindingEngine",
    "PathfindingResult",
    "Predecessor",
    "RouteStep",
    "SearchResult",
    "SegmentConstraints",
    "ShortestTimeSearch",
]

"""Shortest-travel-time search over a filtered road graph."""

import heapq
import math
from dataclasses import dataclass, field

from core.types import CityKey
from network.graph.builder import extract_all_cities
from network.graph.graph import Graph
from network.graph.segment import Segment

INFINITE_DISTANCE = math.inf
INITIAL_DISTANCE = 0.0


@dataclass(frozen=True)
class Predecessor:
    """How the search reached a city: the previous city and the exact segment used."""

    city: CityKey
    segment: Segment


@dataclass
class SearchState:
    """Mutable state of a single search. Discarded once the query returns."""

    distances: dict[CityKey, float] = field(default_factory=dict)
    previous: dict[CityKey, Predecessor] = field(default_factory=dict)
    unvisited: set[CityKey] = field(default_factory=set)
    # Position of each city in first-encountered order, used to break ties
    seed_order: dict[CityKey, int] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchResult:
    """Final distances (hours) and predecessors of a successful search."""

    distances: dict[CityKey, float]
    previous: dict[CityKey, Predecessor]

    def total_time(self, city: CityKey) -> float:
        return self.distances.get(city, INITIAL_DISTANCE)


class ShortestTimeSearch:
    """Dijkstra search minimizing cumulative travel time.

    Selection order is identical to a linear scan of the unvisited cities that
    keeps the first strictly-smaller distance: the unvisited city with the lowest
    distance wins, ties going to the city seen first by ``extract_all_cities``.
    A binary heap keyed on ``(distance, seed_order)`` with lazy deletion gives
    that order in O(E log V).
    """

    def execute(self, graph: Graph, start_city: CityKey, end_city: CityKey) -> SearchResult | None:
        """Run the search from start_city, stopping once end_city is finalized.

        Args:
            graph: Graph of admitted segments
            start_city: City the route starts from
            end_city: City the route must reach

        Returns:
            SearchResult if end_city is reachable (or equals start_city),
            None otherwise.

        Notes:
            - Relaxation uses plain float ``<`` with no epsilon
            - Among parallel segments of equal duration, the first in the
              outbound list is kept
        """
        state = self._initialize(graph, start_city)
        self._run(graph, end_city, state)

        if not self._path_exists(state, start_city, end_city):
            return None

        return SearchResult(distances=state.distances, previous=state.previous)

    def _initialize(self, graph: Graph, start_city: CityKey) -> SearchState:
        state = SearchState()
        cities = extract_all_cities(graph)
        if start_city not in cities:
            cities.append(start_city)

        for order, city in enumerate(cities):
            state.distances[city] = INITIAL_DISTANCE if city == start_city else INFINITE_DISTANCE
            state.unvisited.add(city)
            state.seed_order[city] = order

        return state

    def _run(self, graph: Graph, end_city: CityKey, state: SearchState) -> None:
        # Priority queue: (distance, seed_order, city)
        open_set: list[tuple[float, int, CityKey]] = [
            (distance, state.seed_order[city], city)
            for city, distance in state.distances.items()
            if distance != INFINITE_DISTANCE
        ]
        heapq.heapify(open_set)

        while open_set:
            current_distance, _, current = heapq.heappop(open_set)

            # Stale entry: city already finalized or reached more cheaply since
            if current not in state.unvisited or current_distance != state.distances[current]:
                continue

            if current == end_city:
                break

            state.unvisited.discard(current)
            self._relax_neighbors(graph, current, state, open_set)

    def _relax_neighbors(
        self,
        graph: Graph,
        current: CityKey,
        state: SearchState,
        open_set: list[tuple[float, int, CityKey]],
    ) -> None:
        current_distance = state.distances[current]
        for segment in graph.get_outgoing_segments(current):
            neighbor = segment.to_city
            if neighbor not in state.unvisited:
                continue

            tentative = current_distance + segment.duration_h
            if tentative < state.distances[neighbor]:
                state.distances[neighbor] = tentative
                state.previous[neighbor] = Predecessor(city=current, segment=segment)
                heapq.heappush(open_set, (tentative, state.seed_order[neighbor], neighbor))

    @staticmethod
    def _path_exists(state: SearchState, start_city: CityKey, end_city: CityKey) -> bool:
        return end_city in state.previous or start_city == end_city

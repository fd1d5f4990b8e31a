from collections.abc import Iterable

from core.types import CityKey
from network.graph.graph import Graph
from network.graph.segment import Segment


class GraphBuilder:
    """Turns a flat segment list into a Graph."""

    def build(self, segments: Iterable[Segment]) -> Graph:
        """Group segments by origin city.

        Outbound lists keep the input order, which the search relies on to
        break ties between parallel segments deterministically.
        """
        graph = Graph()
        for segment in segments:
            graph.add_segment(segment)
        return graph


def extract_all_cities(graph: Graph) -> list[CityKey]:
    """Every origin and destination city in the graph, first-encountered order.

    Origins are visited in insertion order, each followed by the destinations
    of its outbound segments. Cities without outgoing segments are included.
    """
    seen: dict[CityKey, None] = {}
    for origin in graph.origins():
        seen.setdefault(origin, None)
        for segment in graph.get_outgoing_segments(origin):
            seen.setdefault(segment.to_city, None)
    return list(seen)

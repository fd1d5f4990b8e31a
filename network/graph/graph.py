from collections.abc import Iterator

from core.types import CityKey
from network.graph.segment import Segment


class Graph:
    """Adjacency structure mapping each city to its outbound segments.

    A graph is built for a single query from an already-filtered segment list
    and is never shared between queries.
    """

    def __init__(self) -> None:
        self.out_adj: dict[CityKey, list[Segment]] = {}  # city -> outgoing segments

    def add_segment(self, segment: Segment) -> None:
        """Append a segment to its origin's outbound list, keeping insertion order."""
        self.out_adj.setdefault(segment.from_city, []).append(segment)

    def get_outgoing_segments(self, city: CityKey) -> list[Segment]:
        """Get all outgoing segments from a city (empty for sinks and unknown cities)."""
        return self.out_adj.get(city, [])

    def origins(self) -> Iterator[CityKey]:
        """Cities with at least one outgoing segment, in insertion order."""
        return iter(self.out_adj)

    def get_segment_count(self) -> int:
        return sum(len(segments) for segments in self.out_adj.values())

    def __str__(self) -> str:
        return f"Graph(origins={len(self.out_adj)}, segments={self.get_segment_count()})"

    def __repr__(self) -> str:
        return f"Graph(out_adj={self.out_adj!r})"

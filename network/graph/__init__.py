from network.graph.builder import GraphBuilder, extract_all_cities
from network.graph.graph import Graph
from network.graph.segment import Segment

__all__ = ["Graph", "GraphBuilder", "Segment", "extract_all_cities"]

"""Domain values of the road network: cities, segments, measures and constraints."""

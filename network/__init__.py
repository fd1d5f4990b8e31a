"""Road network and weather-aware fastest-route search."""

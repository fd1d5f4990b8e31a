import logging
from collections.abc import Mapping
from dataclasses import dataclass

from core.types import CityKey, WeatherCondition
from network.graph.segment import Segment
from network.routing.criteria import (
    ArrivalWeatherCriteria,
    CompositeCriteria,
    MaxDistanceCriteria,
    MinSpeedCriteria,
    SegmentCriteria,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentConstraints:
    """Plain-number constraints consumed by the filter. None means unrestricted."""

    max_distance_km: float | None = None
    min_speed_kph: float | None = None
    exclude_weather_conditions: tuple[WeatherCondition, ...] | None = None


class ConstraintFilter:
    """Removes segments that violate distance, speed or arrival weather rules."""

    def filter(
        self,
        segments: list[Segment],
        weather_by_city: Mapping[CityKey, WeatherCondition],
        constraints: SegmentConstraints | None = None,
    ) -> list[Segment]:
        """Keep the segments satisfying every active constraint, in input order.

        Args:
            segments: Directed segments of the network
            weather_by_city: Weather recorded per city
            constraints: Active constraints, None to keep every segment

        Returns:
            The admitted segments. Without constraints, the input list itself.
        """
        if constraints is None:
            return segments

        criteria = self.criteria_for(constraints, weather_by_city)
        if not len(criteria):
            return list(segments)

        admitted = [segment for segment in segments if criteria.admits(segment)]
        logger.debug(f"Constraint filter kept {len(admitted)}/{len(segments)} segments")
        return admitted

    @staticmethod
    def criteria_for(
        constraints: SegmentConstraints,
        weather_by_city: Mapping[CityKey, WeatherCondition],
    ) -> CompositeCriteria:
        """Translate constraints into one criteria per active field, all required."""
        criteria_list: list[SegmentCriteria] = []
        if constraints.max_distance_km is not None:
            criteria_list.append(MaxDistanceCriteria(constraints.max_distance_km))
        if constraints.min_speed_kph is not None:
            criteria_list.append(MinSpeedCriteria(constraints.min_speed_kph))
        if constraints.exclude_weather_conditions:
            criteria_list.append(
                ArrivalWeatherCriteria(
                    set(constraints.exclude_weather_conditions), weather_by_city
                )
            )
        return CompositeCriteria(criteria_list)

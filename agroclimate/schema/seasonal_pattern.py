"""SeasonalPattern Schema"""

from dataclasses import dataclass, field
from typing import List, Optional

from .weather_observation import WeatherObservation


@dataclass(frozen=True)
class VariableStatistics:
    """
    Aggregated statistics of one weather variable over a season.

    Attributes:
        mean (float): Arithmetic mean.
        std (float): Population standard deviation, never negative.
        trend (float): Least-squares slope against observation index.
    """

    mean: float
    std: float
    trend: float


@dataclass(frozen=True)
class Anomaly:
    """
    An observation whose value lies too far from the seasonal mean.

    Attributes:
        observation (WeatherObservation): The offending observation.
        variable (str): Name of the variable that deviated.
        value (float): The observed value.
        deviation (float): Distance from the mean, in standard deviations.
    """

    observation: WeatherObservation
    variable: str
    value: float
    deviation: float


@dataclass
class SeasonalPattern:
    """
    Seasonal statistics for one location, recomputed on every request.

    When fewer observations than the configured minimum are available,
    ``insufficient_data`` is True and every statistic is None.

    Attributes:
        location_id (str): Identifier of the location.
        season (str): Name of the season window.
        sample_count (int): Number of observations the pattern was built from.
        insufficient_data (bool): True when there were too few observations.
        temperature (VariableStatistics, optional): Temperature statistics.
        humidity (VariableStatistics, optional): Humidity statistics.
        precipitation (VariableStatistics, optional): Precipitation statistics.
        total_precipitation (float, optional): Sum of precipitation.
        pattern_type (str, optional): Coarse classification, e.g. "hot_dry".
        summary (str): One-line human readable summary.
        anomalies (list): Detected Anomaly entries.
    """

    location_id: Optional[str]
    season: str
    sample_count: int
    insufficient_data: bool
    temperature: Optional[VariableStatistics] = None
    humidity: Optional[VariableStatistics] = None
    precipitation: Optional[VariableStatistics] = None
    total_precipitation: Optional[float] = None
    pattern_type: Optional[str] = None
    summary: str = ""
    anomalies: List[Anomaly] = field(default_factory=list)

    def statistics_for(self, variable: str) -> Optional[VariableStatistics]:
        """Return the statistics of a tracked variable by name."""
        return getattr(self, variable)

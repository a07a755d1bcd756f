"""
Seasonal pattern analysis of historical weather observations.
"""

import calendar
import logging
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.schema import (
    Anomaly,
    SeasonalPattern,
    SeasonWindow,
    VariableStatistics,
    WeatherObservation,
)
from agroclimate.seasons import SEASONS, filter_by_season, season_for_date

TRACKED_VARIABLES = ("temperature", "humidity", "precipitation")


def is_anomaly(value: float, mean: float, std: float, multiplier: float) -> bool:
    """
    Whether ``value`` lies more than ``multiplier`` standard deviations
    away from ``mean``. A zero spread never produces anomalies.
    """
    if std <= 0:
        return False
    return abs(value - mean) > multiplier * std


def classify_pattern(mean_temperature: float, total_precipitation: float) -> str:
    """Coarse hot/cool, wet/dry label of a season."""
    if mean_temperature > 25 and total_precipitation > 100:
        return "hot_wet"
    if mean_temperature > 25 and total_precipitation < 50:
        return "hot_dry"
    if mean_temperature < 15 and total_precipitation > 100:
        return "cool_wet"
    if mean_temperature < 15 and total_precipitation < 50:
        return "cool_dry"
    return "moderate"


class PatternAnalyzer:
    """
    Builds a SeasonalPattern from the observations of one season window.

    Observations are expected in chronological order; the trend is the
    least-squares slope against their position in the list.
    """

    def __init__(
        self,
        observations: Iterable[WeatherObservation],
        season: SeasonWindow,
        config: EngineConfig = DEFAULT_CONFIG,
    ):
        """
        Args:
            observations (Iterable[WeatherObservation]): Readings already
                filtered to the season window, oldest first.
            season (SeasonWindow): The season the readings belong to.
            config (EngineConfig): Sample threshold and anomaly multiplier.
        """
        self.observations = list(observations)
        self.season = season
        self.config = config
        self.records = pd.DataFrame(
            [
                {
                    "temperature": obs.temperature,
                    "humidity": obs.humidity,
                    "precipitation": obs.precipitation,
                }
                for obs in self.observations
            ],
            columns=list(TRACKED_VARIABLES),
            dtype=float,
        )

    @property
    def location_id(self) -> Optional[str]:
        if not self.observations:
            return None
        return self.observations[0].location_id

    def run(self) -> SeasonalPattern:
        """
        Compute the seasonal pattern.

        Returns:
            SeasonalPattern: Full statistics, or a pattern flagged with
            ``insufficient_data`` when there are too few observations.
        """
        if len(self.records) < self.config.min_samples:
            logging.warning(
                "Only %d observations for %s at %s, %d needed. Skipping statistics.",
                len(self.records),
                self.season.name,
                self.location_id,
                self.config.min_samples,
            )
            return SeasonalPattern(
                location_id=self.location_id,
                season=self.season.name,
                sample_count=len(self.records),
                insufficient_data=True,
                summary=f"{self.season.name}: insufficient data",
            )

        statistics = {
            variable: self.calculate_statistics(variable)
            for variable in TRACKED_VARIABLES
        }

        anomalies = []
        for variable in TRACKED_VARIABLES:
            anomalies.extend(self.detect_anomalies(variable, statistics[variable]))

        total_precipitation = float(self.records["precipitation"].sum())

        return SeasonalPattern(
            location_id=self.location_id,
            season=self.season.name,
            sample_count=len(self.records),
            insufficient_data=False,
            temperature=statistics["temperature"],
            humidity=statistics["humidity"],
            precipitation=statistics["precipitation"],
            total_precipitation=total_precipitation,
            pattern_type=classify_pattern(
                statistics["temperature"].mean, total_precipitation
            ),
            summary=self.summarize(total_precipitation),
            anomalies=anomalies,
        )

    def calculate_statistics(self, variable: str) -> VariableStatistics:
        """
        Mean, population standard deviation and trend of one variable.
        """
        series = self.records[variable]
        return VariableStatistics(
            mean=float(series.mean()),
            std=float(series.std(ddof=0)),
            trend=self.calculate_trend(variable),
        )

    def calculate_trend(self, variable: str) -> float:
        """
        Ordinary least-squares slope of the variable against observation index.
        Positive values mean warming, wetting or more humid.
        """
        y = self.records[variable].to_numpy(dtype=float)
        if len(y) < 2:
            return 0.0

        x = np.arange(len(y), dtype=float)
        x_centered = x - x.mean()
        return float(np.sum(x_centered * (y - y.mean())) / np.sum(x_centered**2))

    def detect_anomalies(
        self, variable: str, statistics: VariableStatistics
    ) -> List[Anomaly]:
        """
        Observations of ``variable`` further than the configured multiplier
        of standard deviations from the seasonal mean.
        """
        anomalies = []
        for observation, value in zip(self.observations, self.records[variable]):
            if not is_anomaly(
                value,
                statistics.mean,
                statistics.std,
                self.config.anomaly_multiplier,
            ):
                continue

            anomalies.append(
                Anomaly(
                    observation=observation,
                    variable=variable,
                    value=float(value),
                    deviation=abs(value - statistics.mean) / statistics.std,
                )
            )
            logging.debug(
                "Anomalous %s %.2f at %s", variable, value, observation.timestamp
            )
        return anomalies

    def summarize(self, total_precipitation: float) -> str:
        temperature = self.records["temperature"]
        return (
            f"{self.season.name}: Avg {temperature.mean():.1f}°C "
            f"({temperature.min():.1f}-{temperature.max():.1f}°C), "
            f"Precip {total_precipitation:.1f}mm, "
            f"Humidity {self.records['humidity'].mean():.1f}%"
        )


def analyze(
    observations: Iterable[WeatherObservation],
    season: SeasonWindow,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SeasonalPattern:
    """
    Derive the seasonal pattern of observations already filtered to ``season``.

    Args:
        observations (Iterable[WeatherObservation]): Chronological readings.
        season (SeasonWindow): Season the readings belong to.
        config (EngineConfig, optional): Analyzer thresholds.

    Returns:
        SeasonalPattern: The aggregated pattern.
    """
    return PatternAnalyzer(observations, season, config).run()


def analyze_seasons(
    observations: Iterable[WeatherObservation],
    seasons: Iterable[SeasonWindow] = SEASONS,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Dict[str, SeasonalPattern]:
    """
    Split a chronological series into season windows and analyze each one.

    Returns:
        dict: Season name to SeasonalPattern, for every season given.
    """
    observations = list(observations)
    return {
        season.name: analyze(filter_by_season(observations, season), season, config)
        for season in seasons
    }


def month_window(month: int) -> SeasonWindow:
    """A single calendar month, radiating like the season it falls in."""
    return SeasonWindow(
        name=calendar.month_name[month],
        months=(month,),
        solar_radiation=season_for_date(date(2000, month, 1)).solar_radiation,
    )


def analyze_months(
    observations: Iterable[WeatherObservation],
    config: EngineConfig = DEFAULT_CONFIG,
) -> Dict[str, SeasonalPattern]:
    """
    Analyze each calendar month of a chronological series on its own.

    Months with fewer than ``config.min_monthly_samples`` observations are
    left out.

    Returns:
        dict: Month name ("January" ... "December") to SeasonalPattern,
        in calendar order.
    """
    observations = list(observations)
    monthly_config = replace(config, min_samples=config.min_monthly_samples)

    patterns = {}
    for month in range(1, 13):
        window = month_window(month)
        month_observations = filter_by_season(observations, window)
        if len(month_observations) < config.min_monthly_samples:
            continue
        patterns[window.name] = PatternAnalyzer(
            month_observations, window, monthly_config
        ).run()
    return patterns

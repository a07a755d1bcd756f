"""
Forward estimate of the weather variables and evapotranspiration.
"""

from dataclasses import dataclass

import numpy as np

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.schema import SeasonalPattern, SeasonWindow, WeatherObservation


@dataclass(frozen=True)
class ForecastEstimate:
    """Predicted temperature (°C), humidity (%) and precipitation (mm)."""

    temperature: float
    humidity: float
    precipitation: float


# Projections are bounded to physical ranges; the current value is not.
_PROJECTION_BOUNDS = {
    "temperature": (None, None),
    "humidity": (0.0, 100.0),
    "precipitation": (0.0, None),
}


def estimate_conditions(
    pattern: SeasonalPattern,
    current: WeatherObservation,
    horizon_days: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ForecastEstimate:
    """
    Project each variable ``horizon_days`` ahead along its seasonal trend and
    blend the projection with the current observation.

    A pattern built from insufficient data yields the current values as-is.
    """
    if pattern.insufficient_data:
        return ForecastEstimate(
            temperature=current.temperature,
            humidity=current.humidity,
            precipitation=current.precipitation,
        )

    weight = config.seasonal_weight
    estimate = {}
    for variable, (lower, upper) in _PROJECTION_BOUNDS.items():
        statistics = pattern.statistics_for(variable)
        projection = statistics.mean + statistics.trend * horizon_days
        if lower is not None or upper is not None:
            projection = float(np.clip(projection, lower, upper))
        estimate[variable] = (
            weight * projection + (1 - weight) * getattr(current, variable)
        )

    return ForecastEstimate(**estimate)


def estimate_evapotranspiration(
    estimate: ForecastEstimate, season: SeasonWindow
) -> float:
    """
    Radiation-driven evapotranspiration proxy in mm/day.

    Uses the Hargreaves temperature term with the season's radiation constant
    and damps it as the air approaches saturation. Never negative.
    """
    radiation_term = 0.0135 * (estimate.temperature + 17.8) * season.solar_radiation
    humidity_factor = 1.0 - 0.5 * estimate.humidity / 100.0
    return max(0.0, radiation_term * humidity_factor)

"""
Yield percentage estimate for the recommended crop.
"""

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.schema import CropProfile
from .forecast import ForecastEstimate


def range_adjustment(value: float, optimal_range: tuple, weight: float) -> float:
    """
    ``+weight`` at the range midpoint, 0 at its edges and ``-weight`` from one
    full range width outside the midpoint onwards.
    """
    low, high = optimal_range
    midpoint = (low + high) / 2
    half_width = (high - low) / 2
    if half_width <= 0:
        return weight if value == midpoint else -weight
    distance = min(abs(value - midpoint) / half_width, 2.0)
    return weight * (1.0 - distance)


def precipitation_adjustment(
    precipitation: float, crop: CropProfile, weight: float
) -> float:
    """
    ``-weight`` without rain, rising linearly to ``+weight`` once rain
    reaches 80% of the crop's daily need.
    """
    ratio = max(precipitation, 0.0) / crop.water_requirement.daily_need
    return -weight + 2 * weight * min(ratio / 0.8, 1.0)


def predict_yield(
    estimate: ForecastEstimate,
    crop: CropProfile,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Baseline yield adjusted by temperature, humidity and rainfall,
    clamped to [0, 100].
    """
    expected = config.baseline_yield
    expected += range_adjustment(
        estimate.temperature, crop.optimal_temperature, config.temperature_yield_weight
    )
    expected += range_adjustment(
        estimate.humidity, crop.optimal_humidity, config.humidity_yield_weight
    )
    expected += precipitation_adjustment(
        estimate.precipitation, crop, config.precipitation_yield_weight
    )
    return min(100.0, max(0.0, expected))

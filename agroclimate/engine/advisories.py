"""
Farmer-facing advice and condition summaries attached to a prediction.
"""

from typing import Optional

from agroclimate.schema import CropProfile, SeasonalPattern, WeatherObservation
from .forecast import ForecastEstimate

STABLE_TREND = 0.05


def estimate_soil_moisture(
    estimate: ForecastEstimate, current: WeatherObservation
) -> float:
    """Measured soil moisture when available, otherwise a rain/humidity proxy."""
    if current.soil_moisture is not None:
        return current.soil_moisture
    return min(100.0, max(0.0, estimate.precipitation * 2 + estimate.humidity * 0.3))


def irrigation_advice(soil_moisture: float, estimate: ForecastEstimate) -> str:
    if soil_moisture < 30:
        return "Immediate irrigation required - soil moisture critically low"
    if soil_moisture < 50:
        return "Irrigation recommended within 24 hours"
    if estimate.precipitation > 5:
        return "No irrigation needed - sufficient rainfall expected"
    return "Monitor soil moisture - irrigation may be needed soon"


def planting_advice(estimate: ForecastEstimate, crop: CropProfile) -> str:
    low, high = crop.optimal_temperature
    if low <= estimate.temperature <= high and estimate.precipitation > 2:
        return f"Optimal conditions for planting {crop.name}"
    if estimate.temperature < low:
        return f"Wait for warmer temperatures before planting {crop.name}"
    if estimate.precipitation < 1:
        return f"Ensure adequate irrigation before planting {crop.name}"
    return f"Conditions are suitable for planting {crop.name} with proper preparation"


def harvesting_advice(estimate: ForecastEstimate) -> str:
    if estimate.precipitation > 10:
        return "Delay harvesting due to expected heavy rainfall"
    if estimate.temperature > 30:
        return "Harvest early morning to avoid heat stress"
    return "Good conditions for harvesting"


def soil_conditions(
    soil_moisture: float,
    estimate: ForecastEstimate,
    current: WeatherObservation,
    crop: CropProfile,
) -> dict:
    ph_suitable = None
    if current.soil_ph is not None:
        ph_suitable = crop.soil_ph[0] <= current.soil_ph <= crop.soil_ph[1]

    return {
        "moisture_level": soil_moisture,
        "temperature": estimate.temperature,
        "ph_level": current.soil_ph,
        "ph_suitable": ph_suitable,
        "nutrient_status": "good" if soil_moisture > 50 else "poor",
        "drainage": "poor" if soil_moisture > 80 else "good",
    }


def trend_label(trend: Optional[float]) -> Optional[str]:
    if trend is None:
        return None
    if trend > STABLE_TREND:
        return "increasing"
    if trend < -STABLE_TREND:
        return "decreasing"
    return "stable"


def climate_indicators(pattern: SeasonalPattern, estimate: ForecastEstimate) -> dict:
    """
    Trend direction per variable and how far the predicted temperature sits
    from the seasonal mean, in standard deviations.
    """
    indicators = {}
    for variable in ("temperature", "humidity", "precipitation"):
        statistics = pattern.statistics_for(variable)
        indicators[f"{variable}_trend"] = trend_label(
            statistics.trend if statistics else None
        )

    deviation = None
    if pattern.temperature is not None and pattern.temperature.std > 0:
        deviation = (
            estimate.temperature - pattern.temperature.mean
        ) / pattern.temperature.std

    indicators["seasonal_deviation"] = deviation
    indicators["anomaly_count"] = len(pattern.anomalies)
    indicators["pattern_type"] = pattern.pattern_type
    return indicators

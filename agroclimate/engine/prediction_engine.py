"""
Prediction and risk engine: turns a seasonal pattern and the current
observation into an agro-climatic prediction.
"""

import logging
from datetime import timedelta
from typing import Sequence

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.errors import PreconditionError
from agroclimate.schema import (
    AgroClimaticPrediction,
    CropProfile,
    SeasonalPattern,
    WeatherObservation,
)
from agroclimate.seasons import season_for_date
from . import advisories
from .alerts import generate_alerts
from .crop_scoring import recommend_crop, score_crops
from .forecast import estimate_conditions, estimate_evapotranspiration
from .risk import assess_disease_risk, assess_pest_risk
from .yield_model import predict_yield


def predict(
    pattern: SeasonalPattern,
    current: WeatherObservation,
    horizon_days: int,
    crop_profiles: Sequence[CropProfile],
    config: EngineConfig = DEFAULT_CONFIG,
) -> AgroClimaticPrediction:
    """
    Predict conditions ``horizon_days`` after the current observation.

    Args:
        pattern (SeasonalPattern): Output of the pattern analyzer.
        current (WeatherObservation): Latest observation; its date anchors
            the target date.
        horizon_days (int): Days ahead, zero or more.
        crop_profiles (Sequence[CropProfile]): Candidate crops, in priority order.
        config (EngineConfig, optional): Weights and thresholds.

    Returns:
        AgroClimaticPrediction: The prediction with its alerts.

    Raises:
        PreconditionError: If ``crop_profiles`` is empty or ``horizon_days``
            is negative.
    """
    if not crop_profiles:
        raise PreconditionError("At least one crop profile is required.")
    if horizon_days < 0:
        raise PreconditionError(
            f"horizon_days must not be negative, got {horizon_days}."
        )

    target_date = current.timestamp.date() + timedelta(days=horizon_days)
    season = season_for_date(target_date)

    estimate = estimate_conditions(pattern, current, horizon_days, config)
    evapotranspiration = estimate_evapotranspiration(estimate, season)

    scores = score_crops(estimate, crop_profiles, config)
    crop = recommend_crop(scores, crop_profiles)

    alerts = generate_alerts(
        estimate, crop, current.location_id, target_date, config
    )
    soil_moisture = advisories.estimate_soil_moisture(estimate, current)

    logging.debug(
        "Prediction for %s on %s: %.1f°C, %.0f%%, %.1fmm, crop %s, %d alerts",
        current.location_id,
        target_date,
        estimate.temperature,
        estimate.humidity,
        estimate.precipitation,
        crop.name,
        len(alerts),
    )

    return AgroClimaticPrediction(
        location_id=current.location_id,
        target_date=target_date,
        horizon_days=horizon_days,
        temperature=estimate.temperature,
        humidity=estimate.humidity,
        precipitation=estimate.precipitation,
        evapotranspiration=evapotranspiration,
        soil_moisture=soil_moisture,
        crop_recommendation=crop.name,
        crop_scores=scores,
        pest_risk=assess_pest_risk(estimate),
        disease_risk=assess_disease_risk(estimate),
        yield_prediction=predict_yield(estimate, crop, config),
        weather_alerts=alerts,
        irrigation_advice=advisories.irrigation_advice(soil_moisture, estimate),
        planting_advice=advisories.planting_advice(estimate, crop),
        harvesting_advice=advisories.harvesting_advice(estimate),
        soil_conditions=advisories.soil_conditions(
            soil_moisture, estimate, current, crop
        ),
        climate_indicators=advisories.climate_indicators(pattern, estimate),
        insufficient_data=pattern.insufficient_data,
    )

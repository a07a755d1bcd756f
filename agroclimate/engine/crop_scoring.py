"""
Suitability scoring of crops against predicted conditions.
"""

from typing import List, Sequence

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.schema import CropProfile, CropScore
from .forecast import ForecastEstimate


def centrality(value: float, optimal_range: tuple) -> float:
    """
    1.0 at the midpoint of the range, falling linearly to 0.0 at its edges
    and staying at 0.0 beyond them.
    """
    low, high = optimal_range
    midpoint = (low + high) / 2
    half_width = (high - low) / 2
    if half_width <= 0:
        return 1.0 if value == midpoint else 0.0
    return max(0.0, 1.0 - abs(value - midpoint) / half_width)


def precipitation_penalty(
    precipitation: float, crop: CropProfile, config: EngineConfig = DEFAULT_CONFIG
) -> float:
    """
    Score points lost when rain falls below half the crop's daily need,
    growing linearly to the full penalty when no rain falls.
    """
    shortfall_line = crop.water_requirement.daily_need * 0.5
    if precipitation >= shortfall_line:
        return 0.0
    dryness = 1.0 - max(precipitation, 0.0) / shortfall_line
    return config.precipitation_penalty * dryness


def score_crop(
    estimate: ForecastEstimate,
    crop: CropProfile,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Suitability of one crop, in [0, 100]."""
    score = 100.0 * (
        config.temperature_score_weight
        * centrality(estimate.temperature, crop.optimal_temperature)
        + config.humidity_score_weight
        * centrality(estimate.humidity, crop.optimal_humidity)
    )
    score -= precipitation_penalty(estimate.precipitation, crop, config)
    return min(100.0, max(0.0, score))


def score_crops(
    estimate: ForecastEstimate,
    crop_profiles: Sequence[CropProfile],
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[CropScore]:
    """Scores of every profile, in declaration order."""
    return [
        CropScore(crop=crop.name, score=score_crop(estimate, crop, config))
        for crop in crop_profiles
    ]


def recommend_crop(
    scores: Sequence[CropScore], crop_profiles: Sequence[CropProfile]
) -> CropProfile:
    """
    Profile with the highest score. ``max`` keeps the first of equal
    maxima, so ties go to the earliest declared profile.
    """
    best = max(range(len(scores)), key=lambda index: scores[index].score)
    return crop_profiles[best]

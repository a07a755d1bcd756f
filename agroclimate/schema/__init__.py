"""
Module containing the schema definitions for the agro-climatic engine.
"""

from .weather_observation import WeatherObservation
from .season_window import SeasonWindow
from .seasonal_pattern import SeasonalPattern, VariableStatistics, Anomaly
from .crop_profile import CropProfile, WaterRequirement
from .weather_alert import WeatherAlert, Severity
from .agro_climatic_prediction import AgroClimaticPrediction, CropScore
from .location import Location
from .prediction_run import PredictionRun

__all__ = [
    "WeatherObservation",
    "SeasonWindow",
    "SeasonalPattern",
    "VariableStatistics",
    "Anomaly",
    "CropProfile",
    "WaterRequirement",
    "WeatherAlert",
    "Severity",
    "AgroClimaticPrediction",
    "CropScore",
    "Location",
    "PredictionRun",
]

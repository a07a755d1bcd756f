"""Agro-climatic pattern analysis, prediction and alerting."""

from .analyzer import analyze, analyze_months, analyze_seasons
from .engine import predict
from .crops import load_crop_profiles
from .config import EngineConfig
from .errors import PreconditionError
from .predictor import Predictor

__all__ = [
    "analyze",
    "analyze_seasons",
    "analyze_months",
    "predict",
    "load_crop_profiles",
    "EngineConfig",
    "PreconditionError",
    "Predictor",
    "database",
    "logger",
    "schema",
    "seasons",
]

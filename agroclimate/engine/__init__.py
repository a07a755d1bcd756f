"""
Prediction and risk engine.
"""

from .prediction_engine import predict
from .forecast import ForecastEstimate, estimate_conditions, estimate_evapotranspiration
from .crop_scoring import score_crop, score_crops, recommend_crop
from .risk import assess_pest_risk, assess_disease_risk, RiskRule
from .yield_model import predict_yield
from .alerts import generate_alerts, AlertRule, ALERT_RULES

__all__ = [
    "predict",
    "ForecastEstimate",
    "estimate_conditions",
    "estimate_evapotranspiration",
    "score_crop",
    "score_crops",
    "recommend_crop",
    "assess_pest_risk",
    "assess_disease_risk",
    "RiskRule",
    "predict_yield",
    "generate_alerts",
    "AlertRule",
    "ALERT_RULES",
]

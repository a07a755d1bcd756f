"""AgroClimaticPrediction Schema"""

import datetime
from dataclasses import dataclass, field
from typing import List, Optional

from .weather_alert import WeatherAlert


@dataclass(frozen=True)
class CropScore:
    """Suitability of one crop for the predicted conditions, in [0, 100]."""

    crop: str
    score: float


@dataclass
class AgroClimaticPrediction:
    """
    Output of the prediction engine for one location and target date.

    Attributes:
        location_id (str): Identifier of the location.
        target_date (datetime.date): Date the prediction is for.
        horizon_days (int): Days between the current observation and target_date.
        temperature (float): Predicted temperature in Celsius.
        humidity (float): Predicted relative humidity in percent.
        precipitation (float): Predicted precipitation in mm.
        evapotranspiration (float): Estimated evapotranspiration in mm/day.
        soil_moisture (float): Soil moisture used for irrigation advice, in percent.
        crop_recommendation (str): Name of the best scoring crop.
        crop_scores (list): CropScore for every profile, in declaration order.
        pest_risk (str): "low", "medium" or "high".
        disease_risk (str): "low", "medium" or "high".
        yield_prediction (float): Expected yield percentage in [0, 100].
        weather_alerts (list): WeatherAlert entries raised for the prediction.
        irrigation_advice (str): Irrigation recommendation.
        planting_advice (str): Planting recommendation for the recommended crop.
        harvesting_advice (str): Harvesting recommendation.
        soil_conditions (dict): Soil condition summary.
        climate_indicators (dict): Trend labels and seasonal deviation.
        insufficient_data (bool): True when the seasonal pattern was degraded.
        id (str, optional): Database identifier, set once saved.
    """

    location_id: str
    target_date: datetime.date
    horizon_days: int
    temperature: float
    humidity: float
    precipitation: float
    evapotranspiration: float
    soil_moisture: float
    crop_recommendation: str
    crop_scores: List[CropScore]
    pest_risk: str
    disease_risk: str
    yield_prediction: float
    weather_alerts: List[WeatherAlert] = field(default_factory=list)
    irrigation_advice: str = ""
    planting_advice: str = ""
    harvesting_advice: str = ""
    soil_conditions: dict = field(default_factory=dict)
    climate_indicators: dict = field(default_factory=dict)
    insufficient_data: bool = False
    id: Optional[str] = None

    def to_dict(self) -> dict:
        """Return a JSON-ready representation of the prediction."""
        return {
            "id": self.id,
            "location_id": self.location_id,
            "target_date": self.target_date.isoformat(),
            "horizon_days": self.horizon_days,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "precipitation": self.precipitation,
            "evapotranspiration": self.evapotranspiration,
            "soil_moisture": self.soil_moisture,
            "crop_recommendation": self.crop_recommendation,
            "crop_scores": {score.crop: score.score for score in self.crop_scores},
            "pest_risk": self.pest_risk,
            "disease_risk": self.disease_risk,
            "yield_prediction": self.yield_prediction,
            "weather_alerts": [
                {
                    "title": alert.title,
                    "severity": alert.severity.value,
                    "condition": alert.condition,
                    "type": alert.alert_type,
                    "date": alert.effective_date.isoformat(),
                }
                for alert in self.weather_alerts
            ],
            "irrigation_advice": self.irrigation_advice,
            "planting_advice": self.planting_advice,
            "harvesting_advice": self.harvesting_advice,
            "soil_conditions": self.soil_conditions,
            "climate_indicators": self.climate_indicators,
            "insufficient_data": self.insufficient_data,
        }

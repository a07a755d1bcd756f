"""
A single location's prediction: analyze its history, predict, and store.
"""

import logging
from typing import List, Optional, Sequence

from agroclimate.analyzer import analyze
from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.database import Database
from agroclimate.engine import predict
from agroclimate.schema import (
    AgroClimaticPrediction,
    CropProfile,
    Location,
    SeasonWindow,
    WeatherObservation,
)


class PredictionJob:
    """
    Runs the analyzer and the engine for one location.
    """

    def __init__(
        self,
        location: Location,
        history: List[WeatherObservation],
        current: WeatherObservation,
        season: SeasonWindow,
        horizon_days: int,
        crop_profiles: Sequence[CropProfile],
        run_id: str,
        config: EngineConfig = DEFAULT_CONFIG,
    ):
        """
        Args:
            location (Location): The location being predicted.
            history (list): Observations of the forecast season, oldest first.
            current (WeatherObservation): Latest observation of the location.
            season (SeasonWindow): Season of the forecast date.
            horizon_days (int): Days ahead to predict.
            crop_profiles (Sequence[CropProfile]): Candidate crops.
            run_id (str): Unique identifier for this prediction run.
            config (EngineConfig): Engine weights and thresholds.
        """
        self.location = location
        self.history = history
        self.current = current
        self.season = season
        self.horizon_days = horizon_days
        self.crop_profiles = crop_profiles
        self.run_id = run_id
        self.config = config

    def _generate_prediction(self) -> AgroClimaticPrediction:
        pattern = analyze(self.history, self.season, self.config)
        logging.info(
            "%s %s pattern: %s", self.location.name, self.season.name, pattern.summary
        )
        return predict(
            pattern, self.current, self.horizon_days, self.crop_profiles, self.config
        )

    def _save_prediction(self, prediction: AgroClimaticPrediction) -> None:
        """
        Store the prediction and hand its alerts to the notification queue.
        """
        prediction_id = Database.save_prediction(prediction, self.run_id)
        Database.enqueue_weather_alerts(prediction.weather_alerts, prediction_id)

    def run(self, dry_run: bool) -> Optional[AgroClimaticPrediction]:
        """
        Predict and, unless this is a dry run, save the result.

        Returns:
            AgroClimaticPrediction: The prediction if successful, None otherwise.
        """
        try:
            prediction = self._generate_prediction()

            for alert in prediction.weather_alerts:
                logging.warning(
                    "%s [%s] %s: %s",
                    self.location.name,
                    alert.severity.value,
                    alert.title,
                    alert.condition,
                )

            if not dry_run:
                self._save_prediction(prediction)
            else:
                logging.debug("Prediction not saved: %s", prediction.to_dict())

            return prediction
        except Exception as e:
            logging.error("Error predicting for %s: %s", self.location.name, e)
            return None

"""
Predictor class for batch agro-climatic predictions.
"""

import queue
import sys
import uuid
from datetime import datetime, date, timezone
import logging

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.crops import load_crop_profiles
from agroclimate.database import Database, database_connection
from agroclimate.job import PredictionJob
from agroclimate.logger import config_logger
from agroclimate.schema import PredictionRun
from agroclimate.seasons import SeasonScheduler, filter_by_season


class Predictor:
    """Main class for agro-climatic prediction runs."""

    def __init__(
        self,
        db_url: str,
        dry_run: bool,
        process_date: date,
        horizon_days: int,
        all_locations: bool = False,
        location_id: str = None,
        history_years: int = 2,
        config: EngineConfig = DEFAULT_CONFIG,
    ):

        self.db_url = db_url
        self.dry_run = dry_run
        self.date = process_date
        self.horizon_days = horizon_days
        self.history_years = history_years
        self.config = config

        if all_locations and location_id is not None:
            raise ValueError("Cannot specify both location_id and all_locations flag.")
        if horizon_days < 0:
            raise ValueError("horizon_days must not be negative.")

        self.all_locations = all_locations
        self.location_id = location_id
        self.locations = []  # needs db connection, so they're loaded later
        self.crop_profiles = load_crop_profiles()

        self.run_id = str(uuid.uuid4())
        self.prediction_run = PredictionRun(
            run_id=self.run_id,
            run_timestamp=datetime.now(timezone.utc),
            command=" ".join(sys.argv),
            target_date=self.date,
            horizon_days=self.horizon_days,
        )

        self.scheduler = SeasonScheduler(
            self.date, self.horizon_days, self.history_years
        )
        self.processing_queue = queue.Queue()
        config_logger(debug=self.dry_run)

    def get_all_locations(self) -> list:
        """
        Retrieve all active locations.
        """
        locations = Database.get_all_locations()

        if len(locations) == 0:
            logging.error("No active locations found!")
            return []

        return locations

    def get_single_location(self, location_id: str) -> list:
        """
        Retrieve a single location by its ID.
        """
        location = Database.get_single_location(location_id)

        if location is None:
            logging.error("Location with ID %s not found.", location_id)
            return []

        return [location]

    def fill_up_queue(self):
        """
        Fill up the processing queue with a PredictionJob for each location
        that has a current observation.
        """
        season = self.scheduler.get_forecast_season()

        for location in self.locations:
            tz = location.local_timezone
            history_interval = self.scheduler.get_history_interval(tz)
            current_interval = self.scheduler.get_current_interval(tz)

            current = Database.get_latest_observation(
                location_id=location.id, before=current_interval[1]
            )
            if current is None:
                logging.warning(
                    "No current observation for location %s up to %s",
                    location.name,
                    self.date,
                )
                continue

            history = Database.get_observations_for_location_and_interval(
                location_id=location.id,
                date_from=history_interval[0],
                date_to=history_interval[1],
            )
            season_history = filter_by_season(history, season)

            logging.debug(
                "%s: %d observations, %d in %s",
                location.name,
                len(history),
                len(season_history),
                season.name,
            )

            self.processing_queue.put(
                PredictionJob(
                    location=location,
                    history=season_history,
                    current=current,
                    season=season,
                    horizon_days=self.horizon_days,
                    crop_profiles=self.crop_profiles,
                    run_id=self.run_id,
                    config=self.config,
                )
            )

    def process_queue(self) -> list:
        """Run the queued jobs and return the predictions that succeeded."""
        predictions = []
        while not self.processing_queue.empty():
            job = self.processing_queue.get()

            if not isinstance(job, PredictionJob):
                logging.error("Queued item is not a PredictionJob.")
                continue

            logging.info(
                "Predicting %s (%d observations)",
                job.location.name,
                len(job.history),
            )

            prediction = job.run(self.dry_run)

            if prediction is not None:
                logging.info(
                    "Predicted %s: %s, yield %.0f%%, %d alerts",
                    job.location.name,
                    prediction.crop_recommendation,
                    prediction.yield_prediction,
                    len(prediction.weather_alerts),
                )
                predictions.append(prediction)
            else:
                logging.error("Did not predict %s", job.location.id)

        return predictions

    def run(self) -> list:
        """Main entry point for a prediction run."""
        with database_connection(self.db_url):
            logging.info("Connected to database.")

            if self.dry_run:
                logging.info("Dry run enabled.")
            else:
                logging.warning("Dry run disabled.")

            self.locations = (
                self.get_all_locations()
                if self.all_locations
                else self.get_single_location(self.location_id)
            )

            self.fill_up_queue()

            logging.info("Starting predictions. Run ID: %s", self.run_id)

            predictions = []
            if not self.processing_queue.empty():
                if not self.dry_run:
                    Database.save_prediction_run(self.prediction_run)
                    logging.info("Saved prediction run %s.", self.run_id)

                predictions = self.process_queue()
            else:
                logging.warning("Nothing to predict.")

            logging.info("Predictor done.")
            return predictions

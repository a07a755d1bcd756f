"""
Database integration module for the agroclimate package.
"""

from typing import List, Optional
from contextlib import contextmanager
import logging
import datetime
import json
import uuid
import zoneinfo

import psycopg2
from psycopg2 import pool
from psycopg2.extensions import connection as _connection
from psycopg2.extensions import cursor as _cursor

from agroclimate.schema import (
    AgroClimaticPrediction,
    Location,
    PredictionRun,
    WeatherAlert,
    WeatherObservation,
)

OBSERVATION_COLUMNS = """
    location_id,
    observed_at AS timestamp,
    temperature,
    humidity,
    precipitation,
    wind_speed,
    soil_moisture,
    soil_ph
"""


class CursorFromConnectionFromPool:
    """Context manager for PostgreSQL cursor."""

    def __init__(self):
        self.connection: Optional[_connection] = None
        self.cursor: Optional[_cursor] = None

    def __enter__(self) -> _cursor:
        self.connection = Database.get_connection()
        self.cursor = self.connection.cursor()
        return self.cursor

    def __exit__(self, exception_type, exception_value, exception_traceback) -> None:
        if exception_value:
            self.connection.rollback()
        else:
            self.cursor.close()
            self.connection.commit()
        Database.return_connection(self.connection)


class Database:
    """Database class for managing PostgreSQL connections."""

    __connection_pool: Optional[pool.SimpleConnectionPool] = None

    @classmethod
    def initialize(cls, connection_string: str) -> None:
        """Initialize the connection pool."""
        cls.__connection_pool = pool.SimpleConnectionPool(1, 10, dsn=connection_string)

    @classmethod
    def get_connection(cls) -> _connection:
        """Get a connection from the pool."""
        if cls.__connection_pool is None:
            raise psycopg2.OperationalError("Connection pool is not initialized.")
        conn = cls.__connection_pool.getconn()
        conn.set_client_encoding("utf8")
        return conn

    @classmethod
    def return_connection(cls, connection: _connection) -> None:
        """Return a connection to the pool."""
        cls.__connection_pool.putconn(connection)

    @classmethod
    def close_all_connections(cls) -> None:
        """Close all connections in the pool."""
        cls.__connection_pool.closeall()

    @classmethod
    def get_all_locations(cls) -> List[Location]:
        """Get all active farming locations."""
        with CursorFromConnectionFromPool() as cursor:
            cursor.execute(
                "SELECT id, name, local_timezone FROM location WHERE status = 'active'"
            )
            return [
                Location(
                    id=str(row[0]),
                    name=row[1],
                    local_timezone=zoneinfo.ZoneInfo(row[2]),
                )
                for row in cursor.fetchall()
            ]

    @classmethod
    def get_single_location(cls, location_id: str) -> Optional[Location]:
        """Get a single active location by ID."""
        with CursorFromConnectionFromPool() as cursor:
            cursor.execute(
                "SELECT id, name, local_timezone "
                "FROM location "
                "WHERE id = %s AND status = 'active'",
                (location_id,),
            )
            row = cursor.fetchone()
            if row:
                return Location(
                    id=str(row[0]),
                    name=row[1],
                    local_timezone=zoneinfo.ZoneInfo(row[2]),
                )
            return None

    @classmethod
    def get_observations_for_location_and_interval(
        cls,
        location_id: str,
        date_from: datetime.datetime,
        date_to: datetime.datetime,
    ) -> List[WeatherObservation]:
        """Get the observations of a location in a time range, oldest first."""

        assert date_from.tzinfo is not None
        assert date_to.tzinfo is not None

        query = f"""
            SELECT {OBSERVATION_COLUMNS}
            FROM weather_observation
            WHERE
                location_id = %s
                AND observed_at >= %s
                AND observed_at <= %s
            ORDER BY observed_at ASC
        """

        with CursorFromConnectionFromPool() as cursor:
            cursor.execute(query, (location_id, date_from, date_to))
            column_names = [desc[0] for desc in cursor.description]
            return [
                WeatherObservation(**dict(zip(column_names, row)))
                for row in cursor.fetchall()
            ]

    @classmethod
    def get_latest_observation(
        cls, location_id: str, before: datetime.datetime
    ) -> Optional[WeatherObservation]:
        """Get the most recent observation of a location taken up to ``before``."""

        assert before.tzinfo is not None

        query = f"""
            SELECT {OBSERVATION_COLUMNS}
            FROM weather_observation
            WHERE location_id = %s AND observed_at <= %s
            ORDER BY observed_at DESC
            LIMIT 1
        """

        with CursorFromConnectionFromPool() as cursor:
            cursor.execute(query, (location_id, before))
            row = cursor.fetchone()
            if row is None:
                return None
            column_names = [desc[0] for desc in cursor.description]
            return WeatherObservation(**dict(zip(column_names, row)))

    @classmethod
    def save_prediction(cls, prediction: AgroClimaticPrediction, run_id: str) -> str:
        """Save a prediction, replacing any earlier one for the same location and date."""

        prediction.id = str(uuid.uuid4()) if prediction.id is None else prediction.id
        document = prediction.to_dict()

        with CursorFromConnectionFromPool() as cursor:
            cursor.execute(
                """
                INSERT INTO agro_prediction (
                    id, location_id, target_date, horizon_days, temperature, humidity,
                    precipitation, evapotranspiration, soil_moisture, crop_recommendation,
                    crop_scores, pest_risk, disease_risk, yield_prediction,
                    irrigation_advice, planting_advice, harvesting_advice,
                    soil_conditions, climate_indicators, insufficient_data,
                    prediction_run_id
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s,
                        %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                ON CONFLICT (location_id, target_date) DO UPDATE SET
                    horizon_days = EXCLUDED.horizon_days,
                    temperature = EXCLUDED.temperature,
                    humidity = EXCLUDED.humidity,
                    precipitation = EXCLUDED.precipitation,
                    evapotranspiration = EXCLUDED.evapotranspiration,
                    soil_moisture = EXCLUDED.soil_moisture,
                    crop_recommendation = EXCLUDED.crop_recommendation,
                    crop_scores = EXCLUDED.crop_scores,
                    pest_risk = EXCLUDED.pest_risk,
                    disease_risk = EXCLUDED.disease_risk,
                    yield_prediction = EXCLUDED.yield_prediction,
                    irrigation_advice = EXCLUDED.irrigation_advice,
                    planting_advice = EXCLUDED.planting_advice,
                    harvesting_advice = EXCLUDED.harvesting_advice,
                    soil_conditions = EXCLUDED.soil_conditions,
                    climate_indicators = EXCLUDED.climate_indicators,
                    insufficient_data = EXCLUDED.insufficient_data,
                    prediction_run_id = EXCLUDED.prediction_run_id
                RETURNING id
                """,
                (
                    prediction.id,
                    prediction.location_id,
                    prediction.target_date,
                    prediction.horizon_days,
                    prediction.temperature,
                    prediction.humidity,
                    prediction.precipitation,
                    prediction.evapotranspiration,
                    prediction.soil_moisture,
                    prediction.crop_recommendation,
                    json.dumps(document["crop_scores"]),
                    prediction.pest_risk,
                    prediction.disease_risk,
                    prediction.yield_prediction,
                    prediction.irrigation_advice,
                    prediction.planting_advice,
                    prediction.harvesting_advice,
                    json.dumps(document["soil_conditions"]),
                    json.dumps(document["climate_indicators"]),
                    prediction.insufficient_data,
                    run_id,
                ),
            )
            prediction_id = str(cursor.fetchone()[0])
            prediction.id = prediction_id
            logging.info("Saved prediction with ID: %s", prediction_id)
            return prediction_id

    @classmethod
    def enqueue_weather_alerts(
        cls, alerts: List[WeatherAlert], prediction_id: str
    ) -> None:
        """Queue alerts for the notification dispatcher."""
        if not alerts:
            return

        with CursorFromConnectionFromPool() as cursor:
            cursor.executemany(
                """
                INSERT INTO weather_alert (
                    id, prediction_id, location_id, title, severity,
                    condition, alert_type, effective_date, dispatched
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, FALSE)
                """,
                [
                    (
                        str(uuid.uuid4()),
                        prediction_id,
                        alert.location_id,
                        alert.title,
                        alert.severity.value,
                        alert.condition,
                        alert.alert_type,
                        alert.effective_date,
                    )
                    for alert in alerts
                ],
            )
        logging.info("Queued %d alerts for prediction %s", len(alerts), prediction_id)

    @classmethod
    def save_prediction_run(cls, prediction_run: PredictionRun) -> None:
        """Save a prediction run to the database."""
        with CursorFromConnectionFromPool() as cursor:
            cursor.execute(
                """
                INSERT INTO prediction_run (id, run_timestamp,
                    command, target_date, horizon_days)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (
                    prediction_run.run_id,
                    prediction_run.run_timestamp,
                    prediction_run.command,
                    prediction_run.target_date,
                    prediction_run.horizon_days,
                ),
            )


@contextmanager
def database_connection(db_url: str):
    """Context manager for database connection."""
    logging.info("Connecting to database...")
    Database.initialize(db_url)
    try:
        yield
    finally:
        Database.close_all_connections()
        logging.info("Database connections closed.")

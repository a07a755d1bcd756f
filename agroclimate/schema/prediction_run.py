"""PredictionRun Schema"""

import uuid
import datetime
from dataclasses import dataclass


@dataclass
class PredictionRun:
    """
    Represents one invocation of the batch predictor.

    Attributes:
        run_id (uuid.UUID): Unique identifier for the run.
        run_timestamp (datetime.datetime): Timestamp when the run was created.
        command (str): Console command that launched the run.
        target_date (datetime.date): Observation date the run predicts from.
        horizon_days (int): Forecast horizon in days.
    """

    run_id: uuid.UUID
    run_timestamp: datetime.datetime
    command: str
    target_date: datetime.date
    horizon_days: int

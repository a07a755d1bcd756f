"""WeatherAlert Schema"""

import datetime
from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Severity of a weather alert."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class WeatherAlert:
    """
    A threshold-triggered alert raised from a prediction.

    Attributes:
        title (str): Short alert title, e.g. "Frost Risk Alert".
        severity (Severity): Alert severity.
        condition (str): Description of the triggering condition.
        location_id (str): Identifier of the location the alert applies to.
        effective_date (datetime.date): Date the alert is effective on.
        alert_type (str): Category tag used by notification dispatchers.
    """

    title: str
    severity: Severity
    condition: str
    location_id: str
    effective_date: datetime.date
    alert_type: str

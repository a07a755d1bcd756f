"""WeatherObservation Schema"""

import datetime
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WeatherObservation:
    """
    Represents a single weather reading from an exact point in time.

    Attributes:
        location_id (str): Identifier for the location the reading belongs to.
        timestamp (datetime.datetime): Timestamp when the reading was taken.
        temperature (float): Air temperature in degrees Celsius.
        humidity (float): Relative humidity in percent.
        precipitation (float): Precipitation in millimetres, never negative.
        wind_speed (float): Wind speed in metres per second.
        soil_moisture (float, optional): Soil moisture in percent, if measured.
        soil_ph (float, optional): Soil pH, if measured.
    """

    location_id: str
    timestamp: datetime.datetime
    temperature: float
    humidity: float
    precipitation: float
    wind_speed: float
    soil_moisture: Optional[float] = None
    soil_ph: Optional[float] = None

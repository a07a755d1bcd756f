"""CropProfile Schema"""

from dataclasses import dataclass
from enum import Enum


class WaterRequirement(str, Enum):
    """Water requirement class of a crop."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def daily_need(self) -> float:
        """Daily rainfall (mm) the class needs to avoid a shortfall."""
        return {
            WaterRequirement.LOW: 2.5,
            WaterRequirement.MODERATE: 3.5,
            WaterRequirement.HIGH: 4.5,
        }[self]

    @classmethod
    def from_seasonal_mm(cls, millimetres: float) -> "WaterRequirement":
        """Classify a seasonal water requirement in millimetres."""
        if millimetres <= 350:
            return cls.LOW
        if millimetres <= 500:
            return cls.MODERATE
        return cls.HIGH


@dataclass(frozen=True)
class CropProfile:
    """
    Static growing requirements of a crop.

    Attributes:
        name (str): Crop name.
        optimal_temperature (tuple): (min, max) optimal temperature in Celsius.
        optimal_humidity (tuple): (min, max) optimal relative humidity in percent.
        water_requirement_mm (float): Water needed over the season, in mm.
        soil_ph (tuple): (min, max) tolerated soil pH.
        growth_duration_days (int): Days from planting to harvest.
        growing_months (tuple): Calendar months of active growth.
    """

    name: str
    optimal_temperature: tuple
    optimal_humidity: tuple
    water_requirement_mm: float
    soil_ph: tuple
    growth_duration_days: int
    growing_months: tuple

    @property
    def water_requirement(self) -> WaterRequirement:
        return WaterRequirement.from_seasonal_mm(self.water_requirement_mm)

"""SeasonWindow Schema"""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class SeasonWindow:
    """
    A calendar season expressed as the set of months it covers.

    Attributes:
        name (str): Season name, e.g. "summer".
        months (tuple): Calendar months (1-12) belonging to the season.
        solar_radiation (float): Mean daily solar radiation for the season,
            in mm/day of evaporation equivalent.
    """

    name: str
    months: tuple
    solar_radiation: float

    def contains(self, day: datetime.date) -> bool:
        """Whether the given date falls inside this season."""
        return day.month in self.months

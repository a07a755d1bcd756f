"""
Zimbabwean season calendar and the date intervals a prediction run needs.
"""

import logging
from datetime import date, datetime, timedelta
import zoneinfo
from typing import Iterable, List

from agroclimate.schema import SeasonWindow, WeatherObservation

# Southern hemisphere seasons; the rainy season runs from November to April.
SUMMER = SeasonWindow(name="summer", months=(12, 1, 2), solar_radiation=9.5)
AUTUMN = SeasonWindow(name="autumn", months=(3, 4, 5), solar_radiation=7.5)
WINTER = SeasonWindow(name="winter", months=(6, 7, 8), solar_radiation=6.0)
SPRING = SeasonWindow(name="spring", months=(9, 10, 11), solar_radiation=8.5)

SEASONS = (SUMMER, AUTUMN, WINTER, SPRING)


def season_for_date(day: date) -> SeasonWindow:
    """Return the season window containing the given date."""
    for season in SEASONS:
        if season.contains(day):
            return season
    raise ValueError(f"No season contains month {day.month}")


def filter_by_season(
    observations: Iterable[WeatherObservation], season: SeasonWindow
) -> List[WeatherObservation]:
    """Keep the observations taken inside the season, preserving order."""
    return [obs for obs in observations if season.contains(obs.timestamp.date())]


class SeasonScheduler:
    """Computes the history and current-day intervals for a prediction run."""

    def __init__(
        self,
        process_date: date,
        horizon_days: int,
        history_years: int = 2,
    ):
        if not isinstance(process_date, date):
            raise ValueError("process_date must be a datetime.date instance")
        if history_years < 1:
            raise ValueError("history_years must be at least 1")

        self.process_date = process_date
        self.horizon_days = horizon_days
        self.history_years = history_years

        logging.info("Scheduler initialized.")
        logging.info("Processing date: %s", self.process_date.isoformat())
        logging.info(
            "Forecast date: %s (%s)",
            self.get_forecast_date().isoformat(),
            self.get_forecast_season().name,
        )

    def get_forecast_date(self) -> date:
        """Date the prediction is made for."""
        return self.process_date + timedelta(days=self.horizon_days)

    def get_forecast_season(self) -> SeasonWindow:
        """Season window of the forecast date."""
        return season_for_date(self.get_forecast_date())

    def get_current_interval(self, tz: zoneinfo.ZoneInfo) -> tuple:
        """Start and end datetimes of the processing day in the given timezone."""
        start_of_day = datetime(
            self.process_date.year,
            self.process_date.month,
            self.process_date.day,
            0,
            0,
            0,
            0,
            tz,
        )
        end_of_day = start_of_day + timedelta(days=1) - timedelta(seconds=1)
        return (start_of_day, end_of_day)

    def get_history_interval(self, tz: zoneinfo.ZoneInfo) -> tuple:
        """
        History window ending the day before the processing date and
        reaching back ``history_years`` years.
        """
        end_of_history = self.get_current_interval(tz)[0] - timedelta(seconds=1)

        start_year = self.process_date.year - self.history_years
        try:
            first_day = self.process_date.replace(year=start_year)
        except ValueError:  # 29 February
            first_day = self.process_date.replace(year=start_year, day=28)

        start_of_history = datetime(
            first_day.year, first_day.month, first_day.day, 0, 0, 0, 0, tz
        )
        return (start_of_history, end_of_history)

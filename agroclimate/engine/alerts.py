"""
Declarative weather alert rules evaluated against predicted conditions.
"""

import datetime
from dataclasses import dataclass
from typing import Callable, List, Sequence

from agroclimate.config import DEFAULT_CONFIG, EngineConfig
from agroclimate.schema import CropProfile, Severity, WeatherAlert
from .forecast import ForecastEstimate


@dataclass(frozen=True)
class AlertContext:
    """Everything an alert rule may look at."""

    estimate: ForecastEstimate
    crop: CropProfile
    target_date: datetime.date
    config: EngineConfig


@dataclass(frozen=True)
class AlertRule:
    """
    Alert template raised whenever ``predicate`` holds.

    ``describe`` renders the triggering condition for the alert body.
    """

    title: str
    severity: Severity
    alert_type: str
    predicate: Callable[[AlertContext], bool]
    describe: Callable[[AlertContext], str]


def _in_growth_window(context: AlertContext) -> bool:
    return context.target_date.month in context.crop.growing_months


ALERT_RULES = (
    AlertRule(
        title="Extreme Heat Warning",
        severity=Severity.HIGH,
        alert_type="heat",
        predicate=lambda ctx: ctx.estimate.temperature > 35.0,
        describe=lambda ctx: f"Temperature expected at {ctx.estimate.temperature:.1f}°C, above 35°C",
    ),
    AlertRule(
        title="Frost Risk Alert",
        severity=Severity.HIGH,
        alert_type="frost",
        predicate=lambda ctx: ctx.estimate.temperature < 5.0,
        describe=lambda ctx: f"Temperature expected at {ctx.estimate.temperature:.1f}°C, below 5°C",
    ),
    AlertRule(
        title="High Humidity Alert",
        severity=Severity.MEDIUM,
        alert_type="humidity",
        predicate=lambda ctx: ctx.estimate.humidity > 85.0,
        describe=lambda ctx: f"Humidity expected at {ctx.estimate.humidity:.0f}%, disease risk rises above 85%",
    ),
    AlertRule(
        title="Heavy Rainfall Warning",
        severity=Severity.HIGH,
        alert_type="rainfall",
        predicate=lambda ctx: ctx.estimate.precipitation > 20.0,
        describe=lambda ctx: f"{ctx.estimate.precipitation:.1f}mm of rain expected, above 20mm",
    ),
    AlertRule(
        title="Irrigation Reminder",
        severity=Severity.MEDIUM,
        alert_type="irrigation",
        predicate=lambda ctx: (
            ctx.estimate.precipitation < ctx.config.dry_precipitation_mm
            and _in_growth_window(ctx)
        ),
        describe=lambda ctx: f"No significant rain expected while {ctx.crop.name} is growing",
    ),
)


def generate_alerts(
    estimate: ForecastEstimate,
    crop: CropProfile,
    location_id: str,
    target_date: datetime.date,
    config: EngineConfig = DEFAULT_CONFIG,
    rules: Sequence[AlertRule] = ALERT_RULES,
) -> List[WeatherAlert]:
    """
    Every alert whose rule matches the predicted conditions, in rule order.
    Matching rules never suppress each other.
    """
    context = AlertContext(
        estimate=estimate, crop=crop, target_date=target_date, config=config
    )
    return [
        WeatherAlert(
            title=rule.title,
            severity=rule.severity,
            condition=rule.describe(context),
            location_id=location_id,
            effective_date=target_date,
            alert_type=rule.alert_type,
        )
        for rule in rules
        if rule.predicate(context)
    ]

"""
Table-driven pest and disease risk levels.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .forecast import ForecastEstimate


@dataclass(frozen=True)
class RiskRule:
    """
    A risk level that applies when every set bound is met.

    Minimums are exclusive, temperature ranges inclusive.
    """

    level: str
    min_humidity: Optional[float] = None
    min_precipitation: Optional[float] = None
    temperature_range: Optional[tuple] = None

    def matches(self, estimate: ForecastEstimate) -> bool:
        if self.min_humidity is not None and not estimate.humidity > self.min_humidity:
            return False
        if (
            self.min_precipitation is not None
            and not estimate.precipitation > self.min_precipitation
        ):
            return False
        if self.temperature_range is not None:
            low, high = self.temperature_range
            if not low <= estimate.temperature <= high:
                return False
        return True


PEST_RISK_RULES = (
    RiskRule(level="high", min_humidity=80.0, temperature_range=(20.0, 30.0)),
    RiskRule(level="medium", min_humidity=65.0, temperature_range=(18.0, 32.0)),
)

DISEASE_RISK_RULES = (
    RiskRule(level="high", min_humidity=80.0, min_precipitation=5.0),
    RiskRule(level="medium", min_humidity=70.0, min_precipitation=3.0),
)


def evaluate_risk(
    estimate: ForecastEstimate, rules: Sequence[RiskRule], default: str = "low"
) -> str:
    """Level of the first matching rule, or ``default``."""
    for rule in rules:
        if rule.matches(estimate):
            return rule.level
    return default


def assess_pest_risk(estimate: ForecastEstimate) -> str:
    return evaluate_risk(estimate, PEST_RISK_RULES)


def assess_disease_risk(estimate: ForecastEstimate) -> str:
    return evaluate_risk(estimate, DISEASE_RISK_RULES)

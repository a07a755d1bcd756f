"""
Tunable parameters of the pattern analyzer and prediction engine.
"""

import os
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class EngineConfig:
    """
    Weights and thresholds used by the analyzer and engine.

    Attributes:
        min_samples (int): Fewest observations a season needs for statistics.
        min_monthly_samples (int): Fewest observations a calendar month needs
            for statistics.
        anomaly_multiplier (float): Standard deviations beyond which a value
            is reported as an anomaly.
        seasonal_weight (float): Weight of the seasonal projection when blended
            with the current observation; the rest goes to the current value.
        baseline_yield (float): Yield percentage before adjustments.
        temperature_yield_weight (float): Maximum yield swing from temperature.
        humidity_yield_weight (float): Maximum yield swing from humidity.
        precipitation_yield_weight (float): Maximum yield swing from rainfall.
        temperature_score_weight (float): Share of the crop score from temperature.
        humidity_score_weight (float): Share of the crop score from humidity.
        precipitation_penalty (float): Largest score penalty for a rain shortfall.
        dry_precipitation_mm (float): Rainfall below which a day counts as dry.
    """

    min_samples: int = 3
    min_monthly_samples: int = 5
    anomaly_multiplier: float = 2.0
    seasonal_weight: float = 0.7
    baseline_yield: float = 70.0
    temperature_yield_weight: float = 20.0
    humidity_yield_weight: float = 10.0
    precipitation_yield_weight: float = 15.0
    temperature_score_weight: float = 0.6
    humidity_score_weight: float = 0.4
    precipitation_penalty: float = 20.0
    dry_precipitation_mm: float = 1.0

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Build a config from ``AGRO_<FIELD>`` environment variables,
        e.g. ``AGRO_SEASONAL_WEIGHT=0.6``. Unset variables keep their default.
        """
        overrides = {}
        for config_field in fields(cls):
            raw = os.getenv(f"AGRO_{config_field.name.upper()}")
            if raw is None or raw == "":
                continue
            caster = int if config_field.type in (int, "int") else float
            overrides[config_field.name] = caster(raw)
        return cls(**overrides)


DEFAULT_CONFIG = EngineConfig()

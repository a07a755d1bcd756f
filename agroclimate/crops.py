"""
Reference crop table for Zimbabwean farming.
"""

from typing import List

from agroclimate.schema import CropProfile

CROP_PROFILES = (
    CropProfile(
        name="maize",
        optimal_temperature=(18.0, 24.0),
        optimal_humidity=(60.0, 80.0),
        water_requirement_mm=500.0,
        soil_ph=(5.5, 7.0),
        growth_duration_days=120,
        growing_months=(11, 12, 1, 2, 3),
    ),
    CropProfile(
        name="wheat",
        optimal_temperature=(15.0, 20.0),
        optimal_humidity=(50.0, 70.0),
        water_requirement_mm=400.0,
        soil_ph=(6.0, 7.5),
        growth_duration_days=150,
        growing_months=(5, 6, 7, 8, 9),
    ),
    CropProfile(
        name="sorghum",
        optimal_temperature=(20.0, 30.0),
        optimal_humidity=(40.0, 60.0),
        water_requirement_mm=300.0,
        soil_ph=(5.0, 8.0),
        growth_duration_days=100,
        growing_months=(12, 1, 2, 3),
    ),
    CropProfile(
        name="cotton",
        optimal_temperature=(21.0, 30.0),
        optimal_humidity=(50.0, 70.0),
        water_requirement_mm=600.0,
        soil_ph=(5.5, 7.0),
        growth_duration_days=180,
        growing_months=(11, 12, 1, 2, 3, 4),
    ),
    CropProfile(
        name="tobacco",
        optimal_temperature=(20.0, 28.0),
        optimal_humidity=(60.0, 80.0),
        water_requirement_mm=400.0,
        soil_ph=(5.5, 6.5),
        growth_duration_days=120,
        growing_months=(9, 10, 11, 12, 1),
    ),
)


def load_crop_profiles() -> List[CropProfile]:
    """Return the crop table in declaration order."""
    return list(CROP_PROFILES)

"""Data models for race planning."""

from raceplan.models.aid_station import AidStation, AidStationTiming, NutritionAmounts
from raceplan.models.gear import GearChecklist, GearItem
from raceplan.models.nutrition import (
    CALORIES_RANGE,
    CARBS_RANGE,
    SAMPLE_FOOD_ITEMS,
    SODIUM_RANGE,
    WATER_RANGE,
    FoodItem,
    HourlyNutrition,
    NutritionRatePlan,
    sum_food_items,
)
from raceplan.models.race import RaceProfile
from raceplan.models.saved_race import SavedRace, SegmentPolicy
from raceplan.models.units import (
    UnitPreferences,
    UnitSystem,
    format_distance,
    format_elevation,
    format_fluid,
    format_hours,
    format_weight,
    parse_duration,
)

__all__ = [  # noqa: RUF022
    # Race models
    "RaceProfile",
    "AidStation",
    "AidStationTiming",
    "NutritionAmounts",
    # Nutrition models
    "NutritionRatePlan",
    "FoodItem",
    "HourlyNutrition",
    "sum_food_items",
    "SAMPLE_FOOD_ITEMS",
    "CALORIES_RANGE",
    "CARBS_RANGE",
    "SODIUM_RANGE",
    "WATER_RANGE",
    # Gear models
    "GearItem",
    "GearChecklist",
    # Persistence models
    "SavedRace",
    "SegmentPolicy",
    # Units
    "UnitPreferences",
    "UnitSystem",
    "format_distance",
    "format_elevation",
    "format_fluid",
    "format_hours",
    "format_weight",
    "parse_duration",
]

"""Unit systems, conversions and display formatting."""

import math
from typing import Literal

from pydantic import BaseModel

UnitSystem = Literal["metric", "imperial"]

# Conversion factors
KM_TO_MILES = 0.621371
MILES_TO_KM = 1.60934
METERS_TO_FEET = 3.28084
FEET_TO_METERS = 0.3048
ML_TO_OZ = 0.033814
OZ_TO_ML = 29.5735
GRAMS_TO_OZ = 0.035274
OZ_TO_GRAMS = 28.3495


class UnitPreferences(BaseModel):
    """Per-quantity unit choices. Display only."""

    distance: UnitSystem = "metric"
    elevation: UnitSystem = "metric"
    fluid: UnitSystem = "metric"
    weight: UnitSystem = "metric"

    @classmethod
    def uniform(cls, system: UnitSystem) -> "UnitPreferences":
        """Use the same unit system for every quantity."""
        return cls(distance=system, elevation=system, fluid=system, weight=system)


def km_to_miles(km: float) -> float:
    return km * KM_TO_MILES


def miles_to_km(miles: float) -> float:
    return miles * MILES_TO_KM


def meters_to_feet(meters: float) -> float:
    return meters * METERS_TO_FEET


def feet_to_meters(feet: float) -> float:
    return feet * FEET_TO_METERS


def ml_to_oz(ml: float) -> float:
    return ml * ML_TO_OZ


def oz_to_ml(oz: float) -> float:
    return oz * OZ_TO_ML


def grams_to_oz(grams: float) -> float:
    return grams * GRAMS_TO_OZ


def oz_to_grams(oz: float) -> float:
    return oz * OZ_TO_GRAMS


def to_km(distance: float, unit: UnitSystem) -> float:
    """Normalize a distance in the given unit system to kilometres."""
    return miles_to_km(distance) if unit == "imperial" else distance


def to_meters(elevation: float, unit: UnitSystem) -> float:
    """Normalize an elevation in the given unit system to metres."""
    return feet_to_meters(elevation) if unit == "imperial" else elevation


def round_half_away(value: float) -> int:
    """Round to the nearest integer with halves away from zero (2.5 -> 3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the exact fraction; abs(value) + 0.5 can round up on its own
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def format_distance(value: float, unit: UnitSystem) -> str:
    """Format distance, e.g. '42.2 km' or '26.2 mi'."""
    if unit == "imperial":
        return f"{value:.1f} mi"
    return f"{value:.1f} km"


def format_elevation(value: float, unit: UnitSystem) -> str:
    """Format elevation as whole metres or feet."""
    if unit == "imperial":
        return f"{round(value)} ft"
    return f"{round(value)} m"


def format_fluid(value: float, unit: UnitSystem) -> str:
    if unit == "imperial":
        return f"{value:.1f} oz"
    return f"{value:.0f} ml"


def format_weight(value: float, unit: UnitSystem) -> str:
    if unit == "imperial":
        return f"{value:.1f} oz"
    return f"{value:.0f} g"


def format_hours(hours: float) -> str:
    """Format elapsed hours as HH:MM (minutes truncated)."""
    whole_hours = math.floor(hours)
    minutes = math.floor((hours - whole_hours) * 60)
    return f"{whole_hours:02d}:{minutes:02d}"


def parse_duration(time_str: str) -> float:
    """Parse duration text (HH:MM:SS or HH:MM) to hours."""
    parts = time_str.strip().split(":")
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Invalid duration format: {time_str}") from None

    if any(n < 0 for n in numbers):
        raise ValueError(f"Invalid duration format: {time_str}")
    if len(numbers) == 3:
        hours, minutes, seconds = numbers
    elif len(numbers) == 2:
        hours, minutes = numbers
        seconds = 0
    else:
        raise ValueError(f"Invalid duration format: {time_str}")
    if minutes > 59 or seconds > 59:
        raise ValueError(f"Invalid duration format: {time_str}")

    return hours + minutes / 60 + seconds / 3600

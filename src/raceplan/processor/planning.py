"""Race-day timeline and gear checklist generation."""

import math

from raceplan.models.aid_station import AidStation
from raceplan.models.gear import GearChecklist, GearItem
from raceplan.models.nutrition import HourlyNutrition, NutritionRatePlan
from raceplan.models.units import round_half_away
from raceplan.processor.exceptions import InvalidInputError

# Gear thresholds
HEADLAMP_HOURS = 8
BACKUP_BATTERY_HOURS = 12
SAFETY_KIT_KM = 30
EMERGENCY_BLANKET_KM = 50
ANTI_CHAFE_KM = 20
POLES_ELEVATION_M = 1500


def build_hourly_plan(
    total_distance: float,
    total_time: float,
    rates: NutritionRatePlan,
    stations: list[AidStation],
) -> list[HourlyNutrition]:
    """
    Build an hour-by-hour intake timeline at even pace.

    Args:
        total_distance: Race distance
        total_time: Estimated finish time in hours
        rates: Hourly nutrition targets
        stations: Aid stations (same distance unit as the race)

    Returns:
        One entry per started hour of racing
    """
    if total_distance <= 0:
        raise InvalidInputError(
            f"Total distance must be greater than zero, got {total_distance}"
        )
    if total_time <= 0:
        return []

    ordered = sorted(stations, key=lambda s: s.distance)
    plan: list[HourlyNutrition] = []

    for hour in range(1, math.ceil(total_time) + 1):
        distance_at_hour = min((total_distance / total_time) * hour, total_distance)

        passed = [s for s in ordered if s.distance <= distance_at_hour]
        last_station = passed[-1].name if passed else None

        plan.append(
            HourlyNutrition(
                hour=hour,
                distance=round_half_away(distance_at_hour * 10) / 10,
                carbs=rates.carbs_per_hour,
                sodium=rates.sodium_per_hour,
                water=rates.water_per_hour,
                calories=rates.calories_per_hour,
                aid_station=last_station or None,
            )
        )

    return plan


def generate_gear_checklist(
    distance_km: float,
    elevation_m: float,
    total_time: float,
    weather: str = "moderate",
) -> GearChecklist:
    """
    Suggest gear for a race.

    Args:
        distance_km: Race distance in kilometres
        elevation_m: Total climbing in metres
        total_time: Estimated finish time in hours
        weather: Expected conditions ("sunny", "moderate", "wet", "cold")

    Returns:
        Checklist with recommended items pre-checked
    """
    weather = weather.lower()

    rules: list[tuple[str, str, bool]] = [
        ("Trail Running Shoes", "Footwear", True),
        ("Running Socks", "Footwear", True),
        ("Running Shorts/Tights", "Clothing", True),
        ("Technical T-shirt", "Clothing", True),
        ("Hydration Pack/Vest", "Equipment", True),
        ("Headlamp", "Equipment", total_time > HEADLAMP_HOURS),
        ("Backup Batteries", "Equipment", total_time > BACKUP_BATTERY_HOURS),
        ("First Aid Kit", "Safety", distance_km > SAFETY_KIT_KM),
        ("Emergency Blanket", "Safety", distance_km > EMERGENCY_BLANKET_KM),
        ("Whistle", "Safety", distance_km > SAFETY_KIT_KM),
        ("Rain Jacket", "Weather", weather != "sunny"),
        ("Gloves", "Weather", weather == "cold"),
        ("Sunscreen", "Personal Care", True),
        ("Anti-chafing Balm", "Personal Care", distance_km > ANTI_CHAFE_KM),
        ("Sunglasses", "Accessories", True),
        ("Running Hat/Cap", "Accessories", True),
        ("Trekking Poles", "Equipment", elevation_m > POLES_ELEVATION_M),
        ("Compression Sleeves", "Accessories", False),
        ("GPS Watch", "Electronics", True),
        ("Phone", "Electronics", True),
    ]

    return GearChecklist(
        items=[
            GearItem(name=name, category=category, recommended=flag, checked=flag)
            for name, category, flag in rules
        ]
    )

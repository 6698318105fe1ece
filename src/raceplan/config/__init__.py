"""Configuration loading and settings."""

from raceplan.config.loader import (
    load_aid_stations_from_csv,
    load_aid_stations_from_json,
    load_race_profile,
    race_profile_from_dict,
    save_race_plan,
)
from raceplan.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "load_aid_stations_from_csv",
    "load_aid_stations_from_json",
    "load_race_profile",
    "race_profile_from_dict",
    "save_race_plan",
]

"""Load aid stations and race profiles from local files."""

import csv
import json
from pathlib import Path

from raceplan.models.aid_station import AidStation
from raceplan.models.race import RaceProfile
from raceplan.models.saved_race import SavedRace
from raceplan.models.units import parse_duration


def _parse_float(value: str) -> float | None:
    value = value.strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def load_aid_stations_from_csv(csv_path: str | Path) -> list[AidStation]:
    """
    Load aid stations from a CSV file.

    Expected CSV columns:
    - Name
    - Distance
    - Elevation (optional)

    Rows without a name or a numeric distance are skipped. Range checking is
    left to the schedule calculation.

    Args:
        csv_path: Path to the CSV file

    Returns:
        Aid stations in file order, with ids numbered from 1
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    stations: list[AidStation] = []

    with csv_path.open(encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            name = (row.get("Name") or "").strip()
            distance = _parse_float(row.get("Distance") or "")

            if not name or distance is None:
                continue

            stations.append(
                AidStation(
                    id=str(len(stations) + 1),
                    name=name,
                    distance=distance,
                    elevation=_parse_float(row.get("Elevation") or ""),
                )
            )

    return stations


def load_aid_stations_from_json(json_path: str | Path) -> list[AidStation]:
    """
    Load aid stations from a JSON file.

    Accepts a list of stations or a dict with an 'aid_stations' key.
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"JSON file not found: {json_path}")

    with json_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "aid_stations" in data:
        data = data["aid_stations"]

    if not isinstance(data, list):
        raise ValueError(
            "Invalid JSON format: expected list or dict with 'aid_stations' key"
        )

    return [AidStation.model_validate(s) for s in data]


def load_race_profile(json_path: str | Path) -> RaceProfile:
    """
    Load a race profile from JSON.

    ``estimated_time`` may be given in hours or as "HH:MM:SS" text.
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"JSON file not found: {json_path}")

    with json_path.open(encoding="utf-8") as f:
        data = json.load(f)

    return race_profile_from_dict(data)


def race_profile_from_dict(data: dict) -> RaceProfile:
    """Build a race profile from a dict, accepting "HH:MM:SS" estimated times."""
    estimated = data.get("estimated_time")
    if isinstance(estimated, str):
        data = {**data, "estimated_time": parse_duration(estimated)}

    return RaceProfile.model_validate(data)


def save_race_plan(race: SavedRace, json_path: str | Path) -> None:
    """
    Save a race plan to a JSON file.

    Args:
        race: Plan to save
        json_path: Path to output JSON file
    """
    json_path = Path(json_path)
    json_path.parent.mkdir(parents=True, exist_ok=True)

    with json_path.open("w", encoding="utf-8") as f:
        json.dump(race.model_dump(mode="json"), f, indent=2)

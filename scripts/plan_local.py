#!/usr/bin/env python3
"""Build a race plan from local files and write the HTML report."""

import argparse
import logging
import sys
import webbrowser
from pathlib import Path

from dotenv import load_dotenv

from raceplan.config import (
    get_settings,
    load_aid_stations_from_csv,
    load_aid_stations_from_json,
    load_race_profile,
    save_race_plan,
)
from raceplan.generator import ReportGenerator
from raceplan.models import NutritionRatePlan
from raceplan.processor import (
    SEGMENT_POLICIES,
    InvalidInputError,
    build_hourly_plan,
    generate_gear_checklist,
)
from raceplan.wizard import PlanningWizard, SessionContext

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_stations(path: Path):
    """Load aid stations from CSV or JSON based on file extension."""
    if path.suffix.lower() == ".json":
        return load_aid_stations_from_json(path)
    return load_aid_stations_from_csv(path)


def main():
    """Main entry point."""
    # Load environment variables from .env file
    load_dotenv()
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Build a race timing and nutrition plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 50 km race with aid stations from a CSV (Name,Distance,Elevation)
  uv run python scripts/plan_local.py --race data/race.json --stations data/stations.csv

  # Higher carb target, open the report when done
  uv run python scripts/plan_local.py --race data/race.json --stations data/stations.csv \\
      --carbs 90 --open
""",
    )
    parser.add_argument("--race", "-r", type=Path, required=True, help="Race profile JSON")
    parser.add_argument(
        "--stations", "-s", type=Path, required=True, help="Aid stations CSV or JSON"
    )
    parser.add_argument("--carbs", type=float, default=60, help="Carbs g/hour")
    parser.add_argument("--sodium", type=float, default=500, help="Sodium mg/hour")
    parser.add_argument("--water", type=float, default=500, help="Water ml/hour")
    parser.add_argument(
        "--calories", type=float, default=250, help="Calories kcal/hour"
    )
    parser.add_argument(
        "--policy",
        choices=SEGMENT_POLICIES,
        default=settings.segment_policy,
        help="Which segment each aid station's nutrition covers",
    )
    parser.add_argument(
        "--weather",
        choices=["sunny", "moderate", "wet", "cold"],
        default="moderate",
        help="Expected conditions for the gear checklist",
    )
    parser.add_argument(
        "--output", "-o", type=Path, default=settings.output_dir, help="Output directory"
    )
    parser.add_argument(
        "--save-json", type=Path, help="Also write the plan as JSON to this path"
    )
    parser.add_argument("--user", default="local", help="User id for --save-json")
    parser.add_argument("--open", action="store_true", help="Open the report in a browser")

    args = parser.parse_args()

    wizard = PlanningWizard(SessionContext(user_id=args.user), policy=args.policy)
    rates = NutritionRatePlan(
        carbs_per_hour=args.carbs,
        sodium_per_hour=args.sodium,
        water_per_hour=args.water,
        calories_per_hour=args.calories,
    )
    for field in rates.out_of_range_fields():
        logger.warning(f"{field} is outside the recommended range")

    try:
        wizard.submit_race_details(load_race_profile(args.race))
        wizard.submit_nutrition(rates)
        wizard.submit_aid_stations(load_stations(args.stations))
    except (FileNotFoundError, InvalidInputError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    wizard.confirm_review()

    profile = wizard.race_profile
    for station in wizard.schedule:
        needed = station.nutrition_needed
        print(
            f"  {station.name:<24} {station.distance:>7.1f}  "
            f"{station.estimated_time_display}  "
            f"{needed.carbs:>5}g {needed.sodium:>6}mg {needed.water:>6}ml"
        )

    generator = ReportGenerator(output_dir=args.output)
    html = generator.render_report(
        race_profile=profile,
        rates=rates,
        schedule=wizard.schedule,
        totals=wizard.totals,
        finish_segment=wizard.finish_segment,
        gear=generate_gear_checklist(
            profile.distance_km,
            profile.elevation_gain_m,
            profile.estimated_time,
            weather=args.weather,
        ),
        hourly_plan=build_hourly_plan(
            profile.distance, profile.estimated_time, rates, wizard.aid_stations
        ),
    )
    report_path = generator.write_report(html, profile.race_name)
    print(f"Report written to {report_path}")

    if args.save_json:
        save_race_plan(
            wizard.to_saved_race(profile.race_name or args.race.stem), args.save_json
        )
        print(f"Plan saved to {args.save_json}")

    if args.open:
        webbrowser.open(report_path.resolve().as_uri())


if __name__ == "__main__":
    main()

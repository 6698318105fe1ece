"""Jinja2 template rendering for printable race reports."""

import re
from datetime import UTC, datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from raceplan.models.aid_station import AidStationTiming, NutritionAmounts
from raceplan.models.gear import GearChecklist
from raceplan.models.nutrition import HourlyNutrition, NutritionRatePlan
from raceplan.models.race import RaceProfile
from raceplan.models.units import (
    UnitPreferences,
    format_distance,
    format_elevation,
    format_fluid,
    format_hours,
    format_weight,
    grams_to_oz,
    ml_to_oz,
)


def create_jinja_env(
    template_dir: str | Path | None = None,
    units: UnitPreferences | None = None,
) -> Environment:
    """
    Create Jinja2 environment for template rendering.

    Args:
        template_dir: Path to templates directory
        units: Unit preferences used by the formatting filters

    Returns:
        Configured Jinja2 Environment
    """
    if template_dir is None:
        # Default to package templates directory
        template_dir = Path(__file__).parent / "templates"

    units = units or UnitPreferences()

    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["distance"] = lambda v: format_distance(v, units.distance)
    env.filters["elevation"] = lambda v: format_elevation(v, units.elevation)
    env.filters["hours"] = format_hours
    env.filters["fluid"] = lambda ml: format_fluid(
        ml_to_oz(ml) if units.fluid == "imperial" else ml, units.fluid
    )
    env.filters["weight"] = lambda g: format_weight(
        grams_to_oz(g) if units.weight == "imperial" else g, units.weight
    )
    return env


def report_filename(race_name: str) -> str:
    """File name for a race report, e.g. 'western-states-100.html'."""
    slug = re.sub(r"[^a-z0-9]+", "-", race_name.lower()).strip("-")
    return f"{slug or 'race-plan'}.html"


class ReportGenerator:
    """Render the race plan report as a standalone printable HTML page."""

    def __init__(
        self,
        output_dir: str | Path | None = None,
        template_dir: str | Path | None = None,
    ):
        """
        Initialize report generator.

        Args:
            output_dir: Directory to write reports (only needed for write_report)
            template_dir: Path to Jinja2 templates (defaults to package templates)
        """
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.template_dir = template_dir

    def render_report(
        self,
        race_profile: RaceProfile,
        rates: NutritionRatePlan,
        schedule: list[AidStationTiming],
        totals: NutritionAmounts,
        finish_segment: NutritionAmounts | None = None,
        gear: GearChecklist | None = None,
        hourly_plan: list[HourlyNutrition] | None = None,
    ) -> str:
        """
        Render the report to an HTML string.

        Args:
            race_profile: Race being planned
            rates: Hourly nutrition targets
            schedule: Per-station timing and nutrition
            totals: Whole-race nutrition need
            finish_segment: Nutrition from the last station to the finish
            gear: Gear checklist to include
            hourly_plan: Hour-by-hour timeline to include

        Returns:
            Rendered HTML
        """
        env = create_jinja_env(self.template_dir, race_profile.unit_preferences)
        template = env.get_template("report.html")

        context = {
            "race": race_profile,
            "rates": rates,
            "schedule": schedule,
            "totals": totals,
            "finish_segment": finish_segment,
            "gear_by_category": gear.by_category() if gear else {},
            "hourly_plan": hourly_plan or [],
            "generated_at": datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC"),
        }
        return template.render(**context)

    def write_report(self, html: str, race_name: str) -> Path:
        """Write rendered HTML to the output directory."""
        if self.output_dir is None:
            raise ValueError("No output directory configured")
        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / report_filename(race_name)
        output_path.write_text(html, encoding="utf-8")
        return output_path

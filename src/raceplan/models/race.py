"""Race profile data model."""

from datetime import date, time

from pydantic import BaseModel, Field, computed_field

from raceplan.models.units import (
    UnitPreferences,
    format_distance,
    format_elevation,
    format_hours,
    parse_duration,
    to_km,
    to_meters,
)


class RaceProfile(BaseModel):
    """A race as entered on the race details step."""

    race_name: str = Field(default="", description="Race display name")
    distance: float = Field(
        ..., gt=0, description="Total distance in the profile's distance unit"
    )
    elevation_gain: float = Field(
        default=0, ge=0, description="Total climbing in the profile's elevation unit"
    )
    estimated_time: float = Field(
        ..., ge=0, description="Estimated completion time in hours"
    )
    race_date: date | None = Field(default=None)
    start_time: time | None = Field(default=None)
    unit_preferences: UnitPreferences = Field(default_factory=UnitPreferences)

    @classmethod
    def from_form(
        cls,
        distance: float,
        estimated_time: str,
        race_name: str = "",
        elevation_gain: float = 0,
        unit_preferences: UnitPreferences | None = None,
        race_date: date | None = None,
        start_time: time | None = None,
    ) -> "RaceProfile":
        """Build a profile from form input with an HH:MM:SS finish time."""
        return cls(
            race_name=race_name.strip(),
            distance=distance,
            elevation_gain=elevation_gain,
            estimated_time=parse_duration(estimated_time),
            race_date=race_date,
            start_time=start_time,
            unit_preferences=unit_preferences or UnitPreferences(),
        )

    @property
    def distance_km(self) -> float:
        """Distance normalized to kilometres."""
        return to_km(self.distance, self.unit_preferences.distance)

    @property
    def elevation_gain_m(self) -> float:
        """Elevation gain normalized to metres."""
        return to_meters(self.elevation_gain, self.unit_preferences.elevation)

    @computed_field
    @property
    def distance_display(self) -> str:
        return format_distance(self.distance, self.unit_preferences.distance)

    @computed_field
    @property
    def elevation_display(self) -> str:
        return format_elevation(self.elevation_gain, self.unit_preferences.elevation)

    @computed_field
    @property
    def estimated_time_display(self) -> str:
        """Estimated finish time as HH:MM."""
        return format_hours(self.estimated_time)

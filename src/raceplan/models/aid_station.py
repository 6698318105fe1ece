"""Aid station and per-station timing data models."""

from pydantic import BaseModel, Field, computed_field

from raceplan.models.units import format_hours


class NutritionAmounts(BaseModel):
    """Whole-unit nutrition quantities: carbs (g), sodium (mg), water (ml)."""

    carbs: int = Field(default=0, ge=0)
    sodium: int = Field(default=0, ge=0)
    water: int = Field(default=0, ge=0)

    def __add__(self, other: "NutritionAmounts") -> "NutritionAmounts":
        return NutritionAmounts(
            carbs=self.carbs + other.carbs,
            sodium=self.sodium + other.sodium,
            water=self.water + other.water,
        )


class AidStation(BaseModel):
    """A checkpoint along the course where runners can resupply.

    Distance is not range-checked here; the allocator rejects distances
    outside the race so that bad input surfaces as an error.
    """

    id: str = Field(..., description="Identifier, unique within a race")
    name: str = Field(default="", description="Display name")
    distance: float = Field(..., description="Distance from start")
    elevation: float | None = Field(default=None, description="Display only")


class AidStationTiming(AidStation):
    """An aid station with its estimated arrival and segment nutrition."""

    estimated_time: float = Field(..., ge=0, description="Hours from race start")
    nutrition_needed: NutritionAmounts = Field(default_factory=NutritionAmounts)

    @computed_field
    @property
    def estimated_time_display(self) -> str:
        """Arrival as HH:MM elapsed."""
        return format_hours(self.estimated_time)

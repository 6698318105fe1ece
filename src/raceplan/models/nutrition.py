"""Nutrition rate plan and food item models."""

from typing import Literal

from pydantic import BaseModel, Field

from raceplan.models.aid_station import NutritionAmounts
from raceplan.models.units import round_half_away

# Recommended hourly ranges (min, max). Shown as guidance; never enforced.
CARBS_RANGE = (20, 120)  # g/h
SODIUM_RANGE = (200, 1000)  # mg/h
WATER_RANGE = (200, 1000)  # ml/h
CALORIES_RANGE = (200, 300)  # kcal/h

DEFAULT_CARBS_PER_HOUR = 60
DEFAULT_SODIUM_PER_HOUR = 500
DEFAULT_WATER_PER_HOUR = 500
DEFAULT_CALORIES_PER_HOUR = 250

FoodCategory = Literal["gel", "drink", "bar", "supplement", "food", "other"]


class NutritionRatePlan(BaseModel):
    """
    Target hourly intake.

    Calories are display only; the aid station allocator works on carbs,
    sodium and water.
    """

    carbs_per_hour: float = Field(
        default=DEFAULT_CARBS_PER_HOUR, ge=0, allow_inf_nan=False
    )
    sodium_per_hour: float = Field(
        default=DEFAULT_SODIUM_PER_HOUR, ge=0, allow_inf_nan=False
    )
    water_per_hour: float = Field(
        default=DEFAULT_WATER_PER_HOUR, ge=0, allow_inf_nan=False
    )
    calories_per_hour: float = Field(
        default=DEFAULT_CALORIES_PER_HOUR, ge=0, allow_inf_nan=False
    )

    def out_of_range_fields(self) -> list[str]:
        """Names of rates outside the recommended ranges."""
        checks = {
            "carbs_per_hour": (self.carbs_per_hour, CARBS_RANGE),
            "sodium_per_hour": (self.sodium_per_hour, SODIUM_RANGE),
            "water_per_hour": (self.water_per_hour, WATER_RANGE),
            "calories_per_hour": (self.calories_per_hour, CALORIES_RANGE),
        }
        return [
            name
            for name, (value, (low, high)) in checks.items()
            if not low <= value <= high
        ]

    def total_calories(self, hours: float) -> int:
        """Calories for the given number of hours, rounded."""
        return round_half_away(self.calories_per_hour * hours)


class FoodItem(BaseModel):
    """Something a runner eats or drinks, logged against a segment."""

    name: str = Field(..., description="Product name")
    category: FoodCategory = Field(default="other")
    carbs_per_serving: float = Field(default=0, ge=0)
    sodium_per_serving: float = Field(default=0, ge=0)
    water_per_serving: float = Field(default=0, ge=0)
    servings: float = Field(default=1, ge=0)
    serving_size: str | None = Field(default=None, description="e.g. '1 packet'")

    @property
    def amounts(self) -> NutritionAmounts:
        """Nutrition delivered by all servings of this item."""
        return NutritionAmounts(
            carbs=round_half_away(self.carbs_per_serving * self.servings),
            sodium=round_half_away(self.sodium_per_serving * self.servings),
            water=round_half_away(self.water_per_serving * self.servings),
        )


def sum_food_items(items: list[FoodItem]) -> NutritionAmounts:
    """Total nutrition across logged food items."""
    total = NutritionAmounts()
    for item in items:
        total = total + item.amounts
    return total


# Common race products
SAMPLE_FOOD_ITEMS = [
    FoodItem(
        name="Energy Gel",
        category="gel",
        carbs_per_serving=25,
        sodium_per_serving=50,
        serving_size="1 packet",
    ),
    FoodItem(
        name="Sports Drink",
        category="drink",
        carbs_per_serving=20,
        sodium_per_serving=200,
        water_per_serving=500,
        serving_size="500ml",
    ),
    FoodItem(
        name="Energy Bar",
        category="bar",
        carbs_per_serving=40,
        sodium_per_serving=100,
        serving_size="1 bar",
    ),
    FoodItem(
        name="Salt Tablets",
        category="supplement",
        sodium_per_serving=300,
        serving_size="1 tablet",
    ),
    FoodItem(
        name="Banana",
        category="food",
        carbs_per_serving=27,
        sodium_per_serving=1,
        serving_size="1 medium",
    ),
]


class HourlyNutrition(BaseModel):
    """One hour of the race-day intake timeline."""

    hour: int = Field(..., ge=1)
    distance: float = Field(..., ge=0, description="Projected distance at hour end")
    carbs: float = Field(..., ge=0)
    sodium: float = Field(..., ge=0)
    water: float = Field(..., ge=0)
    calories: float = Field(default=0, ge=0)
    aid_station: str | None = Field(
        default=None, description="Last aid station passed by this hour"
    )

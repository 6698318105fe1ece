"""Tests for data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from raceplan.models import (
    SAMPLE_FOOD_ITEMS,
    AidStation,
    AidStationTiming,
    FoodItem,
    GearChecklist,
    GearItem,
    NutritionAmounts,
    NutritionRatePlan,
    RaceProfile,
    SavedRace,
    UnitPreferences,
    sum_food_items,
)


class TestRaceProfile:
    """Tests for RaceProfile model."""

    def test_from_form_parses_time(self):
        """Test the form constructor parses HH:MM:SS into hours."""
        profile = RaceProfile.from_form(
            race_name="  Lakes 100  ",
            distance=100,
            estimated_time="22:30:00",
            elevation_gain=6000,
        )

        assert profile.race_name == "Lakes 100"
        assert profile.estimated_time == 22.5
        assert profile.estimated_time_display == "22:30"

    def test_distance_must_be_positive(self):
        with pytest.raises(ValidationError):
            RaceProfile(distance=0, estimated_time=10)

    def test_imperial_normalization(self):
        """Test imperial distance and elevation normalize to metric."""
        profile = RaceProfile(
            distance=100,
            elevation_gain=18000,
            estimated_time=24,
            unit_preferences=UnitPreferences.uniform("imperial"),
        )

        assert profile.distance_km == pytest.approx(160.934)
        assert profile.elevation_gain_m == pytest.approx(5486.4)
        assert profile.distance_display == "100.0 mi"
        assert profile.elevation_display == "18000 ft"

    def test_optional_date(self):
        profile = RaceProfile(distance=50, estimated_time=10, race_date="2026-06-27")

        assert profile.race_date == date(2026, 6, 27)


class TestNutritionAmounts:
    """Tests for NutritionAmounts model."""

    def test_addition(self):
        total = NutritionAmounts(carbs=10, sodium=100, water=200) + NutritionAmounts(
            carbs=5, sodium=50, water=300
        )

        assert total == NutritionAmounts(carbs=15, sodium=150, water=500)

    def test_rejects_negative(self):
        with pytest.raises(ValidationError):
            NutritionAmounts(carbs=-1)


class TestNutritionRatePlan:
    """Tests for NutritionRatePlan model."""

    def test_defaults(self):
        plan = NutritionRatePlan()

        assert plan.carbs_per_hour == 60
        assert plan.sodium_per_hour == 500
        assert plan.water_per_hour == 500
        assert plan.out_of_range_fields() == []

    def test_out_of_range_not_enforced(self):
        """Test rates outside the guidance are accepted and reported."""
        plan = NutritionRatePlan(carbs_per_hour=150, sodium_per_hour=100)

        assert plan.out_of_range_fields() == ["carbs_per_hour", "sodium_per_hour"]

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite_rates(self, value):
        with pytest.raises(ValidationError):
            NutritionRatePlan(carbs_per_hour=value)

    def test_calories_are_display_only(self):
        """Test calories default to 250/h and total over the race."""
        plan = NutritionRatePlan()

        assert plan.calories_per_hour == 250
        assert plan.total_calories(10.5) == 2625
        assert NutritionRatePlan(calories_per_hour=400).out_of_range_fields() == [
            "calories_per_hour"
        ]


class TestFoodItem:
    """Tests for FoodItem and summing consumption."""

    def test_defaults(self):
        item = FoodItem(name="Mystery Snack")

        assert item.category == "other"
        assert item.servings == 1
        assert item.amounts == NutritionAmounts()

    def test_servings_scale_amounts(self):
        item = FoodItem(
            name="Energy Gel", carbs_per_serving=25, sodium_per_serving=50, servings=3
        )

        assert item.amounts == NutritionAmounts(carbs=75, sodium=150, water=0)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            FoodItem(name="Pizza", category="dessert")

    def test_sum_food_items(self):
        consumed = sum_food_items(SAMPLE_FOOD_ITEMS[:2])

        assert consumed == NutritionAmounts(carbs=45, sodium=250, water=500)

    def test_sum_empty(self):
        assert sum_food_items([]) == NutritionAmounts()


class TestAidStation:
    """Tests for aid station models."""

    def test_distance_not_range_checked(self):
        """Test out-of-range distances are left to the allocator."""
        station = AidStation(id="1", distance=-5)

        assert station.distance == -5

    def test_timing_display(self):
        timing = AidStationTiming(id="1", name="Col", distance=20, estimated_time=4.25)

        assert timing.estimated_time_display == "04:15"
        assert timing.nutrition_needed == NutritionAmounts()


class TestGearChecklist:
    """Tests for GearChecklist model."""

    def test_by_category_and_toggle(self):
        checklist = GearChecklist(
            items=[
                GearItem(name="Headlamp", category="Equipment", recommended=True),
                GearItem(name="Whistle", category="Safety"),
                GearItem(name="Poles", category="Equipment"),
            ]
        )

        grouped = checklist.by_category()
        assert [i.name for i in grouped["Equipment"]] == ["Headlamp", "Poles"]
        assert [i.name for i in checklist.recommended_items] == ["Headlamp"]

        toggled = checklist.toggle("Whistle")
        assert toggled is not None
        assert toggled.checked is True
        assert checklist.toggle("Missing") is None

    def test_add_custom_item(self):
        """Test custom items are checked but not recommended."""
        checklist = GearChecklist()

        item = checklist.add_item("  Trail Map  ", "Navigation")

        assert item is not None
        assert item.name == "Trail Map"
        assert item.checked is True
        assert item.recommended is False
        assert checklist.by_category()["Navigation"] == [item]

    def test_add_blank_item_ignored(self):
        checklist = GearChecklist()

        assert checklist.add_item("   ") is None
        assert checklist.items == []

    def test_remove_item(self):
        checklist = GearChecklist(
            items=[
                GearItem(name="Whistle", category="Safety"),
                GearItem(name="Poles", category="Equipment"),
            ]
        )

        assert checklist.remove_item("Whistle") is True
        assert [i.name for i in checklist.items] == ["Poles"]
        assert checklist.remove_item("Whistle") is False


class TestSavedRace:
    """Tests for SavedRace model."""

    def test_generates_id_and_timestamps(self, sample_profile):
        race = SavedRace(user_id="u1", race_name="Mountain 50K", race_profile=sample_profile)

        assert len(race.id) == 32
        assert race.created_at.tzinfo is not None
        assert race.segment_policy == "segment_from_previous"

    def test_requires_user(self, sample_profile):
        with pytest.raises(ValidationError):
            SavedRace(user_id="", race_name="Mountain 50K", race_profile=sample_profile)

    def test_json_round_trip_ignores_display_fields(self, sample_profile):
        """Test computed display fields in stored JSON do not break loading."""
        race = SavedRace(
            user_id="u1",
            race_name="Mountain 50K",
            race_profile=sample_profile,
            schedule=[AidStationTiming(id="1", distance=10, estimated_time=2)],
        )

        loaded = SavedRace.model_validate_json(race.model_dump_json())

        assert loaded == race

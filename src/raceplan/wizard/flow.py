"""Linear race planning wizard."""

import logging
from enum import Enum

from pydantic import BaseModel, Field

from raceplan.models.aid_station import AidStation, AidStationTiming, NutritionAmounts
from raceplan.models.nutrition import FoodItem, NutritionRatePlan, sum_food_items
from raceplan.models.race import RaceProfile
from raceplan.models.saved_race import SavedRace, SegmentPolicy
from raceplan.processor.exceptions import WizardStateError
from raceplan.processor.schedule import (
    SEGMENT_FROM_PREVIOUS,
    apply_override,
    calculate_totals,
    compute_finish_segment,
    compute_remaining,
    compute_schedule,
)

logger = logging.getLogger(__name__)


class WizardStage(str, Enum):
    """Wizard steps, in order."""

    RACE_DETAILS = "race_details"
    NUTRITION = "nutrition"
    AID_STATIONS = "aid_stations"
    REVIEW = "review"
    REPORT = "report"


STAGE_ORDER = list(WizardStage)


class SessionContext(BaseModel):
    """Who is planning, and which saved race (if any) they opened."""

    user_id: str | None = Field(default=None, description="Signed-in user identity")
    saved_race: SavedRace | None = Field(default=None)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)


class PlanningWizard:
    """
    Drive a plan through race details, nutrition, aid stations, review and
    report.

    The schedule is recomputed every time aid stations are submitted and is
    discarded by start_over(). Nothing is persisted here; callers save the
    result of to_saved_race() themselves.
    """

    def __init__(
        self,
        context: SessionContext | None = None,
        policy: SegmentPolicy = SEGMENT_FROM_PREVIOUS,
    ):
        self.context = context or SessionContext()
        self.policy = policy
        self._reset()

        if self.context.saved_race is not None:
            self._load_saved_race(self.context.saved_race)

    def _reset(self) -> None:
        self.stage = WizardStage.RACE_DETAILS
        self.race_profile: RaceProfile | None = None
        self.rates: NutritionRatePlan | None = None
        self.aid_stations: list[AidStation] = []
        self.schedule: list[AidStationTiming] = []
        self.saved_race_id: str | None = None

    def _load_saved_race(self, saved: SavedRace) -> None:
        self.race_profile = saved.race_profile
        self.rates = saved.nutrition_plan
        self.aid_stations = list(saved.aid_stations)
        self.schedule = list(saved.schedule)
        self.policy = saved.segment_policy
        self.saved_race_id = saved.id
        self.stage = WizardStage.REVIEW
        logger.info(f"Loaded saved race {saved.race_name!r} ({saved.id})")

    def _require_stage(self, *stages: WizardStage) -> None:
        if self.stage not in stages:
            expected = ", ".join(s.value for s in stages)
            raise WizardStateError(
                f"Cannot do that at stage {self.stage.value} (expected {expected})"
            )

    def submit_race_details(self, profile: RaceProfile) -> WizardStage:
        """Record the race profile and move to nutrition."""
        self._require_stage(WizardStage.RACE_DETAILS)
        self.race_profile = profile
        self.stage = WizardStage.NUTRITION
        return self.stage

    def submit_nutrition(self, rates: NutritionRatePlan) -> WizardStage:
        """Record hourly targets and move to aid stations."""
        self._require_stage(WizardStage.NUTRITION)
        self.rates = rates
        self.stage = WizardStage.AID_STATIONS
        return self.stage

    def submit_aid_stations(self, stations: list[AidStation]) -> WizardStage:
        """
        Compute a fresh schedule and move to review.

        InvalidInputError from the allocator propagates and the wizard stays
        on the aid station step.
        """
        self._require_stage(WizardStage.AID_STATIONS)
        self.schedule = compute_schedule(
            self.race_profile.distance,
            self.race_profile.estimated_time,
            self.rates,
            stations,
            policy=self.policy,
        )
        self.aid_stations = sorted(stations, key=lambda s: s.distance)
        self.stage = WizardStage.REVIEW
        return self.stage

    def override_station(
        self,
        index: int,
        estimated_time: float | None = None,
        nutrition: NutritionAmounts | None = None,
    ) -> AidStationTiming:
        """Apply a user override to one station during review."""
        self._require_stage(WizardStage.REVIEW)
        self.schedule = apply_override(
            self.schedule, index, estimated_time=estimated_time, nutrition=nutrition
        )
        return self.schedule[index]

    def remaining_at(self, index: int, consumed: list[FoodItem]) -> NutritionAmounts:
        """What is still needed for a station's segment given logged food."""
        if not 0 <= index < len(self.schedule):
            raise IndexError(f"No aid station at index {index}")
        return compute_remaining(
            self.schedule[index].nutrition_needed, sum_food_items(consumed)
        )

    def confirm_review(self) -> WizardStage:
        self._require_stage(WizardStage.REVIEW)
        self.stage = WizardStage.REPORT
        return self.stage

    def back(self) -> WizardStage:
        """Return to the previous stage. Entered data is kept."""
        position = STAGE_ORDER.index(self.stage)
        if position == 0:
            raise WizardStateError("Already at the first stage")
        self.stage = STAGE_ORDER[position - 1]
        return self.stage

    def start_over(self) -> WizardStage:
        """Discard everything and go back to race details."""
        self._reset()
        return self.stage

    @property
    def totals(self) -> NutritionAmounts | None:
        """Whole-race nutrition need once profile and rates are known."""
        if self.race_profile is None or self.rates is None:
            return None
        return calculate_totals(self.rates, self.race_profile.estimated_time)

    @property
    def finish_segment(self) -> NutritionAmounts | None:
        """Nutrition for the last aid station to the finish."""
        if self.race_profile is None or self.rates is None:
            return None
        if self.policy != SEGMENT_FROM_PREVIOUS:
            return None
        return compute_finish_segment(
            self.race_profile.estimated_time, self.rates, self.schedule
        )

    def to_saved_race(self, race_name: str | None = None) -> SavedRace:
        """
        Snapshot the plan for saving to the user's account.

        Raises:
            WizardStateError: If nobody is signed in or no schedule exists yet
        """
        if not self.context.is_authenticated:
            raise WizardStateError("Sign in to save a race plan")
        self._require_stage(WizardStage.REVIEW, WizardStage.REPORT)

        name = (race_name or self.race_profile.race_name).strip()
        if not name:
            raise WizardStateError("A race name is required to save")

        saved = SavedRace(
            user_id=self.context.user_id,
            race_name=name,
            race_profile=self.race_profile,
            aid_stations=self.aid_stations,
            nutrition_plan=self.rates,
            schedule=self.schedule,
            segment_policy=self.policy,
        )
        original = self.context.saved_race
        if self.saved_race_id and original is not None:
            saved.id = self.saved_race_id
            saved.created_at = original.created_at
        return saved

"""Saved race plan record."""

from datetime import UTC, datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from raceplan.models.aid_station import AidStation, AidStationTiming
from raceplan.models.nutrition import NutritionRatePlan
from raceplan.models.race import RaceProfile

SegmentPolicy = Literal["segment_from_previous", "segment_to_next"]


def _now() -> datetime:
    return datetime.now(UTC)


class SavedRace(BaseModel):
    """A race plan persisted to a user's account."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: str = Field(..., min_length=1, description="Owning user identity")
    race_name: str = Field(..., min_length=1)
    race_profile: RaceProfile
    aid_stations: list[AidStation] = Field(default_factory=list)
    nutrition_plan: NutritionRatePlan = Field(default_factory=NutritionRatePlan)
    schedule: list[AidStationTiming] = Field(
        default_factory=list, description="Computed schedule snapshot"
    )
    segment_policy: SegmentPolicy = Field(default="segment_from_previous")
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

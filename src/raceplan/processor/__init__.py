"""Schedule calculation and race-day planning."""

from raceplan.processor.exceptions import (
    InvalidInputError,
    RacePlanError,
    WizardStateError,
)
from raceplan.processor.planning import build_hourly_plan, generate_gear_checklist
from raceplan.processor.schedule import (
    SEGMENT_FROM_PREVIOUS,
    SEGMENT_POLICIES,
    SEGMENT_TO_NEXT,
    apply_override,
    calculate_totals,
    compute_finish_segment,
    compute_remaining,
    compute_schedule,
    segment_nutrition,
)

__all__ = [
    "SEGMENT_FROM_PREVIOUS",
    "SEGMENT_POLICIES",
    "SEGMENT_TO_NEXT",
    "InvalidInputError",
    "RacePlanError",
    "WizardStateError",
    "apply_override",
    "build_hourly_plan",
    "calculate_totals",
    "compute_finish_segment",
    "compute_remaining",
    "compute_schedule",
    "generate_gear_checklist",
    "segment_nutrition",
]

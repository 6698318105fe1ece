"""Aid station timing and segment nutrition allocation.

Arrival at each aid station is interpolated linearly from its share of the
total distance. Nutrition is allocated per segment: the hourly rate times the
time spent on the segment, rounded half away from zero per field. Rounding is
applied independently per station, so summed station doses can drift from
``rate * total_time`` by a few units.
"""

import logging
import math

from raceplan.models.aid_station import AidStation, AidStationTiming, NutritionAmounts
from raceplan.models.nutrition import NutritionRatePlan
from raceplan.models.saved_race import SegmentPolicy
from raceplan.models.units import round_half_away
from raceplan.processor.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

# Dose at a station covers the time since the previous station (or start)
SEGMENT_FROM_PREVIOUS: SegmentPolicy = "segment_from_previous"
# Dose at a station covers the time until the next station; last station gets 0
SEGMENT_TO_NEXT: SegmentPolicy = "segment_to_next"

SEGMENT_POLICIES = (SEGMENT_FROM_PREVIOUS, SEGMENT_TO_NEXT)


def _validate_race(total_distance: float, total_time: float) -> None:
    if not math.isfinite(total_distance) or total_distance <= 0:
        raise InvalidInputError(
            f"Total distance must be greater than zero, got {total_distance}"
        )
    if not math.isfinite(total_time) or total_time < 0:
        raise InvalidInputError(
            f"Total time must be zero or more hours, got {total_time}"
        )


def _validate_stations(stations: list[AidStation], total_distance: float) -> None:
    for station in stations:
        # NaN fails both comparisons
        if not 0 <= station.distance <= total_distance:
            raise InvalidInputError(
                f"Aid station {station.name or station.id!r} at distance "
                f"{station.distance} is outside the race (0-{total_distance})"
            )


def _validate_rates(rates: NutritionRatePlan, total_time: float) -> None:
    # Every segment is at most total_time long
    for name in ("carbs_per_hour", "sodium_per_hour", "water_per_hour"):
        rate = getattr(rates, name)
        if not math.isfinite(rate) or rate < 0:
            raise InvalidInputError(f"{name} must be a finite rate, got {rate}")
        if not math.isfinite(rate * total_time):
            raise InvalidInputError(
                f"{name} of {rate} over {total_time}h is too large to plan"
            )


def segment_nutrition(
    rates: NutritionRatePlan,
    segment_hours: float,
) -> NutritionAmounts:
    """Nutrition needed for a segment of the given duration."""
    return NutritionAmounts(
        carbs=round_half_away(rates.carbs_per_hour * segment_hours),
        sodium=round_half_away(rates.sodium_per_hour * segment_hours),
        water=round_half_away(rates.water_per_hour * segment_hours),
    )


def compute_schedule(
    total_distance: float,
    total_time: float,
    rates: NutritionRatePlan,
    stations: list[AidStation],
    policy: SegmentPolicy = SEGMENT_FROM_PREVIOUS,
) -> list[AidStationTiming]:
    """
    Compute arrival times and segment nutrition for each aid station.

    Stations are sorted by distance before processing and returned in that
    order.

    Args:
        total_distance: Race distance (same unit as station distances)
        total_time: Estimated finish time in hours
        rates: Hourly nutrition targets
        stations: Aid stations along the course
        policy: Which segment each station's dose covers

    Returns:
        One AidStationTiming per station, sorted by distance

    Raises:
        InvalidInputError: If the distance is not positive, the time is
            negative, a rate is not finite, or a station lies outside
            [0, total_distance]
    """
    if policy not in SEGMENT_POLICIES:
        raise ValueError(f"Unknown segment policy: {policy}")

    _validate_race(total_distance, total_time)
    _validate_rates(rates, total_time)
    _validate_stations(stations, total_distance)

    ordered = sorted(stations, key=lambda s: s.distance)
    arrival_times = [(s.distance / total_distance) * total_time for s in ordered]

    schedule: list[AidStationTiming] = []
    for i, station in enumerate(ordered):
        if policy == SEGMENT_FROM_PREVIOUS:
            previous_time = arrival_times[i - 1] if i > 0 else 0.0
            segment_hours = arrival_times[i] - previous_time
        elif i + 1 < len(ordered):
            segment_hours = arrival_times[i + 1] - arrival_times[i]
        else:
            segment_hours = 0.0

        schedule.append(
            AidStationTiming(
                **station.model_dump(include=set(AidStation.model_fields)),
                estimated_time=arrival_times[i],
                nutrition_needed=segment_nutrition(rates, segment_hours),
            )
        )

    logger.debug(
        f"Scheduled {len(schedule)} aid stations over {total_distance} "
        f"in {total_time}h ({policy})"
    )
    return schedule


def compute_finish_segment(
    total_time: float,
    rates: NutritionRatePlan,
    schedule: list[AidStationTiming],
) -> NutritionAmounts:
    """
    Nutrition for the final segment from the last aid station to the finish.

    Together with the per-station doses of a segment-from-previous schedule
    this covers the whole race.
    """
    last_time = max((s.estimated_time for s in schedule), default=0.0)
    return segment_nutrition(rates, max(total_time - last_time, 0.0))


def compute_remaining(
    target: NutritionAmounts,
    consumed: NutritionAmounts,
) -> NutritionAmounts:
    """Nutrition still needed for a segment after what was consumed."""
    return NutritionAmounts(
        carbs=max(0, target.carbs - consumed.carbs),
        sodium=max(0, target.sodium - consumed.sodium),
        water=max(0, target.water - consumed.water),
    )


def calculate_totals(rates: NutritionRatePlan, total_time: float) -> NutritionAmounts:
    """Whole-race nutrition need, rounded once."""
    if not math.isfinite(total_time) or total_time < 0:
        raise InvalidInputError(
            f"Total time must be zero or more hours, got {total_time}"
        )
    _validate_rates(rates, total_time)
    return segment_nutrition(rates, total_time)


def apply_override(
    schedule: list[AidStationTiming],
    index: int,
    estimated_time: float | None = None,
    nutrition: NutritionAmounts | None = None,
) -> list[AidStationTiming]:
    """
    Replace one station's timing and/or nutrition with user-entered values.

    The input schedule is left untouched; a new list is returned.

    Raises:
        IndexError: If index is outside the schedule
        InvalidInputError: If the override time is negative or not finite
    """
    if not 0 <= index < len(schedule):
        raise IndexError(f"No aid station at index {index}")

    update: dict = {}
    if estimated_time is not None:
        if not math.isfinite(estimated_time) or estimated_time < 0:
            raise InvalidInputError(
                f"Estimated time must be zero or more hours, got {estimated_time}"
            )
        update["estimated_time"] = estimated_time
    if nutrition is not None:
        update["nutrition_needed"] = nutrition.model_copy()

    updated = list(schedule)
    updated[index] = schedule[index].model_copy(update=update)
    return updated

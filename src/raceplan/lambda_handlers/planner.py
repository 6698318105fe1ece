"""Lambda handler for computing, rendering and saving a race plan."""

import json
import logging

import boto3
from pydantic import ValidationError

from raceplan.config import get_settings, race_profile_from_dict
from raceplan.generator import ReportGenerator, report_filename
from raceplan.models import AidStation, NutritionRatePlan
from raceplan.persistence import DuplicateRaceNameError, SavedRaceStore
from raceplan.processor import (
    InvalidInputError,
    WizardStateError,
    build_hourly_plan,
    generate_gear_checklist,
)
from raceplan.wizard import PlanningWizard, SessionContext

logger = logging.getLogger()
logger.setLevel(logging.INFO)

_s3_client = None


def get_s3_client():
    """Lazy-load the shared S3 client."""
    global _s3_client
    if _s3_client is None:
        _s3_client = boto3.client("s3", region_name=get_settings().aws_region)
    return _s3_client


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def build_wizard(event: dict) -> PlanningWizard:
    """
    Run the wizard through to the report stage from a request payload.

    Raises:
        InvalidInputError: If the allocator rejects the numbers
        ValueError: If the payload fails validation
    """
    settings = get_settings()
    context = SessionContext(user_id=event.get("user_id"))
    wizard = PlanningWizard(context, policy=event.get("policy", settings.segment_policy))

    wizard.submit_race_details(race_profile_from_dict(event["race_profile"]))
    wizard.submit_nutrition(
        NutritionRatePlan.model_validate(event.get("nutrition_plan") or {})
    )
    wizard.submit_aid_stations(
        [AidStation.model_validate(s) for s in event.get("aid_stations", [])]
    )
    wizard.confirm_review()
    return wizard


def handler(event, context):  # noqa: ARG001
    """
    Lambda handler for plan requests.

    Event fields:
        user_id: Signed-in user (required when saving)
        race_profile: Race profile dict
        nutrition_plan: Hourly rates dict
        aid_stations: List of aid station dicts
        policy: Optional segment policy
        weather: Optional expected conditions for the gear list
        save: Save the plan to the user's account
        replace: Overwrite a saved race with the same name
    """
    settings = get_settings()

    if "race_profile" not in event:
        return _response(400, {"error": "race_profile is required"})

    try:
        wizard = build_wizard(event)
    except (InvalidInputError, ValueError) as e:
        # pydantic ValidationError is a ValueError
        logger.warning(f"Rejected plan request: {e}")
        return _response(400, {"error": str(e)})

    profile = wizard.race_profile
    totals = wizard.totals
    html = ReportGenerator().render_report(
        race_profile=profile,
        rates=wizard.rates,
        schedule=wizard.schedule,
        totals=totals,
        finish_segment=wizard.finish_segment,
        gear=generate_gear_checklist(
            profile.distance_km,
            profile.elevation_gain_m,
            profile.estimated_time,
            weather=event.get("weather", "moderate"),
        ),
        hourly_plan=build_hourly_plan(
            profile.distance, profile.estimated_time, wizard.rates, wizard.aid_stations
        ),
    )

    owner = wizard.context.user_id or "anonymous"
    report_key = f"reports/{owner}/{report_filename(profile.race_name)}"
    if settings.dry_run:
        logger.info(f"Dry run: not uploading {report_key}")
    else:
        get_s3_client().put_object(
            Bucket=settings.reports_bucket,
            Key=report_key,
            Body=html.encode("utf-8"),
            ContentType="text/html",
        )
        logger.info(f"Uploaded report to s3://{settings.reports_bucket}/{report_key}")

    saved_race_id = None
    if event.get("save"):
        try:
            saved = wizard.to_saved_race(event.get("race_name"))
        except WizardStateError as e:
            status = 400 if wizard.context.is_authenticated else 401
            return _response(status, {"error": str(e)})

        store = SavedRaceStore(settings.data_bucket, s3_client=get_s3_client())
        try:
            saved = store.create(saved, replace=bool(event.get("replace")))
        except DuplicateRaceNameError as e:
            return _response(409, {"error": str(e), "existing_id": e.existing_id})
        saved_race_id = saved.id

    return _response(
        200,
        {
            "schedule": [s.model_dump(mode="json") for s in wizard.schedule],
            "totals": totals.model_dump(),
            "finish_segment": (
                wizard.finish_segment.model_dump() if wizard.finish_segment else None
            ),
            "report_key": report_key,
            "saved_race_id": saved_race_id,
        },
    )

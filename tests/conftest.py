"""Pytest fixtures for race planner tests."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from raceplan.models import AidStation, NutritionRatePlan, RaceProfile


@pytest.fixture
def sample_rates() -> NutritionRatePlan:
    """Hourly targets used across scenarios."""
    return NutritionRatePlan(carbs_per_hour=60, sodium_per_hour=500, water_per_hour=500)


@pytest.fixture
def sample_stations() -> list[AidStation]:
    """Three aid stations on a 50 km course."""
    return [
        AidStation(id="1", name="Aid Station 1", distance=10),
        AidStation(id="2", name="Aid Station 2", distance=25),
        AidStation(id="3", name="Aid Station 3", distance=40),
    ]


@pytest.fixture
def sample_profile() -> RaceProfile:
    """A 50 km race with a 10 hour finish."""
    return RaceProfile(
        race_name="Mountain 50K",
        distance=50,
        elevation_gain=2000,
        estimated_time=10,
    )


@pytest.fixture
def fake_s3() -> MagicMock:
    """MagicMock S3 client backed by an in-memory dict of key -> body."""
    objects: dict[str, bytes] = {}
    s3 = MagicMock()
    s3.objects = objects

    def put_object(Bucket, Key, Body, **kwargs):  # noqa: ARG001, N803
        objects[Key] = Body.encode("utf-8") if isinstance(Body, str) else Body
        return {}

    def get_object(Bucket, Key):  # noqa: ARG001, N803
        if Key not in objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "Not found"}},
                "GetObject",
            )
        body = objects[Key]
        return {"Body": MagicMock(read=lambda: body)}

    def delete_object(Bucket, Key):  # noqa: ARG001, N803
        objects.pop(Key, None)
        return {}

    def paginate(Bucket, Prefix):  # noqa: ARG001, N803
        keys = sorted(k for k in objects if k.startswith(Prefix))
        return [{"Contents": [{"Key": k} for k in keys]}] if keys else [{}]

    s3.put_object.side_effect = put_object
    s3.get_object.side_effect = get_object
    s3.delete_object.side_effect = delete_object
    s3.get_paginator.return_value.paginate.side_effect = paginate
    return s3


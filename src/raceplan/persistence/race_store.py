"""Persist saved race plans in S3, one JSON document per race."""

import json
import logging
from datetime import UTC, datetime

import boto3
from botocore.exceptions import ClientError

from raceplan.models.saved_race import SavedRace
from raceplan.processor.exceptions import RacePlanError

logger = logging.getLogger(__name__)


class DuplicateRaceNameError(RacePlanError):
    """The user already has a saved race with this name."""

    def __init__(self, user_id: str, race_name: str, existing_id: str):
        super().__init__(f"Race {race_name!r} already saved for user {user_id}")
        self.user_id = user_id
        self.race_name = race_name
        self.existing_id = existing_id


class SavedRaceStore:
    """
    Create, list, fetch, update and delete saved races.

    Objects live at ``races/{user_id}/{race_id}.json``. Race names are unique
    per user (case-insensitive, surrounding whitespace ignored).
    """

    def __init__(self, bucket: str, prefix: str = "races", s3_client=None):
        """
        Initialize the saved race store.

        Args:
            bucket: S3 bucket name
            prefix: Key prefix for race documents
            s3_client: Optional boto3 S3 client (for testing)
        """
        self.bucket = bucket
        self.prefix = prefix.rstrip("/")
        self._s3_client = s3_client

    @property
    def s3_client(self):
        """Lazy-load S3 client."""
        if self._s3_client is None:
            self._s3_client = boto3.client("s3")
        return self._s3_client

    def _key(self, user_id: str, race_id: str) -> str:
        return f"{self.prefix}/{user_id}/{race_id}.json"

    def _put(self, race: SavedRace) -> None:
        self.s3_client.put_object(
            Bucket=self.bucket,
            Key=self._key(race.user_id, race.id),
            Body=race.model_dump_json(indent=2),
            ContentType="application/json",
        )

    def get(self, user_id: str, race_id: str) -> SavedRace | None:
        """
        Fetch one saved race.

        Returns:
            The race, or None if it does not exist
        """
        key = self._key(user_id, race_id)
        try:
            response = self.s3_client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response["Error"]["Code"] == "NoSuchKey":
                return None
            raise

        data = json.loads(response["Body"].read().decode("utf-8"))
        return SavedRace.model_validate(data)

    def list_by_user(self, user_id: str) -> list[SavedRace]:
        """
        List a user's saved races, most recently updated first.

        Args:
            user_id: Owning user identity

        Returns:
            All saved races for the user (empty if none)
        """
        paginator = self.s3_client.get_paginator("list_objects_v2")
        races: list[SavedRace] = []

        for page in paginator.paginate(
            Bucket=self.bucket, Prefix=f"{self.prefix}/{user_id}/"
        ):
            for obj in page.get("Contents", []):
                key = obj["Key"]
                if not key.endswith(".json"):
                    continue
                race_id = key.rsplit("/", 1)[-1].removesuffix(".json")
                race = self.get(user_id, race_id)
                if race is not None:
                    races.append(race)

        races.sort(key=lambda r: r.updated_at, reverse=True)
        logger.info(f"Loaded {len(races)} saved races for user {user_id}")
        return races

    def find_by_name(self, user_id: str, race_name: str) -> SavedRace | None:
        """Find a user's saved race by name."""
        wanted = race_name.strip().lower()
        for race in self.list_by_user(user_id):
            if race.race_name.strip().lower() == wanted:
                return race
        return None

    def create(self, race: SavedRace, replace: bool = False) -> SavedRace:
        """
        Save a new race.

        Args:
            race: Race to save
            replace: Overwrite an existing race with the same name instead
                of failing

        Returns:
            The stored race (carrying the existing id when replaced)

        Raises:
            DuplicateRaceNameError: If the name is taken and replace is False
        """
        existing = self.find_by_name(race.user_id, race.race_name)
        if existing is not None:
            if not replace:
                raise DuplicateRaceNameError(race.user_id, race.race_name, existing.id)
            race = race.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
            return self.update(race)

        self._put(race)
        logger.info(
            f"Saved race {race.race_name!r} to "
            f"s3://{self.bucket}/{self._key(race.user_id, race.id)}"
        )
        return race

    def update(self, race: SavedRace) -> SavedRace:
        """
        Overwrite an existing saved race.

        Raises:
            KeyError: If the race does not exist
        """
        if self.get(race.user_id, race.id) is None:
            raise KeyError(f"No saved race {race.id} for user {race.user_id}")

        race = race.model_copy(update={"updated_at": datetime.now(UTC)})
        self._put(race)
        logger.info(f"Updated race {race.race_name!r} ({race.id})")
        return race

    def delete(self, user_id: str, race_id: str) -> bool:
        """
        Delete a saved race.

        Returns:
            True if a race was deleted, False if it did not exist
        """
        if self.get(user_id, race_id) is None:
            return False

        self.s3_client.delete_object(Bucket=self.bucket, Key=self._key(user_id, race_id))
        logger.info(f"Deleted race {race_id} for user {user_id}")
        return True

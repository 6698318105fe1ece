"""Application settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from raceplan.models.saved_race import SegmentPolicy
from raceplan.models.units import UnitSystem


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # AWS configuration
    aws_region: str = "eu-west-1"
    data_bucket: str = "raceplan-data"
    reports_bucket: str = "raceplan-reports"

    # Application paths
    output_path: str = "output"

    # Planning defaults
    default_unit_system: UnitSystem = "metric"
    segment_policy: SegmentPolicy = "segment_from_previous"

    # Feature flags
    debug: bool = False
    dry_run: bool = False

    @property
    def output_dir(self) -> Path:
        """Get output directory as Path object."""
        return Path(self.output_path)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

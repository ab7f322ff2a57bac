"""
Application settings.

Values come from ``ROTTNEST_``-prefixed environment variables or a ``.env``
file in the working directory, falling back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rottnest_birds.reference.surveys import EXPECTED_SURVEY_YEARS


class Settings(BaseSettings):
    """Runtime configuration for the extract and analyze flows."""

    model_config = SettingsConfigDict(env_prefix="ROTTNEST_", env_file=".env", extra="ignore")

    app_name: str = "rottnest-birds"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")
    surveys_file: Path = Path("raw/surveys.csv")
    sightings_file: Path = Path("raw/sightings.csv")
    merged_file: Path = Path("intermediate/rottnestObservations.csv")

    # Passed to pandas.to_datetime; "mixed" infers the format per value
    start_date_format: str = "mixed"
    start_date_dayfirst: bool = True
    expected_survey_years: int = Field(default=EXPECTED_SURVEY_YEARS, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()

"""Shared builders for Birdata export rows."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from rottnest_birds.reference.surveys import JOIN_COLUMNS

SurveyFactory = Callable[..., dict[str, str]]
SightingFactory = Callable[..., dict[str, str]]


def make_survey(
    survey_id: str,
    lat: str = "-32.0",
    lon: str = "115.5",
    extra: dict[str, str] | None = None,
) -> dict[str, str]:
    """One survey export row with every shared column filled."""
    row = dict.fromkeys(JOIN_COLUMNS, "")
    row.update(
        {
            "Survey ID": survey_id,
            "Source": "Birdata",
            "Completed": "Yes",
            "All Species Recorded": "Yes",
            "Survey Point ID": "P1",
            "Survey Point Name": "Lakes",
            "Latitude": lat,
            "Longitude": lon,
            "Start Date": "2019-09-14",
            "Survey Type": "2ha, 20 minute search",
            "Survey Point Type": "Bushland",
        }
    )
    row.update(extra or {})
    return row


def make_sighting(
    survey: dict[str, str],
    common: str,
    scientific: str = "",
    notes: str = "",
) -> dict[str, str]:
    """A sighting that copies the shared columns from ``survey``."""
    row = {col: survey[col] for col in JOIN_COLUMNS}
    row.update({"Common Name": common, "Scientific Name": scientific, "Sighting Notes": notes})
    return row


@pytest.fixture
def survey_factory() -> SurveyFactory:
    return make_survey


@pytest.fixture
def sighting_factory() -> SightingFactory:
    return make_sighting


def write_exports(
    base_dir: Path,
    surveys: list[dict[str, str]],
    sightings: list[dict[str, str]],
) -> None:
    """Write surveys.csv and sightings.csv under ``base_dir/raw``."""
    raw = base_dir / "raw"
    raw.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(surveys).to_csv(raw / "surveys.csv", index=False)
    pd.DataFrame(sightings).to_csv(raw / "sightings.csv", index=False)


@pytest.fixture
def exports_writer() -> Callable[..., None]:
    return write_exports

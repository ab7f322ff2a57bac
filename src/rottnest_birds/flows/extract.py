"""
Prefect flow for extracting Rottnest observations from the regional export.

Loading the full export is slow, so this runs once and saves a much
smaller merged table that the analyze flow reads instead.

Run locally:
    python -m rottnest_birds.flows.extract
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd  # noqa: TC002: Prefect resolves task annotations at runtime
from prefect import flow, task

from rottnest_birds.config import get_settings
from rottnest_birds.datasources.birdata import (
    MergeResult,
    MissingInputError,
    assign_survey_keys,
    filter_region,
    merge_sightings,
    require_columns,
)
from rottnest_birds.reference.geography import ROTTNEST_BBOX
from rottnest_birds.reference.surveys import JOIN_COLUMNS
from rottnest_birds.store import DataStore

settings = get_settings()
store = DataStore(settings.data_dir)

# Paths relative to the store
SURVEYS_PATH = settings.surveys_file
SIGHTINGS_PATH = settings.sightings_file
MERGED_PATH = settings.merged_file


def _read_required(path: Path, table: str) -> pd.DataFrame:
    frame = store.read_table(path)
    if frame is None:
        msg = f"{table} input not found: {store.base / path}"
        raise MissingInputError(msg)
    return frame


@task(name="load-surveys")
def load_surveys(path: Path = SURVEYS_PATH) -> pd.DataFrame:
    """Load surveys, check the shared columns and assign surrogate keys."""
    surveys = _read_required(path, "surveys")
    require_columns(surveys, JOIN_COLUMNS, "surveys")
    return assign_survey_keys(surveys)


@task(name="load-sightings")
def load_sightings(path: Path = SIGHTINGS_PATH) -> pd.DataFrame:
    """Load sightings and check the shared columns."""
    sightings = _read_required(path, "sightings")
    require_columns(sightings, JOIN_COLUMNS, "sightings")
    return sightings


@task(name="filter-region")
def filter_surveys(surveys: pd.DataFrame) -> pd.DataFrame:
    """Keep surveys inside the Rottnest bounding box."""
    return filter_region(surveys, ROTTNEST_BBOX)


@task(name="merge-sightings")
def merge(
    sightings: pd.DataFrame,
    surveys: pd.DataFrame,
    region_surveys: pd.DataFrame,
) -> MergeResult:
    """Attach sightings to their in-region surveys."""
    return merge_sightings(sightings, surveys, region_surveys)


@task(name="save-merged")
def save_merged(merged: pd.DataFrame, path: Path = MERGED_PATH) -> Path:
    """Write the merged table via store, replacing any previous run."""
    return store.write_table(
        path,
        merged,
        source="extract-observations",
        region={
            "swlat": ROTTNEST_BBOX.swlat,
            "nelat": ROTTNEST_BBOX.nelat,
            "nelng": ROTTNEST_BBOX.nelng,
        },
    )


@flow(name="extract-observations", log_prints=True)
def extract_all(
    surveys_path: Path = SURVEYS_PATH,
    sightings_path: Path = SIGHTINGS_PATH,
    merged_path: Path = MERGED_PATH,
) -> dict[str, Any]:
    """
    Filter surveys to Rottnest and merge them with their sightings.

    Fails without writing anything if an input is missing, a shared column
    is absent, or a sighting disagrees with its survey.
    """
    print(f"Loading surveys from {surveys_path}...")
    surveys = load_surveys(surveys_path)
    print(f"Loading sightings from {sightings_path}...")
    sightings = load_sightings(sightings_path)

    region_surveys = filter_surveys(surveys)
    print(f"{len(region_surveys)} of {len(surveys)} surveys fall inside the region")

    result = merge(sightings, surveys, region_surveys)
    if result.sightings_without_survey:
        print(
            f"Warning: {result.sightings_without_survey} sightings reference "
            "a Survey ID missing from the surveys table"
        )

    output_path = save_merged(result.merged, merged_path)
    print(f"Saved {result.rows} merged rows to {output_path}")

    return {
        "surveys": len(surveys),
        "surveys_in_region": len(region_surveys),
        "sightings": result.sightings_total,
        "sightings_outside_region": result.sightings_outside_region,
        "sightings_without_survey": result.sightings_without_survey,
        "rows": result.rows,
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = extract_all()
    print(f"Flow complete: {result}")

"""Region filter and sighting-to-survey join.

Sightings carry a copy of every survey column. Rather than joining on all 23
of them at once, which drops rows silently whenever a single value differs,
sightings are attached through the surrogate survey key and the shared
columns are then compared explicitly. Any disagreement is an error.
"""

from __future__ import annotations

import pandas as pd

from rottnest_birds.datasources.birdata.models import SURVEY_KEY, JoinMismatchError, MergeResult
from rottnest_birds.reference.geography import ROTTNEST_BBOX, BoundingBox
from rottnest_birds.reference.surveys import JOIN_COLUMNS

_SURVEY_SUFFIX = "__survey"


def region_mask(frame: pd.DataFrame, bbox: BoundingBox = ROTTNEST_BBOX) -> pd.Series:
    """Boolean mask of rows whose coordinates fall strictly inside ``bbox``.

    Coordinates are parsed from text; anything unparseable is outside.
    """
    lat = pd.to_numeric(frame["Latitude"], errors="coerce")
    lon = pd.to_numeric(frame["Longitude"], errors="coerce")
    return pd.Series(True, index=frame.index) & bbox.contains(lat, lon)


def filter_region(surveys: pd.DataFrame, bbox: BoundingBox = ROTTNEST_BBOX) -> pd.DataFrame:
    """Keep only surveys inside the bounding box."""
    return surveys.loc[region_mask(surveys, bbox)].reset_index(drop=True)


def merge_sightings(
    sightings: pd.DataFrame,
    surveys: pd.DataFrame,
    region_surveys: pd.DataFrame,
) -> MergeResult:
    """Inner-join sightings to the surveys that passed the region filter.

    Args:
        sightings: Sightings export (all text columns).
        surveys: Every keyed survey, used to tell "outside the region" apart
            from "no such survey".
        region_surveys: Keyed surveys inside the region (subset of ``surveys``).

    Returns:
        MergeResult whose table has the shared columns first, then the
        sighting-only columns, then the survey-only columns.

    Raises:
        JoinMismatchError: If a sighting and its survey differ on any shared
            column.
    """
    keys = surveys.set_index("Survey ID")[SURVEY_KEY]
    survey_key = sightings["Survey ID"].map(keys)

    without_survey = survey_key.isna()
    in_region = survey_key.isin(region_surveys[SURVEY_KEY])

    kept = sightings.loc[in_region].copy()
    kept[SURVEY_KEY] = survey_key[in_region].astype("int64")

    joined = kept.merge(
        region_surveys,
        on=SURVEY_KEY,
        how="inner",
        suffixes=("", _SURVEY_SUFFIX),
        validate="many_to_one",
    )

    mismatches: dict[str, int] = {}
    for col in JOIN_COLUMNS:
        differs = joined[col] != joined[col + _SURVEY_SUFFIX]
        if differs.any():
            mismatches[col] = int(differs.sum())
    if mismatches:
        raise JoinMismatchError(mismatches)

    sighting_only = [c for c in sightings.columns if c not in JOIN_COLUMNS]
    survey_only = [
        c if c not in sightings.columns else c + _SURVEY_SUFFIX
        for c in region_surveys.columns
        if c not in JOIN_COLUMNS and c != SURVEY_KEY
    ]
    merged = joined[[*JOIN_COLUMNS, *sighting_only, *survey_only]].reset_index(drop=True)

    return MergeResult(
        merged=merged,
        sightings_total=len(sightings),
        sightings_outside_region=int((~in_region & ~without_survey).sum()),
        sightings_without_survey=int(without_survey.sum()),
    )

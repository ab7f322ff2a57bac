"""Grouped counts and statistics over cleaned, classified observations.

Every function takes the observation table (one row per sighting) and
returns a new summary table. Rankings sort with a stable algorithm, so ties
keep first-seen order.
"""

from __future__ import annotations

import pandas as pd

from rottnest_birds.reference.surveys import EXPECTED_SURVEY_YEARS
from rottnest_birds.schemas import SurveyGroup

LOCATION_COLUMNS = ["Survey Point ID", "Survey Point Name", "Latitude", "Longitude"]
SPECIES_COLUMNS = ["Common Name", "Scientific Name"]


def _rank(
    frame: pd.DataFrame, by: str | list[str], ascending: bool | list[bool] = False
) -> pd.DataFrame:
    return frame.sort_values(by, ascending=ascending, kind="stable", ignore_index=True)


def surveys_per_location(observations: pd.DataFrame) -> pd.DataFrame:
    """Unique surveys at each survey point, most-surveyed first."""
    counts = (
        observations.groupby(LOCATION_COLUMNS, sort=False, dropna=False)["Survey ID"]
        .nunique()
        .reset_index(name="surveys")
    )
    return _rank(counts, "surveys")


def survey_type_counts(observations: pd.DataFrame) -> pd.DataFrame:
    """Unique surveys per survey type, most common first."""
    counts = (
        observations.groupby("Survey Type", sort=False, dropna=False)["Survey ID"]
        .nunique()
        .reset_index(name="surveys")
    )
    return _rank(counts, "surveys")


def species_counts_by_group(observations: pd.DataFrame) -> pd.DataFrame:
    """Sighting records per species within each survey group.

    Groups are listed in ``SurveyGroup`` order; species within a group are
    ranked by sighting count.
    """
    counts = (
        observations.groupby(["surveyGroup", *SPECIES_COLUMNS], sort=False, dropna=False)
        .size()
        .reset_index(name="sightings")
    )
    order = {group.value: i for i, group in enumerate(SurveyGroup)}
    counts = counts.assign(_order=counts["surveyGroup"].map(order))
    ranked = _rank(counts, ["_order", "sightings"], ascending=[True, False])
    return ranked.drop(columns="_order")


def species_richness(observations: pd.DataFrame) -> pd.DataFrame:
    """Number of distinct species recorded on each survey."""
    return (
        observations.groupby(["Survey ID", "surveyGroup"], sort=False, dropna=False)
        .agg(Year=("Year", "first"), richness=("Common Name", "nunique"))
        .reset_index()
        .astype({"Year": "Int64", "richness": "int64"})
    )


def _summarise(label: str, richness: pd.Series) -> dict[str, object]:
    return {
        "surveyGroup": label,
        "surveys": len(richness),
        "mean_richness": float(richness.mean()) if len(richness) else float("nan"),
        "median_richness": float(richness.median()) if len(richness) else float("nan"),
    }


def richness_summary(richness: pd.DataFrame) -> pd.DataFrame:
    """Mean and median species richness across surveys.

    The first row (``surveyGroup == "all"``) covers every survey; one row
    follows for each survey group that has at least one survey.

    Args:
        richness: Output of ``species_richness``.
    """
    rows = [_summarise("all", richness["richness"])]
    for group in SurveyGroup:
        values = richness.loc[richness["surveyGroup"] == group.value, "richness"]
        if len(values):
            rows.append(_summarise(group.value, values))
    columns = ["surveyGroup", "surveys", "mean_richness", "median_richness"]
    return pd.DataFrame(rows, columns=columns)


def survey_point_years(observations: pd.DataFrame) -> pd.DataFrame:
    """Unique surveys per survey point per year (rows without a Year dropped)."""
    dated = observations.dropna(subset=["Year"])
    return (
        dated.groupby(["Survey Point ID", "Year"], sort=True)["Survey ID"]
        .nunique()
        .reset_index(name="surveys")
    )


def incomplete_survey_points(
    point_years: pd.DataFrame,
    expected_years: int = EXPECTED_SURVEY_YEARS,
    points: pd.Series | None = None,
) -> pd.DataFrame:
    """Survey points not sampled in exactly ``expected_years`` distinct years.

    ``point_years`` has no rows for undated surveys, so a point whose every
    Start Date failed to parse is only reported (with ``years == 0``) when
    ``points`` lists it.

    Args:
        point_years: Output of ``survey_point_years``.
        expected_years: Number of survey years the dataset window covers.
        points: Every ``Survey Point ID`` observed, dated or not.

    Returns:
        ``Survey Point ID`` and ``years`` for each incomplete point.
    """
    years = (
        point_years.groupby("Survey Point ID", sort=True)["Year"]
        .nunique()
        .reset_index(name="years")
    )
    if points is not None:
        ids = sorted(set(points.dropna()) | set(years["Survey Point ID"]))
        years = (
            years.set_index("Survey Point ID")["years"]
            .reindex(ids, fill_value=0)
            .rename_axis("Survey Point ID")
            .reset_index()
        )
    return years.loc[years["years"] != expected_years].reset_index(drop=True)


def surveys_per_month(observations: pd.DataFrame) -> pd.DataFrame:
    """Unique surveys per (Year, Month, surveyGroup), in date order."""
    dated = observations.dropna(subset=["Year", "Month"])
    return (
        dated.groupby(["Year", "Month", "surveyGroup"], sort=True)["Survey ID"]
        .nunique()
        .reset_index(name="surveys")
    )


def reporting_rates(observations: pd.DataFrame) -> pd.DataFrame:
    """Share of surveys detecting each species, per survey group and year.

    ``detections`` is the number of surveys that recorded the species and
    ``surveys`` the number of surveys in that group-year, so
    ``reporting_rate`` is always in (0, 1].
    """
    keys = ["surveyGroup", "Year"]
    dated = observations.dropna(subset=["Year"])
    effort = dated.groupby(keys, sort=True)["Survey ID"].nunique().reset_index(name="surveys")
    detections = (
        dated.groupby([*keys, "Common Name"], sort=True)["Survey ID"]
        .nunique()
        .reset_index(name="detections")
    )
    rates = detections.merge(effort, on=keys, how="left")
    rates["reporting_rate"] = rates["detections"] / rates["surveys"]
    return rates


def distance_summary(readings: pd.DataFrame) -> pd.DataFrame:
    """Per-species distance statistics from parsed sighting notes.

    Args:
        readings: Output of ``distance.explode_distance_notes``.

    Returns:
        Number of readings, total birds counted and median distance rank per
        species, species with the most readings first.
    """
    summary = (
        readings.groupby(SPECIES_COLUMNS, sort=False, dropna=False)
        .agg(
            readings=("distance_rank", "size"),
            total_count=("count", "sum"),
            median_rank=("distance_rank", "median"),
        )
        .reset_index()
    )
    return _rank(summary, "readings")

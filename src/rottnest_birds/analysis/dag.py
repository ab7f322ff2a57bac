"""Hamilton DAG for the analyzer.

Each function is a node; its parameters name the nodes (or driver inputs)
it depends on. Driver inputs:

  - ``merged_observations``: the extractor's table, all columns as text
  - ``start_date_format``: ``pandas.to_datetime`` format for Start Date
  - ``start_date_dayfirst``: read ambiguous Start Dates as day/month
  - ``expected_survey_years``: year count a fully sampled point must have

Run everything with::

    dr = driver.Driver({}, dag, adapter=base.SimplePythonGraphAdapter(base.DictResult()))
    dr.execute(final_vars=list(dag.TABLE_NODES), inputs={...})
"""

from __future__ import annotations

import pandas as pd

from rottnest_birds.analysis import aggregate, classify, cleaning, distance

# Nodes saved as derived tables, in output order
TABLE_NODES: tuple[str, ...] = (
    "classified_observations",
    "surveys_per_location",
    "survey_type_counts",
    "species_counts_by_group",
    "species_richness",
    "richness_summary",
    "survey_point_years",
    "incomplete_survey_points",
    "surveys_per_month",
    "reporting_rates",
    "distance_observations",
    "distance_summary",
)


def observations(
    merged_observations: pd.DataFrame, start_date_format: str, start_date_dayfirst: bool
) -> pd.DataFrame:
    """Merged table with numeric coordinates and Year/Month columns."""
    return cleaning.prepare_observations(
        merged_observations, start_date_format, start_date_dayfirst
    )


def complete_observations(observations: pd.DataFrame) -> pd.DataFrame:
    """Only completed, all-species surveys."""
    return cleaning.filter_complete_surveys(observations)


def classified_observations(complete_observations: pd.DataFrame) -> pd.DataFrame:
    """Complete observations tagged with bushBirdSurveys and surveyGroup."""
    return classify.classify_surveys(complete_observations)


def surveys_per_location(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.surveys_per_location(classified_observations)


def survey_type_counts(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.survey_type_counts(classified_observations)


def species_counts_by_group(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.species_counts_by_group(classified_observations)


def species_richness(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.species_richness(classified_observations)


def richness_summary(species_richness: pd.DataFrame) -> pd.DataFrame:
    return aggregate.richness_summary(species_richness)


def survey_point_years(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.survey_point_years(classified_observations)


def incomplete_survey_points(
    survey_point_years: pd.DataFrame,
    classified_observations: pd.DataFrame,
    expected_survey_years: int,
) -> pd.DataFrame:
    """Points whose distinct sampled years differ from the expected count.

    Points with no parseable Start Date at all are reported with zero years.
    """
    return aggregate.incomplete_survey_points(
        survey_point_years,
        expected_survey_years,
        classified_observations["Survey Point ID"],
    )


def surveys_per_month(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.surveys_per_month(classified_observations)


def reporting_rates(classified_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.reporting_rates(classified_observations)


def distance_observations(classified_observations: pd.DataFrame) -> pd.DataFrame:
    """Parsed distance readings, one row per sighting and bucket."""
    return distance.explode_distance_notes(classified_observations)


def distance_summary(distance_observations: pd.DataFrame) -> pd.DataFrame:
    return aggregate.distance_summary(distance_observations)

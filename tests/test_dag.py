"""Tests for the Hamilton analysis DAG."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd
import pytest
from hamilton import base, driver

from rottnest_birds.analysis import dag

if TYPE_CHECKING:
    from conftest import SightingFactory, SurveyFactory


@pytest.fixture
def merged(survey_factory: SurveyFactory, sighting_factory: SightingFactory) -> pd.DataFrame:
    """A small merged table as the extractor would write it (all text)."""
    s1 = survey_factory(
        "S1",
        extra={
            "Source Ref": "Rottnest Bushbird Survey 2021",
            "Survey Type": "5 minute point search",
            "Start Date": "2021-03-01",
        },
    )
    s2 = survey_factory("S2", extra={"Start Date": "2020-03-01"})
    s3 = survey_factory("S3", extra={"Completed": "No"})
    s4 = survey_factory(
        "S4",
        extra={
            "Survey Type": "Incidental search",
            "Start Date": "sometime in spring",
            "Survey Point ID": "P2",
        },
    )
    rows = [
        sighting_factory(s1, "Silvereye", "Zosterops lateralis", "0-5m=2, 10-15m=1, junk, 40-50m=3"),
        sighting_factory(s1, "Red Wattlebird", "Anthochaera carunculata"),
        sighting_factory(s2, "Silvereye", "Zosterops lateralis"),
        sighting_factory(s3, "Galah", "Eolophus roseicapilla"),
        sighting_factory(s4, "Silvereye", "Zosterops lateralis"),
    ]
    return pd.DataFrame(rows)


def _execute(merged: pd.DataFrame) -> dict[str, pd.DataFrame]:
    dr = driver.Driver({}, dag, adapter=base.SimplePythonGraphAdapter(base.DictResult()))
    return dr.execute(
        final_vars=list(dag.TABLE_NODES),
        inputs={
            "merged_observations": merged,
            "start_date_format": "mixed",
            "start_date_dayfirst": True,
            "expected_survey_years": 3,
        },
    )


class TestAnalysisDag:
    """Test the DAG end to end on a small table."""

    def test_all_tables_available(self) -> None:
        dr = driver.Driver({}, dag, adapter=base.SimplePythonGraphAdapter(base.DictResult()))
        names = {var.name for var in dr.list_available_variables()}
        assert set(dag.TABLE_NODES) <= names

    def test_incomplete_surveys_dropped(self, merged: pd.DataFrame) -> None:
        results = _execute(merged)
        classified = results["classified_observations"]

        assert classified["Survey ID"].tolist() == ["S1", "S1", "S2", "S4"]
        assert (classified["Completed"] == "Yes").all()

    def test_groups(self, merged: pd.DataFrame) -> None:
        """The bushbird survey keeps its group despite a point-search type."""
        classified = _execute(merged)["classified_observations"]
        assert classified["surveyGroup"].tolist() == [
            "bushBirds",
            "bushBirds",
            "standardSurveys",
            "other",
        ]

    def test_distance_readings(self, merged: pd.DataFrame) -> None:
        readings = _execute(merged)["distance_observations"]
        assert readings["distance_rank"].tolist() == [1, 3, 7]
        assert readings["count"].tolist() == [2, 1, 3]
        assert set(readings["surveyGroup"]) == {"bushBirds"}

    def test_incomplete_points(self, merged: pd.DataFrame) -> None:
        """P1 was surveyed in two years; P2 has no usable date at all."""
        incomplete = _execute(merged)["incomplete_survey_points"]
        assert incomplete["Survey Point ID"].tolist() == ["P1", "P2"]
        assert incomplete["years"].tolist() == [2, 0]

    def test_richness_summary(self, merged: pd.DataFrame) -> None:
        summary = _execute(merged)["richness_summary"]
        overall = summary.iloc[0]
        assert overall["surveyGroup"] == "all"
        assert overall["surveys"] == 3
        assert overall["mean_richness"] == pytest.approx(4 / 3)

    def test_expected_years_input(self, merged: pd.DataFrame) -> None:
        dr = driver.Driver({}, dag, adapter=base.SimplePythonGraphAdapter(base.DictResult()))
        results = dr.execute(
            final_vars=["incomplete_survey_points"],
            inputs={
                "merged_observations": merged,
                "start_date_format": "mixed",
                "start_date_dayfirst": True,
                "expected_survey_years": 2,
            },
        )
        assert results["incomplete_survey_points"]["Survey Point ID"].tolist() == ["P2"]

"""
Prefect flow for deriving analysis tables from the merged observations.

Prefect runs the load/save steps; the transforms themselves are a Hamilton
DAG (``analysis/dag.py``) executed inside a single task.

Run locally:
    python -m rottnest_birds.flows.analyze
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import pandas as pd  # noqa: TC002: Prefect resolves task annotations at runtime
from hamilton import base, driver
from prefect import flow, task

from rottnest_birds.analysis import dag
from rottnest_birds.config import get_settings
from rottnest_birds.datasources.birdata import MissingInputError
from rottnest_birds.store import DataStore

settings = get_settings()
store = DataStore(settings.data_dir)

MERGED_PATH = settings.merged_file
TABLES_DIR = Path("derived/tables")
SUMMARY_PATH = Path("derived/summary.json")


@task(name="load-merged")
def load_merged(path: Path = MERGED_PATH) -> pd.DataFrame:
    """Load the extractor's merged table from store."""
    merged = store.read_table(path)
    if merged is None:
        msg = f"Merged observations not found: {store.base / path}. Run the extract flow first."
        raise MissingInputError(msg)
    return merged


@task(name="run-analysis-dag")
def run_analysis(
    merged: pd.DataFrame,
    start_date_format: str = "mixed",
    start_date_dayfirst: bool = True,
    expected_survey_years: int = 3,
) -> dict[str, pd.DataFrame]:
    """Execute every table node of the analysis DAG."""
    dr = driver.Driver({}, dag, adapter=base.SimplePythonGraphAdapter(base.DictResult()))
    results = dr.execute(
        final_vars=list(dag.TABLE_NODES),
        inputs={
            "merged_observations": merged,
            "start_date_format": start_date_format,
            "start_date_dayfirst": start_date_dayfirst,
            "expected_survey_years": expected_survey_years,
        },
    )
    return {name: results[name] for name in dag.TABLE_NODES}


@task(name="save-tables")
def save_tables(tables: dict[str, pd.DataFrame]) -> dict[str, Path]:
    """Write each derived table to ``derived/tables/{name}.csv``."""
    return {
        name: store.write_table(TABLES_DIR / f"{name}.csv", frame, source="analyze-observations")
        for name, frame in tables.items()
    }


def _richness_records(summary: pd.DataFrame) -> list[dict[str, Any]]:
    """Richness summary rows as JSON-safe dicts (NaN -> None)."""
    records: list[dict[str, Any]] = []
    for row in summary.to_dict(orient="records"):
        records.append(
            {
                key: None if isinstance(value, float) and math.isnan(value) else value
                for key, value in row.items()
            }
        )
    return records


@task(name="save-summary")
def save_summary(summary: dict[str, Any]) -> Path:
    """Save the run summary via store."""
    return store.write(SUMMARY_PATH, summary, source="analyze-observations")


@flow(name="analyze-observations", log_prints=True)
def analyze_all(
    merged_path: Path = MERGED_PATH,
    start_date_format: str = settings.start_date_format,
    start_date_dayfirst: bool = settings.start_date_dayfirst,
    expected_survey_years: int = settings.expected_survey_years,
) -> dict[str, Any]:
    """
    Derive every analysis table from the merged observations.

    This is the main Prefect flow for the analyzer.
    """
    print(f"Loading merged observations from {merged_path}...")
    merged = load_merged(merged_path)
    print(f"Loaded {len(merged)} rows")

    print("Running analysis DAG...")
    tables = run_analysis(merged, start_date_format, start_date_dayfirst, expected_survey_years)

    classified = tables["classified_observations"]
    print(f"{len(classified)} rows remain after dropping incomplete surveys")
    incomplete = tables["incomplete_survey_points"]
    if len(incomplete):
        print(
            f"Warning: {len(incomplete)} survey points were not sampled "
            f"in all {expected_survey_years} years"
        )

    print("Writing tables...")
    paths = save_tables(tables)

    summary = {
        "rows_loaded": len(merged),
        "rows_analyzed": len(classified),
        "tables": {name: len(frame) for name, frame in tables.items()},
        "richness": _richness_records(tables["richness_summary"]),
    }
    summary_path = save_summary(summary)
    print(f"Wrote {len(paths)} tables to {store.base / TABLES_DIR} and summary to {summary_path}")

    return {**summary, "output": str(store.base / TABLES_DIR)}


if __name__ == "__main__":
    result = analyze_all()
    print(f"Flow complete: {result}")

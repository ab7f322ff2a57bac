"""Rottnest Birds - bird survey extraction and analysis for Rottnest Island.

Architecture::

    reference/     Static constants (bounding box, shared columns, markers, buckets)
    datasources/   Birdata exports: schema checks, surrogate keys, region join
    store.py       Tiered files (raw → intermediate → derived)
    analysis/      Pure DataFrame transforms, wired as a Hamilton DAG
    flows/         Prefect orchestration (extract builds the merged file, analyze derives tables)

Data flow: raw/ → extract → intermediate/ → analyze → derived/tables/

Extension points, with step-by-step guides in each package's docstring:
  - New data source:     datasources/__init__.py
  - New derived table:   analysis/__init__.py
"""

__version__ = "0.1.0"

from rottnest_birds.config import Settings
from rottnest_birds.schemas import DistanceReading, SurveyGroup

__all__ = ["DistanceReading", "Settings", "SurveyGroup", "__version__"]

"""Assign each observation to a survey group.

The group depends only on the row's own ``Source Ref`` and ``Survey Type``,
so it can be computed per row in any order.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from rottnest_birds.reference.surveys import BEST_SURVEY_TYPES, BUSHBIRD_MARKER
from rottnest_birds.schemas import SurveyGroup


def is_bushbird_survey(source_ref: Any) -> bool:
    """True if ``source_ref`` contains the bushbird marker (case-sensitive).

    Missing or non-text values never match.
    """
    return isinstance(source_ref, str) and BUSHBIRD_MARKER in source_ref


def survey_group(source_ref: Any, survey_type: Any) -> SurveyGroup:
    """Classify one survey.

    The bushbird marker wins regardless of survey type; otherwise the survey
    type decides between the standardized protocols and everything else.
    """
    if is_bushbird_survey(source_ref):
        return SurveyGroup.BUSH_BIRDS
    if isinstance(survey_type, str) and survey_type in BEST_SURVEY_TYPES:
        return SurveyGroup.STANDARD_SURVEYS
    return SurveyGroup.OTHER


def classify_surveys(frame: pd.DataFrame) -> pd.DataFrame:
    """Add ``bushBirdSurveys`` (bool) and ``surveyGroup`` (str) columns."""
    source_refs = frame["Source Ref"].tolist()
    survey_types = frame["Survey Type"].tolist()
    bushbird = [is_bushbird_survey(ref) for ref in source_refs]
    groups = [
        survey_group(ref, kind).value for ref, kind in zip(source_refs, survey_types, strict=True)
    ]
    return frame.assign(
        bushBirdSurveys=pd.Series(bushbird, index=frame.index, dtype=bool),
        surveyGroup=pd.Series(groups, index=frame.index, dtype=object),
    )

from __future__ import annotations

import pytest
from pydantic import ValidationError

from models import AnalysisResult, InputState, score_tier
from tests.conftest import VALID_ANALYSIS


def test_analysis_result_reads_camel_case_fields() -> None:
    result = AnalysisResult.model_validate(VALID_ANALYSIS)
    assert result.overall_score == 85
    assert result.skills_match == 90
    assert result.experience_match == 80
    assert result.qualifications_match == 75
    assert result.strengths == ["Strong Python background"]
    assert result.gaps == ["No AWS cloud certification"]
    assert result.recommendation == "Good fit overall."


def test_analysis_result_rejects_out_of_range_score() -> None:
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate({**VALID_ANALYSIS, "overallScore": 140})


def test_analysis_result_requires_every_field() -> None:
    payload = dict(VALID_ANALYSIS)
    payload.pop("gaps")
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate(payload)


@pytest.mark.parametrize(
    ("score", "tier"),
    [(100, "strong"), (80, "strong"), (79, "moderate"), (60, "moderate"), (59, "weak"), (0, "weak")],
)
def test_score_tier_boundaries(score: int, tier: str) -> None:
    assert score_tier(score) == tier


@pytest.mark.parametrize(
    ("resume", "job_description", "complete"),
    [
        ("resume", "jd", True),
        ("", "jd", False),
        ("resume", "   \n\t", False),
        ("  ", "  ", False),
    ],
)
def test_input_state_completeness(resume: str, job_description: str, complete: bool) -> None:
    assert InputState(resume=resume, job_description=job_description).is_complete() is complete

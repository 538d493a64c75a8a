"""Pydantic schemas for the dashboard."""

from pydantic import BaseModel

from assessment_hub.schemas.assessment import AssessmentRead
from assessment_hub.schemas.client import ClientRead


class DashboardStatsRead(BaseModel):
    """Headline counts."""

    total_assessments: int
    active_clients: int
    risk_flags: int
    completion_rate: int

    model_config = {"from_attributes": True}


class DashboardRead(BaseModel):
    """Dashboard payload."""

    stats: DashboardStatsRead
    recent_assessments: list[AssessmentRead]
    high_risk_clients: list[ClientRead]
    flagged_assessments: list[AssessmentRead]

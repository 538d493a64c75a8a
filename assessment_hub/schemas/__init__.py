"""Pydantic schemas for request/response validation."""

from assessment_hub.schemas.assessment import (
    AssessmentComplete,
    AssessmentCreate,
    AssessmentRead,
    LabeledResponseRead,
)
from assessment_hub.schemas.client import ClientDetailRead, ClientRead
from assessment_hub.schemas.dashboard import DashboardRead, DashboardStatsRead
from assessment_hub.schemas.template import (
    OptionRead,
    QuestionRead,
    TemplateRead,
    TemplateSummary,
)

__all__ = [
    # Assessment
    "AssessmentCreate",
    "AssessmentComplete",
    "AssessmentRead",
    "LabeledResponseRead",
    # Client
    "ClientRead",
    "ClientDetailRead",
    # Dashboard
    "DashboardRead",
    "DashboardStatsRead",
    # Template
    "OptionRead",
    "QuestionRead",
    "TemplateRead",
    "TemplateSummary",
]

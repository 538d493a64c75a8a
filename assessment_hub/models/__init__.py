"""Database models for the assessment service."""

from assessment_hub.models.assessment import Assessment, AssessmentStatus
from assessment_hub.models.client import Client, RiskLevel

__all__ = [
    # Assessment
    "Assessment",
    "AssessmentStatus",
    # Client
    "Client",
    "RiskLevel",
]

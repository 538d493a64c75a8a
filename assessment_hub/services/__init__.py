"""Business logic services."""

from assessment_hub.services.assessment import (
    AssessmentAlreadyCompletedError,
    AssessmentError,
    AssessmentNotFoundError,
    AssessmentService,
)
from assessment_hub.services.client import ClientNotFoundError, ClientService
from assessment_hub.services.dashboard import DashboardService, DashboardStats

__all__ = [
    "AssessmentService",
    "AssessmentError",
    "AssessmentNotFoundError",
    "AssessmentAlreadyCompletedError",
    "ClientService",
    "ClientNotFoundError",
    "DashboardService",
    "DashboardStats",
]

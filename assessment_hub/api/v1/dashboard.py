"""Clinician dashboard endpoint."""

from typing import Annotated

from fastapi import APIRouter, Query

from assessment_hub.api.deps import DbSession
from assessment_hub.core.config import settings
from assessment_hub.schemas.assessment import AssessmentRead
from assessment_hub.schemas.client import ClientRead
from assessment_hub.schemas.dashboard import DashboardRead, DashboardStatsRead
from assessment_hub.services.client import ClientService
from assessment_hub.services.dashboard import DashboardService

router = APIRouter()


@router.get(
    "",
    response_model=DashboardRead,
    summary="Get dashboard data",
)
async def get_dashboard(
    session: DbSession,
    recent_limit: Annotated[int | None, Query(ge=1, le=50)] = None,
) -> DashboardRead:
    """Get headline stats, recent and flagged assessments, and high-risk clients."""
    dashboard = DashboardService(session)
    clients = ClientService(session)

    stats = await dashboard.get_stats()
    recent = await dashboard.get_recent_assessments(
        recent_limit or settings.recent_assessments_limit
    )
    flagged = await dashboard.get_flagged_assessments()
    high_risk = await clients.get_high_risk_clients()

    return DashboardRead(
        stats=DashboardStatsRead.model_validate(stats),
        recent_assessments=[AssessmentRead.model_validate(a) for a in recent],
        high_risk_clients=[ClientRead.model_validate(c) for c in high_risk],
        flagged_assessments=[AssessmentRead.model_validate(a) for a in flagged],
    )

"""Dashboard service aggregating assessment and client statistics."""

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from assessment_hub.models.assessment import Assessment, AssessmentStatus
from assessment_hub.models.client import Client

SCORED_STATUSES = [AssessmentStatus.COMPLETED.value, AssessmentStatus.FLAGGED.value]


@dataclass
class DashboardStats:
    """Headline counts for the clinician dashboard."""

    total_assessments: int
    active_clients: int
    risk_flags: int
    completion_rate: int


class DashboardService:
    """Read-only queries backing the dashboard."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _count(self, query) -> int:
        result = await self.session.execute(query)
        return result.scalar_one()

    async def get_stats(self) -> DashboardStats:
        """Compute dashboard counts.

        total_assessments counts scored (completed or flagged) assessments;
        completion_rate is the rounded percentage of all assessments that
        have been scored.
        """
        all_count = await self._count(select(func.count(Assessment.id)))
        scored_count = await self._count(
            select(func.count(Assessment.id)).where(Assessment.status.in_(SCORED_STATUSES))
        )
        flagged_count = await self._count(
            select(func.count(Assessment.id)).where(
                Assessment.status == AssessmentStatus.FLAGGED.value
            )
        )
        client_count = await self._count(select(func.count(Client.id)))

        completion_rate = round(scored_count / all_count * 100) if all_count > 0 else 0

        return DashboardStats(
            total_assessments=scored_count,
            active_clients=client_count,
            risk_flags=flagged_count,
            completion_rate=completion_rate,
        )

    async def get_recent_assessments(self, limit: int) -> Sequence[Assessment]:
        """Most recently scored assessments."""
        result = await self.session.execute(
            select(Assessment)
            .where(Assessment.status.in_(SCORED_STATUSES))
            .order_by(Assessment.completed_at.desc())
            .limit(limit)
        )
        return result.scalars().all()

    async def get_flagged_assessments(self) -> Sequence[Assessment]:
        """All flagged assessments, most recent first."""
        result = await self.session.execute(
            select(Assessment)
            .where(Assessment.status == AssessmentStatus.FLAGGED.value)
            .order_by(Assessment.completed_at.desc())
        )
        return result.scalars().all()

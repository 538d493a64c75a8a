"""Assessment lifecycle service.

Creates assessments in PENDING and completes them exactly once:
scores the responses, stores the labeled answers and results, and
updates the linked client's contact and risk level in the same
transaction.
"""

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from assessment_hub.core.config import settings
from assessment_hub.core.logging import audit_logger
from assessment_hub.db.base import utc_now
from assessment_hub.models.assessment import Assessment, AssessmentStatus
from assessment_hub.scoring.engine import label_responses, score_responses
from assessment_hub.scoring.registry import get_template
from assessment_hub.services.client import ClientService

logger = logging.getLogger(__name__)


class AssessmentError(Exception):
    """Base exception for assessment lifecycle errors."""

    pass


class AssessmentNotFoundError(AssessmentError):
    """Raised when an assessment is not found."""

    pass


class AssessmentAlreadyCompletedError(AssessmentError):
    """Raised when completing an assessment that is no longer pending."""

    pass


def _clean(value: str | None) -> str | None:
    """Strip whitespace, treating blank strings as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class AssessmentService:
    """Service for the assessment lifecycle.

    Handles:
    - Creating pending assessments (with client upsert)
    - Completing assessments with scoring and risk flags
    - Guarding against re-completion
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.clients = ClientService(session)

    async def create_assessment(
        self,
        assessment_type: str,
        client_id: str | None = None,
        notes: str | None = None,
    ) -> Assessment:
        """Create a pending assessment.

        Args:
            assessment_type: Template type id (e.g. "PHQ-9")
            client_id: Optional client identifier; blank means anonymous
            notes: Optional clinician notes

        Returns:
            The created Assessment

        Raises:
            TemplateNotFoundError: If the type is not registered
        """
        template = get_template(assessment_type)
        client_id = _clean(client_id)
        notes = _clean(notes)

        try:
            if client_id:
                await self.clients.upsert_contact(client_id)

            assessment = Assessment(
                type=template.type_id,
                name=template.display_name,
                client_id=client_id,
                status=AssessmentStatus.PENDING,
                notes=notes,
            )
            self.session.add(assessment)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(assessment)

        audit_logger.log(
            action="assessment.created",
            entity_type="assessment",
            entity_id=assessment.id,
            metadata={"type": assessment.type, "client_id": client_id},
        )

        return assessment

    async def get_assessment(self, assessment_id: str) -> Assessment:
        """Get an assessment by ID.

        Raises:
            AssessmentNotFoundError: If no such assessment exists
        """
        result = await self.session.execute(
            select(Assessment).where(Assessment.id == assessment_id)
        )
        assessment = result.scalar_one_or_none()
        if not assessment:
            raise AssessmentNotFoundError(f"Assessment {assessment_id} not found")
        return assessment

    async def list_assessments(
        self,
        status: AssessmentStatus | None = None,
        client_id: str | None = None,
        limit: int | None = None,
    ) -> Sequence[Assessment]:
        """List assessments, newest first."""
        query = select(Assessment)
        if status:
            query = query.where(Assessment.status == status.value)
        if client_id:
            query = query.where(Assessment.client_id == client_id)

        query = query.order_by(Assessment.created_at.desc()).limit(
            limit or settings.default_list_limit
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def complete_assessment(
        self,
        assessment_id: str,
        responses: Mapping[Any, Any],
    ) -> Assessment:
        """Score responses and complete a pending assessment.

        The status transition is a compare-and-swap on PENDING, so a second
        submission (including a concurrent one) fails instead of re-scoring.

        Args:
            assessment_id: ID of the assessment
            responses: Mapping of question id to selected value

        Returns:
            The completed Assessment

        Raises:
            AssessmentNotFoundError: If the assessment does not exist
            AssessmentAlreadyCompletedError: If it is no longer pending
            TemplateNotFoundError: If its type is no longer registered
            ResponseValidationError: If responses are malformed
        """
        assessment = await self.get_assessment(assessment_id)

        if not assessment.is_pending:
            raise AssessmentAlreadyCompletedError(
                f"Assessment {assessment_id} is already {assessment.status}"
            )

        get_template(assessment.type)
        result = score_responses(assessment.type, responses)
        labeled = label_responses(assessment.type, responses)
        now = utc_now()

        try:
            outcome = await self.session.execute(
                update(Assessment)
                .where(
                    Assessment.id == assessment_id,
                    Assessment.status == AssessmentStatus.PENDING.value,
                )
                .values(
                    responses=[item.to_dict() for item in labeled],
                    score=result.total_score,
                    severity=result.severity,
                    risk_flags=list(result.risk_flags),
                    status=result.status.value,
                    completed_at=now,
                    updated_at=now,
                )
                .execution_options(synchronize_session=False)
            )
            if outcome.rowcount == 0:
                raise AssessmentAlreadyCompletedError(
                    f"Assessment {assessment_id} was completed concurrently"
                )

            if assessment.client_id:
                await self.clients.upsert_contact(
                    assessment.client_id,
                    escalate=result.is_flagged,
                )

            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(assessment)

        if result.is_flagged:
            logger.warning(
                f"Assessment {assessment_id} flagged: type={assessment.type} "
                f"score={result.total_score} flags={result.risk_flags}"
            )

        audit_logger.log(
            action="assessment.completed",
            entity_type="assessment",
            entity_id=assessment_id,
            metadata={
                "type": assessment.type,
                "score": result.total_score,
                "severity": result.severity,
                "status": result.status.value,
                "risk_flags": result.risk_flags,
            },
        )

        return assessment

"""Assessment lifecycle endpoints.

Create pending assessments, fetch and list them, and submit responses
for scoring.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from assessment_hub.api.deps import DbSession, RequestId
from assessment_hub.models.assessment import AssessmentStatus
from assessment_hub.schemas.assessment import (
    AssessmentComplete,
    AssessmentCreate,
    AssessmentRead,
)
from assessment_hub.scoring.engine import ResponseValidationError
from assessment_hub.scoring.registry import TemplateNotFoundError
from assessment_hub.services.assessment import (
    AssessmentAlreadyCompletedError,
    AssessmentNotFoundError,
    AssessmentService,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AssessmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create assessment",
)
async def create_assessment(
    request: AssessmentCreate,
    session: DbSession,
    request_id: RequestId,
) -> AssessmentRead:
    """Create a pending assessment, upserting the client if one is given."""
    service = AssessmentService(session)

    try:
        assessment = await service.create_assessment(
            assessment_type=request.type,
            client_id=request.client_id,
            notes=request.notes,
        )
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    logger.info(
        f"Created {assessment.type} assessment {assessment.id}",
        extra={"request_id": request_id, "assessment_id": assessment.id},
    )
    return AssessmentRead.model_validate(assessment)


@router.get(
    "",
    response_model=list[AssessmentRead],
    summary="List assessments",
)
async def list_assessments(
    session: DbSession,
    status_filter: Annotated[
        AssessmentStatus | None,
        Query(alias="status", description="Filter by status"),
    ] = None,
    client_id: Annotated[str | None, Query(description="Filter by client")] = None,
    limit: Annotated[int | None, Query(ge=1, le=500)] = None,
) -> list[AssessmentRead]:
    """List assessments, newest first."""
    service = AssessmentService(session)
    assessments = await service.list_assessments(
        status=status_filter,
        client_id=client_id,
        limit=limit,
    )
    return [AssessmentRead.model_validate(a) for a in assessments]


@router.get(
    "/{assessment_id}",
    response_model=AssessmentRead,
    summary="Get assessment",
)
async def get_assessment(
    assessment_id: str,
    session: DbSession,
) -> AssessmentRead:
    """Get a single assessment."""
    service = AssessmentService(session)

    try:
        assessment = await service.get_assessment(assessment_id)
    except AssessmentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )

    return AssessmentRead.model_validate(assessment)


@router.post(
    "/{assessment_id}/complete",
    response_model=AssessmentRead,
    summary="Submit responses",
)
async def complete_assessment(
    assessment_id: str,
    request: AssessmentComplete,
    session: DbSession,
    request_id: RequestId,
) -> AssessmentRead:
    """Score submitted responses and complete the assessment.

    Returns the updated assessment with score, severity, risk flags and
    labeled responses.
    """
    service = AssessmentService(session)

    try:
        assessment = await service.complete_assessment(
            assessment_id=assessment_id,
            responses=request.responses,
        )
    except AssessmentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )
    except AssessmentAlreadyCompletedError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Assessment has already been completed",
        )
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ResponseValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors,
        )

    logger.info(
        f"Completed assessment {assessment.id} status={assessment.status}",
        extra={"request_id": request_id, "assessment_id": assessment.id},
    )
    return AssessmentRead.model_validate(assessment)

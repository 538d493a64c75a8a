"""Client endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from assessment_hub.api.deps import DbSession
from assessment_hub.schemas.assessment import AssessmentRead
from assessment_hub.schemas.client import ClientDetailRead, ClientRead
from assessment_hub.services.client import ClientNotFoundError, ClientService

router = APIRouter()


@router.get(
    "",
    response_model=list[ClientRead],
    summary="List clients",
)
async def list_clients(
    session: DbSession,
    limit: Annotated[int | None, Query(ge=1, le=500)] = None,
) -> list[ClientRead]:
    """List clients, most recently contacted first."""
    service = ClientService(session)
    clients = await service.list_clients(limit=limit)
    return [ClientRead.model_validate(c) for c in clients]


@router.get(
    "/{client_id}",
    response_model=ClientDetailRead,
    summary="Get client with assessments",
)
async def get_client(
    client_id: str,
    session: DbSession,
) -> ClientDetailRead:
    """Get a client and their assessments, most recently completed first."""
    service = ClientService(session)

    try:
        client = await service.get_client(client_id)
    except ClientNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )

    assessments = await service.get_client_assessments(client_id)

    return ClientDetailRead(
        **ClientRead.model_validate(client).model_dump(),
        assessments=[AssessmentRead.model_validate(a) for a in assessments],
    )

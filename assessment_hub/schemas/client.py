"""Pydantic schemas for client operations."""

from datetime import datetime

from pydantic import BaseModel

from assessment_hub.schemas.assessment import AssessmentRead


class ClientRead(BaseModel):
    """Schema for reading a client."""

    id: str
    name: str
    email: str
    phone: str | None = None
    date_of_birth: str | None = None
    notes: str | None = None
    risk_level: str
    last_contact: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ClientDetailRead(ClientRead):
    """Client with their assessments."""

    assessments: list[AssessmentRead] = []

"""Pydantic schemas for assessment operations."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AssessmentCreate(BaseModel):
    """Schema for creating an assessment."""

    type: str = Field(..., description="Assessment type id, e.g. PHQ-9")
    client_id: str | None = Field(None, max_length=64)
    notes: str | None = Field(None, max_length=5000)


class AssessmentComplete(BaseModel):
    """Schema for submitting responses.

    Keys are question ids; JSON object keys arrive as strings. Values are
    validated by the scoring engine so malformed entries are reported
    together.
    """

    responses: dict[str, Any] = Field(..., description="Question id to selected value")


class LabeledResponseRead(BaseModel):
    """A stored answer with its option label."""

    question_id: int
    value: int
    label: str


class AssessmentRead(BaseModel):
    """Schema for reading an assessment."""

    id: str
    type: str
    name: str
    client_id: str | None = None
    status: str
    notes: str | None = None
    responses: list[LabeledResponseRead] | None = None
    score: int | None = None
    severity: str | None = None
    risk_flags: list[str] | None = None
    created_at: datetime
    completed_at: datetime | None = None

    model_config = {"from_attributes": True}

"""Assessment model for administered psychometric questionnaires."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from assessment_hub.db.base import Base, TimestampMixin
from assessment_hub.scoring.base import AssessmentStatus

if TYPE_CHECKING:
    from assessment_hub.models.client import Client


class Assessment(Base, TimestampMixin):
    """One administration of a standardized questionnaire.

    Responses, score, severity, risk flags and completed_at are written
    together when the assessment is completed and never changed afterwards.
    """

    __tablename__ = "assessments"

    # Template type id (e.g. "PHQ-9")
    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
    )
    # Template display name at creation time
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    # Linked client; NULL for anonymous respondents
    client_id: Mapped[str | None] = mapped_column(
        String(64),
        ForeignKey("clients.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[AssessmentStatus] = mapped_column(
        String(20),
        default=AssessmentStatus.PENDING,
        nullable=False,
        index=True,
    )
    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    # Labeled responses: [{"question_id": 1, "value": 2, "label": "..."}]
    responses: Mapped[list | None] = mapped_column(
        JSON,
        nullable=True,
    )
    score: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
    )
    severity: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    risk_flags: Mapped[list | None] = mapped_column(
        JSON,
        nullable=True,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
    )

    client: Mapped["Client | None"] = relationship(
        back_populates="assessments",
    )

    @property
    def is_pending(self) -> bool:
        return self.status == AssessmentStatus.PENDING

    def __repr__(self) -> str:
        return f"<Assessment {self.type} {self.id} ({self.status})>"

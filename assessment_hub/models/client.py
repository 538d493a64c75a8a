"""Client model for assessment respondents."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from assessment_hub.db.base import BaseNoId, TimestampMixin

if TYPE_CHECKING:
    from assessment_hub.models.assessment import Assessment


class RiskLevel(str, Enum):
    """Client risk level.

    Promoted to HIGH when a linked assessment is flagged; never demoted
    automatically.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Client(BaseNoId, TimestampMixin):
    """A person who takes assessments.

    Keyed by the identifier the clinician supplies when creating an
    assessment. Records are created on first reference with placeholder
    name and email.
    """

    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    phone: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
    )
    date_of_birth: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
    )
    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    risk_level: Mapped[RiskLevel] = mapped_column(
        String(20),
        default=RiskLevel.LOW,
        nullable=False,
        index=True,
    )
    last_contact: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    assessments: Mapped[list["Assessment"]] = relationship(
        back_populates="client",
    )

    def __repr__(self) -> str:
        return f"<Client {self.id} risk={self.risk_level}>"

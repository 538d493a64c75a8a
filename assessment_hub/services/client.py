"""Client service for respondent records and risk levels."""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from assessment_hub.core.config import settings
from assessment_hub.core.logging import audit_logger
from assessment_hub.db.base import utc_now
from assessment_hub.models.assessment import Assessment
from assessment_hub.models.client import Client, RiskLevel

logger = logging.getLogger(__name__)

# Dialect-specific INSERT constructs supporting ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ClientNotFoundError(Exception):
    """Raised when a client is not found."""

    pass


def default_client_name(client_id: str) -> str:
    return f"Client {client_id}"


def default_client_email(client_id: str) -> str:
    return f"{client_id.lower()}@{settings.client_email_domain}"


class ClientService:
    """Service for reading and upserting clients."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def upsert_contact(self, client_id: str, escalate: bool = False) -> None:
        """Create the client if missing, otherwise record a new contact.

        Runs as one INSERT ... ON CONFLICT DO UPDATE so concurrent
        completions for the same client cannot lose updates. The caller
        owns the transaction.

        Args:
            client_id: Client identifier
            escalate: Promote risk level to HIGH (a flagged assessment)
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Client upsert not supported on {dialect}")

        now = utc_now()
        stmt = insert(Client).values(
            id=client_id,
            name=default_client_name(client_id),
            email=default_client_email(client_id),
            risk_level=(RiskLevel.HIGH if escalate else RiskLevel.LOW).value,
            last_contact=now,
            created_at=now,
        )

        # Existing clients keep their risk level unless escalating
        update_values = {
            "last_contact": stmt.excluded.last_contact,
            "updated_at": now,
        }
        if escalate:
            update_values["risk_level"] = RiskLevel.HIGH.value

        stmt = stmt.on_conflict_do_update(
            index_elements=[Client.id],
            set_=update_values,
        )
        await self.session.execute(stmt)

        audit_logger.log(
            action="client.upserted",
            entity_type="client",
            entity_id=client_id,
            metadata={"escalated": escalate},
        )

    async def get_client(self, client_id: str) -> Client:
        """Get a client by ID.

        Raises:
            ClientNotFoundError: If no such client exists
        """
        result = await self.session.execute(
            select(Client)
            .where(Client.id == client_id)
            .execution_options(populate_existing=True)
        )
        client = result.scalar_one_or_none()
        if not client:
            raise ClientNotFoundError(f"Client {client_id} not found")
        return client

    async def list_clients(self, limit: int | None = None) -> Sequence[Client]:
        """List clients, most recently contacted first."""
        query = select(Client).order_by(
            Client.last_contact.desc().nulls_last(),
            Client.id,
        )
        if limit:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def get_high_risk_clients(self) -> Sequence[Client]:
        """List clients currently at HIGH risk."""
        result = await self.session.execute(
            select(Client)
            .where(Client.risk_level == RiskLevel.HIGH.value)
            .order_by(Client.last_contact.desc().nulls_last())
        )
        return result.scalars().all()

    async def get_client_assessments(self, client_id: str) -> Sequence[Assessment]:
        """List a client's assessments, most recently completed first.

        Pending assessments follow completed ones, newest first.
        """
        result = await self.session.execute(
            select(Assessment)
            .where(Assessment.client_id == client_id)
            .order_by(
                Assessment.completed_at.desc().nulls_last(),
                Assessment.created_at.desc(),
            )
        )
        return result.scalars().all()

"""Logging setup and the audit trail for assessment state changes."""

import logging
import sys
from typing import Any

from assessment_hub.core.config import settings

# Attributes callers may attach with ``extra=`` that show up in structured output
CONTEXT_FIELDS = (
    "request_id",
    "assessment_id",
    "client_id",
    "action",
    "entity_type",
    "entity_id",
)


class StructuredFormatter(logging.Formatter):
    """Render records as ``key=value`` pairs for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields.update(
            (name, getattr(record, name))
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)

        return " ".join(f"{key}={value}" for key, value in fields.items())


def setup_logging() -> None:
    """Install a single stdout handler on the root logger.

    Development gets a human-readable line format; every other
    environment gets StructuredFormatter.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        if settings.is_dev
        else StructuredFormatter()
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    # Request lines and SQL echo drown out scoring events
    for noisy in ("uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class AuditLogger:
    """Records assessment and client state changes on the ``audit`` logger."""

    def __init__(self, name: str = "audit") -> None:
        self.logger = get_logger(name)

    def log(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Write one audit line.

        Args:
            action: Dotted event name, e.g. "assessment.completed"
            entity_type: "assessment" or "client"
            entity_id: Identifier of the changed record
            metadata: Extra details (scores, flags, escalation)
        """
        details = " ".join(f"{k}={v}" for k, v in (metadata or {}).items())
        self.logger.info(
            f"AUDIT: {action} {entity_type}:{entity_id} {details}".rstrip(),
            extra={
                "action": action,
                "entity_type": entity_type,
                "entity_id": entity_id,
            },
        )


audit_logger = AuditLogger()

"""Migration engine interface that receives validated requests."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict
from datetime import datetime
import logging
import uuid

from .models.request import MigrationRequest

logger = logging.getLogger(__name__)


class MigrationEngineError(Exception):
    """Raised when an engine refuses to accept a migration."""


@dataclass
class MigrationTicket:
    """Acknowledgment returned when an engine accepts a migration."""
    migration_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    accepted_at: datetime = field(default_factory=datetime.utcnow)
    message: str = "Migration started"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "migration_id": self.migration_id,
            "accepted_at": self.accepted_at.isoformat(),
            "message": self.message,
        }


class MigrationEngine(ABC):
    """
    Base class for migration engines.

    Engines only ever receive a MigrationRequest that has already passed
    validation. How they enumerate, copy and verify assets is up to them.
    """

    @abstractmethod
    def start_migration(self, request: MigrationRequest) -> MigrationTicket:
        """
        Begin a migration for the given credentials.

        Args:
            request: Validated credentials for the destination cloud

        Returns:
            Ticket identifying the accepted migration

        Raises:
            MigrationEngineError: If the migration cannot be accepted
        """
        pass


class AcknowledgingEngine(MigrationEngine):
    """Engine that issues tickets without doing any work or keeping the request."""

    def start_migration(self, request: MigrationRequest) -> MigrationTicket:
        ticket = MigrationTicket(
            message="Migration started successfully. Poll /migration/progress for updates.",
        )
        logger.info(f"Accepted migration {ticket.migration_id} for {request.to_dict()}")
        return ticket

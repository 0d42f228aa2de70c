"""Claim history queries."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from points_leaderboard.domain.errors import InvalidInputError
from points_leaderboard.domain.models import ClaimHistoryEntry
from points_leaderboard.services.users import parse_user_id

DEFAULT_HISTORY_LIMIT = 50


class HistoryRepository(Protocol):
    """Persistence interface for the claim history log."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        user_name: str,
        points_awarded: int,
        total_points_after_claim: int,
        timestamp: datetime,
    ) -> ClaimHistoryEntry:
        """Append a history entry and return it."""

    def list_recent(self, limit: int) -> list[ClaimHistoryEntry]:
        """Return the newest entries across all users."""

    def list_for_user(self, user_id: UUID) -> list[ClaimHistoryEntry]:
        """Return every entry for a user, newest first."""


@dataclass
class HistoryService:
    """Read access to the append-only claim log."""

    repository: HistoryRepository
    max_limit: int = DEFAULT_HISTORY_LIMIT

    def list_recent_history(self, limit: int | None = None) -> list[ClaimHistoryEntry]:
        """Return recent claims, newest first.

        The limit defaults to max_limit; values outside 1..max_limit are
        rejected.
        """
        if limit is None:
            limit = self.max_limit
        if not 1 <= limit <= self.max_limit:
            msg = f"limit must be between 1 and {self.max_limit}"
            raise InvalidInputError(msg)
        return self.repository.list_recent(limit)[:limit]

    def list_history_for_user(
        self, user_id: str | UUID | None
    ) -> list[ClaimHistoryEntry]:
        """Return all claims for a user, newest first."""
        parsed = parse_user_id(user_id)
        if parsed is None:
            return []
        return self.repository.list_for_user(parsed)

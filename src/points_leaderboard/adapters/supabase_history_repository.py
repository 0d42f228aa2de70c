"""Supabase repository for the claim history log."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from points_leaderboard.adapters.supabase_query import execute, parse_timestamp
from points_leaderboard.domain.errors import PersistenceError
from points_leaderboard.domain.models import ClaimHistoryEntry
from points_leaderboard.services.history import HistoryRepository

_HISTORY_COLUMNS = (
    "id, user_id, user_name, points_awarded, total_points_after_claim, timestamp"
)


@dataclass
class SupabaseHistoryRepository(HistoryRepository):
    """Supabase implementation for claim history persistence."""

    client: Client

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        user_name: str,
        points_awarded: int,
        total_points_after_claim: int,
        timestamp: datetime,
    ) -> ClaimHistoryEntry:
        """Insert a history row and return it."""
        rows = execute(
            self.client.table("claim_history").insert(
                {
                    "user_id": str(user_id),
                    "user_name": user_name,
                    "points_awarded": points_awarded,
                    "total_points_after_claim": total_points_after_claim,
                    "timestamp": timestamp.isoformat(),
                }
            )
        )
        if not rows:
            raise PersistenceError("Failed to create claim history in Supabase")
        return _parse_row(rows[0])

    def list_recent(self, limit: int) -> list[ClaimHistoryEntry]:
        """Return the newest history rows across all users."""
        rows = execute(
            self.client.table("claim_history")
            .select(_HISTORY_COLUMNS)
            .order("timestamp", desc=True)
            .limit(limit)
        )
        return [_parse_row(row) for row in rows]

    def list_for_user(self, user_id: UUID) -> list[ClaimHistoryEntry]:
        """Return every history row for a user, newest first."""
        rows = execute(
            self.client.table("claim_history")
            .select(_HISTORY_COLUMNS)
            .eq("user_id", str(user_id))
            .order("timestamp", desc=True)
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> ClaimHistoryEntry:
    return ClaimHistoryEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        user_name=str(row["user_name"]),
        points_awarded=int(row["points_awarded"]),
        total_points_after_claim=int(row["total_points_after_claim"]),
        timestamp=parse_timestamp(row.get("timestamp")) or datetime.min,
    )

"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from points_leaderboard.adapters.supabase_query import (
    UNIQUE_VIOLATION,
    execute,
    execute_response,
    parse_timestamp,
)
from points_leaderboard.domain.errors import ConflictError, PersistenceError
from points_leaderboard.domain.models import UserRecord
from points_leaderboard.services.users import UserRepository

_USER_COLUMNS = "id, name, total_points, avatar, created_at, updated_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by total points, highest first."""
        rows = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .order("total_points", desc=True)
        )
        return [_parse_row(row) for row in rows]

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        rows = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
        )
        return _parse_row(rows[0]) if rows else None

    def get_by_name(self, name: str) -> UserRecord | None:
        """Return the user with exactly this name, if present."""
        rows = execute(
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("name", name)
            .limit(1)
        )
        return _parse_row(rows[0]) if rows else None

    def count_users(self) -> int:
        """Return the number of stored users."""
        response = execute_response(
            self.client.table("users").select("id", count="exact")
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def create_user(self, name: str, avatar: str | None = None) -> UserRecord:
        """Create a new user row and return it."""
        rows = self._insert({"name": name, "total_points": 0, "avatar": avatar})
        if not rows:
            raise PersistenceError("Failed to create user in Supabase")
        return _parse_row(rows[0])

    def create_users(self, names: list[str]) -> list[UserRecord]:
        """Insert several zero-point users in one request."""
        rows = self._insert([{"name": name, "total_points": 0} for name in names])
        return [_parse_row(row) for row in rows]

    def update_total_points(self, user_id: UUID, total_points: int) -> UserRecord:
        """Persist the new point total for a user."""
        rows = execute(
            self.client.table("users")
            .update(
                {
                    "total_points": total_points,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(user_id))
        )
        if not rows:
            raise PersistenceError("Failed to update user points in Supabase")
        return _parse_row(rows[0])

    def _insert(
        self, payload: dict[str, object] | list[dict[str, object]]
    ) -> list[dict[str, object]]:
        try:
            return execute(self.client.table("users").insert(payload))
        except PersistenceError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise ConflictError("User already exists") from exc
            raise


def _parse_row(row: dict[str, object]) -> UserRecord:
    avatar = row.get("avatar")
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        total_points=int(row.get("total_points") or 0),
        avatar=avatar if isinstance(avatar, str) and avatar else None,
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )

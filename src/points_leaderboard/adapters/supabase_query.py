"""Shared helpers for Supabase query execution."""

from datetime import datetime
from typing import Any

from points_leaderboard.domain.errors import PersistenceError

UNIQUE_VIOLATION = "23505"


def execute_response(query: Any) -> Any:  # noqa: ANN401
    """Run a Supabase query builder and return the raw response.

    Client failures are re-raised as PersistenceError carrying the store's
    message and error code.
    """
    try:
        return query.execute()
    except Exception as exc:
        message = getattr(exc, "message", None) or str(exc)
        code = getattr(exc, "code", None)
        raise PersistenceError(message, code=code) from exc


def execute(query: Any) -> list[dict[str, Any]]:  # noqa: ANN401
    """Run a Supabase query builder and return its rows."""
    return execute_response(query).data or []


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating empty values."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None

"""Domain models for the points leaderboard."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    total_points: int = 0
    avatar: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class RankedUser:
    """A user annotated with its leaderboard position."""

    user: UserRecord
    rank: int


@dataclass(frozen=True)
class ClaimHistoryEntry:
    """Immutable record of one completed claim."""

    id: UUID
    user_id: UUID
    user_name: str
    points_awarded: int
    total_points_after_claim: int
    timestamp: datetime


@dataclass(frozen=True)
class ClaimResult:
    """Outcome of a successful claim."""

    points_awarded: int
    user: UserRecord
    leaderboard: list[RankedUser]

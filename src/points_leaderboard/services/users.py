"""User directory business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from points_leaderboard.domain.errors import ConflictError, InvalidInputError
from points_leaderboard.domain.models import RankedUser, UserRecord
from points_leaderboard.services.ranking import RankingService

logger = logging.getLogger(__name__)

DEFAULT_USER_NAMES = (
    "Rahul",
    "Kamal",
    "Sanak",
    "Priya",
    "Amit",
    "Sneha",
    "Ravi",
    "Pooja",
    "Vikash",
    "Anjali",
)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by total points, highest first."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_name(self, name: str) -> UserRecord | None:
        """Return the user with exactly this name, if present."""

    def count_users(self) -> int:
        """Return the number of stored users."""

    def create_user(self, name: str, avatar: str | None = None) -> UserRecord:
        """Create and return a new user with zero points."""

    def create_users(self, names: list[str]) -> list[UserRecord]:
        """Create several users with zero points."""

    def update_total_points(self, user_id: UUID, total_points: int) -> UserRecord:
        """Persist a new point total and return the updated user."""


def parse_user_id(raw: str | UUID | None) -> UUID | None:
    """Return the UUID for a raw identifier, or None when it is malformed."""
    if isinstance(raw, UUID):
        return raw
    if raw is None:
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        return None


@dataclass
class UserService:
    """Application service for the user directory."""

    repository: UserRepository
    ranking_service: RankingService

    def list_users(self) -> list[RankedUser]:
        """Return all users annotated with their rank."""
        return self.ranking_service.leaderboard()

    def create_user(self, name: str | None, avatar: str | None = None) -> UserRecord:
        """Create a user with a unique, trimmed name."""
        cleaned = (name or "").strip()
        if not cleaned:
            raise InvalidInputError("Name is required")
        if self.repository.get_by_name(cleaned) is not None:
            raise ConflictError("User already exists")
        return self.repository.create_user(cleaned, avatar=avatar or None)

    def seed_default_users(self) -> int:
        """Insert the default users when the directory is empty."""
        if self.repository.count_users() > 0:
            return 0
        try:
            created = self.repository.create_users(list(DEFAULT_USER_NAMES))
        except ConflictError:
            logger.info("Default users already initialized by another instance")
            return 0
        logger.info("Default users initialized", extra={"count": len(created)})
        return len(created)

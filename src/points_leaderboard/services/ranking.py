"""Leaderboard ranking."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from points_leaderboard.domain.models import RankedUser, UserRecord


class UserListing(Protocol):
    """Read access to the full user set."""

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by total points, highest first."""


def rank_users(users: Iterable[UserRecord]) -> list[RankedUser]:
    """Order users by total points and assign 1-based ranks.

    The sort is stable: users with equal totals keep their input order.
    """
    ordered = sorted(users, key=lambda user: user.total_points, reverse=True)
    return [RankedUser(user=user, rank=index) for index, user in enumerate(ordered, 1)]


@dataclass
class RankingService:
    """Computes the leaderboard from the current user set."""

    repository: UserListing

    def leaderboard(self) -> list[RankedUser]:
        """Return every user ranked by total points."""
        return rank_users(self.repository.list_users())

"""Point claiming business logic."""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from points_leaderboard.domain.errors import InvalidInputError, NotFoundError
from points_leaderboard.domain.models import ClaimResult
from points_leaderboard.services.history import HistoryRepository
from points_leaderboard.services.ranking import RankingService
from points_leaderboard.services.users import UserRepository, parse_user_id

logger = logging.getLogger(__name__)

MIN_POINTS = 1
MAX_POINTS = 10


def draw_points() -> int:
    """Return a reward drawn uniformly from the allowed range."""
    return random.randint(MIN_POINTS, MAX_POINTS)  # noqa: S311


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ClaimService:
    """Awards random points to users and records each award."""

    user_repository: UserRepository
    history_repository: HistoryRepository
    ranking_service: RankingService
    points_source: Callable[[], int] = field(default=draw_points)
    clock: Callable[[], datetime] = field(default=_utc_now)

    def claim(self, user_id: str | None) -> ClaimResult:
        """Award a random number of points to a user.

        The user update and the history insert are two independent writes.
        A failure between them leaves the new total without a history entry.
        """
        if user_id is None or not str(user_id).strip():
            raise InvalidInputError("User ID is required")

        parsed = parse_user_id(user_id)
        user = self.user_repository.get_by_id(parsed) if parsed else None
        if user is None:
            raise NotFoundError("User not found")

        points = self.points_source()
        if not MIN_POINTS <= points <= MAX_POINTS:
            msg = (
                f"Points source returned {points}, "
                f"expected {MIN_POINTS}..{MAX_POINTS}"
            )
            raise ValueError(msg)

        updated = self.user_repository.update_total_points(
            user.id, user.total_points + points
        )
        try:
            self.history_repository.create_entry(
                user_id=updated.id,
                user_name=updated.name,
                points_awarded=points,
                total_points_after_claim=updated.total_points,
                timestamp=self.clock(),
            )
        except Exception:
            logger.exception(
                "Claim history insert failed after points update",
                extra={"user_id": str(updated.id), "points": points},
            )
            raise

        logger.info(
            "Points claimed",
            extra={"user_id": str(updated.id), "points": points},
        )
        return ClaimResult(
            points_awarded=points,
            user=updated,
            leaderboard=self.ranking_service.leaderboard(),
        )

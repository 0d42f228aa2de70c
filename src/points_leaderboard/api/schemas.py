"""Pydantic request and response models for the leaderboard API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from points_leaderboard.domain.models import (
    ClaimHistoryEntry,
    ClaimResult,
    RankedUser,
    UserRecord,
)

CLAIM_SUCCESS_MESSAGE = "Points claimed successfully"


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    """Body of POST /api/users."""

    name: str | None = None
    avatar: str | None = None


class ClaimRequest(CamelModel):
    """Body of POST /api/claim."""

    user_id: str | None = None


class UserResponse(CamelModel):
    """User as returned by the API."""

    id: UUID
    name: str
    total_points: int
    avatar: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            total_points=user.total_points,
            avatar=user.avatar,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class RankedUserResponse(UserResponse):
    """User with its leaderboard position."""

    rank: int

    @classmethod
    def from_ranked(cls, ranked: RankedUser) -> "RankedUserResponse":
        base = UserResponse.from_record(ranked.user)
        return cls(**base.model_dump(), rank=ranked.rank)


class HistoryEntryResponse(CamelModel):
    """Claim history entry as returned by the API."""

    id: UUID
    user_id: UUID
    user_name: str
    points_awarded: int
    total_points_after_claim: int
    timestamp: datetime

    @classmethod
    def from_entry(cls, entry: ClaimHistoryEntry) -> "HistoryEntryResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            user_name=entry.user_name,
            points_awarded=entry.points_awarded,
            total_points_after_claim=entry.total_points_after_claim,
            timestamp=entry.timestamp,
        )


class ClaimResponse(CamelModel):
    """Result of POST /api/claim."""

    message: str
    points_awarded: int
    user: UserResponse
    leaderboard: list[RankedUserResponse]

    @classmethod
    def from_result(cls, result: ClaimResult) -> "ClaimResponse":
        return cls(
            message=CLAIM_SUCCESS_MESSAGE,
            points_awarded=result.points_awarded,
            user=UserResponse.from_record(result.user),
            leaderboard=[
                RankedUserResponse.from_ranked(ranked) for ranked in result.leaderboard
            ],
        )


class ErrorResponse(BaseModel):
    """Error body returned for failed requests."""

    error: str

"""Leaderboard API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from points_leaderboard.api.schemas import (
    ClaimRequest,
    ClaimResponse,
    CreateUserRequest,
    ErrorResponse,
    HistoryEntryResponse,
    RankedUserResponse,
    UserResponse,
)

if TYPE_CHECKING:
    from points_leaderboard.containers import AppContainer

router = APIRouter(prefix="/api", tags=["leaderboard"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.get("/users", responses=_ERRORS)
async def list_users(request: Request) -> list[RankedUserResponse]:
    """Return all users with their leaderboard rank."""
    container: AppContainer = request.app.state.container
    return [
        RankedUserResponse.from_ranked(ranked)
        for ranked in container.user_service.list_users()
    ]


@router.post("/users", status_code=status.HTTP_201_CREATED, responses=_ERRORS)
async def create_user(body: CreateUserRequest, request: Request) -> UserResponse:
    """Create a user with zero points."""
    container: AppContainer = request.app.state.container
    user = container.user_service.create_user(body.name, avatar=body.avatar)
    return UserResponse.from_record(user)


@router.post(
    "/claim",
    responses={**_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def claim_points(body: ClaimRequest, request: Request) -> ClaimResponse:
    """Award a random number of points to a user."""
    container: AppContainer = request.app.state.container
    result = container.claim_service.claim(body.user_id)
    return ClaimResponse.from_result(result)


@router.get("/history", responses=_ERRORS)
async def list_history(
    request: Request,
    limit: int | None = None,
) -> list[HistoryEntryResponse]:
    """Return the most recent claims across all users."""
    container: AppContainer = request.app.state.container
    return [
        HistoryEntryResponse.from_entry(entry)
        for entry in container.history_service.list_recent_history(limit)
    ]


@router.get("/history/{user_id}", responses=_ERRORS)
async def user_history(user_id: str, request: Request) -> list[HistoryEntryResponse]:
    """Return every claim for a user, newest first."""
    container: AppContainer = request.app.state.container
    return [
        HistoryEntryResponse.from_entry(entry)
        for entry in container.history_service.list_history_for_user(user_id)
    ]

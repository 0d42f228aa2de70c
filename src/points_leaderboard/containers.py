"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from points_leaderboard.adapters.supabase_history_repository import (
    SupabaseHistoryRepository,
)
from points_leaderboard.adapters.supabase_user_repository import SupabaseUserRepository
from points_leaderboard.config import Settings
from points_leaderboard.services.claims import ClaimService
from points_leaderboard.services.history import HistoryService
from points_leaderboard.services.ranking import RankingService
from points_leaderboard.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ranking_service: RankingService
    user_service: UserService
    claim_service: ClaimService
    history_service: HistoryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    history_repository = SupabaseHistoryRepository(supabase_client)
    ranking_service = RankingService(user_repository)
    user_service = UserService(user_repository, ranking_service)
    claim_service = ClaimService(
        user_repository=user_repository,
        history_repository=history_repository,
        ranking_service=ranking_service,
    )
    history_service = HistoryService(
        history_repository, max_limit=resolved_settings.history_limit
    )

    return AppContainer(
        settings=resolved_settings,
        ranking_service=ranking_service,
        user_service=user_service,
        claim_service=claim_service,
        history_service=history_service,
    )

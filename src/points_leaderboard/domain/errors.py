"""Domain errors raised by leaderboard services and adapters."""


class LeaderboardError(Exception):
    """Base class for errors reported back to API callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(LeaderboardError):
    """A required field is missing or empty."""


class ConflictError(LeaderboardError):
    """The requested record collides with an existing one."""


class NotFoundError(LeaderboardError):
    """The referenced record does not exist."""


class PersistenceError(LeaderboardError):
    """The backing store failed to complete a request."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code

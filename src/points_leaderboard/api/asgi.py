"""ASGI entrypoint for the points leaderboard API.

Settings come from the environment; see ``points_leaderboard.config``.
"""

from points_leaderboard.api.app import create_app
from points_leaderboard.containers import build_container

app = create_app(build_container())

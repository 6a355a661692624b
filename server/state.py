"""
Request dependencies for shared application state.

The board lives on app.state, created once by main.create_app. Routers ask
for it through FastAPI's Depends instead of importing a module global.
"""

from datetime import datetime, timezone

from fastapi import Request

from logic.board import BoardState


def get_board(request: Request) -> BoardState:
    """Dependency returning the application's board."""
    return request.app.state.board


def get_started_at(request: Request) -> datetime:
    """Dependency returning when the application was created (UTC)."""
    return request.app.state.started_at


def uptime_seconds(started_at: datetime) -> float:
    """Seconds elapsed since started_at."""
    return (datetime.now(timezone.utc) - started_at).total_seconds()

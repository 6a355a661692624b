"""Health check endpoint."""

from datetime import datetime

from fastapi import APIRouter, Depends

from logic.board import BoardState
from server.state import get_board, get_started_at, uptime_seconds

router = APIRouter()


@router.get("/health")
async def health_check(
    board: BoardState = Depends(get_board),
    started_at: datetime = Depends(get_started_at),
):
    """Check service health.

    Returns:
        Dictionary with status, uptime, start time and number of claimed squares.
    """
    return {
        "status": "ok",
        "uptime_seconds": uptime_seconds(started_at),
        "started_at": started_at.isoformat(),
        "claimed_squares": board.claimed_count(),
    }

"""
Babysquares FastAPI Application

Main entry point for the Babysquares application, serving the shared
squares pool page and the htmx fragments used to claim squares and edit
the board settings.

Run with: python main.py
Or: uvicorn main:app --port 3000
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from logic.board import BoardState, InvalidCoordinate
from logic.config import VALID_LOG_LEVELS, load_config
from server.board import router as board_router
from server.health import router as health_router

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    """Configure root logging for the application.

    Existing root handlers are replaced, so calling this again changes the level.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Raises:
        ValueError: If level is not a valid log level.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {sorted(VALID_LOG_LEVELS)}")
    logging.basicConfig(level=getattr(logging, level_upper), format=LOG_FORMAT, force=True)


async def invalid_coordinate_handler(request: Request, exc: InvalidCoordinate):
    """Reject requests that address a square outside the board."""
    logger.warning("Rejected coordinate on %s: %s", request.url.path, exc)
    return PlainTextResponse(f"Invalid coordinate: {exc}", status_code=400)


def create_app(board: Optional[BoardState] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        board: Board to serve. A fresh default board is created when omitted.

    Returns:
        Configured FastAPI instance with all routers registered.

    Raises:
        ValueError: If PORT or LOG_LEVEL in the environment is invalid.
    """
    config = load_config()
    setup_logging(config["log_level"])

    app = FastAPI(title="Babysquares")

    app.state.board = board if board is not None else BoardState()
    app.state.started_at = datetime.now(timezone.utc)

    app.add_exception_handler(InvalidCoordinate, invalid_coordinate_handler)

    app.include_router(board_router)
    app.include_router(health_router)

    return app


app = create_app()


def main() -> None:
    """Start the server on the configured host and port."""
    config = load_config()
    logger.info("Server is listening on http://localhost:%d", config["port"])
    uvicorn.run(app, host=config["host"], port=config["port"], log_level=config["log_level"].lower())


if __name__ == "__main__":
    main()

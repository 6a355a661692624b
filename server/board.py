"""
Board routes.

This module serves the squares page and the htmx fragments used to claim a
square and to edit the board title and axis labels.

Handlers are async and call the board synchronously, so each read or update
completes before the event loop serves another request.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from logic.board import BoardState
from logic.render import render_board_wrapper, render_cell, render_edit_cell, render_page
from server.state import get_board

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(board: BoardState = Depends(get_board)):
    """Serve the full board page.

    Returns:
        HTML page with the settings form and the current board.
    """
    return HTMLResponse(render_page(board.get_snapshot()))


@router.get("/edit-square", response_class=HTMLResponse)
async def edit_square(
    row: Optional[str] = None,
    col: Optional[str] = None,
    board: BoardState = Depends(get_board),
):
    """Return the inline edit form for one square.

    Args:
        row: Row index from the query string.
        col: Column index from the query string.

    Returns:
        <td> fragment holding the buyer form, pre-filled with the current name.

    Raises:
        InvalidCoordinate: If row or col is missing or off the board.
    """
    r, c = board.coordinates(row, col)
    logger.debug("Edit form requested for square (%d, %d)", r, c)
    return HTMLResponse(render_edit_cell(r, c, board.get_cell(r, c)))


@router.post("/update-square", response_class=HTMLResponse)
async def update_square(
    row: Optional[str] = Form(None),
    col: Optional[str] = Form(None),
    buyer: Optional[str] = Form(None),
    board: BoardState = Depends(get_board),
):
    """Claim (or clear) a square and return it in read-only form.

    Args:
        row: Row index form field.
        col: Column index form field.
        buyer: Name to store; missing or empty clears the square.

    Returns:
        Read-only <td> fragment showing the stored name.

    Raises:
        InvalidCoordinate: If row or col is missing or off the board.
    """
    r, c = board.coordinates(row, col)
    board.set_cell(r, c, buyer)
    logger.info("Square (%d, %d) updated", r, c)
    return HTMLResponse(render_cell(r, c, board.get_cell(r, c)))


@router.post("/update-board", response_class=HTMLResponse)
async def update_board(
    title: Optional[str] = Form(None, alias="boardTitle"),
    x_labels: Optional[str] = Form(None, alias="xLabels"),
    y_labels: Optional[str] = Form(None, alias="yLabels"),
    board: BoardState = Depends(get_board),
):
    """Update the board title and axis labels.

    Empty fields leave the current value unchanged.

    Returns:
        Re-rendered #board-wrapper fragment.
    """
    board.update_settings(title=title, x_labels=x_labels, y_labels=y_labels)
    changed = [
        name
        for name, value in (("title", title), ("x_labels", x_labels), ("y_labels", y_labels))
        if value
    ]
    logger.info("Board settings updated: %s", ", ".join(changed) or "nothing")
    return HTMLResponse(render_board_wrapper(board.get_snapshot()))


@router.get("/api/board")
async def get_board_state(board: BoardState = Depends(get_board)):
    """Get the current board as JSON.

    Returns:
        Dictionary with title, x_labels, y_labels and the board rows.
    """
    return board.get_snapshot().to_dict()

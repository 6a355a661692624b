"""
Server-side HTML rendering.

This module turns board snapshots and single squares into the HTML pages and
fragments returned to the browser. Fragments carry htmx attributes so a
click swaps a square for its edit form and a save swaps it back.

Templates live in logic/templates/ and are rendered with
Jinja2 with HTML autoescaping on, so buyer names, titles and labels are
always escaped.
"""

from jinja2 import Environment, FileSystemLoader, select_autoescape

from logic.board import BoardSnapshot
from logic.config import TEMPLATE_DIR

# Axis descriptions shown next to the table
X_AXIS_DESCRIPTION = "Last digit of day of birth"
X_AXIS_NOTE = "(i.e. '2' wins if it's the 2nd, 12th or 22nd)"
Y_AXIS_DESCRIPTION = "Last digit of birth weight"
Y_AXIS_NOTE = "(i.e. '7' wins if it's 6lbs, 7oz, 8lbs, 7 oz)"

HTMX_URL = "https://unpkg.com/htmx.org@1.9.2"
FONT_URL = "https://fonts.googleapis.com/css2?family=Roboto&display=swap"

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _axis_context() -> dict:
    return {
        "x_axis_description": X_AXIS_DESCRIPTION,
        "x_axis_note": X_AXIS_NOTE,
        "y_axis_description": Y_AXIS_DESCRIPTION,
        "y_axis_note": Y_AXIS_NOTE,
    }


def render_page(snapshot: BoardSnapshot) -> str:
    """Render the full page: header, settings form and board.

    Args:
        snapshot: Board state to display.

    Returns:
        Complete HTML document.
    """
    return env.get_template("page.html").render(
        snapshot=snapshot,
        htmx_url=HTMX_URL,
        font_url=FONT_URL,
        **_axis_context(),
    )


def render_board_wrapper(snapshot: BoardSnapshot) -> str:
    """Render the #board-wrapper fragment (axis descriptions and table).

    Column headers and row headers are taken from the snapshot labels,
    one per column/row. Extra labels are not shown and missing ones are
    rendered blank.
    """
    return env.get_template("board_wrapper.html").render(
        snapshot=snapshot,
        **_axis_context(),
    )


def render_cell(row: int, col: int, value: str) -> str:
    """Render a read-only square that loads its edit form when clicked."""
    return env.get_template("cell.html").render(row=row, col=col, value=value)


def render_edit_cell(row: int, col: int, value: str) -> str:
    """Render a square holding the inline buyer form."""
    return env.get_template("edit_cell.html").render(row=row, col=col, value=value)

"""
Board state management.

This module owns the squares grid, the board title and the axis labels. All
reads and writes go through a single BoardState instance so request handlers
never touch the underlying lists directly.

Operations are synchronous and never await, so when they are called from
async request handlers each one runs to completion before another request
is served. Concurrent writes to the same square resolve as last write wins.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_TITLE = "Babysquares"

# plain ASCII integer, optional minus sign
COORDINATE_PATTERN = re.compile(r"-?[0-9]+")


class InvalidCoordinate(ValueError):
    """Raised when a row or column is missing, not an integer or off the board."""

    def __init__(self, axis: str, value: Any, limit: int):
        self.axis = axis
        self.value = value
        self.limit = limit
        super().__init__(f"{axis} must be an integer in [0, {limit}), got {value!r}")


def parse_coordinate(value: Any, limit: int, axis: str = "row") -> int:
    """Parse a row or column index and check it against the grid size.

    Args:
        value: Index as an int or a string holding an int (e.g. a query param).
        limit: Exclusive upper bound (number of rows or columns).
        axis: Name used in the error message.

    Returns:
        The validated integer index.

    Raises:
        InvalidCoordinate: If the value is missing, not an integer or out of range.
    """
    # bool is an int subclass but True/False are never coordinates
    if value is None or isinstance(value, bool):
        raise InvalidCoordinate(axis, value, limit)

    if isinstance(value, int):
        index = value
    elif isinstance(value, str):
        text = value.strip()
        if not COORDINATE_PATTERN.fullmatch(text):
            raise InvalidCoordinate(axis, value, limit)
        index = int(text)
    else:
        raise InvalidCoordinate(axis, value, limit)

    if not 0 <= index < limit:
        raise InvalidCoordinate(axis, value, limit)
    return index


def parse_labels(raw: str) -> List[str]:
    """Split a comma separated label string into trimmed labels.

    A string without commas becomes a single label. Empty pieces are kept,
    so "a,,b" gives three labels.
    """
    return [label.strip() for label in raw.split(",")]


def default_labels(count: int) -> List[str]:
    """Return the numeric labels "0".."count-1"."""
    return [str(i) for i in range(count)]


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable copy of the full board state, used for rendering.

    Attributes:
        title: Board title.
        x_labels: Column labels, in display order.
        y_labels: Row labels, in display order.
        board: Rows of cell values; "" marks an unclaimed square.
    """

    title: str
    x_labels: Tuple[str, ...]
    y_labels: Tuple[str, ...]
    board: Tuple[Tuple[str, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.board)

    @property
    def cols(self) -> int:
        return len(self.board[0]) if self.board else 0

    def column_label(self, col: int) -> str:
        """Label for a column, or "" when fewer labels than columns were set."""
        return self.x_labels[col] if col < len(self.x_labels) else ""

    def row_label(self, row: int) -> str:
        """Label for a row, or "" when fewer labels than rows were set."""
        return self.y_labels[row] if row < len(self.y_labels) else ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert the snapshot to plain JSON-friendly types."""
        return {
            "title": self.title,
            "x_labels": list(self.x_labels),
            "y_labels": list(self.y_labels),
            "board": [list(row) for row in self.board],
        }


class BoardState:
    """Mutable squares board shared by every request of one application."""

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        title: str = DEFAULT_TITLE,
    ):
        if rows < 1 or cols < 1:
            raise ValueError("Board needs at least one row and one column")

        self.rows = rows
        self.cols = cols
        self._title = title
        self._x_labels = default_labels(cols)
        self._y_labels = default_labels(rows)
        self._board = [["" for _ in range(cols)] for _ in range(rows)]

    def coordinates(self, row: Any, col: Any) -> Tuple[int, int]:
        """Validate a (row, col) pair and return it as ints.

        Raises:
            InvalidCoordinate: If row or col is invalid.
        """
        return (
            parse_coordinate(row, self.rows, "row"),
            parse_coordinate(col, self.cols, "col"),
        )

    def get_cell(self, row: Any, col: Any) -> str:
        """Return the buyer name in a square, "" if unclaimed.

        Raises:
            InvalidCoordinate: If row or col is invalid.
        """
        r, c = self.coordinates(row, col)
        return self._board[r][c]

    def set_cell(self, row: Any, col: Any, value: Optional[Any]) -> None:
        """Overwrite a square with a buyer name.

        None is stored as an empty string, anything else is converted with
        str(). There is no conflict detection.

        Raises:
            InvalidCoordinate: If row or col is invalid.
        """
        r, c = self.coordinates(row, col)
        self._board[r][c] = "" if value is None else str(value)

    def get_snapshot(self) -> BoardSnapshot:
        """Return a copy of the full state that later updates cannot change."""
        return BoardSnapshot(
            title=self._title,
            x_labels=tuple(self._x_labels),
            y_labels=tuple(self._y_labels),
            board=tuple(tuple(row) for row in self._board),
        )

    def update_settings(
        self,
        title: Optional[str] = None,
        x_labels: Optional[str] = None,
        y_labels: Optional[str] = None,
    ) -> None:
        """Update the title and/or axis labels.

        Empty or missing fields leave the current value in place. Label
        strings replace the whole label list; their length is not checked
        against the board size. Squares are never touched.

        Args:
            title: New board title.
            x_labels: Comma separated column labels.
            y_labels: Comma separated row labels.
        """
        if title:
            self._title = title
        if x_labels:
            self._x_labels = parse_labels(x_labels)
        if y_labels:
            self._y_labels = parse_labels(y_labels)

    def claimed_count(self) -> int:
        """Count squares that have a buyer."""
        return sum(1 for row in self._board for value in row if value)

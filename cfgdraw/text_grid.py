"""A growable grid of characters for drawing boxes and lines as text."""

from __future__ import annotations

from enum import Enum

EMPTY_CHAR = " "
VERTICAL_CHAR = "│"
HORIZONTAL_CHAR = "─"
HORIZONTAL_DOWN_CHAR = "┬"
DOWN_LEFT_CHAR = "┐"
HORIZONTAL_UP_CHAR = "┴"
UP_LEFT_CHAR = "┘"
DOWN_RIGHT_CHAR = "┌"
UP_RIGHT_CHAR = "└"

TARGET_LEFT_CHAR = "<"
TARGET_RIGHT_CHAR = ">"


class LineDirection(Enum):
    """A direction in which a straight line is drawn on a grid."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def offset(self) -> tuple[int, int]:
        """Return the ``(line, column)`` step of one move in this direction."""
        return self.value

    def char(self) -> str:
        """Return the character used to draw a line in this direction."""
        if self in (LineDirection.UP, LineDirection.DOWN):
            return VERTICAL_CHAR
        return HORIZONTAL_CHAR


class CharGrid:
    """A rectangle of characters indexed by ``(line, column)`` from the top left.

    The grid grows as needed whenever something is written beyond its edges.
    """

    def __init__(self, n_lines: int, n_columns: int) -> None:
        if n_lines < 1 or n_columns < 1:
            raise ValueError("a grid needs at least one line and one column")
        self._content: list[list[str]] = []
        self.ensure_size(n_lines - 1, n_columns - 1)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._content)

    def __repr__(self) -> str:
        return f"CharGrid(n_lines={self.n_lines}, n_columns={self.n_columns})"

    @property
    def n_lines(self) -> int:
        return len(self._content)

    @property
    def n_columns(self) -> int:
        return len(self._content[0]) if self._content else 0

    def ensure_size(self, line: int, column: int) -> None:
        """Add empty lines and columns until the cell ``(line, column)`` exists."""
        if line < 0 or column < 0:
            raise ValueError(f"negative coordinates ({line}, {column})")
        width = self.n_columns
        self._content.extend([EMPTY_CHAR] * width for _ in range(line + 1 - self.n_lines))
        missing_columns = column + 1 - self.n_columns
        if missing_columns > 0:
            for row in self._content:
                row.extend(EMPTY_CHAR * missing_columns)

    def get_char(self, line: int, column: int) -> str:
        """Return the character at ``(line, column)``."""
        if line < 0 or column < 0:
            raise IndexError(f"negative coordinates ({line}, {column})")
        return self._content[line][column]

    def set_char(self, line: int, column: int, char: str) -> None:
        """Write ``char`` at ``(line, column)``, growing the grid if needed."""
        self.ensure_size(line, column)
        self._content[line][column] = char

    def append_sub_grid(self, line: int, column: int, other: CharGrid) -> None:
        """Copy ``other`` so that its top left corner lands at ``(line, column)``."""
        self.ensure_size(line + other.n_lines, column + other.n_columns)
        for line_offset, row in enumerate(other._content):
            self._content[line + line_offset][column : column + len(row)] = row

    def append_string(self, line: int, column: int, text: str) -> None:
        """Write ``text`` on ``line`` starting at ``column``."""
        self.ensure_size(line, column + max(len(text), 1) - 1)
        self._content[line][column : column + len(text)] = list(text)

    def draw_line(
        self,
        initial_line: int,
        initial_column: int,
        direction: LineDirection,
        length: int,
    ) -> None:
        """Draw ``length`` line characters from the start cell towards ``direction``."""
        line_step, column_step = direction.offset()
        char = direction.char()
        for step in range(length):
            self.set_char(initial_line + step * line_step, initial_column + step * column_step, char)

    def draw_outside_box(self) -> None:
        """Surround the whole grid with a frame, adding one cell on every side."""
        width = self.n_columns
        self._content.insert(0, [HORIZONTAL_CHAR] * width)
        self._content.append([HORIZONTAL_CHAR] * width)
        for row in self._content:
            row.insert(0, VERTICAL_CHAR)
            row.append(VERTICAL_CHAR)
        last_line = self.n_lines - 1
        last_column = self.n_columns - 1
        self._content[0][0] = DOWN_RIGHT_CHAR
        self._content[0][last_column] = DOWN_LEFT_CHAR
        self._content[last_line][0] = UP_RIGHT_CHAR
        self._content[last_line][last_column] = UP_LEFT_CHAR
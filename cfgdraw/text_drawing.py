"""Draw a control-flow graph of code blocks as text boxes joined by arrows."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

from cfgdraw.text_grid import (
    DOWN_LEFT_CHAR,
    DOWN_RIGHT_CHAR,
    HORIZONTAL_DOWN_CHAR,
    HORIZONTAL_UP_CHAR,
    TARGET_LEFT_CHAR,
    TARGET_RIGHT_CHAR,
    UP_LEFT_CHAR,
    UP_RIGHT_CHAR,
    CharGrid,
    LineDirection,
)
from cfgdraw.utils import get_max_key, iter_int, map_values_to_index

logger = logging.getLogger(__name__)

BLOCK_WIDTH = 40
MAX_BLOCK_TEXT_LENGTH = 35
INITIAL_GRID_WIDTH = 120


class Direction(Enum):
    """Whether links go to a later block (descending) or an earlier one (rising)."""

    RISING = "rising"
    DESCENDING = "descending"


class _ConnectionType(Enum):
    ARRIVING = "arriving"
    STARTING = "starting"


Link = tuple[int, int]


class Links:
    """Links between block indexes that all go in one direction.

    ``starting_links[i]`` holds ``(target, depth)`` for links leaving ``i``,
    ``arriving_links[i]`` holds ``(source, depth)`` for links reaching ``i``,
    and ``depth_to_links[d]`` holds the ``(source, target)`` pairs at depth ``d``.
    The depth is how far from the boxes the link's vertical line is drawn.
    """

    def __init__(self, n_indexes: int, direction: Direction) -> None:
        self.starting_links: dict[int, set[Link]] = {i: set() for i in range(n_indexes)}
        self.arriving_links: dict[int, set[Link]] = {i: set() for i in range(n_indexes)}
        self.depth_to_links: dict[int, set[Link]] = {}
        self.direction = direction

    def connect(self, index_from: int, index_to: int) -> None:
        """Add a link at the smallest depth that does not collide with others."""
        if self.direction is Direction.DESCENDING and not index_from < index_to:
            raise ValueError(f"link {index_from} -> {index_to} is not descending")
        if self.direction is Direction.RISING and not index_to < index_from:
            raise ValueError(f"link {index_from} -> {index_to} is not rising")
        depth = self.find_minimum_depth(index_from, index_to)
        self.starting_links[index_from].add((index_to, depth))
        self.arriving_links[index_to].add((index_from, depth))
        self.depth_to_links.setdefault(depth, set()).add((index_from, index_to))

    def find_minimum_depth(self, index_from: int, index_to: int) -> int:
        """Return the smallest depth unused by links crossing the span of a new link."""
        used_depths: set[int] = set()
        for index in iter_int(index_from, index_to):
            used_depths.update(depth for _, depth in self.starting_links[index])
        for index in iter_int(index_to, index_from):
            used_depths.update(depth for _, depth in self.arriving_links[index])
        max_depth = max(used_depths, default=0)
        return next(
            (depth for depth in range(max_depth + 1) if depth not in used_depths),
            max_depth + 1,
        )

    def global_max_depth(self) -> int:
        """Return the largest depth in use, or 0 when there is no link."""
        max_depth = get_max_key(self.depth_to_links)
        return 0 if max_depth is None else max_depth


def rectangle_to_grid(lines: Iterable[str], label: str) -> CharGrid:
    """Draw a framed box holding ``label`` followed by ``lines``, each cut to fit."""
    grid = CharGrid(1, BLOCK_WIDTH - 2)
    grid.append_string(0, 0, label)
    for current_line, text in enumerate(lines, start=1):
        if len(text) >= MAX_BLOCK_TEXT_LENGTH:
            text = text[: MAX_BLOCK_TEXT_LENGTH - 3] + "..."
        grid.append_string(current_line, 0, text)
    grid.draw_outside_box()
    return grid


def _offset(depth: int) -> int:
    return 2 + depth * 2


_CROSSING_SYMBOLS: dict[tuple[bool, Direction, _ConnectionType], str] = {
    (True, Direction.DESCENDING, _ConnectionType.ARRIVING): HORIZONTAL_UP_CHAR,
    (True, Direction.RISING, _ConnectionType.STARTING): HORIZONTAL_UP_CHAR,
    (True, Direction.DESCENDING, _ConnectionType.STARTING): HORIZONTAL_DOWN_CHAR,
    (True, Direction.RISING, _ConnectionType.ARRIVING): HORIZONTAL_DOWN_CHAR,
    (False, Direction.RISING, _ConnectionType.STARTING): UP_RIGHT_CHAR,
    (False, Direction.DESCENDING, _ConnectionType.STARTING): DOWN_LEFT_CHAR,
    (False, Direction.RISING, _ConnectionType.ARRIVING): DOWN_RIGHT_CHAR,
    (False, Direction.DESCENDING, _ConnectionType.ARRIVING): UP_LEFT_CHAR,
}


class RectangleSet:
    """Blocks laid out top to bottom with their links routed on both sides.

    ``blocks`` maps the first program counter of each block to its lines of
    code; ``edges`` are ``(pc_start_from, pc_start_to)`` pairs. Rising links
    are drawn on the left of the boxes, descending links on the right.
    """

    def __init__(
        self,
        blocks: Mapping[int, Sequence[str]],
        edges: Iterable[tuple[int, int]],
    ) -> None:
        self.blocks = blocks
        self.edges = list(edges)
        self.sorted_pc_starts: list[int] = sorted(blocks)
        self.links: dict[Direction, Links] = {
            direction: Links(len(self.sorted_pc_starts), direction)
            for direction in (Direction.DESCENDING, Direction.RISING)
        }
        for direction in (Direction.RISING, Direction.DESCENDING):
            for index_from, index_to in self._sorted_edges_by_index(direction):
                self.links[direction].connect(index_from, index_to)

    def _sorted_edges_by_index(self, direction: Direction) -> list[Link]:
        pc_start_to_index = map_values_to_index(self.sorted_pc_starts)

        def to_index(pc_start: int) -> int:
            try:
                return pc_start_to_index[pc_start]
            except KeyError:
                raise ValueError(f"edge refers to unknown block {pc_start:#x}") from None

        if direction is Direction.DESCENDING:
            selected = [(a, b) for a, b in self.edges if a < b]
        else:
            selected = [(a, b) for a, b in self.edges if b < a]
        by_index = [(to_index(a), to_index(b)) for a, b in selected]
        by_index.sort(key=lambda edge: abs(edge[1] - edge[0]) * 10000 + edge[0])
        return by_index

    @property
    def _rectangle_left_column(self) -> int:
        return _offset(self.links[Direction.DESCENDING].global_max_depth()) + 1

    def _external_column(self, direction: Direction, offset: int) -> int:
        if direction is Direction.RISING:
            return self._rectangle_left_column - 1 - offset
        return self._rectangle_left_column + BLOCK_WIDTH + offset

    def _column(self, direction: Direction) -> int:
        if direction is Direction.RISING:
            return self._rectangle_left_column - 1
        return self._rectangle_left_column + BLOCK_WIDTH

    def _draw_rectangles(self, grid: CharGrid) -> dict[int, tuple[int, int]]:
        """Draw every block; return index -> (first line, last line) of its box."""
        rectangle_lines: dict[int, tuple[int, int]] = {}
        current_line = 0
        for index, pc_start in enumerate(self.sorted_pc_starts):
            rectangle = rectangle_to_grid(self.blocks[pc_start], f"label {index}")
            grid.append_sub_grid(current_line, self._rectangle_left_column, rectangle)
            rectangle_lines[index] = (current_line, current_line + rectangle.n_lines - 1)
            current_line += rectangle.n_lines + 1
        return rectangle_lines

    def _draw_crossings(
        self,
        grid: CharGrid,
        direction: Direction,
        rectangle_index: int,
        link_start_line: int,
        link_end_line: int,
    ) -> None:
        links = self.links[direction]
        for connections, line, connection_type in (
            (links.starting_links[rectangle_index], link_start_line, _ConnectionType.STARTING),
            (links.arriving_links[rectangle_index], link_end_line, _ConnectionType.ARRIVING),
        ):
            if not connections:
                continue
            max_depth = max(depth for _, depth in connections)
            for _, depth in connections:
                symbol = _CROSSING_SYMBOLS[(depth < max_depth, direction, connection_type)]
                grid.set_char(line, self._external_column(direction, _offset(depth)), symbol)
            if connection_type is _ConnectionType.ARRIVING:
                target = TARGET_RIGHT_CHAR if direction is Direction.RISING else TARGET_LEFT_CHAR
                grid.set_char(line, self._column(direction), target)

    def _draw_links(
        self,
        grid: CharGrid,
        direction: Direction,
        rectangle_lines: Mapping[int, tuple[int, int]],
    ) -> None:
        descending = direction is Direction.DESCENDING

        def start_line(index: int) -> int:
            first, last = rectangle_lines[index]
            return last - 1 if descending else first + 1

        def end_line(index: int) -> int:
            first, last = rectangle_lines[index]
            return first + 1 if descending else last - 1

        vertical = LineDirection.DOWN if descending else LineDirection.UP
        horizontal = LineDirection.RIGHT if descending else LineDirection.LEFT
        links = self.links[direction]
        for depth in sorted(links.depth_to_links):
            depth_links = sorted(links.depth_to_links[depth])
            for link_number, (index_from, index_to) in enumerate(depth_links, start=1):
                logger.info(
                    "direction: %s, depth: %d, link %d / %d",
                    direction.value,
                    depth,
                    link_number,
                    len(depth_links),
                )
                line_from = start_line(index_from)
                line_to = end_line(index_to)
                offset = _offset(depth)
                grid.draw_line(
                    line_from,
                    self._external_column(direction, offset),
                    vertical,
                    abs(line_to - line_from) + 1,
                )
                for line in (line_from, line_to):
                    grid.draw_line(line, self._column(direction), horizontal, offset)

        for rectangle_index in range(len(self.sorted_pc_starts)):
            self._draw_crossings(
                grid,
                direction,
                rectangle_index,
                start_line(rectangle_index),
                end_line(rectangle_index),
            )

    def to_grid(self) -> CharGrid:
        """Draw all blocks and their links on a fresh grid."""
        grid = CharGrid(1, INITIAL_GRID_WIDTH)
        rectangle_lines = self._draw_rectangles(grid)
        logger.info("rectangles drawn")
        for direction in (Direction.RISING, Direction.DESCENDING):
            self._draw_links(grid, direction, rectangle_lines)
        logger.info("links drawn")
        return grid


def draw_graph_to_str(
    blocks: Mapping[int, Sequence[str]],
    edges: Iterable[tuple[int, int]],
) -> str:
    """Render the blocks and edges of a control-flow graph as text."""
    return str(RectangleSet(blocks, edges).to_grid())
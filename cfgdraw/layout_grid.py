"""Integer coordinates of the blocks in a graph layout."""

from __future__ import annotations

from collections.abc import Sequence


class LayoutGrid:
    """Places block indexes on an (x, y) grid of cells.

    ``indexes_matrix[x][y]`` gives the index initially placed at ``(x, y)``.
    """

    def __init__(self, indexes_matrix: Sequence[Sequence[int]]) -> None:
        self._index_to_coord: dict[int, tuple[int, int]] = {}
        self._coord_to_index: dict[tuple[int, int], int] = {}
        self._y_to_indexes: dict[int, set[int]] = {}
        self.n_indexes = 0
        for x, column in enumerate(indexes_matrix):
            for y, index in enumerate(column):
                self.n_indexes += 1
                self._index_to_coord[index] = (x, y)
                self._coord_to_index[(x, y)] = index
                self._y_to_indexes.setdefault(y, set()).add(index)
        if not self._index_to_coord:
            raise ValueError("a layout grid needs at least one index")
        self.width = 0
        self.height = 0
        self.update_dims()

    def _rebuild_lookups(self) -> None:
        self._coord_to_index = {coord: index for index, coord in self._index_to_coord.items()}
        self._y_to_indexes = {}
        for index, (_, y) in self._index_to_coord.items():
            self._y_to_indexes.setdefault(y, set()).add(index)

    def remove_empty_bands(self) -> None:
        """Close every empty column and every empty row."""
        self.remove_empty_bands_on_x()
        self.remove_empty_bands_on_y()

    def remove_empty_bands_on_x(self) -> None:
        """Shift columns left so that the used x values are 0, 1, 2, ..."""
        rank = {x: i for i, x in enumerate(sorted({x for x, _ in self._index_to_coord.values()}))}
        self._index_to_coord = {
            index: (rank[x], y) for index, (x, y) in self._index_to_coord.items()
        }
        self._rebuild_lookups()

    def remove_empty_bands_on_y(self) -> None:
        """Shift rows up so that the used y values are 0, 1, 2, ..."""
        rank = {y: i for i, y in enumerate(sorted({y for _, y in self._index_to_coord.values()}))}
        self._index_to_coord = {
            index: (x, rank[y]) for index, (x, y) in self._index_to_coord.items()
        }
        self._rebuild_lookups()

    def update_dims(self) -> None:
        """Recompute width and height from the occupied cells."""
        coords = self._index_to_coord.values()
        self.width = 1 + max(x for x, _ in coords)
        self.height = 1 + max(y for _, y in coords)

    def get_indexes_at_y(self, y: int) -> set[int]:
        """Return a copy of the set of indexes in row ``y``."""
        return set(self._y_to_indexes.get(y, ()))

    def get_sorted_indexes_at_y(self, y: int) -> list[tuple[int, tuple[int, int]]]:
        """Return ``(index, (x, y))`` pairs of row ``y``, sorted by index."""
        return [(index, self._index_to_coord[index]) for index in sorted(self.get_indexes_at_y(y))]

    def move_index(self, index: int, new_position: tuple[int, int]) -> None:
        """Move ``index`` to ``new_position``, growing the grid if needed."""
        new_x, new_y = new_position
        self.width = max(self.width, 1 + new_x)
        self.height = max(self.height, 1 + new_y)
        old_position = self._index_to_coord[index]
        self._coord_to_index.pop(old_position, None)
        self._y_to_indexes[old_position[1]].discard(index)
        self._coord_to_index[new_position] = index
        self._y_to_indexes.setdefault(new_y, set()).add(index)
        self._index_to_coord[index] = new_position

    def move_up(self, index: int) -> None:
        """Move ``index`` to the leftmost free cell of the row above it."""
        _, y = self._index_to_coord[index]
        if y == 0:
            raise ValueError(f"index {index} is already on the top row")
        x = 0
        while (x, y - 1) in self._coord_to_index:
            x += 1
        self.move_index(index, (x, y - 1))

    def get_x_of_index(self, index: int) -> int:
        """Return the column of ``index``."""
        return self._index_to_coord[index][0]

    def iter_indexes(self) -> range:
        """Return the range ``0 .. n_indexes``."""
        return range(self.n_indexes)
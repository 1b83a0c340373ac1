"""Place the blocks of a graph on a grid of rows and columns."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from cfgdraw.cut_cycles import remove_cycles
from cfgdraw.layout_grid import LayoutGrid
from cfgdraw.specs import HORIZONTAL_IMPROVEMENT_N_ITERS


def topological_order(adjacency_list: Sequence[Sequence[int]]) -> list[int]:
    """Order the vertices so that every edge goes forward.

    Raises ValueError if the graph has a cycle.
    """
    in_degree = [0] * len(adjacency_list)
    for children in adjacency_list:
        for child in children:
            in_degree[child] += 1
    ready = deque(vertex for vertex, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while ready:
        vertex = ready.popleft()
        order.append(vertex)
        for child in adjacency_list[vertex]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                ready.append(child)
    if len(order) != len(adjacency_list):
        raise ValueError("the graph has a cycle")
    return order


def _float_rows(grid: LayoutGrid, children: list[set[int]]) -> None:
    """Move vertices up while no vertex of the row above points to them."""
    y = grid.height
    while y > 1:
        y -= 1
        above = grid.get_indexes_at_y(y - 1)
        for index in sorted(grid.get_indexes_at_y(y)):
            if not any(index in children[up] for up in above):
                grid.move_up(index)
                y = grid.height
                break


def _improve_columns(grid: LayoutGrid, adjacency_list: list[list[int]]) -> None:
    """Pull each vertex towards the average column of its neighbours."""
    for _ in range(HORIZONTAL_IMPROVEMENT_N_ITERS):
        x_sum = {index: 0.1 * grid.get_x_of_index(index) for index in grid.iter_indexes()}
        weight = {index: 0.1 for index in grid.iter_indexes()}
        for index in grid.iter_indexes():
            for child in adjacency_list[index]:
                for a, b, importance in ((index, child, 1.0), (child, index, 2.0)):
                    x_sum[a] += grid.get_x_of_index(b) * importance
                    weight[a] += importance
        average_x = {index: x_sum[index] / weight[index] for index in grid.iter_indexes()}

        for y in range(grid.height):
            row = sorted(grid.get_indexes_at_y(y))
            row.sort(key=lambda index: int(average_x[index]))
            left_x = -1
            for index in row:
                x = max(max(int(average_x[index]), 0), left_x + 1)
                left_x = x
                grid.move_index(index, (x, y))


def compute_blocks_organisation(adjacency_list: Sequence[Sequence[int]]) -> LayoutGrid:
    """Lay out vertices ``0 .. n-1`` so that edges point downwards.

    Cycles are cut first; the input is left untouched.
    """
    adjacency = [list(children) for children in adjacency_list]
    remove_cycles(adjacency)
    grid = LayoutGrid([topological_order(adjacency)])
    _float_rows(grid, [set(children) for children in adjacency])
    _improve_columns(grid, adjacency)
    grid.remove_empty_bands()
    grid.update_dims()
    return grid
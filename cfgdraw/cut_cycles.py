"""Break the cycles of a directed graph given as an adjacency list."""

from __future__ import annotations

from collections.abc import Iterator

from cfgdraw.utils import remove_value


def remove_cycles(adjacency_list: list[list[int]]) -> None:
    """Remove back edges in place until the graph has no cycle left.

    A depth-first search is started from every vertex in turn; any edge
    leading to a vertex still on the search path is removed.
    """
    for index in range(len(adjacency_list)):
        explore_to_cut_cycles(adjacency_list, set(), set(), index)


def explore_to_cut_cycles(
    adjacency_list: list[list[int]],
    visited: set[int],
    current_parents: set[int],
    index: int,
) -> None:
    """Depth-first search from ``index`` that removes edges closing a cycle.

    ``visited`` and ``current_parents`` are updated as the search goes;
    ``current_parents`` is back to its initial content when this returns.
    """
    visited.add(index)
    current_parents.add(index)
    path: list[tuple[int, Iterator[int]]] = [(index, iter(list(adjacency_list[index])))]
    while path:
        node, pending_children = path[-1]
        for child in pending_children:
            if child in visited:
                if child in current_parents:
                    remove_value(adjacency_list[node], child)
            else:
                visited.add(child)
                current_parents.add(child)
                path.append((child, iter(list(adjacency_list[child]))))
                break
        else:
            path.pop()
            current_parents.discard(node)
"""Generic helpers for walking graphs of nodes and grouping objects by block."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

N = TypeVar("N", bound=Hashable)
B = TypeVar("B", bound=Hashable)
A = TypeVar("A", bound=Hashable)


@dataclass
class DfsResult(Generic[N]):
    """Nodes reached by a depth-first search, and those where it stopped."""

    visited_nodes: set[N] = field(default_factory=set)
    stopped_nodes: set[N] = field(default_factory=set)


def pack_by_block(
    blocks: Iterable[B],
    objects: Iterable[A],
    corresponding_block: Callable[[A], B],
) -> dict[B, set[A]]:
    """Group ``objects`` by their block; every block appears, possibly with no objects.

    Raises KeyError if an object belongs to a block that is not in ``blocks``.
    """
    grouped: dict[B, set[A]] = {block: set() for block in blocks}
    for obj in objects:
        block = corresponding_block(obj)
        if block not in grouped:
            raise KeyError(block)
        grouped[block].add(obj)
    return grouped


def node_dfs(
    initial_node: N,
    get_children: Callable[[N], Iterable[N]],
    stop_condition: Callable[[N], bool],
    on_connection: Callable[[N, N], None] | None = None,
) -> DfsResult[N]:
    """Depth-first walk from ``initial_node``.

    Nodes satisfying ``stop_condition`` are visited but not expanded.
    ``on_connection(parent, child)`` is called for every edge followed,
    including edges that lead to an already visited node.
    """
    result: DfsResult[N] = DfsResult()
    to_visit: list[tuple[N | None, N]] = [(None, initial_node)]
    while to_visit:
        parent, current = to_visit.pop()
        if parent is not None and on_connection is not None:
            on_connection(parent, current)
        if current in result.visited_nodes:
            continue
        result.visited_nodes.add(current)
        if stop_condition(current):
            result.stopped_nodes.add(current)
            continue
        to_visit.extend((current, child) for child in get_children(current))
    return result
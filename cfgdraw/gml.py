"""Export the block graph in the GML text format."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from cfgdraw.utils import int_to_hex

_EDGE_SORT_FACTOR = 100_000


def blocks_to_gml(
    pc_starts: Iterable[int],
    edges: Iterable[tuple[int, int]],
    tags: Mapping[int, str] | None = None,
) -> str:
    """Describe blocks and the edges between them as a GML graph.

    Blocks are identified by their first program counter and listed in
    ascending order; ``tags`` optionally attaches a tag to some of them.
    """
    tags = tags or {}
    parts = ["graph\n[\n"]
    for pc_start in sorted(set(pc_starts)):
        parts.append(f'  node\n  [\n  id {pc_start}\n  label "pc_start: {int_to_hex(pc_start)}"')
        if pc_start in tags:
            parts.append(f'\n  tag "{tags[pc_start]}"\n')
        parts.append("\n  ]\n")
    for origin, destination in sorted(
        edges, key=lambda edge: edge[0] * _EDGE_SORT_FACTOR + edge[1]
    ):
        parts.append(f"  edge\n  [\n  source {origin}\n  target {destination}\n  ]\n")
    parts.append("]")
    return "".join(parts)
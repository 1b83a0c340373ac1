import pytest

from cfgdraw.graph_tools import DfsResult, node_dfs, pack_by_block

GRAPH = {
    "a": ["b", "c"],
    "b": ["c", "d"],
    "c": ["a"],
    "d": [],
    "e": ["a"],
}


def children(node):
    return GRAPH[node]


def test_dfs_visits_reachable_nodes_only():
    result = node_dfs("a", children, lambda node: False)
    assert result.visited_nodes == {"a", "b", "c", "d"}
    assert result.stopped_nodes == set()


def test_dfs_reports_every_followed_edge():
    connections = []
    node_dfs("a", children, lambda node: False, lambda p, c: connections.append((p, c)))
    expected = sorted(
        (parent, child) for parent in "abcd" for child in GRAPH[parent]
    )
    assert sorted(connections) == expected


def test_dfs_stops_at_stop_condition():
    connections = []
    result = node_dfs(
        "a", children, lambda node: node == "b", lambda p, c: connections.append((p, c))
    )
    assert result.stopped_nodes == {"b"}
    assert "d" not in result.visited_nodes
    assert all(parent != "b" for parent, _ in connections)


def test_dfs_stopping_on_initial_node():
    result = node_dfs("e", children, lambda node: True)
    assert result == DfsResult(visited_nodes={"e"}, stopped_nodes={"e"})


def test_pack_by_block_groups_objects():
    packed = pack_by_block(["odd", "even", "empty"], {1, 2, 3}, lambda o: "odd" if o % 2 else "even")
    assert packed == {"odd": {1, 3}, "even": {2}, "empty": set()}


def test_pack_by_block_unknown_block_raises():
    with pytest.raises(KeyError):
        pack_by_block(["x"], [1], lambda o: "y")
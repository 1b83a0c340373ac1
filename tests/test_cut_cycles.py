from cfgdraw.cut_cycles import explore_to_cut_cycles, remove_cycles


def is_acyclic(adjacency_list):
    indegree = [0] * len(adjacency_list)
    for children in adjacency_list:
        for child in children:
            indegree[child] += 1
    ready = [v for v, degree in enumerate(indegree) if degree == 0]
    seen = 0
    while ready:
        vertex = ready.pop()
        seen += 1
        for child in adjacency_list[vertex]:
            indegree[child] -= 1
            if indegree[child] == 0:
                ready.append(child)
    return seen == len(adjacency_list)


def edges(adjacency_list):
    return {(v, c) for v, children in enumerate(adjacency_list) for c in children}


def test_self_loop_removed():
    graph = [[0]]
    remove_cycles(graph)
    assert graph == [[]]


def test_two_cycle_keeps_one_edge():
    graph = [[1], [0]]
    remove_cycles(graph)
    assert is_acyclic(graph)
    assert len(edges(graph)) == 1


def test_dag_is_untouched():
    graph = [[1, 2], [2, 3], [3], []]
    original = [list(children) for children in graph]
    remove_cycles(graph)
    assert graph == original


def test_complex_graph_becomes_acyclic_subgraph():
    graph = [[1, 4], [2], [0, 3], [1, 5], [2], [5, 0]]
    original = edges(graph)
    remove_cycles(graph)
    assert is_acyclic(graph)
    assert edges(graph) <= original


def test_long_chain_with_back_edge():
    size = 5000
    graph = [[i + 1] for i in range(size - 1)] + [[0]]
    remove_cycles(graph)
    assert is_acyclic(graph)
    assert len(edges(graph)) == size - 1


def test_explore_marks_reachable_and_restores_parents():
    graph = [[1], [2], [0], []]
    visited = set()
    parents = set()
    explore_to_cut_cycles(graph, visited, parents, 0)
    assert visited == {0, 1, 2}
    assert parents == set()
    assert is_acyclic(graph)
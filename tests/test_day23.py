from itertools import combinations

import pytest

from advent2024.day23 import (
    find_maximal_cliques,
    find_triangles,
    get_adjacency_list,
    part_one,
    part_two,
)

K4 = ["co-de", "co-ka", "co-ta", "de-ka", "de-ta", "ka-ta"]
NETWORK = K4 + ["ta-xy", "xy-zz", "zz-co", "kh-tc"]


def test_adjacency_is_symmetric():
    graph = get_adjacency_list(["a-b", "b-c"])
    assert graph == {"a": {"b"}, "b": {"a", "c"}, "c": {"b"}}


def test_adjacency_skips_blank_and_rejects_malformed():
    assert get_adjacency_list(["", "a-b"]) == {"a": {"b"}, "b": {"a"}}
    with pytest.raises(ValueError):
        get_adjacency_list(["ab"])
    with pytest.raises(ValueError):
        get_adjacency_list(["a-"])


def test_single_triangle_with_tail():
    graph = get_adjacency_list(["a-b", "b-c", "c-a", "d-a"])
    assert find_triangles(graph) == [("a", "b", "c")]


def test_triangles_of_k4():
    graph = get_adjacency_list(K4)
    expected = sorted(tuple(sorted(t)) for t in combinations(["co", "de", "ka", "ta"], 3))
    assert find_triangles(graph) == expected


def test_triangles_are_mutually_connected_and_unique():
    graph = get_adjacency_list(NETWORK)
    triangles = find_triangles(graph)
    assert len(triangles) == len(set(triangles))
    for a, b, c in triangles:
        assert b in graph[a] and c in graph[a] and c in graph[b]


def test_maximal_cliques_of_k4():
    assert find_maximal_cliques(get_adjacency_list(K4)) == [frozenset({"co", "de", "ka", "ta"})]


def test_maximal_cliques_are_cliques_and_maximal():
    graph = get_adjacency_list(NETWORK)
    cliques = find_maximal_cliques(graph)
    assert len(cliques) == len(set(cliques))
    for clique in cliques:
        for a, b in combinations(clique, 2):
            assert b in graph[a]
        outsiders = set(graph) - clique
        assert not any(clique <= graph[v] for v in outsiders)


def test_every_edge_lies_in_some_clique():
    graph = get_adjacency_list(NETWORK)
    cliques = find_maximal_cliques(graph)
    for line in NETWORK:
        a, b = line.split("-")
        assert any({a, b} <= clique for clique in cliques)


def test_part_one_counts_triangles_with_t_computer():
    lines = ["ta-tb", "tb-xx", "ta-xx", "xx-yy", "yy-zz", "xx-zz"]
    assert part_one(lines) == 1


def test_part_one_matches_triangle_filter():
    triangles = find_triangles(get_adjacency_list(NETWORK))
    with_t = [t for t in triangles if any(name.startswith("t") for name in t)]
    assert part_one(NETWORK) == len(with_t)


def test_part_two_largest_clique():
    assert part_two(NETWORK) == "co,de,ka,ta"


def test_part_two_empty_network():
    assert part_two([]) == ""
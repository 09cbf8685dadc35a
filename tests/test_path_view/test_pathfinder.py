"""Tests for BFS path finding — pure functions, no mocking needed."""

from apiprune.passes.path.pathfinder import find_all_paths


def test_direct_dependency():
    assert find_all_paths({"a": ["b"]}, "a", "b") == [["a", "b"]]


def test_two_hop():
    assert find_all_paths({"a": ["b"], "b": ["c"]}, "a", "c") == [["a", "b", "c"]]


def test_multiple_paths():
    graph = {"a": ["b", "c"], "b": ["d"], "c": ["d"]}
    paths = find_all_paths(graph, "a", "d")
    assert sorted(paths) == sorted([["a", "b", "d"], ["a", "c", "d"]])


def test_no_path():
    assert find_all_paths({"a": ["b"], "c": ["d"]}, "a", "d") == []


def test_cycle_avoidance():
    graph = {"a": ["b"], "b": ["a", "c"]}
    assert find_all_paths(graph, "a", "c") == [["a", "b", "c"]]


def test_self_loop():
    assert find_all_paths({"a": ["a", "b"]}, "a", "b") == [["a", "b"]]


def test_same_source_and_target():
    assert find_all_paths({"a": ["b"]}, "a", "a") == [["a"]]


def test_max_depth_counts_identities():
    graph = {"a": ["b"], "b": ["c"], "c": ["d"], "d": ["e"]}
    assert find_all_paths(graph, "a", "e", max_depth=4) == []
    assert find_all_paths(graph, "a", "e", max_depth=5) == [["a", "b", "c", "d", "e"]]


def test_max_depth_one():
    assert find_all_paths({"a": ["b"]}, "a", "b", max_depth=1) == []


def test_empty_graph():
    assert find_all_paths({}, "a", "b") == []


def test_shorter_chains_first():
    graph = {"a": ["b", "d"], "b": ["c"], "c": ["d"]}
    assert find_all_paths(graph, "a", "d") == [["a", "d"], ["a", "b", "c", "d"]]


def test_chain_stops_at_intrinsic():
    graph = {"a": ["int"], "int": []}
    assert find_all_paths(graph, "a", "int") == [["a", "int"]]
    assert find_all_paths(graph, "int", "a") == []

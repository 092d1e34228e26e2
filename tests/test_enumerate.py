"""Tests for ESU enumeration against exhaustive subset search."""
import pytest

from hetgraphlets.enumerate import (
    classify_bruteforce,
    connected_subsets_bruteforce,
    enumerate_anchor,
    enumerate_containing,
    enumerate_subgraphs,
)
from hetgraphlets.errors import InvalidGraphletSize, InvalidNode
from hetgraphlets.graph import GraphView, random_typed_graph


def _bruteforce(view, max_size):
    return sorted(
        s for size in range(2, max_size + 1)
        for s in connected_subsets_bruteforce(view, size)
    )


@pytest.mark.parametrize("seed", [1, 7, 42, 1234, 99991])
@pytest.mark.parametrize("max_size", [2, 3, 4, 5])
def test_esu_matches_bruteforce(seed, max_size):
    view = random_typed_graph(seed, 11, 3, 3)
    got = sorted(inst.nodes for inst in enumerate_subgraphs(view, max_size))
    assert got == _bruteforce(view, max_size)


def test_esu_matches_bruteforce_directed():
    view = random_typed_graph(5, 10, 3, 2, number_of_edge_types=2, directed=True)
    got = sorted(inst.nodes for inst in enumerate_subgraphs(view, 4))
    assert got == _bruteforce(view, 4)


def test_no_duplicates():
    view = random_typed_graph(11, 12, 4, 2)
    got = [inst.nodes for inst in enumerate_subgraphs(view, 5)]
    assert len(got) == len(set(got))


def test_anchor_is_smallest_node():
    view = random_typed_graph(3, 12, 3, 2)
    for v in range(view.number_of_nodes):
        for inst in enumerate_anchor(view, v, 4):
            assert inst.anchor == v
            assert min(inst.nodes) == v
            assert 2 <= inst.size <= 4


def test_anchors_partition_the_output():
    view = random_typed_graph(8, 10, 3, 2)
    full = sorted(inst.nodes for inst in enumerate_subgraphs(view, 4))
    split = sorted(
        inst.nodes
        for part in ([0, 2, 4, 6, 8], [1, 3, 5, 7, 9])
        for inst in enumerate_subgraphs(view, 4, anchors=part)
    )
    assert split == full


def test_isolated_nodes_produce_nothing():
    view = GraphView([0, 0, 0, 0], [(0, 1)])
    assert list(enumerate_anchor(view, 2, 3)) == []
    assert [inst.nodes for inst in enumerate_subgraphs(view, 3)] == [(0, 1)]


def test_empty_graph():
    assert list(enumerate_subgraphs(GraphView([]), 4)) == []


def test_size_two_gives_adjacent_pairs():
    view = GraphView([0, 1, 0], [(0, 1, 0), (0, 1, 1), (1, 2)])
    assert [inst.nodes for inst in enumerate_subgraphs(view, 2)] == [(0, 1), (1, 2)]


def test_instances_carry_types_and_edges():
    view = GraphView([2, 0, 1], [(0, 1, 3), (1, 2, 4)])
    by_nodes = {inst.nodes: inst for inst in enumerate_subgraphs(view, 3)}
    assert by_nodes[(0, 1, 2)].node_types == (2, 0, 1)
    assert by_nodes[(0, 1, 2)].edges == ((0, 1, 3), (1, 2, 4))


def test_directed_connectivity_is_weak():
    # 0 -> 1 <- 2 has no directed path between 0 and 2.
    view = GraphView([0, 0, 0], [(0, 1), (2, 1)], directed=True)
    got = sorted(inst.nodes for inst in enumerate_subgraphs(view, 3))
    assert got == [(0, 1), (0, 1, 2), (1, 2)]
    assert all(inst.directed for inst in enumerate_subgraphs(view, 3))


def test_directed_enumeration_needs_directed_view():
    view = GraphView([0, 0], [(0, 1)])
    with pytest.raises(ValueError):
        list(enumerate_subgraphs(view, 3, directed=True))


@pytest.mark.parametrize("size", [0, 1, 9])
def test_invalid_size(size):
    view = GraphView([0, 0], [(0, 1)])
    with pytest.raises(InvalidGraphletSize):
        list(enumerate_subgraphs(view, size))
    with pytest.raises(InvalidGraphletSize):
        list(enumerate_anchor(view, 0, size))


def test_invalid_anchor():
    view = GraphView([0, 0], [(0, 1)])
    with pytest.raises(InvalidNode):
        list(enumerate_anchor(view, 2, 3))


# --- supersets of a seed ---

@pytest.mark.parametrize("seed", [2, 13, 77])
def test_enumerate_containing_edge(seed):
    view = random_typed_graph(seed, 11, 3, 2)
    u, v, _ = next(view.iter_edges())
    got = sorted(inst.nodes for inst in enumerate_containing(view, (u, v), 4))
    expected = [s for s in _bruteforce(view, 4) if u in s and v in s]
    assert got == expected


def test_enumerate_containing_single_node():
    view = random_typed_graph(21, 10, 3, 2)
    got = sorted(inst.nodes for inst in enumerate_containing(view, [4], 3))
    assert got == [s for s in _bruteforce(view, 3) if 4 in s]


def test_enumerate_containing_rejects_bad_seeds():
    view = GraphView([0, 0, 0], [(0, 1)])
    with pytest.raises(ValueError):
        list(enumerate_containing(view, (0, 2), 3))
    with pytest.raises(ValueError):
        list(enumerate_containing(view, (), 3))
    with pytest.raises(InvalidNode):
        list(enumerate_containing(view, (0, 5), 3))


def test_enumerate_containing_seed_larger_than_max():
    view = GraphView([0, 0, 0], [(0, 1), (1, 2)])
    assert list(enumerate_containing(view, (0, 1, 2), 2)) == []


# --- brute-force classification ---

def test_classify_bruteforce_counts_sum_to_subsets():
    view = random_typed_graph(4, 10, 3, 2)
    classes = classify_bruteforce(view, 4)
    assert sum(c for c, _ in classes.values()) == len(_bruteforce(view, 4))
    for count, rep in classes.values():
        assert count >= 1
        assert 2 <= len(rep) <= 4

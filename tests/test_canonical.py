"""Tests for typed canonical signatures, partitions and automorphism counts."""
import random

import pytest

from hetgraphlets.canon import (
    canonical_form,
    canonical_signature,
    cell_matrix,
    color_classes,
    signature_edges,
    signature_node_types,
    signature_size,
    typed_automorphism_count,
    typed_equitable_partition,
)
from hetgraphlets.enumerate import enumerate_subgraphs
from hetgraphlets.errors import InvalidGraphletSize
from hetgraphlets.graph import random_typed_graph

C4 = [(0, 1, 0), (1, 2, 0), (2, 3, 0), (0, 3, 0)]


def _sig(types, edges, directed=False):
    return canonical_form(types, edges, directed)[0]


def _permuted(inst, rng):
    """Relabel an instance's local positions with a random permutation."""
    k = inst.size
    perm = list(range(k))
    rng.shuffle(perm)
    new_pos = {old: new for new, old in enumerate(perm)}
    types = [inst.node_types[perm[i]] for i in range(k)]
    edges = [(new_pos[i], new_pos[j], t) for i, j, t in inst.edges]
    return types, edges


# --- partition ---

def test_partition_path_untyped():
    cells = cell_matrix(4, [(0, 1, 0), (1, 2, 0), (2, 3, 0)], False)
    colors = typed_equitable_partition(cells, [0, 0, 0, 0])
    assert colors[0] == colors[3]
    assert colors[1] == colors[2]
    assert colors[0] != colors[1]


def test_partition_types_split_classes():
    cells = cell_matrix(4, [(0, 1, 0), (1, 2, 0), (2, 3, 0)], False)
    colors = typed_equitable_partition(cells, [1, 0, 0, 0])
    assert len(set(colors)) == 4
    # Colour order follows node type order.
    assert colors[0] > max(colors[1:])


def test_partition_edge_types_split_classes():
    # Star whose leaves hang on two different edge types.
    cells = cell_matrix(4, [(0, 1, 0), (0, 2, 0), (0, 3, 1)], False)
    colors = typed_equitable_partition(cells, [0, 0, 0, 0])
    assert colors[1] == colors[2]
    assert colors[3] != colors[1]


def test_partition_directed_orientation():
    cells = cell_matrix(3, [(0, 1, 0), (2, 1, 0)], True)
    colors = typed_equitable_partition(cells, [0, 0, 0])
    assert colors[0] == colors[2]
    assert colors[1] != colors[0]


def test_color_classes_in_colour_order():
    assert color_classes((1, 0, 1, 2)) == [[1], [0, 2], [3]]


# --- canonical form ---

@pytest.mark.parametrize("seed", [1, 5, 17])
def test_signature_invariant_under_relabeling(seed):
    view = random_typed_graph(seed, 10, 3, 3, number_of_edge_types=2)
    rng = random.Random(seed)
    for inst in enumerate_subgraphs(view, 5):
        types, edges = _permuted(inst, rng)
        assert _sig(types, edges) == canonical_signature(inst)


def test_signature_invariant_under_relabeling_directed():
    view = random_typed_graph(9, 10, 3, 2, number_of_edge_types=2, directed=True)
    rng = random.Random(9)
    for inst in enumerate_subgraphs(view, 4):
        types, edges = _permuted(inst, rng)
        assert _sig(types, edges, True) == canonical_signature(inst)


def test_node_types_distinguish():
    path = [(0, 1, 0), (1, 2, 0)]
    assert _sig((0, 1, 0), path) != _sig((1, 0, 0), path)
    assert _sig((1, 0, 0), path) == _sig((0, 0, 1), path)


def test_edge_types_distinguish():
    a = _sig((0, 0, 0), [(0, 1, 0), (1, 2, 1)])
    b = _sig((0, 0, 0), [(0, 1, 0), (1, 2, 0)])
    c = _sig((0, 0, 0), [(0, 1, 1), (1, 2, 0)])
    assert a != b
    assert a == c


def test_orientation_distinguishes_only_when_types_differ():
    assert _sig((0, 1), [(0, 1, 0)], True) != _sig((0, 1), [(1, 0, 0)], True)
    assert _sig((0, 0), [(0, 1, 0)], True) == _sig((0, 0), [(1, 0, 0)], True)


def test_directed_and_undirected_signatures_differ():
    assert _sig((0, 0), [(0, 1, 0)], True) != _sig((0, 0), [(0, 1, 0)], False)


def test_shape_distinguishes():
    star = [(0, 1, 0), (0, 2, 0), (0, 3, 0)]
    path = [(0, 1, 0), (1, 2, 0), (2, 3, 0)]
    assert _sig((0,) * 4, star) != _sig((0,) * 4, path)


def test_order_places_node_types():
    types = (2, 0, 1, 0)
    sig, order = canonical_form(types, C4, False)
    assert sorted(order) == [0, 1, 2, 3]
    assert signature_node_types(sig) == tuple(types[v] for v in order)
    assert signature_node_types(sig) == (0, 0, 1, 2)


def test_decoded_edges_reproduce_signature():
    sig = _sig((1, 0, 0, 1), C4 + [(0, 2, 1)])
    assert signature_size(sig) == 4
    assert _sig(signature_node_types(sig), signature_edges(sig, False)) == sig


@pytest.mark.parametrize("k", [0, 1, 9])
def test_invalid_size(k):
    with pytest.raises(InvalidGraphletSize):
        canonical_form((0,) * k, [], False)


# --- automorphisms ---

def test_automorphisms_homogeneous_c4():
    assert typed_automorphism_count(_sig((0, 0, 0, 0), C4)) == 8


def test_automorphisms_c4_with_one_distinct_type():
    assert typed_automorphism_count(_sig((0, 0, 0, 1), C4)) == 2


def test_automorphisms_k4():
    k4 = [(i, j, 0) for i in range(4) for j in range(i + 1, 4)]
    assert typed_automorphism_count(_sig((0,) * 4, k4)) == 24


def test_automorphisms_edge_typed_triangle():
    tri = [(0, 1, 0), (1, 2, 0), (0, 2, 1)]
    assert typed_automorphism_count(_sig((0, 0, 0), tri)) == 2


def test_automorphisms_directed_cycle():
    cyc = [(0, 1, 0), (1, 2, 0), (2, 0, 0)]
    assert typed_automorphism_count(_sig((0, 0, 0), cyc, True)) == 3

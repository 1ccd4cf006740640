import numpy as np
import pytest

import closure
import pairlist
from edges import EdgeList
from errors import AllocationError


def closed(matrix):
    matrix = np.asarray(matrix)
    return closure.close(pairlist.build(matrix, matrix.shape[0]))


def reachable_by_multiplication(matrix):
    """
    Pairs (u, w) with w reachable from u in one or more steps.

    Multiplies the current reach by the adjacency matrix until nothing new shows up,
    the same way n-degree followers are found by repeated vector-matrix products.
    """
    adjacency = (np.asarray(matrix) > 0).astype(np.int64)
    reach = adjacency.copy()
    step = adjacency.copy()
    for _ in range(adjacency.shape[0]):
        step = ((step @ adjacency) > 0).astype(np.int64)
        reach = ((reach + step) > 0).astype(np.int64)
    return {(int(u), int(w)) for u, w in np.argwhere(reach)}


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_chain_gains_the_shortcut(chain_matrix):
    assert closed(chain_matrix).as_pairs() == [(0, 1), (1, 2), (0, 2)]


def test_empty_graph_stays_empty():
    assert len(closed(np.zeros((2, 2), dtype=np.int8))) == 0


def test_two_cycle_adds_no_self_loops():
    result = closed([[0, 1, 0], [1, 0, 0], [0, 0, 0]])
    assert result.as_pairs() == [(0, 1), (1, 0)]
    assert (0, 0) not in result
    assert (1, 1) not in result


def test_complete_graph_is_already_closed():
    matrix = np.ones((3, 3), dtype=np.int8) - np.eye(3, dtype=np.int8)
    base = pairlist.build(matrix, 3)
    assert closure.close(base.copy()) == base


def test_disconnected_components_stay_apart():
    # {0, 1, 2} chain and {3, 4} chain
    matrix = np.zeros((5, 5), dtype=np.int8)
    matrix[0, 1] = matrix[1, 2] = 1
    matrix[3, 4] = 1
    result = closed(matrix)
    assert set(result.as_pairs()) == {(0, 1), (1, 2), (0, 2), (3, 4)}
    for u, w in result:
        assert (u < 3) == (w < 3)


def test_longer_chain_needs_several_passes():
    n = 6
    matrix = np.eye(n, k=1, dtype=np.int8)
    result = closed(matrix)
    assert set(result.as_pairs()) == {(u, w) for u in range(n) for w in range(u + 1, n)}


def test_direct_self_loop_is_kept_and_not_duplicated():
    result = closed([[1, 1], [0, 0]])
    assert result.as_pairs() == [(0, 0), (0, 1)]


def test_closes_in_place():
    edges = pairlist.build([[0, 1, 0], [0, 0, 1], [0, 0, 0]], 3)
    assert closure.close(edges) is edges
    assert len(edges) == 3


# ---------------------------------------------------------------------------
# Properties over random graphs
# ---------------------------------------------------------------------------

RANDOM_GRAPHS = [(n, density, seed) for n in (1, 3, 5, 7) for density in (0.15, 0.35, 0.6) for seed in (0, 1)]


@pytest.mark.parametrize("n,density,seed", RANDOM_GRAPHS)
def test_closure_properties(random_matrix, n, density, seed):
    matrix = random_matrix(n, density, seed)
    base = pairlist.build(matrix, n)
    result = closure.close(base.copy())
    pairs = result.as_pairs()

    # no duplicates
    assert len(pairs) == len(set(pairs))
    # superset of the base edges, with the base edges first and in order
    assert pairs[:len(base)] == base.as_pairs()
    # every composition of two edges is present unless it is a self-loop
    for u, v in result:
        for y, w in result:
            if v == y and u != w:
                assert (u, w) in result
    assert closure.is_closed(result)


@pytest.mark.parametrize("n,density,seed", RANDOM_GRAPHS)
def test_closure_matches_matrix_multiplication(random_matrix, n, density, seed):
    matrix = random_matrix(n, density, seed)
    base = pairlist.build(matrix, n)
    expected = {(u, w) for u, w in reachable_by_multiplication(matrix) if u != w}
    expected |= set(base.as_pairs())
    assert set(closure.close(base.copy()).as_pairs()) == expected


@pytest.mark.parametrize("n,density,seed", RANDOM_GRAPHS)
def test_closing_twice_adds_nothing(random_matrix, n, density, seed):
    result = closed(random_matrix(n, density, seed))
    before = result.as_pairs()
    assert closure.close(result).as_pairs() == before


def test_is_closed_spots_missing_shortcut():
    assert not closure.is_closed(EdgeList([(0, 1), (1, 2)]))
    assert closure.is_closed(EdgeList([(0, 1), (1, 0)]))


def test_growth_failure_raises_allocation_error(monkeypatch):
    edges = EdgeList([(0, 1), (1, 2)])

    def refuse(self, source, destination):
        raise MemoryError()

    monkeypatch.setattr(EdgeList, "add", refuse)
    with pytest.raises(AllocationError):
        closure.close(edges)

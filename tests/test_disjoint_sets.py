import pytest

from edastructs.disjoint_sets import DisjointSets


def test_initial_state():
    sets = DisjointSets(5)
    assert sets.count == 5
    assert all(sets.find(p) == p for p in range(5))
    assert all(sets.size(p) == 1 for p in range(5))


def test_union_merges_and_counts():
    sets = DisjointSets(6)
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    assert sets.count == 3
    assert sets.connected(0, 2)
    assert not sets.connected(0, 4)
    assert sets.size(3) == 4
    assert sets.size(5) == 1


def test_union_of_same_set_changes_nothing():
    sets = DisjointSets(3)
    sets.union(0, 1)
    sets.union(1, 0)
    assert sets.count == 2
    assert sets.size(0) == 2


def test_chain_of_unions_single_set():
    n = 50
    sets = DisjointSets(n)
    for p in range(n - 1):
        sets.union(p, p + 1)
    assert sets.count == 1
    root = sets.find(0)
    assert all(sets.find(p) == root for p in range(n))
    assert sets.size(n - 1) == n


def test_sizes_sum_to_total():
    sets = DisjointSets(10)
    for p, q in [(0, 5), (5, 9), (2, 3), (7, 8)]:
        sets.union(p, q)
    roots = {sets.find(p) for p in range(10)}
    assert len(roots) == sets.count
    assert sum(sets.size(r) for r in roots) == 10


def test_out_of_range():
    sets = DisjointSets(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.union(0, -1)
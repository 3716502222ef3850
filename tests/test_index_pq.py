import operator

import pytest

from edastructs.index_pq import IndexPQ, Pair

PRIORITIES = [7, 3, 9, 1, 4, 8, 2, 6]


def drain(pq):
    out = []
    while pq:
        out.append(pq.pop())
    return out


def filled(before=operator.lt):
    pq = IndexPQ(len(PRIORITIES), before)
    for elem, prio in enumerate(PRIORITIES):
        pq.push(elem, prio)
    return pq


def test_pops_in_priority_order():
    pq = filled()
    assert len(pq) == len(PRIORITIES)
    pairs = drain(pq)
    assert [p.priority for p in pairs] == sorted(PRIORITIES)
    assert all(PRIORITIES[p.elem] == p.priority for p in pairs)
    assert not pq


def test_max_queue():
    pairs = drain(filled(operator.gt))
    assert [p.priority for p in pairs] == sorted(PRIORITIES, reverse=True)


def test_top_is_minimum():
    pq = filled()
    assert pq.top() == Pair(PRIORITIES.index(min(PRIORITIES)), min(PRIORITIES))


def test_update_decrease_and_increase():
    pq = filled()
    pq.update(2, 0)
    assert pq.top() == Pair(2, 0)
    pq.update(2, 100)
    assert pq.top().elem != 2
    pairs = drain(pq)
    assert pairs[-1] == Pair(2, 100)
    expected = PRIORITIES.copy()
    expected[2] = 100
    assert [p.priority for p in pairs] == sorted(expected)


def test_update_inserts_absent_element():
    pq = IndexPQ(3)
    pq.update(1, 5)
    assert 1 in pq
    assert pq.pop() == Pair(1, 5)
    assert 1 not in pq


def test_contains_tracks_membership():
    pq = filled()
    first = pq.pop()
    assert first.elem not in pq
    assert all(e in pq for e in range(len(PRIORITIES)) if e != first.elem)
    assert 99 not in pq


def test_element_can_return_after_pop():
    pq = IndexPQ(2)
    pq.push(0, 1)
    pq.pop()
    pq.push(0, 2)
    assert pq.top() == Pair(0, 2)


def test_repeated_push_rejected():
    pq = IndexPQ(2)
    pq.push(0, 1)
    with pytest.raises(ValueError):
        pq.push(0, 3)


def test_out_of_range_element():
    pq = IndexPQ(2)
    with pytest.raises(IndexError):
        pq.push(2, 1)
    with pytest.raises(IndexError):
        pq.update(-1, 1)


def test_empty_queue_errors():
    pq = IndexPQ(1)
    with pytest.raises(IndexError):
        pq.top()
    with pytest.raises(IndexError):
        pq.pop()
import operator

import pytest

from edastructs.priority_queue import PriorityQueue

VALUES = [5, 3, 8, 1, 9, 2, 7, 3, 0, 6]


def drain(queue):
    out = []
    while queue:
        out.append(queue.pop())
    return out


def test_pushes_pop_in_ascending_order():
    queue = PriorityQueue()
    for value in VALUES:
        queue.push(value)
    assert len(queue) == len(VALUES)
    assert drain(queue) == sorted(VALUES)


def test_heapify_from_items():
    assert drain(PriorityQueue(VALUES)) == sorted(VALUES)


def test_custom_order_gives_max_queue():
    queue = PriorityQueue(VALUES, before=operator.gt)
    assert queue.top() == max(VALUES)
    assert drain(queue) == sorted(VALUES, reverse=True)


def test_key_based_order():
    words = ["pear", "fig", "banana", "kiwi"]
    queue = PriorityQueue(words, before=lambda a, b: len(a) < len(b))
    lengths = [len(w) for w in drain(queue)]
    assert lengths == sorted(lengths)


def test_top_does_not_remove():
    queue = PriorityQueue(VALUES)
    assert queue.top() == min(VALUES)
    assert len(queue) == len(VALUES)


def test_pop_returns_top():
    queue = PriorityQueue(VALUES)
    expected = queue.top()
    assert queue.pop() == expected
    assert len(queue) == len(VALUES) - 1


def test_interleaved_operations():
    queue = PriorityQueue([4, 2])
    assert queue.pop() == 2
    queue.push(1)
    queue.push(3)
    assert drain(queue) == [1, 3, 4]


def test_empty_queue_errors():
    queue = PriorityQueue()
    assert not queue
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.top()
    with pytest.raises(IndexError):
        queue.pop()


def test_str_lists_every_element():
    queue = PriorityQueue(VALUES)
    assert sorted(int(x) for x in str(queue).split()) == sorted(VALUES)
    assert str(queue).split()[0] == str(min(VALUES))
    assert str(PriorityQueue([5])) == "5"
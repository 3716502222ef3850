import pytest

from edastructs.order_stats import kth_key, kth_keys
from edastructs.treemap import TreeMap


def _tree(keys):
    tree = TreeMap()
    for key in keys:
        tree.insert(key, key * 10)
    return tree


KEYS = [50, 20, 80, 10, 30, 70, 90, 25, 35, 5]


@pytest.mark.parametrize("position", range(1, len(KEYS) + 1))
def test_kth_key_matches_sorted_order(position):
    assert kth_key(_tree(KEYS), position) == sorted(KEYS)[position - 1]


@pytest.mark.parametrize("position", [0, -3, len(KEYS) + 1, 100])
def test_kth_key_out_of_range_is_none(position):
    assert kth_key(_tree(KEYS), position) is None


def test_kth_key_on_empty_tree():
    assert kth_key(TreeMap(), 1) is None


def test_kth_keys_mixes_found_and_missing():
    tree = _tree(KEYS)
    ordered = sorted(KEYS)
    result = kth_keys(tree, [1, len(KEYS), 0, 4, len(KEYS) + 1])
    assert result == [ordered[0], ordered[-1], None, ordered[3], None]


def test_kth_keys_after_erase_reflects_new_order():
    tree = _tree(KEYS)
    tree.erase(min(KEYS))
    remaining = sorted(KEYS)[1:]
    assert kth_keys(tree, range(1, len(remaining) + 1)) == remaining


def test_kth_keys_empty_positions():
    assert kth_keys(_tree(KEYS), []) == []


def test_kth_key_respects_custom_order():
    tree = TreeMap(less=lambda a, b: a > b)
    for key in KEYS:
        tree.insert(key, None)
    assert kth_key(tree, 1) == max(KEYS)
    assert kth_keys(tree, [2]) == [sorted(KEYS, reverse=True)[1]]
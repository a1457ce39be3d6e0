"""Tests for the union-find structure."""

import pytest

from urban_network.domain.errors import UnknownSetError
from urban_network.graph.disjoint_set import DisjointSet


def test_make_set_is_its_own_representative():
    sets = DisjointSet()
    sets.make_set(5)

    assert sets.find(5) == 5
    assert 5 in sets


def test_union_merges_sets():
    sets = DisjointSet()
    for i in range(4):
        sets.make_set(i)

    assert sets.union(0, 1) is True
    assert sets.union(2, 3) is True
    assert sets.union(1, 0) is False
    assert sets.connected(0, 1)
    assert not sets.connected(1, 2)

    sets.union(1, 3)
    assert len({sets.find(i) for i in range(4)}) == 1


def test_find_unknown_element_raises():
    sets = DisjointSet()
    sets.make_set(1)

    with pytest.raises(UnknownSetError) as exc_info:
        sets.find(2)
    assert exc_info.value.element == 2

    with pytest.raises(UnknownSetError):
        sets.union(1, 2)


def test_find_compresses_long_chain_without_recursion():
    sets = DisjointSet()
    size = 50_000
    for i in range(size):
        sets.make_set(i)
    # Each union attaches the previous root under the next element,
    # building a single chain of length ``size``.
    for i in range(size - 1):
        sets.union(i, i + 1)

    root = sets.find(0)

    assert root == size - 1
    assert all(sets._parent[i] == root for i in range(size))

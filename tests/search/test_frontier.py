import pytest

from astar_engine.search.frontier import Frontier
from astar_engine.search.node import SearchNode


def test_pop_orders_by_f():
    fr = Frontier()
    fr.offer(SearchNode((0, 0), 0, 5))
    fr.offer(SearchNode((1, 0), 1, 2))
    fr.offer(SearchNode((2, 0), 2, 3))
    assert [fr.pop().position for _ in range(3)] == [(1, 0), (2, 0), (0, 0)]


def test_equal_f_prefers_larger_g():
    fr = Frontier()
    fr.offer(SearchNode((0, 0), 1, 4))
    fr.offer(SearchNode((1, 1), 3, 4))
    assert fr.pop().position == (1, 1)


def test_equal_f_and_g_keeps_insertion_order():
    fr = Frontier()
    for i in range(5):
        fr.offer(SearchNode((i, 0), 2, 4))
    assert [fr.pop().position for _ in range(5)] == [(i, 0) for i in range(5)]


def test_offer_replaces_only_when_strictly_cheaper():
    fr = Frontier()
    first = SearchNode((1, 1), 4, 6)
    assert fr.offer(first)
    assert not fr.offer(SearchNode((1, 1), 4, 6))
    assert not fr.offer(SearchNode((1, 1), 5, 7))
    assert fr.get((1, 1)) is first

    better = SearchNode((1, 1), 2, 4)
    assert fr.offer(better)
    assert fr.get((1, 1)) is better
    assert len(fr) == 1


def test_superseded_entries_are_discarded():
    fr = Frontier()
    fr.offer(SearchNode((1, 1), 4, 4))
    better = SearchNode((1, 1), 1, 1)
    fr.offer(better)
    assert fr.pop() is better
    assert not fr
    with pytest.raises(IndexError):
        fr.pop()


def test_membership_and_len():
    fr = Frontier()
    assert len(fr) == 0 and not fr
    fr.offer(SearchNode((3, 2), 0, 0))
    assert (3, 2) in fr
    assert (2, 3) not in fr
    assert fr.get((2, 3)) is None
    fr.pop()
    assert (3, 2) not in fr

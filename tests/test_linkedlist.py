import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.linkedlist import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


@given(st.lists(st.integers()))
def test_construction_preserves_order(values):
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


def test_push_front_prepends():
    items = LinkedList([2, 3])
    node = items.push_front(1)
    assert list(items) == [1, 2, 3]
    assert items.head is node


def test_push_back_appends():
    items = LinkedList([1, 2])
    node = items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert items.last() is node


def test_push_back_on_empty_sets_head():
    items = LinkedList()
    node = items.push_back("x")
    assert items.head is node
    assert items.last() is node


def test_last_returns_final_node():
    items = LinkedList(["a", "b", "c"])
    tail = items.last()
    assert tail.value == "c"
    assert tail.next is None


def test_node_links():
    second = Node("b")
    first = Node("a", second)
    assert first.next is second
    assert second.next is None


def test_clear_releases_each_value_in_order():
    released = []
    items = LinkedList([1, 2, 3])
    items.clear(released.append)
    assert released == [1, 2, 3]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_release_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_all():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


@given(st.lists(st.integers()))
def test_map_applies_and_leaves_original(values):
    items = LinkedList(values)
    mapped = items.map(lambda value: value * 2)
    assert list(mapped) == [value * 2 for value in values]
    assert list(items) == values
    assert mapped is not items


def test_map_propagates_errors():
    items = LinkedList([1, 0])
    with pytest.raises(ZeroDivisionError):
        items.map(lambda value: 1 // value)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_front_and_back_pushes_combine(front, back):
    items = LinkedList()
    for value in back:
        items.push_back(value)
    for value in front:
        items.push_front(value)
    assert list(items) == list(reversed(front)) + back
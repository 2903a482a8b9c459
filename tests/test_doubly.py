import pytest

from dsalgos.doubly import CircularDoublyLinkedList, DoublyLinkedList


def assert_consistent(items):
    assert list(reversed(items)) == list(items)[::-1]
    assert len(list(items)) == len(items)


def test_push_front_and_back():
    items = DoublyLinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert_consistent(items)


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_insert_at_matches_list_insert(position):
    values = [1, 2, 3]
    items = DoublyLinkedList(values)
    items.insert_at(position, 9)
    expected = list(values)
    expected.insert(position, 9)
    assert list(items) == expected
    assert_consistent(items)


@pytest.mark.parametrize(
    "call, error",
    [
        (lambda items: items.insert_at(-1, 9), IndexError),
        (lambda items: items.insert_at(4, 9), IndexError),
        (lambda items: items.insert_before(7, 0), ValueError),
        (lambda items: items.insert_after(7, 0), ValueError),
        (lambda items: items.delete_after(3), ValueError),
        (lambda items: items.delete_before(1), ValueError),
    ],
)
def test_invalid_requests_change_nothing(call, error):
    items = DoublyLinkedList([1, 2, 3])
    with pytest.raises(error):
        call(items)
    assert list(items) == [1, 2, 3]
    assert_consistent(items)


def test_insert_before_and_after():
    items = DoublyLinkedList([1, 2, 3])
    items.insert_before(2, 5)
    items.insert_after(2, 6)
    assert list(items) == [1, 5, 2, 6, 3]
    items.insert_before(1, 0)
    items.insert_after(3, 4)
    assert list(items) == [0, 1, 5, 2, 6, 3, 4]
    assert_consistent(items)


def test_linear_pops():
    items = DoublyLinkedList([1, 2, 3, 4])
    assert items.pop_front() == 1
    assert items.pop_back() == 4
    assert list(items) == [2, 3]
    assert_consistent(items)
    with pytest.raises(IndexError):
        DoublyLinkedList().pop_back()


def test_delete_after_and_before():
    items = DoublyLinkedList([1, 2, 3, 4, 5])
    assert items.delete_after(3) == 4
    assert items.delete_before(3) == 2
    assert list(items) == [1, 3, 5]
    assert items.delete_before(3) == 1
    assert items.delete_after(3) == 5
    assert list(items) == [3]
    assert_consistent(items)


@pytest.mark.parametrize("kind", [DoublyLinkedList, CircularDoublyLinkedList])
def test_clear_both_kinds(kind):
    collection = kind([1, 2, 3])
    collection.clear()
    assert list(collection) == []
    assert len(collection) == 0


def test_circular_push_and_iterate():
    ring = CircularDoublyLinkedList()
    ring.push_back(2)
    ring.push_back(3)
    ring.push_front(1)
    ring.push_back(4)
    assert list(ring) == [1, 2, 3, 4]
    assert len(ring) == 4


def test_circular_pops():
    ring = CircularDoublyLinkedList([1, 2, 3, 4])
    assert ring.pop_front() == 1
    assert ring.pop_back() == 4
    assert list(ring) == [2, 3]
    ring.push_front(0)
    assert list(ring) == [0, 2, 3]


def test_circular_single_element_round_trip():
    ring = CircularDoublyLinkedList([7])
    assert ring.pop_back() == 7
    assert len(ring) == 0
    with pytest.raises(IndexError):
        ring.pop_front()
    ring.push_back(8)
    assert list(ring) == [8]


def test_circular_remove():
    ring = CircularDoublyLinkedList([1, 2, 3])
    ring.remove(2)
    assert list(ring) == [1, 3]
    ring.remove(1)
    assert list(ring) == [3]
    with pytest.raises(ValueError):
        ring.remove(9)
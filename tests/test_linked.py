import pytest

from pipex.linked import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_construct_from_items():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_order():
    lst = LinkedList()
    for item in (1, 2, 3):
        lst.add_front(item)
    assert list(lst) == [3, 2, 1]


def test_add_back_order():
    lst = LinkedList()
    for item in (1, 2, 3):
        lst.add_back(item)
    assert list(lst) == [1, 2, 3]


def test_add_returns_node():
    lst = LinkedList()
    node = lst.add_back("x")
    assert node.content == "x"
    assert lst.head is node
    front = lst.add_front("y")
    assert front.next is node


def test_last():
    lst = LinkedList(["a", "b"])
    tail = lst.last()
    assert tail.content == "b"
    assert tail.next is None


def test_nodes_are_linked():
    lst = LinkedList([10, 20])
    assert lst.head == Node(10, Node(20))


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList(["a", None, "b"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_keeps_list():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_iterate():
    seen = []
    LinkedList([1, 2, 3]).iterate(seen.append)
    assert seen == [1, 2, 3]


def test_iterate_without_function():
    lst = LinkedList([1])
    lst.iterate(None)
    assert list(lst) == [1]


def test_map_builds_new_list():
    source = LinkedList(["a", "b"])
    mapped = source.map(str.upper, lambda c: None)
    assert list(mapped) == ["A", "B"]
    assert list(source) == ["a", "b"]


def test_map_length_invariant():
    source = LinkedList(range(7))
    mapped = source.map(lambda x: x * x, lambda c: None)
    assert len(mapped) == len(source)


def test_map_missing_arguments():
    lst = LinkedList([1])
    assert lst.map(None, lambda c: None) is None
    assert lst.map(lambda x: x, None) is None
    assert LinkedList().map(lambda x: x, lambda c: None) is None


def test_map_failure_deletes_partial_results():
    deleted = []

    def explode(x):
        if x == 3:
            raise RuntimeError("boom")
        return x

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(explode, deleted.append)
    assert deleted == [1, 2]
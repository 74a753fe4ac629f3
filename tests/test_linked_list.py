import pytest

from practicekit.linked_list import LinkedList, main


def _three() -> LinkedList[int]:
    items: LinkedList[int] = LinkedList()
    items.push_back(1)
    items.push_back(2)
    items.push_back(3)
    return items


def test_pop_back():
    items = _three()
    assert items.pop_back() == 3
    assert items.pop_back() == 2
    assert items.pop_back() == 1
    assert items.pop_back() is None
    assert len(items) == 0


def test_insert_at_ith():
    items = _three()
    items.insert_at_ith(1, 4)
    assert items.get(0) == 1
    assert items.get(1) == 4
    assert items.get(2) == 2
    assert items.get(3) == 3
    assert len(items) == 4


def test_delete_at_ith():
    items = _three()
    assert items.delete_at_ith(1) == 2
    assert items.get(0) == 1
    assert items.get(1) == 3
    assert items.get(2) is None
    assert len(items) == 2


def test_get():
    items = _three()
    assert items.get(0) == 1
    assert items.get(1) == 2
    assert items.get(2) == 3
    assert items.get(3) is None


def test_display(capsys):
    _three().display()
    assert capsys.readouterr().out == "1 -> 2 -> 3 -> None\n"


def test_display_empty(capsys):
    LinkedList().display()
    assert capsys.readouterr().out == "None\n"


def test_push_front_and_pop_front():
    items: LinkedList[str] = LinkedList()
    items.push_front("b")
    items.push_front("a")
    assert list(items) == ["a", "b"]
    assert items.pop_front() == "a"
    assert items.pop_front() == "b"
    assert items.pop_front() is None


def test_constructor_keeps_order():
    items = LinkedList([5, 6, 7])
    assert list(items) == [5, 6, 7]
    assert len(items) == 3


def test_insert_at_end_appends():
    items = _three()
    items.insert_at_ith(3, 9)
    assert list(items) == [1, 2, 3, 9]


def test_insert_beyond_end_raises():
    items = _three()
    with pytest.raises(IndexError):
        items.insert_at_ith(5, 9)
    assert list(items) == [1, 2, 3]


def test_insert_into_empty_at_one_raises():
    with pytest.raises(IndexError):
        LinkedList().insert_at_ith(1, 0)


def test_delete_past_end_raises():
    items = _three()
    with pytest.raises(IndexError):
        items.delete_at_ith(3)
    assert len(items) == 3


def test_delete_head_of_empty_returns_none():
    items: LinkedList[int] = LinkedList()
    assert items.delete_at_ith(0) is None
    assert len(items) == 0


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "1 -> 2 -> 3 -> None",
        "Popped: 1",
        "Popped: 2",
        "Popped: 3",
        "None",
        "6 -> 4 -> 5 -> 7 -> None",
        "Popped: 6",
        "Popped: 7",
        "4 -> None",
        "Element at index 1: None",
    ]
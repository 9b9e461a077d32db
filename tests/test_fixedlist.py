import pytest

from cwmpcore.fixedlist import FixedList, ListFullError


def test_source_scenario_reuses_freed_slot():
    a = [1, 5, 7, 4]
    lst = FixedList(100)
    for value in a:
        lst.append(value)
    removed = lst.remove_by_num(1)
    assert removed == 5
    assert lst.find_by_num(2) == 4
    for value in a:
        lst.append(value)
    assert list(lst) == [1, 1, 7, 4, 5, 7, 4]
    assert len(lst) == 7


def test_append_returns_slot():
    lst = FixedList(3)
    assert lst.append("a") == 0
    assert lst.append("b") == 1
    lst.remove("a")
    assert lst.append("c") == 0
    assert list(lst) == ["c", "b"]


def test_full_raises():
    lst = FixedList(2)
    lst.append(1)
    lst.append(2)
    with pytest.raises(ListFullError):
        lst.append(3)
    assert list(lst) == [1, 2]


def test_capacity_freed_after_remove():
    lst = FixedList(2)
    lst.append(1)
    lst.append(2)
    lst.remove_by_num(0)
    lst.append(3)
    assert list(lst) == [3, 2]
    assert len(lst) == lst.size


def test_find_out_of_range():
    lst = FixedList(4)
    lst.append("x")
    with pytest.raises(IndexError):
        lst.find_by_num(1)
    with pytest.raises(IndexError):
        lst.find_by_num(-1)
    with pytest.raises(IndexError):
        lst.remove_by_num(5)


def test_remove_missing_raises():
    lst = FixedList(4)
    lst.append("x")
    with pytest.raises(ValueError):
        lst.remove("y")
    assert list(lst) == ["x"]


def test_replace():
    lst = FixedList(4)
    for value in ("a", "b", "c"):
        lst.append(value)
    lst.replace(1, "z")
    assert list(lst) == ["a", "z", "c"]


def test_none_is_a_valid_item():
    lst = FixedList(2)
    lst.append(None)
    assert len(lst) == 1
    assert lst.find_by_num(0) is None


def test_clear():
    lst = FixedList(3)
    for value in (1, 2, 3):
        lst.append(value)
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.append(9) == 0


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        FixedList(size)
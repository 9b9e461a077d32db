import pytest

from cwmpcore.ringqueue import QueueEmptyError, QueueFullError, RingQueue


def test_source_scenario_four_slots():
    queue = RingQueue(4)
    queue.put(1)
    queue.put(5)
    queue.put(7)
    with pytest.raises(QueueFullError):
        queue.put(4)
    assert queue.get() == 1
    assert list(queue) == [5, 7]


def test_fifo_order_round_trip():
    items = ["a", "b", "c", "d"]
    queue = RingQueue(10)
    for item in items:
        queue.put(item)
    assert [queue.get() for _ in items] == items
    assert queue.is_empty()


def test_capacity_is_size_minus_one():
    queue = RingQueue(5)
    for value in range(queue.capacity):
        queue.put(value)
    assert queue.is_full()
    assert len(queue) == queue.size - 1
    with pytest.raises(QueueFullError):
        queue.put(99)


def test_single_slot_queue_is_always_full():
    queue = RingQueue(1)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.put("x")


def test_get_from_empty_raises():
    queue = RingQueue(3)
    with pytest.raises(QueueEmptyError):
        queue.get()


def test_peek_does_not_remove():
    queue = RingQueue(3)
    queue.put("head")
    queue.put("tail")
    assert queue.peek() == "head"
    assert len(queue) == 2
    assert queue.get() == "head"


def test_peek_empty_raises():
    with pytest.raises(QueueEmptyError):
        RingQueue(3).peek()


def test_wraparound_keeps_order():
    queue = RingQueue(3)
    seen = []
    for value in range(10):
        queue.put(value)
        if queue.is_full():
            seen.append(queue.get())
    seen.extend(queue.get() for _ in range(len(queue)))
    assert seen == list(range(10))


def test_clear_empties_queue():
    queue = RingQueue(4)
    queue.put(1)
    queue.put(2)
    queue.clear()
    assert queue.is_empty()
    assert len(queue) == 0
    assert list(queue) == []


def test_iteration_does_not_consume():
    queue = RingQueue(4)
    for value in (3, 6, 9):
        queue.put(value)
    assert list(queue) == [3, 6, 9]
    assert len(queue) == 3


def test_none_is_a_valid_item():
    queue = RingQueue(3)
    queue.put(None)
    assert len(queue) == 1
    assert queue.get() is None


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        RingQueue(size)


def test_empty_and_full_flags_are_exclusive_when_partial():
    queue = RingQueue(4)
    queue.put("x")
    assert queue.is_empty() is False
    assert queue.is_full() is False
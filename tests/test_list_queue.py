import pytest

from ccds.linked_list import ListEmptyError
from ccds.list_queue import ListQueue, Queue


def _drain(queue: Queue) -> list:
    out = []
    while not queue.is_empty():
        out.append(queue.dequeue())
    return out


def test_source_scenario():
    queue = ListQueue()
    with pytest.raises(ListEmptyError):
        queue.dequeue()

    queue.enqueue(1)
    assert queue.peek() == 1

    queue.enqueue(2)
    queue.enqueue(3)

    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3

    with pytest.raises(ListEmptyError):
        queue.dequeue()


def test_peek_empty_raises():
    with pytest.raises(ListEmptyError):
        ListQueue().peek()


def test_peek_does_not_remove():
    queue = ListQueue()
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.peek() == "a"
    assert queue.peek() == "a"
    assert len(queue) == 2


def test_size_and_empty():
    queue = ListQueue()
    assert queue.is_empty() is True
    assert len(queue) == 0
    for value in range(4):
        queue.enqueue(value)
    assert len(queue) == 4
    assert queue.is_empty() is False
    queue.dequeue()
    assert len(queue) == 3


def test_never_full():
    queue = ListQueue()
    for value in range(100):
        queue.enqueue(value)
    assert queue.is_full() is False


def test_clear_passes_elements_to_remove_fn():
    removed = []
    queue = ListQueue(remove_fn=removed.append)
    for value in (5, 6, 7):
        queue.enqueue(value)
    queue.clear()
    assert removed == [5, 6, 7]
    assert len(queue) == 0


def test_is_a_queue():
    queue = ListQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert isinstance(queue, Queue)
    assert _drain(queue) == [1, 2, 3]
    assert len(queue) == 0


def test_queue_interface_is_abstract():
    with pytest.raises(TypeError):
        Queue()
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from route_finder.graph import PriorityQueue


def test_dequeue_returns_lowest_priority_first():
    queue: PriorityQueue[str] = PriorityQueue()
    queue.enqueue("c", 3.0)
    queue.enqueue("a", 1.0)
    queue.enqueue("b", 2.0)

    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == ["a", "b", "c"]


def test_equal_priorities_are_fifo():
    queue: PriorityQueue[str] = PriorityQueue()
    queue.enqueue("first", 1.0)
    queue.enqueue("low", 0.5)
    queue.enqueue("second", 1.0)
    queue.enqueue("third", 1.0)

    assert queue.dequeue() == "low"
    assert [queue.dequeue() for _ in range(3)] == ["first", "second", "third"]


def test_duplicates_are_kept():
    queue: PriorityQueue[str] = PriorityQueue()
    queue.enqueue("x", 5.0)
    queue.enqueue("x", 2.0)

    assert len(queue) == 2
    assert queue.dequeue_with_priority() == ("x", 2.0)
    assert queue.dequeue_with_priority() == ("x", 5.0)


def test_empty_queue():
    queue: PriorityQueue[str] = PriorityQueue()

    assert queue.is_empty()
    assert queue.dequeue() is None
    assert queue.dequeue_with_priority() is None

    queue.enqueue("a", 0.0)
    assert not queue.is_empty()

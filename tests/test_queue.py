from emberwild.events.model import GameEvent, EventChoice, EventResult
from emberwild.events.queue import EventQueue


def _event(title: str) -> GameEvent:
    return GameEvent(
        title=title,
        description="",
        choices=[EventChoice(label="Go", description="", results=[EventResult("ok")])],
    )


def test_enqueue_none_is_dropped():
    queue = EventQueue()
    queue.enqueue(None)
    assert queue.count == 0
    assert queue.is_empty


def test_enqueue_then_dequeue_returns_event():
    queue = EventQueue()
    event = _event("Storm Approaching")
    queue.enqueue(event)
    assert queue.count == 1

    dequeued, found = queue.try_dequeue()
    assert found is True
    assert dequeued is event
    assert queue.is_empty


def test_dequeue_empty_queue():
    queue = EventQueue()
    assert queue.try_dequeue() == (None, False)
    assert queue.count == 0


def test_fifo_order_and_peek_does_not_mutate():
    queue = EventQueue()
    first, second = _event("First"), _event("Second")
    queue.enqueue(first)
    queue.enqueue(None)
    queue.enqueue(second)

    assert queue.peek() is first
    assert queue.peek() is first
    assert len(queue) == 2

    assert queue.try_dequeue() == (first, True)
    assert queue.try_dequeue() == (second, True)
    assert queue.peek() is None


def test_clear_empties_queue():
    queue = EventQueue()
    for title in ("A", "B", "C"):
        queue.enqueue(_event(title))
    queue.clear()
    assert queue.is_empty
    assert queue.try_dequeue() == (None, False)

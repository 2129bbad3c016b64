from __future__ import annotations
import threading
from collections import deque
from typing import TYPE_CHECKING, Deque, Optional, Tuple

if TYPE_CHECKING:
    from .model import GameEvent


class EventQueue:
    """FIFO of intentional events. These are served before any ambient roll."""

    def __init__(self):
        self._events: Deque[GameEvent] = deque()
        self._lock = threading.Lock()

    def enqueue(self, event: Optional[GameEvent]):
        if event is None:
            return
        with self._lock:
            self._events.append(event)

    def try_dequeue(self) -> Tuple[Optional[GameEvent], bool]:
        with self._lock:
            if not self._events:
                return None, False
            return self._events.popleft(), True

    def peek(self) -> Optional[GameEvent]:
        with self._lock:
            return self._events[0] if self._events else None

    def clear(self):
        with self._lock:
            self._events.clear()

    @property
    def count(self) -> int:
        return len(self._events)

    @property
    def is_empty(self) -> bool:
        return not self._events

    def __len__(self) -> int:
        return self.count

"""Thread-safe counter handing out article ids."""

import threading

from articat.domain.article.model.aggregate import ArticleId
from articat.domain.article.port.id_allocator import IdAllocator


class CounterIdAllocator(IdAllocator):
    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be >= 1")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> ArticleId:
        with self._lock:
            issued = self._next
            self._next += 1
        return ArticleId(issued)

    def peek(self) -> ArticleId:
        with self._lock:
            return ArticleId(self._next)

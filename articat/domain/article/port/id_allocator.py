"""IdAllocator port - source of fresh article ids."""

from abc import abstractmethod
from typing import Protocol

from articat.domain.article.model.aggregate import ArticleId


class IdAllocator(Protocol):
    @abstractmethod
    def next_id(self) -> ArticleId:
        """Return an id strictly greater than any previously returned one."""
        ...

    @abstractmethod
    def peek(self) -> ArticleId:
        """Return the id the next call to ``next_id`` will hand out."""
        ...

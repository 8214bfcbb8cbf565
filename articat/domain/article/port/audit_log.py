"""AuditLog port - append-only history of article mutations."""

from abc import abstractmethod
from typing import Protocol

from articat.domain.article.event.history import EventKind, HistoryEvent
from articat.domain.article.model.aggregate import Article, ArticleId


class AuditLog(Protocol):
    """Append-only, time-ordered log of history events.

    Entries are never changed or removed once appended. Every query returns a
    plain list, oldest first; an empty list means no entry matched.
    """

    @abstractmethod
    def append(self, kind: EventKind, article: Article) -> HistoryEvent:
        """Stamp and store a new event. Always succeeds."""
        ...

    @abstractmethod
    def all(self) -> list[HistoryEvent]: ...

    @abstractmethod
    def by_kind(self, kind: EventKind) -> list[HistoryEvent]: ...

    @abstractmethod
    def by_article_id(self, article_id: ArticleId) -> list[HistoryEvent]: ...

    @abstractmethod
    def count(self) -> int: ...

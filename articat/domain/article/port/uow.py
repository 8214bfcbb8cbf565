"""Unit of work over the article store and its audit log."""

from abc import abstractmethod
from contextlib import AbstractContextManager

from articat.domain.article.event.history import EventKind
from articat.domain.article.model.aggregate import Article
from articat.domain.article.port.audit_log import AuditLog
from articat.domain.article.port.repository import ArticleRepository
from articat.domain.shared.uow import UoW


class ArticleUnitOfWork(UoW):
    """Makes a store change and its history event visible together.

    Inside ``with uow:`` a mutation writes through ``articles`` and stages its
    event with ``record``; staged events reach ``history`` on commit. Reads
    outside a mutation go through ``reading()`` so they never observe a store
    change whose event has not been appended yet.
    """

    articles: ArticleRepository
    history: AuditLog

    @abstractmethod
    def record(self, kind: EventKind, article: Article) -> None:
        """Stage a history event for the current unit of work."""
        ...

    @abstractmethod
    def reading(self) -> AbstractContextManager[None]:
        """Context in which store and log can be read consistently."""
        ...

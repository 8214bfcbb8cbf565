"""Lock-based unit of work for the in-memory store."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from articat.domain.article.event.history import EventKind
from articat.domain.article.model.aggregate import Article
from articat.domain.article.port.uow import ArticleUnitOfWork
from articat.domain.shared.error import InvalidStateError
from articat.infrastructure.memory.audit_log import InMemoryAuditLog
from articat.infrastructure.memory.repository import Checkpoint, InMemoryArticleRepository

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(ArticleUnitOfWork):
    """Serialises mutations and reads with one re-entrant lock.

    ``begin`` takes the lock and checkpoints the store. ``commit`` appends the
    staged events and releases the lock; ``rollback`` restores the checkpoint
    and drops the staged events. Units of work do not nest: opening a second
    one on the thread that already holds one raises ``InvalidStateError``.
    """

    articles: InMemoryArticleRepository
    history: InMemoryAuditLog

    def __init__(self, articles: InMemoryArticleRepository, history: InMemoryAuditLog) -> None:
        self.articles = articles
        self.history = history
        self._lock = threading.RLock()
        self._owner: int | None = None
        self._checkpoint: Checkpoint = {}
        self._staged: list[tuple[EventKind, Article]] = []

    @property
    def active(self) -> bool:
        return self._owner == threading.get_ident()

    def begin(self) -> None:
        if self.active:
            raise InvalidStateError("A unit of work is already active on this thread")
        self._lock.acquire()
        self._owner = threading.get_ident()
        self._checkpoint = self.articles.checkpoint()
        self._staged = []

    def record(self, kind: EventKind, article: Article) -> None:
        if not self.active:
            raise InvalidStateError("History events can only be recorded inside a unit of work")
        self._staged.append((kind, article))

    def commit(self) -> None:
        try:
            for kind, article in self._staged:
                self.history.append(kind, article)
        finally:
            self._release()

    def rollback(self) -> None:
        try:
            self.articles.reset(self._checkpoint)
            if self._staged:
                logger.debug("Rolled back unit of work, dropped %d events", len(self._staged))
        finally:
            self._release()

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._lock:
            yield

    def _release(self) -> None:
        self._staged = []
        self._checkpoint = {}
        self._owner = None
        self._lock.release()

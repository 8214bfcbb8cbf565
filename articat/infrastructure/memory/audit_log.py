"""In-memory append-only audit log."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from uuid import uuid4

from articat.domain.article.event.history import EventKind, HistoryEvent
from articat.domain.article.model.aggregate import Article, ArticleId
from articat.domain.article.port.audit_log import AuditLog
from articat.domain.shared.event import EventId, utc_now

logger = logging.getLogger(__name__)


class InMemoryAuditLog(AuditLog):
    """List-backed audit log.

    Timestamps come from ``clock`` but are clamped to the previous entry's
    timestamp, so they never decrease even if the wall clock steps back.
    Entries with equal timestamps stay ordered by ``sequence``.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._events: list[HistoryEvent] = []
        self._lock = threading.Lock()

    def append(self, kind: EventKind, article: Article) -> HistoryEvent:
        with self._lock:
            timestamp = self._clock()
            if self._events and timestamp < self._events[-1].timestamp:
                timestamp = self._events[-1].timestamp
            event = HistoryEvent(
                id=EventId(uuid4()),
                sequence=len(self._events) + 1,
                timestamp=timestamp,
                kind=kind,
                article=article,
            )
            self._events.append(event)
        logger.debug("History event #%d: %s article %s", event.sequence, kind, article.id)
        return event

    def all(self) -> list[HistoryEvent]:
        with self._lock:
            return list(self._events)

    def by_kind(self, kind: EventKind) -> list[HistoryEvent]:
        return [e for e in self.all() if e.kind == kind]

    def by_article_id(self, article_id: ArticleId) -> list[HistoryEvent]:
        return [e for e in self.all() if e.article_id == article_id]

    def count(self) -> int:
        with self._lock:
            return len(self._events)

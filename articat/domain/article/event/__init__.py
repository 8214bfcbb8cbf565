"""Article history events."""

from articat.domain.article.event.history import EventKind, HistoryEvent

__all__ = ["EventKind", "HistoryEvent"]

"""HistoryService - read side of the article audit log."""

from articat.domain.article.event.history import EventKind, HistoryEvent
from articat.domain.article.model.aggregate import ArticleId
from articat.domain.article.port.uow import ArticleUnitOfWork
from articat.domain.shared.service import Service


class HistoryService(Service):
    """Queries over the audit log.

    Every query returns events oldest first. An empty list means nothing
    matched; there is no separate "absent" result.
    """

    uow: ArticleUnitOfWork

    def list_events(
        self,
        kind: EventKind | None = None,
        article_id: ArticleId | None = None,
        newest_first: bool = False,
    ) -> list[HistoryEvent]:
        """List events, optionally filtered by kind and/or article.

        Args:
            kind: Only events of this kind.
            article_id: Only events whose snapshot belongs to this article.
            newest_first: Reverse the order (for display).

        Returns:
            List of HistoryEvents.
        """
        with self.uow.reading():
            if article_id is not None:
                events = self.uow.history.by_article_id(article_id)
            else:
                events = self.uow.history.all()
        if kind is not None:
            events = [e for e in events if e.kind == kind]
        if newest_first:
            events.reverse()
        return events

    def count(self, kind: EventKind | None = None) -> int:
        """Count events, optionally of one kind."""
        if kind is None:
            with self.uow.reading():
                return self.uow.history.count()
        return len(self.list_events(kind=kind))

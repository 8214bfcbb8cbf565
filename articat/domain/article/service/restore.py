"""RestoreService - bring deleted articles back from the history."""

import logging

from articat.domain.article.event.history import EventKind, HistoryEvent
from articat.domain.article.model.aggregate import Article, ArticleId
from articat.domain.article.port.uow import ArticleUnitOfWork
from articat.domain.shared.outcome import AlreadyLive, InvalidReference, NotFound, Ok
from articat.domain.shared.service import Service

logger = logging.getLogger(__name__)


def latest_deletion(events: list[HistoryEvent]) -> HistoryEvent | None:
    """Pick the most recent ``DELETED`` event.

    Timestamps may collide under a coarse clock, so ties fall back to log
    order: of two deletions with the same timestamp the later append wins.
    """
    deletions = [e for e in events if e.kind == EventKind.DELETED]
    if not deletions:
        return None
    return max(deletions, key=HistoryEvent.sort_key)


class RestoreService(Service):
    """Reinserts the last deleted snapshot of an article under its original id."""

    uow: ArticleUnitOfWork

    def restore(
        self, article_id: ArticleId | None
    ) -> Ok[Article] | NotFound | AlreadyLive | InvalidReference:
        if article_id is None:
            return InvalidReference("an id is required to restore an article")

        with self.uow:
            if self.uow.articles.get(article_id) is not None:
                logger.info("Restore rejected, article %s is live", article_id)
                return AlreadyLive(article_id)

            deletion = latest_deletion(self.uow.history.by_article_id(article_id))
            if deletion is None:
                logger.info("Restore rejected, article %s was never deleted", article_id)
                return NotFound(article_id, reason="nothing to restore")

            article = deletion.article
            self.uow.articles.put(article)
            self.uow.record(EventKind.RESTORED, article)

        logger.debug("Article %s restored from history event #%d", article_id, deletion.sequence)
        return Ok(article)

    def restorable(self) -> list[Article]:
        """Last deleted snapshot of every article that is not live, ordered by id."""
        with self.uow.reading():
            deleted: dict[int, HistoryEvent] = {}
            for event in self.uow.history.by_kind(EventKind.DELETED):
                article_id = event.article_id
                if article_id is None or self.uow.articles.get(ArticleId(article_id)) is not None:
                    continue
                current = deleted.get(article_id)
                if current is None or event.sort_key() > current.sort_key():
                    deleted[article_id] = event
        return [deleted[key].article for key in sorted(deleted)]

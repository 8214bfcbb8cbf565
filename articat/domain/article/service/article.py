"""ArticleService - create, update, delete and look up articles."""

import logging

from articat.domain.article.event.history import EventKind
from articat.domain.article.model.aggregate import Article, ArticleId, merge
from articat.domain.article.model.predicate import ArticlePredicate
from articat.domain.article.port.id_allocator import IdAllocator
from articat.domain.article.port.uow import ArticleUnitOfWork
from articat.domain.shared.outcome import InvalidReference, NotFound, Ok
from articat.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ArticleService(Service):
    """Writes and reads live articles.

    Every successful write runs in one unit of work and records exactly one
    history event. Failed writes leave both the store and the log untouched.
    """

    uow: ArticleUnitOfWork
    ids: IdAllocator

    # --- Writes -------------------------------------------------------------

    def save(self, candidate: Article) -> Ok[Article] | NotFound:
        """Update the article at ``candidate.id``, or create one if it has no id."""
        if candidate.id is None:
            return self._create(candidate)
        return self._update(candidate.id, candidate)

    def delete(self, article_id: ArticleId | None) -> Ok[Article] | NotFound | InvalidReference:
        """Remove a live article; the removed snapshot is kept in the history."""
        if article_id is None:
            return InvalidReference("an id is required to delete an article")

        with self.uow:
            removed = self.uow.articles.remove(article_id)
            if removed is None:
                logger.info("Delete rejected, no live article %s", article_id)
                return NotFound(article_id)
            self.uow.record(EventKind.DELETED, removed)

        logger.debug("Article %s deleted", article_id)
        return Ok(removed)

    def _create(self, candidate: Article) -> Ok[Article]:
        with self.uow:
            article = candidate.with_id(self.ids.next_id())
            self.uow.articles.put(article)
            self.uow.record(EventKind.CREATED, article)

        logger.debug("Article %s created", article.id)
        return Ok(article)

    def _update(self, article_id: ArticleId, candidate: Article) -> Ok[Article] | NotFound:
        with self.uow:
            existing = self.uow.articles.get(article_id)
            if existing is None:
                logger.info("Update rejected, no live article %s", article_id)
                return NotFound(article_id)
            merged = merge(existing, candidate)
            self.uow.articles.put(merged)
            self.uow.record(EventKind.UPDATED, existing)

        logger.debug("Article %s updated: %s", merged.id, sorted(candidate.present_fields()))
        return Ok(merged)

    # --- Reads --------------------------------------------------------------

    def find_by_id(self, article_id: ArticleId | None) -> Article | None:
        if article_id is None:
            return None
        with self.uow.reading():
            return self.uow.articles.get(article_id)

    def find_all(self) -> list[Article]:
        """All live articles, ordered by id."""
        with self.uow.reading():
            return self.uow.articles.all()

    def find_by(self, predicate: ArticlePredicate) -> list[Article]:
        """Live articles accepted by ``predicate``, ordered by id."""
        return [article for article in self.find_all() if predicate(article)]

    def find_one(self, predicate: ArticlePredicate) -> Article | None:
        """The lowest-id live article accepted by ``predicate``."""
        return next((article for article in self.find_all() if predicate(article)), None)

    def count(self) -> int:
        with self.uow.reading():
            return self.uow.articles.count()

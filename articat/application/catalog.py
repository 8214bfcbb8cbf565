"""Catalog - the in-process API used by console front ends."""

from articat.config import Config
from articat.domain.article.event.history import EventKind, HistoryEvent
from articat.domain.article.model.aggregate import Article, ArticleId
from articat.domain.article.model.predicate import ArticlePredicate
from articat.domain.article.service.article import ArticleService
from articat.domain.article.service.history import HistoryService
from articat.domain.article.service.restore import RestoreService
from articat.domain.shared.outcome import AlreadyLive, InvalidReference, NotFound, Ok
from articat.domain.shared.service import Service
from articat.infrastructure.memory.audit_log import InMemoryAuditLog
from articat.infrastructure.memory.id_allocator import CounterIdAllocator
from articat.infrastructure.memory.repository import InMemoryArticleRepository
from articat.infrastructure.memory.uow import InMemoryUnitOfWork


class Catalog(Service):
    """Single entry point over the article services.

    Obtain one from the DI container (see ``articat.application.di``) or, for
    scripts and tests, from ``Catalog.in_memory()``. Catalogs built from the
    same container share one store.
    """

    article_service: ArticleService
    restore_service: RestoreService
    history_service: HistoryService

    @classmethod
    def in_memory(cls, config: Config | None = None) -> "Catalog":
        """Build a catalog over a fresh, private in-memory store."""
        config = config or Config()
        uow = InMemoryUnitOfWork(InMemoryArticleRepository(), InMemoryAuditLog())
        ids = CounterIdAllocator(start=config.store.first_id)
        return cls(
            article_service=ArticleService(uow=uow, ids=ids),
            restore_service=RestoreService(uow=uow),
            history_service=HistoryService(uow=uow),
        )

    # --- Articles -----------------------------------------------------------

    def save(self, candidate: Article) -> Ok[Article] | NotFound:
        return self.article_service.save(candidate)

    def delete(self, article_id: ArticleId | None) -> Ok[Article] | NotFound | InvalidReference:
        return self.article_service.delete(article_id)

    def find_by_id(self, article_id: ArticleId | None) -> Article | None:
        return self.article_service.find_by_id(article_id)

    def find_all(self) -> list[Article]:
        return self.article_service.find_all()

    def find_by(self, predicate: ArticlePredicate) -> list[Article]:
        return self.article_service.find_by(predicate)

    def find_one(self, predicate: ArticlePredicate) -> Article | None:
        return self.article_service.find_one(predicate)

    def count(self) -> int:
        return self.article_service.count()

    # --- Restore ------------------------------------------------------------

    def restore(
        self, article_id: ArticleId | None
    ) -> Ok[Article] | NotFound | AlreadyLive | InvalidReference:
        return self.restore_service.restore(article_id)

    def restorable(self) -> list[Article]:
        return self.restore_service.restorable()

    # --- History ------------------------------------------------------------

    def history(self) -> list[HistoryEvent]:
        return self.history_service.list_events()

    def history_by_kind(self, kind: EventKind) -> list[HistoryEvent]:
        return self.history_service.list_events(kind=kind)

    def history_by_article(self, article_id: ArticleId) -> list[HistoryEvent]:
        return self.history_service.list_events(article_id=article_id)

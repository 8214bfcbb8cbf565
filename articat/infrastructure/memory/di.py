"""Dependency injection provider for the in-memory store."""

from dishka import Provider, provide

from articat.config import Config
from articat.domain.article.port.id_allocator import IdAllocator
from articat.domain.article.port.uow import ArticleUnitOfWork
from articat.infrastructure.memory.audit_log import InMemoryAuditLog
from articat.infrastructure.memory.id_allocator import CounterIdAllocator
from articat.infrastructure.memory.repository import InMemoryArticleRepository
from articat.infrastructure.memory.uow import InMemoryUnitOfWork
from articat.util.di.scope import Scope


class MemoryProvider(Provider):
    """Provides the process-wide store. Everything here is APP-scoped."""

    @provide(scope=Scope.APP)
    def get_articles(self) -> InMemoryArticleRepository:
        return InMemoryArticleRepository()

    @provide(scope=Scope.APP)
    def get_history(self) -> InMemoryAuditLog:
        return InMemoryAuditLog()

    @provide(scope=Scope.APP)
    def get_id_allocator(self, config: Config) -> IdAllocator:
        return CounterIdAllocator(start=config.store.first_id)

    @provide(scope=Scope.APP)
    def get_uow(
        self, articles: InMemoryArticleRepository, history: InMemoryAuditLog
    ) -> ArticleUnitOfWork:
        return InMemoryUnitOfWork(articles, history)

"""Global test fixtures."""

import os

import pytest

from articat.domain.article.service.article import ArticleService
from articat.domain.article.service.history import HistoryService
from articat.domain.article.service.restore import RestoreService
from articat.infrastructure.memory.audit_log import InMemoryAuditLog
from articat.infrastructure.memory.id_allocator import CounterIdAllocator
from articat.infrastructure.memory.repository import InMemoryArticleRepository
from articat.infrastructure.memory.uow import InMemoryUnitOfWork

# Keep a developer's YAML config out of the test run
os.environ.pop("ARTICAT_CONFIG_FILE", None)


@pytest.fixture
def articles() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def history() -> InMemoryAuditLog:
    return InMemoryAuditLog()


@pytest.fixture
def uow(articles: InMemoryArticleRepository, history: InMemoryAuditLog) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(articles, history)


@pytest.fixture
def article_service(uow: InMemoryUnitOfWork) -> ArticleService:
    return ArticleService(uow=uow, ids=CounterIdAllocator())


@pytest.fixture
def restore_service(uow: InMemoryUnitOfWork) -> RestoreService:
    return RestoreService(uow=uow)


@pytest.fixture
def history_service(uow: InMemoryUnitOfWork) -> HistoryService:
    return HistoryService(uow=uow)

"""Ports the article domain depends on."""

from articat.domain.article.port.audit_log import AuditLog
from articat.domain.article.port.id_allocator import IdAllocator
from articat.domain.article.port.repository import ArticleRepository
from articat.domain.article.port.uow import ArticleUnitOfWork

__all__ = ["ArticleRepository", "ArticleUnitOfWork", "AuditLog", "IdAllocator"]

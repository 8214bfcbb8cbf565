"""Article domain services."""

from articat.domain.article.service.article import ArticleService
from articat.domain.article.service.history import HistoryService
from articat.domain.article.service.restore import RestoreService

__all__ = ["ArticleService", "HistoryService", "RestoreService"]

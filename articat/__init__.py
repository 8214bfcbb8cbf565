"""articat - catalog of scientific article metadata with an audit history."""

from articat.application import Catalog, create_container
from articat.domain.article.event.history import EventKind, HistoryEvent
from articat.domain.article.model import Article, ArticleId, has_keyword, matching
from articat.domain.shared.outcome import AlreadyLive, InvalidReference, NotFound, Ok

__all__ = [
    "AlreadyLive",
    "Article",
    "ArticleId",
    "Catalog",
    "EventKind",
    "HistoryEvent",
    "InvalidReference",
    "NotFound",
    "Ok",
    "create_container",
    "has_keyword",
    "matching",
]

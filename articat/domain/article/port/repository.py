"""ArticleRepository port - keyed container of live articles."""

from abc import abstractmethod
from typing import Protocol

from articat.domain.article.model.aggregate import Article, ArticleId


class ArticleRepository(Protocol):
    """Holds the live (not deleted) articles, keyed by id.

    No validation happens here; callers decide what may be stored.
    """

    @abstractmethod
    def put(self, article: Article) -> None:
        """Insert or replace the live article at ``article.id``."""
        ...

    @abstractmethod
    def get(self, article_id: ArticleId) -> Article | None: ...

    @abstractmethod
    def remove(self, article_id: ArticleId) -> Article | None:
        """Remove and return the live article, or None if there is none."""
        ...

    @abstractmethod
    def all(self) -> list[Article]:
        """Snapshot of every live article, ordered by id."""
        ...

    @abstractmethod
    def count(self) -> int: ...

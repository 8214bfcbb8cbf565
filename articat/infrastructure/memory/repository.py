"""In-memory article repository."""

from articat.domain.article.model.aggregate import Article, ArticleId
from articat.domain.article.port.repository import ArticleRepository

Checkpoint = dict[ArticleId, Article]


class InMemoryArticleRepository(ArticleRepository):
    """Dict-backed store of live articles.

    Not synchronised on its own; ``InMemoryUnitOfWork`` serialises access.
    Articles are immutable, so a shallow copy of the dict is a full checkpoint.
    """

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    def put(self, article: Article) -> None:
        if article.id is None:
            raise ValueError("Cannot store an article without an id")
        self._articles[article.id] = article

    def get(self, article_id: ArticleId) -> Article | None:
        return self._articles.get(article_id)

    def remove(self, article_id: ArticleId) -> Article | None:
        return self._articles.pop(article_id, None)

    def all(self) -> list[Article]:
        return [self._articles[key] for key in sorted(self._articles)]

    def count(self) -> int:
        return len(self._articles)

    def checkpoint(self) -> Checkpoint:
        return dict(self._articles)

    def reset(self, checkpoint: Checkpoint) -> None:
        self._articles = dict(checkpoint)

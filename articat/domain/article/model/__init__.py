"""Article domain model."""

from articat.domain.article.model.aggregate import Article, ArticleId, merge
from articat.domain.article.model.predicate import ArticlePredicate, has_keyword, matching

__all__ = ["Article", "ArticleId", "ArticlePredicate", "merge", "matching", "has_keyword"]

"""Predicates for searching live articles."""

from collections.abc import Callable
from typing import Any

from articat.domain.article.model.aggregate import Article

ArticlePredicate = Callable[[Article], bool]


def _matches(value: Any, wanted: Any) -> bool:
    # An unset criterion matches anything; a set one needs an equal, present value.
    return wanted is None or (value is not None and value == wanted)


def matching(
    id: int | None = None,
    name: str | None = None,
    author: str | None = None,
    year: int | None = None,
) -> ArticlePredicate:
    """Build a predicate that requires equality on every given criterion.

    Example:
        catalog.find_by(matching(author="Curie", year=1903))
    """

    def predicate(article: Article) -> bool:
        return (
            _matches(article.id, id)
            and _matches(article.name, name)
            and _matches(article.author, author)
            and _matches(article.year, year)
        )

    return predicate


def has_keyword(keyword: str) -> ArticlePredicate:
    """Match articles listing ``keyword`` (case-insensitive)."""
    wanted = keyword.casefold()

    def predicate(article: Article) -> bool:
        return any(k.casefold() == wanted for k in article.keywords or ())

    return predicate

"""Article value object and the merge rule used by updates."""

from typing import NewType

from articat.domain.shared.model.value import ValueObject

ArticleId = NewType("ArticleId", int)

# Fields a caller may set; ``id`` is owned by the catalog.
CONTENT_FIELDS: tuple[str, ...] = ("name", "author", "year", "keywords", "abstract")


class Article(ValueObject):
    """Metadata of a scientific article.

    Every field is optional. ``id`` is only absent on a candidate that has
    not been saved yet. ``keywords`` keeps insertion order and duplicates.
    """

    id: ArticleId | None = None
    name: str | None = None
    author: str | None = None
    year: int | None = None
    keywords: tuple[str, ...] | None = None
    abstract: str | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, article_id: ArticleId) -> "Article":
        """Return a copy of this article bound to ``article_id``."""
        return self.model_copy(update={"id": article_id})

    def present_fields(self) -> dict[str, object]:
        """Content fields that carry a value."""
        return {
            field: value
            for field in CONTENT_FIELDS
            if (value := getattr(self, field)) is not None
        }


def merge(base: Article, changes: Article) -> Article:
    """Overlay the present fields of ``changes`` onto ``base``.

    Absent fields in ``changes`` mean "keep the current value"; there is no way
    to clear a field through a merge. The id always comes from ``base``.
    """
    return base.model_copy(update=changes.present_fields())

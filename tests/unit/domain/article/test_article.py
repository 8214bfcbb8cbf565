"""Unit tests for the Article value object, merge and search predicates."""

import pytest
from pydantic import ValidationError

from articat.domain.article.model import Article, ArticleId, has_keyword, matching, merge


class TestArticle:
    def test_all_fields_optional(self):
        """An article can be built with no fields at all."""
        article = Article()

        assert article.id is None
        assert article.name is None
        assert article.keywords is None
        assert not article.is_persisted

    def test_keywords_keep_order_and_duplicates(self):
        """Keyword lists are stored as tuples, untouched."""
        article = Article(keywords=["b", "a", "b"])

        assert article.keywords == ("b", "a", "b")

    def test_immutable(self):
        """Articles are frozen value objects."""
        article = Article(name="A")

        with pytest.raises(ValidationError):
            article.name = "B"  # type: ignore[misc]

    def test_with_id_returns_bound_copy(self):
        candidate = Article(name="A", year=2020)

        bound = candidate.with_id(ArticleId(7))

        assert bound.id == 7
        assert bound.name == "A"
        assert candidate.id is None

    def test_present_fields_skips_absent_and_id(self):
        article = Article(id=ArticleId(1), name="A", year=2020)

        assert article.present_fields() == {"name": "A", "year": 2020}


class TestMerge:
    @pytest.fixture
    def base(self) -> Article:
        return Article(
            id=ArticleId(1),
            name="A",
            author="X",
            year=2020,
            keywords=("k1",),
            abstract="text",
        )

    def test_overwrites_only_present_fields(self, base: Article):
        merged = merge(base, Article(author="Y"))

        assert merged == base.model_copy(update={"author": "Y"})

    def test_id_always_comes_from_base(self, base: Article):
        merged = merge(base, Article(id=ArticleId(99), name="B"))

        assert merged.id == 1
        assert merged.name == "B"

    def test_empty_changes_leave_base_unchanged(self, base: Article):
        assert merge(base, Article()) == base

    def test_keywords_replaced_as_a_whole(self, base: Article):
        merged = merge(base, Article(keywords=["k2", "k3"]))

        assert merged.keywords == ("k2", "k3")

    def test_fills_fields_missing_on_base(self):
        merged = merge(Article(id=ArticleId(2)), Article(year=1999))

        assert merged == Article(id=ArticleId(2), year=1999)


class TestPredicates:
    @pytest.fixture
    def article(self) -> Article:
        return Article(id=ArticleId(3), name="A", author="X", year=2020, keywords=("Physics",))

    def test_matching_without_criteria_accepts_everything(self, article: Article):
        assert matching()(article)
        assert matching()(Article())

    def test_matching_requires_every_given_criterion(self, article: Article):
        assert matching(author="X", year=2020)(article)
        assert not matching(author="X", year=2021)(article)
        assert matching(id=3)(article)

    def test_matching_rejects_absent_field(self):
        assert not matching(author="X")(Article(name="A"))

    def test_has_keyword_ignores_case(self, article: Article):
        assert has_keyword("physics")(article)
        assert not has_keyword("chemistry")(article)
        assert not has_keyword("physics")(Article())

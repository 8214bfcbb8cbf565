"""Unit tests for HistoryService."""

import pytest

from articat.domain.article.event.history import EventKind
from articat.domain.article.model import Article, ArticleId
from articat.domain.article.service.article import ArticleService
from articat.domain.article.service.history import HistoryService


@pytest.fixture
def seeded(article_service: ArticleService) -> None:
    """Two articles: #1 created, updated, deleted; #2 created."""
    first = article_service.save(Article(name="A", author="X")).unwrap()
    article_service.save(Article(id=first.id, author="Y"))
    article_service.save(Article(name="B"))
    article_service.delete(first.id)


class TestHistoryService:
    def test_empty_log(self, history_service: HistoryService):
        assert history_service.list_events() == []
        assert history_service.count() == 0

    @pytest.mark.usefixtures("seeded")
    def test_lists_oldest_first(self, history_service: HistoryService):
        events = history_service.list_events()

        assert [e.sequence for e in events] == [1, 2, 3, 4]
        assert [e.kind for e in events] == [
            EventKind.CREATED,
            EventKind.UPDATED,
            EventKind.CREATED,
            EventKind.DELETED,
        ]

    @pytest.mark.usefixtures("seeded")
    def test_newest_first(self, history_service: HistoryService):
        events = history_service.list_events(newest_first=True)

        assert [e.sequence for e in events] == [4, 3, 2, 1]

    @pytest.mark.usefixtures("seeded")
    def test_filter_by_kind(self, history_service: HistoryService):
        created = history_service.list_events(kind=EventKind.CREATED)

        assert [e.article.name for e in created] == ["A", "B"]
        assert history_service.list_events(kind=EventKind.RESTORED) == []

    @pytest.mark.usefixtures("seeded")
    def test_filter_by_article(self, history_service: HistoryService):
        events = history_service.list_events(article_id=ArticleId(1))

        assert [e.kind for e in events] == [
            EventKind.CREATED,
            EventKind.UPDATED,
            EventKind.DELETED,
        ]
        assert events[1].article.author == "X"
        assert events[2].article.author == "Y"

    @pytest.mark.usefixtures("seeded")
    def test_filter_by_article_and_kind(self, history_service: HistoryService):
        events = history_service.list_events(kind=EventKind.CREATED, article_id=ArticleId(2))

        assert len(events) == 1
        assert events[0].article.name == "B"

    @pytest.mark.usefixtures("seeded")
    def test_count(self, history_service: HistoryService):
        assert history_service.count() == 4
        assert history_service.count(EventKind.CREATED) == 2

    @pytest.mark.usefixtures("seeded")
    def test_returned_list_is_a_copy(self, history_service: HistoryService):
        history_service.list_events().clear()

        assert history_service.count() == 4

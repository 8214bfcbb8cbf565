"""History events recorded for every article mutation."""

from enum import StrEnum

from articat.domain.article.model.aggregate import Article
from articat.domain.shared.event import Event


class EventKind(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    RESTORED = "restored"


class HistoryEvent(Event):
    """Snapshot of an article captured when a mutation happened.

    For ``UPDATED`` and ``DELETED`` the snapshot is the state that was
    superseded or removed; for ``CREATED`` and ``RESTORED`` it is the state
    that became live.
    """

    kind: EventKind
    article: Article

    @property
    def article_id(self) -> int | None:
        return self.article.id

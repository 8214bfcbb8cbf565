"""Outcomes of catalog operations.

Operations that can legitimately fail return one of these variants instead of
raising. ``Ok`` is truthy and every failure variant is falsy, so callers can
branch with a plain ``if``; ``match`` works as well::

    match catalog.restore(article_id):
        case Ok(value=article):
            ...
        case AlreadyLive():
            ...
        case NotFound(reason=reason):
            ...

``unwrap()`` converts a failure into the matching exception from
``articat.domain.shared.error`` for callers that prefer exceptions.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from articat.domain.shared.error import ConflictError, NotFoundError, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the produced value."""

    value: T

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """No live article (or nothing to restore) for the given id."""

    id: int
    reason: str = "no live article"

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise NotFoundError(f"Article {self.id}: {self.reason}")


@dataclass(frozen=True)
class AlreadyLive:
    """Restore was requested for an id that currently has a live article."""

    id: int

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise ConflictError(f"Article {self.id} is live and cannot be restored")


@dataclass(frozen=True)
class InvalidReference:
    """A required article id was not supplied."""

    reason: str = "article id is required"

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise ValidationError(self.reason, field="id")


Failure = NotFound | AlreadyLive | InvalidReference

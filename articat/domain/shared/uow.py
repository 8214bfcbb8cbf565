from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class UoW(ABC):
    """Unit of work: commits on a clean exit, rolls back when the body raises."""

    @abstractmethod
    def begin(self) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> "UoW":
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]] = None,
        exc: Optional[BaseException] = None,
        tb: Optional[TracebackType] = None,
    ) -> None:
        self.rollback() if exc else self.commit()

"""Unit tests for the UoW base class."""

import pytest

from articat.domain.shared.uow import UoW


class RecordingUoW(UoW):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def begin(self) -> None:
        self.calls.append("begin")

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")


class TestUoW:
    def test_commits_on_clean_exit(self):
        uow = RecordingUoW()

        with uow:
            pass

        assert uow.calls == ["begin", "commit"]

    def test_rolls_back_on_error(self):
        uow = RecordingUoW()

        with pytest.raises(RuntimeError):
            with uow:
                raise RuntimeError("boom")

        assert uow.calls == ["begin", "rollback"]

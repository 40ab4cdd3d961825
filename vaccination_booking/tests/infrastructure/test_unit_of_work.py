import io
import threading

import pytest

from vaccination_booking.infrastructure.loggers import ConsoleLogger
from vaccination_booking.infrastructure.unit_of_work import InMemoryUnitOfWork


def test_lock_is_held_inside_context(uow: InMemoryUnitOfWork):
    assert not uow.locked
    with uow:
        assert uow.locked
    assert not uow.locked
    assert uow.committed == 1


def test_exception_rolls_back_and_releases_lock(uow: InMemoryUnitOfWork):
    with pytest.raises(RuntimeError):
        with uow:
            raise RuntimeError("boom")

    assert not uow.locked
    assert uow.rolled_back == 1
    assert uow.committed == 0


def test_other_threads_wait_for_the_lock(uow: InMemoryUnitOfWork):
    """Тест: второй поток не входит в единицу работы, пока первая не завершена."""
    entered = threading.Event()

    def worker():
        with uow:
            entered.set()

    with uow:
        thread = threading.Thread(target=worker)
        thread.start()
        assert not entered.wait(timeout=0.2)

    thread.join(timeout=5)
    assert entered.is_set()


def test_commit_and_rollback_are_logged():
    stream = io.StringIO()
    uow = InMemoryUnitOfWork(logger=ConsoleLogger(level="DEBUG", stream=stream))

    with uow:
        pass
    with pytest.raises(ValueError):
        with uow:
            raise ValueError()

    assert "[DEBUG] UnitOfWork committed" in stream.getvalue()
    assert "[DEBUG] UnitOfWork rolled back" in stream.getvalue()


def test_logging_happens_outside_the_lock():
    """Тест: строки commit/rollback пишутся в лог после освобождения блокировки."""
    seen = []

    class LockCheckingLogger(ConsoleLogger):
        def debug(self, message, **kwargs):
            seen.append((message, uow.locked))

    uow = InMemoryUnitOfWork(logger=LockCheckingLogger(level="DEBUG"))

    with uow:
        pass
    with pytest.raises(ValueError):
        with uow:
            raise ValueError()

    assert seen == [
        ("UnitOfWork committed", False),
        ("UnitOfWork rolled back", False),
    ]

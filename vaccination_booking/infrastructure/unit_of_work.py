from threading import Lock
from typing import Optional

from vaccination_booking.application.interfaces import ILogger
from vaccination_booking.application.repositories import (
    AppointmentRepository,
    CapacityLedger,
    CenterRepository,
    UnitOfWork,
    UserRepository,
)
from vaccination_booking.infrastructure.loggers import ConsoleLogger
from vaccination_booking.infrastructure.repositories import (
    InMemoryAppointmentRepository,
    InMemoryCapacityLedger,
    InMemoryCenterRepository,
    InMemoryUserRepository,
)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Единица работы над хранилищем в памяти.

    Владеет единственной блокировкой хранилища. `with uow:` захватывает её
    на всё время операции, поэтому любые последовательности
    "проверить, затем изменить" атомарны. Блокировка не реентерабельна:
    вложенный `with` в том же потоке приведёт к взаимоблокировке.
    """

    def __init__(
        self,
        users: Optional[UserRepository] = None,
        centers: Optional[CenterRepository] = None,
        capacity: Optional[CapacityLedger] = None,
        appointments: Optional[AppointmentRepository] = None,
        logger: Optional[ILogger] = None,
    ):
        self.users = users or InMemoryUserRepository()
        self.centers = centers or InMemoryCenterRepository()
        self.capacity = capacity or InMemoryCapacityLedger()
        self.appointments = appointments or InMemoryAppointmentRepository()
        self._logger = logger or ConsoleLogger()
        self._lock = Lock()
        self.committed = 0
        self.rolled_back = 0

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    def commit(self) -> None:
        """Фиксирует операцию. Изменения уже применены к хранилищу."""
        self.committed += 1

    def rollback(self) -> None:
        """
        Завершает отклонённую операцию.

        Отменять нечего: все проверки выполняются до первого изменения,
        поэтому отклонённая операция хранилище не трогала.
        """
        self.rolled_back += 1

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._lock.release()
        # Вывод в лог только после освобождения блокировки
        if exc_type is None:
            self._logger.debug("UnitOfWork committed")
        else:
            self._logger.debug("UnitOfWork rolled back")
        return False  # Пробрасываем исключение дальше, если оно было

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from vaccination_booking.domain.models import Appointment, User, VaccinationCenter
from vaccination_booking.domain.value_objects import CenterId, Day, UserId


class UserRepository(ABC):
    """Абстрактный репозиторий пользователей."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Добавляет нового пользователя."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Находит пользователя по идентификатору."""
        raise NotImplementedError

    def exists(self, user_id: UserId) -> bool:
        return self.get_by_id(user_id) is not None


class CenterRepository(ABC):
    """Абстрактный репозиторий прививочных центров."""

    @abstractmethod
    def add(self, center: VaccinationCenter) -> None:
        """Добавляет новый центр."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, center_id: CenterId) -> Optional[VaccinationCenter]:
        """Находит центр по идентификатору."""
        raise NotImplementedError

    @abstractmethod
    def find_by_district(self, district: str) -> List[VaccinationCenter]:
        """Возвращает все центры района."""
        raise NotImplementedError

    def exists(self, center_id: CenterId) -> bool:
        return self.get_by_id(center_id) is not None


class CapacityLedger(ABC):
    """Остаток доз по центрам и дням."""

    @abstractmethod
    def add(self, center_id: CenterId, day: Day, doses: int) -> int:
        """Прибавляет дозы к остатку на день и возвращает новый остаток."""
        raise NotImplementedError

    @abstractmethod
    def remaining(self, center_id: CenterId, day: Day) -> int:
        """Остаток доз; ноль, если на день ничего не добавлялось."""
        raise NotImplementedError

    @abstractmethod
    def take_one(self, center_id: CenterId, day: Day) -> int:
        """Списывает одну дозу и возвращает новый остаток."""
        raise NotImplementedError

    @abstractmethod
    def release_one(self, center_id: CenterId, day: Day) -> int:
        """Возвращает одну дозу в остаток и возвращает новый остаток."""
        raise NotImplementedError

    @abstractmethod
    def schedule(self, center_id: CenterId) -> Dict[int, int]:
        """Копия остатков центра по дням."""
        raise NotImplementedError


class AppointmentRepository(ABC):
    """Записи на приём, сгруппированные по центрам в порядке создания."""

    @abstractmethod
    def add(self, appointment: Appointment) -> None:
        raise NotImplementedError

    @abstractmethod
    def find(
        self, center_id: CenterId, user_id: UserId, day: Day
    ) -> Optional[Appointment]:
        """Первая запись центра, совпадающая по пользователю и дню."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, appointment: Appointment) -> None:
        """Удаляет первую запись, равную переданной."""
        raise NotImplementedError

    @abstractmethod
    def list_for_center(self, center_id: CenterId) -> List[Appointment]:
        raise NotImplementedError


class UnitOfWork(ABC):
    """
    Единица работы над хранилищем.

    Вход в контекст захватывает общую блокировку хранилища,
    выход освобождает её. Репозитории доступны только внутри контекста.
    """

    users: UserRepository
    centers: CenterRepository
    capacity: CapacityLedger
    appointments: AppointmentRepository

    @abstractmethod
    def __enter__(self) -> "UnitOfWork":
        raise NotImplementedError

    @abstractmethod
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError

"""
Реализации репозиториев в памяти.

Репозитории не синхронизированы сами по себе: обращаться к ним можно
только внутри единицы работы, которая держит общую блокировку.
"""

from typing import Dict, List, Optional

from vaccination_booking.application.repositories import (
    AppointmentRepository,
    CapacityLedger,
    CenterRepository,
    UserRepository,
)
from vaccination_booking.domain.exceptions import (
    CapacityExhaustedError,
    DuplicateKeyError,
)
from vaccination_booking.domain.models import Appointment, User, VaccinationCenter
from vaccination_booking.domain.value_objects import CenterId, Day, UserId


class InMemoryUserRepository(UserRepository):
    """Хранение пользователей в словаре."""

    def __init__(self) -> None:
        self._users: Dict[UserId, User] = {}

    def add(self, user: User) -> None:
        if user.id in self._users:
            raise DuplicateKeyError(f"Пользователь с ID {user.id} уже существует.")
        self._users[user.id] = user

    def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)


class InMemoryCenterRepository(CenterRepository):
    """Хранение центров в словаре, в порядке регистрации."""

    def __init__(self) -> None:
        self._centers: Dict[CenterId, VaccinationCenter] = {}

    def add(self, center: VaccinationCenter) -> None:
        if center.id in self._centers:
            raise DuplicateKeyError(f"Центр с ID {center.id} уже существует.")
        self._centers[center.id] = center

    def get_by_id(self, center_id: CenterId) -> Optional[VaccinationCenter]:
        return self._centers.get(center_id)

    def find_by_district(self, district: str) -> List[VaccinationCenter]:
        return [
            center for center in self._centers.values()
            if center.district == district
        ]


class InMemoryCapacityLedger(CapacityLedger):
    """Остатки доз: центр -> день -> количество."""

    def __init__(self) -> None:
        self._remaining: Dict[CenterId, Dict[int, int]] = {}

    def add(self, center_id: CenterId, day: Day, doses: int) -> int:
        days = self._remaining.setdefault(center_id, {})
        days[day.value] = days.get(day.value, 0) + doses
        return days[day.value]

    def remaining(self, center_id: CenterId, day: Day) -> int:
        return self._remaining.get(center_id, {}).get(day.value, 0)

    def take_one(self, center_id: CenterId, day: Day) -> int:
        # Остаток не может уйти в минус
        current = self.remaining(center_id, day)
        if current <= 0:
            raise CapacityExhaustedError(
                f"В центре {center_id} нет свободных доз на день {day.value}."
            )
        self._remaining[center_id][day.value] = current - 1
        return current - 1

    def release_one(self, center_id: CenterId, day: Day) -> int:
        days = self._remaining.setdefault(center_id, {})
        days[day.value] = days.get(day.value, 0) + 1
        return days[day.value]

    def schedule(self, center_id: CenterId) -> Dict[int, int]:
        return dict(self._remaining.get(center_id, {}))


class InMemoryAppointmentRepository(AppointmentRepository):
    """Списки записей по центрам; поиск линейный, находит первое совпадение."""

    def __init__(self) -> None:
        self._appointments: Dict[CenterId, List[Appointment]] = {}

    def add(self, appointment: Appointment) -> None:
        self._appointments.setdefault(appointment.center_id, []).append(appointment)

    def find(
        self, center_id: CenterId, user_id: UserId, day: Day
    ) -> Optional[Appointment]:
        for appointment in self._appointments.get(center_id, []):
            if appointment.matches(user_id, day):
                return appointment
        return None

    def remove(self, appointment: Appointment) -> None:
        # list.remove удаляет только первое вхождение
        self._appointments.get(appointment.center_id, []).remove(appointment)

    def list_for_center(self, center_id: CenterId) -> List[Appointment]:
        return list(self._appointments.get(center_id, []))

from typing import List, Union

from vaccination_booking.application.interfaces import ILogger
from vaccination_booking.application.repositories import UnitOfWork
from vaccination_booking.application.results import OperationResult
from vaccination_booking.domain.exceptions import (
    AppointmentNotFoundError,
    CapacityExhaustedError,
    DuplicateBookingError,
    DuplicateKeyError,
    IneligibleError,
    NoBookingsError,
    NotFoundError,
    VaccinationDomainError,
)
from vaccination_booking.domain.models import Appointment, User, VaccinationCenter
from vaccination_booking.domain.value_objects import (
    Age,
    CenterId,
    Day,
    DoseCount,
    RawNumber,
    UserId,
)

DEFAULT_ELIGIBILITY_AGE = 18


def _center_id(raw: Union[str, CenterId]) -> CenterId:
    return raw if isinstance(raw, CenterId) else CenterId(raw)


def _user_id(raw: Union[str, UserId]) -> UserId:
    return raw if isinstance(raw, UserId) else UserId(raw)


class BookingEngine:
    """
    Сервис приложения для записи на вакцинацию.

    Каждая публичная операция целиком выполняется внутри единицы работы,
    то есть под общей блокировкой хранилища: проверки и изменение состояния
    атомарны относительно любых других операций. Все проверки выполняются
    до первого изменения, поэтому неудачная операция не меняет хранилище.
    Доменные ошибки возвращаются в `OperationResult`, а не выбрасываются.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        logger: ILogger,
        eligibility_age: int = DEFAULT_ELIGIBILITY_AGE,
    ):
        if eligibility_age < DEFAULT_ELIGIBILITY_AGE:
            raise ValueError(
                f"Порог возраста не может быть меньше {DEFAULT_ELIGIBILITY_AGE}."
            )
        self._uow = uow
        self._logger = logger
        self._eligibility_age = eligibility_age

    @property
    def eligibility_age(self) -> int:
        return self._eligibility_age

    def _refused(self, operation: str, exc: VaccinationDomainError) -> OperationResult:
        self._logger.warning(
            f"Операция {operation} отклонена: {exc.message}", kind=exc.kind.value
        )
        return OperationResult.failure(exc)

    def _get_center(self, uow: UnitOfWork, center_id: CenterId) -> VaccinationCenter:
        center = uow.centers.get_by_id(center_id)
        if center is None:
            raise NotFoundError(f"Центр {center_id} не найден.")
        return center

    def _get_user(self, uow: UnitOfWork, user_id: UserId) -> User:
        user = uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"Пользователь {user_id} не найден.")
        return user

    # --- Регистрация ---

    def register_user(
        self,
        user_id: Union[str, UserId],
        name: str,
        gender: str,
        age: RawNumber,
        state: str,
        district: str,
    ) -> OperationResult:
        """Регистрирует пользователя старше порога возраста."""
        try:
            with self._uow as uow:
                uid = _user_id(user_id)
                if uow.users.exists(uid):
                    raise DuplicateKeyError(f"Пользователь с ID {uid} уже существует.")
                parsed_age = Age.parse(age)
                if not parsed_age.is_older_than(self._eligibility_age):
                    raise IneligibleError(
                        f"Возраст пользователя должен быть больше {self._eligibility_age}."
                    )
                user = User(
                    id=uid,
                    name=name,
                    age=parsed_age.value,
                    gender=gender,
                    district=district,
                    state=state,
                )
                uow.users.add(user)
        except VaccinationDomainError as exc:
            return self._refused("register_user", exc)

        self._logger.info("Пользователь зарегистрирован", user_id=str(user.id))
        return OperationResult.success(user)

    def register_center(
        self, state: str, district: str, center_id: Union[str, CenterId]
    ) -> OperationResult:
        """Регистрирует центр без вместимости и без записей."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                if uow.centers.exists(cid):
                    raise DuplicateKeyError(f"Центр с ID {cid} уже существует.")
                center = VaccinationCenter(id=cid, district=district, state=state)
                uow.centers.add(center)
        except VaccinationDomainError as exc:
            return self._refused("register_center", exc)

        self._logger.info("Центр зарегистрирован", center_id=str(center.id))
        return OperationResult.success(center)

    # --- Вместимость и записи ---

    def add_capacity(
        self, center_id: Union[str, CenterId], day: RawNumber, capacity: RawNumber
    ) -> OperationResult:
        """Прибавляет дозы к остатку центра на день. Данные результата: новый остаток."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                self._get_center(uow, cid)
                parsed_day = Day.parse(day)
                doses = DoseCount.parse(capacity)
                remaining = uow.capacity.add(cid, parsed_day, doses.value)
        except VaccinationDomainError as exc:
            return self._refused("add_capacity", exc)

        self._logger.info(
            "Вместимость добавлена",
            center_id=str(cid),
            day=parsed_day.value,
            added=doses.value,
            remaining=remaining,
        )
        return OperationResult.success(remaining)

    def book_appointment(
        self,
        center_id: Union[str, CenterId],
        day: RawNumber,
        user_id: Union[str, UserId],
    ) -> OperationResult:
        """Записывает пользователя в центр на день и списывает одну дозу."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                self._get_center(uow, cid)
                parsed_day = Day.parse(day)
                user = self._get_user(uow, _user_id(user_id))
                if not user.is_eligible(self._eligibility_age):
                    raise IneligibleError(f"Пользователь {user.id} не проходит по возрасту.")
                if uow.capacity.remaining(cid, parsed_day) <= 0:
                    raise CapacityExhaustedError(
                        f"В центре {cid} нет свободных доз на день {parsed_day.value}."
                    )
                if uow.appointments.find(cid, user.id, parsed_day) is not None:
                    raise DuplicateBookingError(
                        f"Пользователь {user.id} уже записан на день {parsed_day.value}."
                    )
                appointment = Appointment(
                    center_id=cid, user_id=user.id, day=parsed_day.value
                )
                uow.appointments.add(appointment)
                remaining = uow.capacity.take_one(cid, parsed_day)
        except VaccinationDomainError as exc:
            return self._refused("book_appointment", exc)

        self._logger.info(
            "Запись подтверждена",
            center_id=str(cid),
            user_id=str(user.id),
            day=parsed_day.value,
            remaining=remaining,
        )
        return OperationResult.success(appointment)

    def cancel_appointment(
        self,
        center_id: Union[str, CenterId],
        day: RawNumber,
        user_id: Union[str, UserId],
    ) -> OperationResult:
        """Отменяет первую совпадающую запись и возвращает дозу в остаток."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                self._get_center(uow, cid)
                parsed_day = Day.parse(day)
                user = self._get_user(uow, _user_id(user_id))
                appointment = uow.appointments.find(cid, user.id, parsed_day)
                if appointment is None:
                    raise AppointmentNotFoundError(
                        f"Запись пользователя {user.id} на день {parsed_day.value} не найдена."
                    )
                uow.appointments.remove(appointment)
                remaining = uow.capacity.release_one(cid, parsed_day)
        except VaccinationDomainError as exc:
            return self._refused("cancel_appointment", exc)

        self._logger.info(
            "Запись отменена",
            center_id=str(cid),
            user_id=str(user.id),
            day=parsed_day.value,
            remaining=remaining,
        )
        return OperationResult.success(appointment)

    # --- Запросы ---

    def list_centers_by_district(self, district: str) -> List[VaccinationCenter]:
        """Центры района. Пустой список не считается ошибкой."""
        with self._uow as uow:
            return uow.centers.find_by_district(district)

    def list_bookings(
        self, center_id: Union[str, CenterId], day: RawNumber
    ) -> OperationResult:
        """Все записи центра на указанный день."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                self._get_center(uow, cid)
                parsed_day = Day.parse(day)
                appointments = uow.appointments.list_for_center(cid)
                if not appointments:
                    raise NoBookingsError(f"Для центра {cid} нет ни одной записи.")
                on_day = [a for a in appointments if a.day == parsed_day.value]
                if not on_day:
                    raise NoBookingsError(f"На день {parsed_day.value} записей нет.")
        except VaccinationDomainError as exc:
            return self._refused("list_bookings", exc)
        return OperationResult.success(on_day)

    def get_user(self, user_id: Union[str, UserId]) -> OperationResult:
        try:
            with self._uow as uow:
                user = self._get_user(uow, _user_id(user_id))
        except VaccinationDomainError as exc:
            return self._refused("get_user", exc)
        return OperationResult.success(user)

    def get_center(self, center_id: Union[str, CenterId]) -> OperationResult:
        try:
            with self._uow as uow:
                center = self._get_center(uow, _center_id(center_id))
        except VaccinationDomainError as exc:
            return self._refused("get_center", exc)
        return OperationResult.success(center)

    def capacity_schedule(self, center_id: Union[str, CenterId]) -> OperationResult:
        """Остатки доз центра по дням."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                self._get_center(uow, cid)
                schedule = uow.capacity.schedule(cid)
        except VaccinationDomainError as exc:
            return self._refused("capacity_schedule", exc)
        return OperationResult.success(schedule)

    def center_appointments(self, center_id: Union[str, CenterId]) -> OperationResult:
        """Все записи центра в порядке создания."""
        try:
            with self._uow as uow:
                cid = _center_id(center_id)
                self._get_center(uow, cid)
                appointments = uow.appointments.list_for_center(cid)
        except VaccinationDomainError as exc:
            return self._refused("center_appointments", exc)
        return OperationResult.success(appointments)

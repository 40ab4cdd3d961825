"""
Сущности домена записи на вакцинацию.

Все сущности неизменяемы: после регистрации пользователь и центр не меняются,
а запись на приём либо существует, либо удаляется целиком при отмене.
Ссылки между сущностями хранятся только как идентификаторы.
"""

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from vaccination_booking.domain.value_objects import CenterId, Day, UserId


class User(BaseModel):
    """Зарегистрированный пользователь."""

    model_config = ConfigDict(frozen=True)

    id: UserId
    name: str
    age: int
    gender: str
    district: str
    state: str

    @field_serializer("id")
    def _serialize_id(self, value: UserId) -> str:
        return value.value

    def is_eligible(self, eligibility_age: int) -> bool:
        """Пользователь может записаться, только если он строго старше порога."""
        return self.age > eligibility_age


class VaccinationCenter(BaseModel):
    """Прививочный центр."""

    model_config = ConfigDict(frozen=True)

    id: CenterId
    district: str
    state: str

    @field_serializer("id")
    def _serialize_id(self, value: CenterId) -> str:
        return value.value


class Appointment(BaseModel):
    """Запись пользователя в центр на конкретный день."""

    model_config = ConfigDict(frozen=True)

    center_id: CenterId
    user_id: UserId
    day: int = Field(..., ge=0)

    @field_serializer("center_id", "user_id")
    def _serialize_ids(self, value) -> str:
        return value.value

    def matches(self, user_id: UserId, day: Day) -> bool:
        return self.user_id == user_id and self.day == day.value

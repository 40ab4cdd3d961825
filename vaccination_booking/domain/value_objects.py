import re
from dataclasses import dataclass
from typing import Optional, Union

from vaccination_booking.domain.exceptions import InvalidInputError

RawNumber = Union[str, int]

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def _parse_int(raw: RawNumber, *, signed: bool) -> Optional[int]:
    """Разбирает целое число из строки или int, возвращает None при ошибке."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        if not signed and raw < 0:
            return None
        return raw
    if not isinstance(raw, str):
        return None
    pattern = _SIGNED_INT if signed else _UNSIGNED_INT
    if pattern.fullmatch(raw) is None:
        return None
    try:
        return int(raw)
    except ValueError:
        # Слишком длинная строка цифр (ограничение int() на число знаков)
        return None


@dataclass(frozen=True)
class UserId:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidInputError("Идентификатор пользователя не может быть пустым.")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CenterId:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidInputError("Идентификатор центра не может быть пустым.")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Day:
    """Номер дня, на который выделяются дозы и записываются пользователи."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise InvalidInputError("День не может быть отрицательным.")

    @classmethod
    def parse(cls, raw: RawNumber) -> "Day":
        value = _parse_int(raw, signed=False)
        if value is None:
            raise InvalidInputError(f"Некорректное значение дня: {raw!r}.")
        return cls(value)


@dataclass(frozen=True)
class DoseCount:
    """Количество доз, добавляемых центру на день."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise InvalidInputError("Количество доз не может быть отрицательным.")

    @classmethod
    def parse(cls, raw: RawNumber) -> "DoseCount":
        value = _parse_int(raw, signed=False)
        if value is None:
            raise InvalidInputError(f"Некорректное значение вместимости: {raw!r}.")
        return cls(value)


@dataclass(frozen=True)
class Age:
    """Возраст пользователя. Отрицательное значение разбирается, но не проходит проверку."""

    value: int

    @classmethod
    def parse(cls, raw: RawNumber) -> "Age":
        value = _parse_int(raw, signed=True)
        if value is None:
            raise InvalidInputError(f"Некорректное значение возраста: {raw!r}.")
        return cls(value)

    def is_older_than(self, threshold: int) -> bool:
        return self.value > threshold

"""
Результаты операций движка бронирования.

Каждая операция возвращает признак успеха и, при неудаче,
структурированную ошибку с видом из `ErrorKind`.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from vaccination_booking.domain.exceptions import ErrorKind, VaccinationDomainError


class EngineError(BaseModel):
    """Описание ошибки операции."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @classmethod
    def from_exception(cls, exc: VaccinationDomainError) -> "EngineError":
        return cls(kind=exc.kind, message=exc.message)


class OperationResult(BaseModel):
    """Итог вызова операции: ok, ошибка и данные для вызывающей стороны."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    error: Optional[EngineError] = None
    data: Any = None

    @classmethod
    def success(cls, data: Any = None) -> "OperationResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, exc: VaccinationDomainError) -> "OperationResult":
        return cls(ok=False, error=EngineError.from_exception(exc))

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

"""
Контроллер текстовых команд.

Переводит разобранные инструкции в вызовы `BookingEngine` и формирует ответ
в виде словаря. После успешной команды ответ содержит затронутое состояние:
пользователя или центр после регистрации, остатки центра после добавления
вместимости, список записей центра после записи или отмены.
"""

from typing import Any, Callable, Dict, List

from pydantic import BaseModel

from vaccination_booking.application.results import OperationResult
from vaccination_booking.application.services import BookingEngine
from vaccination_booking.interfaces.commands import (
    Instruction,
    InvalidInstructionError,
    parse_instruction,
)

Response = Dict[str, Any]


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, list):
        return [_dump(item) for item in data]
    return data


def _success(message: str, data: Any = None) -> Response:
    return {"status": "success", "message": message, "data": _dump(data)}


def _error(result: OperationResult) -> Response:
    return {
        "status": "error",
        "kind": result.error.kind.value,
        "message": result.error.message,
    }


def _invalid(message: str) -> Response:
    return {"status": "invalid", "message": message}


class CommandController:
    """Обрабатывает строки инструкций поверх движка бронирования."""

    def __init__(self, engine: BookingEngine):
        self._engine = engine
        self._handlers: Dict[Instruction, Callable[..., Response]] = {
            Instruction.ADD_USER: self.add_user,
            Instruction.ADD_VACCINATION_CENTER: self.add_vaccination_center,
            Instruction.ADD_CAPACITY: self.add_capacity,
            Instruction.BOOK_VACCINATION: self.book_vaccination,
            Instruction.CANCEL_BOOKING: self.cancel_booking,
            Instruction.LIST_VACCINATION_CENTERS: self.list_vaccination_centers,
            Instruction.LIST_ALL_BOOKINGS: self.list_all_bookings,
        }

    def handle_line(self, line: str) -> Response:
        try:
            command = parse_instruction(line)
        except InvalidInstructionError as e:
            return _invalid(str(e))
        return self._handlers[command.instruction](*command.args)

    def add_user(
        self, user_id: str, name: str, gender: str, age: str, state: str, district: str
    ) -> Response:
        result = self._engine.register_user(user_id, name, gender, age, state, district)
        if not result.ok:
            return _error(result)
        return _success(f"Пользователь {user_id} зарегистрирован.", result.data)

    def add_vaccination_center(self, state: str, district: str, center_id: str) -> Response:
        result = self._engine.register_center(state, district, center_id)
        if not result.ok:
            return _error(result)
        return _success(f"Центр {center_id} зарегистрирован.", result.data)

    def add_capacity(self, center_id: str, day: str, capacity: str) -> Response:
        result = self._engine.add_capacity(center_id, day, capacity)
        if not result.ok:
            return _error(result)
        schedule = self._engine.capacity_schedule(center_id)
        return _success(
            f"Остаток доз центра {center_id} на день {day}: {result.data}.",
            schedule.data,
        )

    def book_vaccination(self, center_id: str, day: str, user_id: str) -> Response:
        result = self._engine.book_appointment(center_id, day, user_id)
        if not result.ok:
            return _error(result)
        appointments = self._engine.center_appointments(center_id)
        return _success("Запись подтверждена.", appointments.data)

    def cancel_booking(self, center_id: str, day: str, user_id: str) -> Response:
        result = self._engine.cancel_appointment(center_id, day, user_id)
        if not result.ok:
            return _error(result)
        appointments = self._engine.center_appointments(center_id)
        return _success("Запись отменена.", appointments.data)

    def list_vaccination_centers(self, district: str) -> Response:
        centers = self._engine.list_centers_by_district(district)
        if not centers:
            return _success(f"В районе {district} центров не найдено.", [])
        return _success(f"Центры района {district}: {len(centers)}.", centers)

    def list_all_bookings(self, day: str, center_id: str) -> Response:
        result = self._engine.list_bookings(center_id, day)
        if not result.ok:
            return _error(result)
        return _success(
            f"Записи центра {center_id} на день {day}: {len(result.data)}.", result.data
        )


def _render_item(item: Any) -> str:
    if isinstance(item, dict):
        return ", ".join(f"{key}={value}" for key, value in item.items())
    return str(item)


def _render_data(data: Any) -> List[str]:
    if data is None:
        return []
    if isinstance(data, list):
        return [f"  - {_render_item(item)}" for item in data]
    if isinstance(data, dict) and all(isinstance(k, int) for k in data):
        # Остатки по дням
        return [f"  день {day}: {doses}" for day, doses in sorted(data.items())]
    return [f"  {_render_item(data)}"]


def format_response(response: Response) -> str:
    """Превращает ответ контроллера в текст для консоли."""
    status = response["status"]
    if status == "success":
        lines: List[str] = [f"Успешно: {response['message']}"]
        lines.extend(_render_data(response.get("data")))
        return "\n".join(lines)
    if status == "error":
        return f"Ошибка [{response['kind']}]: {response['message']}"
    return f"Неверная инструкция: {response['message']}"

"""
Разбор текстовых инструкций.

Строка делится по пробелам, первое слово выбирает инструкцию, остальные
слова передаются движку как позиционные аргументы. Смысловая проверка
аргументов (числа, возраст, существование) выполняется движком.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Instruction(str, Enum):
    """Поддерживаемые инструкции и число их аргументов."""

    ADD_USER = "ADD_USER"
    ADD_VACCINATION_CENTER = "ADD_VACCINATION_CENTER"
    ADD_CAPACITY = "ADD_CAPACITY"
    BOOK_VACCINATION = "BOOK_VACCINATION"
    CANCEL_BOOKING = "CANCEL_BOOKING"
    LIST_VACCINATION_CENTERS = "LIST_VACCINATION_CENTERS"
    LIST_ALL_BOOKINGS = "LIST_ALL_BOOKINGS"

    @property
    def arity(self) -> int:
        return _ARITY[self]


_ARITY = {
    Instruction.ADD_USER: 6,  # id name gender age state district
    Instruction.ADD_VACCINATION_CENTER: 3,  # state district id
    Instruction.ADD_CAPACITY: 3,  # centerId day capacity
    Instruction.BOOK_VACCINATION: 3,  # centerId day userId
    Instruction.CANCEL_BOOKING: 3,  # centerId day userId
    Instruction.LIST_VACCINATION_CENTERS: 1,  # district
    Instruction.LIST_ALL_BOOKINGS: 2,  # day centerId
}


class InvalidInstructionError(ValueError):
    """Строку нельзя превратить в инструкцию."""

    pass


@dataclass(frozen=True)
class ParsedCommand:
    instruction: Instruction
    args: Tuple[str, ...]


def parse_instruction(line: str) -> ParsedCommand:
    """Разбирает строку в инструкцию с аргументами."""
    tokens = line.split()
    if not tokens:
        raise InvalidInstructionError("Пустая инструкция.")

    name, args = tokens[0], tuple(tokens[1:])
    try:
        instruction = Instruction(name)
    except ValueError:
        raise InvalidInstructionError(f"Неизвестная инструкция: {name}.")

    if len(args) != instruction.arity:
        raise InvalidInstructionError(
            f"{name} ожидает аргументов: {instruction.arity}, получено: {len(args)}."
        )
    return ParsedCommand(instruction=instruction, args=args)

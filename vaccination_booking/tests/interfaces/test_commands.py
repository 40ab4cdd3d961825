import pytest

from vaccination_booking.interfaces.commands import (
    Instruction,
    InvalidInstructionError,
    ParsedCommand,
    parse_instruction,
)


def test_parse_add_user():
    command = parse_instruction("ADD_USER U1 Alice F 30 KA Bangalore\n")

    assert command == ParsedCommand(
        instruction=Instruction.ADD_USER,
        args=("U1", "Alice", "F", "30", "KA", "Bangalore"),
    )


def test_parse_collapses_whitespace():
    command = parse_instruction("  BOOK_VACCINATION\tC1   5  U1  ")

    assert command.instruction is Instruction.BOOK_VACCINATION
    assert command.args == ("C1", "5", "U1")


def test_list_all_bookings_takes_day_first():
    command = parse_instruction("LIST_ALL_BOOKINGS 5 C1")

    assert command.args == ("5", "C1")


@pytest.mark.parametrize("line", ["", "   ", "\n"])
def test_empty_line_is_invalid(line):
    with pytest.raises(InvalidInstructionError, match="Пустая инструкция"):
        parse_instruction(line)


@pytest.mark.parametrize("line", ["DELETE_USER U1", "add_user U1 A F 30 KA B"])
def test_unknown_instruction_is_invalid(line):
    """Тест: имена инструкций сравниваются с учётом регистра."""
    with pytest.raises(InvalidInstructionError, match="Неизвестная инструкция"):
        parse_instruction(line)


@pytest.mark.parametrize(
    "line",
    ["ADD_USER U1 Alice F 30 KA", "ADD_CAPACITY C1 5", "LIST_VACCINATION_CENTERS A B"],
)
def test_wrong_argument_count_is_invalid(line):
    with pytest.raises(InvalidInstructionError, match="ожидает аргументов"):
        parse_instruction(line)


def test_every_instruction_has_arity():
    assert {i.arity for i in Instruction} <= {1, 2, 3, 6}

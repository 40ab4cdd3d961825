"""
Слой представления: разбор инструкций и консольный контроллер.
"""

from .commands import Instruction, InvalidInstructionError, ParsedCommand, parse_instruction
from .controller import CommandController, format_response

__all__ = [
    "CommandController",
    "Instruction",
    "InvalidInstructionError",
    "ParsedCommand",
    "format_response",
    "parse_instruction",
]

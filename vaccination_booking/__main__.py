"""
Консольная точка входа.

Читает инструкции построчно из файла или stdin и печатает ответ
на каждую. Работа завершается по концу ввода или по EXIT / QUIT.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from vaccination_booking.bootstrap import bootstrap_app
from vaccination_booking.config import Settings
from vaccination_booking.interfaces.controller import format_response

STOP_WORDS = {"EXIT", "QUIT"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vaccination-booking",
        description="Запись на вакцинацию: команды читаются построчно.",
    )
    parser.add_argument(
        "--input",
        "-i",
        help="Файл с инструкциями (по умолчанию stdin)",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Не выводить приглашение перед каждой строкой",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Порог логирования (перекрывает VACCINATION_LOG_LEVEL)",
    )
    return parser


def run(
    stream: TextIO,
    out: TextIO,
    settings: Optional[Settings] = None,
    show_prompt: bool = True,
) -> int:
    """Обрабатывает все строки потока. Возвращает количество выполненных инструкций."""
    app = bootstrap_app(settings)
    handled = 0
    while True:
        if show_prompt:
            print(app.settings.PROMPT, end="", file=out, flush=True)
        line = stream.readline()
        if not line:
            break
        if line.strip() in STOP_WORDS:
            break
        response = app.controller.handle_line(line)
        print(format_response(response), file=out, flush=True)
        handled += 1
    return handled


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    settings = Settings(**overrides)

    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            run(f, sys.stdout, settings, show_prompt=False)
    else:
        show_prompt = not args.no_prompt and sys.stdin.isatty()
        run(sys.stdin, sys.stdout, settings, show_prompt=show_prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())

import json
import sys
from typing import Any, Optional, TextIO

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class ConsoleLogger:
    """
    Простая реализация логгера, выводящая сообщения в поток.

    По умолчанию пишет в stderr, чтобы не смешиваться с ответами на команды.
    Сообщения ниже порога `level` отбрасываются.
    """

    def __init__(self, level: str = "INFO", stream: Optional[TextIO] = None):
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {level}")
        self.level = level
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stderr читается при каждой записи, чтобы работал перехват вывода
        return self._stream if self._stream is not None else sys.stderr

    def _log(self, level: str, message: str, context: dict) -> None:
        if LEVELS[level] < LEVELS[self.level]:
            return
        print(f"[{level}] {message}", file=self.stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, ensure_ascii=False, indent=2),
                file=self.stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, kwargs)

from dataclasses import dataclass
from typing import Optional

from vaccination_booking.application.interfaces import ILogger
from vaccination_booking.application.services import BookingEngine
from vaccination_booking.config import Settings
from vaccination_booking.infrastructure.loggers import ConsoleLogger
from vaccination_booking.infrastructure.unit_of_work import InMemoryUnitOfWork
from vaccination_booking.interfaces.controller import CommandController


@dataclass
class Application:
    settings: Settings
    logger: ILogger
    engine: BookingEngine
    controller: CommandController


def bootstrap_app(
    settings: Optional[Settings] = None, logger: Optional[ILogger] = None
) -> Application:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings()
    logger = logger or ConsoleLogger(level=settings.LOG_LEVEL)

    # 1. Хранилище и единица работы с общей блокировкой
    uow = InMemoryUnitOfWork(logger=logger)

    # 2. Сервис приложения
    engine = BookingEngine(uow, logger, eligibility_age=settings.ELIGIBILITY_AGE)

    # 3. Контроллер команд
    controller = CommandController(engine)

    logger.debug(f"{settings.APP_NAME} initialized", log_level=settings.LOG_LEVEL)
    return Application(
        settings=settings, logger=logger, engine=engine, controller=controller
    )

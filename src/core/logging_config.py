"""
Logging Configuration

Библиотека только создаёт модульные логгеры (logging.getLogger(__name__))
и никогда не настраивает handlers при импорте. Хост-программа может
вызвать setup_logging() для структурированного JSON-вывода.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Final

ROOT_LOGGER_NAME: Final[str] = "src.core"


class JSONFormatter(logging.Formatter):
    """JSON formatter для структурированного логирования"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", logger_name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Настройка JSON-логирования для логгеров ядра.

    Повторный вызов заменяет ранее установленные handlers (без дублей).

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Имя корневого логгера

    Returns:
        Настроенный логгер
    """
    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
    return logger

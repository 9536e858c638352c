"""
Logger — настройка логирования для demo runner

Уровень берётся из аргумента или переменной окружения LOG_LEVEL.
Неизвестное имя уровня (например, LOG_LEVEL=verbose) не роняет импорт:
используется LOG_LEVEL_DEFAULT.
"""

import logging
import os
import sys
from typing import Final, Optional

__all__ = ["logger", "resolve_level", "setup_logger"]

LOG_LEVEL_DEFAULT: Final[int] = logging.INFO
LOG_FORMAT_DEFAULT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[str]) -> int:
    """
    Имя уровня → числовой уровень logging.

    Args:
        level: Имя уровня в любом регистре (DEBUG, info, ...) или None

    Returns:
        Числовой уровень; LOG_LEVEL_DEFAULT для None и неизвестных имён

    Examples:
        >>> resolve_level("debug")
        10
        >>> resolve_level("verbose")
        20
    """
    if not level:
        return LOG_LEVEL_DEFAULT
    resolved = logging.getLevelName(level.strip().upper())
    # Для неизвестного имени getLevelName возвращает строку "Level VERBOSE"
    if not isinstance(resolved, int):
        return LOG_LEVEL_DEFAULT
    return resolved


def setup_logger(
    name: str = "numeric_ranges",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Настройка logger с выводом в stdout.

    Handler добавляется только при первом вызове для данного имени,
    повторные вызовы возвращают уже настроенный logger.

    Args:
        name: Имя logger
        level: Имя уровня (по умолчанию $LOG_LEVEL)
        format_string: Формат сообщений (по умолчанию LOG_FORMAT_DEFAULT)

    Returns:
        Настроенный logging.Logger
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or LOG_FORMAT_DEFAULT, datefmt=LOG_DATE_FORMAT)
    )
    log.addHandler(handler)
    log.setLevel(resolve_level(level or os.getenv("LOG_LEVEL")))
    log.propagate = False
    return log


# Logger проекта по умолчанию
logger = setup_logger()

"""
Logging Configuration
Настройка логгера приложения

Консоль получает короткие сообщения в stderr, чтобы не смешивать их
с выводом команд (--list, --dry-run); файл лога - полный формат.
"""
import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "enum_editor"
CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Настраивает логгер пакета

    Args:
        level: Уровень логирования (logging.DEBUG, logging.INFO, ...)
        log_file: Необязательный путь к файлу лога
        stream: Поток для консоли, по умолчанию sys.stderr
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger

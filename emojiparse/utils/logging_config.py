"""
Модуль настройки логирования через loguru
Конфигурирует обработчики логов для приложений, использующих библиотеку
"""

import sys
from pathlib import Path
from typing import Optional, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="logging_config")


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_rotation: str = "10 MB",
    log_retention: str = "30 days"
) -> None:
    """
    Настройка логирования через loguru

    Args:
        log_level: Уровень логирования
        log_file: Файл для логов (None - только консоль)
        log_rotation: Размер файла для ротации
        log_retention: Время хранения логов
    """

    # Удаляем стандартный handler
    logger.remove()

    # Console handler с цветной подсветкой
    logger.add(
        sys.stdout,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[module]}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
        filter=lambda record: record["extra"].get("module") is not None
    )

    # Fallback console handler для записей без модуля
    logger.add(
        sys.stdout,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}:{function}:{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
        filter=lambda record: record["extra"].get("module") is None
    )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # File handler для всех логов
        logger.add(
            log_path,
            level="DEBUG",
            format=(
                "{time:YYYY-MM-DD HH:mm:ss} | "
                "{level: <8} | "
                "{extra} | "
                "{message}"
            ),
            rotation=log_rotation,
            retention=log_retention,
            compression="zip",
            encoding="utf-8",
            enqueue=True
        )

    logger.debug("Уровень логирования: {}", log_level)
    if log_file is not None:
        logger.debug("Файл логов: {} (ротация {}, хранение {})", log_file, log_rotation, log_retention)


def setup_logging_from_config() -> None:
    """Настройка логирования из конфигурации"""
    # Импортируем здесь чтобы избежать циклических импортов
    from emojiparse.utils.config import get_config

    config = get_config()
    setup_logging(log_level=config.log_level)


def get_module_logger(module_name: str):
    """
    Получить логгер для конкретного модуля

    Args:
        module_name: Имя модуля

    Returns:
        Настроенный логгер с привязкой к модулю
    """
    return logger.bind(module=module_name)

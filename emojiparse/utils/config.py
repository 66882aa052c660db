"""
Модуль конфигурации библиотеки
Описывает и валидирует опции токенизатора (включаемые при старте, не при каждом вызове)
"""

import threading
from pathlib import Path
from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

# Локальные импорты
from emojiparse.utils.exceptions import (
    ConflictingDispatchModesError,
    InvalidConfigValueError,
)

# Настройка логгера модуля
logger = logger.bind(module="config")

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Config(BaseModel):
    """Конфигурация токенизатора с валидацией"""

    model_config = ConfigDict(frozen=True)

    # Разбор разметки Custom Emoji (<:name:id>)
    custom_emoji: bool = False

    # Режимы фонового выполнения (взаимоисключающие)
    asyncio_dispatch: bool = False
    thread_pool_dispatch: bool = False
    thread_pool_workers: int = 4

    # Каталог PNG-ассетов Twemoji для резолвера
    twemoji_dir: Optional[Path] = None

    # Logging
    log_level: str = "INFO"

    @field_validator("thread_pool_workers")
    @classmethod
    def validate_thread_pool_workers(cls, v: int) -> int:
        """Валидация размера пула потоков"""
        if v < 1:
            raise ValueError("thread_pool_workers должен быть не меньше 1")
        return v

    @field_validator("twemoji_dir")
    @classmethod
    def validate_twemoji_dir(cls, v: Optional[Path]) -> Optional[Path]:
        """Валидация каталога с ассетами"""
        if v is not None and not v.is_dir():
            raise ValueError(f"Каталог ассетов не найден: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидация уровня логирования"""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level должен быть одним из: {', '.join(VALID_LOG_LEVELS)}")
        return v.upper()

    @model_validator(mode="after")
    def validate_dispatch_modes(self) -> "Config":
        """Можно включить только один режим фонового выполнения"""
        if self.asyncio_dispatch and self.thread_pool_dispatch:
            raise ConflictingDispatchModesError("asyncio_dispatch", "thread_pool_dispatch")
        return self

    @property
    def dispatch_mode(self) -> Optional[str]:
        """Имя активного режима фонового выполнения или None"""
        if self.asyncio_dispatch:
            return "asyncio"
        if self.thread_pool_dispatch:
            return "thread_pool"
        return None


def build_config(**options) -> Config:
    """
    Собрать и провалидировать конфигурацию

    Args:
        **options: Значения полей Config

    Returns:
        Провалидированная конфигурация

    Raises:
        ConflictingDispatchModesError: Включены оба режима фонового выполнения
        InvalidConfigValueError: Неверное значение поля
    """
    try:
        config = Config(**options)
    except ValidationError as e:
        error = e.errors()[0]
        parameter = ".".join(str(part) for part in error["loc"]) or "config"
        raise InvalidConfigValueError(parameter, error.get("input"), error["msg"]) from e

    logger.debug(
        "Конфигурация: custom_emoji={}, режим фонового выполнения={}",
        config.custom_emoji, config.dispatch_mode
    )
    return config


# Глобальный экземпляр конфигурации
_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Получить глобальный экземпляр конфигурации"""
    global _config
    with _config_lock:
        if _config is None:
            _config = build_config()
        return _config


def configure(**options) -> Config:
    """Собрать конфигурацию и установить её глобальной"""
    global _config
    _config = build_config(**options)
    logger.info("Конфигурация успешно валидирована")
    return _config


def reset_config() -> None:
    """Сбросить глобальную конфигурацию к значениям по умолчанию"""
    global _config
    _config = None

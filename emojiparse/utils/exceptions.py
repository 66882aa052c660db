"""
Модуль кастомных исключений библиотеки
Содержит специализированные исключения для конфигурации, сканера разметки и диспетчеров
"""

from typing import Optional, Any

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="exceptions")


class EmojiParseError(Exception):
    """Базовое исключение для всех ошибок библиотеки"""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

        # Логируем все исключения
        if details:
            logger.error("EmojiParseError: {} | Детали: {}", message, details)
        else:
            logger.error("EmojiParseError: {}", message)


# ==============================================
# ИСКЛЮЧЕНИЯ КОНФИГУРАЦИИ
# ==============================================

class ConfigurationError(EmojiParseError):
    """Ошибки конфигурации библиотеки"""
    pass


class ConflictingDispatchModesError(ConfigurationError):
    """Одновременно включены два режима фонового выполнения"""

    def __init__(self, first: str, second: str):
        message = f"Можно включить только один режим фонового выполнения: {first} или {second}"
        super().__init__(message)
        self.modes = (first, second)


class InvalidConfigValueError(ConfigurationError):
    """Неверное значение в конфигурации"""

    def __init__(self, parameter: str, value: Any, expected: str):
        message = f"Неверное значение параметра '{parameter}': {value}. Ожидается: {expected}"
        super().__init__(message)
        self.parameter = parameter
        self.value = value
        self.expected = expected


# ==============================================
# ИСКЛЮЧЕНИЯ СКАНЕРА РАЗМЕТКИ
# ==============================================

class PatternCompilationError(EmojiParseError):
    """Не удалось скомпилировать регулярное выражение разметки Custom Emoji"""

    def __init__(self, pattern: str, details: Optional[str] = None):
        message = f"Ошибка компиляции шаблона разметки: {pattern}"
        super().__init__(message, details)
        self.pattern = pattern


# ==============================================
# ИСКЛЮЧЕНИЯ ФОНОВОГО ВЫПОЛНЕНИЯ
# ==============================================

class DispatchError(EmojiParseError):
    """Базовое исключение для фоновой задачи разбора"""
    pass


class TaskCancelledError(DispatchError):
    """Фоновая задача разбора была отменена"""

    def __init__(self, mode: str):
        message = f"Фоновая задача разбора отменена ({mode})"
        super().__init__(message)
        self.mode = mode


class TaskFailedError(DispatchError):
    """Фоновая задача разбора завершилась с исключением"""

    def __init__(self, mode: str, details: Optional[str] = None):
        message = f"Фоновая задача разбора завершилась с ошибкой ({mode})"
        super().__init__(message, details)
        self.mode = mode


class DispatcherShutdownError(DispatchError):
    """Пул или executor уже остановлен, новая задача разбора не принята"""

    def __init__(self, mode: str, details: Optional[str] = None):
        message = f"Диспетчер остановлен, задача разбора не принята ({mode})"
        super().__init__(message, details)
        self.mode = mode

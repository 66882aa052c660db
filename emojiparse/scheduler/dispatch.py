"""
Фоновое выполнение разбора
Адаптеры над синхронным токенизатором: asyncio executor или отдельный пул потоков
"""

import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojiparse.tokens import Token
from emojiparse.utils.config import Config, get_config
from emojiparse.utils.exceptions import (
    DispatcherShutdownError,
    TaskCancelledError,
    TaskFailedError,
)

# Настройка логгера модуля
logger = logger.bind(module="dispatch")


class BaseDispatcher(ABC):
    """Общая часть диспетчеров: ожидание фоновой задачи и разбор её исхода"""

    mode = "base"

    def __init__(self, tokenizer):
        """
        Инициализация диспетчера

        Args:
            tokenizer: Синхронный токенизатор
        """
        self.tokenizer = tokenizer

        # Статистика
        self.stats = {
            'completed': 0,
            'failed': 0,
            'cancelled': 0,
            'rejected': 0
        }

    async def _join(self, future: "asyncio.Future[List[Token]]") -> List[Token]:
        """
        Дождаться фоновой задачи

        Отмена самой ожидающей корутины пробрасывается как asyncio.CancelledError,
        фоновая задача при этом просто бросается.

        Raises:
            TaskCancelledError: Фоновая задача отменена
            TaskFailedError: Фоновая задача завершилась с исключением
        """
        await asyncio.wait({future})

        if future.cancelled():
            self.stats['cancelled'] += 1
            logger.warning("Фоновая задача разбора отменена ({})", self.mode)
            raise TaskCancelledError(self.mode)

        exc = future.exception()
        if exc is not None:
            self.stats['failed'] += 1
            raise TaskFailedError(self.mode, f"{type(exc).__name__}: {exc}") from exc

        self.stats['completed'] += 1
        return future.result()

    def _rejected(self, error: RuntimeError) -> DispatcherShutdownError:
        """Executor остановлен и не принимает задачи"""
        self.stats['rejected'] += 1
        logger.warning("Задача разбора не принята, диспетчер остановлен ({})", self.mode)
        return DispatcherShutdownError(self.mode, str(error))

    @abstractmethod
    async def parse(self, text: str) -> List[Token]:
        """Разобрать строку в фоне"""


class AsyncioDispatcher(BaseDispatcher):
    """Разбор в executor'е по умолчанию текущего event loop"""

    mode = "asyncio"

    async def parse(self, text: str) -> List[Token]:
        """Разобрать строку в фоновом потоке event loop"""
        loop = asyncio.get_running_loop()
        try:
            future = loop.run_in_executor(None, self.tokenizer.tokenize, text)
        except RuntimeError as e:
            raise self._rejected(e) from e
        return await self._join(future)


class ThreadPoolDispatcher(BaseDispatcher):
    """Разбор в собственном пуле потоков"""

    mode = "thread_pool"

    def __init__(self, tokenizer, max_workers: int = 4):
        """
        Инициализация диспетчера

        Args:
            tokenizer: Синхронный токенизатор
            max_workers: Количество потоков пула
        """
        super().__init__(tokenizer)
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="emojiparse"
        )
        logger.info("Запущен пул разбора на {} потоков", max_workers)

    def submit(self, text: str) -> "Future[List[Token]]":
        """
        Поставить разбор в пул, для синхронного кода

        Raises:
            DispatcherShutdownError: Пул уже остановлен
        """
        try:
            return self._executor.submit(self.tokenizer.tokenize, text)
        except RuntimeError as e:
            raise self._rejected(e) from e

    async def parse(self, text: str) -> List[Token]:
        """Разобрать строку в пуле и дождаться результата"""
        return await self._join(asyncio.wrap_future(self.submit(text)))

    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        """Остановить пул потоков"""
        self._executor.shutdown(wait=wait, cancel_futures=cancel_futures)
        logger.info("Пул разбора остановлен")

    def __enter__(self) -> "ThreadPoolDispatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


Dispatcher = Union[AsyncioDispatcher, ThreadPoolDispatcher]


def create_dispatcher(tokenizer, config: Optional[Config] = None) -> Optional[Dispatcher]:
    """
    Создать диспетчер для режима из конфигурации

    Returns:
        Диспетчер или None, если фоновый режим не включён
    """
    config = config or get_config()

    if config.asyncio_dispatch:
        return AsyncioDispatcher(tokenizer)
    if config.thread_pool_dispatch:
        return ThreadPoolDispatcher(tokenizer, max_workers=config.thread_pool_workers)
    return None

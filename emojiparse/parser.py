"""
Токенизатор строки
Связывает сканер разметки Custom Emoji и посимвольный сканер эмодзи
"""

import threading
from typing import Callable, List, Optional, Tuple

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojiparse.emoji.extractor import CustomEmojiExtractor, CustomEmojiSegment
from emojiparse.emoji.processor import EmojiProcessor
from emojiparse.emoji.resolver import EmojiResolver, build_resolver
from emojiparse.tokens import CustomEmoji, Token
from emojiparse.utils.config import Config, get_config

# Настройка логгера модуля
logger = logger.bind(module="parser")


class Tokenizer:
    """
    Синхронный токенизатор
    Не хранит состояния между вызовами, безопасен для параллельного использования
    """

    def __init__(self, resolver: EmojiResolver, custom_emoji: bool = False):
        """
        Инициализация токенизатора

        Args:
            resolver: Резолвер стандартных эмодзи
            custom_emoji: Разбирать ли разметку Custom Emoji
        """
        self.processor = EmojiProcessor(resolver)
        self.extractor: Optional[CustomEmojiExtractor] = (
            CustomEmojiExtractor() if custom_emoji else None
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        resolver: Optional[EmojiResolver] = None
    ) -> "Tokenizer":
        """Создать токенизатор по конфигурации"""
        config = config or get_config()
        if resolver is None:
            resolver = build_resolver(config)
        return cls(resolver, custom_emoji=config.custom_emoji)

    @property
    def custom_emoji(self) -> bool:
        return self.extractor is not None

    def tokenize(self, text: str) -> List[Token]:
        """
        Разобрать строку в токены

        Args:
            text: Исходная строка

        Returns:
            Новый список токенов в исходном порядке
        """
        tokens: List[Token] = []

        if self.extractor is None:
            tokens.extend(self.processor.process_text(text))
            logger.debug("Разобрано {} символов в {} токенов", len(text), len(tokens))
            return tokens

        custom_count = 0

        for segment in self.extractor.split(text):
            if isinstance(segment, CustomEmojiSegment):
                tokens.append(CustomEmoji.from_id(
                    segment.emoji_id,
                    name=segment.name,
                    animated=segment.animated,
                    source=segment.source
                ))
                custom_count += 1
            elif segment.text:
                tokens.extend(self.processor.process_text(segment.text))

        logger.debug(
            "Разобрано {} символов в {} токенов (Custom Emoji: {})",
            len(text), len(tokens), custom_count
        )
        return tokens

    __call__ = tokenize


def get_parser(
    config: Optional[Config] = None,
    resolver: Optional[EmojiResolver] = None
) -> Callable:
    """
    Получить функцию разбора для настроенного режима

    Returns:
        Tokenizer.tokenize без фонового режима,
        иначе корутинную функцию parse активного диспетчера
    """
    # Импортируем здесь чтобы избежать циклических импортов
    from emojiparse.scheduler.dispatch import create_dispatcher

    config = config or get_config()
    tokenizer = Tokenizer.from_config(config, resolver)

    dispatcher = create_dispatcher(tokenizer, config)
    if dispatcher is None:
        return tokenizer.tokenize
    return dispatcher.parse


# Функция разбора для глобальной конфигурации: (конфигурация, функция)
_default_parser: Optional[Tuple[Config, Callable]] = None
_default_parser_lock = threading.Lock()


def parse(text: str):
    """
    Разобрать строку с глобальной конфигурацией

    Без фонового режима возвращает список токенов, в режимах
    asyncio_dispatch / thread_pool_dispatch - корутину, которую нужно дождаться.
    """
    global _default_parser
    config = get_config()
    replaced: Optional[Callable] = None

    with _default_parser_lock:
        if _default_parser is None or _default_parser[0] is not config:
            if _default_parser is not None:
                replaced = _default_parser[1]
            _default_parser = (config, get_parser(config))
        parse_fn = _default_parser[1]

    if replaced is not None:
        # Конфигурация сменилась - освобождаем ресурсы старого диспетчера
        dispatcher = getattr(replaced, "__self__", None)
        if hasattr(dispatcher, "shutdown"):
            dispatcher.shutdown()

    return parse_fn(text)

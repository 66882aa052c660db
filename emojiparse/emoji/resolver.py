"""
Резолверы стандартных эмодзи
Сопоставляют один символ с байтами PNG картинки эмодзи
"""

import re
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="emoji_resolver")

# Регулярное выражение для одного символа из блоков Unicode с эмодзи
EMOJI_CHAR_PATTERN = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # Эмотиконы
    "\U0001F300-\U0001F5FF"  # Символы и пиктограммы
    "\U0001F680-\U0001F6FF"  # Транспорт и символы
    "\U0001F700-\U0001F77F"  # Алхимические символы
    "\U0001F780-\U0001F7FF"  # Геометрические фигуры
    "\U0001F800-\U0001F8FF"  # Дополнительные стрелки
    "\U0001F900-\U0001F9FF"  # Дополнительные символы
    "\U0001FA00-\U0001FA6F"  # Шахматные символы
    "\U0001FA70-\U0001FAFF"  # Символы и пиктограммы Extended-A
    "\U0001F1E0-\U0001F1FF"  # Флаги
    "\U00002600-\U000026FF"  # Разные символы
    "\U00002700-\U000027BF"  # Dingbats
    "\U00002190-\U000021FF"  # Стрелки
    "\U00002300-\U000023FF"  # Технические символы
    "\U00002B00-\U00002BFF"  # Разные символы и стрелки
    "\U0001F000-\U0001F02F"  # Mahjong tiles
    "\U0001F0A0-\U0001F0FF"  # Игральные карты
    "\U0001F100-\U0001F1FF"  # Enclosed Alphanumeric Supplement
    "\U0001F200-\U0001F2FF"  # Enclosed Ideographic Supplement
    "©®‼⁉™ℹ〰〽㊗㊙"  # Одиночные символы
    "]"
)


def is_emoji_char(char: str) -> bool:
    """Лежит ли символ в одном из блоков Unicode с эмодзи"""
    return EMOJI_CHAR_PATTERN.fullmatch(char) is not None


class EmojiResolver(Protocol):
    """Контракт резолвера: символ -> байты картинки или None. Без побочных эффектов."""

    def lookup(self, char: str) -> Optional[bytes]:
        ...


class NullEmojiResolver:
    """Резолвер без таблицы: ни один символ не считается эмодзи"""

    def lookup(self, char: str) -> Optional[bytes]:
        return None


class MappingEmojiResolver:
    """Резолвер по словарю {символ: байты}"""

    def __init__(self, mapping: Mapping[str, bytes]):
        self._mapping: Dict[str, bytes] = dict(mapping)

    def lookup(self, char: str) -> Optional[bytes]:
        return self._mapping.get(char)

    def __len__(self) -> int:
        return len(self._mapping)


class TwemojiDirectoryResolver:
    """
    Резолвер по каталогу PNG-ассетов в формате Twemoji
    Файлы называются шестнадцатеричным кодом символа: 1f600.png, 2764.png

    Прочитанные файлы кешируются в памяти. Кеш не меняет ответ для символа,
    поэтому lookup остаётся чистой функцией.
    """

    def __init__(self, directory: Union[str, Path]):
        """
        Инициализация резолвера

        Args:
            directory: Каталог с PNG файлами
        """
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise FileNotFoundError(f"Каталог ассетов не найден: {self.directory}")

        # Кеш: символ -> байты PNG (None - ассета нет)
        self._cache: Dict[str, Optional[bytes]] = {}

        logger.info("Резолвер Twemoji использует каталог {}", self.directory)

    @staticmethod
    def asset_name(char: str) -> str:
        """Имя файла ассета для символа"""
        return f"{ord(char):x}.png"

    def lookup(self, char: str) -> Optional[bytes]:
        if char in self._cache:
            return self._cache[char]

        # Символы вне блоков эмодзи не ищем на диске
        if not is_emoji_char(char):
            return None

        path = self.directory / self.asset_name(char)
        data = path.read_bytes() if path.is_file() else None
        if data is None:
            logger.trace("Нет ассета для U+{:04X}", ord(char))

        self._cache[char] = data
        return data

    @property
    def cached_count(self) -> int:
        """Количество закешированных символов"""
        return len(self._cache)


def build_resolver(config) -> EmojiResolver:
    """Выбрать резолвер по конфигурации"""
    if config.twemoji_dir is not None:
        return TwemojiDirectoryResolver(config.twemoji_dir)
    return NullEmojiResolver()

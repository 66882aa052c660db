"""
Сканер разметки Custom Emoji
Разбивает строку на текстовые фрагменты и ссылки вида <:name:id> / <a:name:id>
"""

import re
from dataclasses import dataclass
from typing import List, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from emojiparse.utils.exceptions import PatternCompilationError

# Настройка логгера модуля
logger = logger.bind(module="emoji_extractor")

# <флаг анимации?:имя:идентификатор из 17-19 цифр>
CUSTOM_EMOJI_MARKUP = r"<(a?):([a-zA-Z0-9_]+):([0-9]{17,19})>"


def _compile_markup_pattern(pattern: str) -> "re.Pattern[str]":
    """Скомпилировать шаблон разметки один раз при импорте"""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternCompilationError(pattern, str(e)) from e


CUSTOM_EMOJI_PATTERN = _compile_markup_pattern(CUSTOM_EMOJI_MARKUP)


@dataclass(frozen=True)
class TextSegment:
    """Фрагмент обычного текста (может быть пустым)"""
    text: str


@dataclass(frozen=True)
class CustomEmojiSegment:
    """Найденная ссылка на Custom Emoji"""
    emoji_id: str       # Идентификатор из разметки
    name: str           # Имя эмодзи
    animated: bool      # Флаг анимации "a"
    source: str         # Разметка целиком


Segment = Union[TextSegment, CustomEmojiSegment]


class CustomEmojiExtractor:
    """
    Экстрактор Custom Emoji из текста
    Находит непересекающиеся вхождения разметки слева направо
    """

    def __init__(self, pattern: "re.Pattern[str]" = CUSTOM_EMOJI_PATTERN):
        self.pattern = pattern

    def split(self, text: str) -> List[Segment]:
        """
        Разбить текст на сегменты

        Текстовые сегменты стоят до, между и после совпадений и могут быть
        пустыми. Последний сегмент всегда текстовый.

        Args:
            text: Исходный текст

        Returns:
            Список сегментов в исходном порядке
        """
        segments: List[Segment] = []
        last = 0

        for match in self.pattern.finditer(text):
            start, end = match.span()
            segments.append(TextSegment(text[last:start]))
            segments.append(CustomEmojiSegment(
                emoji_id=match.group(3),
                name=match.group(2),
                animated=bool(match.group(1)),
                source=match.group(0)
            ))
            last = end

        segments.append(TextSegment(text[last:]))
        return segments

    def find_ids(self, text: str) -> List[str]:
        """Идентификаторы всех Custom Emoji в тексте"""
        ids = [match.group(3) for match in self.pattern.finditer(text)]
        if ids:
            logger.debug("Найдено {} Custom Emoji в тексте", len(ids))
        return ids

    def has_custom_emoji(self, text: str) -> bool:
        """Есть ли в тексте разметка Custom Emoji"""
        return self.pattern.search(text) is not None


def split_custom_emoji(text: str) -> List[Segment]:
    """Разбить текст на сегменты стандартным экстрактором"""
    return _default_extractor.split(text)


_default_extractor = CustomEmojiExtractor()

"""
Модуль распознавания эмодзи
Сканер разметки Custom Emoji, посимвольный сканер и резолверы стандартных эмодзи
"""

from .resolver import (
    EmojiResolver,
    MappingEmojiResolver,
    NullEmojiResolver,
    TwemojiDirectoryResolver,
    build_resolver,
)
from .processor import EmojiProcessor
from .extractor import (
    CustomEmojiExtractor,
    CustomEmojiSegment,
    TextSegment,
    split_custom_emoji,
)

__all__ = [
    "EmojiResolver",
    "MappingEmojiResolver",
    "NullEmojiResolver",
    "TwemojiDirectoryResolver",
    "build_resolver",
    "EmojiProcessor",
    "CustomEmojiExtractor",
    "CustomEmojiSegment",
    "TextSegment",
    "split_custom_emoji"
]

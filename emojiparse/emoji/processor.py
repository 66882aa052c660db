"""
Посимвольный сканер эмодзи
Превращает фрагмент текста в токены Text / Emoji через резолвер
"""

from typing import List

# Локальные импорты
from emojiparse.tokens import Emoji, Text, Token
from .resolver import EmojiResolver


class EmojiProcessor:
    """
    Процессор фрагментов текста
    Один токен на каждое скалярное значение Unicode, порядок сохраняется
    """

    def __init__(self, resolver: EmojiResolver):
        """
        Инициализация процессора

        Args:
            resolver: Резолвер стандартных эмодзи
        """
        self.resolver = resolver

    def process_text(self, text: str) -> List[Token]:
        """
        Разобрать фрагмент текста

        Args:
            text: Фрагмент (может быть пустым)

        Returns:
            Список токенов Text / Emoji
        """
        tokens: List[Token] = []

        # Итерация по str идёт по кодовым точкам, а не по байтам
        for char in text:
            data = self.resolver.lookup(char)
            if data is not None:
                tokens.append(Emoji.new(data, source=char))
            else:
                tokens.append(Text.new(char))

        return tokens

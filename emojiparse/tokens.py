"""
Токены, получаемые при разборе строки
Text - обычный символ, Emoji - PNG стандартного эмодзи, CustomEmoji - URL Custom Emoji
"""

from dataclasses import dataclass, field
from typing import Iterable, Union

# Шаблон URL для Custom Emoji (хост платформы фиксирован)
CUSTOM_EMOJI_URL_TEMPLATE = "https://cdn.discordapp.com/emojis/{}.png?size=96"


@dataclass(frozen=True)
class Text:
    """Символ без маппинга на эмодзи (ровно одно скалярное значение Unicode)"""
    value: str

    def __post_init__(self):
        if len(self.value) != 1:
            raise ValueError(f"Text должен содержать ровно один символ: {self.value!r}")

    @classmethod
    def new(cls, s: str) -> "Text":
        return cls(s)

    @property
    def source(self) -> str:
        return self.value


@dataclass(frozen=True)
class Emoji:
    """Стандартный эмодзи (байты PNG от резолвера)"""
    value: bytes
    source: str = field(default="", compare=False)  # Исходный символ эмодзи

    @classmethod
    def new(cls, data: bytes, source: str = "") -> "Emoji":
        return cls(bytes(data), source)


@dataclass(frozen=True)
class CustomEmoji:
    """
    Custom Emoji платформы

    Attributes:
        value: URL картинки на CDN
        emoji_id: Числовой идентификатор (17-19 цифр, существование не проверяется)
        name: Имя из разметки
        animated: Был ли в разметке флаг анимации
        source: Исходная разметка целиком
    """
    value: str
    emoji_id: str = field(default="", compare=False)
    name: str = field(default="", compare=False)
    animated: bool = field(default=False, compare=False)
    source: str = field(default="", compare=False)

    @classmethod
    def from_id(
        cls,
        emoji_id: str,
        name: str = "",
        animated: bool = False,
        source: str = ""
    ) -> "CustomEmoji":
        """Построить токен из идентификатора, подставив его в шаблон URL"""
        return cls(
            value=CUSTOM_EMOJI_URL_TEMPLATE.format(emoji_id),
            emoji_id=emoji_id,
            name=name,
            animated=animated,
            source=source
        )


Token = Union[Text, Emoji, CustomEmoji]


def tokens_to_source(tokens: Iterable[Token]) -> str:
    """
    Восстановить исходную строку по токенам

    Emoji и CustomEmoji подставляются исходным символом / разметкой.
    """
    parts = []
    for token in tokens:
        if isinstance(token, (Text, Emoji, CustomEmoji)):
            parts.append(token.source)
        else:
            raise TypeError(f"Неизвестный тип токена: {type(token).__name__}")
    return "".join(parts)

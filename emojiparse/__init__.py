"""
emojiparse - разбор строки на токены: символы, стандартные эмодзи и Custom Emoji
"""

from .tokens import CUSTOM_EMOJI_URL_TEMPLATE, CustomEmoji, Emoji, Text, Token, tokens_to_source
from .parser import Tokenizer, get_parser, parse
from .scheduler.dispatch import AsyncioDispatcher, ThreadPoolDispatcher, create_dispatcher
from .utils.config import Config, build_config, configure, get_config, reset_config

__version__ = "0.1.0"

__all__ = [
    "CUSTOM_EMOJI_URL_TEMPLATE",
    "CustomEmoji",
    "Emoji",
    "Text",
    "Token",
    "tokens_to_source",
    "Tokenizer",
    "get_parser",
    "parse",
    "AsyncioDispatcher",
    "ThreadPoolDispatcher",
    "create_dispatcher",
    "Config",
    "build_config",
    "configure",
    "get_config",
    "reset_config"
]

"""Общие фикстуры для тестов emojiparse."""

from pathlib import Path

import pytest

from emojiparse import parser
from emojiparse.emoji.resolver import MappingEmojiResolver
from emojiparse.utils.config import reset_config

GRINNING = "\U0001F600"
HEART = "\u2764"

PNG_GRINNING = b"\x89PNG\r\n\x1a\ngrinning"
PNG_HEART = b"\x89PNG\r\n\x1a\nheart"


@pytest.fixture(autouse=True)
def clean_global_config():
    """Каждый тест начинает с конфигурации по умолчанию."""
    reset_config()
    parser._default_parser = None
    yield
    reset_config()
    parser._default_parser = None


@pytest.fixture
def resolver() -> MappingEmojiResolver:
    return MappingEmojiResolver({GRINNING: PNG_GRINNING, HEART: PNG_HEART})


@pytest.fixture
def twemoji_dir(tmp_path: Path) -> Path:
    """Каталог ассетов в формате Twemoji с двумя картинками."""
    assets = tmp_path / "72x72"
    assets.mkdir()
    (assets / "1f600.png").write_bytes(PNG_GRINNING)
    (assets / "2764.png").write_bytes(PNG_HEART)
    return assets

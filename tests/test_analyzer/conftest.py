"""Shared test fixtures for analyzer tests."""

from unittest.mock import MagicMock

import pytest


def make_janome_token(surface: str, part_of_speech: str) -> MagicMock:
    """Build a stand-in for a Janome token."""
    token = MagicMock()
    token.surface = surface
    token.part_of_speech = part_of_speech
    return token


@pytest.fixture
def mock_janome_tokens() -> list[MagicMock]:
    """Janome-shaped tokens for 東京に行く."""
    return [
        make_janome_token("東京", "名詞,固有名詞,地域,一般"),
        make_janome_token("に", "助詞,格助詞,一般,*"),
        make_janome_token("行く", "動詞,自立,*,*"),
    ]

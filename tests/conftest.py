"""Shared test fixtures."""

from __future__ import annotations

import pytest

from jpseg.analyzer.models import Token
from jpseg.analyzer.tokenizer import Tokenizer
from jpseg.exceptions import TokenizationError


class WhitespaceTokenizer(Tokenizer):
    """Deterministic tokenizer that splits on whitespace.

    A chunk written as ``surface/POS`` gets that tag; anything else is tagged
    ``名詞``.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []

    def tokenize(self, text: str) -> list[Token]:
        self.calls.append(text)
        tokens = []
        for chunk in text.split():
            surface, _, pos = chunk.partition("/")
            tokens.append(Token(text=surface, pos=pos or "名詞"))
        return tokens


class FailingTokenizer(WhitespaceTokenizer):
    """Raises TokenizationError on any text containing the marker."""

    def __init__(self, marker: str = "BROKEN") -> None:
        super().__init__()
        self.marker = marker

    def tokenize(self, text: str) -> list[Token]:
        if self.marker in text:
            raise TokenizationError("cannot tokenize", text_length=len(text))
        return super().tokenize(text)


@pytest.fixture
def tokenizer() -> WhitespaceTokenizer:
    """Whitespace tokenizer for algorithm tests."""
    return WhitespaceTokenizer()


@pytest.fixture
def failing_tokenizer() -> FailingTokenizer:
    """Tokenizer that fails on lines containing 'BROKEN'."""
    return FailingTokenizer()


@pytest.fixture
def sample_text() -> str:
    """Three-line document in whitespace-tokenized form."""
    return "猫/名詞 が/助詞 好き/名詞\n犬 と 猫 と 鳥\n\n猫"

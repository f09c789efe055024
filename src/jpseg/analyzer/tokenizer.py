"""Tokenizer adapters that turn text into (surface, part-of-speech) tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import nltk
from nltk.tokenize import word_tokenize

from jpseg.analyzer.models import Token
from jpseg.analyzer.nltk_resources import ENGLISH_TOKENIZER_RESOURCES, ensure_resources
from jpseg.exceptions import TokenizationError
from jpseg.logging import get_logger

logger = get_logger("analyzer.tokenizer")

# Unicode ranges for Japanese character detection
HIRAGANA_RANGE = (0x3040, 0x309F)
KATAKANA_RANGE = (0x30A0, 0x30FF)
KANJI_RANGE = (0x4E00, 0x9FFF)
KATAKANA_EXTENDED_RANGE = (0x31F0, 0x31FF)
HALFWIDTH_KATAKANA_RANGE = (0xFF65, 0xFF9F)

# Janome joins POS detail levels with commas: "名詞,固有名詞,地域,一般"
POS_DETAIL_SEPARATOR = ","


def is_japanese_char(char: str) -> bool:
    """Check if a character is Japanese (Hiragana, Katakana, or Kanji).

    Args:
        char: A single character to check.

    Returns:
        True if the character is Japanese, False otherwise.
    """
    if len(char) != 1:
        return False

    code = ord(char)
    return (
        HIRAGANA_RANGE[0] <= code <= HIRAGANA_RANGE[1]
        or KATAKANA_RANGE[0] <= code <= KATAKANA_RANGE[1]
        or KANJI_RANGE[0] <= code <= KANJI_RANGE[1]
        or KATAKANA_EXTENDED_RANGE[0] <= code <= KATAKANA_EXTENDED_RANGE[1]
        or HALFWIDTH_KATAKANA_RANGE[0] <= code <= HALFWIDTH_KATAKANA_RANGE[1]
    )


def is_japanese_text(text: str) -> bool:
    """Check if the text contains any Japanese characters."""
    return any(is_japanese_char(char) for char in text)


def detect_language(text: str) -> str:
    """Detect the language of the text based on character composition.

    Args:
        text: The text to analyze.

    Returns:
        'japanese' if the text contains Japanese characters, 'english' otherwise.
    """
    if not text:
        return "english"

    # Japanese text often mixes with Latin words, so any kana or kanji wins
    if is_japanese_text(text):
        return "japanese"

    return "english"


class Tokenizer(ABC):
    """Abstract base class for tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> list[Token]:
        """Tokenize text into surface forms with part-of-speech tags.

        Args:
            text: The text to tokenize.

        Returns:
            Tokens in text order.

        Raises:
            TokenizationError: If the underlying analyzer fails.
        """
        pass


class JapaneseTokenizer(Tokenizer):
    """Tokenizer for Japanese text using Janome with its bundled IPADIC."""

    def __init__(self) -> None:
        """Initialize the Japanese tokenizer."""
        self._tokenizer: Any = None

    def _get_tokenizer(self) -> Any:
        """Lazy initialization of Janome tokenizer."""
        if self._tokenizer is None:
            try:
                from janome.tokenizer import Tokenizer as JanomeTokenizer
            except ImportError as e:
                raise ImportError(
                    "Janome is required for Japanese tokenization. "
                    "Install it with: pip install janome"
                ) from e
            logger.debug("Loading Janome tokenizer")
            self._tokenizer = JanomeTokenizer()
        return self._tokenizer

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize Japanese text using Janome.

        The tag kept for each token is the top-level category, e.g. "名詞"
        out of "名詞,固有名詞,地域,一般".

        Args:
            text: The text to tokenize.

        Returns:
            Tokens with surface forms and top-level POS tags.

        Raises:
            TokenizationError: If Janome fails on the input.
        """
        tokenizer = self._get_tokenizer()
        try:
            return [
                Token(
                    text=token.surface,
                    pos=token.part_of_speech.split(POS_DETAIL_SEPARATOR)[0],
                )
                for token in tokenizer.tokenize(text)
            ]
        except Exception as e:
            raise TokenizationError(
                f"Janome failed to tokenize text: {e}",
                text_length=len(text),
            ) from e


class EnglishTokenizer(Tokenizer):
    """Tokenizer for English text using NLTK with Penn Treebank tags."""

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize English text with word_tokenize and tag it with pos_tag.

        Args:
            text: The text to tokenize.

        Returns:
            Tokens with surface forms and Penn Treebank tags.

        Raises:
            NLTKResourceError: If NLTK data cannot be downloaded.
            TokenizationError: If NLTK fails on the input.
        """
        ensure_resources(ENGLISH_TOKENIZER_RESOURCES)
        try:
            words: list[str] = word_tokenize(text)
            tagged = nltk.pos_tag(words)
        except (LookupError, TypeError, ValueError) as e:
            raise TokenizationError(
                f"NLTK failed to tokenize text: {e}",
                text_length=len(text),
            ) from e
        return [Token(text=word, pos=tag) for word, tag in tagged]


def get_tokenizer(language: str, text: str | None = None) -> Tokenizer:
    """Factory function to get the appropriate tokenizer.

    Args:
        language: The language ('english', 'japanese', or 'auto').
        text: Optional text for language detection when language is 'auto'.

    Returns:
        An appropriate Tokenizer instance.

    Raises:
        ValueError: If the language is not supported.
    """
    language = language.lower()
    if language == "auto":
        # Japanese is the default analyzer when there is nothing to inspect
        language = detect_language(text) if text else "japanese"

    if language == "japanese":
        return JapaneseTokenizer()
    if language == "english":
        return EnglishTokenizer()

    raise ValueError(f"Unsupported language: {language!r}")


def safe_tokenize(tokenizer: Tokenizer, text: str) -> list[Token]:
    """Tokenize text, treating analyzer failure as zero tokens.

    Args:
        tokenizer: Tokenizer to use.
        text: The text to tokenize.

    Returns:
        Tokens, or an empty list if the tokenizer raised TokenizationError.
    """
    try:
        return tokenizer.tokenize(text)
    except TokenizationError as e:
        logger.warning("Tokenization failed, treating as empty: %s", e)
        return []

"""Pydantic models for text analysis."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Token(BaseModel, frozen=True):
    """A single morpheme produced by the tokenizer.

    Attributes:
        text: Surface form as it appears in the source.
        pos: Part-of-speech tag (top-level category).
    """

    text: str = Field(..., description="Surface form")
    pos: str = Field(..., description="Part-of-speech tag")


class AnalysisResult(BaseModel, frozen=True):
    """Token list and frequency table from one analysis run.

    The token list keeps every occurrence in document order with its own tag.
    The frequency table counts surface forms regardless of tag, so
    ``frequencies[s]`` is always the number of tokens whose text is ``s``.

    Attributes:
        tokens: All tokens in document order.
        frequencies: Occurrence count per surface form.
    """

    tokens: tuple[Token, ...] = Field(default_factory=tuple, description="Tokens in order")
    frequencies: dict[str, int] = Field(
        default_factory=dict, description="Occurrence count per surface form"
    )

    @property
    def total_tokens(self) -> int:
        return len(self.tokens)

    @property
    def unique_words(self) -> int:
        return len(self.frequencies)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def frequency_of(self, surface: str) -> int:
        """Return the count for a surface form, 0 if it never occurred."""
        return self.frequencies.get(surface, 0)

    def top_words(self, n: int = 10) -> tuple[tuple[str, int], ...]:
        """Return the top N surface forms by count.

        Ties keep the order in which the surface forms first appeared.

        Args:
            n: Number of entries to return.

        Returns:
            Tuple of (surface, count) pairs, count descending.
        """
        first_seen: dict[str, int] = {}
        for index, token in enumerate(self.tokens):
            first_seen.setdefault(token.text, index)
        ranked = sorted(
            self.frequencies.items(),
            key=lambda item: (-item[1], first_seen.get(item[0], len(self.tokens))),
        )
        return tuple(ranked[:n])


class ConcordanceResult(BaseModel, frozen=True):
    """One keyword occurrence with its surrounding tokens.

    Attributes:
        keyword: The matched surface form.
        left_context: Concatenated text of the tokens before the match.
        right_context: Concatenated text of the tokens after the match.
        line_number: 1-based line the match was found on.
    """

    keyword: str = Field(..., description="Matched surface form")
    left_context: str = Field(default="", description="Tokens before the match")
    right_context: str = Field(default="", description="Tokens after the match")
    line_number: int = Field(..., ge=1, description="1-based line number")


class Document(BaseModel, frozen=True):
    """Input text with the path it was read from, if any."""

    text: str = Field(default="", description="Full document text")
    path: Path | None = Field(default=None, description="Originating file path")

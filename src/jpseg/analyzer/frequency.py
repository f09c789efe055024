"""Word frequency aggregation over a tokenized document."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from jpseg.analyzer.models import AnalysisResult, Token
from jpseg.analyzer.tokenizer import Tokenizer, safe_tokenize
from jpseg.logging import get_logger

logger = get_logger("analyzer.frequency")


def count_frequencies(tokens: Iterable[Token]) -> Counter[str]:
    """Count occurrences of each surface form.

    Args:
        tokens: Tokens to count.

    Returns:
        Counter keyed by surface form.
    """
    return Counter(token.text for token in tokens)


def analyze_text(text: str, tokenizer: Tokenizer) -> AnalysisResult:
    """Tokenize a whole document and build its token list and frequency table.

    The tokenizer runs once over the entire text. Every token is kept in
    document order with its own tag; counts are per surface form, so a word
    tagged two different ways appears with both tags but one shared count.

    Args:
        text: Raw document text.
        tokenizer: Tokenizer adapter.

    Returns:
        AnalysisResult with tokens and frequencies. If tokenization fails the
        result is empty.
    """
    tokens: list[Token] = []
    frequencies: Counter[str] = Counter()

    for token in safe_tokenize(tokenizer, text):
        tokens.append(token)
        frequencies[token.text] += 1

    logger.debug(
        "Analyzed %d characters: %d tokens, %d unique",
        len(text),
        len(tokens),
        len(frequencies),
    )

    return AnalysisResult(tokens=tuple(tokens), frequencies=dict(frequencies))

"""Keyword-in-context (KWIC) concordance search."""

from __future__ import annotations

from jpseg.analyzer.models import ConcordanceResult
from jpseg.analyzer.tokenizer import Tokenizer, safe_tokenize
from jpseg.logging import get_logger

logger = get_logger("analyzer.concordance")


def split_lines(text: str) -> list[str]:
    """Split text into lines on LF or CRLF.

    Interior empty lines are kept. A trailing line terminator does not
    produce an extra empty line, and an empty text has no lines.

    Args:
        text: The text to split.

    Returns:
        Lines without their terminators.
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


def extract_window(texts: list[str], index: int, window_size: int) -> tuple[str, str]:
    """Extract the left and right context around a token.

    Up to ``window_size`` tokens are taken on each side, clamped to the
    bounds of the line. Token texts are joined without separators.

    Args:
        texts: Surface forms of one line's tokens.
        index: Position of the matched token.
        window_size: Number of neighboring tokens on each side.

    Returns:
        Tuple of (left_context, right_context).
    """
    start = max(0, index - window_size)
    end = min(len(texts), index + window_size + 1)
    return "".join(texts[start:index]), "".join(texts[index + 1 : end])


def search_concordance(
    text: str,
    keyword: str,
    tokenizer: Tokenizer,
    window_size: int,
) -> list[ConcordanceResult]:
    """Find every occurrence of a keyword with its surrounding tokens.

    Each line is tokenized on its own so that matches map back to line
    numbers. Token boundaries can therefore differ from a whole-document
    tokenization where a construct would span a line break.

    Args:
        text: Document text.
        keyword: Exact surface form to look for.
        tokenizer: Tokenizer adapter.
        window_size: Number of neighboring tokens on each side (at least 1).

    Returns:
        Matches in line order, then left-to-right within a line. Empty when
        the keyword is empty or never occurs.

    Raises:
        ValueError: If window_size is less than 1. This is a violated
            precondition of the caller, not a failed search; a search that
            finds nothing or cannot tokenize a line returns fewer results.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be at least 1, got {window_size}")

    if not keyword:
        return []

    results: list[ConcordanceResult] = []
    for line_index, line in enumerate(split_lines(text)):
        texts = [token.text for token in safe_tokenize(tokenizer, line)]
        for index, surface in enumerate(texts):
            if surface != keyword:
                continue
            left, right = extract_window(texts, index, window_size)
            results.append(
                ConcordanceResult(
                    keyword=keyword,
                    left_context=left,
                    right_context=right,
                    line_number=line_index + 1,
                )
            )

    logger.debug("Found %d occurrences of %r", len(results), keyword)
    return results

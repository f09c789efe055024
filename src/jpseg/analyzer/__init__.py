"""Morphological analysis: tokenization, frequency counting and concordance."""

from jpseg.analyzer.concordance import extract_window, search_concordance, split_lines
from jpseg.analyzer.frequency import analyze_text, count_frequencies
from jpseg.analyzer.models import AnalysisResult, ConcordanceResult, Document, Token
from jpseg.analyzer.tokenizer import (
    EnglishTokenizer,
    JapaneseTokenizer,
    Tokenizer,
    detect_language,
    get_tokenizer,
    is_japanese_char,
    is_japanese_text,
    safe_tokenize,
)

__all__ = [
    # Models
    "AnalysisResult",
    "ConcordanceResult",
    "Document",
    "Token",
    # Tokenizer
    "Tokenizer",
    "JapaneseTokenizer",
    "EnglishTokenizer",
    "get_tokenizer",
    "safe_tokenize",
    "detect_language",
    "is_japanese_char",
    "is_japanese_text",
    # Frequency
    "analyze_text",
    "count_frequencies",
    # Concordance
    "search_concordance",
    "extract_window",
    "split_lines",
]

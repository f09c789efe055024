"""Document loading and the stateful analysis session."""

from __future__ import annotations

from pathlib import Path

from jpseg.analyzer.concordance import search_concordance
from jpseg.analyzer.frequency import analyze_text
from jpseg.analyzer.models import AnalysisResult, ConcordanceResult, Document, Token
from jpseg.analyzer.tokenizer import Tokenizer, get_tokenizer
from jpseg.config import settings
from jpseg.exceptions import DocumentLoadError
from jpseg.logging import get_logger
from jpseg.output.csv_export import export_csv

logger = get_logger("session")


def load_document(path: Path) -> Document:
    """Read a UTF-8 text file into a Document.

    Args:
        path: File to read.

    Returns:
        Document holding the file content and its path.

    Raises:
        DocumentLoadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read file: {e}", path=path) from e

    logger.debug("Loaded %d characters from %s", len(text), path)
    return Document(text=text, path=path)


class AnalysisSession:
    """Holds one document and the results derived from it.

    Each operation replaces its piece of state wholesale. A session is meant
    to be used by one caller at a time; there is no internal locking.
    """

    def __init__(self, tokenizer: Tokenizer | None = None) -> None:
        """
        Initialize an empty session.

        Args:
            tokenizer: Tokenizer to use. Defaults to the configured language.
        """
        self.tokenizer = tokenizer or get_tokenizer(settings.language)
        self.input_text = ""
        self.file_path: Path | None = None
        self.result = AnalysisResult()
        self.concordance: list[ConcordanceResult] = []

    @property
    def document(self) -> Document:
        return Document(text=self.input_text, path=self.file_path)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.result.tokens

    @property
    def frequencies(self) -> dict[str, int]:
        return self.result.frequencies

    def load_file(self, path: Path) -> Document:
        """
        Replace the input text with the content of a file.

        On failure the previous text and path are kept.

        Raises:
            DocumentLoadError: If the file cannot be read.
        """
        document = load_document(path)
        self.input_text = document.text
        self.file_path = document.path
        return document

    def analyze(self) -> AnalysisResult:
        """Rebuild the token list and frequency table from the input text."""
        self.result = analyze_text(self.input_text, self.tokenizer)
        return self.result

    def search(self, keyword: str, window_size: int | None = None) -> list[ConcordanceResult]:
        """
        Rebuild the concordance for a keyword.

        Args:
            keyword: Exact surface form to search for.
            window_size: Tokens of context per side. Defaults to settings.

        Raises:
            ValueError: If window_size is less than 1.
        """
        if window_size is None:
            window_size = settings.default_window_size
        self.concordance = search_concordance(
            self.input_text, keyword, self.tokenizer, window_size
        )
        return self.concordance

    def save_csv(self, path: Path) -> bool:
        """
        Export the current analysis to CSV.

        Returns:
            True if written, False if there were no tokens to export.

        Raises:
            ExportError: If the file cannot be written.
        """
        return export_csv(path, self.result.tokens, self.result.frequencies)

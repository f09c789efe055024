"""Custom exceptions for jpseg."""

from pathlib import Path
from typing import Any


class JpsegError(Exception):
    """Base exception for jpseg.

    Attributes:
        message: Human-readable error message
        context: Additional context information
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class AnalyzerError(JpsegError):
    """Base exception for analyzer errors."""


class TokenizationError(AnalyzerError):
    """The morphological analyzer failed on its input.

    Attributes:
        text_length: Length of the text that failed to tokenize
    """

    def __init__(self, message: str, text_length: int | None = None) -> None:
        super().__init__(message, text_length=text_length)
        self.text_length = text_length


class NLTKResourceError(AnalyzerError):
    """NLTK resource not available.

    Attributes:
        resource_name: Name of the missing NLTK resource
    """

    def __init__(self, message: str, resource_name: str | None = None) -> None:
        super().__init__(message, resource_name=resource_name)
        self.resource_name = resource_name


class DocumentLoadError(JpsegError):
    """Source text could not be read.

    Attributes:
        path: The path that was being read
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message, path=str(path) if path is not None else None)
        self.path = path


class ExportError(JpsegError):
    """CSV export could not be written.

    Attributes:
        path: The export target path
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message, path=str(path) if path is not None else None)
        self.path = path

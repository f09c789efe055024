"""jpseg - Japanese morphological analysis with word frequencies and KWIC concordance."""

from jpseg.config import Settings, settings
from jpseg.exceptions import (
    AnalyzerError,
    DocumentLoadError,
    ExportError,
    JpsegError,
    NLTKResourceError,
    TokenizationError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "AnalyzerError",
    "DocumentLoadError",
    "ExportError",
    "JpsegError",
    "NLTKResourceError",
    "TokenizationError",
]

"""CSV export of the token list and frequency table.

The output opens cleanly in spreadsheet applications: it starts with a UTF-8
byte-order mark, followed by a Japanese header row and one row per token in
document order. Fields are written as-is without quoting, so a surface form
containing a comma produces a malformed row.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from jpseg.analyzer.models import Token
from jpseg.exceptions import ExportError
from jpseg.logging import get_logger

logger = get_logger("output.csv_export")

UTF8_BOM = b"\xef\xbb\xbf"

# word, part of speech, frequency
CSV_HEADER = "単語,品詞,出現頻度"


def format_csv(
    tokens: Sequence[Token],
    frequencies: Mapping[str, int],
    line_terminator: str = os.linesep,
) -> bytes:
    """Serialize tokens and their frequencies as CSV bytes.

    Args:
        tokens: Tokens in document order.
        frequencies: Occurrence count per surface form.
        line_terminator: Line ending written after every row.

    Returns:
        BOM-prefixed UTF-8 CSV, or empty bytes when there are no tokens.
    """
    if not tokens:
        return b""

    lines = [CSV_HEADER]
    for token in tokens:
        lines.append(f"{token.text},{token.pos},{frequencies.get(token.text, 0)}")

    body = "".join(line + line_terminator for line in lines)
    return UTF8_BOM + body.encode("utf-8")


def export_csv(
    path: Path,
    tokens: Sequence[Token],
    frequencies: Mapping[str, int],
) -> bool:
    """Write the CSV export to a file.

    Args:
        path: Destination file path.
        tokens: Tokens in document order.
        frequencies: Occurrence count per surface form.

    Returns:
        True if the file was written, False if there was nothing to export.

    Raises:
        ExportError: If the file cannot be written.
    """
    if not tokens:
        logger.info("No tokens to export, skipping %s", path)
        return False

    data = format_csv(tokens, frequencies)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise ExportError(f"Failed to write CSV: {e}", path=path) from e

    logger.info("Exported %d rows to %s", len(tokens), path)
    return True

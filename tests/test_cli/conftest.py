"""Shared fixtures for CLI tests."""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_settings():
    """Settings object with fixed values for testing."""
    from jpseg.config import Settings

    return Settings(
        _env_file=None,
        language="japanese",
        default_window_size=2,
        csv_filename="result.csv",
        log_level="WARNING",
    )


@pytest.fixture
def patched_tokenizer(tokenizer):
    """Route every CLI tokenizer through the whitespace tokenizer."""
    with patch("jpseg.cli.get_tokenizer", return_value=tokenizer) as mock_factory:
        yield mock_factory


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """UTF-8 input file in whitespace-tokenized form."""
    path = tmp_path / "input.txt"
    path.write_text("吾輩 は 猫 で ある\n名前 は まだ ない\n", encoding="utf-8")
    return path

"""Tests for document loading and AnalysisSession."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from jpseg.analyzer.models import Document
from jpseg.analyzer.tokenizer import JapaneseTokenizer
from jpseg.exceptions import DocumentLoadError, ExportError
from jpseg.session import AnalysisSession, load_document


@pytest.fixture
def text_file(tmp_path: Path, sample_text: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


class TestLoadDocument:
    """Tests for load_document function."""

    def test_reads_utf8(self, text_file: Path, sample_text: str) -> None:
        document = load_document(text_file)
        assert document == Document(text=sample_text, path=text_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nope.txt"
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document(path)
        assert exc_info.value.path == path

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "sjis.txt"
        path.write_bytes("日本語".encode("shift_jis"))
        with pytest.raises(DocumentLoadError):
            load_document(path)


class TestAnalysisSession:
    """Tests for AnalysisSession class."""

    def test_initial_state(self, tokenizer) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        assert session.input_text == ""
        assert session.file_path is None
        assert session.tokens == ()
        assert session.frequencies == {}
        assert session.concordance == []

    def test_default_tokenizer_from_settings(self) -> None:
        session = AnalysisSession()
        assert isinstance(session.tokenizer, JapaneseTokenizer)

    def test_load_file(self, tokenizer, text_file: Path, sample_text: str) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.load_file(text_file)
        assert session.input_text == sample_text
        assert session.file_path == text_file
        assert session.document.path == text_file

    def test_failed_load_keeps_previous_state(self, tokenizer, text_file: Path) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.load_file(text_file)
        previous = session.input_text

        with pytest.raises(DocumentLoadError):
            session.load_file(text_file.parent / "missing.txt")

        assert session.input_text == previous
        assert session.file_path == text_file

    def test_analyze_replaces_previous_result(self, tokenizer) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = "a a b"
        session.analyze()
        session.input_text = "c"
        session.analyze()
        assert [t.text for t in session.tokens] == ["c"]
        assert session.frequencies == {"c": 1}

    def test_analyze_twice_is_idempotent(self, tokenizer, sample_text: str) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = sample_text
        first = session.analyze()
        second = session.analyze()
        assert first == second

    def test_search_uses_default_window(self, tokenizer) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = "1 2 3 4 5 6 k 7 8 9 10 11 12"
        with patch("jpseg.session.settings") as mock_settings:
            mock_settings.default_window_size = 2
            results = session.search("k")
        assert results[0].left_context == "56"
        assert results[0].right_context == "78"

    def test_search_replaces_previous_results(self, tokenizer) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = "a b a"
        session.search("a", 1)
        assert len(session.concordance) == 2
        session.search("b", 1)
        assert len(session.concordance) == 1

    def test_search_is_independent_of_analysis(self, tokenizer) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = "a b"
        results = session.search("a", 1)
        assert len(results) == 1
        assert session.tokens == ()

    def test_save_csv(self, tokenizer, tmp_path: Path) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = "a b a"
        session.analyze()
        path = tmp_path / "out.csv"
        assert session.save_csv(path) is True
        assert path.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_save_csv_without_tokens_is_noop(self, tokenizer, tmp_path: Path) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        path = tmp_path / "out.csv"
        assert session.save_csv(path) is False
        assert not path.exists()

    def test_failed_export_keeps_result(self, tokenizer, tmp_path: Path) -> None:
        session = AnalysisSession(tokenizer=tokenizer)
        session.input_text = "a b"
        result = session.analyze()
        with pytest.raises(ExportError):
            session.save_csv(tmp_path / "missing" / "out.csv")
        assert session.result == result

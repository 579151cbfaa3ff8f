"""
Tests for the MCP handlers: every outcome comes back as a result dict
"""
import asyncio
import json
from pathlib import Path

import pytest

from cnab_rows.adapters.mcp import CnabHandlers, check_company_query, check_segment_query
from cnab_rows.container import Container
from cnab_rows.core import ConfigurationError


@pytest.fixture
def handlers(tmp_path):
    return CnabHandlers(Container(export_dir=tmp_path / "extractedDatas"))


class TestArgumentChecks:
    """Test configuration checks shared by CLI and servers."""

    def test_valid_segment_query(self):
        check_segment_query("q", 21, 34)
        check_segment_query("p", 5, 5)

    @pytest.mark.parametrize("segment,start,end", [
        (None, 1, 2),
        ("q", None, 2),
        ("q", 1, None),
        ("  ", 1, 2),
        ("q", -1, 2),
        ("q", 10, 2),
    ])
    def test_invalid_segment_query(self, segment, start, end):
        with pytest.raises(ConfigurationError):
            check_segment_query(segment, start, end)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_invalid_company_query(self, name):
        with pytest.raises(ConfigurationError):
            check_company_query(name)


class TestFindSegment:
    """Test find_segment handler."""

    def test_found(self, handlers, cnab_file, ntt_record):
        result = asyncio.run(handlers.find_segment(cnab_file, "q", 21, 34))

        assert result["success"] is True
        assert result["found"] is True
        assert result["from"] == 21
        assert result["to"] == 34
        assert result["file_path"] == str(cnab_file)
        assert result["match"]["line"] == ntt_record
        assert result["match"]["item"] == "334567000118N"
        assert result["match"]["segment_type"] == "Q"
        assert result["match"]["line_number"] == 3

    def test_not_found_is_success(self, handlers, cnab_file):
        result = asyncio.run(handlers.find_segment(cnab_file, "x", 0, 5))

        assert result["success"] is True
        assert result["found"] is False
        assert result["match"] is None

    def test_missing_file(self, handlers, tmp_path):
        result = asyncio.run(handlers.find_segment(tmp_path / "nope.rem", "q", 0, 5))

        assert result["success"] is False
        assert result["error_type"] == "file_not_found"
        assert "nope.rem" in result["error"]

    def test_bad_range(self, handlers, cnab_file):
        result = asyncio.run(handlers.find_segment(cnab_file, "q", 40, 10))

        assert result["success"] is False
        assert result["error_type"] == "configuration"


class TestFindCompany:
    """Test find_company handler."""

    def test_match_and_export(self, handlers, cnab_file):
        result = asyncio.run(handlers.find_company(cnab_file, "ntt"))

        assert result["success"] is True
        assert result["found"] is True
        assert result["match_count"] == 1
        assert result["name_range"] == [33, 73]
        assert result["matches"][0]["Empresa"] == "NTT BRASIL COMERCIO E SERVICOS DE TECNOL"
        assert len(result["lines"]) == 1

        exported = json.loads(Path(result["export_path"]).read_text(encoding="utf-8"))
        assert exported == result["matches"]

    def test_no_match(self, handlers, cnab_file, tmp_path):
        result = asyncio.run(handlers.find_company(cnab_file, "inexistente"))

        assert result["success"] is True
        assert result["found"] is False
        assert result["match_count"] == 0
        assert result["export_path"] is None
        assert not (tmp_path / "extractedDatas").exists()

    def test_write_error_keeps_matches(self, cnab_file, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not dir")
        handlers = CnabHandlers(Container(export_dir=blocker / "out"))

        result = asyncio.run(handlers.find_company(cnab_file, "ntt"))

        assert result["success"] is False
        assert result["error_type"] == "write_error"
        assert result["match_count"] == 1
        assert result["export_path"] is None

    def test_missing_file(self, handlers, tmp_path):
        result = asyncio.run(handlers.find_company(tmp_path / "nope.rem", "ntt"))

        assert result["success"] is False
        assert result["error_type"] == "file_not_found"
        assert "matches" not in result

    def test_latin1_file_is_searched(self, handlers, latin1_file):
        result = asyncio.run(handlers.find_company(latin1_file, "ntt"))

        assert result["success"] is True
        assert result["match_count"] == 1
        assert result["matches"][0]["Endereço"]["Sigla do Estado"] == "SP"

    def test_latin1_file_with_encoding(self, latin1_file, tmp_path):
        handlers = CnabHandlers(Container(export_dir=tmp_path / "out", encoding="latin-1"))

        result = asyncio.run(handlers.find_company(latin1_file, "construções"))

        assert result["success"] is True
        assert result["matches"][0]["Empresa"] == "CONSTRUÇÕES NTT LTDA"
        exported = Path(result["export_path"]).read_text(encoding="utf-8")
        assert "PRAÇA DA SÉ 100" in exported


    def test_empty_query(self, handlers, cnab_file):
        result = asyncio.run(handlers.find_company(cnab_file, ""))

        assert result["success"] is False
        assert result["error_type"] == "configuration"

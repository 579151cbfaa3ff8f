"""
Tests for the filesystem adapters (record loader and JSON exporter)
"""
import json
from datetime import datetime, timezone

import pytest

from cnab_rows.adapters import FilesystemRecordSource, JsonFileExporter
from cnab_rows.config import DEFAULT_CNAB_FILE
from cnab_rows.container import Container
from cnab_rows.core import CnabFileNotFoundError, CompanySearchService, WriteError

from .conftest import make_document, make_record


class TestFilesystemRecordSource:
    """Test loading data records from a CNAB file."""

    def test_strips_header_and_trailer(self, cnab_file, records):
        loaded = FilesystemRecordSource().load(cnab_file)

        line_count = len(cnab_file.read_text(encoding="utf-8").split("\n"))
        assert len(loaded) == line_count - 4
        assert loaded == records

    def test_records_unmodified(self, tmp_path):
        """No trimming: trailing blanks survive."""
        record = make_record(company="ACME")
        path = tmp_path / "a.rem"
        path.write_text(make_document([record]), encoding="utf-8")

        loaded = FilesystemRecordSource().load(path)

        assert loaded == [record]
        assert len(loaded[0]) == 240

    @pytest.mark.parametrize("content", ["", "h1", "h1\nh2\nt1", "h1\nh2\nt1\nt2"])
    def test_short_documents_are_empty(self, tmp_path, content):
        path = tmp_path / "short.rem"
        path.write_text(content, encoding="utf-8")

        assert FilesystemRecordSource().load(path) == []

    def test_accepts_str_path(self, cnab_file, records):
        assert FilesystemRecordSource().load(str(cnab_file)) == records

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.rem"

        with pytest.raises(CnabFileNotFoundError) as exc_info:
            FilesystemRecordSource().load(missing)

        assert isinstance(exc_info.value, FileNotFoundError)
        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(CnabFileNotFoundError):
            FilesystemRecordSource().load(tmp_path)

    def test_bundled_sample(self):
        loaded = FilesystemRecordSource().load(DEFAULT_CNAB_FILE)

        assert len(loaded) == 12
        assert all(len(record) == 240 for record in loaded)
        assert [record[13] for record in loaded[:3]] == ["P", "Q", "R"]

    def test_latin1_with_declared_encoding(self, latin1_file):
        loaded = FilesystemRecordSource(encoding="latin-1").load(latin1_file)

        assert len(loaded) == 2
        assert loaded[1][33:53] == "CONSTRUÇÕES NTT LTDA"

    def test_latin1_as_utf8_keeps_columns(self, latin1_file):
        """Undecodable bytes become U+FFFD, one per byte, so offsets hold."""
        loaded = FilesystemRecordSource().load(latin1_file)

        record = loaded[1]
        assert len(record) == 240
        assert record[33:53] == "CONSTRU\ufffd\ufffdES NTT LTDA"
        assert record[151:153] == "SP"

        matches = CompanySearchService().execute(loaded, "ntt").matches
        assert [m.address.state_acronym for m in matches] == ["SP"]


class TestJsonFileExporter:
    """Test exporting matches as JSON."""

    def test_empty_is_noop(self, tmp_path):
        out_dir = tmp_path / "extractedDatas"

        assert JsonFileExporter(out_dir).export([]) is None
        assert not out_dir.exists()

    def test_export_creates_dir_and_file(self, tmp_path, records):
        out_dir = tmp_path / "nested" / "extractedDatas"
        matches = CompanySearchService().execute(records, "a").matches

        path = JsonFileExporter(out_dir).export(matches)

        assert path.parent == out_dir
        assert path.name.startswith("exportedData_")
        assert path.suffix == ".json"

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data) == len(matches)
        assert data == [m.to_dict() for m in matches]

    def test_labels_written_unescaped(self, tmp_path, records):
        matches = CompanySearchService().execute(records, "ntt").matches

        text = JsonFileExporter(tmp_path).export(matches).read_text(encoding="utf-8")

        assert '"Endereço"' in text
        assert '"Posições"' in text
        assert text.count("\n") > 10  # indented

    def test_timestamped_name(self, tmp_path):
        now = datetime(2024, 1, 15, 10, 30, 0, 123000, tzinfo=timezone.utc)

        path = JsonFileExporter(tmp_path)._get_path(now)

        assert path == tmp_path / "exportedData_2024-01-15T10:30:00.123Z.json"

    def test_unwritable_dir(self, tmp_path, records):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        matches = CompanySearchService().execute(records, "ntt").matches

        with pytest.raises(WriteError) as exc_info:
            JsonFileExporter(blocker / "out").export(matches)

        assert "blocker" in str(exc_info.value.path)


class TestEndToEnd:
    """Container-wired use cases against real files."""

    def test_segment_search_on_sample(self, tmp_path):
        container = Container(export_dir=tmp_path / "out")

        result = container.find_by_segment.execute(DEFAULT_CNAB_FILE, "q", 21, 34)

        assert result.found
        assert result.match.record[13] == "Q"
        assert result.match.item == "334567000118N"
        assert result.match.line_number == 3

    def test_company_search_on_sample(self, tmp_path):
        out_dir = tmp_path / "out"
        container = Container(export_dir=out_dir)

        result = container.find_by_company.execute(DEFAULT_CNAB_FILE, "ntt")

        assert [m.company for m in result.matches] == [
            "NTT BRASIL COMERCIO E SERVICOS DE TECNOL",
            "NTT DATA BRASIL CONSULTORIA",
        ]
        assert [m.position.line_number for m in result.matches] == [3, 12]
        assert result.export_path.exists()
        assert json.loads(result.export_path.read_text(encoding="utf-8"))[1]["Endereço"]["Bairro"] == "ITAIM BIBI"

    def test_repeated_misses_never_export(self, tmp_path, cnab_file):
        out_dir = tmp_path / "out"
        container = Container(export_dir=out_dir)

        for _ in range(3):
            result = container.find_by_company.execute(cnab_file, "inexistente")
            assert result.matches == []
            assert result.export_path is None

        assert not out_dir.exists()

"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
from pathlib import Path
from typing import Sequence

from .domain import (
    CNAB240_LAYOUT,
    HEADER_LINES,
    Address,
    CompanyMatch,
    CompanySearchResult,
    ExtractionResult,
    FieldLayout,
    MatchPosition,
    SegmentSearchResult,
)
from .errors import WriteError
from .fields import extract_field, segment_type
from .ports import MatchExporter, RecordSource

logger = logging.getLogger(__name__)


class SegmentSearchService:
    """Use case: isolate a column range in the first record of a segment type"""

    def __init__(self, layout: FieldLayout = CNAB240_LAYOUT):
        self.layout = layout

    def execute(
        self,
        records: Sequence[str],
        segment: str,
        start: int,
        end: int
    ) -> SegmentSearchResult:
        """
        Find the first record whose segment type equals segment (case-insensitive).

        Only the first match is returned even when several records share
        the segment type. Records too short to carry a segment type never match.
        """
        wanted = segment.upper()

        for index, record in enumerate(records):
            record_type = segment_type(record, self.layout)
            if record_type is None or record_type.upper() != wanted:
                continue

            return SegmentSearchResult(
                segment=segment,
                start=start,
                end=end,
                match=ExtractionResult(
                    record=record,
                    segment_type=wanted,
                    start=start,
                    end=end,
                    line_number=index + HEADER_LINES
                )
            )

        return SegmentSearchResult(segment=segment, start=start, end=end)


class CompanySearchService:
    """Use case: find every record whose company name contains a query"""

    def __init__(self, layout: FieldLayout = CNAB240_LAYOUT):
        self.layout = layout

    def execute(self, records: Sequence[str], query: str) -> CompanySearchResult:
        """
        Case-insensitive substring match on the trimmed company-name field.

        Line numbers are the scan index plus HEADER_LINES. This assumes the
        file header is exactly two lines; other header variants shift them.
        """
        wanted = query.upper()
        name_range = self.layout["company_name"]
        acronym_range = self.layout["state_acronym"]

        matches = []
        for index, record in enumerate(records):
            company = extract_field(record, "company_name", self.layout).strip()
            if wanted not in company.upper():
                continue

            matches.append(CompanyMatch(
                company=company,
                address=Address(
                    street=self._field(record, "street"),
                    district=self._field(record, "district"),
                    zip_code=self._field(record, "zip_code"),
                    state=self._field(record, "state"),
                    state_acronym=self._field(record, "state_acronym"),
                ),
                position=MatchPosition(
                    segment_type=segment_type(record, self.layout) or "",
                    line_number=index + HEADER_LINES,
                    start=name_range.start,
                    end=acronym_range.end,
                ),
                line_content=record
            ))

        return CompanySearchResult(query=query, matches=matches)

    def _field(self, record: str, name: str) -> str:
        return extract_field(record, name, self.layout).strip()


class FindBySegmentService:
    """Use case: load a CNAB file and run a segment search on it"""

    def __init__(self, source: RecordSource, search: SegmentSearchService):
        self.source = source
        self.search = search

    def execute(
        self,
        path: str | Path,
        segment: str,
        start: int,
        end: int
    ) -> SegmentSearchResult:
        records = self.source.load(path)
        result = self.search.execute(records, segment, start, end)
        result.source = Path(path)

        logger.debug(
            f"segment search: segment={segment} range=[{start}, {end}) "
            f"records={len(records)} found={result.found}"
        )
        return result


class FindByCompanyService:
    """Use case: load a CNAB file, search company names and export matches"""

    def __init__(
        self,
        source: RecordSource,
        search: CompanySearchService,
        exporter: MatchExporter
    ):
        self.source = source
        self.search = search
        self.exporter = exporter

    def execute(self, path: str | Path, query: str) -> CompanySearchResult:
        """
        Search and export.

        Nothing is exported when there are no matches. A failed export is
        attached to the result so the matches are still reported.
        """
        records = self.source.load(path)
        result = self.search.execute(records, query)
        result.source = Path(path)

        logger.debug(
            f"company search: query={query!r} records={len(records)} "
            f"matches={len(result.matches)}"
        )

        if result.matches:
            try:
                result.export_path = self.exporter.export(result.matches)
            except WriteError as e:
                logger.error(f"Export failed: {e}")
                result.export_error = e

        return result

"""
MCP Tool Handlers

Shared handlers for MCP tools and the CLI that use the hexagonal core.
Every handler returns a plain dict; failures come back as
{"success": False, "error": ..., "error_type": ...} instead of raising.
"""
import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

from ...container import Container
from ...core.domain import CompanySearchResult, SegmentSearchResult
from ...core.errors import CnabError, ConfigurationError

logger = logging.getLogger(__name__)


def check_segment_query(segment: Optional[str], start: Optional[int], end: Optional[int]) -> None:
    """Validate segment search arguments, raise ConfigurationError"""
    if segment is None or start is None or end is None:
        raise ConfigurationError("Ao enviar uma das opções -f, -t e -s todas devem ser informadas.")
    if not segment.strip():
        raise ConfigurationError("O segmento não pode ser vazio.")
    if start < 0 or end < 0:
        raise ConfigurationError("As posições -f e -t não podem ser negativas.")
    if start > end:
        raise ConfigurationError("A posição -f deve ser menor ou igual à posição -t.")


def check_company_query(company_name: Optional[str]) -> None:
    """Validate company search arguments, raise ConfigurationError"""
    if company_name is None or not company_name.strip():
        raise ConfigurationError("O nome da empresa (-n) não pode ser vazio.")


def _failure(exc: Exception, action: str) -> dict[str, Any]:
    error_type = exc.error_type if isinstance(exc, CnabError) else "unexpected"
    return {
        "success": False,
        "error": f"{action}: {str(exc)}",
        "error_type": error_type
    }


class CnabHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def find_segment(
        self,
        cnab_file: str | Path,
        segment: str,
        start: int,
        end: int
    ) -> dict[str, Any]:
        """Isolate [start, end) in the first record of a segment type"""
        try:
            check_segment_query(segment, start, end)

            # Read and scan in a worker thread; records never outlive the call
            result: SegmentSearchResult = await asyncio.to_thread(
                self.container.find_by_segment.execute,
                path=cnab_file,
                segment=segment,
                start=start,
                end=end
            )

            match = None
            if result.match:
                match = {
                    "segment_type": result.match.segment_type,
                    "line_number": result.match.line_number,
                    "line": result.match.record,
                    "item": result.match.item,
                    "before": result.match.before,
                    "after": result.match.after,
                }

            return {
                "success": True,
                "found": result.found,
                "segment": segment,
                "from": start,
                "to": end,
                "file_path": str(result.source),
                "match": match
            }

        except Exception as e:
            logger.error(f"find_segment failed: {e}")
            return _failure(e, "Failed to search segment")

    async def find_company(
        self,
        cnab_file: str | Path,
        company_name: str
    ) -> dict[str, Any]:
        """Find records by company name and export the matches as JSON"""
        try:
            check_company_query(company_name)

            result: CompanySearchResult = await asyncio.to_thread(
                self.container.find_by_company.execute,
                path=cnab_file,
                query=company_name
            )

            name_range = self.container.layout["company_name"]

            response = {
                "success": result.export_error is None,
                "found": result.found,
                "query": result.query,
                "file_path": str(result.source),
                "name_range": [name_range.start, name_range.end],
                "match_count": len(result.matches),
                "matches": [m.to_dict() for m in result.matches],
                "lines": [m.line_content for m in result.matches],
                "export_path": str(result.export_path) if result.export_path else None
            }

            if result.export_error is not None:
                # Matches were found but not persisted
                response["error"] = f"Failed to export matches: {result.export_error}"
                response["error_type"] = result.export_error.error_type

            return response

        except Exception as e:
            logger.error(f"find_company failed: {e}")
            return _failure(e, "Failed to search company")

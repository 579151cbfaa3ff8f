"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models and the field layout table
- fields.py: Positional field extraction
- errors.py: Failure taxonomy
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import (
    CNAB240_LAYOUT,
    HEADER_LINES,
    TRAILER_LINES,
    Address,
    CompanyMatch,
    CompanySearchResult,
    ExtractionResult,
    FieldLayout,
    FieldRange,
    MatchPosition,
    SegmentSearchResult,
)
from .errors import CnabError, CnabFileNotFoundError, ConfigurationError, WriteError
from .fields import extract, extract_field, segment_type
from .ports import MatchExporter, RecordSource
from .services import (
    CompanySearchService,
    FindByCompanyService,
    FindBySegmentService,
    SegmentSearchService,
)

__all__ = [
    # Domain models
    "CNAB240_LAYOUT",
    "HEADER_LINES",
    "TRAILER_LINES",
    "Address",
    "CompanyMatch",
    "CompanySearchResult",
    "ExtractionResult",
    "FieldLayout",
    "FieldRange",
    "MatchPosition",
    "SegmentSearchResult",
    # Errors
    "CnabError",
    "CnabFileNotFoundError",
    "ConfigurationError",
    "WriteError",
    # Extraction
    "extract",
    "extract_field",
    "segment_type",
    # Ports
    "RecordSource",
    "MatchExporter",
    # Services
    "SegmentSearchService",
    "CompanySearchService",
    "FindBySegmentService",
    "FindByCompanyService",
]

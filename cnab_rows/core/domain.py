"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts:
positional field layouts, extraction results and company matches.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import WriteError


@dataclass(frozen=True)
class FieldRange:
    """Half-open column interval [start, end) within a record"""
    start: int
    end: int


@dataclass(frozen=True)
class FieldLayout:
    """Named field ranges for one record layout

    The segment-type column is part of the layout so other segment layouts
    can be plugged in without touching the extractor.
    """
    name: str
    segment_type: FieldRange
    fields: Mapping[str, FieldRange]

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, field_name: str) -> FieldRange:
        return self.fields[field_name]


CNAB240_LAYOUT = FieldLayout(
    name="cnab240-segmento-q",
    segment_type=FieldRange(13, 14),
    fields={
        "company_name": FieldRange(33, 73),
        "street": FieldRange(73, 113),
        "district": FieldRange(113, 128),
        "zip_code": FieldRange(128, 136),
        "state": FieldRange(136, 151),
        "state_acronym": FieldRange(151, 153),
    },
)

# Lines stripped before the first data record
HEADER_LINES = 2
TRAILER_LINES = 2


@dataclass
class ExtractionResult:
    """A record located by segment type, with the requested slice"""
    record: str
    segment_type: str
    start: int
    end: int
    line_number: int

    @property
    def item(self) -> str:
        return self.record[max(self.start, 0):max(self.end, self.start, 0)]

    @property
    def before(self) -> str:
        return self.record[:max(self.start, 0)]

    @property
    def after(self) -> str:
        return self.record[max(self.end, self.start, 0):]


@dataclass
class SegmentSearchResult:
    """Outcome of a segment search: found is False when no record matched"""
    segment: str
    start: int
    end: int
    match: Optional[ExtractionResult] = None
    source: Optional[Path] = None

    @property
    def found(self) -> bool:
        return self.match is not None


@dataclass
class Address:
    street: str
    district: str
    zip_code: str
    state: str
    state_acronym: str


@dataclass
class MatchPosition:
    segment_type: str
    line_number: int  # scan index + HEADER_LINES
    start: int
    end: int


@dataclass
class CompanyMatch:
    """A record whose company-name field matched the query"""
    company: str
    address: Address
    position: MatchPosition
    line_content: str = field(default="", repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the labels downstream consumers expect"""
        return {
            "Empresa": self.company,
            "Endereço": {
                "Rua": self.address.street,
                "Bairro": self.address.district,
                "CEP": self.address.zip_code,
                "Estado": self.address.state,
                "Sigla do Estado": self.address.state_acronym,
            },
            "Posições": {
                "Segmento": self.position.segment_type,
                "Linha": self.position.line_number,
                "De": self.position.start,
                "Para": self.position.end,
            },
        }


@dataclass
class CompanySearchResult:
    """Results from searching company names across all records"""
    query: str
    matches: list[CompanyMatch]
    source: Optional[Path] = None
    export_path: Optional[Path] = None
    export_error: Optional[WriteError] = None

    @property
    def found(self) -> bool:
        return bool(self.matches)

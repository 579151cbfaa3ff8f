"""
Positional Field Extractor

Pure functions slicing fixed-width records by column offset.
"""
from typing import Optional

from .domain import CNAB240_LAYOUT, FieldLayout


def extract(record: str, start: int, end: int) -> str:
    """Return record[start:end] with substring semantics.

    Negative offsets clamp to 0, end <= start yields "" and offsets past the
    end of the record truncate instead of failing.
    """
    start = max(start, 0)
    if end <= start:
        return ""
    return record[start:end]


def extract_field(record: str, name: str, layout: FieldLayout = CNAB240_LAYOUT) -> str:
    """Extract a named field from the layout table"""
    field_range = layout[name]
    return extract(record, field_range.start, field_range.end)


def segment_type(record: str, layout: FieldLayout = CNAB240_LAYOUT) -> Optional[str]:
    """Segment-type character of a record, or None when the record is too short"""
    column = layout.segment_type
    if len(record) < column.end:
        return None
    return extract(record, column.start, column.end)

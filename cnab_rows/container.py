"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from pathlib import Path

from .adapters import FilesystemRecordSource, JsonFileExporter
from .core import (
    CNAB240_LAYOUT,
    CompanySearchService,
    FieldLayout,
    FindByCompanyService,
    FindBySegmentService,
    SegmentSearchService,
)


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        export_dir: str | Path,
        layout: FieldLayout = CNAB240_LAYOUT,
        encoding: str = "utf-8"
    ):
        self.layout = layout

        # Adapters (infrastructure)
        self.source = FilesystemRecordSource(encoding=encoding)
        self.exporter = JsonFileExporter(export_dir)

        # Services (use cases)
        self.segment_search = SegmentSearchService(layout)
        self.company_search = CompanySearchService(layout)

        self.find_by_segment = FindBySegmentService(
            source=self.source,
            search=self.segment_search
        )

        self.find_by_company = FindByCompanyService(
            source=self.source,
            search=self.company_search,
            exporter=self.exporter
        )

"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: CNAB file loader and JSON match exporter
- mcp/: MCP tool handlers and schemas
"""
from .filesystem import FilesystemRecordSource, JsonFileExporter

__all__ = [
    "FilesystemRecordSource",
    "JsonFileExporter",
]

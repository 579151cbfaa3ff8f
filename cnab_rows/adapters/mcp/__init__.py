"""
MCP Adapters

MCP protocol adapters that expose the core functionality as MCP tools.
"""
from .tool_definitions import TOOL_SCHEMAS
from .handlers import CnabHandlers, check_company_query, check_segment_query

__all__ = ["TOOL_SCHEMAS", "CnabHandlers", "check_company_query", "check_segment_query"]

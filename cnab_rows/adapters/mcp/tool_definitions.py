"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both stdio and HTTP/SSE servers.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "find_segment": {
        "name": "find_segment",
        "description": """Isolate a column range [from, to) in the first CNAB record of a segment type.

find_segment(segment="q", start=21, end=34) → first Q record + the slice at [21, 34)
find_segment(segment="p", start=0, end=14, cnab_file="/data/remessa.rem")
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "segment": {
                    "type": "string",
                    "description": "Segment type code (e.g. P, Q, R). Case-insensitive."
                },
                "start": {
                    "type": "integer",
                    "description": "Start column, zero-based, inclusive",
                    "minimum": 0
                },
                "end": {
                    "type": "integer",
                    "description": "End column, zero-based, exclusive",
                    "minimum": 0
                },
                "cnab_file": {
                    "type": "string",
                    "description": "Path to the CNAB file. Uses the configured default file if omitted."
                }
            },
            "required": ["segment", "start", "end"]
        }
    },
    "find_company": {
        "name": "find_company",
        "description": """Find CNAB records whose company name contains a search string. Exports matches as JSON.

find_company("ntt") → every record with "NTT" in its company name, plus the exported file path
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "company_name": {
                    "type": "string",
                    "description": "Search string (case-insensitive, partial match)"
                },
                "cnab_file": {
                    "type": "string",
                    "description": "Path to the CNAB file. Uses the configured default file if omitted."
                }
            },
            "required": ["company_name"]
        }
    }
}

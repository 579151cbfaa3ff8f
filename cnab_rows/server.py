"""
cnab-rows MCP Server

MCP delivery layer - wraps the handlers as MCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import CnabHandlers
from .config import (
    get_default_cnab_file,
    get_encoding,
    get_export_dir,
    get_mcp_host,
    get_mcp_port,
)
from .container import Container

# Resolved once at startup, overridable via CLI args
DEFAULT_CNAB_FILE = get_default_cnab_file()
handlers = CnabHandlers(Container(export_dir=get_export_dir(), encoding=get_encoding()))

# Initialize MCP server with HTTP config
mcp = FastMCP("cnab-rows", host=get_mcp_host(), port=get_mcp_port())


@mcp.tool()
async def find_segment(
    segment: str,
    start: int,
    end: int,
    cnab_file: Optional[str] = None
) -> dict:
    """
    Isolate a column range in the first CNAB record of a segment type.

    Args:
        segment: Segment type code ("P", "Q", "R", ...), case-insensitive
        start: Start column, zero-based, inclusive
        end: End column, zero-based, exclusive
        cnab_file: Optional path to the CNAB file. Defaults to the configured file.

    Returns:
        Dictionary with the record line, its line number and the isolated item.
        found is False when no record has that segment type.

    Example:
        find_segment("q", 21, 34)
        → {found: true, match: {line_number: 3, item: "...", ...}}
    """
    return await handlers.find_segment(
        cnab_file=cnab_file or DEFAULT_CNAB_FILE,
        segment=segment,
        start=start,
        end=end
    )


@mcp.tool()
async def find_company(company_name: str, cnab_file: Optional[str] = None) -> dict:
    """
    Find every CNAB record whose company name contains a search string.

    Matching is case-insensitive and partial ("ntt" matches "NTT BRASIL ...").
    Matches are also exported to a timestamped JSON file.

    Args:
        company_name: Search string
        cnab_file: Optional path to the CNAB file. Defaults to the configured file.

    Returns:
        Dictionary with matches (company, address, positions) and the export path
    """
    return await handlers.find_company(
        cnab_file=cnab_file or DEFAULT_CNAB_FILE,
        company_name=company_name
    )


def main():
    """Main entry point for the MCP server."""
    global DEFAULT_CNAB_FILE, handlers

    parser = argparse.ArgumentParser(
        description="cnab-rows: CNAB positional search as MCP tools."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--cnab-file",
        default=None,
        help=f"Default CNAB file (default: {DEFAULT_CNAB_FILE}, or set CNAB_FILE env var)"
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Export directory (default: $CNAB_EXPORT_DIR or ./extractedDatas)"
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="CNAB file encoding (default: $CNAB_ENCODING or utf-8)"
    )
    args = parser.parse_args()

    if args.cnab_file:
        DEFAULT_CNAB_FILE = Path(args.cnab_file).resolve()
    if args.output_dir or args.encoding:
        handlers = CnabHandlers(Container(
            export_dir=args.output_dir or get_export_dir(),
            encoding=args.encoding or get_encoding()
        ))

    # Run the server
    if args.transport == "streamable-http":
        print(f"Starting cnab-rows on http://{mcp.settings.host}:{mcp.settings.port}")
        print(f"Default CNAB file: {DEFAULT_CNAB_FILE}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

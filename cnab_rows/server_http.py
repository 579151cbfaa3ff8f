#!/usr/bin/env python3
"""
MCP HTTP/SSE Server - Hexagonal Architecture

HTTP/SSE server using dependency injection and hexagonal architecture.

Run with: uvicorn cnab_rows.server_http:app --host 127.0.0.1 --port 5003
(or: cnab-rows-http)

Configuration:
- PORT: Server port (default: 5003)
- CNAB_FILE: CNAB file used when a tool call omits cnab_file (default: bundled sample)
- CNAB_EXPORT_DIR: Directory for exported JSON (default: ./extractedDatas)
- CNAB_ENCODING: Text encoding of CNAB files (default: utf-8)
- LOG_LEVEL: Log level (default: WARNING)
"""

import json
import logging
import signal
import sys
from typing import Any

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .adapters.mcp import TOOL_SCHEMAS, CnabHandlers
from .config import (
    get_default_cnab_file,
    get_encoding,
    get_export_dir,
    get_log_level,
    get_port,
)
from .container import Container
from .formatters import format_find_company, format_find_segment
from .logs import setup_logging

setup_logging(get_log_level())

logger = logging.getLogger(__name__)

DEFAULT_CNAB_FILE = get_default_cnab_file()

# Initialize dependency injection container
container = Container(export_dir=get_export_dir(), encoding=get_encoding())

# Initialize MCP handlers
handlers = CnabHandlers(container)

# MCP Server instance
mcp_server = Server("cnab-rows")

# SSE transport for multi-client support
sse_transport = SseServerTransport("/messages/")

FORMATTERS = {
    "find_segment": format_find_segment,
    "find_company": format_find_company,
}


@mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
async def list_tools() -> list[Tool]:
    """List available MCP tools"""
    return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]


@mcp_server.call_tool()  # type: ignore[misc,no-untyped-call]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls"""
    logger.info(f"call_tool: {name} args={arguments}")

    try:
        result = await _dispatch_tool(name, arguments)
    except Exception as e:
        logger.error(f"call_tool: {name} FAILED: {e}")
        raise

    formatter = FORMATTERS.get(name)
    if formatter:
        formatted_text = formatter(result)
    else:
        formatted_text = json.dumps(result, indent=2, ensure_ascii=False)

    logger.info(f"call_tool: {name} returning {len(formatted_text)} chars")
    return [TextContent(type="text", text=formatted_text)]


async def _dispatch_tool(name: str, arguments: dict[str, Any]) -> Any:
    """Dispatch tool call to appropriate handler"""
    cnab_file = arguments.get("cnab_file") or DEFAULT_CNAB_FILE

    if name == "find_segment":
        return await handlers.find_segment(
            cnab_file=cnab_file,
            segment=arguments["segment"],
            start=arguments["start"],
            end=arguments["end"]
        )

    elif name == "find_company":
        return await handlers.find_company(
            cnab_file=cnab_file,
            company_name=arguments["company_name"]
        )

    else:
        raise ValueError(f"Unknown tool: {name}")


# HTTP routes
async def handle_ping(request: Request) -> Response:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_sse(request: Request) -> Response:
    """SSE endpoint for MCP communication"""
    client_addr = request.client.host if request.client else "unknown"
    logger.info(f"SSE connect from {client_addr}")
    async with sse_transport.connect_sse(
        request.scope, request.receive, request._send
    ) as streams:
        logger.info(f"SSE session started for {client_addr}")
        await mcp_server.run(
            streams[0], streams[1], mcp_server.create_initialization_options()
        )
        logger.info(f"SSE disconnect from {client_addr}")
    return Response()


routes = [
    Route("/ping", handle_ping),
    Route("/sse", handle_sse),
    Mount("/messages/", app=sse_transport.handle_post_message),
]

app = Starlette(routes=routes)


# Graceful shutdown on SIGTERM
def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main():
    import uvicorn

    signal.signal(signal.SIGTERM, handle_sigterm)
    port = get_port()
    logger.info(f"Starting MCP HTTP server on port {port}")
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()

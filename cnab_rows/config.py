"""
Runtime configuration

Values resolved from the environment once, at startup, and injected into
the container. Command-line flags override them.
"""
import os
from pathlib import Path

DEFAULT_CNAB_FILE = Path(__file__).parent / "data" / "cnabExample.rem"
DEFAULT_EXPORT_DIRNAME = "extractedDatas"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PORT = 5003
DEFAULT_MCP_HOST = "127.0.0.1"
DEFAULT_MCP_PORT = 6661


def _int_from_env(name: str, default: int) -> int:
    value = os.environ.get(name, str(default))
    try:
        return int(value)
    except ValueError:
        msg = f"Invalid {name} value: {value}"
        raise ValueError(msg) from None


def get_default_cnab_file() -> Path:
    """Get CNAB file used when none is given, from env or the bundled sample"""
    return Path(os.environ.get("CNAB_FILE", str(DEFAULT_CNAB_FILE)))


def get_export_dir() -> Path:
    """Get export directory from env or use ./extractedDatas"""
    export_dir = os.environ.get("CNAB_EXPORT_DIR")
    if export_dir:
        return Path(export_dir)
    return Path.cwd() / DEFAULT_EXPORT_DIRNAME


def get_encoding() -> str:
    """Get text encoding of CNAB files (remessa files are often latin-1)"""
    return os.environ.get("CNAB_ENCODING") or DEFAULT_ENCODING


def get_log_level() -> str:
    """Get log level from env or use fallback"""
    return os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_port() -> int:
    """Get SSE server port from environment or use default"""
    return _int_from_env("PORT", DEFAULT_PORT)


def get_mcp_host() -> str:
    """Get bind host of the streamable-http MCP server"""
    return os.environ.get("CNAB_ROWS_HTTP_HOST", DEFAULT_MCP_HOST)


def get_mcp_port() -> int:
    """Get port of the streamable-http MCP server"""
    return _int_from_env("CNAB_ROWS_HTTP_PORT", DEFAULT_MCP_PORT)

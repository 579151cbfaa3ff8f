#!/usr/bin/env python3
"""
Dev mode runner for cnab-rows

Runs one of the MCP HTTP servers as a child process and restarts it when
package sources or bundled sample files change.

  python dev.py                 # SSE server (cnab_rows.server_http) on $PORT
  python dev.py --target mcp    # FastMCP streamable-http on $CNAB_ROWS_HTTP_PORT
"""
import argparse
import logging
import os
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import PatternMatchingEventHandler
from watchdog.observers import Observer

from cnab_rows.config import get_mcp_port, get_port
from cnab_rows.logs import setup_logging

PACKAGE_DIR = Path(__file__).parent / "cnab_rows"
WATCHED = ["*.py", "*.rem"]
RESTART_INTERVAL = 0.5  # seconds; editors emit several events per save
CHANGE_EVENTS = {"created", "modified", "moved", "deleted"}

logger = logging.getLogger("cnab_rows.dev")


def server_command(target: str, port: int) -> tuple[list[str], dict[str, str]]:
    """Command line and environment for the child server"""
    env = {**os.environ, "LOG_LEVEL": "DEBUG"}
    if target == "mcp":
        env["CNAB_ROWS_HTTP_PORT"] = str(port)
        return [sys.executable, "-m", "cnab_rows.server", "--transport", "streamable-http"], env

    env["PORT"] = str(port)
    return [sys.executable, "-m", "cnab_rows.server_http"], env


class Reloader(PatternMatchingEventHandler):
    """Owns the child server process and restarts it on matching changes."""

    def __init__(self, target: str, port: int):
        super().__init__(patterns=WATCHED, ignore_directories=True)
        self.command, self.env = server_command(target, port)
        self.port = port
        self.process: subprocess.Popen | None = None
        self.last_restart = 0.0

    def start(self):
        self.process = subprocess.Popen(self.command, env=self.env)
        self.last_restart = time.monotonic()
        logger.info(f"Server PID {self.process.pid} listening on port {self.port}")

    def stop(self):
        if self.process is None:
            return
        self.process.terminate()
        try:
            self.process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            self.process.kill()
            self.process.wait()
        self.process = None

    def on_any_event(self, event):
        if event.event_type not in CHANGE_EVENTS:
            return
        if time.monotonic() - self.last_restart < RESTART_INTERVAL:
            return
        logger.info(f"{event.src_path} {event.event_type}, restarting")
        self.stop()
        self.start()


def main():
    parser = argparse.ArgumentParser(description="cnab-rows dev server with auto-restart")
    parser.add_argument(
        "--target",
        choices=["sse", "mcp"],
        default="sse",
        help="sse: cnab_rows.server_http, mcp: cnab_rows.server streamable-http"
    )
    parser.add_argument("--port", type=int, default=None,
                        help="Port (default: $PORT for sse, $CNAB_ROWS_HTTP_PORT for mcp)")
    args = parser.parse_args()

    setup_logging("INFO")
    port = args.port or (get_mcp_port() if args.target == "mcp" else get_port())

    reloader = Reloader(args.target, port)
    observer = Observer()
    observer.schedule(reloader, str(PACKAGE_DIR), recursive=True)

    reloader.start()
    observer.start()
    logger.info(f"Watching {PACKAGE_DIR} ({', '.join(WATCHED)}), Ctrl+C to stop")

    try:
        while observer.is_alive():
            observer.join(1)
    except KeyboardInterrupt:
        logger.info("Stopping dev server")
    finally:
        observer.stop()
        observer.join()
        reloader.stop()


if __name__ == "__main__":
    main()

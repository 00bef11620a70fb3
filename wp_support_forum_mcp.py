#!/usr/bin/env python3
"""
WordPress Support Forum MCP Server

An MCP server exposing public WordPress.org data to assistants: plugin
metadata, plugin search, and the support-forum topics of any plugin, plus a
keyword and category analysis of what users keep asking about.

Features:
- Plugin metadata and directory search
- Recent support-forum topics from the plugin's RSS feed
- Top-issue analysis (keyword frequency + rule-based categories)
- Every failure reported as an error-flagged tool result, never a crash
"""

import asyncio
import logging
import sys
from typing import Any, Optional

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from models import SERVER_NAME, SERVER_VERSION, get_settings
from tools import HANDLERS, TOOLS
from utils import error_result

logger = logging.getLogger("wp-support-forum-mcp")

# Initialize MCP server
server = Server(SERVER_NAME, version=SERVER_VERSION)


# ============================================================================
# Dispatch
# ============================================================================


async def dispatch_tool(name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
    """
    Run the handler registered for ``name``.

    Unknown tools, invalid arguments and anything else a handler lets
    escape are returned as error-flagged results.
    """
    logger.info(f"Tool called: {name}")

    try:
        handler = HANDLERS.get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")
        return await handler(arguments)
    except Exception as e:
        logger.warning(f"Tool '{name}' failed: {e}")
        return error_result(f"Error executing tool '{name}': {e}")


@server.list_tools()
async def handle_list_tools() -> list[Tool]:
    """Return the static list of available tools."""
    return list(TOOLS)


@server.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
    return await dispatch_tool(name, arguments)


# ============================================================================
# Main Entry Point
# ============================================================================


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the protocol."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_environment() -> None:
    """Log the effective configuration on startup."""
    settings = get_settings()
    logger.info(f"Plugin info endpoint: {settings.plugin_info_url}")
    logger.info(f"Plugin search endpoint: {settings.plugin_search_url}")
    logger.info(f"Support feed endpoint: {settings.support_feed_url}")
    logger.info(f"Request timeout: {settings.timeout}s")
    logger.info(f"Tools: {', '.join(tool.name for tool in TOOLS)}")


async def run_server() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server streams established, running...")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        configure_logging("ERROR")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    validate_environment()

    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()

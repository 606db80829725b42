#!/usr/bin/env python
"""MCP server exposing the mirror tool over stdio."""

import asyncio
import sys
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

import structlog
from mcp import stdio_server
from mcp.server.lowlevel import Server as MCPServer
from mcp.types import TextContent, Tool
from structlog.typing import FilteringBoundLogger

from text_mirror.config import Settings
from text_mirror.logs import configure_logging, new_logger
from text_mirror.tool import MirrorToolHandler, ToolException
from text_mirror.version import BuildInfoReader, get_service_version, read_build_info

SERVICE_NAME = "text-mirror"
SERVICE_TITLE = "Text mirroring/reversing tool"

logger = structlog.getLogger(__name__)


class ServerError(Exception):
    """The MCP server failed to run."""


ServerRunner = Callable[[MCPServer], Awaitable[None]]
"""Anything that runs a server until the client goes away."""


def create_mcp_server(handler: MirrorToolHandler, *, version: str) -> MCPServer:
    """Create MCP server.

    Args:
        handler: Handler of the mirror tool, the only tool the server exposes.
        version: Version string reported to clients.
    """
    server = MCPServer(name=SERVICE_NAME, version=version, instructions=SERVICE_TITLE)
    definition = handler.definition()

    available_tools = [
        Tool(
            name=definition["name"],
            description=definition["description"],
            inputSchema=definition["input_schema"],
            outputSchema=definition["output_schema"],
        )
    ]

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        """List available tools."""
        return available_tools

    @server.call_tool()
    async def call_tool(
        name: str, arguments: Dict[str, Any]
    ) -> Tuple[List[TextContent], Dict[str, Any]]:
        """Call a tool by name with arguments."""
        if name != definition["name"]:
            raise ToolException(
                user_message=f"Tool {name} not found",
                developer_message=f"Tool {name} not found, only {definition['name']} is available",
            )
        output = await handler.call(arguments)
        return [TextContent(type="text", text=output.text)], output.model_dump()

    return server


async def run_server_stdio(server: MCPServer) -> None:
    """Run the MCP server."""
    logger.info("Starting MCP server on stdio", name=server.name, version=server.version)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


async def run(
    *,
    settings: Settings,
    logger: FilteringBoundLogger,
    runner: ServerRunner = run_server_stdio,
    build_info_reader: BuildInfoReader = read_build_info,
) -> None:
    """Build the server and run it with ``runner``.

    Raises:
        ServerError: if the runner fails.
    """
    handler = MirrorToolHandler(settings=settings, logger=logger)
    server = create_mcp_server(
        handler, version=get_service_version(build_info_reader)
    )

    try:
        await runner(server)
    except Exception as e:
        raise ServerError(f"MCP server failed to run: {e}") from e


def exit_on_error(
    err: Optional[BaseException], logger: FilteringBoundLogger
) -> None:
    """Log ``err`` and terminate the process. Does nothing if ``err`` is None."""
    if err is None:
        return
    logger.critical("Error", error=str(err))
    sys.exit(1)


def main() -> None:
    """Run the MCP server in stdio mode."""
    configure_logging()
    settings = Settings.from_env()
    diagnostics = new_logger(settings.debug_log, settings.log_path)
    try:
        asyncio.run(
            run(settings=settings, logger=diagnostics, runner=run_server_stdio)
        )
    except ServerError as e:
        exit_on_error(e, diagnostics)


if __name__ == "__main__":
    main()

"""MCP server exposing the registered operations over stdio.

Tool listing and tool calls are answered by a :class:`Dispatcher`; the MCP
SDK owns the session handshake and the JSON-RPC framing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from anyio import to_thread
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .dispatcher import Dispatcher

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerInfo:
    """Identity advertised to clients during initialization."""

    name: str = "pdf-inspect"
    version: str = "1.0.0"
    instructions: str = "Ready"


class ToolCallError(Exception):
    """Carries the text of a failed call; the SDK reports it with ``isError`` set."""


def create_server(
    dispatcher: Optional[Dispatcher] = None,
    info: ServerInfo = ServerInfo(),
) -> Server:
    """Build an MCP server whose tools are the dispatcher's operations."""

    dispatcher = dispatcher or Dispatcher()
    server: Server = Server(info.name, version=info.version, instructions=info.instructions)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in dispatcher.list_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        LOGGER.debug("Tool call %s", name)
        result = await to_thread.run_sync(dispatcher.call, name, arguments)
        if result.is_error:
            raise ToolCallError(result.content)
        return [types.TextContent(type="text", text=result.content)]

    return server


async def run_stdio(server: Server) -> None:
    """Serve ``server`` on stdin/stdout until the client disconnects."""

    async with stdio_server() as (read_stream, write_stream):
        LOGGER.info("%s listening on stdio", server.name)
        await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["ServerInfo", "ToolCallError", "create_server", "run_stdio"]

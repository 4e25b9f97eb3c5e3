"""MCP stdio server exposing the rules tools."""

from __future__ import annotations

import logging
from typing import Any, Optional

from anyio import to_thread
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)

from rules_server.constants import SERVER_NAME, SERVER_VERSION
from rules_server.dispatcher import RulesDispatcher
from rules_server.errors import (
    InvalidToolArgumentsError,
    RulesServerError,
    UnknownToolError,
)

logger = logging.getLogger(__name__)


def to_mcp_error(exc: RulesServerError) -> McpError:
    if isinstance(exc, UnknownToolError):
        code = METHOD_NOT_FOUND
    elif isinstance(exc, InvalidToolArgumentsError):
        code = INVALID_PARAMS
    else:
        code = INTERNAL_ERROR
    return McpError(ErrorData(code=code, message=str(exc)))


def tool_definitions(dispatcher: RulesDispatcher) -> list[Tool]:
    return [
        Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema,
        )
        for tool in dispatcher.list_tools()
    ]


async def call_tool(
    dispatcher: RulesDispatcher, name: str, arguments: Optional[dict[str, Any]]
) -> list[TextContent]:
    # Fetching blocks; keep it off the event loop.
    try:
        text = await to_thread.run_sync(dispatcher.call, name, arguments)
    except RulesServerError as exc:
        logger.warning("Tool %s failed: %s", name, exc)
        raise to_mcp_error(exc) from exc
    return [TextContent(type="text", text=text)]


def build_server(dispatcher: RulesDispatcher) -> Server:
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def _list_tools() -> list[Tool]:
        return tool_definitions(dispatcher)

    # McpError has to reach the session as a JSON-RPC error; the call_tool()
    # decorator would fold it into an isError result.
    async def _handle_call_tool(request: CallToolRequest) -> ServerResult:
        content = await call_tool(
            dispatcher, request.params.name, request.params.arguments
        )
        return ServerResult(CallToolResult(content=content, isError=False))

    server.request_handlers[CallToolRequest] = _handle_call_tool
    return server


async def run_stdio(dispatcher: RulesDispatcher) -> None:
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Rules MCP server running on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )

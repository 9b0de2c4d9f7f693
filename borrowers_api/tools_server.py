"""
MCP (Model Context Protocol) server for the borrowers dataset.

Exposes two tools so any MCP client can discover and call them over stdio:

  get_borrowers     - the full collection from the borrowers API
  search_borrowers  - case-insensitive substring search over that collection

Run from repo root:

  python -m borrowers_api.tools_server

Every call fetches the collection from the remote API again; nothing is cached.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from borrowers_api import __version__
from borrowers_api.errors import DataUnavailableError, UnknownToolError
from borrowers_api.logs import get_logger
from borrowers_api.presentation import borrowers_result, error_result, search_result
from borrowers_api.providers import RemoteBorrowerProvider
from borrowers_api.search import ALL_FIELDS, SEARCH_FIELDS, Query, filter_records

SERVER_NAME = "borrowers-api"

logger = get_logger("borrowers.mcp")

TOOLS: List[Tool] = [
    Tool(
        name="get_borrowers",
        description="Get all borrowers from the API",
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
    Tool(
        name="search_borrowers",
        description="Search borrowers by name, email, or other criteria",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to filter borrowers",
                },
                "field": {
                    "type": "string",
                    "description": "Field to search in (name, email, etc.)",
                    "enum": list(SEARCH_FIELDS),
                    "default": ALL_FIELDS,
                },
            },
            "required": ["query"],
        },
    ),
]


class BorrowersToolServer:
    """Tool registry plus the MCP server wired to it."""

    def __init__(self, provider: Optional[RemoteBorrowerProvider] = None):
        self.provider = provider or RemoteBorrowerProvider()
        self._handlers: Dict[str, Callable[[Dict[str, Any]], Awaitable[CallToolResult]]] = {
            "get_borrowers": self.get_borrowers,
            "search_borrowers": self.search_borrowers,
        }
        self.server = Server(SERVER_NAME, version=__version__)
        self._register_handlers()

    def _register_handlers(self):
        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tools()

        # Input validation is off: a field outside the enum just matches nothing.
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
            return await self.call_tool(name, arguments)

    def list_tools(self) -> List[Tool]:
        return list(TOOLS)

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownToolError(name)
        return await handler(arguments or {})

    async def _fetch(self):
        # requests is blocking; keep the event loop free while it runs.
        return await asyncio.to_thread(self.provider.fetch)

    async def get_borrowers(self, arguments: Dict[str, Any]) -> CallToolResult:
        try:
            borrowers = await self._fetch()
        except DataUnavailableError as e:
            logger.error("get_borrowers failed: %s", e)
            return error_result("fetching", e)
        return borrowers_result(borrowers)

    async def search_borrowers(self, arguments: Dict[str, Any]) -> CallToolResult:
        text = arguments.get("query")
        if not isinstance(text, str):
            return error_result("searching", ValueError("query must be a string"))
        query = Query(text=text, field=arguments.get("field") or ALL_FIELDS)

        try:
            borrowers = await self._fetch()
        except DataUnavailableError as e:
            logger.error("search_borrowers failed: %s", e)
            return error_result("searching", e)
        return search_result(filter_records(borrowers, query), query)

    async def run(self):
        """Serve over stdio until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Borrowers MCP server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def main():
    asyncio.run(BorrowersToolServer().run())


if __name__ == "__main__":
    main()

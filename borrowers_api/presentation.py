# Response shapes for the two transports.
# Tool results: a count summary followed by the records as pretty JSON.
# HTTP: verbatim dataset or a fixed error body.

import json

from fastapi.responses import JSONResponse, Response
from mcp.types import CallToolResult, TextContent

from .search.types import Collection, Query

HTTP_READ_ERROR = {"error": "Failed to read data"}


def dump_records(records: Collection) -> str:
    return json.dumps(records, indent=2, ensure_ascii=False)


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def borrowers_result(records: Collection) -> CallToolResult:
    return _text_result(f"Found {len(records)} borrowers:\n\n{dump_records(records)}")


def search_result(records: Collection, query: Query) -> CallToolResult:
    return _text_result(
        f'Found {len(records)} borrowers matching "{query.text}":\n\n{dump_records(records)}'
    )


def error_result(action: str, exc: Exception) -> CallToolResult:
    """`action` is the verb in the message, e.g. "fetching" or "searching"."""
    return _text_result(f"Error {action} borrowers: {exc}", is_error=True)


def raw_json_response(body: str) -> Response:
    return Response(content=body, media_type="application/json")


def read_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content=HTTP_READ_ERROR)

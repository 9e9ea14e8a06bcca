"""MCP server exposing the transfer tools over stdio."""

import functools

import anyio
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import CallToolResult, TextContent

from myfinance.domain.transfer import TransferService
from myfinance.logging_setup import get_logger
from myfinance.tools.transfer_tools import TransferTools

logger = get_logger("myfinance.tools.server")

SERVER_NAME = "MyFinance"

INSTRUCTIONS = (
    "Personal ledger of incomes and expenses. Amounts are absolute values; "
    "use the type ('Income' or 'Expense') for direction. Dates are local."
)


def as_tool(method):
    """Wrap a blocking tool method for FastMCP.

    The method runs in a worker thread so a storage wait never blocks the
    event loop. A ``ToolError`` raised by the method is returned as an error
    result whose text is exactly the structured error JSON; FastMCP would
    otherwise prefix it with "Error executing tool ...".
    """

    @functools.wraps(method)
    async def call(**arguments):
        try:
            return await anyio.to_thread.run_sync(functools.partial(method, **arguments))
        except ToolError as e:
            return CallToolResult(content=[TextContent(type="text", text=str(e))], isError=True)

    return call


def create_server(service: TransferService) -> FastMCP:
    """Build a FastMCP server with the four transfer tools registered."""
    tools = TransferTools(service)
    server = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)
    registrations = [
        (tools.add_transfer, "AddTransfer", "Add a new transfer"),
        (tools.update_transfer, "UpdateTransfer", "Update an existing transfer"),
        (tools.delete_transfer, "DeleteTransfer", "Delete a transfer"),
        (tools.get_transfers_in_range, "GetTransfersInRange", "Get transfers within a date range"),
    ]
    for method, name, description in registrations:
        # Payloads are JSON text, so no structured output schema
        server.add_tool(
            as_tool(method), name=name, description=description, structured_output=False
        )
    return server


def run_stdio_server(service: TransferService) -> None:
    """Serve the tools on stdin/stdout until the process is terminated."""
    server = create_server(service)
    logger.info("Starting %s tool server on stdio", SERVER_NAME)
    server.run(transport="stdio")

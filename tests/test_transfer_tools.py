"""Tests for the tool-invocation boundary."""

import asyncio
import json
import threading
import uuid
import pytest
from datetime import datetime
from decimal import Decimal

from mcp.server.fastmcp.exceptions import ToolError
from mcp.shared.memory import create_connected_server_and_client_session

from myfinance.domain.errors import StorageUnavailableError
from myfinance.tools.server import create_server
from myfinance.tools.transfer_tools import TransferTools, error_payload


def error_of(exc_info) -> dict:
    """Decode the structured error carried by a ToolError."""
    return json.loads(str(exc_info.value))["error"]


class TestAddTransferTool:
    """Tests for AddTransfer."""

    def test_returns_serialized_transfer(self, transfer_tools):
        """Test that the payload uses the wire field names."""
        payload = json.loads(
            transfer_tools.add_transfer(Decimal("50"), "2024-01-10T08:30:00", "Rent", "expense")
        )

        assert set(payload) == {"id", "value", "date", "description", "type"}
        assert uuid.UUID(payload["id"])
        assert payload["value"] == "50.00"
        assert payload["date"] == "2024-01-10T08:30:00"
        assert payload["description"] == "Rent"
        assert payload["type"] == "Expense"

    def test_accepts_text_amounts(self, transfer_tools):
        """Test that amounts given as text are parsed."""
        payload = json.loads(transfer_tools.add_transfer("$1,234.5", "2024-01-10", "Bonus", "Income"))

        assert payload["value"] == "1234.50"
        assert payload["type"] == "Income"

    def test_invalid_type_is_invalid_argument(self, transfer_tools):
        """Test that a bad type is reported as InvalidArgument."""
        with pytest.raises(ToolError) as exc_info:
            transfer_tools.add_transfer(Decimal("5"), "2024-01-10", "x", "Transfer")

        error = error_of(exc_info)
        assert error["type"] == "InvalidArgument"
        assert "Valid types are 'Income' and 'Expense'" in error["message"]

    @pytest.mark.parametrize("value", ["1e30", "12345678901234567890.00", "0.001"])
    def test_unstorable_amount_is_invalid_argument(self, transfer_tools, transfer_service, value):
        """Test that oversized or sub-cent amounts are InvalidArgument and write nothing."""
        with pytest.raises(ToolError) as exc_info:
            transfer_tools.add_transfer(value, "2024-01-10", "x", "Expense")

        assert error_of(exc_info)["type"] == "InvalidArgument"
        assert transfer_service.get_transfers_in_range(datetime.min, datetime.max) == []

    @pytest.mark.parametrize("value,date", [("-5", "2024-01-10"), ("ten", "2024-01-10"), ("5", "not a date")])
    def test_bad_value_or_date_is_invalid_argument(self, transfer_tools, value, date):
        """Test that unparsable or negative input is InvalidArgument."""
        with pytest.raises(ToolError) as exc_info:
            transfer_tools.add_transfer(value, date, "x", "Expense")

        assert error_of(exc_info)["type"] == "InvalidArgument"


class TestUpdateAndDeleteTools:
    """Tests for UpdateTransfer and DeleteTransfer."""

    def test_update_returns_updated_transfer(self, transfer_tools, sample_transfer):
        """Test that the update payload reflects the new values and same id."""
        payload = json.loads(
            transfer_tools.update_transfer(
                str(sample_transfer.id), Decimal("55.00"), "2024-01-11", "Rent (late fee)", "EXPENSE"
            )
        )

        assert payload == {
            "id": str(sample_transfer.id),
            "value": "55.00",
            "date": "2024-01-11T00:00:00",
            "description": "Rent (late fee)",
            "type": "Expense",
        }

    def test_update_unknown_id_is_not_found(self, transfer_tools):
        """Test that an unknown id is reported as NotFound."""
        with pytest.raises(ToolError) as exc_info:
            transfer_tools.update_transfer(str(uuid.uuid4()), Decimal("1"), "2024-01-11", "x", "Expense")

        assert error_of(exc_info)["type"] == "NotFound"

    def test_malformed_id_is_invalid_argument(self, transfer_tools):
        """Test that a non-UUID id is InvalidArgument."""
        with pytest.raises(ToolError) as exc_info:
            transfer_tools.delete_transfer("42")

        assert error_of(exc_info)["type"] == "InvalidArgument"

    def test_delete_returns_nothing_then_not_found(self, transfer_tools, sample_transfer):
        """Test that delete has no payload and a second delete is NotFound."""
        assert transfer_tools.delete_transfer(str(sample_transfer.id)) is None

        with pytest.raises(ToolError) as exc_info:
            transfer_tools.delete_transfer(str(sample_transfer.id))
        assert error_of(exc_info)["type"] == "NotFound"


class TestGetTransfersInRangeTool:
    """Tests for GetTransfersInRange."""

    def test_returns_json_array(self, transfer_tools, january_transfers):
        """Test that the range payload is an array of serialized transfers."""
        payload = json.loads(transfer_tools.get_transfers_in_range("2024-01-01", "2024-01-31"))

        assert isinstance(payload, list)
        assert {item["id"] for item in payload} == {
            str(january_transfers[0].id),
            str(january_transfers[1].id),
        }

    def test_empty_range_is_empty_array(self, transfer_tools):
        """Test that no matches serialize to []."""
        assert transfer_tools.get_transfers_in_range("2024-01-01", "2024-01-31") == "[]"

    def test_reversed_range_is_invalid_argument(self, transfer_tools):
        """Test that from > to is InvalidArgument."""
        with pytest.raises(ToolError) as exc_info:
            transfer_tools.get_transfers_in_range("2024-02-01", "2024-01-01")

        assert error_of(exc_info)["type"] == "InvalidArgument"


def test_storage_failure_is_reported_not_raised_raw(transfer_service, monkeypatch):
    """Test that storage errors reach the caller as StorageUnavailable tool errors."""

    def broken(*args, **kwargs):
        raise StorageUnavailableError("Storage unavailable: disk I/O error")

    monkeypatch.setattr(transfer_service.db, "insert_transfer", broken)
    tools = TransferTools(transfer_service)

    with pytest.raises(ToolError) as exc_info:
        tools.add_transfer(Decimal("1"), "2024-01-01", "x", "Expense")

    assert error_of(exc_info) == {
        "type": "StorageUnavailable",
        "message": "Storage unavailable: disk I/O error",
    }


def test_error_payload_shape():
    """Test the structured error rendering."""
    payload = json.loads(error_payload(StorageUnavailableError("down")))

    assert payload == {"error": {"type": "StorageUnavailable", "message": "down"}}


def test_server_registers_four_tools(transfer_service):
    """Test that the MCP server exposes exactly the four transfer tools."""
    server = create_server(transfer_service)

    names = {tool.name for tool in asyncio.run(server.list_tools())}

    assert names == {"AddTransfer", "UpdateTransfer", "DeleteTransfer", "GetTransfersInRange"}


def call_tool(server, name: str, arguments: dict):
    """Call a tool through a connected MCP client session."""

    async def run():
        async with create_connected_server_and_client_session(server._mcp_server) as client:
            return await client.call_tool(name, arguments)

    return asyncio.run(run())


def text_of(result) -> str:
    assert len(result.content) == 1
    return result.content[0].text


class TestToolsOverSession:
    """Tests for the tools as an MCP client sees them."""

    def test_add_and_range_payloads_are_json(self, transfer_service):
        """Test that success payloads reach the client as plain JSON text."""
        server = create_server(transfer_service)

        added = call_tool(
            server,
            "AddTransfer",
            {"value": "50.00", "date": "2024-01-10", "description": "Rent", "type": "expense"},
        )
        listed = call_tool(
            server, "GetTransfersInRange", {"from_date": "2024-01-01", "to_date": "2024-01-31"}
        )

        assert not added.isError
        payload = json.loads(text_of(added))
        assert payload["value"] == "50.00"
        assert payload["type"] == "Expense"
        assert not listed.isError
        assert json.loads(text_of(listed)) == [payload]

    def test_numeric_value_is_accepted(self, transfer_service):
        """Test that a JSON number is accepted as the value."""
        server = create_server(transfer_service)

        result = call_tool(
            server,
            "AddTransfer",
            {"value": 12.5, "date": "2024-01-10", "description": "", "type": "Income"},
        )

        assert not result.isError
        assert json.loads(text_of(result))["value"] == "12.50"

    def test_update_payload_keeps_id(self, transfer_service, sample_transfer):
        """Test that UpdateTransfer returns the replaced record under the same id."""
        server = create_server(transfer_service)

        result = call_tool(
            server,
            "UpdateTransfer",
            {
                "id": str(sample_transfer.id),
                "value": "55.00",
                "date": "2024-01-11",
                "description": "Rent (late fee)",
                "type": "Expense",
            },
        )

        assert not result.isError
        payload = json.loads(text_of(result))
        assert payload["id"] == str(sample_transfer.id)
        assert payload["value"] == "55.00"

    def test_delete_returns_empty_result(self, transfer_service, sample_transfer):
        """Test that a successful delete carries no content."""
        server = create_server(transfer_service)

        result = call_tool(server, "DeleteTransfer", {"id": str(sample_transfer.id)})

        assert not result.isError
        assert result.content == []
        assert transfer_service.get_transfer(sample_transfer.id) is None

    @pytest.mark.parametrize(
        "name,arguments,error_type",
        [
            ("DeleteTransfer", {"id": str(uuid.uuid4())}, "NotFound"),
            ("DeleteTransfer", {"id": "42"}, "InvalidArgument"),
            (
                "UpdateTransfer",
                {"id": str(uuid.uuid4()), "value": "1", "date": "2024-01-01", "description": "x", "type": "Expense"},
                "NotFound",
            ),
            (
                "AddTransfer",
                {"value": "5", "date": "2024-01-01", "description": "x", "type": "Refund"},
                "InvalidArgument",
            ),
            (
                "AddTransfer",
                {"value": "1e30", "date": "2024-01-01", "description": "x", "type": "Expense"},
                "InvalidArgument",
            ),
            ("GetTransfersInRange", {"from_date": "2024-02-01", "to_date": "2024-01-01"}, "InvalidArgument"),
        ],
    )
    def test_errors_are_structured_json(self, transfer_service, name, arguments, error_type):
        """Test that the error text the client receives is exactly the structured JSON."""
        server = create_server(transfer_service)

        result = call_tool(server, name, arguments)

        assert result.isError
        error = json.loads(text_of(result))["error"]
        assert error["type"] == error_type
        assert error["message"]


def test_tool_calls_run_off_the_event_loop_thread(transfer_service, monkeypatch):
    """Test that a blocking storage call does not run on the server's event loop thread."""
    seen = []
    list_transfers = transfer_service.db.list_transfers

    def recording(start, end):
        seen.append(threading.current_thread())
        return list_transfers(start, end)

    monkeypatch.setattr(transfer_service.db, "list_transfers", recording)
    server = create_server(transfer_service)

    result = call_tool(server, "GetTransfersInRange", {"from_date": "2024-01-01", "to_date": "2024-01-31"})

    assert not result.isError
    assert seen and seen[0] is not threading.main_thread()

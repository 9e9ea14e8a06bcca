"""Tool-invocation boundary for myfinance."""

from myfinance.tools.transfer_tools import TransferTools
from myfinance.tools.server import create_server

__all__ = ["TransferTools", "create_server"]

"""Serve the transfer tools to an agent."""

import click

from myfinance.domain.transfer import TransferService
from myfinance.tools.server import run_stdio_server


@click.command("serve")
@click.pass_context
def serve(ctx) -> None:
    """Run the MCP tool server on stdin/stdout.

    Exposes AddTransfer, UpdateTransfer, DeleteTransfer and
    GetTransfersInRange. Runs until the process is terminated.
    """
    run_stdio_server(TransferService(ctx.obj["db"]))


def register_commands(cli: click.Group) -> None:
    """Register serve command with main CLI."""
    cli.add_command(serve)

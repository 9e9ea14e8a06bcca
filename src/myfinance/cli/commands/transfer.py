"""Transfer management commands."""

import uuid

import click

from myfinance.cli.date_filters import PERIODS, resolve_cli_date_range
from myfinance.cli.error_handling import handle_domain_error
from myfinance.domain.entities import Transfer
from myfinance.domain.transfer import TransferService
from myfinance.utils.amount_parser import parse_amount
from myfinance.utils.date_parser import parse_datetime

KIND_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


def _echo_transfer(transfer: Transfer) -> None:
    click.echo(f"  ID: {transfer.id}")
    click.echo(f"  Date: {transfer.occurred_at.isoformat(sep=' ')}")
    click.echo(f"  Amount: ${transfer.amount:,.2f}")
    click.echo(f"  Type: {transfer.kind.value}")
    if transfer.note:
        click.echo(f"  Description: {transfer.note}")


def _parse_inputs(ctx, amount: str, date: str):
    try:
        txn_date = parse_datetime(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    return txn_amount, txn_date


@click.command("add")
@click.option("--amount", required=True, help="Transfer amount as an absolute value (e.g., 123.45)")
@click.option(
    "--date",
    required=True,
    help="Transfer date and time (YYYY-MM-DD[THH:MM] or relative like 'today', 'yesterday')",
)
@click.option("--description", default="", help="Short note about the transfer")
@click.option("--type", "kind", required=True, type=KIND_CHOICE, help="Income or Expense")
@click.pass_context
def add_transfer(ctx, amount: str, date: str, description: str, kind: str):
    """Add a transfer.

    Examples:
        myfinance add --amount 50.00 --date 2024-01-10 --description "Rent" --type expense
        myfinance add --amount 1000 --date today --type income
    """
    service = TransferService(ctx.obj["db"])
    txn_amount, txn_date = _parse_inputs(ctx, amount, date)

    try:
        transfer = service.add_transfer(txn_amount, txn_date, description, kind)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transfer {transfer.id}")
    _echo_transfer(transfer)


@click.command("update")
@click.argument("transfer_id", type=click.UUID)
@click.option("--amount", required=True, help="Transfer amount as an absolute value")
@click.option("--date", required=True, help="Transfer date and time")
@click.option("--description", default="", help="Short note about the transfer")
@click.option("--type", "kind", required=True, type=KIND_CHOICE, help="Income or Expense")
@click.pass_context
def update_transfer(ctx, transfer_id: uuid.UUID, amount: str, date: str, description: str, kind: str):
    """Update a transfer.

    Every field is replaced; there are no partial updates.

    Examples:
        myfinance update 9b2c... --amount 55.00 --date 2024-01-11 --description "Rent (late fee)" --type expense
    """
    service = TransferService(ctx.obj["db"])
    txn_amount, txn_date = _parse_inputs(ctx, amount, date)

    try:
        transfer = service.update_transfer(transfer_id, txn_amount, txn_date, description, kind)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transfer {transfer.id}")
    _echo_transfer(transfer)


@click.command("delete")
@click.argument("transfer_id", type=click.UUID)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transfer(ctx, transfer_id: uuid.UUID, yes: bool) -> None:
    """Delete a transfer.

    Examples:
        myfinance delete 9b2c... --yes
    """
    service = TransferService(ctx.obj["db"])

    if not yes and not click.confirm(f"Are you sure you want to delete transfer {transfer_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transfer(transfer_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transfer {transfer_id}")


@click.command("list")
@click.option("--from", "start_date", help="Start date (inclusive; YYYY-MM-DD or relative like 'last month')")
@click.option("--to", "end_date", help="End date (inclusive; a bare date covers the whole day)")
@click.option("--period", type=click.Choice(PERIODS, case_sensitive=False), help="Named period")
@click.pass_context
def list_transfers(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """View transfers within a date range.

    Without --from/--to/--period every transfer is listed.
    """
    service = TransferService(ctx.obj["db"])
    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date, period=period)

    try:
        transfers = service.get_transfers_in_range(start, end)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not transfers:
        click.echo("No transfers found.")
        return

    click.echo(f"\nFound {len(transfers)} transfer(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<36} {'Date':<19} {'Type':<8} {'Amount':>12}  {'Description':<20}")
    click.echo("-" * 100)
    for transfer in transfers:
        amount_str = f"${transfer.amount:,.2f}"
        click.echo(
            f"{str(transfer.id):<36} {transfer.occurred_at.strftime('%Y-%m-%d %H:%M'):<19} "
            f"{transfer.kind.value:<8} {amount_str:>12}  {transfer.note[:20]:<20}"
        )


def register_commands(cli: click.Group) -> None:
    """Register transfer commands with main CLI."""
    cli.add_command(add_transfer)
    cli.add_command(update_transfer)
    cli.add_command(delete_transfer)
    cli.add_command(list_transfers)

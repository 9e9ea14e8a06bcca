"""CLI helpers for date range resolution."""

from datetime import datetime, time

import click

from myfinance.utils.date_parser import get_date_range, parse_datetime

PERIODS = ("this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
) -> tuple[datetime, datetime]:
    """Resolve the CLI date range from a period name or explicit bounds.

    An end bound given without a time of day covers that whole day. A
    missing bound is open-ended.
    """
    if period is not None and (start_date or end_date):
        click.echo("Error: --period cannot be combined with --from or --to.", err=True)
        ctx.exit(1)

    if period is not None:
        return get_date_range(period)

    start = datetime.min
    end = datetime.max

    if start_date:
        try:
            start = parse_datetime(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_datetime(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)
        if end.time() == time.min:
            end = datetime.combine(end.date(), time.max)

    return start, end

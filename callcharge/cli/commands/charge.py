"""Charge a single call command."""

import click

from callcharge.calculators.charge_calculator import calculate_charge_breakdown
from callcharge.cli.error_handlers import with_error_handling
from callcharge.cli.utils.formatters import format_amount, format_breakdown
from callcharge.config.settings import get_config


@click.command(name="charge")
@click.argument("start")
@click.argument("end")
@click.option(
    "--transform",
    "is_transform",
    is_flag=True,
    default=False,
    help="The call spans the autumn (repeated hour) DST transition",
)
@click.option(
    "--breakdown",
    is_flag=True,
    default=False,
    help="Show duration, DST adjustment and billed minutes",
)
@click.pass_context
def charge_call(
    ctx: click.Context, start: str, end: str, is_transform: bool, breakdown: bool
):
    """Calculate the charge for a call from START to END.

    Both timestamps use the format "yyyy-MM-dd HH:mm:ss".

    Example:
        callcharge charge "2023-01-01 00:00:00" "2023-01-01 00:25:00"
        callcharge charge "2023-10-29 02:30:00" "2023-10-29 02:10:00" --transform
    """
    debug = ctx.obj.get("debug", False) if ctx.obj else False

    with with_error_handling(debug):
        tariff = get_config().get_tariff()
        result = calculate_charge_breakdown(start, end, is_transform, tariff)

        if breakdown:
            click.echo(format_breakdown(result))
        else:
            click.echo(format_amount(result.amount))

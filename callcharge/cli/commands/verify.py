"""Verify test vectors command."""

from typing import Optional

import click
import pandas as pd

from callcharge.calculators.batch_calculator import (
    evaluate_vectors,
    outcomes_to_dataframe,
    summarize_outcomes,
)
from callcharge.cli.error_handlers import (
    VectorTableError,
    VerificationError,
    with_error_handling,
)
from callcharge.cli.utils.formatters import (
    format_info,
    format_success,
    format_table,
    format_warning,
)
from callcharge.config.settings import get_config
from callcharge.readers.vector_reader import VECTOR_COLUMNS, ChargeVectorReader
from callcharge.utils.logging_utils import generate_run_id


@click.command(name="verify-vectors")
@click.argument("vector_file", type=click.Path(dir_okay=False))
@click.option(
    "--tolerance",
    type=click.FloatRange(min=0),
    default=None,
    help="Allowed difference between expected and actual amounts "
    "(default: AMOUNT_TOLERANCE setting)",
)
@click.option(
    "--failures-only",
    is_flag=True,
    default=False,
    help="Only list vectors that failed",
)
@click.pass_context
def verify_vectors(
    ctx: click.Context,
    vector_file: str,
    tolerance: Optional[float],
    failures_only: bool,
):
    """Price every call in a CSV vector table and compare the amounts.

    The table columns are: num, startTime, endTime, isTransform, pay.
    Use "error" in the pay column for calls that must be rejected.

    Returns non-zero exit code if any vector fails.

    Example:
        callcharge verify-vectors vectors.csv
        callcharge verify-vectors vectors.csv --tolerance 0.001
    """
    debug = ctx.obj.get("debug", False) if ctx.obj else False

    with with_error_handling(debug):
        settings = get_config()
        if tolerance is None:
            tolerance = settings.amount_tolerance

        click.echo(format_info(f"Reading vectors from {vector_file}..."))
        reader = ChargeVectorReader()
        try:
            vectors = reader.read_csv(vector_file)
        except (pd.errors.EmptyDataError, pd.errors.ParserError, ValueError) as e:
            raise VectorTableError(
                str(e) or f"Cannot read {vector_file}",
                recovery_hint=f"Columns must be: {', '.join(VECTOR_COLUMNS)}",
            ) from e

        for skipped in reader.skipped_rows:
            click.echo(
                format_warning(f"Skipped row {skipped['row']}: {skipped['reason']}")
            )

        run_id = generate_run_id()
        outcomes = evaluate_vectors(
            vectors, settings.get_tariff(), tolerance, run_id=run_id
        )
        summary = summarize_outcomes(outcomes, run_id=run_id)

        df = outcomes_to_dataframe(outcomes)
        if failures_only:
            df = df[df["status"] == "FAIL"]

        if not df.empty:
            click.echo()
            click.echo(
                format_table(
                    [str(c) for c in df.columns],
                    [[str(v) for v in row] for row in df.itertuples(index=False)],
                )
            )

        click.echo()
        click.echo("=" * 60)
        click.echo("Verification Summary")
        click.echo("=" * 60)
        click.echo(f"Vectors:          {summary.total}")
        click.echo(f"Passed:           {summary.passed}")
        click.echo(f"Failed:           {summary.failed}")
        click.echo(f"Raised errors:    {summary.errored}")
        click.echo(f"Skipped rows:     {len(reader.skipped_rows)}")
        click.echo()

        if not summary.all_passed:
            raise VerificationError(
                f"{summary.failed} of {summary.total} vector(s) failed",
                recovery_hint="Run with --failures-only to list just the failures",
            )

        click.echo(format_success(f"All {summary.total} vector(s) passed"))

"""Call Charge CLI.

This module provides a command-line interface for pricing calls and
verifying tables of charge test vectors.
"""

from typing import Optional

import click
from pydantic import ValidationError

from callcharge import __version__
from callcharge.cli.commands.charge import charge_call
from callcharge.cli.commands.verify import verify_vectors
from callcharge.cli.error_handlers import ConfigurationError, with_error_handling
from callcharge.config.logging_config import LoggingConfig, configure_logging
from callcharge.config.settings import get_config


@click.group(help="Call Charge CLI - Price telephone calls across DST transitions")
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, default=False, help="Show full stack traces")
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Override the LOG_LEVEL setting",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_level: Optional[str]):
    """Call Charge CLI main entry point."""
    ctx.ensure_object(dict)

    with with_error_handling(debug):
        try:
            settings = get_config()
            logging_config = LoggingConfig.from_settings(settings)
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(
                f"Cannot load settings: {e}",
                recovery_hint="Check the TARIFF_* and LOG_* settings "
                "in your environment or .env",
            ) from e
        if log_level:
            logging_config.log_level = log_level.upper()
        configure_logging(logging_config)

    ctx.obj["debug"] = debug or settings.debug


# Register commands
cli.add_command(charge_call)
cli.add_command(verify_vectors)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

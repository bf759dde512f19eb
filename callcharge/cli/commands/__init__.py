"""CLI commands."""

from callcharge.cli.commands.charge import charge_call
from callcharge.cli.commands.verify import verify_vectors

__all__ = ["charge_call", "verify_vectors"]

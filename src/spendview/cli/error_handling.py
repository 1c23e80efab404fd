"""CLI error handling helpers."""

import click

from spendview.domain.errors import DomainError


def report_error(ctx: click.Context, message: str) -> None:
    """Show an error notification and exit with failure."""
    ctx.obj["notifier"].error(message)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    report_error(ctx, str(error))

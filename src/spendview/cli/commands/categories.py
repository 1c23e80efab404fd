"""Category listing command."""

import click

from spendview.domain.entities import EXPENSE_CATEGORIES
from spendview.utils.formatting import get_category_badge, get_category_icon


@click.command("categories")
def list_categories():
    """List the standard expense categories."""
    for category in EXPENSE_CATEGORIES:
        click.echo(
            f"{category:<15} {get_category_icon(category):<18} {get_category_badge(category)}"
        )


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(list_categories)

"""Add expense command."""

import click

from spendview.cli.error_handling import handle_domain_error, report_error
from spendview.domain.entities import EXPENSE_CATEGORIES
from spendview.domain.errors import DomainError
from spendview.domain.expense import ExpenseService
from spendview.utils.amount_parser import parse_amount
from spendview.utils.date_parser import parse_date
from spendview.utils.formatting import format_currency, format_date


@click.command("add")
@click.option("--amount", required=True, help="Expense amount (e.g., 12.50 or $1,200)")
@click.option(
    "--category",
    required=True,
    help=f"Category ({', '.join(EXPENSE_CATEGORIES)})",
)
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", default="", help="Expense description")
@click.pass_context
def add_expense(ctx, amount: str, category: str, date: str, description: str):
    """Add an expense.

    Examples:
        spendview add --amount 12.50 --category Food --description "Lunch"
        spendview add --amount 40 --category Transport --date yesterday
    """
    db = ctx.obj["db"]
    notifier = ctx.obj["notifier"]
    owner_id = ctx.obj["user_id"]
    service = ExpenseService(db)

    try:
        expense_date = parse_date(date)
    except ValueError as e:
        report_error(ctx, f"Invalid date format: {e}")

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        report_error(ctx, f"Invalid amount format: {e}")

    if category not in EXPENSE_CATEGORIES:
        notifier.warning(f"'{category}' is not a standard category")

    try:
        expense_id = service.add_expense(
            owner_id=owner_id,
            amount=expense_amount,
            category=category,
            date=expense_date,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    notifier.success("Expense added successfully!")
    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Date: {format_date(expense_date)}")
    click.echo(f"  Amount: {format_currency(expense_amount)}")
    click.echo(f"  Category: {category}")
    if description:
        click.echo(f"  Description: {description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_expense)

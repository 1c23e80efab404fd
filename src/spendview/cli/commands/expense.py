"""Expense management commands."""

import click

from spendview.cli.error_handling import handle_domain_error, report_error
from spendview.domain.aggregation import (
    calculate_total,
    filter_by_category,
    get_recent_expenses,
)
from spendview.domain.entities import ALL_CATEGORIES
from spendview.domain.errors import DomainError, expense_not_found
from spendview.domain.expense import ExpenseService
from spendview.utils.amount_parser import parse_amount
from spendview.utils.date_parser import parse_date
from spendview.utils.formatting import format_currency, format_date_for_input


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("list")
@click.option(
    "--category",
    default=ALL_CATEGORIES,
    show_default=True,
    help="Only show expenses in this category",
)
@click.option("--limit", type=int, help="Show at most this many (newest first)")
@click.pass_context
def list_expenses(ctx, category: str, limit: int | None):
    """List expenses, newest first."""
    db = ctx.obj["db"]
    service = ExpenseService(db)

    try:
        expenses = service.list_expenses(ctx.obj["user_id"])
    except DomainError as e:
        handle_domain_error(ctx, e)

    expenses = filter_by_category(expenses, category)
    if limit is not None:
        expenses = get_recent_expenses(expenses, limit=limit)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<34} {'Date':<12} {'Amount':>12}  {'Category':<15} {'Description':<30}"
    )
    click.echo("-" * 110)

    for expense in expenses:
        description = (expense.description or "")[:30]
        click.echo(
            f"{expense.id:<34} {format_date_for_input(expense.date):<12} "
            f"{format_currency(expense.amount):>12}  {expense.category:<15} {description:<30}"
        )

    click.echo("-" * 110)
    click.echo(
        f"{'TOTAL':<34} {'':<12} {format_currency(calculate_total(expenses)):>12}  "
        f"Count: {len(expenses)}"
    )


@expense_group.command("update")
@click.argument("expense_id")
@click.option("--amount", help="Expense amount (e.g., 12.50)")
@click.option("--category", help="Category name")
@click.option("--date", help="Expense date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--description", help="Expense description (use \"\" to clear)")
@click.pass_context
def update_expense(
    ctx,
    expense_id: str,
    amount: str | None,
    category: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update an expense.

    Updates only the fields that are provided.

    Examples:
        spendview expense update 3f2c... --amount 15.00
        spendview expense update 3f2c... --category Food --description ""
    """
    db = ctx.obj["db"]
    notifier = ctx.obj["notifier"]
    service = ExpenseService(db)

    expense_date = None
    if date is not None:
        try:
            expense_date = parse_date(date)
        except ValueError as e:
            report_error(ctx, f"Invalid date format: {e}")

    expense_amount = None
    if amount is not None:
        try:
            expense_amount = parse_amount(amount)
        except ValueError as e:
            report_error(ctx, f"Invalid amount format: {e}")

    try:
        service.update_expense(
            ctx.obj["user_id"],
            expense_id,
            amount=expense_amount,
            category=category,
            date=expense_date,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    notifier.success(f"Updated expense {expense_id}")


@expense_group.command("delete")
@click.argument("expense_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_expense(ctx, expense_id: str, yes: bool) -> None:
    """Delete an expense.

    Examples:
        spendview expense delete 3f2c... --yes
    """
    db = ctx.obj["db"]
    notifier = ctx.obj["notifier"]
    owner_id = ctx.obj["user_id"]
    service = ExpenseService(db)

    if service.get_expense(owner_id, expense_id) is None:
        report_error(ctx, expense_not_found(expense_id))

    if not yes and not click.confirm(
        f"Are you sure you want to delete expense {expense_id}?"
    ):
        notifier.info("Deletion cancelled.")
        return

    try:
        service.delete_expense(owner_id, expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    notifier.success(f"Deleted expense {expense_id}")


def register_commands(cli: click.Group) -> None:
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")

"""Summary dashboard command."""

from decimal import Decimal

import click

from spendview.cli.error_handling import handle_domain_error, report_error
from spendview.domain.aggregation import DEFAULT_MONTHS, DEFAULT_RECENT_LIMIT
from spendview.domain.entities import ALL_CATEGORIES, AggregateView
from spendview.domain.errors import DomainError
from spendview.domain.summary import SummaryService
from spendview.utils.date_parser import parse_date
from spendview.utils.formatting import format_currency, format_date

BAR_WIDTH = 30


def _bar(amount: Decimal, largest: Decimal) -> str:
    """Text bar proportional to ``amount``."""
    if largest <= 0 or amount <= 0:
        return ""
    return "#" * max(1, int(BAR_WIDTH * amount / largest))


def _display_categories(view: AggregateView) -> None:
    click.echo("\nBy category:")
    if not view.by_category:
        click.echo("  No expenses yet.")
        return

    # Display order only; lookups elsewhere are by key
    ordered = sorted(view.by_category.items(), key=lambda item: (-item[1], item[0]))
    for category, amount in ordered:
        share = (amount / view.total * 100) if view.total else Decimal("0")
        click.echo(f"  {category:<15} {format_currency(amount):>12}  {share:5.1f}%")


def _display_months(view: AggregateView) -> None:
    click.echo(f"\nLast {len(view.by_month)} months:")
    largest = max((bucket.amount for bucket in view.by_month), default=Decimal("0"))
    for label, amount in view.monthly_series():
        click.echo(f"  {label:<10} {format_currency(amount):>12}  {_bar(amount, largest)}")


def _display_expense_list(title: str, expenses) -> None:
    click.echo(f"\n{title}:")
    if not expenses:
        click.echo("  No expenses found.")
        return
    for expense in expenses:
        description = (expense.description or "")[:30]
        click.echo(
            f"  {format_date(expense.date):<14} {format_currency(expense.amount):>12}  "
            f"{expense.category:<15} {description}"
        )


@click.command("summary")
@click.option(
    "--months",
    type=click.IntRange(min=1),
    default=DEFAULT_MONTHS,
    show_default=True,
    help="Number of trailing months in the monthly breakdown",
)
@click.option(
    "--recent",
    type=click.IntRange(min=0),
    default=DEFAULT_RECENT_LIMIT,
    show_default=True,
    help="Number of recent expenses to show",
)
@click.option(
    "--category",
    default=ALL_CATEGORIES,
    show_default=True,
    help="Also list the expenses of this category",
)
@click.option("--as-of", help="Reference date for the monthly window (defaults to today)")
@click.pass_context
def summary(ctx, months: int, recent: int, category: str, as_of: str | None):
    """Show total spending, category and monthly breakdowns, and recent expenses."""
    db = ctx.obj["db"]
    service = SummaryService(db)

    now = None
    if as_of:
        try:
            now = parse_date(as_of)
        except ValueError as e:
            report_error(ctx, f"Invalid date format: {e}")

    try:
        view = service.build_summary(
            ctx.obj["user_id"],
            months=months,
            recent_limit=recent,
            category=category,
            now=now,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Total spent: {format_currency(view.total)}")
    _display_categories(view)
    _display_months(view)
    _display_expense_list("Recent expenses", view.recent)
    if category and category != ALL_CATEGORIES:
        _display_expense_list(f"{category} expenses", view.filtered)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)

"""Command line entry points for Furfolio."""

from __future__ import annotations

from datetime import datetime

import click

from .config import BaseConfig
from .context import create_app_context
from .logging_config import setup_logging
from .services.charge_summary import summarize_charges
from .services.periods import DateRange, Period
from .services.reports import FinancialReport, ReportLineItem, build_report


def _parse_datetime(ctx, param, value):
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise click.BadParameter(f"expected an ISO date/time, got {value!r}") from exc
    if parsed.tzinfo is not None:
        # Stored charges carry local wall-clock times without an offset.
        raise click.BadParameter(f"expected a local time without a UTC offset, got {value!r}")
    return parsed


def _money(amount) -> str:
    return f"${amount:,.2f}"


def _breakdown_lines(title: str, items: tuple[ReportLineItem, ...], empty: str) -> list[str]:
    lines = [title]
    if not items:
        lines.append(f"  {empty}")
    width = max((len(item.category) for item in items), default=0)
    lines.extend(f"  {item.category.ljust(width)}  {_money(item.amount):>12}" for item in items)
    return lines


def format_report(report: FinancialReport) -> str:
    """Plain-text rendering of a report for the terminal."""

    lines = [
        report.report_title,
        f"{report.period.start:%Y-%m-%d %H:%M} -> {report.period.end:%Y-%m-%d %H:%M}",
        "",
        f"Total Revenue   {_money(report.total_revenue):>12}",
        f"Total Expenses  {_money(report.total_expenses):>12}",
        f"Net Profit      {_money(report.net_profit):>12}",
        f"Profit Margin   {report.profit_margin:>11}%",
        "",
    ]
    lines += _breakdown_lines("Income Breakdown", report.revenue_breakdown, "No income recorded for this period.")
    lines.append("")
    lines += _breakdown_lines("Expense Breakdown", report.expense_breakdown, "No expenses recorded for this period.")
    return "\n".join(lines)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Furfolio business tools."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@cli.command("init-db")
@click.pass_obj
def init_db(config: BaseConfig) -> None:
    """Create the database schema."""

    create_app_context(config)
    click.echo(f"Database ready: {config.DATABASE_URL}")


@cli.command("report")
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period], case_sensitive=False),
    default=Period.MONTH.value,
    show_default=True,
)
@click.option("--start", callback=_parse_datetime, help="Explicit range start (ISO).")
@click.option("--end", callback=_parse_datetime, help="Explicit range end (ISO).")
@click.option("--as-of", "as_of", callback=_parse_datetime, help="Treat this moment as now.")
@click.pass_obj
def report(config: BaseConfig, period: str, start, end, as_of) -> None:
    """Print a profit and loss report."""

    if (start is None) != (end is None):
        raise click.UsageError("--start and --end must be given together")
    app = create_app_context(config)
    selected = Period(period.lower())
    if start is not None:
        try:
            selected = DateRange(start=start, end=end)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
    result = build_report(
        selected,
        charge_repository=app.charge_repo,
        expense_repository=app.expense_repo,
        engine=app.report_engine,
        now=as_of,
    )
    click.echo(format_report(result))


@cli.command("summary")
@click.option("--owner", "owner_id", type=int, help="Only charges billed to this owner id.")
@click.pass_obj
def summary(config: BaseConfig, owner_id: int | None) -> None:
    """Print charge totals and payment-method counts."""

    app = create_app_context(config)
    if owner_id is None:
        charges = app.charge_repo.list_all()
    else:
        charges = app.charge_repo.list_by_owner(owner_id)
    result = summarize_charges(charges)
    if not result.count:
        click.echo("No charges recorded yet.")
        return
    click.echo(f"Charges: {result.count}")
    click.echo(f"Total Charged: {_money(result.total)}")
    click.echo(f"Average: {_money(result.average)}")
    click.echo(f"Unpaid: {_money(result.unpaid_total)}")
    for method, count in result.payment_breakdown.items():
        click.echo(f"  {method.label}: {count}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

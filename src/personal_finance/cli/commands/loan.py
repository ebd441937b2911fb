"""Loan commands — EMI and amortization schedule."""

from decimal import Decimal

import typer
from rich.console import Console
from rich.table import Table

from ...core.debt import amortization_schedule, calculate_emi
from ...core.exceptions import InvalidInputError

app = typer.Typer(help="Loan EMI and amortization")
console = Console()


@app.command("emi")
def emi(
    principal: str = typer.Argument(..., help="Loan amount"),
    rate: str = typer.Argument(..., help="Annual interest rate in percent (e.g. 10)"),
    years: str = typer.Argument(..., help="Tenure in years"),
):
    """Monthly installment for a fully amortizing loan."""
    try:
        installment = calculate_emi(principal, rate, years)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"EMI: [bold]{installment}[/bold] per month")


@app.command("schedule")
def schedule(
    principal: str = typer.Argument(..., help="Loan amount"),
    rate: str = typer.Argument(..., help="Annual interest rate in percent (e.g. 10)"),
    years: str = typer.Argument(..., help="Tenure in years"),
    yearly: bool = typer.Option(False, "--yearly", "-y", help="Summarise by year instead of by month"),
):
    """Month-by-month (or yearly) repayment schedule."""
    try:
        rows = amortization_schedule(principal, rate, years)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Amortization — {principal} at {rate}% over {years}y")
    table.add_column("Year" if yearly else "Month", style="cyan", justify="right")
    table.add_column("Payment", justify="right")
    table.add_column("Interest", justify="right")
    table.add_column("Principal", justify="right")
    table.add_column("Balance", justify="right")

    if yearly:
        # 12 months per bucket; the last bucket may be shorter
        for start in range(0, len(rows), 12):
            chunk = rows[start:start + 12]
            table.add_row(
                str(start // 12 + 1),
                f"{sum((r.payment for r in chunk), Decimal('0')):,.2f}",
                f"{sum((r.interest for r in chunk), Decimal('0')):,.2f}",
                f"{sum((r.principal for r in chunk), Decimal('0')):,.2f}",
                f"{chunk[-1].balance:,.2f}",
            )
    else:
        for r in rows:
            table.add_row(
                str(r.month),
                f"{r.payment:,.2f}",
                f"{r.interest:,.2f}",
                f"{r.principal:,.2f}",
                f"{r.balance:,.2f}",
            )
    console.print(table)

    total_interest = sum((r.interest for r in rows), Decimal("0"))
    console.print(f"  Total interest: [bold]{total_interest:,.2f}[/bold]\n")

"""Retirement commands — savings goal and safe withdrawal rate."""

from decimal import Decimal

import typer
from rich.console import Console

from ...core.exceptions import InvalidInputError
from ...core.retirement import retirement_savings_goal, safe_withdrawal_rate

app = typer.Typer(help="Retirement planning")
console = Console()


@app.command("goal")
def goal(
    monthly_expenses: str = typer.Argument(..., help="Monthly expenses to fund"),
    years: str = typer.Argument(..., help="Years until retirement"),
    rate: str = typer.Argument(..., help="Expected annual return in percent (e.g. 8)"),
    savings: str = typer.Argument(..., help="Current retirement savings"),
):
    """Additional savings needed to reach the retirement goal."""
    try:
        needed = retirement_savings_goal(monthly_expenses, years, rate, savings)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    if Decimal(needed) <= 0:
        console.print(f"[green]Goal covered — surplus of {needed.lstrip('-')}[/green]")
    else:
        console.print(f"Additional savings needed: [bold]{needed}[/bold]")


@app.command("swr")
def swr(
    savings: str = typer.Argument(..., help="Total retirement savings"),
    years: str = typer.Argument(..., help="Years in retirement (informational)"),
    annual_expenses: str = typer.Argument(..., help="Annual expenses in retirement"),
):
    """Withdrawal rate implied by annual expenses."""
    try:
        rate = safe_withdrawal_rate(savings, years, annual_expenses)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    color = "green" if Decimal(rate) <= 4 else "yellow"
    console.print(f"Withdrawal rate: [{color}]{rate}%[/{color}]")

"""Debt commands — DTI and payoff ordering."""

from typing import List

import typer
from rich.console import Console
from rich.table import Table

from ...core.debt import calculate_dti, debt_avalanche, debt_snowball
from ...core.exceptions import InvalidInputError
from ...core.models import Debt

app = typer.Typer(help="Debt ratios and payoff order")
console = Console()


def _parse_debt(spec: str, with_rate: bool) -> Debt:
    """Parse NAME=BALANCE or NAME=BALANCE@RATE into a Debt."""
    name, sep, rest = spec.rpartition("=")
    if not sep or not name:
        raise InvalidInputError(f"Expected NAME=BALANCE, got '{spec}'", field="debts")
    rate = None
    if "@" in rest:
        rest, rate = rest.split("@", 1)
    elif with_rate:
        raise InvalidInputError(f"Expected NAME=BALANCE@RATE, got '{spec}'", field="debts")
    return Debt(name=name, balance=rest, interest_rate=rate)


def _print_order(title: str, debts: list[Debt]) -> None:
    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Debt", style="bold")
    table.add_column("Balance", justify="right")
    table.add_column("Rate", justify="right")
    for i, d in enumerate(debts, 1):
        rate_str = f"{d.interest_rate * 100:.2f}%" if d.interest_rate is not None else "—"
        table.add_row(str(i), d.name, f"{d.balance:,.2f}", rate_str)
    console.print(table)


@app.command("dti")
def dti(
    debt_payments: str = typer.Argument(..., help="Total monthly debt payments"),
    income: str = typer.Argument(..., help="Total monthly income"),
):
    """Debt-to-income ratio in percent."""
    try:
        ratio = calculate_dti(debt_payments, income)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"DTI: [bold]{ratio}%[/bold]")


@app.command("snowball")
def snowball(
    debts: List[str] = typer.Argument(..., help="Debts as NAME=BALANCE (e.g. card=2500)"),
):
    """Order debts smallest balance first."""
    try:
        ordered = debt_snowball([_parse_debt(s, with_rate=False) for s in debts])
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    _print_order("Debt Snowball — smallest balance first", ordered)


@app.command("avalanche")
def avalanche(
    debts: List[str] = typer.Argument(..., help="Debts as NAME=BALANCE@RATE, rate as fraction (e.g. card=2500@0.18)"),
):
    """Order debts highest interest rate first."""
    try:
        ordered = debt_avalanche([_parse_debt(s, with_rate=True) for s in debts])
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    _print_order("Debt Avalanche — highest rate first", ordered)

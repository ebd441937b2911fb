"""Investment commands — lump-sum, present value and SIP growth."""

from typing import Optional

import typer
from rich.console import Console

from ...core.config import get_config
from ...core.exceptions import InvalidInputError
from ...core.growth import (
    lump_sum_returns,
    lump_sum_returns_with_inflation,
    present_value_with_inflation,
    present_value_without_inflation,
    sip_returns,
    sip_returns_with_inflation,
)

app = typer.Typer(help="Lump-sum and SIP growth")
console = Console()

REAL_HELP = "Use the inflation-adjusted (real) rate roi − inflation"
INFLATION_HELP = "Annual inflation as a fraction (default from config, 0.06)"


def _inflation(inflation: Optional[str]):
    return inflation if inflation is not None else get_config().default_inflation_rate


def _label(real: bool, inflation) -> str:
    return f"real, inflation {inflation}" if real else "nominal"


@app.command("lump-sum")
def lump_sum(
    principal: str = typer.Argument(..., help="Amount invested today"),
    years: str = typer.Argument(..., help="Holding period in years"),
    roi: str = typer.Argument(..., help="Expected annual return as a fraction (e.g. 0.08)"),
    real: bool = typer.Option(False, "--real", "-r", help=REAL_HELP),
    inflation: Optional[str] = typer.Option(None, "--inflation", "-i", help=INFLATION_HELP),
):
    """Future value of a one-off investment."""
    infl = _inflation(inflation)
    try:
        if real:
            value = lump_sum_returns_with_inflation(principal, years, roi, infl)
        else:
            value = lump_sum_returns(principal, years, roi)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"Future value ({_label(real, infl)}): [bold]{value}[/bold]")


@app.command("present-value")
def present_value(
    future_amount: str = typer.Argument(..., help="Target amount"),
    years: str = typer.Argument(..., help="Years until the target date"),
    roi: str = typer.Argument(..., help="Expected annual return as a fraction (e.g. 0.08)"),
    real: bool = typer.Option(False, "--real", "-r", help=REAL_HELP),
    inflation: Optional[str] = typer.Option(None, "--inflation", "-i", help=INFLATION_HELP),
):
    """Amount needed today to reach a future target."""
    infl = _inflation(inflation)
    try:
        if real:
            value = present_value_with_inflation(future_amount, years, roi, infl)
        else:
            value = present_value_without_inflation(future_amount, years, roi)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"Present value ({_label(real, infl)}): [bold]{value}[/bold]")


@app.command("sip")
def sip(
    payment: str = typer.Argument(..., help="Monthly contribution"),
    months: str = typer.Argument(..., help="Number of monthly contributions"),
    roi: str = typer.Argument(..., help="Expected annual return as a fraction (e.g. 0.08)"),
    real: bool = typer.Option(False, "--real", "-r", help=REAL_HELP),
    inflation: Optional[str] = typer.Option(None, "--inflation", "-i", help=INFLATION_HELP),
):
    """Accumulated value of a monthly SIP."""
    infl = _inflation(inflation)
    try:
        if real:
            value = sip_returns_with_inflation(payment, months, roi, infl)
        else:
            value = sip_returns(payment, months, roi)
    except InvalidInputError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"SIP value ({_label(real, infl)}): [bold]{value}[/bold]")

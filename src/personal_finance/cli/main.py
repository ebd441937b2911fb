"""Personal finance CLI — main entry point."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import get_config
from .commands import config_cmd, debt, invest, loan, retire

app = typer.Typer(
    name="pf",
    help="Personal finance calculators: debt, loans, investments, retirement",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(debt.app, name="debt", help="Debt ratios and payoff order")
app.add_typer(loan.app, name="loan", help="Loan EMI and amortization")
app.add_typer(invest.app, name="invest", help="Lump-sum and SIP growth")
app.add_typer(retire.app, name="retire", help="Retirement planning")
app.add_typer(config_cmd.app, name="config", help="Show or change defaults")


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calculation details"),
):
    """Configure logging from --verbose or config.json."""
    level = "DEBUG" if verbose else get_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()

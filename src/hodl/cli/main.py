"""
The Command-Line Interface (CLI).

This module is the user-facing entry point for hodl. It uses Typer for the
commands and Rich for the output.

Commands:
1. `check`: Buys low, sells high, and reports whether the trade made money.
2. `prices`: Shows the two fixed bitcoin prices.
"""

from typing import Optional
from typing_extensions import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# --- Local Imports from the `hodl` package ---
from ..config import configure_logging, get_settings
from ..prices import get_bitcoin_price_six_months_from_today, get_bitcoin_price_today
from ..trade import UnprofitableTradeError, buy_low_sell_high, ensure_profitable

# --- CLI Application Initialization ---
app = typer.Typer(
    name="hodl",
    help="hodl: Buy bitcoin low, sell it high.",
    add_completion=False,
    rich_markup_mode="markdown"
)

console = Console()


def _format_price(amount: float, currency: str) -> str:
    return f"{amount:,.0f} {currency}"


@app.callback()
def main():
    """Configures logging before any command runs."""
    configure_logging(get_settings())


# --- CLI Commands ---

@app.command()
def check(
    currency: Annotated[Optional[str], typer.Option(
        "--currency", "-c",
        help="Currency code to display prices in. Defaults to HODL_CURRENCY or USD."
    )] = None
):
    """
    Buys at today's price, sells six months from today, and checks the profit.
    """
    try:
        currency = get_settings(currency=currency).currency
    except ValidationError:
        console.print(f"[bold red]Error:[/bold red] Invalid currency code '{currency}'. Use a three-letter code such as USD.")
        raise typer.Exit(code=1)

    console.print(Panel("[bold green]📈 When a user buys low...[/bold green]"))

    trade = buy_low_sell_high()
    console.print(f"   - Bought at [cyan]{_format_price(trade.buy_price, currency)}[/cyan]")
    console.print(f"   - Sold at   [cyan]{_format_price(trade.sell_price, currency)}[/cyan]")

    try:
        ensure_profitable(trade)
    except UnprofitableTradeError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    console.print(Panel(
        f"[bold green]✅ ...it should be able to sell high. "
        f"Profit: {_format_price(trade.profit, currency)}[/bold green]"
    ))


@app.command()
def prices():
    """
    Shows the bitcoin price today and six months from today.
    """
    currency = get_settings().currency
    table = Table(title="Bitcoin Prices")
    table.add_column("When", style="bold")
    table.add_column("Price", justify="right")
    table.add_row("Today", _format_price(get_bitcoin_price_today(), currency))
    table.add_row("Six months from today", _format_price(get_bitcoin_price_six_months_from_today(), currency))
    console.print(table)


# --- Main Execution Guard ---
if __name__ == "__main__":
    app()

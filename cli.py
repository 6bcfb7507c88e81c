#!/usr/bin/env python3
from decimal import Decimal

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rebalancer import AllocationPolicy, Portfolio, RebalanceAction, Stock

console = Console()

# Drift (current weight minus target weight) inside this band counts as on target
DRIFT_BAND = Decimal("0.02")

# Each entry: (shares held, price per share)
DEMO_HOLDINGS: dict[str, tuple[Decimal, Decimal]] = {
    "META": (Decimal("10"), Decimal("300")),
    "APPL": (Decimal("5"), Decimal("200")),
}

DEMO_ALLOCATION: dict[str, Decimal] = {
    "META": Decimal("0.40"),
    "APPL": Decimal("0.60"),
}


def build_demo_portfolio() -> Portfolio:
    holdings = [
        Stock(ticker, shares, price) for ticker, (shares, price) in DEMO_HOLDINGS.items()
    ]
    return Portfolio(holdings, AllocationPolicy.from_mapping(DEMO_ALLOCATION))


def drift_style(drift: Decimal) -> str:
    """Style for a weight drift: green inside the band, red overweight, blue underweight."""
    if drift >= DRIFT_BAND:
        return "red"
    if drift <= -DRIFT_BAND:
        return "blue"
    return "green"


def holdings_table(portfolio: Portfolio, title: str) -> Table:
    """Build a Rich table showing portfolio holdings and drift from target."""
    t = Table(title=title, box=box.ROUNDED, title_style="bold white")
    t.add_column("Ticker", style="cyan")
    t.add_column("Shares", justify="right")
    t.add_column("Price", justify="right")
    t.add_column("Value", justify="right")
    t.add_column("Alloc", justify="right", style="yellow")
    t.add_column("Target", justify="right", style="green")
    t.add_column("Drift", justify="right")

    alloc = portfolio.current_allocation()
    targets = portfolio.target_allocation()
    for asset in portfolio.holdings:
        cur = alloc.get(asset.ticker, Decimal(0))
        tgt = targets.get(asset.ticker, Decimal(0))
        drift = cur - tgt
        t.add_row(
            asset.ticker,
            f"{asset.shares:,}",
            f"${asset.current_price():,.2f}",
            f"${asset.current_value():,.2f}",
            f"{float(cur):.1%}",
            f"{float(tgt):.1%}",
            Text(f"{float(drift):+.1%}", style=drift_style(drift)),
        )

    t.add_section()
    t.add_row(
        "", "", "Total", f"[bold]${portfolio.total_value():,.2f}[/bold]", "", "", ""
    )
    return t


def actions_table(actions: list[RebalanceAction]) -> Table:
    """Build a Rich table showing suggested rebalance actions."""
    t = Table(title="Suggested Actions", box=box.ROUNDED, title_style="bold white")
    t.add_column("Action", no_wrap=True)
    t.add_column("Ticker", style="cyan")
    t.add_column("Shares", justify="right")
    t.add_column("Amount", justify="right")

    buy_total = sell_total = Decimal(0)
    for a in actions:
        style = "green" if a.action == "BUY" else "red"
        if a.action == "BUY":
            buy_total += a.value
        else:
            sell_total += a.value
        t.add_row(
            Text(a.action, style=f"bold {style}"),
            a.ticker,
            f"{a.amount:,.2f}",
            f"${a.value:,.2f}",
        )

    t.add_section()
    t.add_row(
        "",
        "[bold]Trades[/bold]",
        "",
        f"[green]+${buy_total:,.2f}[/green]  [red]-${sell_total:,.2f}[/red]",
    )
    return t


def display_rebalance_results(actions: list[RebalanceAction]) -> None:
    if not actions:
        console.print("[green]  Portfolio balanced within tolerance, no trades needed.[/green]")
        return

    console.print(actions_table(actions))


def main() -> None:
    """Entry point for the CLI application."""
    console.print()
    console.print(
        Panel("[bold]Portfolio Rebalancer[/bold] · demo", box=box.DOUBLE)
    )
    console.print()

    portfolio = build_demo_portfolio()
    console.print(holdings_table(portfolio, "Current holdings"))
    console.print()

    actions = portfolio.rebalance()
    display_rebalance_results(actions)


if __name__ == "__main__":
    main()

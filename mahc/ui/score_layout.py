"""Score report rendering using Rich."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mahc.core.errors import HandError
from mahc.rules.scoring import PaymentTable, ScoreResult
from mahc.ui.tile_display import meld_to_rich_text


def format_payment_table(table: PaymentTable) -> str:
    """Calculator mode text: ron totals with tsumo shares in parentheses."""
    return (
        f"Dealer: {table.dealer_ron} ({table.dealer_tsumo})\n"
        f"non-dealer: {table.non_dealer_ron} "
        f"({table.non_dealer_tsumo_non_dealer}/{table.non_dealer_tsumo_dealer})"
    )


def render_hand(console: Console, result: ScoreResult):
    """Render the chosen reading of the hand, winning tile highlighted."""
    decomposition = result.decomposition
    win_meld = decomposition.win_meld
    text = Text("  ")
    for i, group in enumerate(decomposition.groups):
        if i > 0:
            text.append("  ")
        lit = decomposition.win_tile if group is win_meld else None
        text.append_text(meld_to_rich_text(group, lit))
    text.append(f"   ({decomposition.wait.value})", style="dim")
    console.print(text)


def render_score_result(console: Console, result: ScoreResult):
    """Render the winning screen with yaku, fu and payment details."""
    console.print()
    method = "Tsumo" if result.is_tsumo else "Ron"
    role = "Dealer" if result.is_dealer else "Non-dealer"
    console.print(Panel(
        f"[bold green]{role} wins by {method}[/bold green]",
        border_style="green"
    ))
    render_hand(console, result)

    # Yaku list
    table = Table(title="Yaku", show_header=True, border_style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("", style="dim")
    table.add_column("Han", justify="right")
    for match in result.yaku:
        table.add_row(match.name, match.yaku.kanji, str(match.han))
    table.add_row("Total", "", str(result.han), style="bold")
    console.print(table)

    # Fu breakdown
    table = Table(title="Fu", show_header=True, border_style="cyan")
    table.add_column("Source", style="bold")
    table.add_column("Fu", justify="right")
    for item in result.fu_breakdown.items:
        table.add_row(item.label, str(item.points))
    table.add_row("Total (rounded)", str(result.fu), style="bold")
    console.print(table)

    # Score summary
    payment = result.payment
    if not payment.is_tsumo:
        detail = f"{payment.ron}"
    elif payment.is_dealer:
        detail = f"{payment.non_dealer_pays} all"
    else:
        detail = f"{payment.non_dealer_pays}/{payment.dealer_pays}"
    style = "bold red" if result.is_yakuman else "bold"
    console.print(f"  [{style}]{result.rank_name}[/{style}]  "
                  f"{detail}  ({result.total_points} points)")
    console.print()
    render_payment_table(console, result.payments)


def render_payment_table(console: Console, payments: PaymentTable):
    """Render all payments for a han/fu value."""
    table = Table(title="Payments", border_style="cyan")
    table.add_column("Winner", style="bold")
    table.add_column("Ron", justify="right")
    table.add_column("Tsumo", justify="right")
    table.add_row("Dealer", str(payments.dealer_ron), f"{payments.dealer_tsumo} all")
    table.add_row("Non-dealer", str(payments.non_dealer_ron),
                  f"{payments.non_dealer_tsumo_non_dealer}/{payments.non_dealer_tsumo_dealer}")
    console.print(table)


def render_error(console: Console, error: HandError):
    console.print(f"  [bold red]Error:[/bold red] {error}")

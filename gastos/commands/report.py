"""Dashboard and statistics commands for viewing spending."""

from gastos.commands.common import Palette, console, enter_screen, money, open_session, palette_for
from gastos.domain.budget import project_category_impact
from gastos.domain.summary import CategoryAggregate, calculate_bar_length, dominant_color
from gastos.domain.state import DASHBOARD, STATS
from gastos.session import Session

BAR_WIDTH = 30


def render_bar(percentage: float, color: str, bar_width: int = BAR_WIDTH) -> str:
    """Render a horizontal bar for a percentage.

    Args:
        percentage: Percentage to fill (clamped to 0-100).
        color: Colour of the filled part.
        bar_width: Total bar width in characters.

    Returns:
        Rich markup for the bar.
    """
    filled = calculate_bar_length(percentage, bar_width)
    return f"[{color}]{'█' * filled}[/][dim]{'░' * (bar_width - filled)}[/dim]"


def format_remaining(session: Session, remaining: float, palette: Palette) -> str:
    """Format the remaining budget, or the amount it was exceeded by.

    Args:
        session: Current session.
        remaining: Budget minus spending (negative when exceeded).
        palette: Display colours.

    Returns:
        Rich markup string.
    """
    if remaining < 0:
        return f"[{palette.danger}]Exceeded by: {money(session, abs(remaining))}[/]"
    return f"[{palette.primary}]Remaining: {money(session, remaining)}[/]"


def render_legend_line(aggregate: CategoryAggregate, palette: Palette) -> None:
    console.print(f"  [{aggregate.color}]●[/] {aggregate.name:15} [{palette.primary}]{aggregate.percentage:>3}%[/]")


def render_category_stats(session: Session, aggregate: CategoryAggregate, palette: Palette) -> None:
    """Render one category block of the statistics view.

    Args:
        session: Current session.
        aggregate: Category totals.
        palette: Display colours.
    """
    budget = session.state.budget
    impact = project_category_impact(aggregate.value, budget)

    console.print(
        f"  [{aggregate.color}]●[/] [bold]{aggregate.name:15}[/bold] "
        f"{money(session, aggregate.value):>14} [{aggregate.color}]{aggregate.percentage:>3}%[/]"
    )
    console.print(f"    {render_bar(aggregate.percentage, aggregate.color)}")
    console.print(f"    [{palette.muted}]Budget impact ({money(session, budget)}):[/] {impact:.1f}%")
    console.print(f"    {render_bar(impact, aggregate.color)}\n")


def dashboard_command() -> None:
    """Show the weekly budget, progress and spending by category."""
    session = open_session()
    enter_screen(session, DASHBOARD)

    palette = palette_for(session)
    summary = session.summary()
    projection = session.projection()
    budget = session.state.budget

    console.print(f"[bold {palette.primary}]Weekly budget ({money(session, budget)})[/]\n")

    bar_color = palette.danger if projection.is_exceeded else palette.primary
    console.print(f"  {render_bar(projection.ratio * 100, bar_color)} {projection.ratio * 100:.0f}%")
    console.print(f"  {money(session, summary.total_spent)} spent of {money(session, budget)}")
    console.print(f"  {format_remaining(session, projection.remaining, palette)}\n")

    chart = dominant_color(summary)
    console.print(f"[bold]Total spent[/bold]  [{chart}]⬤[/] {money(session, summary.total_spent)}\n")

    if not summary.breakdown:
        console.print(f"[{palette.muted}]No expenses yet. Add one with 'gastos add'.[/]")
        return

    console.print("[bold]Spending by category:[/bold]\n")
    for aggregate in summary.breakdown:
        render_legend_line(aggregate, palette)


def stats_command() -> None:
    """Show the budget situation and a per-category breakdown."""
    session = open_session()
    enter_screen(session, STATS)

    palette = palette_for(session)
    summary = session.summary()
    projection = session.projection()
    budget = session.state.budget

    console.print(f"[bold {palette.primary}]Budget situation ({money(session, budget)})[/]")
    console.print(f"  {format_remaining(session, projection.remaining, palette)}\n")

    top = summary.top_category
    if top is None:
        console.print(f"[{palette.muted}]No spending to analyse yet.[/]")
        return

    console.print(f"[bold {top.color}]Top category: {top.name} ({top.percentage}%)[/]")
    console.print(f"[{palette.muted}]{money(session, top.value)} of {money(session, summary.total_spent)} spent[/]\n")

    for aggregate in summary.breakdown:
        render_category_stats(session, aggregate, palette)

"""Rich terminal renderer for the result list and the detail view."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from lookup.models import SearchResult
from lookup.state import LookupState

console = Console()

SUMMARY_CHARS = 300


def _truncate(text: str, limit: int = SUMMARY_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def render_results(results: list[SearchResult] | tuple[SearchResult, ...]) -> None:
    """Render the result list with ``[rN]`` reference numbers."""
    if not results:
        console.print("[yellow]No papers found.[/yellow]")
        return

    console.print(f"Found {len(results)} papers")
    console.print()

    for i, r in enumerate(results, 1):
        title_line = Text()
        title_line.append(f"[r{i}] ", style="bold cyan")
        title_line.append(r.title, style="bold")
        console.print(title_line)
        console.print(Text(f"     {r.url}", style="dim"))
        # Text() keeps brackets in abstracts from being read as markup
        console.print(Text(f"     {_truncate(r.summary)}"))
        console.print(f"  > Use `--show {i}` for more info", style="dim italic")
        console.print()


def render_details(result: SearchResult) -> None:
    """Render the detail view of a single result."""
    body = Text()
    body.append(result.title, style="bold")
    body.append("\n\n")
    body.append(result.details)
    console.print(Panel(body, title="Details", title_align="left", expand=False))


def render_error(message: str) -> None:
    console.print(Text(f"Error: {message}", style="red"))


def render_state(state: LookupState) -> None:
    if state.is_loading:
        console.print(Text(f"Searching for {state.query!r}...", style="dim"))
        return
    if state.error is not None:
        render_error(state.error)
        return
    selected = state.selected
    if selected is not None:
        render_details(selected)
        return
    render_results(state.results)

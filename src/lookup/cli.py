"""CLI entry point for the lookup tool."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import click
from rich.console import Console
from rich.text import Text

console = Console()


@click.group()
@click.version_option(package_name="paper-lookup")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """lookup - Find papers on Semantic Scholar by keyword."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# lookup search
# ---------------------------------------------------------------------------


def _select_nth(state, n: int):
    from lookup.state import select

    if not 1 <= n <= len(state.results):
        raise click.BadParameter(
            f"{n} is out of range (1-{len(state.results)}).", param_hint="'--show'"
        )
    return select(state, state.results[n - 1].id)


@cli.command()
@click.argument("query")
@click.option("--show", "-s", default=None, type=int, help="Show details for the Nth result.")
@click.option(
    "--interactive",
    "-i",
    is_flag=True,
    help="Prompt for result numbers to open until an empty answer.",
)
def search(query: str, show: Optional[int], interactive: bool):
    """Search papers by keyword.

    QUERY: the search query string
    """
    from lookup.renderer import render_error, render_results, render_state
    from lookup.state import LookupState, dismiss
    from lookup.workflow import run_search

    with console.status(Text(f"Searching for {query!r}...")):
        state = asyncio.run(run_search(LookupState(), query))

    if state.error is not None:
        render_error(state.error)
        raise SystemExit(1)

    render_results(state.results)
    if not state.results:
        return

    if show is not None:
        state = _select_nth(state, show)
        render_state(state)
        state = dismiss(state)

    if not interactive:
        return

    while True:
        answer = click.prompt(
            "Open result # (empty to quit)", default="", show_default=False
        ).strip()
        if not answer:
            break
        try:
            state = _select_nth(state, int(answer))
        except (ValueError, click.BadParameter):
            console.print(f"[yellow]Enter a number between 1 and {len(state.results)}.[/yellow]")
            continue
        render_state(state)
        state = dismiss(state)


# ---------------------------------------------------------------------------
# lookup env
# ---------------------------------------------------------------------------


@cli.group(invoke_without_command=True)
@click.pass_context
def env(ctx):
    """Show or configure settings.

    Use `lookup env set KEY value` to persist a setting to ~/.lookup/.env.
    """
    if ctx.invoked_subcommand is not None:
        return

    from rich.table import Table

    from lookup.config import PERSISTENT_ENV, check_env

    table = Table(title="Settings", title_justify="left")
    table.add_column("Setting", no_wrap=True, style="bold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Description")
    for setting, is_set in check_env():
        if is_set:
            status = "[green]set[/green]"
        elif setting.default:
            status = f"default {setting.default}"
        else:
            status = "[dim]not set[/dim]"
        table.add_row(setting.name, status, setting.description)
    console.print(table)
    console.print(f"Config file: {PERSISTENT_ENV}", style="dim")


@env.command("set")
@click.argument("key")
@click.argument("value")
def env_set(key: str, value: str):
    """Persist a setting.

    KEY: one of S2_API_KEY, LOOKUP_TIMEOUT
    """
    from lookup.config import VALID_KEYS, save_key

    key = key.upper()
    if key not in VALID_KEYS:
        raise click.BadParameter(
            f"unknown key {key!r}, expected one of {', '.join(sorted(VALID_KEYS))}.",
            param_hint="'KEY'",
        )

    path = save_key(key, value)
    console.print(f"Saved {key} to {path}")

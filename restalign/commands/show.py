"""Show command implementation - resolve properties and print the REST state."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import ConfigurationError
from ..properties import load_properties, merge_properties, parse_assignment
from ..state import RestState, initialise

console = Console()
err = Console(stderr=True)


def resolve_state(property_file: Path | None, assignments: tuple[str, ...] = ()) -> RestState:
    """Property file first, then ``-D`` assignments on top."""
    file_properties = load_properties(property_file) if property_file else {}
    overrides = [parse_assignment(a) for a in assignments]
    return initialise(merge_properties(file_properties, overrides))


def _render(state: RestState) -> None:
    settings = state.version_translator

    summary = Table(title="REST alignment", show_header=False)
    summary.add_column("Setting", style="cyan")
    summary.add_column("Value")
    summary.add_row("enabled", "yes" if state.is_enabled else "[yellow]no[/yellow]")
    summary.add_row("url", escape(settings.url or "-"))
    summary.add_row("suffix align", str(state.suffix_align).lower())
    summary.add_row("brew pull", str(settings.brew_pull_active).lower())
    summary.add_row("mode", escape(settings.mode or "-"))
    summary.add_row("size", f"{settings.min_size}..{settings.max_size}")
    summary.add_row(
        "timeouts",
        f"connect {settings.connection_timeout}s, socket {settings.socket_timeout}s, "
        f"retry {settings.retry_duration}s",
    )
    for key, value in settings.headers.items():
        summary.add_row(escape(f"header {key}"), escape(value))
    console.print(summary)

    if not settings.constraints:
        console.print("[dim]No dependency constraints.[/dim]")
        return

    table = Table(title="Dependency constraints")
    table.add_column("Scope", style="cyan")
    table.add_column("Ranks")
    table.add_column("Allow list")
    table.add_column("Deny list")

    def cell(value: str | None) -> str:
        return "[dim]unset[/dim]" if value is None else escape(repr(value))

    for c in settings.sorted_constraints():
        ranks = None if c.ranks is None else state.rank_delimiter.join(c.ranks)
        scope = "(global)" if c.scope is None else escape(c.scope)
        table.add_row(scope, cell(ranks), cell(c.allow_list), cell(c.deny_list))
    console.print(table)


def run_show(property_file: Path | None, assignments: tuple[str, ...], output_json: bool) -> int:
    """
    Resolve and print the REST alignment state.

    Returns:
        Exit code (0 = resolved, 1 = configuration error)
    """
    try:
        state = resolve_state(property_file, assignments)
    except (ConfigurationError, ValueError, FileNotFoundError) as e:
        err.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    if output_json:
        console.print_json(json.dumps(state.to_dict()))
    else:
        _render(state)
    return 0

"""Command-line interface for devfinder."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from devfinder import DevFinder, WidgetConfig, save_json, __version__
from devfinder.config import ColorScheme
from devfinder.core.exporter import dump_state
from devfinder.models.state import LookupState
from devfinder.models.view import ProfileView

app = typer.Typer(
    name="devfinder",
    help="GitHub profile lookup widget",
    add_completion=False,
)
console = Console()

PALETTES = {
    True: {
        "card": "white on grey15",
        "muted": "grey62",
        "accent": "dodger_blue1",
        "stats": "white on grey7",
    },
    False: {
        "card": "grey11 on white",
        "muted": "grey50",
        "accent": "dodger_blue2",
        "stats": "grey11 on grey93",
    },
}

CONTACT_ICONS = {
    "Location": "📍",
    "Website": "🔗",
    "Twitter": "🐦",
    "Company": "🏢",
}


def version_callback(value: bool):
    if value:
        console.print(f"devfinder version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """devfinder - GitHub profile lookup widget."""
    pass


def _make_config(dark: Optional[bool]) -> WidgetConfig:
    config = WidgetConfig()
    if dark is not None:
        config.color_scheme = ColorScheme.DARK if dark else ColorScheme.LIGHT
    return config


def _make_finder(config: WidgetConfig) -> DevFinder:
    return DevFinder(config)


@app.command()
def search(
    handle: str = typer.Argument(..., help="GitHub username to look up"),
    dark: Optional[bool] = typer.Option(
        None, "--dark/--light", help="Force the display theme"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save the profile as JSON to this file"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the lookup state as JSON instead of a card"
    ),
):
    """Look up a single GitHub profile."""
    config = _make_config(dark)

    async def run() -> LookupState:
        async with _make_finder(config) as finder:
            task = finder.submit(handle)
            if task is None:
                console.print("[red]Enter a username to search[/red]")
                raise typer.Exit(1)

            if not as_json:
                with console.status("Searching..."):
                    await task
            else:
                await task

            state = finder.state
            if as_json:
                console.print_json(dump_state(state))
            else:
                _print_state(state, finder.view, finder.theme.dark)
            return state

    state = asyncio.run(run())

    if state.profile is None:
        raise typer.Exit(1)

    if output:
        path = save_json(state.profile, output)
        console.print(f"[dim]Saved to {path}[/dim]")


@app.command()
def default(
    dark: Optional[bool] = typer.Option(
        None, "--dark/--light", help="Force the display theme"
    ),
):
    """Show the built-in default profile."""
    finder = _make_finder(_make_config(dark))
    _print_state(finder.state, finder.view, finder.theme.dark)


@app.command()
def interactive(
    dark: Optional[bool] = typer.Option(
        None, "--dark/--light", help="Initial display theme"
    ),
):
    """Run the widget as a prompt loop (:theme toggles, :quit exits)."""
    config = _make_config(dark)

    async def run() -> None:
        async with _make_finder(config) as finder:
            _print_header(finder.theme.toggle_label)
            _print_state(finder.state, finder.view, finder.theme.dark)

            while True:
                line = await asyncio.to_thread(
                    console.input, "[bold]Search GitHub username...[/bold] "
                )
                command = line.strip()

                if command in (":quit", ":q"):
                    break
                if command == ":theme":
                    finder.toggle_theme()
                    _print_header(finder.theme.toggle_label)
                    _print_state(finder.state, finder.view, finder.theme.dark)
                    continue

                task = finder.submit(line)
                if task is None:
                    continue
                with console.status("Searching..."):
                    await task
                _print_state(finder.state, finder.view, finder.theme.dark)

    try:
        asyncio.run(run())
    except (EOFError, KeyboardInterrupt):
        console.print()


def _print_header(toggle_label: str) -> None:
    icon = "🌞" if toggle_label == "LIGHT" else "🌙"
    header = Table.grid(expand=True)
    header.add_column()
    header.add_column(justify="right")
    header.add_row("[bold]devfinder[/bold]", f"[bold]{toggle_label} {icon}[/bold]")
    console.print(header)


def _print_state(state: LookupState, view: ProfileView | None, dark: bool) -> None:
    """Print whatever the current state has to show."""
    if state.error:
        console.print(f"[bold red]{state.error}[/bold red]")
    if view is not None:
        console.print(render_card(view, dark))


def render_card(view: ProfileView, dark: bool) -> Panel:
    """Build the profile card renderable."""
    palette = PALETTES[dark]

    title = Text()
    title.append(view.name, style="bold")
    title.append("\n")
    title.append(view.handle, style=Style.parse(palette["accent"]) + Style(link=view.profile_url))
    title.append("\n")
    title.append(view.joined, style=palette["muted"])

    bio = Text(view.bio, style="" if view.has_bio else f"italic {palette['muted']}")

    stats = Table.grid(expand=True, padding=(0, 2))
    for _ in range(3):
        stats.add_column(justify="center")
    stats.add_row(
        Text("Repos", style=palette["muted"]),
        Text("Followers", style=palette["muted"]),
        Text("Following", style=palette["muted"]),
    )
    stats.add_row(
        Text(f"{view.repos:,}", style="bold"),
        Text(f"{view.followers:,}", style="bold"),
        Text(f"{view.following:,}", style="bold"),
    )

    contacts = Table.grid(expand=True, padding=(0, 2))
    contacts.add_column()
    contacts.add_column()
    cells = []
    for entry in view.contacts:
        icon = CONTACT_ICONS.get(entry.label, "")
        if not entry.available:
            style = f"dim {palette['muted']}"
        elif entry.link:
            style = Style(link=entry.link)
        else:
            style = ""
        cells.append(Text(f"{icon} {entry.text}", style=style))
    contacts.add_row(cells[0], cells[1])
    contacts.add_row(cells[2], cells[3])

    return Panel(
        Group(title, Text(), bio, Text(), Panel(stats, style=palette["stats"]), Text(), contacts),
        style=palette["card"],
        expand=False,
        width=72,
    )


if __name__ == "__main__":
    app()

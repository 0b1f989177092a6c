"""
Main CLI application entry point.

This module contains the Typer application and command handlers for
browsing the Rebrickable catalog from a terminal.
"""

from typing import Awaitable, Callable, Optional, TypeVar
import asyncio
import re
import typer
from rich.console import Console
from rich.table import Table
from rich.markup import escape
from rich.panel import Panel

from brixie import VERSION
from brixie.config.env_loader import EnvFileLoader
from brixie.config.settings import BrixieSettings, get_settings
from brixie.core.client import (
    ApiResult,
    ErrorKind,
    LegoColor,
    LegoPart,
    LegoSet,
    LegoTheme,
    PagedResponse,
    RebrickableClient,
    create_user_friendly_message,
)
from brixie.utils.logging import setup_logging

T = TypeVar("T")

_HEX_RGB = re.compile(r"[0-9A-Fa-f]{6}")

app = typer.Typer(
    name="brixie",
    help="Brixie - browse the Rebrickable LEGO catalog",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def create_client(settings: BrixieSettings) -> RebrickableClient:
    """Build the client used by a single command invocation."""
    return RebrickableClient.from_settings(settings)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]Brixie[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", help="Rebrickable API key (overrides BRIXIE_API_KEY)"),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Log HTTP requests and responses"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Brixie - browse the Rebrickable LEGO catalog.

    Search sets and parts, look up a single set or part, and list themes
    and colors.
    """
    EnvFileLoader().load_env_file()
    settings = get_settings(api_key=api_key, debug=debug)
    setup_logging(settings.log_level, debug=settings.debug)
    ctx.obj = settings


def _run(ctx: typer.Context, call: Callable[[RebrickableClient], Awaitable[ApiResult[T]]]) -> T:
    """Run one API call with a fresh client and unwrap its result for display."""
    settings: BrixieSettings = ctx.obj
    if not settings.is_configured:
        console.print("[red]Error:[/red] No Rebrickable API key configured.")
        console.print("[dim]Set BRIXIE_API_KEY or pass --api-key.[/dim]")
        raise typer.Exit(1)

    async def _call() -> ApiResult[T]:
        async with create_client(settings) as client:
            return await call(client)

    result = asyncio.run(_call())
    if result.is_failure:
        error = result.error
        console.print(f"[red]Error:[/red] {escape(create_user_friendly_message(error))}")
        if error.kind in (ErrorKind.NETWORK, ErrorKind.RATE_LIMIT, ErrorKind.SERVER):
            console.print("[dim]This is usually temporary; try again shortly.[/dim]")
        raise typer.Exit(1)
    return result.value


def _print_page_footer(page: PagedResponse, page_number: int) -> None:
    hint = f"page {page_number}, {len(page.results)} of {page.count} total"
    if page.has_next:
        hint += f" (next: --page {page_number + 1})"
    console.print(f"[dim]{hint}[/dim]")


def _sets_table(sets: PagedResponse[LegoSet]) -> Table:
    table = Table(title="Sets")
    table.add_column("Set", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Year", justify="right")
    table.add_column("Theme", justify="right")
    table.add_column("Parts", justify="right")
    for lego_set in sets.results:
        table.add_row(
            escape(lego_set.set_num),
            escape(lego_set.name),
            str(lego_set.year),
            str(lego_set.theme_id),
            str(lego_set.num_parts),
        )
    return table


@app.command("sets")
def sets_command(
    ctx: typer.Context,
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search query"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    page_size: int = typer.Option(20, "--page-size", "-n", min=1, help="Results per page (max 1000)"),
    theme_id: Optional[int] = typer.Option(None, "--theme-id", help="Only sets in this theme"),
    min_year: Optional[int] = typer.Option(None, "--min-year", help="Released in or after this year"),
    max_year: Optional[int] = typer.Option(None, "--max-year", help="Released in or before this year"),
    min_parts: Optional[int] = typer.Option(None, "--min-parts", help="At least this many parts"),
    max_parts: Optional[int] = typer.Option(None, "--max-parts", help="At most this many parts"),
) -> None:
    """Search LEGO sets."""
    sets = _run(ctx, lambda client: client.list_sets(
        search=search,
        page=page,
        page_size=page_size,
        theme_id=theme_id,
        min_year=min_year,
        max_year=max_year,
        min_parts=min_parts,
        max_parts=max_parts,
    ))
    console.print(_sets_table(sets))
    _print_page_footer(sets, page)


@app.command("set")
def set_command(
    ctx: typer.Context,
    set_num: str = typer.Argument(..., help="Set number, e.g. 8880-1"),
) -> None:
    """Show details of one LEGO set."""
    lego_set = _run(ctx, lambda client: client.get_set(set_num))

    lines = [
        f"[bold]Number:[/bold] {escape(lego_set.set_num)}",
        f"[bold]Year:[/bold] {lego_set.year}",
        f"[bold]Theme ID:[/bold] {lego_set.theme_id}",
        f"[bold]Parts:[/bold] {lego_set.num_parts}",
    ]
    if lego_set.set_img_url:
        lines.append(f"[bold]Image:[/bold] {escape(lego_set.set_img_url)}")
    if lego_set.set_url:
        lines.append(f"[bold]URL:[/bold] {escape(lego_set.set_url)}")
    lines.append(f"[dim]Last modified {escape(lego_set.last_modified_dt)}[/dim]")
    console.print(Panel("\n".join(lines), title=escape(lego_set.name), border_style="blue"))


@app.command("parts")
def parts_command(
    ctx: typer.Context,
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search query"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    page_size: int = typer.Option(20, "--page-size", "-n", min=1, help="Results per page (max 1000)"),
    category: Optional[int] = typer.Option(None, "--category", "-c", help="Only parts in this category"),
) -> None:
    """Search LEGO parts."""
    parts = _run(ctx, lambda client: client.list_parts(
        search=search,
        page=page,
        page_size=page_size,
        part_cat_id=category,
    ))

    table = Table(title="Parts")
    table.add_column("Part", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category", justify="right")
    for part in parts.results:
        table.add_row(escape(part.part_num), escape(part.name), str(part.part_cat_id))
    console.print(table)
    _print_page_footer(parts, page)


def _part_panel(part: LegoPart) -> Panel:
    lines = [
        f"[bold]Number:[/bold] {escape(part.part_num)}",
        f"[bold]Category:[/bold] {part.part_cat_id}",
    ]
    if part.print_of:
        lines.append(f"[bold]Print of:[/bold] {escape(part.print_of)}")
    if part.part_url:
        lines.append(f"[bold]URL:[/bold] {escape(part.part_url)}")
    if part.part_img_url:
        lines.append(f"[bold]Image:[/bold] {escape(part.part_img_url)}")
    for catalog, ids in sorted((part.external_ids or {}).items()):
        lines.append(f"[bold]{escape(catalog)}:[/bold] {escape(', '.join(ids))}")
    return Panel("\n".join(lines), title=escape(part.name), border_style="blue")


@app.command("part")
def part_command(
    ctx: typer.Context,
    part_num: str = typer.Argument(..., help="Part number, e.g. 3001"),
) -> None:
    """Show details of one LEGO part."""
    part = _run(ctx, lambda client: client.get_part(part_num))
    console.print(_part_panel(part))


@app.command("themes")
def themes_command(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    page_size: int = typer.Option(50, "--page-size", "-n", min=1, help="Results per page (max 1000)"),
) -> None:
    """List LEGO themes."""
    themes: PagedResponse[LegoTheme] = _run(ctx, lambda client: client.list_themes(page=page, page_size=page_size))

    table = Table(title="Themes")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Parent", justify="right")
    for theme in themes.results:
        parent = str(theme.parent_id) if theme.parent_id is not None else "-"
        table.add_row(str(theme.id), escape(theme.name), parent)
    console.print(table)
    _print_page_footer(themes, page)


@app.command("colors")
def colors_command(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    page_size: int = typer.Option(20, "--page-size", "-n", min=1, help="Results per page (max 1000)"),
) -> None:
    """List LEGO colors."""
    colors: PagedResponse[LegoColor] = _run(ctx, lambda client: client.list_colors(page=page, page_size=page_size))

    table = Table(title="Colors")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("RGB")
    table.add_column("Transparent")
    for color in colors.results:
        swatch = f"[on #{color.rgb}]  [/] #{color.rgb}" if _HEX_RGB.fullmatch(color.rgb) else escape(color.rgb)
        table.add_row(str(color.id), escape(color.name), swatch, "yes" if color.is_trans else "no")
    console.print(table)
    _print_page_footer(colors, page)


if __name__ == "__main__":
    app()

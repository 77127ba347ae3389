"""Main Typer application for Quire."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quire.core.buffer import OutputBuffer
from quire.core.config import SiteConfig
from quire.core.context import RenderingContext
from quire.core.exceptions import QuireError
from quire.core.logging import configure_logging
from quire.core.manifest import load_items
from quire.core.notifications import FilterTimingObserver
from quire.core.types import Item, ItemRep
from quire.engine.filters import default_registry
from quire.helpers.filtering import filter_block
from quire.helpers.xml_sitemap import xml_sitemap
from quire.infra.sinks.sitemap import SitemapSink

app = typer.Typer(name="quire", help="Quire - rendering helpers for static sites", no_args_is_help=True)
console = Console()


def _parse_options(raw: list[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    for entry in raw:
        key, sep, value = entry.partition("=")
        if not sep or not key:
            msg = f"Invalid option '{entry}', expected key=value"
            raise typer.BadParameter(msg)
        options[key] = value
    return options


@app.callback()
def main(
    log_level: Annotated[str | None, typer.Option(help="Logging level (overrides QUIRE_LOG_LEVEL)")] = None,
) -> None:
    configure_logging(log_level)


@app.command()
def sitemap(
    manifest: Annotated[Path, typer.Argument(help="YAML manifest listing the site's items")],
    base_url: Annotated[str | None, typer.Option(help="Site URL without trailing slash")] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the sitemap here")] = None,
    write: Annotated[
        bool, typer.Option("--write", "-w", help="Write to the configured output_dir/sitemap_path")
    ] = False,
    include_hidden: Annotated[bool, typer.Option(help="Also list items flagged hidden")] = False,
    site_root: Annotated[Path, typer.Option(help="Directory containing quire.toml")] = Path(),
) -> None:
    """
    Build an XML sitemap from a manifest of items.

    The sitemap is printed unless --output is given, --write is passed, or
    the configuration sets output_dir or sitemap_path. The last two write it
    to the configured location, relative to --site-root.
    """
    try:
        config = SiteConfig.load(site_root)
        if base_url is not None:
            config = config.model_copy(update={"base_url": base_url})

        all_items = load_items(manifest)
        context = RenderingContext(config=config, items=all_items)
        items = all_items if include_hidden else None

        if output is None and (write or config.has_output_location):
            output = site_root / config.abs_sitemap_path

        if output is None:
            typer.echo(xml_sitemap(context, items=items), nl=False)
        else:
            SitemapSink(output, items=items).publish(context)
            console.print(f"[green]Sitemap written to {escape(str(output))}[/green]")
    except QuireError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


@app.command("filter")
def filter_file(
    name: Annotated[str, typer.Argument(help="Name of a registered filter")],
    source: Annotated[Path, typer.Argument(help="File whose content is filtered")],
    option: Annotated[list[str] | None, typer.Option("--option", help="Filter option as key=value")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Report how long the filter took")] = False,
) -> None:
    """
    Run a registered filter over a file and print the result.
    """
    options = _parse_options(option or [])
    rep = ItemRep(name="default", path=f"/{source.name}")
    context = RenderingContext(item=Item(identifier=str(source), reps=[rep]), rep=rep)
    observer = FilterTimingObserver().attach(context.notifications)

    buffer = OutputBuffer()
    try:
        filter_block(context, buffer, name, lambda _: source.read_text(encoding="utf-8"), options)
    except QuireError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    except OSError as e:
        console.print(f"[red]Error reading {escape(str(source))}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    typer.echo(buffer.getvalue(), nl=False)
    if verbose:
        for filter_name, durations in observer.timings.items():
            console.print(f"[dim]{filter_name}: {sum(durations):.4f}s[/dim]")


@app.command("filters")
def list_filters() -> None:
    """
    List the registered filters.
    """
    table = Table(title="Registered filters")
    table.add_column("Name", style="cyan")
    table.add_column("Class", style="green")
    for filter_name in default_registry.names():
        table.add_row(filter_name, default_registry.resolve(filter_name).__name__)
    console.print(table)

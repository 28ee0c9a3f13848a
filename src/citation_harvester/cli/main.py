"""
Citation Harvester CLI — Software project metadata collector.

Usage:
    citation-harvester fetch github.com/octocat/Hello-World
    citation-harvester fetch github.com/apple/swift --format sqlite --output-dir ./out
    citation-harvester check github.com/apple/swift gitlab.com/foo/bar
"""

import asyncio
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from citation_harvester.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    HarvesterConfig,
    VersionFallback,
)
from citation_harvester.core.errors import ParseError


@click.group()
@click.version_option(package_name="citation-harvester")
def cli():
    """Citation Harvester — Software project metadata collector."""
    pass


def _source_table(url, data) -> Table:
    table = Table(title=url, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", data.name or "")
    table.add_row("URL", data.url or "")
    table.add_row("Version", data.version or "")
    table.add_row("Updated", data.release_date.isoformat() if data.release_date else "")
    table.add_row("Description", data.description or "")
    for author in data.authors:
        full_name = " ".join(
            p for p in (author.first_name, author.middle_name, author.last_name) if p
        )
        email = f" <{author.email}>" if author.email else ""
        table.add_row("Author", f"{full_name}{email}")
    return table


async def _fetch_all(fetcher, urls, exporter):
    results = await asyncio.gather(*(fetcher.fetch(url) for url in urls))
    if exporter is not None:
        for result in results:
            if result.ok:
                await exporter.export(result.data)
        await exporter.finalize()
    return results


@cli.command()
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "sqlite"]),
    default="json",
    help="Export format (used with --output-dir).",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(),
    default=None,
    help="Export fetched records to this directory.",
)
@click.option(
    "--api-url",
    envvar="CITATION_HARVESTER_API_URL",
    default=DEFAULT_BASE_URL,
    show_default=True,
    help="GitHub API base URL.",
)
@click.option(
    "--user-agent",
    envvar="CITATION_HARVESTER_USER_AGENT",
    default=DEFAULT_USER_AGENT,
    show_default=True,
    help="User-Agent header sent with every request.",
)
@click.option(
    "--timeout",
    envvar="CITATION_HARVESTER_TIMEOUT",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds (0 waits forever).",
)
@click.option(
    "--version-fallback",
    type=click.Choice([v.value for v in VersionFallback]),
    default=VersionFallback.NEXT_RELEASE_TAG.value,
    show_default=True,
    help="Version source when the newest release has no name.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def fetch(urls, fmt, output_dir, api_url, user_agent, timeout, version_fallback, verbose):
    """Fetch metadata for one or more project URLs."""
    from citation_harvester.core.fetcher import SourceFetcher
    from citation_harvester.exporters import get_exporter

    # Configure logging
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = HarvesterConfig(
        base_url=api_url if api_url.endswith("/") else f"{api_url}/",
        user_agent=user_agent,
        timeout=timeout or None,
        version_fallback=VersionFallback(version_fallback),
    )
    fetcher = SourceFetcher(config=config)
    exporter = get_exporter(fmt, output_dir) if output_dir else None

    console = Console()
    try:
        with console.status("[bold cyan]Fetching source metadata...[/bold cyan]"):
            results = asyncio.run(_fetch_all(fetcher, urls, exporter))
    except ParseError as e:
        raise click.ClickException(str(e)) from e

    failed = 0
    for url, result in zip(urls, results):
        if result.ok:
            console.print(_source_table(url, result.data))
        else:
            failed += 1
            for error in result.errors:
                console.print(f"[bold red][FAIL][/bold red] {escape(url)}: {escape(str(error))}")

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("urls", nargs=-1, required=True)
def check(urls):
    """Report whether each URL is supported."""
    from citation_harvester.core.fetcher import SourceFetcher
    from citation_harvester.parsers.github import parse_repo_identifier

    fetcher = SourceFetcher()
    console = Console()
    for url in urls:
        handler = fetcher.find_handler(url)
        if handler is None:
            console.print(f"[yellow]unsupported[/yellow] {escape(url)}")
        else:
            repo_id = parse_repo_identifier(url)
            target = f" -> {repo_id.path}" if repo_id else ""
            console.print(f"[green]{handler.platform_name}[/green] {escape(url)}{target}")


if __name__ == "__main__":
    cli()

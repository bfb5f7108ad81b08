"""CLI interface for CrossBench."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from crossbench.evaluators.ecosystem import compute_ecosystem
from crossbench.filters.view_filter import VIEW_DESCRIPTIONS, VIEW_PROJECTIONS, View, ViewFilter
from crossbench.models.model_entity import ModelEntity, Projection
from crossbench.pipeline import load_leaderboard, load_scoring_config, run_scrape_pipeline
from crossbench.sources.base_source import BaseSource
from crossbench.sources.file_source import FileSource
from crossbench.sources.http_source import HttpSource

app = typer.Typer(
    name="crossbench",
    help="CrossBench - Bias-adjusted aggregation of AI model leaderboards",
)

console = Console()


def _get_score_color(score: float) -> str:
    """Get color for score display."""
    if score >= 70:
        return "green"
    elif score >= 50:
        return "yellow"
    else:
        return "red"


def _truncate(text: str, max_len: int = 40) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_entities(data_dir: Path | None) -> list[ModelEntity]:
    leaderboard = load_leaderboard(data_dir)
    if leaderboard is None:
        return []
    return [record.to_entity() for record in leaderboard.models]


def _ranking_table(title: str, entities: list[ModelEntity], projection: Projection) -> Table:
    table = Table(title=title)
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Model", style="bold")
    table.add_column("Organization", style="blue")
    table.add_column("Type", style="dim")
    table.add_column("Score", justify="right")
    table.add_column("Conf", justify="right", style="magenta")
    table.add_column("Days", justify="right", style="dim")

    for rank, entity in enumerate(entities, 1):
        score = entity.ranks.clamped().get(projection)
        score_color = _get_score_color(score)
        table.add_row(
            str(rank),
            _truncate(entity.name),
            entity.organization,
            entity.primary_type,
            f"[{score_color}]{score:.1f}[/{score_color}]",
            f"{entity.confidence:.0f}%",
            str(entity.metrics.last_updated_days_ago),
        )
    return table


@app.command()
def run(
    source_file: Path = typer.Option(
        None, "--source-file", "-f", help="Read records from a JSON file instead of the API"
    ),
    url: str = typer.Option(
        None, "--url", help="Leaderboard API URL (default: $CROSSBENCH_SOURCE_URL or built-in)"
    ),
    config_file: Path = typer.Option(None, "--config", "-c", help="Scoring configuration JSON"),
    data_dir: Path = typer.Option(None, "--data-dir", "-d", help="Output directory"),
    workers: int = typer.Option(1, "--workers", "-w", min=1, help="Scoring threads"),
    keep_unscored: bool = typer.Option(
        False, "--keep-unscored", help="Keep models without a usable score"
    ),
    limit: int = typer.Option(10, "--limit", "-l", help="Rows in the summary ranking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Fetch leaderboard data, score every model and export the results."""
    _configure_logging(verbose)

    if source_file and url:
        console.print("[red]Error:[/red] Use either --source-file or --url, not both")
        raise typer.Exit(1)

    source: BaseSource
    if source_file:
        source = FileSource(source_file)
    else:
        source = HttpSource(url=url)

    console.print(f"\n[bold]Building leaderboard from {source.source_name}...[/bold]\n")

    try:
        config = load_scoring_config(config_file)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task("Fetching and scoring...", total=None)
            result = run_scrape_pipeline(
                source=source,
                data_dir=data_dir,
                config=config,
                workers=workers,
                keep_unscored=keep_unscored,
            )

        console.print(f"\n[bold green]Pipeline complete![/bold green]")

        report = result.report
        summary = Table(title="Ingest Summary")
        summary.add_column("Metric", style="cyan")
        summary.add_column("Count", justify="right", style="magenta")
        summary.add_row("Received", str(report.received))
        summary.add_row("Accepted", str(report.accepted))
        summary.add_row("Invalid", str(report.skipped_invalid))
        summary.add_row("Duplicates", str(report.skipped_duplicate))
        summary.add_row("Unscored (dropped)", str(report.dropped_unscored))
        summary.add_row("Ranked", str(len(result.entities)))
        console.print(summary)

        if result.entities:
            console.print()
            ranked = ViewFilter(config).apply(result.entities, View.OVERALL, limit=limit)
            console.print(_ranking_table(f"Top {len(ranked)} Overall", ranked, Projection.OVERALL))
        else:
            console.print("\n[yellow]No models were ranked in this run.[/yellow]")

    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def top(
    view: str = typer.Option("overall", "--view", "-v", help="View to show (see 'views')"),
    limit: int = typer.Option(10, "--limit", "-l", help="Number of results"),
    data_dir: Path = typer.Option(None, "--data-dir", "-d", help="Leaderboard directory"),
    config_file: Path = typer.Option(
        None, "--config", "-c", help="Scoring configuration JSON (tie threshold)"
    ),
) -> None:
    """Show the top models of one view from the saved leaderboard."""
    try:
        view_type = View(view)
    except ValueError:
        valid = ", ".join(v.value for v in View)
        console.print(f"[red]Error:[/red] Invalid view '{view}'. Must be one of: {valid}")
        raise typer.Exit(1)

    try:
        config = load_scoring_config(config_file)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    entities = _load_entities(data_dir)
    if not entities:
        console.print("[yellow]No leaderboard found. Run 'crossbench run' first.[/yellow]")
        return

    ranked = ViewFilter(config).apply(entities, view_type, limit=limit)
    if not ranked:
        console.print(f"[yellow]No models in view '{view_type.value}'.[/yellow]")
        return

    title = f"Top {len(ranked)} - {VIEW_DESCRIPTIONS[view_type]}"
    console.print(_ranking_table(title, ranked, VIEW_PROJECTIONS[view_type]))


@app.command()
def ecosystem(
    limit: int = typer.Option(15, "--limit", "-l", help="Number of organizations"),
    data_dir: Path = typer.Option(None, "--data-dir", "-d", help="Leaderboard directory"),
) -> None:
    """Show organization market share from the saved leaderboard."""
    entities = _load_entities(data_dir)
    if not entities:
        console.print("[yellow]No leaderboard found. Run 'crossbench run' first.[/yellow]")
        return

    stats = compute_ecosystem(entities)
    ordered = sorted(stats.shares.items(), key=lambda item: (-item[1], item[0]))[:limit]

    table = Table(title="Ecosystem Share")
    table.add_column("Organization", style="cyan")
    table.add_column("Models", justify="right", style="magenta")
    table.add_column("Avg Score", justify="right", style="green")
    table.add_column("Share", justify="right", style="bold")

    for org, share in ordered:
        org_stats = stats.organizations[org]
        table.add_row(
            org,
            str(org_stats.model_count),
            f"{org_stats.avg_score * 100:.1f}",
            f"{share:.2f}",
        )

    console.print(table)


@app.command()
def views() -> None:
    """List the available leaderboard views."""
    table = Table(title="Views")
    table.add_column("View", style="cyan")
    table.add_column("Ranked By", style="magenta")
    table.add_column("Description")

    for view in View:
        table.add_row(view.value, VIEW_PROJECTIONS[view].value, VIEW_DESCRIPTIONS[view])

    console.print(table)


if __name__ == "__main__":
    app()

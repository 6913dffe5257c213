"""
Labour Chowk Command Line Interface

Provides CLI commands for the matching engine: database setup, finding
workers for a job and suggesting rates.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from src.core.exceptions import InvalidArgumentError, NotFoundError, UpstreamFailureError

app = typer.Typer(
    name="labour-chowk",
    help="Labour Chowk worker matching CLI",
    add_completion=False,
)
console = Console()


def _require_connection() -> None:
    from src.data.database import get_database_manager

    if not get_database_manager().check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)


def _fail(error: Exception) -> None:
    if isinstance(error, NotFoundError):
        console.print(f"[red]Error: {error}[/red]")
    elif isinstance(error, InvalidArgumentError):
        console.print(f"[red]Invalid input: {error}[/red]")
    else:
        console.print(f"[red]Database error: {error}[/red]")
    raise typer.Exit(1)


@app.command()
def version():
    """Show application version."""
    from src import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from src.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Labour Chowk Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Profiles Collection", settings.database.profiles_collection)
    table.add_row("Jobs Collection", settings.database.jobs_collection)
    table.add_row("Default Match Limit", str(settings.matching.default_limit))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Create the geo and field indexes the matching queries use."""
    from src.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")
    _require_connection()
    console.print("  [green]✓[/green] Connected to MongoDB")

    console.print("  Creating indexes...")
    try:
        get_database_manager().ensure_indexes()
    except Exception as e:
        console.print(f"[red]Error creating indexes: {e}[/red]")
        raise typer.Exit(1)

    console.print("\n[green]Database initialized successfully![/green]")


@app.command()
def match(
    job_id: str = typer.Argument(..., help="Job ID to find workers for"),
    top_n: Optional[int] = typer.Option(None, "--top", "-n", help="Number of top matches to show"),
):
    """Find the best-matching workers for a job."""
    from src.core.matching import get_matching_service
    from src.utils.config import get_settings

    limit = top_n if top_n is not None else get_settings().matching.default_limit
    console.print(f"[yellow]Matching workers for job: {job_id}[/yellow]")
    _require_connection()

    try:
        results = get_matching_service().find_matches(job_id, limit)
    except (NotFoundError, InvalidArgumentError, UpstreamFailureError) as e:
        _fail(e)

    if not results:
        console.print("[yellow]No workers found within range.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(results)} Matches")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Worker", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Skills", justify="right")
    table.add_column("Distance", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Available", justify="center")
    table.add_column("Rating", justify="right")

    for i, result in enumerate(results, 1):
        if result.total >= 80:
            color = "green"
        elif result.total >= 60:
            color = "yellow"
        else:
            color = "red"

        factors = result.factors
        table.add_row(
            str(i),
            result.profile.name or result.worker_id,
            f"[{color}]{result.total}[/{color}]",
            f"{factors.skill_match:.0f}",
            f"{result.distance_meters / 1000:.1f} km",
            f"{factors.rate_score:.0f}",
            "✓" if factors.availability_score else "✗",
            f"{result.profile.rating.avg:.1f}",
        )

    console.print(table)


@app.command()
def suggest_rates(
    skill: str = typer.Argument(..., help="Skill, e.g. Electrician"),
    experience: int = typer.Option(0, "--experience", "-e", help="Years of experience"),
    lng: float = typer.Option(..., "--lng", help="Longitude"),
    lat: float = typer.Option(..., "--lat", help="Latitude"),
):
    """Suggest hourly, daily and project rates for a worker."""
    from src.core.matching import get_matching_service

    _require_connection()

    try:
        suggestion = get_matching_service().suggest_rates(skill, experience, [lng, lat])
    except (InvalidArgumentError, UpstreamFailureError) as e:
        _fail(e)

    table = Table(title=f"Suggested Rates: {suggestion.factors.skill}")
    table.add_column("Rate", style="cyan")
    table.add_column("Amount (INR)", justify="right", style="green")

    table.add_row("Hourly", str(suggestion.suggested.hourly))
    table.add_row("Daily", str(suggestion.suggested.daily))
    table.add_row("Project (5 days)", str(suggestion.suggested.project))

    console.print(table)
    console.print(
        f"  Market (hourly): {suggestion.market.min:.0f} - {suggestion.market.max:.0f}, "
        f"avg {suggestion.market.avg:.0f}"
    )
    console.print(
        f"  Source: {suggestion.factors.location} | Demand: "
        f"[bold]{suggestion.factors.demand}[/bold]"
    )


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

"""Command-line interface for Career Match."""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from career_match.config import settings
from career_match.matching.config import MatchingConfig, SalaryParseMode
from career_match.matching.engine import JobMatcher
from career_match.utils.logging import configure_logging

app = typer.Typer(
    name="career-match",
    help="Career Match - score and rank job listings against a job seeker profile",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the logging level"),
) -> None:
    """Configure logging before running a command."""
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        error_console.print(f"[red]Could not read {path}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _load_jobs(path: Path) -> List[Any]:
    data = _load_json(path)
    if isinstance(data, dict) and "jobs" in data:
        data = data["jobs"]
    if not isinstance(data, list):
        error_console.print(f"[red]{path} must hold a list of jobs[/red]")
        raise typer.Exit(code=1)
    return data


def _build_matcher(salary_mode: Optional[SalaryParseMode]) -> JobMatcher:
    config = MatchingConfig.from_settings()
    if salary_mode is not None:
        config = config.model_copy(update={"salary_parse_mode": salary_mode})
    return JobMatcher(config)


@app.command()
def recommend(
    jobs_file: Path = typer.Argument(..., help="JSON file with a list of jobs"),
    profile_file: Path = typer.Argument(..., help="JSON file with the user profile"),
    limit: int = typer.Option(settings.default_limit, help="Maximum number of recommendations"),
    salary_mode: Optional[SalaryParseMode] = typer.Option(None, help="Salary parsing mode"),
    as_json: bool = typer.Option(False, "--json", help="Print recommendations as JSON"),
) -> None:
    """Rank jobs for a profile."""
    jobs = _load_jobs(jobs_file)
    profile = _load_json(profile_file)
    matcher = _build_matcher(salary_mode)

    try:
        recommendations = matcher.recommend(jobs, profile, limit=limit)
    except (ValidationError, TypeError) as e:
        error_console.print(f"[red]Invalid input: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json") for r in recommendations], indent=2))
        return

    table = Table(title="Job Recommendations")
    table.add_column("Score", style="cyan", justify="right")
    table.add_column("Job", style="green")
    table.add_column("Location")
    table.add_column("Reasons")

    for r in recommendations:
        table.add_row(str(r.match_score), f"{r.title} ({r.id})", r.location, "\n".join(r.reasons_for_match))

    console.print(table)

    summary = matcher.summarize(recommendations)
    console.print(
        f"{summary['total_jobs']} recommendations, average score {summary['average_score']:.1f}"
    )


@app.command()
def match(
    jobs_file: Path = typer.Argument(..., help="JSON file with a list of jobs"),
    profile_file: Path = typer.Argument(..., help="JSON file with the user profile"),
    job_id: str = typer.Option(..., "--job-id", help="Identifier of the job to score"),
    salary_mode: Optional[SalaryParseMode] = typer.Option(None, help="Salary parsing mode"),
) -> None:
    """Explain the match score of one job."""
    jobs = _load_jobs(jobs_file)
    profile = _load_json(profile_file)
    matcher = _build_matcher(salary_mode)

    job = next((j for j in jobs if isinstance(j, dict) and str(j.get("id")) == job_id), None)
    if job is None:
        error_console.print(f"[red]No job with id {job_id}[/red]")
        raise typer.Exit(code=1)

    try:
        result = matcher.match_job(job, profile)
    except (ValidationError, TypeError) as e:
        error_console.print(f"[red]Invalid input: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Match for job {job_id}: {result.score} ({result.fit_level})")
    table.add_column("Factor", style="cyan")
    table.add_column("Points", justify="right")
    table.add_column("Reason", style="green")

    for reason in result.breakdown:
        table.add_row(reason.type.value, str(reason.score), reason.description)

    console.print(table)


@app.command()
def skills(
    jobs_file: Path = typer.Argument(..., help="JSON file with a list of jobs"),
) -> None:
    """List the skills spotted in each job."""
    jobs = _load_jobs(jobs_file)
    matcher = _build_matcher(None)

    table = Table(title="Extracted Skills")
    table.add_column("Job", style="cyan")
    table.add_column("Skills", style="green")

    try:
        for job in jobs:
            found = matcher.extract_skills(job)
            table.add_row(str(job.get("id")) if isinstance(job, dict) else "?", ", ".join(found))
    except (ValidationError, TypeError) as e:
        error_console.print(f"[red]Invalid input: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="Career Match Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Default Limit", str(settings.default_limit))
    table.add_row("Live Feed Cap", str(settings.live_feed_cap))
    table.add_row("Salary Parse Mode", settings.salary_parse_mode)
    table.add_row("Min Partial Token Length", str(settings.min_partial_token_length))
    table.add_row("Skill Vocabulary", ", ".join(settings.skill_vocabulary))

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from career_match import __version__
    console.print(f"Career Match v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

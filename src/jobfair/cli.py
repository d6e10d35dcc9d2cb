"""Typer CLI entrypoint for the job fair repository."""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError

from .config import load_yaml
from .container import create_container
from .errors import JobFairError, RepositoryError, WriteFailure
from .logging import configure_logging
from .schemas.config import load_config
from .service import JobFairService

app = typer.Typer(help="Job fair applications CLI.")

DataDirOption = typer.Option(None, file_okay=False, help="Directory holding the CSV files.")
ConfigOption = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path.")
LogLevelOption = typer.Option(None, help="Log level for structured logging.")


def _build_service(
    data_dir: Optional[Path],
    config: Optional[Path],
    log_level: Optional[str],
) -> JobFairService:
    settings: dict[str, Any] = {}
    if config:
        loaded = load_yaml(config)
        if not isinstance(loaded, dict):
            raise typer.BadParameter("Config file must be a YAML object", param_name="config")
        settings = loaded
    if data_dir is not None:
        settings["data_dir"] = data_dir
    try:
        app_config = load_config(settings)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level or app_config.log_level, data_dir=app_config.data_dir)

    container = create_container(settings=app_config.to_settings())
    try:
        return container.service()
    except RepositoryError as exc:
        typer.echo(f"Cannot load database: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.command()
def check(
    data_dir: Optional[Path] = DataDirOption,
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Load every backing file and report record counts."""
    service = _build_service(data_dir, config, log_level)
    repo = service.repository
    typer.echo(
        f"Loaded {len(repo.get_all_candidates())} candidates, "
        f"{len(repo.get_all_open_jobs())} open jobs, "
        f"{len(repo.get_all_applications())} applications from {repo.data_dir}."
    )


@app.command()
def jobs(
    sort: Optional[str] = typer.Option(None, help="Sort by title, company or deadline."),
    data_dir: Optional[Path] = DataDirOption,
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """List open jobs that have not passed their deadline."""
    if sort is not None and sort not in ("title", "company", "deadline"):
        raise typer.BadParameter("Sort must be title, company or deadline", param_name="sort")
    service = _build_service(data_dir, config, log_level)
    for job in service.visible_jobs(sort):  # type: ignore[arg-type]
        deadline = job.deadline.isoformat() if job.deadline else ""
        typer.echo(
            "\t".join([job.id, job.title, service.company_name(job), deadline, job.type.value])
        )


@app.command()
def apply(
    email: str = typer.Option(..., help="Student email to log in with."),
    job: str = typer.Option(..., help="Job id to apply for."),
    data_dir: Optional[Path] = DataDirOption,
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Apply to a job as the student owning EMAIL."""
    service = _build_service(data_dir, config, log_level)
    try:
        service.login(email, "student")
        candidate = service.current_candidate()
        application = service.apply(job)
    except WriteFailure as exc:
        _fail(f"Failed to save application: {exc}")
    except JobFairError as exc:
        _fail(str(exc))
    target = service.repository.find_job(application.job_id)
    typer.echo(
        f"Applied successfully. Candidate: {candidate.full_name} Job: {target.title if target else job}"
    )


@app.command()
def grade(
    email: str = typer.Option(..., help="Admin email to log in with."),
    job: str = typer.Option(..., help="Job id of the application."),
    candidate: str = typer.Option(..., help="Candidate id of the application."),
    value: str = typer.Option("", "--grade", help="Grade A, B, C, D, F or empty."),
    data_dir: Optional[Path] = DataDirOption,
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Save a grade for one application as an admin."""
    service = _build_service(data_dir, config, log_level)
    try:
        service.login(email, "admin")
        service.grade(job, candidate, value)
    except WriteFailure as exc:
        _fail(f"Failed to save grade: {exc}")
    except JobFairError as exc:
        _fail(str(exc))
    typer.echo("Saved grade successfully.")


@app.command()
def applications(
    email: str = typer.Option(..., help="Admin email to log in with."),
    data_dir: Optional[Path] = DataDirOption,
    config: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """List every application with resolved names."""
    service = _build_service(data_dir, config, log_level)
    try:
        service.login(email, "admin")
    except JobFairError as exc:
        _fail(str(exc))
    for row in service.application_rows():
        applied_at = row.applied_at.isoformat() if row.applied_at else ""
        typer.echo("\t".join([row.candidate, row.job, row.company, applied_at, row.grade]))


def main() -> None:
    app()


if __name__ == "__main__":
    main()

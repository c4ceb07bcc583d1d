"""Typer CLI entrypoint for the screening engine."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import ScreeningContainer, create_container
from .core import list_designations
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Engagement eligibility screening CLI.")


def _build_container(config: Optional[Path], log_level: str) -> ScreeningContainer:
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc

    configure_logging(log_level)
    return create_container(settings=settings)


@app.command()
def empanelment(
    applicants: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applicant profiles JSONL path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM or ISO) for age and experience."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Assign provisional empanelment categories."""
    container = _build_container(config, log_level)
    results = container.pipeline().run(
        track="empanelment",
        applicants_path=applicants,
        output_path=output,
        as_of=as_of,
        audit_logger=AuditLogger(audit_log) if audit_log else None,
    )
    typer.echo(f"Screened {len(results)} applicants. Results saved to {output}.")


@app.command()
def contractual(
    applicants: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applicant profiles JSONL path."),
    criteria: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Advert criteria JSON path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM or ISO) for age and experience."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Screen applicants against one advertised contractual position."""
    container = _build_container(config, log_level)
    try:
        results = container.pipeline().run(
            track="contractual",
            applicants_path=applicants,
            criteria_path=criteria,
            output_path=output,
            as_of=as_of,
            audit_logger=AuditLogger(audit_log) if audit_log else None,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_name="criteria") from exc
    typer.echo(f"Screened {len(results)} applicants. Results saved to {output}.")


@app.command()
def remuneration(
    max_remuneration: int = typer.Option(..., "--max", min=0, help="Maximum monthly remuneration of the band."),
    score: float = typer.Option(..., help="Selection committee score in percent."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Compute the final remuneration for a committee score."""
    container = _build_container(config, log_level)
    outcome = container.engine().calculate_remuneration(max_remuneration, score)
    typer.echo(json.dumps(asdict(outcome)))


@app.command()
def designations() -> None:
    """Print the contractual designation catalogue."""
    typer.echo(json.dumps(list_designations(), indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()

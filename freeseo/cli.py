"""
FreeSEO — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Obtain a ``RawAudit`` (JSON file, collector URL fetch, or pasted HTML).
  4. Score it and synthesize the report.
  5. Render as text / JSON / printable HTML to stdout or ``--output``.

Install and run::

    pip install -e .
    freeseo --help
    freeseo validate-config
    freeseo score audit.json
    freeseo score audit.json --format html --output data/reports/example.html
    freeseo analyze-url https://example.com
    freeseo analyze-html page.html --format json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="freeseo",
    help="FreeSEO — score a page audit and produce a printable report.",
    add_completion=False,
)

_CLI_SESSION = "cli"


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from freeseo.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from freeseo.utils.logging import configure_logging
    configure_logging(config.logging)


def _check_format(fmt: str) -> str:
    from freeseo.pipeline.audit import EXPORT_FORMATS

    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        typer.echo(
            f"[ERROR] Unknown format '{fmt}'. Choose from: {', '.join(EXPORT_FORMATS)}.",
            err=True,
        )
        raise typer.Exit(code=1)
    return fmt


def _resolve_output_path(config, output: str) -> Path:
    """A bare file name lands in ``report.output_dir``; any other path is kept."""
    out_path = Path(output)
    if out_path.parent == Path("."):
        return Path(config.report.output_dir) / out_path
    return out_path


def _emit(service, fmt: str, output: Optional[str]) -> None:
    """Render the CLI session's report to stdout or ``output``."""
    rendered = service.export(_CLI_SESSION, fmt)
    if output:
        out_path = _resolve_output_path(service.config, output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered, encoding="utf-8")
        typer.echo(f"[OK] Report written: {out_path}")
    else:
        typer.echo(rendered)


def _run(config, collect, fmt: str, output: Optional[str]) -> None:
    """Execute ``collect(service)`` and emit, mapping FreeSEO errors to exit 1."""
    from freeseo.errors import FreeSEOError
    from freeseo.pipeline.audit import AuditService
    from freeseo.pipeline.session import ReportSessionStore

    service = AuditService(config, ReportSessionStore())
    try:
        collect(service)
    except (FreeSEOError, FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    finally:
        service.close()
    _emit(service, fmt, output)


_FORMAT_OPTION = typer.Option(
    "text", "--format", "-f", help="Output format: text, json, or html."
)
_OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Write the report to this file instead of stdout. "
    "A bare file name is written under report.output_dir.",
)
_CONFIG_OPTION = typer.Option(None, "--config", help="Path to TOML config file.")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Collector URL:    {config.collector.base_url}")
    typer.echo(f"  Collector timeout:{config.collector.timeout_seconds:.1f}s")
    typer.echo(f"  Report title:     {config.report.title}")
    typer.echo(f"  Link sample size: {config.report.link_sample_size}")
    typer.echo(f"  Output dir:       {config.report.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))


@app.command("score")
def score(
    audit_path: str = typer.Argument(..., help="Raw audit JSON file from the collector."),
    fmt: str = _FORMAT_OPTION,
    output: Optional[str] = _OUTPUT_OPTION,
    config_path: Optional[str] = _CONFIG_OPTION,
) -> None:
    """Score an already-collected raw audit JSON file."""
    from freeseo.ingestion.loader import load_raw_audit

    fmt = _check_format(fmt)
    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    _run(
        config,
        lambda service: service.analyze(_CLI_SESSION, load_raw_audit(Path(audit_path))),
        fmt,
        output,
    )


@app.command("analyze-url")
def analyze_url(
    url: str = typer.Argument(..., help="Page URL for the collector to fetch."),
    fmt: str = _FORMAT_OPTION,
    output: Optional[str] = _OUTPUT_OPTION,
    config_path: Optional[str] = _CONFIG_OPTION,
) -> None:
    """Fetch and audit a live URL through the collector service."""
    fmt = _check_format(fmt)
    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    _run(config, lambda service: service.analyze_url(_CLI_SESSION, url), fmt, output)


@app.command("analyze-html")
def analyze_html(
    html_path: str = typer.Argument(..., help="File containing the page's HTML markup."),
    fmt: str = _FORMAT_OPTION,
    output: Optional[str] = _OUTPUT_OPTION,
    config_path: Optional[str] = _CONFIG_OPTION,
) -> None:
    """Audit pasted HTML markup through the collector service."""
    fmt = _check_format(fmt)
    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    path = Path(html_path)
    if not path.exists():
        typer.echo(f"[ERROR] HTML file not found: {path}", err=True)
        raise typer.Exit(code=1)
    markup = path.read_text(encoding="utf-8")

    _run(config, lambda service: service.analyze_html(_CLI_SESSION, markup), fmt, output)


if __name__ == "__main__":
    app()

"""CLI entry point for typekeep."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import structlog
import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from typekeep.config import TypekeepConfig, load_config
from typekeep.config.loader import DEFAULT_CONFIG_TEMPLATE
from typekeep.extraction import (
    NotFound,
    Real,
    Stub,
    extract_annotation,
    extract_declaration,
    is_ambient_artifact,
)
from typekeep.preservation import merge_from_directory

app = typer.Typer(
    name="typekeep",
    help="Keep real exported types across offline regeneration of generated artifacts.",
)

config_app = typer.Typer(help="Manage typekeep configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: TypekeepConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_TEXT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _get_config() -> TypekeepConfig:
    if _config is None:
        return load_config()
    return _config


def _json_formatter() -> logging.Formatter:
    """Render stdlib log records as one JSON object per line."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def _configure_logging(cfg: TypekeepConfig) -> None:
    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_LOG_FORMAT))
    logging.basicConfig(level=_LOG_LEVELS[cfg.log_level], handlers=[handler], force=True)


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to typekeep.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    _configure_logging(_config)


def _read_input(file: str) -> str:
    path = Path(file)
    if not path.is_file():
        rprint(f"[red]Error:[/red] file not found: {escape(file)}")
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        rprint(f"[red]Error:[/red] could not read {escape(file)}: {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def extract(
    file: str = typer.Argument(..., help="Previously generated artifact (api.d.ts / api.ts)"),
    target: Annotated[str, typer.Option("--target", "-t", help="Exported binding name")] = "components",
    sentinel: Annotated[
        list[str] | None,
        typer.Option("--sentinel", "-s", help="Placeholder type name (repeatable)"),
    ] = None,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Classify a binding as real, stub, or not found."""
    cfg = _get_config()
    sentinels = frozenset(sentinel) if sentinel else cfg.sentinels_for(target)
    result = extract_declaration(_read_input(file), target, sentinels)

    if format == "json":
        data: dict[str, str | None] = {"target": target, "kind": _kind_name(result), "declaration": None}
        if isinstance(result, Real):
            data["declaration"] = result.declaration_text
        print(json.dumps(data, indent=2))
        return

    if isinstance(result, Real):
        rprint(f"[green]real[/green] {target}")
        print(result.declaration_text)
    elif isinstance(result, Stub):
        rprint(f"[yellow]stub[/yellow] {target}: {result.type_name}")
    else:
        rprint(f"[dim]not found[/dim] {target}")


@app.command()
def annotation(
    file: str = typer.Argument(..., help="File holding an `export declare const` statement"),
    target: Annotated[str, typer.Option("--target", "-t", help="Binding name")] = "components",
) -> None:
    """Print only the type annotation of a declaration."""
    text = extract_annotation(_read_input(file), target)
    if text is None:
        rprint(f"[red]No annotated binding named {target!r}[/red]")
        raise typer.Exit(1)
    print(text)


@app.command()
def kind(
    file: str = typer.Argument(..., help="Generated artifact to inspect"),
) -> None:
    """Report whether an artifact is a declaration file or an implementation file."""
    ambient = is_ambient_artifact(_read_input(file))
    print("declaration" if ambient else "implementation")


@app.command()
def merge(
    fresh: str = typer.Argument(..., help="Freshly generated artifact"),
    previous_dir: Annotated[
        str, typer.Option("--previous-dir", "-p", help="Directory holding the previous artifacts")
    ] = ".",
    stem: Annotated[str | None, typer.Option("--stem", help="Artifact file stem")] = None,
    write: Annotated[bool, typer.Option("--write", help="Rewrite FRESH in place")] = False,
) -> None:
    """Splice preserved real types from a previous artifact into a fresh one."""
    cfg = _get_config()
    fresh_text = _read_input(fresh)
    report = merge_from_directory(fresh_text, previous_dir, stem=stem, config=cfg)

    if not write:
        print(report.text, end="")
        return

    if report.preserved:
        Path(fresh).write_text(report.text, encoding="utf-8")
    if report.previous_path is None:
        source = "(no previous artifact)"
    else:
        flavour = "declaration" if report.previous_ambient else "implementation"
        source = f"{escape(report.previous_path)} ({flavour})"
    summary = (
        f"[bold]Previous:[/bold]  {source}\n"
        f"[bold]Preserved:[/bold] {', '.join(report.preserved) or '-'}\n"
        f"[bold]Unchanged:[/bold] {', '.join(report.unchanged) or '-'}"
    )
    rprint(Panel(summary, title="Merge", border_style="blue"))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default typekeep.yaml in current directory."""
    target = Path("typekeep.yaml")
    if target.exists() and not force:
        rprint("[yellow]typekeep.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


_KIND_NAMES = {Real: "real", Stub: "stub", NotFound: "not_found"}


def _kind_name(result: object) -> str:
    return _KIND_NAMES[type(result)]


if __name__ == "__main__":
    app()

"""
tenant-theme CLI.

Developer tooling for inspecting how a theme schema resolves:

- default: print the default schema document
- resolve: resolve a schema file into its sanitized CSS variables
- sanitize: filter an overrides file against an allowlist
- check: validate a schema file against the schema model
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ._version import __version__
from .allowlist import ALLOWLISTS, ALL_KEYS, AllowlistName
from .config import CONFIG_FILE, ThemeConfig, get_config_path, load_theme_config
from .css import css_vars_to_stylesheet
from .errors import ThemeError
from .ir.schema import default_theme_schema
from .loader import load_json_document, parse_theme_schema
from .logging import setup_logging
from .resolver import resolve_theme_schema
from .sanitizer import sanitize_css_vars

app = typer.Typer(
    help="Resolve and sanitize tenant theme schemas",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_config: ThemeConfig = ThemeConfig()


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"
    CSS = "css"


class AllowlistChoice(StrEnum):
    THEME_TOKENS = "theme_tokens"
    BRAND_OVERRIDES = "brand_overrides"
    ALL = "all"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tenant-theme {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            envvar="TENANT_THEME_CONFIG",
            help=f"Path to the config file (default: ./{CONFIG_FILE})",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", envvar="TENANT_THEME_LOG_LEVEL", help="Override log level"),
    ] = None,
    log_json: Annotated[bool, typer.Option("--log-json", help="Emit logs as JSONL")] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Resolve and sanitize tenant theme schemas."""
    global _config
    try:
        _config = load_theme_config(config_path or get_config_path(Path.cwd()))
    except ThemeError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if log_level is not None:
        try:
            _config = ThemeConfig.model_validate(
                {**_config.model_dump(), "log_level": log_level}
            )
        except ValidationError:
            err_console.print(f"[red]Unknown log level: {log_level}[/red]")
            raise typer.Exit(code=1)
    setup_logging(_config.log_level_number, json_output=log_json)


def _load(path: Path) -> dict[str, Any]:
    try:
        return load_json_document(path)
    except ThemeError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


def _print_vars(css_vars: dict[str, str], fmt: OutputFormat, title: str) -> None:
    if fmt == OutputFormat.JSON:
        typer.echo(json.dumps(css_vars, indent=2))
        return
    if fmt == OutputFormat.CSS:
        typer.echo(css_vars_to_stylesheet(css_vars, selector=_config.selector))
        return

    table = Table(title=title)
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in css_vars.items():
        table.add_row(key, value)
    console.print(table)


# =============================================================================
# Commands
# =============================================================================


@app.command("default")
def default_command() -> None:
    """Print the default theme schema document as JSON."""
    typer.echo(json.dumps(default_theme_schema(), indent=2))


@app.command("resolve")
def resolve_command(
    path: Annotated[Path, typer.Argument(help="Theme schema JSON file")],
    fmt: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TABLE,
    show_derived: Annotated[
        bool, typer.Option("--derived", help="Include derived values (JSON output only)")
    ] = False,
) -> None:
    """Resolve a schema file into sanitized CSS variables."""
    resolved = resolve_theme_schema(_load(path), allowlists=_config.allowlist_sets())

    if show_derived and fmt == OutputFormat.JSON:
        typer.echo(json.dumps(resolved.to_dict(), indent=2))
        return
    _print_vars(resolved.css_vars, fmt, title=f"CSS variables ({path.name})")


@app.command("sanitize")
def sanitize_command(
    path: Annotated[Path, typer.Argument(help="JSON object of CSS variable overrides")],
    allowlist: Annotated[
        AllowlistChoice, typer.Option("--allowlist", "-a", help="Allowlist to apply")
    ] = AllowlistChoice.ALL,
    fmt: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TABLE,
) -> None:
    """Filter an overrides file, reporting which keys were dropped."""
    data = _load(path)
    names = ALL_KEYS if allowlist == AllowlistChoice.ALL else ALLOWLISTS[AllowlistName(allowlist)]
    safe = sanitize_css_vars(data, names)

    _print_vars(safe, fmt, title=f"Accepted ({len(safe)}/{len(data)})")
    dropped = [key for key in data if key not in safe]
    if dropped and fmt == OutputFormat.TABLE:
        console.print(f"[yellow]Dropped {len(dropped)}:[/yellow] {', '.join(dropped)}")


@app.command("check")
def check_command(
    path: Annotated[Path, typer.Argument(help="Theme schema JSON file")],
) -> None:
    """Validate a schema file against the theme schema model."""
    try:
        schema = parse_theme_schema(_load(path), path=path)
    except ThemeError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    resolved = resolve_theme_schema(schema, allowlists=_config.allowlist_sets())
    console.print(
        f"[green]OK[/green] schema v{schema.version}: "
        f"{len(resolved.css_vars)} CSS variables after sanitization"
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()

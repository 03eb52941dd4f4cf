"""CLI de typesync (Typer + Rich).

Comandos:
- `schemas`: lista los schemas registrados (o las reglas de uno).
- `validate`: valida un JSON contra un schema.
- `doctor run` / `doctor setup`: diagnóstico y configuración.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import (
    build_domain_panel,
    build_errors_panel,
    build_rules_table,
    build_schemas_table,
    print_banner,
)
from core.domain.rules import ValidationFailure
from core.domain.schemas import SCHEMAS
from core.logger import configure_from_env

app = typer.Typer(no_args_is_help=True, help="Runtime tools for generated API clients.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _resolve_schema(name: str):
    schema = SCHEMAS.get(name) or SCHEMAS.get(f"{name}Schema")
    if schema is None:
        raise typer.BadParameter(f"unknown schema: {name}")
    return schema


@app.command()
def schemas(
    name: Optional[str] = typer.Argument(None, help="Schema to describe in detail."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip the banner."),
) -> None:
    """List registered schemas, or the field rules of one of them."""

    if not quiet:
        print_banner(_console)
    if name is None:
        _console.print(build_schemas_table(SCHEMAS))
        return
    _console.print(build_rules_table(_resolve_schema(name)))


@app.command()
def validate(
    name: str = typer.Argument(..., help="Schema name, e.g. APIFileUploadResponse."),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    domain: bool = typer.Option(
        False, "--domain", help="Input uses domain field names instead of wire names."
    ),
) -> None:
    """Validate a JSON file and print its domain shape or the error list."""

    schema = _resolve_schema(name)
    data = json.loads(path.read_text(encoding="utf-8"))
    outcome = schema.from_domain(data) if domain else schema.validate(data)

    if isinstance(outcome, ValidationFailure):
        _console.print(build_errors_panel(outcome.errors))
        raise typer.Exit(code=1)
    _console.print(build_domain_panel(outcome.data))


def run() -> None:
    configure_from_env()
    app()


if __name__ == "__main__":
    run()

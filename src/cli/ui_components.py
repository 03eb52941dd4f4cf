"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables por los comandos; la lógica de validación
vive en `core.services.validator`.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.rules import ValidationIssue, ValidationRule
from core.services.validator import TypeSchema


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("typesync", style="bold cyan")
    subtitle = Text("Clientes HTTP generados • Reintentos • Validación", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _describe_constraint(rule: ValidationRule) -> str:
    if rule.format is not None:
        return rule.format.value
    if rule.literals:
        return " | ".join(rule.literals)
    if rule.nested is not None:
        return rule.nested.__name__
    if rule.item is not None:
        inner = rule.item.nested.__name__ if rule.item.nested is not None else rule.item.kind.value
        return f"{rule.kind.value}<{inner}>"
    if rule.variants:
        return " | ".join(v.__name__ for v in rule.variants)
    return ""


def build_schemas_table(schemas: Mapping[str, TypeSchema]) -> Table:
    table = Table(title="Schemas")
    table.add_column("Schema", style="cyan", no_wrap=True)
    table.add_column("Fields", style="white")
    table.add_column("Renames", style="magenta")
    for name, schema in sorted(schemas.items()):
        fields = ", ".join(rule.name for rule in schema.rules) or schema.root_rule.kind.value
        renames = ", ".join(f"{wire}→{domain}" for wire, domain in schema.renames.items())
        table.add_row(name, fields, renames)
    return table


def build_rules_table(schema: TypeSchema) -> Table:
    """Reglas de un schema, campo por campo."""

    table = Table(title=f"{schema.name} rules")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Wire", style="white")
    table.add_column("Kind", style="green")
    table.add_column("Required", style="yellow")
    table.add_column("Constraint", style="dim")
    for rule in schema.rules:
        table.add_row(
            rule.name,
            rule.wire_name,
            rule.kind.value,
            "yes" if rule.required else "no",
            _describe_constraint(rule),
        )
    return table


def build_errors_panel(errors: Iterable[ValidationIssue]) -> Panel:
    body = Text()
    for issue in errors:
        body.append(issue.path or "<root>", style="bold red")
        body.append(f": {issue.message}\n")
    return Panel(body, title=Text("Validation failed", style="bold red"), border_style="red")


def build_domain_panel(data: Any) -> Panel:
    rendered = json.dumps(data, ensure_ascii=False, indent=2, default=str)
    return Panel(Text(rendered), title=Text("Valid", style="bold green"), border_style="green")

"""Construcción de URLs: parámetros de ruta y query string."""

from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from core.domain.errors import MissingPathParameterError

_PLACEHOLDER_RE = re.compile(r"\{([^}]+)\}")


def placeholders(template: str) -> list[str]:
    """Nombres de los placeholders de una plantilla, en orden de aparición."""

    return _PLACEHOLDER_RE.findall(template)


def stringify(value: Any) -> str:
    # Booleanos como en JSON, no como `str(True)`.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_path(template: str, params: Mapping[str, Any]) -> str:
    """Sustituye cada `{nombre}` por su valor codificado.

    Un placeholder sin valor (ausente o `None`) es un error de configuración.
    """

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        value = params.get(key)
        if value is None:
            raise MissingPathParameterError(key)
        return quote(stringify(value), safe="")

    return _PLACEHOLDER_RE.sub(_substitute, template)


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Pares `(nombre, valor)` en orden de inserción; `None` se omite."""

    if not params:
        return []
    return [(key, stringify(value)) for key, value in params.items() if value is not None]


def build_url(
    base_url: str,
    template: str,
    path_params: Mapping[str, Any] | None = None,
    query: Mapping[str, Any] | None = None,
) -> str:
    url = base_url + build_path(template, path_params or {})
    pairs = build_query(query)
    if pairs:
        url = f"{url}?{urlencode(pairs)}"
    return url

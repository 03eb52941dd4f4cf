"""Base de los tipos de wire (Pydantic v2).

Convenciones de todos los modelos generados:
- Son cerrados: un campo no declarado es un error, no se descarta.
- Tipos estrictos: `"1"` no es un entero, `1` no es un string.
- El nombre del atributo es el nombre de dominio (camelCase); el nombre de
  wire es el alias (snake_case salvo que el campo declare otro con
  `Field(alias=...)`). Se valida por alias y `model_dump()` devuelve la forma
  de dominio; `model_dump(by_alias=True)` la de wire.
- Opcional significa "puede faltar": un `null` explícito se rechaza.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import AfterValidator, AliasGenerator, BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_snake

from core.domain.rules import StringFormat

_UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

# Timestamp UTC completo: minutos obligatorios, segundos y fracción opcionales, `Z` final.
_DATE_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?Z$")

NULL_NOT_ALLOWED = "Expected a value, received null"


def _check_uuid(value: str) -> str:
    if not _UUID_RE.match(value):
        raise ValueError("Invalid uuid")
    return value


def _check_date_time(value: str) -> str:
    if not _DATE_TIME_RE.match(value):
        raise ValueError("Invalid datetime")
    try:
        # El regex no descarta fechas imposibles (mes 13, 25:00).
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("Invalid datetime") from None
    return value


UUIDStr = Annotated[str, StringFormat.UUID, AfterValidator(_check_uuid)]
DateTimeStr = Annotated[str, StringFormat.DATE_TIME, AfterValidator(_check_date_time)]


@dataclass(frozen=True)
class FilePart:
    """Hoja binaria de un formulario multipart."""

    filename: str
    content: Any
    content_type: str = "application/octet-stream"


Binary = Union[bytes, FilePart]


class WireModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        alias_generator=AliasGenerator(alias=to_snake),
    )

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError(NULL_NOT_ALLOWED)
        return value

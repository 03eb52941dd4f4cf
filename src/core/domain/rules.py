"""Reglas de validación y resultado de validar.

Una `ValidationRule` describe un campo de un tipo de wire: si es obligatorio,
qué clase de valor admite y cómo se llama del lado del dominio. Las reglas
se derivan de los modelos (ver `core.services.validator.describe_rules`);
aquí solo vive la forma de los datos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class FieldKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    OBJECT = "object"
    ARRAY = "array"
    MAP = "map"
    UNION = "union"
    BINARY = "binary"
    ANY = "any"


class StringFormat(str, Enum):
    """Restricciones de formato sobre strings."""

    UUID = "uuid"
    DATE_TIME = "date-time"


@dataclass(frozen=True)
class ValidationRule:
    """Regla de un campo.

    `wire_name` es el nombre en el payload transmitido; `name` el del dominio.
    `nested` apunta al modelo de un objeto anidado; `item` a la regla de los
    elementos de un array (o de los valores de un map).
    """

    name: str
    wire_name: str
    kind: FieldKind
    required: bool = True
    format: StringFormat | None = None
    literals: tuple[str, ...] = ()
    nested: type | None = None
    item: ValidationRule | None = None
    variants: tuple[type, ...] = ()

    @property
    def renamed(self) -> bool:
        return self.name != self.wire_name


@dataclass(frozen=True)
class ValidationIssue:
    """Un problema de validación, con ruta calificada (`entries.0.label`)."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class ValidationSuccess(Generic[T]):
    """Payload aceptado.

    `value` es el objeto tipado (atributos con nombres de dominio); `data`
    su volcado como dict de dominio.
    """

    value: T
    data: Any
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ValidationFailure:
    errors: tuple[ValidationIssue, ...]
    raw: Any = None
    success: bool = field(default=False, init=False)

    def messages(self) -> list[str]:
        return [str(issue) for issue in self.errors]


ValidationOutcome = Union[ValidationSuccess[T], ValidationFailure]

"""Modelos del dominio del runtime (Pydantic v2 y dataclasses).

Nota:
- `ClientConfig` es propiedad de una única fachada; sus `headers` son
  mutables y compartidos por todas las llamadas de esa instancia.
- `RequestAttempt` y `EncodedBody` son efímeros: existen durante un intento.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

from core.services.path_binder import placeholders

if TYPE_CHECKING:
    from core.services.cancellation import CancelSignal


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class BodyEncoding(str, Enum):
    NONE = "none"
    JSON = "json"
    MULTIPART = "multipart"


class ClientConfig(BaseModel):
    """Configuración compartida de una fachada."""

    base_url: str = Field(
        ...,
        min_length=1,
        description="URL base del API; se le quita la barra final.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers por defecto (mutables: token bearer, etc.).",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Timeout por intento (segundos). 0 desactiva el timer.",
    )
    retries: int = Field(
        default=3,
        ge=0,
        description="Reintentos tras el primer intento fallido.",
    )
    retry_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Espera entre intentos (segundos). 0 desactiva los reintentos.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value[:-1] if value.endswith("/") else value


@dataclass(frozen=True)
class EndpointDescriptor:
    """Descripción declarativa de un método del cliente."""

    name: str
    method: HttpMethod
    path: str
    path_params: tuple[str, ...] = ()
    query_params: tuple[str, ...] = ()
    body: BodyEncoding = BodyEncoding.NONE
    request_schema: Any = None
    response_schema: Any = None

    def __post_init__(self) -> None:
        # Los parámetros de ruta declarados son exactamente los placeholders.
        if sorted(self.path_params) != sorted(placeholders(self.path)):
            raise ValueError(
                f"{self.name}: path_params {list(self.path_params)} do not match {self.path!r}"
            )


@dataclass
class RequestOptions:
    """Overrides por llamada; ganan sobre los defaults de la fachada."""

    headers: dict[str, str] | None = None
    signal: CancelSignal | None = None
    method: HttpMethod | str | None = None


@dataclass
class MultipartPayload:
    """Formulario multipart ya construido por quien llama.

    Cada parte es `(nombre, (filename | None, contenido, content_type | None))`,
    el mismo formato que acepta `httpx` en `files=`.
    """

    parts: list[tuple[str, tuple[str | None, Any, str | None]]] = field(default_factory=list)

    def add_field(self, name: str, value: str) -> MultipartPayload:
        self.parts.append((name, (None, value.encode("utf-8"), None)))
        return self

    def add_file(
        self,
        name: str,
        content: Any,
        *,
        filename: str | None = None,
        content_type: str = "application/octet-stream",
    ) -> MultipartPayload:
        self.parts.append((name, (filename or name, content, content_type)))
        return self


@dataclass
class EncodedBody:
    """Cuerpo listo para transmitir."""

    content: bytes | None = None
    files: list[tuple[str, tuple[str | None, Any, str | None]]] | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def empty(self) -> bool:
        return self.content is None and not self.files

    def as_request_kwargs(self) -> dict[str, Any]:
        if self.files:
            return {"files": self.files}
        if self.content is not None:
            return {"content": self.content}
        return {}


@dataclass
class RequestAttempt:
    """Un envío físico de una petición lógica."""

    number: int
    method: str
    url: str
    headers: dict[str, str]
    body: EncodedBody
    signal: CancelSignal

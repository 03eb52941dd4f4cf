"""Errores que el runtime expone a quien llama.

Taxonomía:
- `MissingPathParameterError` / `UnknownQueryParameterError`: errores de
  configuración, antes de tocar la red.
- `HttpStatusError`: respuesta no-2xx (reintentable).
- `RequestAborted`: un intento cancelado por timeout o por señal externa
  (reintentable).
- `ValidationError`: el cuerpo no cumple el schema (nunca se reintenta).

Los errores de red de httpx (`httpx.TransportError`) no se envuelven.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    import httpx

    from core.domain.rules import ValidationIssue


class ApiClientError(Exception):
    """Base de todos los errores propios del cliente."""


class MissingPathParameterError(ApiClientError):
    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing required path parameter: {parameter}")
        self.parameter = parameter


class UnknownQueryParameterError(ApiClientError):
    def __init__(self, endpoint: str, parameters: Sequence[str]) -> None:
        super().__init__(f"Unknown query parameter for {endpoint}: " + ", ".join(parameters))
        self.endpoint = endpoint
        self.parameters = list(parameters)


class HttpStatusError(ApiClientError):
    """Respuesta HTTP fuera del rango 2xx."""

    def __init__(self, status: int, response: httpx.Response) -> None:
        reason = getattr(response, "reason_phrase", "") or ""
        super().__init__(f"Request failed: {status} {reason}".rstrip())
        self.status = status
        self.response = response


class RequestAborted(ApiClientError):
    """El intento en curso fue cancelado.

    `reason` vale `"timeout"` cuando venció el timer interno y `"aborted"`
    cuando disparó la señal externa.
    """

    def __init__(self, reason: str = "aborted") -> None:
        super().__init__(f"Request aborted ({reason})")
        self.reason = reason


class ValidationError(ApiClientError):
    """Fallo de validación con la lista ordenada de problemas."""

    def __init__(self, errors: Sequence[ValidationIssue], data: Any) -> None:
        self.errors = list(errors)
        self.data = data
        super().__init__("Validation failed: " + ", ".join(str(e) for e in self.errors))

"""Contrato del transporte HTTP.

Un `Transport` recibe un intento ya resuelto (URL, headers, cuerpo y señal)
y devuelve la respuesta 2xx o lanza:
- `HttpStatusError` si el status no es 2xx;
- `RequestAborted` si la señal del intento dispara antes de terminar;
- los errores de red del cliente HTTP, sin envolver.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

from core.domain.models import RequestAttempt


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo del invocador de transporte."""

    async def send(self, attempt: RequestAttempt) -> httpx.Response:
        """Envía un intento y clasifica el resultado."""

        ...

    async def aclose(self) -> None:
        ...

"""Wrapper de httpx: el invocador de transporte.

Responsabilidad:
- Construir el `httpx.AsyncClient` compartido por una fachada.
- Enviar un intento compitiendo contra su señal de cancelación.
- Clasificar el resultado: respuesta 2xx, `HttpStatusError`,
  `RequestAborted` o error de red de httpx (sin envolver).

Los timeouts no se configuran en httpx: los impone la señal compuesta de
cada intento (ver `core.services.cancellation`).
"""

from __future__ import annotations

import asyncio
import time

import httpx

from core.domain.errors import HttpStatusError, RequestAborted
from core.domain.models import RequestAttempt
from core.interfaces.transport import Transport
from core.logger import logger


def build_async_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` sin timeout propio."""

    headers: dict[str, str] = {"Accept": "application/json"}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=None,
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport(Transport):
    """Implementación de `Transport` sobre `httpx.AsyncClient`."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client()

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def send(self, attempt: RequestAttempt) -> httpx.Response:
        signal = attempt.signal
        if signal.aborted:
            raise RequestAborted(signal.reason or "aborted")

        request = self._client.build_request(
            attempt.method,
            attempt.url,
            headers=attempt.headers,
            **attempt.body.as_request_kwargs(),
        )
        started = time.perf_counter()
        send_task = asyncio.ensure_future(self._client.send(request))
        abort_task = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            send_task.cancel()
            abort_task.cancel()
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        if send_task not in done:
            send_task.cancel()
            await asyncio.gather(send_task, return_exceptions=True)
            logger.debug(
                "%s %s aborted (%s) after %.1f ms [attempt %d]",
                attempt.method,
                attempt.url,
                signal.reason,
                elapsed_ms,
                attempt.number + 1,
            )
            raise RequestAborted(signal.reason or "aborted")

        abort_task.cancel()
        response = send_task.result()
        logger.debug(
            "%s %s -> %d in %.1f ms [attempt %d]",
            attempt.method,
            attempt.url,
            response.status_code,
            elapsed_ms,
            attempt.number + 1,
        )
        if not response.is_success:
            raise HttpStatusError(response.status_code, response)
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

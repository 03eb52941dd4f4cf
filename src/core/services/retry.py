"""Bucle de reintentos de una petición lógica.

Política (la misma para cualquier fallo reintentable):
- hasta `retries + 1` intentos, siempre secuenciales;
- tras un fallo, si quedan intentos y `retry_delay_seconds > 0`, se espera y
  se reintenta; si no, se propaga el último error.

Solo se reintentan errores de transporte (`httpx.TransportError`),
cancelaciones de un intento (`RequestAborted`) y respuestas no-2xx
(`HttpStatusError`). Los 4xx se reintentan igual que los 5xx.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

import httpx

from core.domain.errors import HttpStatusError, RequestAborted
from core.domain.models import ClientConfig
from core.logger import logger

T = TypeVar("T")

RETRYABLE_ERRORS: tuple[type[BaseException], ...] = (
    httpx.TransportError,
    RequestAborted,
    HttpStatusError,
)


@dataclass(frozen=True)
class RetryPolicy:
    retries: int = 3
    retry_delay_seconds: float = 1.0

    @classmethod
    def from_config(cls, config: ClientConfig) -> RetryPolicy:
        return cls(retries=config.retries, retry_delay_seconds=config.retry_delay_seconds)


async def run_with_retries(
    send: Callable[[int], Awaitable[T]],
    policy: RetryPolicy,
    *,
    label: str = "request",
    give_up: Callable[[BaseException], bool] | None = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> T:
    """Ejecuta `send(attempt)` con la política dada.

    `send` recibe el número de intento (desde 0) y debe construir todo lo
    efímero del intento (señal, headers, cuerpo). `give_up(exc)` permite
    cortar antes un error que sería reintentable.
    """

    attempt = 0
    while True:
        try:
            return await send(attempt)
        except RETRYABLE_ERRORS as exc:
            stop = give_up is not None and give_up(exc)
            if not stop and attempt < policy.retries and policy.retry_delay_seconds > 0:
                logger.warning(
                    "%s: attempt %d/%d failed (%s); retrying in %.3fs",
                    label,
                    attempt + 1,
                    policy.retries + 1,
                    exc,
                    policy.retry_delay_seconds,
                )
                await sleep(policy.retry_delay_seconds)
                attempt += 1
                continue
            logger.error("%s: giving up after %d attempt(s): %s", label, attempt + 1, exc)
            raise

"""Señales de cancelación por intento.

`CancelSignal` cumple el papel de una señal de aborto: quien llama puede
pasar una a la fachada y dispararla desde otra tarea. `compose_signal`
combina esa señal externa con el timeout de la configuración en una señal
efectiva, nueva para cada intento.
"""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import Callable, Iterator


class CancelSignal:
    """Señal de aborto de un solo disparo."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._callbacks: list[Callable[[str], None]] = []
        self.reason: str | None = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    def abort(self, reason: str = "aborted") -> None:
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()
        for callback in list(self._callbacks):
            callback(reason)

    async def wait(self) -> str | None:
        await self._event.wait()
        return self.reason

    def add_callback(self, callback: Callable[[str], None]) -> None:
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[str], None]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)


@contextmanager
def compose_signal(
    timeout_seconds: float | None,
    external: CancelSignal | None = None,
) -> Iterator[CancelSignal]:
    """Señal que dispara con el timeout o con la señal externa, lo que ocurra antes.

    Una señal externa ya disparada aborta de inmediato. Al salir del bloque se
    desarman el timer y el enlace con la señal externa: el siguiente intento
    arranca con una señal y un timeout nuevos.
    """

    signal = CancelSignal()
    timer: asyncio.TimerHandle | None = None

    if external is not None:
        if external.aborted:
            signal.abort(external.reason or "aborted")
        else:
            external.add_callback(signal.abort)

    if timeout_seconds and not signal.aborted:
        loop = asyncio.get_running_loop()
        timer = loop.call_later(timeout_seconds, signal.abort, "timeout")

    try:
        yield signal
    finally:
        if timer is not None:
            timer.cancel()
        if external is not None:
            external.remove_callback(signal.abort)

"""Fachada base de los clientes generados.

Cada cliente concreto declara sus endpoints (`EndpointDescriptor`) y expone
un método por endpoint; todo el cableado vive aquí:

ruta/query -> cuerpo -> reintentos (señal compuesta + transporte por
intento) -> 204/HEAD o JSON -> validación de la respuesta.

Concurrencia:
- Las llamadas de una misma instancia comparten `ClientConfig`.
- Los headers por defecto se leen en cada intento: un `set_auth_token`
  concurrente afecta también a peticiones en vuelo que aún no enviaron.
  Si hace falta aislamiento, usar una fachada por sesión
  (`config.model_copy(deep=True)`).
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from adapters.http_client import HttpxTransport
from core.domain.errors import RequestAborted, UnknownQueryParameterError
from core.domain.models import (
    ClientConfig,
    EndpointDescriptor,
    HttpMethod,
    RequestAttempt,
    RequestOptions,
)
from core.interfaces.transport import Transport
from core.services.body_encoder import encode_body
from core.services.cancellation import compose_signal
from core.services.path_binder import build_url
from core.services.retry import RetryPolicy, run_with_retries
from core.services.validator import validate_response


class BaseApiClient:
    """Base de las fachadas: configuración compartida y `_call` genérico."""

    def __init__(
        self,
        config: ClientConfig | str,
        *,
        transport: Transport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if isinstance(config, str):
            config = ClientConfig(base_url=config)
        self.config = config
        self._transport: Transport = transport or HttpxTransport(http_client)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def set_auth_token(self, token: str) -> None:
        self.config.headers["Authorization"] = f"Bearer {token}"

    def clear_auth_token(self) -> None:
        self.config.headers.pop("Authorization", None)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> BaseApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _call(
        self,
        endpoint: EndpointDescriptor,
        *,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        options = options or RequestOptions()

        # Errores de configuración antes de tocar la red.
        unknown = [key for key in query or {} if key not in endpoint.query_params]
        if unknown:
            raise UnknownQueryParameterError(endpoint.name, unknown)
        url = build_url(self.config.base_url, endpoint.path, path_params, query)
        rules = endpoint.request_schema.rules if endpoint.request_schema is not None else None
        encoded = encode_body(body, endpoint.body, rules)

        method = options.method or endpoint.method
        method = (method.value if isinstance(method, HttpMethod) else str(method)).upper()

        async def _attempt(number: int) -> httpx.Response:
            headers = {**self.config.headers, **encoded.headers, **(options.headers or {})}
            with compose_signal(self.config.timeout_seconds, options.signal) as signal:
                attempt = RequestAttempt(
                    number=number,
                    method=method,
                    url=url,
                    headers=headers,
                    body=encoded,
                    signal=signal,
                )
                return await self._transport.send(attempt)

        def _external_abort(exc: BaseException) -> bool:
            # Con la señal externa ya disparada, cada intento nuevo abortaría al instante.
            return (
                isinstance(exc, RequestAborted)
                and options.signal is not None
                and options.signal.aborted
            )

        response = await run_with_retries(
            _attempt,
            RetryPolicy.from_config(self.config),
            label=f"{method} {endpoint.name}",
            give_up=_external_abort,
        )

        if response.status_code == 204 or method == HttpMethod.HEAD.value:
            return None

        payload = response.json()
        if endpoint.response_schema is None:
            return payload
        return validate_response(payload, endpoint.response_schema)

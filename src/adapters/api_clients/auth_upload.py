"""Cliente del API de autenticación y subida de ficheros."""

from __future__ import annotations

from adapters.api_clients.base import BaseApiClient
from core.domain.models import (
    BodyEncoding,
    EndpointDescriptor,
    HttpMethod,
    MultipartPayload,
    RequestOptions,
)
from core.domain.schemas.auth_upload import (
    APIFileUploadRequest,
    APIFileUploadRequestSchema,
    APIFileUploadResponse,
    APIFileUploadResponseSchema,
    APILoginRequest,
    APILoginRequestSchema,
    APILoginResponse,
    APILoginResponseSchema,
)

CREATE_LOGIN = EndpointDescriptor(
    name="createLogin",
    method=HttpMethod.POST,
    path="/auth/login",
    body=BodyEncoding.JSON,
    request_schema=APILoginRequestSchema,
    response_schema=APILoginResponseSchema,
)

CREATE_UPLOAD = EndpointDescriptor(
    name="createUpload",
    method=HttpMethod.POST,
    path="/files/upload",
    body=BodyEncoding.MULTIPART,
    request_schema=APIFileUploadRequestSchema,
    response_schema=APIFileUploadResponseSchema,
)


class AuthUploadApiClient(BaseApiClient):
    async def create_login(
        self,
        body: APILoginRequest | dict | None = None,
        options: RequestOptions | None = None,
    ) -> APILoginResponse:
        return await self._call(CREATE_LOGIN, body=body, options=options)

    async def create_upload(
        self,
        body: APIFileUploadRequest | MultipartPayload | dict | None = None,
        options: RequestOptions | None = None,
    ) -> APIFileUploadResponse:
        """Sube un fichero.

        `body` puede ser el modelo, un dict con las mismas claves o un
        `MultipartPayload` ya armado (se envía sin re-codificar).
        """

        return await self._call(CREATE_UPLOAD, body=body, options=options)

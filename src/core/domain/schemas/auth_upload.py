"""Tipos del API de autenticación y subida de ficheros."""

from __future__ import annotations

from core.domain.wire import Binary, WireModel
from core.services.validator import TypeSchema


class APILoginRequest(WireModel):
    username: str
    password: str


class APILoginResponse(WireModel):
    token: str


class APIFileUploadRequest(WireModel):
    """Cuerpo multipart de `/files/upload`."""

    file: Binary
    description: str


class APIFileUploadResponse(WireModel):
    # dominio `fileId` <- wire `file_id`
    fileId: str
    url: str


APILoginRequestSchema: TypeSchema[APILoginRequest] = TypeSchema(APILoginRequest)
APILoginResponseSchema: TypeSchema[APILoginResponse] = TypeSchema(APILoginResponse)
APIFileUploadRequestSchema: TypeSchema[APIFileUploadRequest] = TypeSchema(APIFileUploadRequest)
APIFileUploadResponseSchema: TypeSchema[APIFileUploadResponse] = TypeSchema(APIFileUploadResponse)

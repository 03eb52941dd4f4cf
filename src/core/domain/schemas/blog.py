"""Tipos del API de blog (paginación y objetos anidados)."""

from __future__ import annotations

from core.domain.wire import WireModel
from core.services.validator import TypeSchema


class APIUser(WireModel):
    id: int
    username: str


class APIPost(WireModel):
    id: int
    title: str
    author: APIUser
    tags: list[str] | None = None


class APIPostListResponse(WireModel):
    items: list[APIPost]
    total: int


APIUserSchema: TypeSchema[APIUser] = TypeSchema(APIUser)
APIPostSchema: TypeSchema[APIPost] = TypeSchema(APIPost)
APIPostListResponseSchema: TypeSchema[APIPostListResponse] = TypeSchema(APIPostListResponse)

"""Tipos del API de ejemplo: enums, objetos opcionales y uniones etiquetadas."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from core.domain.wire import WireModel
from core.services.validator import TypeSchema

UserRole = Literal["ADMIN", "EDITOR", "VIEWER"]


class APIUserProfile(WireModel):
    bio: str | None = None
    social: list[str] | None = None


class APIUserResponse(WireModel):
    id: int
    name: str
    role: UserRole
    profile: APIUserProfile | None = None


class APIBook(WireModel):
    type: Literal["book"]
    title: str
    author: str


class APIMovie(WireModel):
    type: Literal["movie"]
    title: str
    director: str


APIMedia = Annotated[Union[APIBook, APIMovie], Field(discriminator="type")]


class APICreateItemRequest(WireModel):
    name: str
    media: APIMedia | None = None
    tags: list[str] | None = None


class APIItem(WireModel):
    id: int
    data: APICreateItemRequest


APIUserProfileSchema: TypeSchema[APIUserProfile] = TypeSchema(APIUserProfile)
APIUserResponseSchema: TypeSchema[APIUserResponse] = TypeSchema(APIUserResponse)
APIBookSchema: TypeSchema[APIBook] = TypeSchema(APIBook)
APIMovieSchema: TypeSchema[APIMovie] = TypeSchema(APIMovie)
APIMediaSchema: TypeSchema[APIBook | APIMovie] = TypeSchema(APIMedia, name="APIMedia")
APICreateItemRequestSchema: TypeSchema[APICreateItemRequest] = TypeSchema(APICreateItemRequest)
APIItemSchema: TypeSchema[APIItem] = TypeSchema(APIItem)

"""Cliente del API de ejemplo (usuarios e items)."""

from __future__ import annotations

from adapters.api_clients.base import BaseApiClient
from core.domain.models import BodyEncoding, EndpointDescriptor, HttpMethod, RequestOptions
from core.domain.schemas.sample import (
    APICreateItemRequest,
    APICreateItemRequestSchema,
    APIItem,
    APIItemSchema,
    APIUserResponse,
    APIUserResponseSchema,
)

GET_USER = EndpointDescriptor(
    name="getUser",
    method=HttpMethod.GET,
    path="/users/{user_id}",
    path_params=("user_id",),
    query_params=("verbose",),
    response_schema=APIUserResponseSchema,
)

CREATE_ITEM = EndpointDescriptor(
    name="createItem",
    method=HttpMethod.POST,
    path="/items",
    body=BodyEncoding.JSON,
    request_schema=APICreateItemRequestSchema,
    response_schema=APIItemSchema,
)


class SampleApiClient(BaseApiClient):
    async def get_user(
        self,
        user_id: int,
        verbose: bool | None = None,
        options: RequestOptions | None = None,
    ) -> APIUserResponse:
        return await self._call(
            GET_USER,
            path_params={"user_id": user_id},
            query={"verbose": verbose},
            options=options,
        )

    async def create_item(
        self,
        body: APICreateItemRequest | dict | None = None,
        options: RequestOptions | None = None,
    ) -> APIItem:
        return await self._call(CREATE_ITEM, body=body, options=options)

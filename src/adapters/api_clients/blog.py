"""Cliente del API de blog."""

from __future__ import annotations

from adapters.api_clients.base import BaseApiClient
from core.domain.models import EndpointDescriptor, HttpMethod, RequestOptions
from core.domain.schemas.blog import (
    APIPost,
    APIPostListResponse,
    APIPostListResponseSchema,
    APIPostSchema,
)

LIST_POSTS = EndpointDescriptor(
    name="listPosts",
    method=HttpMethod.GET,
    path="/posts",
    query_params=("limit", "offset"),
    response_schema=APIPostListResponseSchema,
)

GET_POST = EndpointDescriptor(
    name="getPost",
    method=HttpMethod.GET,
    path="/posts/{id}",
    path_params=("id",),
    response_schema=APIPostSchema,
)


class BlogApiClient(BaseApiClient):
    async def list_posts(
        self,
        limit: int | None = None,
        offset: int | None = None,
        options: RequestOptions | None = None,
    ) -> APIPostListResponse:
        return await self._call(
            LIST_POSTS, query={"limit": limit, "offset": offset}, options=options
        )

    async def get_post(self, id: int, options: RequestOptions | None = None) -> APIPost:
        return await self._call(GET_POST, path_params={"id": id}, options=options)

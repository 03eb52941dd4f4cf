"""Cliente del API de mascotas (respuesta polimórfica)."""

from __future__ import annotations

from adapters.api_clients.base import BaseApiClient
from core.domain.models import EndpointDescriptor, HttpMethod, RequestOptions
from core.domain.schemas.pets import APICat, APIDog, APIPetResponseSchema

GET_PET = EndpointDescriptor(
    name="getPet",
    method=HttpMethod.GET,
    path="/pets/{pet_id}",
    path_params=("pet_id",),
    response_schema=APIPetResponseSchema,
)


class InheritanceApiClient(BaseApiClient):
    async def get_pet(self, pet_id: int, options: RequestOptions | None = None) -> APIDog | APICat:
        return await self._call(GET_PET, path_params={"pet_id": pet_id}, options=options)

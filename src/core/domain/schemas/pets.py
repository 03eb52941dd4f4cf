"""Tipos del API de mascotas: herencia (allOf) y unión etiquetada por `pet_type`."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from core.domain.wire import WireModel
from core.services.validator import TypeSchema


class APIBasePet(WireModel):
    id: int
    name: str
    age: int | None = None


class APIDog(APIBasePet):
    petType: Literal["dog"]
    goodBoy: bool | None = None


class APICat(APIBasePet):
    petType: Literal["cat"]
    indoor: bool | None = None


APIPetResponse = Annotated[Union[APIDog, APICat], Field(discriminator="petType")]


APIBasePetSchema: TypeSchema[APIBasePet] = TypeSchema(APIBasePet)
APIDogSchema: TypeSchema[APIDog] = TypeSchema(APIDog)
APICatSchema: TypeSchema[APICat] = TypeSchema(APICat)
APIPetResponseSchema: TypeSchema[APIDog | APICat] = TypeSchema(APIPetResponse, name="APIPetResponse")

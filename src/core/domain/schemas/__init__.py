"""Tipos de wire de cada API y su registro por nombre."""

from core.domain.schemas import auth_upload, blog, pets, reports, sample
from core.services.validator import TypeSchema


def _collect(*modules: object) -> dict[str, TypeSchema]:
    out: dict[str, TypeSchema] = {}
    for module in modules:
        for attr, value in vars(module).items():
            if attr.endswith("Schema") and isinstance(value, TypeSchema):
                out[attr] = value
    return out


SCHEMAS: dict[str, TypeSchema] = _collect(auth_upload, sample, blog, reports, pets)

__all__ = ["SCHEMAS"]

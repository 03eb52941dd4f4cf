"""Codificación del cuerpo de la petición (JSON o multipart).

En multipart la clase de cada hoja (escalar, binaria, objeto, array) se
decide una vez por campo a partir de las reglas del schema de la petición.
Solo cuando no hay regla para un campo se infiere del valor.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel

from core.domain.models import BodyEncoding, EncodedBody, MultipartPayload
from core.domain.rules import FieldKind, ValidationRule
from core.domain.wire import FilePart
from core.services.path_binder import stringify

JSON_CONTENT_TYPE = "application/json"


class LeafKind(str, Enum):
    SCALAR = "scalar"
    BINARY = "binary"
    OBJECT = "object"
    ARRAY = "array"


_KIND_TO_LEAF = {
    FieldKind.BINARY: LeafKind.BINARY,
    FieldKind.OBJECT: LeafKind.OBJECT,
    FieldKind.MAP: LeafKind.OBJECT,
    FieldKind.UNION: LeafKind.OBJECT,
    FieldKind.ARRAY: LeafKind.ARRAY,
}

_Part = tuple[str, tuple[str | None, Any, str | None]]


def leaf_kind(rule: ValidationRule) -> LeafKind | None:
    """Clase de hoja declarada por la regla; `None` si la regla no lo fija."""

    if rule.kind is FieldKind.ANY:
        return None
    return _KIND_TO_LEAF.get(rule.kind, LeafKind.SCALAR)


def infer_leaf_kind(value: Any) -> LeafKind:
    if isinstance(value, (bytes, bytearray, FilePart)):
        return LeafKind.BINARY
    if isinstance(value, (list, tuple)):
        return LeafKind.ARRAY
    if isinstance(value, (dict, BaseModel)):
        return LeafKind.OBJECT
    return LeafKind.SCALAR


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return value


def _binary_part(key: str, value: Any) -> _Part:
    if isinstance(value, FilePart):
        return (key, (value.filename, value.content, value.content_type))
    content = bytes(value) if isinstance(value, bytearray) else value
    return (key, (key, content, "application/octet-stream"))


def _json_blob_part(key: str, value: Any) -> _Part:
    blob = json.dumps(_plain(value)).encode("utf-8")
    return (key, ("blob", blob, JSON_CONTENT_TYPE))


def _scalar_part(key: str, value: Any) -> _Part:
    return (key, (None, stringify(value).encode("utf-8"), None))


def _leaf_part(key: str, value: Any, kind: LeafKind) -> _Part:
    if kind is LeafKind.BINARY:
        return _binary_part(key, value)
    if kind is LeafKind.OBJECT:
        return _json_blob_part(key, value)
    return _scalar_part(key, value)


def encode_json(payload: Any) -> EncodedBody:
    """El payload tal cual, como texto JSON. `None` no produce cuerpo."""

    if payload is None:
        return EncodedBody()
    content = json.dumps(_plain(payload)).encode("utf-8")
    return EncodedBody(content=content, headers={"Content-Type": JSON_CONTENT_TYPE})


def encode_multipart(
    payload: Any,
    rules: tuple[ValidationRule, ...] | None = None,
) -> EncodedBody:
    """Formulario multipart con una parte por hoja.

    - binario: parte de fichero;
    - array: una parte por elemento (binario, blob JSON u escalar);
    - objeto: una única parte blob JSON;
    - escalar: texto.

    Las claves ausentes o `None` no generan partes; un `None` dentro de un
    array sí: va como blob JSON `null`. Un `MultipartPayload` ya construido
    se envía sin tocar.
    """

    if payload is None:
        return EncodedBody()
    if isinstance(payload, MultipartPayload):
        return EncodedBody(files=list(payload.parts))

    fields: Mapping[str, Any]
    if isinstance(payload, BaseModel):
        # Claves de wire, en orden de declaración, solo campos asignados.
        fields = {
            info.alias or name: getattr(payload, name)
            for name, info in type(payload).model_fields.items()
            if name in payload.model_fields_set
        }
    else:
        fields = payload

    by_wire = {rule.wire_name: rule for rule in rules or ()}
    parts: list[_Part] = []
    for key, value in fields.items():
        if value is None:
            continue
        rule = by_wire.get(key)
        kind = (leaf_kind(rule) if rule is not None else None) or infer_leaf_kind(value)
        if kind is LeafKind.ARRAY:
            item_rule = rule.item if rule is not None else None
            declared = leaf_kind(item_rule) if item_rule is not None else None
            for element in value:
                if element is None:
                    parts.append(_json_blob_part(key, None))
                    continue
                parts.append(_leaf_part(key, element, declared or infer_leaf_kind(element)))
        else:
            parts.append(_leaf_part(key, value, kind))
    return EncodedBody(files=parts)


def encode_body(
    payload: Any,
    encoding: BodyEncoding,
    rules: tuple[ValidationRule, ...] | None = None,
) -> EncodedBody:
    if encoding is BodyEncoding.MULTIPART or isinstance(payload, MultipartPayload):
        return encode_multipart(payload, rules)
    if encoding is BodyEncoding.JSON:
        return encode_json(payload)
    return EncodedBody()

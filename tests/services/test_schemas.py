"""Tests for the wire types of each API surface."""

from __future__ import annotations

from core.domain.rules import FieldKind
from core.domain.schemas import SCHEMAS
from core.domain.schemas.auth_upload import APILoginRequestSchema
from core.domain.schemas.blog import APIPostListResponseSchema
from core.domain.schemas.pets import APICat, APIDog, APIDogSchema, APIPetResponseSchema
from core.domain.schemas.sample import (
    APIBook,
    APICreateItemRequestSchema,
    APIMediaSchema,
    APIMovie,
)


def test_registry_lists_every_schema() -> None:
    assert {
        "APILoginRequestSchema",
        "APIFileUploadResponseSchema",
        "APIUserResponseSchema",
        "APIMediaSchema",
        "APIPostListResponseSchema",
        "APIReportListSchema",
        "APIPetResponseSchema",
    } <= set(SCHEMAS)
    assert SCHEMAS["APIPetResponseSchema"] is APIPetResponseSchema


def test_pet_union_picks_variant_by_tag() -> None:
    dog = APIPetResponseSchema.parse({"pet_type": "dog", "id": 1, "name": "Rex", "good_boy": True})
    cat = APIPetResponseSchema.parse({"pet_type": "cat", "id": 2, "name": "Tom", "age": 3})

    assert isinstance(dog, APIDog) and dog.goodBoy is True
    assert isinstance(cat, APICat) and cat.age == 3


def test_pet_union_rejects_unknown_tag_and_foreign_fields() -> None:
    assert not APIPetResponseSchema.is_valid({"pet_type": "fish", "id": 1, "name": "Nemo"})
    assert not APIPetResponseSchema.is_valid(
        {"pet_type": "cat", "id": 2, "name": "Tom", "good_boy": True}
    )


def test_pet_inherits_base_fields() -> None:
    assert [rule.wire_name for rule in APIDogSchema.rules] == [
        "id",
        "name",
        "age",
        "pet_type",
        "good_boy",
    ]
    assert APIPetResponseSchema.root_rule.kind is FieldKind.UNION
    assert APIPetResponseSchema.root_rule.variants == (APIDog, APICat)


def test_pet_domain_shape_round_trip() -> None:
    outcome = APIPetResponseSchema.from_domain(
        {"petType": "cat", "id": 2, "name": "Tom", "indoor": True}
    )

    assert isinstance(outcome.value, APICat)
    assert outcome.data == {"petType": "cat", "id": 2, "name": "Tom", "indoor": True}


def test_media_union() -> None:
    assert isinstance(APIMediaSchema.parse({"type": "book", "title": "Dune", "author": "F"}), APIBook)
    assert isinstance(
        APIMediaSchema.parse({"type": "movie", "title": "Alien", "director": "R"}), APIMovie
    )
    assert not APIMediaSchema.is_valid({"type": "movie", "title": "Alien", "author": "R"})


def test_create_item_with_nested_media() -> None:
    outcome = APICreateItemRequestSchema.validate(
        {"name": "shelf", "media": {"type": "book", "title": "Dune", "author": "F"}, "tags": []}
    )

    assert outcome.success
    assert isinstance(outcome.value.media, APIBook)


def test_paginated_posts() -> None:
    page = APIPostListResponseSchema.parse(
        {
            "items": [
                {"id": 1, "title": "Hello", "author": {"id": 9, "username": "ana"}},
                {"id": 2, "title": "Again", "author": {"id": 9, "username": "ana"}, "tags": ["x"]},
            ],
            "total": 2,
        }
    )

    assert page.total == 2
    assert page.items[0].author.username == "ana"
    assert page.items[1].tags == ["x"]
    assert not APIPostListResponseSchema.is_valid({"items": [{"id": 1, "title": "x"}], "total": 1})


def test_login_request_requires_both_fields() -> None:
    ok = APILoginRequestSchema.validate({"username": "a", "password": "b"})
    missing = APILoginRequestSchema.validate({"username": "a"})

    assert ok.data == {"username": "a", "password": "b"}
    assert [issue.path for issue in missing.errors] == ["password"]

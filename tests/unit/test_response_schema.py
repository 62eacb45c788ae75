"""Static response metadata stays in step with translation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
import pytest

from routeresult.config import Config
from routeresult.outcome import (
    BadRequest,
    Created,
    Forbidden,
    InternalFailure,
    NotFound,
    Success,
)
from routeresult.schema import describe_responses, openapi_responses
from routeresult.table import RESPONSE_TABLE, rule_for
from routeresult.translate import translate

pytestmark = pytest.mark.unit


class Item(BaseModel):
    id: int
    name: str


class FieldError(BaseModel):
    field: str


SAMPLES: dict[type, Any] = {
    Success: Success({"id": 1, "name": "a"}),
    Created: Created({"id": 1, "name": "a"}, "/items/1"),
    NotFound: NotFound(),
    BadRequest: BadRequest({"field": "name"}),
    Forbidden: Forbidden(),
    InternalFailure: InternalFailure(RuntimeError("x")),
}


def test_table_covers_every_variant_once() -> None:
    assert list(RESPONSE_TABLE) == list(SAMPLES)


@pytest.mark.parametrize("forbidden_status", [401, 403])
def test_described_statuses_match_translation(forbidden_status: int) -> None:
    config = Config(forbidden_status=forbidden_status, log_tracebacks=False)

    described = {
        d.variant: d.status for d in describe_responses(Item, config=config)
    }
    translated = {
        cls.__name__: translate(sample, config=config).status
        for cls, sample in SAMPLES.items()
    }

    assert described == translated


def test_payload_rows_carry_payload_schema() -> None:
    rows = {d.variant: d for d in describe_responses(Item, detail_type=FieldError)}

    assert rows["Success"].body_schema == Item.model_json_schema(mode="serialization")
    assert rows["Created"].body_schema == rows["Success"].body_schema
    assert rows["BadRequest"].body_schema == FieldError.model_json_schema(
        mode="serialization"
    )
    assert rows["Success"].media_type == "application/json"
    for empty in ("NotFound", "Forbidden", "InternalFailure"):
        assert rows[empty].body_schema is None
        assert rows[empty].media_type is None


def test_bad_request_without_detail_type_has_no_schema() -> None:
    rows = {d.variant: d for d in describe_responses(list[int])}

    assert rows["BadRequest"].body_schema is None
    assert rows["Success"].body_schema == {"type": "array", "items": {"type": "integer"}}


def test_no_payload_type_means_no_success_schema() -> None:
    rows = {d.variant: d for d in describe_responses(None)}

    assert rows["Success"].body_schema is None


def test_descriptions_use_standard_reason_phrases() -> None:
    phrases = {
        d.status: d.description
        for d in describe_responses(Item, config=Config(forbidden_status=401))
    }

    assert phrases[200] == "OK"
    assert phrases[401] == "Unauthorized"
    assert phrases[500] == "Internal Server Error"


def test_openapi_responses_shape() -> None:
    responses = openapi_responses(Item, detail_type=FieldError)

    assert set(responses) == {"200", "201", "400", "403", "404", "500"}
    assert responses["404"] == {"description": "Not Found"}
    schema = responses["200"]["content"]["application/json"]["schema"]
    assert schema["properties"]["id"] == {"title": "Id", "type": "integer"}


def test_openapi_ref_template_is_forwarded() -> None:
    class Order(BaseModel):
        items: list[Item]

    responses = openapi_responses(
        Order, ref_template="#/components/schemas/{model}"
    )

    schema = responses["200"]["content"]["application/json"]["schema"]
    assert schema["properties"]["items"]["items"] == {
        "$ref": "#/components/schemas/Item"
    }


def test_rule_for_rejects_non_outcomes() -> None:
    with pytest.raises(TypeError):
        rule_for(object())

"""Tests for ordered error collections."""

from __future__ import annotations

import json

import pytest

from error_taxonomy.errors import (
    ErrInternalServerError,
    ErrJSONSchemaValidationFailed,
    Error,
    Errors,
    ErrorSerializationError,
    ErrorType,
)
from error_taxonomy.errors.collection import EMPTY_ERRORS_STATUS


def test_error_and_errors_satisfy_error_type() -> None:
    assert isinstance(ErrInternalServerError.new(), ErrorType)
    assert isinstance(Errors(), ErrorType)


def test_errors_jsonapi_preserves_insertion_order() -> None:
    errs = Errors()
    errs.add_error(ErrInternalServerError.new(""))
    errs.add_error(ErrJSONSchemaValidationFailed.new(""))

    document = json.loads(json.dumps(errs.as_jsonapi_response()))
    assert list(document) == ["errors"]
    assert [item["code"] for item in document["errors"]] == [
        ErrInternalServerError.code,
        ErrJSONSchemaValidationFailed.code,
    ]


def test_status_is_that_of_first_error() -> None:
    errs = Errors()
    errs.add_error(ErrJSONSchemaValidationFailed.new(""))
    errs.add_error(ErrInternalServerError.new(""))
    assert errs.get_status() == 400

    errs[0], errs[1] = errs[1], errs[0]
    assert errs.get_status() == 500


def test_status_ignores_severity_of_later_errors(conflict_class) -> None:
    errs = Errors([conflict_class.new(), ErrInternalServerError.new(), ErrJSONSchemaValidationFailed.new()])
    assert errs.get_status() == 409


def test_empty_collection_status() -> None:
    assert Errors().get_status() == EMPTY_ERRORS_STATUS == 500
    assert Errors().as_jsonapi_response() == {"errors": []}


def test_response_length_matches_collection() -> None:
    errs = Errors(ErrJSONSchemaValidationFailed.new(f"field {n}") for n in range(5))
    response = errs.as_jsonapi_response()
    assert len(response["errors"]) == len(errs) == 5
    assert [item["detail"] for item in response["errors"]] == [f"field {n}" for n in range(5)]


def test_no_deduplication() -> None:
    error = ErrJSONSchemaValidationFailed.new()
    errs = Errors().add_error(error).add_error(error)
    assert len(errs) == 2


def test_sequence_protocol() -> None:
    first = ErrJSONSchemaValidationFailed.new()
    second = ErrInternalServerError.new()
    errs = Errors([first])
    errs.append(second)
    assert list(errs) == [first, second]
    assert isinstance(errs[0:1], Errors)
    assert errs[0:1][0] is first
    del errs[0]
    assert errs[0] is second
    errs.insert(0, first)
    assert all(isinstance(item, Error) for item in errs)
    assert errs.get_status() == 400


def test_errors_as_json_lists_flat_documents() -> None:
    errs = Errors([ErrJSONSchemaValidationFailed.new("a"), ErrInternalServerError.new("b")])
    decoded = json.loads(errs.as_json())
    assert [item["details"] for item in decoded] == ["a", "b"]
    assert all(len(item) == 7 for item in decoded)


def test_errors_as_json_surfaces_serialization_failure() -> None:
    errs = Errors([ErrInternalServerError.new().set_internal({1, 2})])
    with pytest.raises(ErrorSerializationError):
        errs.as_json()


def test_errors_can_be_raised() -> None:
    errs = Errors([ErrJSONSchemaValidationFailed.new("a"), ErrInternalServerError.new("b")])
    with pytest.raises(Errors) as info:
        raise errs
    assert info.value is errs
    assert info.value.get_status() == 400
    assert str(info.value) == "[JSONSchemaValidationFailed] a; [InternalServerError] b"
    assert isinstance(errs, Exception)

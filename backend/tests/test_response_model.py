import pytest
from pydantic import ValidationError as PydanticValidationError

from domain.value_objects import ResponseCode
from dtos.response import ResponseModel
from exceptions import NotFoundError, ProductNotFoundError, ValidationError


@pytest.mark.parametrize("code", [
    ResponseCode.CREATED, ResponseCode.FOUND, ResponseCode.LIST_FOUND, ResponseCode.UPDATED,
])
def test_payload_codes_require_payload(code):
    with pytest.raises(PydanticValidationError):
        ResponseModel(code=code)


@pytest.mark.parametrize("code", [
    ResponseCode.VALIDATION_FAILED, ResponseCode.NOT_FOUND, ResponseCode.DELETED,
])
def test_message_codes_reject_payload(code):
    with pytest.raises(PydanticValidationError):
        ResponseModel(code=code, payload={"id": 1})


def test_payload_codes_reject_message():
    with pytest.raises(PydanticValidationError):
        ResponseModel(code=ResponseCode.FOUND, payload={"id": 1}, message="found")

    envelope = ResponseModel(code=ResponseCode.FOUND, payload={"id": 1})
    with pytest.raises(ValueError):
        envelope.add_message_details("found")


def test_add_message_details_chains():
    envelope = ResponseModel(code=ResponseCode.NOT_FOUND).add_message_details("Customer not found")

    assert envelope.message == "Customer not found"
    assert envelope.payload is None
    assert not envelope.is_success


def test_serializes_with_letter_codes():
    envelope = ResponseModel(code=ResponseCode.DELETED).add_message_details("Customer eliminated")

    assert envelope.model_dump(mode="json") == {
        "code": "H",
        "payload": None,
        "message": "Customer eliminated",
    }


def test_http_status_per_code():
    assert ResponseCode.CREATED.http_status == 201
    assert ResponseCode.VALIDATION_FAILED.http_status == 400
    assert ResponseCode.NOT_FOUND.http_status == 404
    assert ResponseCode.DELETED.http_status == 200


def test_unwrap_returns_payload():
    envelope = ResponseModel(code=ResponseCode.LIST_FOUND, payload=[1, 2])
    assert envelope.unwrap() == [1, 2]


def test_unwrap_raises_requested_not_found_error():
    envelope = ResponseModel(code=ResponseCode.NOT_FOUND).add_message_details("Product not found")

    with pytest.raises(ProductNotFoundError) as exc_info:
        envelope.unwrap(ProductNotFoundError)
    assert exc_info.value.message == "Product not found"

    with pytest.raises(NotFoundError):
        envelope.unwrap()


def test_unwrap_raises_validation_error():
    envelope = ResponseModel(code=ResponseCode.VALIDATION_FAILED).add_message_details("bad email")

    with pytest.raises(ValidationError, match="bad email"):
        envelope.unwrap()

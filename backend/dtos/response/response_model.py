"""
Response Envelope

Every service operation returns a ResponseModel: an outcome code plus either
a payload (a DTO or a list of DTOs) or a human-readable detail message.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, model_validator

from domain.value_objects import ResponseCode
from exceptions import NotFoundError, ValidationError


class ResponseModel(BaseModel):
    """
    Uniform service response.

    Payload codes (CREATED, FOUND, LIST_FOUND, UPDATED) must carry a payload
    and no message; every other code carries no payload and may carry a
    message.

    Example:
        ResponseModel(code=ResponseCode.FOUND, payload=customer_dto)
        ResponseModel(code=ResponseCode.NOT_FOUND).add_message_details("Customer not found")
    """

    code: ResponseCode = Field(description="Outcome code")
    payload: Optional[Any] = Field(None, description="Single DTO or list of DTOs")
    message: Optional[str] = Field(None, description="Detail message for non-payload outcomes")

    @model_validator(mode="after")
    def check_payload_matches_code(self) -> "ResponseModel":
        """Enforce the payload/message invariant for the given code."""
        if self.code.carries_payload():
            if self.payload is None:
                raise ValueError(f"Response code {self.code.name} requires a payload")
            if self.message is not None:
                raise ValueError(f"Response code {self.code.name} does not take a message")
        elif self.payload is not None:
            raise ValueError(f"Response code {self.code.name} does not take a payload")
        return self

    def add_message_details(self, message: str) -> "ResponseModel":
        """
        Attach a detail message and return the envelope for chaining.

        Raises:
            ValueError: If the code carries a payload instead of a message
        """
        if self.code.carries_payload():
            raise ValueError(f"Response code {self.code.name} does not take a message")
        self.message = message
        return self

    @property
    def is_success(self) -> bool:
        """True unless the code reports a failed operation."""
        return not self.code.is_error()

    def unwrap(self, not_found_error: Optional[Callable[[Optional[str]], NotFoundError]] = None) -> Any:
        """
        Return the payload, or raise the error this envelope describes.

        Lets callers that prefer exceptions consume envelope-style services.

        Args:
            not_found_error: Factory for the NotFoundError subclass to raise on
                NOT_FOUND, called with the envelope message

        Raises:
            NotFoundError: For NOT_FOUND envelopes
            ValidationError: For VALIDATION_FAILED envelopes
        """
        if self.code == ResponseCode.NOT_FOUND:
            if not_found_error is not None:
                raise not_found_error(self.message)
            raise NotFoundError("Resource", self.message)
        if self.code == ResponseCode.VALIDATION_FAILED:
            raise ValidationError(self.message or "Validation failed")
        return self.payload

"""
Customer Request DTOs

DTOs for customer-related requests.

Every field is optional at this level: a missing email or password is a
business-rule failure reported through the response envelope by the
customer validator, not a schema error.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace so lookups and uniqueness compare one form."""
    return value.strip() if isinstance(value, str) else value


class UserDetailsRequest(BaseModel):
    """Personal details sent together with a customer."""

    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")
    phone_number: Optional[str] = Field(None, description="Contact phone number")
    address: Optional[str] = Field(None, description="Postal address")


class CustomerCreateRequest(BaseModel):
    """
    Request DTO for registering a customer.
    """

    email: Optional[str] = Field(None, description="Unique login email")
    password: Optional[str] = Field(None, description="Account password")
    is_deleted: bool = Field(False, description="Soft-deletion flag")
    is_verified: bool = Field(False, description="Whether the email was verified")
    user_details: Optional[UserDetailsRequest] = Field(None, description="Owned personal details")

    @field_validator("email")
    @classmethod
    def strip_email(cls, value: Optional[str]) -> Optional[str]:
        return normalize_email(value)

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "email": "mario.rossi@example.com",
                "password": "s3cret",
                "user_details": {"first_name": "Mario", "last_name": "Rossi"}
            }
        }


class CustomerUpdateRequest(BaseModel):
    """
    Request DTO for a partial customer update.

    Only fields present in the request body are applied. A field that is
    absent stays unchanged; a field explicitly sent as null is an explicit
    value (for user_details it removes the owned record).
    """

    email: Optional[str] = None
    password: Optional[str] = None
    is_deleted: Optional[bool] = None
    is_verified: Optional[bool] = None
    user_details: Optional[UserDetailsRequest] = None

    @field_validator("email")
    @classmethod
    def strip_email(cls, value: Optional[str]) -> Optional[str]:
        return normalize_email(value)

    def provided_fields(self) -> set[str]:
        """Names of the fields the caller actually sent."""
        return set(self.model_fields_set)


class PasswordUpdateRequest(BaseModel):
    """Request DTO for changing a customer's password."""

    password: Optional[str] = Field(None, description="New password")

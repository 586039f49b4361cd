"""
Customer Response DTOs

The password never leaves the service layer, so it has no field here.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class UserDetailsResponse(BaseModel):
    """Response DTO for a customer's personal details."""

    id: int = Field(description="Details record ID")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class CustomerResponse(BaseModel):
    """
    Response DTO for customer information.

    This DTO separates the API response from the database model,
    allowing them to evolve independently.
    """

    id: int = Field(description="Customer ID")
    email: str = Field(description="Login email")
    is_deleted: bool = Field(description="Soft-deletion flag")
    is_verified: bool = Field(description="Whether the email was verified")
    user_details: Optional[UserDetailsResponse] = Field(None, description="Owned personal details")
    created_at: Optional[datetime] = Field(None, description="Registration timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last modification timestamp")

    class Config:
        """Pydantic configuration."""
        from_attributes = True

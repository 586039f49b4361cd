"""Mapping between customer DTOs and the Customer / UserDetails models."""

from typing import Optional

from dtos.request import CustomerCreateRequest, UserDetailsRequest
from dtos.response import CustomerResponse, UserDetailsResponse
from models import Customer, UserDetails


class UserDetailsMapper:
    """Maps the personal details record owned by a customer."""

    DETAIL_FIELDS = ("first_name", "last_name", "phone_number", "address")

    def to_entity(self, dto: UserDetailsRequest) -> UserDetails:
        return UserDetails(**{name: getattr(dto, name) for name in self.DETAIL_FIELDS})

    def to_dto(self, entity: UserDetails) -> UserDetailsResponse:
        return UserDetailsResponse.model_validate(entity)

    def apply(self, entity: UserDetails, dto: UserDetailsRequest) -> UserDetails:
        """Copy the fields the caller sent onto an existing record."""
        for name in dto.model_fields_set & set(self.DETAIL_FIELDS):
            setattr(entity, name, getattr(dto, name))
        return entity


class CustomerMapper:
    """Maps customers in both directions. The password is never exported."""

    def __init__(self, details_mapper: Optional[UserDetailsMapper] = None):
        self.details_mapper = details_mapper or UserDetailsMapper()

    def to_entity(self, dto: CustomerCreateRequest) -> Customer:
        customer = Customer(
            email=dto.email,
            password=dto.password,
            is_deleted=dto.is_deleted,
            is_verified=dto.is_verified,
        )
        if dto.user_details is not None:
            customer.user_details = self.details_mapper.to_entity(dto.user_details)
        return customer

    def to_dto(self, entity: Customer) -> CustomerResponse:
        return CustomerResponse(
            id=entity.id,
            email=entity.email,
            is_deleted=bool(entity.is_deleted),
            is_verified=bool(entity.is_verified),
            user_details=(
                self.details_mapper.to_dto(entity.user_details)
                if entity.user_details is not None else None
            ),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

"""
Customer Service

Business logic for customer accounts: validate input, map between DTOs and
entities, persist through the injected repositories and report every
outcome as a ResponseModel envelope.
"""

from typing import Optional

from constants import ResponseMessages
from domain.value_objects import ResponseCode
from dtos.request import (
    CustomerCreateRequest,
    CustomerUpdateRequest,
    PasswordUpdateRequest,
    UserDetailsRequest,
    normalize_email,
)
from dtos.response import CustomerResponse, ResponseModel
from exceptions import InvalidCustomerError
from mappers import CustomerMapper, Mapper, UserDetailsMapper
from models import Customer
from repositories import CustomerRepository, UserDetailsRepository
from services.customer_validator import CustomerValidator
from services.interfaces import ICustomerService
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)

# Scalar columns a partial update may overwrite
UPDATABLE_FIELDS = ("email", "password", "is_deleted", "is_verified")


def _rejected(message: str) -> ResponseModel:
    return ResponseModel(code=ResponseCode.VALIDATION_FAILED).add_message_details(message)


def _not_found(message: str) -> ResponseModel:
    return ResponseModel(code=ResponseCode.NOT_FOUND).add_message_details(message)


class CustomerService(ICustomerService):
    """Service for customer-related business logic."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        user_details_repo: UserDetailsRepository,
        mapper: Optional[Mapper[CustomerCreateRequest, Customer, CustomerResponse]] = None,
        details_mapper: Optional[UserDetailsMapper] = None,
        validator: Optional[CustomerValidator] = None,
    ):
        """
        Initialize CustomerService.

        Args:
            customer_repo: Repository for customers
            user_details_repo: Repository for the details records customers own
            mapper: DTO/entity mapper (default CustomerMapper)
            details_mapper: Mapper for the owned details record (default UserDetailsMapper)
            validator: Payload validator (default CustomerValidator)
        """
        self.customer_repo = customer_repo
        self.user_details_repo = user_details_repo
        self.mapper = mapper or CustomerMapper()
        self.details_mapper = details_mapper or UserDetailsMapper()
        self.validator = validator or CustomerValidator()

    @log_operation("add_customer")
    def add_customer(self, customer: CustomerCreateRequest) -> ResponseModel:
        """
        Validate and register a new customer.

        Returns:
            CREATED with the new customer, or VALIDATION_FAILED with the reason
        """
        try:
            self.validator.validate_customer(customer)
        except InvalidCustomerError as e:
            logger.info("Customer rejected", extra={"reason": e.message})
            return _rejected(e.message)

        if self.customer_repo.email_taken(customer.email):
            return _rejected(ResponseMessages.CUSTOMER_EMAIL_TAKEN)

        saved = self.customer_repo.save(self.mapper.to_entity(customer))
        return ResponseModel(code=ResponseCode.CREATED, payload=self.mapper.to_dto(saved))

    def get_customer_by_id(self, customer_id: int) -> ResponseModel:
        """
        Returns:
            FOUND with the customer, or NOT_FOUND
        """
        customer = self.customer_repo.get_by_id(customer_id)
        if customer is None:
            return _not_found(ResponseMessages.CUSTOMER_NOT_FOUND_BY_ID)
        return ResponseModel(code=ResponseCode.FOUND, payload=self.mapper.to_dto(customer))

    def get_customer_by_email(self, email: str) -> ResponseModel:
        """
        Returns:
            FOUND with the customer, or NOT_FOUND
        """
        customer = self.customer_repo.get_by_email(normalize_email(email))
        if customer is None:
            return _not_found(ResponseMessages.CUSTOMER_NOT_FOUND_BY_EMAIL)
        return ResponseModel(code=ResponseCode.FOUND, payload=self.mapper.to_dto(customer))

    def get_all_customers(self) -> ResponseModel:
        """
        Returns:
            LIST_FOUND with every customer, or NOT_FOUND when there are none
        """
        customers = [self.mapper.to_dto(c) for c in self.customer_repo.get_all()]
        if not customers:
            return _not_found(ResponseMessages.CUSTOMERS_EMPTY)
        return ResponseModel(code=ResponseCode.LIST_FOUND, payload=customers)

    def get_customers_by_deleted_status(self, is_deleted: bool) -> ResponseModel:
        customers = [self.mapper.to_dto(c) for c in self.customer_repo.get_by_deleted_status(is_deleted)]
        if not customers:
            return _not_found(ResponseMessages.CUSTOMERS_NOT_FOUND_BY_PARAMETER)
        return ResponseModel(code=ResponseCode.LIST_FOUND, payload=customers)

    def get_customers_by_verified_status(self, is_verified: bool) -> ResponseModel:
        customers = [self.mapper.to_dto(c) for c in self.customer_repo.get_by_verified_status(is_verified)]
        if not customers:
            return _not_found(ResponseMessages.CUSTOMERS_NOT_FOUND_BY_PARAMETER)
        return ResponseModel(code=ResponseCode.LIST_FOUND, payload=customers)

    @log_operation("update_customer")
    def update_customer(self, customer_id: int, updates: Optional[CustomerUpdateRequest]) -> ResponseModel:
        """
        Apply a partial update.

        Only the fields present in ``updates`` are written; everything else
        keeps its stored value. The owned details record is saved through
        its own repository.

        Returns:
            UPDATED with the customer, NOT_FOUND, or VALIDATION_FAILED
            (null body, invalid field, email owned by someone else)
        """
        if updates is None:
            return _rejected(ResponseMessages.NULL_BODY)

        customer = self.customer_repo.get_by_id(customer_id)
        if customer is None:
            return _not_found(ResponseMessages.CUSTOMER_NOT_FOUND_BY_ID)

        try:
            self.validator.validate_updates(updates)
        except InvalidCustomerError as e:
            return _rejected(e.message)

        provided = updates.provided_fields()
        if "email" in provided and self.customer_repo.email_taken(updates.email, exclude_id=customer.id):
            return _rejected(ResponseMessages.CUSTOMER_EMAIL_TAKEN)

        for field in UPDATABLE_FIELDS:
            if field in provided:
                setattr(customer, field, getattr(updates, field))

        if "user_details" in provided:
            self._update_user_details(customer, updates.user_details)

        saved = self.customer_repo.save(customer)
        return ResponseModel(code=ResponseCode.UPDATED, payload=self.mapper.to_dto(saved))

    def _update_user_details(self, customer: Customer, details: Optional[UserDetailsRequest]) -> None:
        """Create, patch or drop the details record a customer owns."""
        details_mapper = self.details_mapper
        if details is None:
            # delete-orphan cascade removes the old row on flush
            customer.user_details = None
        elif customer.user_details is None:
            customer.user_details = self.user_details_repo.save(details_mapper.to_entity(details))
        else:
            self.user_details_repo.save(details_mapper.apply(customer.user_details, details))

    @log_operation("update_password")
    def update_password(self, customer_id: int, update: Optional[PasswordUpdateRequest]) -> ResponseModel:
        """
        Replace a customer's password.

        Returns:
            UPDATED with the customer, NOT_FOUND, or VALIDATION_FAILED when the
            body or the password is missing or blank
        """
        if update is None or update.password is None:
            return _rejected(ResponseMessages.NULL_BODY)

        customer = self.customer_repo.get_by_id(customer_id)
        if customer is None:
            return _not_found(ResponseMessages.CUSTOMER_NOT_FOUND_BY_ID)

        try:
            self.validator.validate_password(update)
        except InvalidCustomerError as e:
            return _rejected(e.message)

        customer.password = update.password
        saved = self.customer_repo.save(customer)
        return ResponseModel(code=ResponseCode.UPDATED, payload=self.mapper.to_dto(saved))

    @log_operation("delete_customer")
    def delete_customer(self, customer_id: int) -> ResponseModel:
        """
        Returns:
            DELETED, or NOT_FOUND when the id does not exist
        """
        if not self.customer_repo.exists(customer_id):
            return _not_found(ResponseMessages.CUSTOMER_NOT_FOUND_BY_ID)
        self.customer_repo.delete_by_id(customer_id)
        return ResponseModel(code=ResponseCode.DELETED).add_message_details(ResponseMessages.CUSTOMER_DELETED)

    @log_operation("delete_all_customers")
    def delete_all_customers(self) -> ResponseModel:
        deleted = self.customer_repo.delete_all()
        logger.info(f"Deleted {deleted} customer(s)")
        return ResponseModel(code=ResponseCode.DELETED).add_message_details(ResponseMessages.CUSTOMERS_DELETED)

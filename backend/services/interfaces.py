"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
Routers depend on these, so implementations can be swapped or mocked in tests.

Every operation returns a ResponseModel envelope; expected failures
(invalid input, missing entities) are reported as envelope codes, never raised.
"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.value_objects import ProductType
from dtos.request import (
    CustomerCreateRequest,
    CustomerUpdateRequest,
    PasswordUpdateRequest,
    ProductCreateRequest,
    ProductUpdateRequest,
)
from dtos.response import ResponseModel


class ICustomerService(ABC):
    """
    Abstract interface for customer management services.
    """

    @abstractmethod
    def add_customer(self, customer: CustomerCreateRequest) -> ResponseModel:
        """Validate and register a customer (CREATED or VALIDATION_FAILED)."""
        pass

    @abstractmethod
    def get_customer_by_id(self, customer_id: int) -> ResponseModel:
        """Look up one customer (FOUND or NOT_FOUND)."""
        pass

    @abstractmethod
    def get_customer_by_email(self, email: str) -> ResponseModel:
        """Look up one customer by email (FOUND or NOT_FOUND)."""
        pass

    @abstractmethod
    def get_all_customers(self) -> ResponseModel:
        """List every customer (LIST_FOUND or NOT_FOUND when empty)."""
        pass

    @abstractmethod
    def get_customers_by_deleted_status(self, is_deleted: bool) -> ResponseModel:
        """List customers by deleted flag (LIST_FOUND or NOT_FOUND)."""
        pass

    @abstractmethod
    def get_customers_by_verified_status(self, is_verified: bool) -> ResponseModel:
        """List customers by verified flag (LIST_FOUND or NOT_FOUND)."""
        pass

    @abstractmethod
    def update_customer(self, customer_id: int, updates: Optional[CustomerUpdateRequest]) -> ResponseModel:
        """Apply a partial update (UPDATED, NOT_FOUND or VALIDATION_FAILED)."""
        pass

    @abstractmethod
    def update_password(self, customer_id: int, update: Optional[PasswordUpdateRequest]) -> ResponseModel:
        """Replace the password (UPDATED, NOT_FOUND or VALIDATION_FAILED)."""
        pass

    @abstractmethod
    def delete_customer(self, customer_id: int) -> ResponseModel:
        """Delete one customer (DELETED or NOT_FOUND)."""
        pass

    @abstractmethod
    def delete_all_customers(self) -> ResponseModel:
        """Delete every customer (always DELETED)."""
        pass


class IProductService(ABC):
    """
    Abstract interface for product catalogue services.
    """

    @abstractmethod
    def create_product(self, product: ProductCreateRequest) -> ResponseModel:
        pass

    @abstractmethod
    def get_all_products(self) -> ResponseModel:
        pass

    @abstractmethod
    def get_single_product(self, product_id: str) -> ResponseModel:
        pass

    @abstractmethod
    def get_products_by_type(self, product_type: ProductType, max_price: Optional[float] = None) -> ResponseModel:
        pass

    @abstractmethod
    def update_product(self, product_id: str, updates: Optional[ProductUpdateRequest]) -> ResponseModel:
        pass

    @abstractmethod
    def delete_product(self, product_id: str) -> ResponseModel:
        pass

    @abstractmethod
    def delete_all_products(self) -> ResponseModel:
        pass

"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidCustomerError(ValidationError):
    """Raised by the customer validator when a customer payload is rejected"""


class InvalidProductError(ValidationError):
    """Raised by the product validator when a product payload is rejected"""


class NotFoundError(ApplicationError):
    """Raised when a requested entity does not exist"""

    def __init__(self, entity: str, message: str | None = None, entity_id: object = None):
        details = {"entity": entity}
        if entity_id is not None:
            details["id"] = entity_id
        super().__init__(message or f"{entity} not found", details)


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer lookup comes back empty"""

    def __init__(self, message: str | None = None, customer_id: int | None = None):
        super().__init__("Customer", message, customer_id)


class ProductNotFoundError(NotFoundError):
    """Raised when a product lookup comes back empty"""

    def __init__(self, message: str | None = None, product_id: str | None = None):
        super().__init__("Product", message, product_id)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)

"""
Request DTOs

DTOs for incoming requests. These decouple callers from database models
and provide a clear contract for what data each operation expects.
"""

from .customer_request import (
    CustomerCreateRequest,
    CustomerUpdateRequest,
    PasswordUpdateRequest,
    UserDetailsRequest,
    normalize_email,
)
from .product_request import ProductCreateRequest, ProductUpdateRequest

__all__ = [
    "CustomerCreateRequest",
    "CustomerUpdateRequest",
    "PasswordUpdateRequest",
    "UserDetailsRequest",
    "normalize_email",
    "ProductCreateRequest",
    "ProductUpdateRequest",
]

"""
Response DTOs

DTOs for outgoing responses. These decouple callers from database models
and control exactly what data is exposed (no passwords, no link tables).

The ResponseModel envelope wraps every service result.
"""

from .customer_response import CustomerResponse, UserDetailsResponse
from .product_response import ProductResponse
from .response_model import ResponseModel

__all__ = [
    "CustomerResponse",
    "UserDetailsResponse",
    "ProductResponse",
    "ResponseModel",
]

"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- ResponseCode: Outcome code of a service call
- ProductType: Category tag attached to a product
"""

from .product_type import ProductType
from .response_code import ResponseCode

__all__ = ["ProductType", "ResponseCode"]

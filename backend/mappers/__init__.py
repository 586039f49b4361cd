"""
Mappers convert between DTOs and ORM entities.

They are pure: services own every session interaction.
"""

from .base import Mapper
from .customer_mapper import CustomerMapper, UserDetailsMapper
from .product_mapper import ProductMapper

__all__ = ["Mapper", "CustomerMapper", "UserDetailsMapper", "ProductMapper"]

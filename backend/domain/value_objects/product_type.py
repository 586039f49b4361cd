"""
ProductType Value Object

Category tags a product can be filed under.
"""

from enum import Enum
from typing import Iterable, List


class ProductType(str, Enum):
    """Product category tag."""

    PIZZA = "PIZZA"
    SANDWICH = "SANDWICH"
    SALAD = "SALAD"
    DESSERT = "DESSERT"
    DRINK = "DRINK"
    VEGETARIAN = "VEGETARIAN"
    VEGAN = "VEGAN"
    GLUTEN_FREE = "GLUTEN_FREE"

    @classmethod
    def from_string(cls, value: str) -> "ProductType":
        """
        Create ProductType from string value (case-insensitive).

        Args:
            value: String representation

        Returns:
            ProductType instance

        Raises:
            ValueError: If value is not a valid product type
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid product type: {value}")

    @staticmethod
    def unique(types: Iterable["ProductType"]) -> List["ProductType"]:
        """Drop repeated tags, keeping the first-seen order."""
        return list(dict.fromkeys(types))

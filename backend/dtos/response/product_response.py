"""
Product Response DTOs
"""

from pydantic import BaseModel, Field
from typing import List

from domain.value_objects import ProductType


class ProductResponse(BaseModel):
    """Response DTO for product information."""

    id: str = Field(description="Product ID")
    name: str = Field(description="Display name")
    price: float = Field(description="Unit price")
    ingredients: List[str] = Field(default_factory=list, description="Ingredients in display order")
    product_types: List[ProductType] = Field(default_factory=list, description="Category tags")

"""
Product Request DTOs

DTOs for product-related requests.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from domain.value_objects import ProductType


class ProductCreateRequest(BaseModel):
    """
    Request DTO for adding a product to the catalogue.

    The id may be assigned by the caller; when omitted one is generated.
    """

    id: Optional[str] = Field(None, description="Externally assigned product ID")
    name: Optional[str] = Field(None, description="Display name")
    price: Optional[float] = Field(None, description="Unit price")
    ingredients: List[str] = Field(default_factory=list, description="Ingredients in display order")
    product_types: List[ProductType] = Field(default_factory=list, description="Category tags")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Margherita",
                "price": 6.5,
                "ingredients": ["tomato", "mozzarella", "basil"],
                "product_types": ["PIZZA", "VEGETARIAN"]
            }
        }


class ProductUpdateRequest(BaseModel):
    """
    Request DTO for a partial product update.

    Only fields present in the request body are applied.
    """

    name: Optional[str] = None
    price: Optional[float] = None
    ingredients: Optional[List[str]] = None
    product_types: Optional[List[ProductType]] = None

    def provided_fields(self) -> set[str]:
        """Names of the fields the caller actually sent."""
        return set(self.model_fields_set)

"""
Product Validator Service

Validation rules for product payloads.
"""
import logging
import math

from dtos.request import ProductCreateRequest, ProductUpdateRequest
from exceptions import InvalidProductError

logger = logging.getLogger(__name__)


class ProductValidator:
    """Validator for product create and update payloads"""

    @staticmethod
    def _check_name(name) -> None:
        if name is None or not name.strip():
            raise InvalidProductError(
                "Product name cannot be empty",
                invalid_fields={'name': name}
            )

    @staticmethod
    def _check_price(price) -> None:
        if price is None:
            raise InvalidProductError(
                "Product price is required",
                invalid_fields={'price': None}
            )
        if not math.isfinite(price):
            raise InvalidProductError(
                "Product price must be a finite number",
                invalid_fields={'price': str(price)}
            )
        if price < 0:
            raise InvalidProductError(
                "Product price cannot be negative",
                invalid_fields={'price': price}
            )

    @staticmethod
    def _check_ingredients(ingredients) -> None:
        if ingredients is None:
            raise InvalidProductError(
                "Product ingredients cannot be null",
                invalid_fields={'ingredients': None}
            )
        blank = [index for index, item in enumerate(ingredients) if not item.strip()]
        if blank:
            raise InvalidProductError(
                "Product ingredients cannot be empty strings",
                invalid_fields={'ingredients': blank}
            )

    @classmethod
    def validate_product(cls, product: ProductCreateRequest) -> None:
        """
        Validate a product about to be created.

        Args:
            product: Incoming product DTO

        Raises:
            InvalidProductError: If name, price or ingredients are invalid
        """
        if product is None:
            raise InvalidProductError("Product body cannot be null")

        if product.id is not None and not product.id.strip():
            raise InvalidProductError(
                "Product id cannot be blank",
                invalid_fields={'id': product.id}
            )
        cls._check_name(product.name)
        cls._check_price(product.price)
        cls._check_ingredients(product.ingredients)

        logger.debug(f"Product payload validated for {product.name}")

    @classmethod
    def validate_updates(cls, updates: ProductUpdateRequest) -> None:
        """
        Validate only the fields a partial update sets.

        Raises:
            InvalidProductError: If a provided field breaks a creation rule
        """
        provided = updates.provided_fields()

        if 'name' in provided:
            cls._check_name(updates.name)
        if 'price' in provided:
            cls._check_price(updates.price)
        if 'ingredients' in provided:
            cls._check_ingredients(updates.ingredients)
        if 'product_types' in provided and updates.product_types is None:
            raise InvalidProductError(
                "Product types cannot be null",
                invalid_fields={'product_types': None}
            )

"""
Product-specific Specifications
"""

from domain.value_objects import ProductType
from models import Product, ProductTypeLink
from .specifications import Specification


class ProductsByTypeSpec(Specification[Product]):
    """Specification for products tagged with a given category."""

    def __init__(self, product_type: ProductType):
        """
        Initialize specification.

        Args:
            product_type: Category tag to match
        """
        self.product_type = product_type

    def is_satisfied_by(self, product: Product) -> bool:
        """Check if product carries the tag."""
        return self.product_type.value in product.product_types

    def to_sql_filter(self):
        """Convert to SQL filter."""
        return Product.type_links.any(ProductTypeLink.product_type == self.product_type.value)


class ProductsByMaxPriceSpec(Specification[Product]):
    """Specification for products priced at or below a limit."""

    def __init__(self, max_price: float):
        self.max_price = max_price

    def is_satisfied_by(self, product: Product) -> bool:
        return product.price is not None and product.price <= self.max_price

    def to_sql_filter(self):
        return Product.price <= self.max_price

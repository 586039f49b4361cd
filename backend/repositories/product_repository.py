"""
Product repository for product-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from domain.value_objects import ProductType
from models import Product
from .base_repository import BaseRepository
from .product_specifications import ProductsByTypeSpec, ProductsByMaxPriceSpec


class ProductRepository(BaseRepository[Product]):
    """Repository for Product model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Product)

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[Product]:
        """Get all products with their category tags eagerly loaded."""
        query = self.db.query(self.model).options(
            selectinload(self.model.type_links)
        ).order_by(self.model.id)
        if limit:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        return query.all()

    def get_by_type(self, product_type: ProductType, max_price: Optional[float] = None) -> List[Product]:
        """
        Get products tagged with a category.

        Args:
            product_type: Category tag
            max_price: Optional upper bound on price (inclusive)

        Returns:
            Matching products ordered by ID
        """
        spec = ProductsByTypeSpec(product_type)
        if max_price is not None:
            spec = spec & ProductsByMaxPriceSpec(max_price)
        return self.find_by(spec)

"""Mapping between product DTOs and the Product model."""

from typing import Iterable, List

from domain.value_objects import ProductType
from dtos.request import ProductCreateRequest
from dtos.response import ProductResponse
from models import Product, ProductTypeLink, generate_uuid


class ProductMapper:
    """Maps products in both directions; generates the id when none is given."""

    def to_entity(self, dto: ProductCreateRequest) -> Product:
        product = Product(
            id=dto.id or generate_uuid(),
            name=dto.name,
            price=dto.price,
            ingredients=list(dto.ingredients),
        )
        product.type_links = self.to_links(dto.product_types)
        return product

    def to_dto(self, entity: Product) -> ProductResponse:
        return ProductResponse(
            id=entity.id,
            name=entity.name,
            price=entity.price,
            ingredients=list(entity.ingredients or []),
            product_types=[ProductType.from_string(value) for value in entity.product_types],
        )

    @staticmethod
    def to_links(product_types: Iterable[ProductType]) -> List[ProductTypeLink]:
        """Build link rows for the given tags, dropping repeats."""
        return [
            ProductTypeLink(product_type=product_type.value, position=position)
            for position, product_type in enumerate(ProductType.unique(product_types))
        ]

"""
Product Service

Business logic for the product catalogue. Uses the same envelope strategy as
the customer service: expected failures come back as ResponseModel codes.
Callers that prefer exceptions can call ``unwrap(ProductNotFoundError)`` on
the result.
"""

from typing import Optional

from constants import ResponseMessages
from domain.value_objects import ProductType, ResponseCode
from dtos.request import ProductCreateRequest, ProductUpdateRequest
from dtos.response import ProductResponse, ResponseModel
from exceptions import InvalidProductError
from mappers import Mapper, ProductMapper
from models import Product
from repositories import ProductRepository
from services.interfaces import IProductService
from services.product_validator import ProductValidator
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


def _rejected(message: str) -> ResponseModel:
    return ResponseModel(code=ResponseCode.VALIDATION_FAILED).add_message_details(message)


def _not_found(message: str) -> ResponseModel:
    return ResponseModel(code=ResponseCode.NOT_FOUND).add_message_details(message)


class ProductService(IProductService):
    """Service for product-related business logic."""

    def __init__(
        self,
        product_repo: ProductRepository,
        mapper: Optional[Mapper[ProductCreateRequest, Product, ProductResponse]] = None,
        validator: Optional[ProductValidator] = None,
    ):
        """
        Initialize ProductService.

        Args:
            product_repo: Repository for products
            mapper: DTO/entity mapper (default ProductMapper)
            validator: Payload validator (default ProductValidator)
        """
        self.product_repo = product_repo
        self.mapper = mapper or ProductMapper()
        self.validator = validator or ProductValidator()

    @log_operation("create_product")
    def create_product(self, product: ProductCreateRequest) -> ResponseModel:
        """
        Validate and add a product. A caller-supplied id must be unused.

        Returns:
            CREATED with the product, or VALIDATION_FAILED with the reason
        """
        try:
            self.validator.validate_product(product)
        except InvalidProductError as e:
            logger.info("Product rejected", extra={"reason": e.message})
            return _rejected(e.message)

        if product.id is not None and self.product_repo.exists(product.id):
            return _rejected(ResponseMessages.PRODUCT_ID_TAKEN)

        saved = self.product_repo.save(self.mapper.to_entity(product))
        return ResponseModel(code=ResponseCode.CREATED, payload=self.mapper.to_dto(saved))

    def get_all_products(self) -> ResponseModel:
        products = [self.mapper.to_dto(p) for p in self.product_repo.get_all()]
        if not products:
            return _not_found(ResponseMessages.PRODUCTS_EMPTY)
        return ResponseModel(code=ResponseCode.LIST_FOUND, payload=products)

    def get_single_product(self, product_id: str) -> ResponseModel:
        product = self.product_repo.get_by_id(product_id)
        if product is None:
            return _not_found(ResponseMessages.PRODUCT_NOT_FOUND_BY_ID)
        return ResponseModel(code=ResponseCode.FOUND, payload=self.mapper.to_dto(product))

    def get_products_by_type(self, product_type: ProductType, max_price: Optional[float] = None) -> ResponseModel:
        """
        List products carrying a category tag, optionally capped by price.

        Returns:
            LIST_FOUND, or NOT_FOUND when nothing matches
        """
        products = [self.mapper.to_dto(p) for p in self.product_repo.get_by_type(product_type, max_price)]
        if not products:
            return _not_found(ResponseMessages.PRODUCTS_NOT_FOUND_BY_TYPE)
        return ResponseModel(code=ResponseCode.LIST_FOUND, payload=products)

    @log_operation("update_product")
    def update_product(self, product_id: str, updates: Optional[ProductUpdateRequest]) -> ResponseModel:
        """
        Apply a partial update; absent fields keep their stored value.

        Returns:
            UPDATED with the product, NOT_FOUND, or VALIDATION_FAILED
        """
        if updates is None:
            return _rejected(ResponseMessages.NULL_BODY)

        product = self.product_repo.get_by_id(product_id)
        if product is None:
            return _not_found(ResponseMessages.PRODUCT_NOT_FOUND_BY_ID)

        try:
            self.validator.validate_updates(updates)
        except InvalidProductError as e:
            return _rejected(e.message)

        provided = updates.provided_fields()
        if "name" in provided:
            product.name = updates.name
        if "price" in provided:
            product.price = updates.price
        if "ingredients" in provided:
            # reassign so the JSON column is marked dirty
            product.ingredients = list(updates.ingredients)
        if "product_types" in provided:
            product.type_links = ProductMapper.to_links(updates.product_types)

        saved = self.product_repo.save(product)
        return ResponseModel(code=ResponseCode.UPDATED, payload=self.mapper.to_dto(saved))

    @log_operation("delete_product")
    def delete_product(self, product_id: str) -> ResponseModel:
        if not self.product_repo.exists(product_id):
            return _not_found(ResponseMessages.PRODUCT_NOT_FOUND_BY_ID)
        self.product_repo.delete_by_id(product_id)
        return ResponseModel(code=ResponseCode.DELETED).add_message_details(ResponseMessages.PRODUCT_DELETED)

    @log_operation("delete_all_products")
    def delete_all_products(self) -> ResponseModel:
        deleted = self.product_repo.delete_all()
        logger.info(f"Deleted {deleted} product(s)")
        return ResponseModel(code=ResponseCode.DELETED).add_message_details(ResponseMessages.PRODUCTS_DELETED)

"""
Product API endpoints
"""
from fastapi import APIRouter, Body, Depends

from dependencies import get_product_service
from domain.value_objects import ProductType
from dtos.request import ProductCreateRequest, ProductUpdateRequest
from exceptions import ValidationError
from services.interfaces import IProductService
from utils.error_handlers import handle_api_errors
from api.envelope import to_http_response

router = APIRouter()


@router.post("/products")
@handle_api_errors("Create product")
def create_product(
    product: ProductCreateRequest | None = Body(None),
    service: IProductService = Depends(get_product_service)
):
    """
    Add a product to the catalogue.

    The id is generated when the body omits it; a supplied id must be unused.
    """
    return to_http_response(service.create_product(product))


@router.get("/products")
@handle_api_errors("List products")
def list_products(service: IProductService = Depends(get_product_service)):
    return to_http_response(service.get_all_products())


@router.get("/products/by-type/{product_type}")
@handle_api_errors("List products by type")
def list_products_by_type(
    product_type: str,
    max_price: float | None = None,
    service: IProductService = Depends(get_product_service)
):
    """
    List products tagged with a category (case-insensitive).

    Args:
        product_type: Category tag, e.g. "pizza"
        max_price: Optional inclusive price ceiling

    Raises:
        HTTPException: 400 if the category is unknown
    """
    try:
        parsed = ProductType.from_string(product_type)
    except ValueError as e:
        raise ValidationError(str(e), invalid_fields={"product_type": product_type}) from e
    return to_http_response(service.get_products_by_type(parsed, max_price))


@router.get("/products/{product_id}")
@handle_api_errors("Get product")
def get_product(product_id: str, service: IProductService = Depends(get_product_service)):
    return to_http_response(service.get_single_product(product_id))


@router.put("/products/{product_id}")
@handle_api_errors("Update product")
def update_product(
    product_id: str,
    updates: ProductUpdateRequest | None = Body(None),
    service: IProductService = Depends(get_product_service)
):
    return to_http_response(service.update_product(product_id, updates))


@router.delete("/products/{product_id}")
@handle_api_errors("Delete product")
def delete_product(product_id: str, service: IProductService = Depends(get_product_service)):
    return to_http_response(service.delete_product(product_id))


@router.delete("/products")
@handle_api_errors("Delete all products")
def delete_all_products(service: IProductService = Depends(get_product_service)):
    return to_http_response(service.delete_all_products())

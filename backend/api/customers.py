"""
Customer API endpoints
"""
from fastapi import APIRouter, Body, Depends

from dependencies import get_customer_service
from dtos.request import CustomerCreateRequest, CustomerUpdateRequest, PasswordUpdateRequest
from services.interfaces import ICustomerService
from utils.error_handlers import handle_api_errors
from api.envelope import to_http_response

router = APIRouter()


@router.post("/customers")
@handle_api_errors("Create customer")
def create_customer(
    customer: CustomerCreateRequest | None = Body(None),
    service: ICustomerService = Depends(get_customer_service)
):
    """
    Register a customer.

    Returns:
        201 with the customer, or 400 when validation fails or the email is taken
    """
    return to_http_response(service.add_customer(customer))


@router.get("/customers")
@handle_api_errors("List customers")
def list_customers(service: ICustomerService = Depends(get_customer_service)):
    return to_http_response(service.get_all_customers())


# Lookup routes are declared before /customers/{customer_id} so they match first

@router.get("/customers/by-email")
@handle_api_errors("Get customer by email")
def get_customer_by_email(email: str, service: ICustomerService = Depends(get_customer_service)):
    return to_http_response(service.get_customer_by_email(email))


@router.get("/customers/by-deleted-status")
@handle_api_errors("List customers by deleted status")
def list_customers_by_deleted_status(
    is_deleted: bool,
    service: ICustomerService = Depends(get_customer_service)
):
    return to_http_response(service.get_customers_by_deleted_status(is_deleted))


@router.get("/customers/by-verified-status")
@handle_api_errors("List customers by verified status")
def list_customers_by_verified_status(
    is_verified: bool,
    service: ICustomerService = Depends(get_customer_service)
):
    return to_http_response(service.get_customers_by_verified_status(is_verified))


@router.get("/customers/{customer_id}")
@handle_api_errors("Get customer")
def get_customer(customer_id: int, service: ICustomerService = Depends(get_customer_service)):
    return to_http_response(service.get_customer_by_id(customer_id))


@router.put("/customers/{customer_id}")
@handle_api_errors("Update customer")
def update_customer(
    customer_id: int,
    updates: CustomerUpdateRequest | None = Body(None),
    service: ICustomerService = Depends(get_customer_service)
):
    """
    Partially update a customer.

    Only the fields present in the body change. Sending "user_details": null
    removes the customer's details record.
    """
    return to_http_response(service.update_customer(customer_id, updates))


@router.patch("/customers/{customer_id}/password")
@handle_api_errors("Update customer password")
def update_customer_password(
    customer_id: int,
    update: PasswordUpdateRequest | None = Body(None),
    service: ICustomerService = Depends(get_customer_service)
):
    return to_http_response(service.update_password(customer_id, update))


@router.delete("/customers/{customer_id}")
@handle_api_errors("Delete customer")
def delete_customer(customer_id: int, service: ICustomerService = Depends(get_customer_service)):
    return to_http_response(service.delete_customer(customer_id))


@router.delete("/customers")
@handle_api_errors("Delete all customers")
def delete_all_customers(service: ICustomerService = Depends(get_customer_service)):
    return to_http_response(service.delete_all_customers())
